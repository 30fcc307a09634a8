#!/usr/bin/env python3
"""
Command-line shell for the wger exercise catalog.

    wger-catalog list [--limit N] [--offset N] [--language ID]
    wger-catalog show ID
    wger-catalog variations ID [--delay SECONDS]
"""

import argparse
import asyncio
import sys

from wger_catalog.config.state import ConfigState, get_config
from wger_catalog.infrastructure.observability import (
    get_presentation_logger,
    setup_logging,
)
from wger_catalog.ingestion.adapters.wger_plugin.dependency_container import (
    create_wger_client_from_settings,
)
from wger_catalog.ingestion.adapters.wger_plugin.exceptions import WgerAPIError
from wger_catalog.ingestion.adapters.wger_plugin.models import ExerciseRecord
from wger_catalog.ingestion.ports import IExerciseService
from wger_catalog.presentation import (
    ExerciseDetailViewModel,
    ExercisesViewModel,
    user_message,
)

log = get_presentation_logger("cli")


def _exercise_line(exercise: ExerciseRecord) -> str:
    return f"{exercise.id}\t{exercise.name or '(unnamed)'}"


async def cmd_list(service: IExerciseService, args: argparse.Namespace) -> int:
    view_model = ExercisesViewModel(service)
    await view_model.load_exercises(
        limit=args.limit, offset=args.offset, language=args.language
    )
    if view_model.error.value is not None:
        raise view_model.error.value
    for exercise in view_model.exercises.value:
        print(_exercise_line(exercise))
    return 0


async def cmd_show(service: IExerciseService, args: argparse.Namespace) -> int:
    exercise = await service.fetch_exercise(args.exercise_id)
    view_model = ExerciseDetailViewModel(service, exercise)
    print(view_model.exercise_name or "(unnamed)")
    if view_model.description_text:
        print()
        print(view_model.description_text)
    if view_model.main_image_url:
        print()
        print(f"Image: {view_model.main_image_url}")
    if exercise.variation_ids:
        print(f"Variations: {', '.join(str(i) for i in exercise.variation_ids)}")
    return 0


async def cmd_variations(service: IExerciseService, args: argparse.Namespace) -> int:
    exercise = await service.fetch_exercise(args.exercise_id)
    view_model = ExerciseDetailViewModel(service, exercise, delay=args.delay)
    try:
        await view_model.load_exercise_details()
    finally:
        view_model.close()
    if view_model.error.value is not None:
        raise view_model.error.value
    for variation in view_model.variations.value:
        print(_exercise_line(variation))
    return 0


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "variations": cmd_variations,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wger-catalog", description="Browse exercises from the wger API"
    )
    parser.add_argument("--config-dir", default=None, help="Directory with wger.yaml")
    parser.add_argument("--log-level", default=None, help="Override log level")
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON on stderr"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List one page of exercises")
    list_parser.add_argument("--limit", type=int, default=None)
    list_parser.add_argument("--offset", type=int, default=None)
    list_parser.add_argument("--language", type=int, default=None)

    show_parser = sub.add_parser("show", help="Show one exercise")
    show_parser.add_argument("exercise_id", type=int)

    variations_parser = sub.add_parser(
        "variations", help="List the variations of an exercise"
    )
    variations_parser.add_argument("exercise_id", type=int)
    variations_parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between sequential requests (default from config)",
    )
    return parser


async def run(settings: ConfigState, args: argparse.Namespace) -> int:
    client = create_wger_client_from_settings(settings)
    async with client:
        return await COMMANDS[args.command](client, args)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_config(config_dir=args.config_dir)

    setup_logging(
        level=args.log_level or settings.logging.level,
        json_logs=args.json_logs or settings.logging.json_logs,
    )

    try:
        return asyncio.run(run(settings, args))
    except WgerAPIError as e:
        log.error("command_failed", command=args.command, error=repr(e))
        print(f"Error: {user_message(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
