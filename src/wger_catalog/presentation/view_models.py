"""
Headless view models for the exercise list and exercise detail screens.

Each view model owns a FetchScope and exposes its state as Observables:
the fetched collection (replaced wholesale on success), the last error
(replaced on each failure, never cleared automatically) and a loading flag.
State is mutated on the event loop that awaits the load; after close()
nothing more is delivered.
"""

import asyncio
from typing import Any, Awaitable, Callable

from wger_catalog.infrastructure.observability import get_presentation_logger
from wger_catalog.ingestion.adapters.wger_plugin.exceptions import WgerAPIError
from wger_catalog.ingestion.adapters.wger_plugin.models import ExerciseRecord
from wger_catalog.ingestion.orchestration.scope import FetchScope
from wger_catalog.ingestion.ports.services import IExerciseService
from wger_catalog.presentation.html import html_to_text
from wger_catalog.presentation.observable import Observable

log = get_presentation_logger("view-model")


class _ScopedViewModel:
    def __init__(self, service: IExerciseService):
        self.service = service
        self.error: Observable[WgerAPIError | None] = Observable(None)
        self.is_loading: Observable[bool] = Observable(False)
        self._scope = FetchScope()

    @property
    def closed(self) -> bool:
        return self._scope.cancelled

    def close(self) -> None:
        """Stop delivering results and cancel in-flight work."""
        self._scope.cancel()

    async def _run(
        self,
        work: Awaitable[Any],
        on_success: Callable[[Any], None],
    ) -> None:
        self.is_loading.set(True)
        try:
            result = await self._scope.launch(work)
        except WgerAPIError as e:
            log.warning("load_failed", view_model=type(self).__name__, error=repr(e))
            self._scope.deliver(self.error.set, e)
        except asyncio.CancelledError:
            if not self._scope.cancelled:
                raise
            log.debug("load_discarded", view_model=type(self).__name__)
        else:
            self._scope.deliver(on_success, result)
        finally:
            self._scope.deliver(self.is_loading.set, False)


class ExercisesViewModel(_ScopedViewModel):
    """State for the exercise list screen."""

    def __init__(self, service: IExerciseService):
        super().__init__(service)
        self.exercises: Observable[list[ExerciseRecord]] = Observable([])

    async def load_exercises(
        self,
        limit: int | None = None,
        offset: int | None = None,
        language: int | None = None,
    ) -> None:
        if self.closed or self.is_loading.value:
            return
        await self._run(
            self.service.fetch_exercises(
                limit=limit, offset=offset, language=language
            ),
            lambda page: self.exercises.set(list(page.results or ())),
        )

    def detail(self, exercise: ExerciseRecord) -> "ExerciseDetailViewModel":
        """View model for drilling into one exercise, sharing the same service."""
        return ExerciseDetailViewModel(self.service, exercise)


class ExerciseDetailViewModel(_ScopedViewModel):
    """State for the exercise detail screen and its variations."""

    def __init__(
        self,
        service: IExerciseService,
        exercise: ExerciseRecord,
        delay: float | None = None,
    ):
        super().__init__(service)
        self.exercise = exercise
        self.delay = delay
        self.variations: Observable[list[ExerciseRecord]] = Observable([])

    @property
    def exercise_name(self) -> str | None:
        return self.exercise.name

    @property
    def exercise_description(self) -> str | None:
        return self.exercise.description

    @property
    def description_text(self) -> str:
        return html_to_text(self.exercise.description)

    @property
    def main_image_url(self) -> str | None:
        return self.exercise.main_image_url

    @property
    def should_fetch_details(self) -> bool:
        return self.exercise.id is not None and not self.variations.value

    async def load_exercise_details(self) -> None:
        if self.closed or self.is_loading.value:
            return
        variation_ids = self.exercise.variation_ids
        if not variation_ids:
            self.variations.set([])
            return
        await self._run(
            self.service.fetch_all_variations(
                variation_ids, delay=self.delay, scope=self._scope
            ),
            self.variations.set,
        )

    def variation(self, exercise: ExerciseRecord) -> "ExerciseDetailViewModel":
        """Child view model for a variation, sharing the same service."""
        return ExerciseDetailViewModel(self.service, exercise, delay=self.delay)
