"""Exercise service abstraction consumed by presentation code.

View models (and any child view model they create) depend on this protocol
only, never on the concrete wger client.
"""

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from wger_catalog.ingestion.adapters.wger_plugin.models import (
        ExerciseListPage,
        ExerciseRecord,
    )
    from wger_catalog.ingestion.orchestration.scope import FetchScope


class IExerciseService(Protocol):
    """Fetch exercises and their variations."""

    async def fetch_exercises(
        self,
        limit: int | None = None,
        offset: int | None = None,
        language: int | None = None,
    ) -> "ExerciseListPage":
        """Fetch one page of exercises.

        Raises:
            WgerAPIError: Any member of the error taxonomy
        """
        ...

    async def fetch_exercise(self, exercise_id: int) -> "ExerciseRecord":
        """Fetch the detail value of a single exercise."""
        ...

    async def fetch_all_variations(
        self,
        variation_ids: Sequence[int],
        delay: float | None = None,
        scope: "FetchScope | None" = None,
    ) -> list["ExerciseRecord"]:
        """Fetch variation exercises sequentially, fail-fast, in input order."""
        ...
