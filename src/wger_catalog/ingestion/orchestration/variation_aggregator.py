"""
Sequential, paced resolution of variation exercises.

Detail requests are dispatched one at a time with a fixed sleep between
consecutive dispatches. The first failure aborts the sequence and is
re-raised unchanged; results fetched before it are discarded.
"""

import asyncio
import time
from typing import Awaitable, Callable, Sequence

from wger_catalog.infrastructure.observability import get_ingestion_logger
from wger_catalog.ingestion.adapters.wger_plugin.exceptions import WgerAPIError
from wger_catalog.ingestion.adapters.wger_plugin.models import ExerciseRecord
from wger_catalog.ingestion.orchestration.scope import FetchScope

log = get_ingestion_logger("variation-aggregator")

FetchDetail = Callable[[int], Awaitable[ExerciseRecord]]


class VariationAggregator:
    """Fetch a list of exercise details by id, in order, with pacing."""

    def __init__(
        self,
        fetch_detail: FetchDetail,
        delay: float = 0.2,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize aggregator.

        Args:
            fetch_detail: Coroutine function fetching one exercise by id
            delay: Default pacing interval in seconds
            sleep: Sleep implementation (injectable for tests)
        """
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._fetch_detail = fetch_detail
        self.delay = delay
        self._sleep = sleep

    async def fetch_all(
        self,
        ids: Sequence[int],
        delay: float | None = None,
        scope: FetchScope | None = None,
    ) -> list[ExerciseRecord]:
        """Fetch every id sequentially.

        Args:
            ids: Exercise ids, in the order results should be returned
            delay: Pacing override in seconds (defaults to self.delay)
            scope: Lifetime scope; once cancelled no further request is sent

        Returns:
            Exercise records in input order

        Raises:
            WgerAPIError: The first failure encountered
            asyncio.CancelledError: If scope is cancelled mid-sequence
        """
        ids = list(ids)
        if not ids:
            return []

        pace = self.delay if delay is None else delay
        if pace < 0:
            raise ValueError("delay must be >= 0")

        started = time.monotonic()
        results: list[ExerciseRecord] = []
        for index, exercise_id in enumerate(ids):
            if index:
                await self._sleep(pace)
            if scope is not None:
                scope.raise_if_cancelled()
            try:
                record = await self._fetch_detail(exercise_id)
            except WgerAPIError as e:
                log.warning(
                    "variation_fetch_aborted",
                    exercise_id=exercise_id,
                    position=index,
                    total=len(ids),
                    error=type(e).__name__,
                )
                raise
            results.append(record)

        log.info(
            "variations_fetched",
            count=len(results),
            delay=pace,
            elapsed=round(time.monotonic() - started, 3),
        )
        return results
