import asyncio
from typing import AsyncIterator, Sequence, TypeVar

import aiohttp
from pydantic import ValidationError

from wger_catalog.infrastructure.observability import get_ingestion_logger
from wger_catalog.ingestion.adapters.wger_plugin.error_handlers import (
    create_error_mapper_chain,
)
from wger_catalog.ingestion.adapters.wger_plugin.exceptions import (
    DecodingError,
    InvalidResponseError,
    InvalidURLError,
    NoDataError,
    UnderlyingError,
    WgerAPIError,
)
from wger_catalog.ingestion.adapters.wger_plugin.models import (
    ExerciseListPage,
    ExerciseRecord,
    ServerErrorBody,
    WgerRecord,
)
from wger_catalog.ingestion.adapters.wger_plugin.router import (
    ExerciseDetail,
    ListExercises,
    PageCursor,
    Route,
    resolve,
)
from wger_catalog.ingestion.adapters.wger_plugin.strategies import ErrorMapperChain
from wger_catalog.ingestion.config.value_objects import WgerConfig
from wger_catalog.ingestion.orchestration import FetchScope, VariationAggregator
from wger_catalog.ingestion.ports import IExerciseService, IHttpClient

log = get_ingestion_logger("wger-client")

R = TypeVar("R", bound=WgerRecord)

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, OSError)

# aiohttp.InvalidURL, and UnicodeError from IDNA encoding of a bad host
URL_ERRORS = (aiohttp.InvalidURL, ValueError)


class WgerClient(IExerciseService):
    """Async client for the wger exercise API.

    Single Responsibility: Turn one logical request into one GET and turn the
    response into a decoded record or a WgerAPIError.

    Dependencies injected (not instantiated):
    - http_client: Executes HTTP requests
    - error_mapper: Maps server error bodies to exceptions
    """

    def __init__(
        self,
        config: WgerConfig,
        http_client: IHttpClient,
        error_mapper: ErrorMapperChain | None = None,
    ):
        """Initialize WgerClient with injected dependencies.

        Args:
            config: Configuration including base_url and pacing delay
            http_client: HTTP client implementation (e.g., AiohttpClient)
            error_mapper: Error chain (defaults to create_error_mapper_chain())
        """
        self.config = config
        self.http_client = http_client
        self.error_mapper = error_mapper or create_error_mapper_chain()
        self.base_url = config.base_url
        self.aggregator = VariationAggregator(
            self.fetch_exercise, delay=config.variation_delay
        )

    async def __aenter__(self) -> "WgerClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.http_client.close()

    async def fetch(self, route: Route, model: type[R]) -> R:
        """Execute exactly one GET request and decode the response.

        Args:
            route: Logical request to resolve against base_url
            model: Record type expected on HTTP 200

        Returns:
            Decoded record

        Raises:
            InvalidURLError: Malformed request target
            UnderlyingError: Transport failure, or undecodable error body
            InvalidResponseError: Status code outside the HTTP range
            NotFoundError, OtherError: Server-reported failures
            NoDataError: Empty 200 body
            DecodingError: 200 body not matching ``model``
        """
        request = resolve(route, self.base_url)
        endpoint = request.endpoint

        log.debug("request_dispatched", url=request.url, params=request.params)

        try:
            response = await self.http_client.get(
                request.url,
                params=request.params or None,
                timeout=self.config.http_config.timeout,
            )
        except URL_ERRORS as e:
            log.error("request_invalid_url", url=request.url)
            raise InvalidURLError(str(e), endpoint=endpoint) from e
        except TRANSPORT_ERRORS as e:
            log.error("request_failed", endpoint=endpoint, error=repr(e))
            raise UnderlyingError(e, endpoint=endpoint) from e

        status = response.status_code
        if not 100 <= status <= 599:
            raise InvalidResponseError(
                f"Unclassifiable status code {status}",
                status_code=status,
                endpoint=endpoint,
            )

        if status != 200:
            raise self._map_error_response(status, response.body, endpoint)

        if not response.body or not response.body.strip():
            raise NoDataError(
                "Empty response body", status_code=status, endpoint=endpoint
            )

        try:
            record = model.decode(response.body)
        except ValidationError as e:
            log.warning(
                "response_decoding_failed", endpoint=endpoint, model=model.__name__
            )
            raise DecodingError(e, status_code=status, endpoint=endpoint) from e

        log.debug("request_succeeded", endpoint=endpoint, model=model.__name__)
        return record

    def _map_error_response(
        self, status: int, body: bytes, endpoint: str
    ) -> WgerAPIError:
        try:
            error_body = ServerErrorBody.decode(body)
        except ValidationError as e:
            log.error("error_body_undecodable", endpoint=endpoint, status=status)
            error = UnderlyingError(e, status_code=status, endpoint=endpoint)
            error.__cause__ = e
            return error

        error = self.error_mapper.map_error(status, error_body, endpoint)
        log.warning(
            "server_reported_error",
            endpoint=endpoint,
            status=status,
            error=type(error).__name__,
            detail=error_body.detail,
        )
        return error

    async def fetch_exercises(
        self,
        limit: int | None = None,
        offset: int | None = None,
        language: int | None = None,
    ) -> ExerciseListPage:
        """Fetch one page of /exerciseinfo."""
        route = ListExercises(
            limit=limit if limit is not None else self.config.page_size,
            offset=offset,
            language=language if language is not None else self.config.language,
        )
        return await self.fetch(route, ExerciseListPage)

    async def fetch_exercise(self, exercise_id: int) -> ExerciseRecord:
        """Fetch /exerciseinfo/{exercise_id}."""
        return await self.fetch(ExerciseDetail(exercise_id), ExerciseRecord)

    async def fetch_page(self, cursor: str) -> ExerciseListPage:
        """Follow a next/previous cursor from a previous page."""
        return await self.fetch(PageCursor(cursor), ExerciseListPage)

    async def iter_pages(
        self,
        max_pages: int | None = None,
        limit: int | None = None,
        language: int | None = None,
        delay: float | None = None,
    ) -> AsyncIterator[ExerciseListPage]:
        """Yield pages by following ``next`` cursors, paced like variations."""
        pace = self.config.variation_delay if delay is None else delay
        page = await self.fetch_exercises(limit=limit, language=language)
        fetched = 1
        yield page
        while page.has_next and (max_pages is None or fetched < max_pages):
            await asyncio.sleep(pace)
            page = await self.fetch_page(page.next)
            fetched += 1
            yield page

    async def fetch_all_variations(
        self,
        variation_ids: Sequence[int],
        delay: float | None = None,
        scope: FetchScope | None = None,
    ) -> list[ExerciseRecord]:
        """Fetch variation exercises sequentially via VariationAggregator."""
        return await self.aggregator.fetch_all(variation_ids, delay=delay, scope=scope)
