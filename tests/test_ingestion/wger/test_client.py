"""WgerClient: one GET per call, status/body classification, decoding."""

import asyncio

import aiohttp
import pytest

from tests.conftest import BASE_URL, FakeHttpClient, detail_url, json_response
from wger_catalog.ingestion.adapters.wger_plugin.client import WgerClient
from wger_catalog.ingestion.adapters.wger_plugin.exceptions import (
    DecodingError,
    InvalidResponseError,
    InvalidURLError,
    NoDataError,
    NotFoundError,
    OtherError,
    UnderlyingError,
    WgerAPIError,
)
from wger_catalog.ingestion.adapters.wger_plugin.models import (
    ExerciseListPage,
    ExerciseRecord,
)
from wger_catalog.ingestion.config.value_objects import WgerConfig
from wger_catalog.ingestion.ports.http import HttpResponse

LIST_URL = f"{BASE_URL}/exerciseinfo"


class TestSuccess:
    @pytest.mark.asyncio
    async def test_fetch_exercises_decodes_page(self, client, http_client, page_body):
        http_client.add(LIST_URL, HttpResponse(200, page_body))

        page = await client.fetch_exercises()

        assert isinstance(page, ExerciseListPage)
        assert page.count == 2
        assert [r.name for r in page.results] == ["Addominali", "Axe Hold"]
        assert http_client.urls == [LIST_URL]

    @pytest.mark.asyncio
    async def test_fetch_exercises_sends_query_params(self, client, http_client, page_body):
        http_client.add(LIST_URL, HttpResponse(200, page_body))

        await client.fetch_exercises(limit=2, offset=4, language=2)

        assert http_client.calls[0]["params"] == {"limit": 2, "offset": 4, "language": 2}

    @pytest.mark.asyncio
    async def test_configured_page_size_is_default_limit(self, http_client, page_body):
        http_client.add(LIST_URL, HttpResponse(200, page_body))
        client = WgerClient(WgerConfig(base_url=BASE_URL, page_size=50), http_client)

        await client.fetch_exercises()

        assert http_client.calls[0]["params"] == {"limit": 50}

    @pytest.mark.asyncio
    async def test_fetch_exercise_decodes_detail(self, client, http_client, detail_body):
        http_client.add(detail_url(31), HttpResponse(200, detail_body))

        exercise = await client.fetch_exercise(31)

        assert isinstance(exercise, ExerciseRecord)
        assert exercise.id == 31
        assert exercise.variations == (167, 832)
        assert http_client.calls[0]["params"] is None

    @pytest.mark.asyncio
    async def test_fetch_page_follows_cursor(self, client, http_client, page_body):
        cursor = f"{BASE_URL}/exerciseinfo/?limit=2&offset=2"
        http_client.add(cursor, HttpResponse(200, page_body))

        page = await client.fetch_page(cursor)

        assert page.count == 2
        assert http_client.urls == [cursor]

    @pytest.mark.asyncio
    async def test_iter_pages_follows_next_until_exhausted(self, client, http_client):
        second = f"{BASE_URL}/exerciseinfo/?offset=1"
        http_client.add(
            LIST_URL,
            json_response(200, {"count": 2, "next": second, "results": [{"id": 1}]}),
        )
        http_client.add(
            second, json_response(200, {"count": 2, "next": None, "results": [{"id": 2}]})
        )

        pages = [page async for page in client.iter_pages(delay=0)]

        assert [p.results[0].id for p in pages] == [1, 2]
        assert http_client.urls == [LIST_URL, second]

    @pytest.mark.asyncio
    async def test_iter_pages_respects_max_pages(self, client, http_client):
        http_client.add(
            LIST_URL,
            json_response(200, {"next": f"{BASE_URL}/exerciseinfo/?offset=1"}),
        )

        pages = [page async for page in client.iter_pages(max_pages=1, delay=0)]

        assert len(pages) == 1
        assert len(http_client.calls) == 1


class TestServerErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 404, 500, 503])
    async def test_not_found_detail_is_not_found(self, client, http_client, status):
        http_client.add(detail_url(1), json_response(status, {"detail": "Not found."}))

        with pytest.raises(NotFoundError) as exc_info:
            await client.fetch_exercise(1)

        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    @pytest.mark.parametrize("detail", ["Invalid page.", "Server exploded", ""])
    async def test_other_detail_is_other(self, client, http_client, detail):
        http_client.add(LIST_URL, json_response(400, {"detail": detail}))

        with pytest.raises(OtherError) as exc_info:
            await client.fetch_exercises()

        assert exc_info.value.message == detail

    @pytest.mark.asyncio
    async def test_unknown_url_answers_not_found(self, client):
        with pytest.raises(NotFoundError):
            await client.fetch_exercise(424242)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body", [b"<html>Bad gateway</html>", b"", b'{"error": "nope"}', b"[]"]
    )
    async def test_undecodable_error_body_is_underlying(self, client, http_client, body):
        http_client.add(detail_url(1), HttpResponse(502, body))

        with pytest.raises(UnderlyingError) as exc_info:
            await client.fetch_exercise(1)

        assert exc_info.value.status_code == 502
        assert exc_info.value.cause is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [0, 42, 600, 999])
    async def test_status_outside_http_range_is_invalid_response(
        self, client, http_client, status
    ):
        http_client.add(detail_url(1), HttpResponse(status, b'{"id": 1}'))

        with pytest.raises(InvalidResponseError):
            await client.fetch_exercise(1)


class TestDecoding:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            b"not json",
            b'{"count": "abc"}',
            b'{"results": 3}',
            b'{"results": [{"images": 3}]}',
            b"[]",
        ],
    )
    async def test_schema_mismatch_is_decoding_error(self, client, http_client, body):
        http_client.add(LIST_URL, HttpResponse(200, body))

        with pytest.raises(DecodingError) as exc_info:
            await client.fetch_exercises()

        assert exc_info.value.__cause__ is exc_info.value.cause

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            b'{"id": "31"}',
            b'{"id": 31.0}',
            b'{"images": [{"is_main": "yes"}]}',
            b'{"variations": ["1", "2"]}',
            b'{"name": 5}',
        ],
    )
    async def test_wire_types_are_not_coerced(self, client, http_client, body):
        http_client.add(detail_url(1), HttpResponse(200, body))

        with pytest.raises(DecodingError):
            await client.fetch_exercise(1)

    @pytest.mark.asyncio
    async def test_error_body_detail_must_be_a_string(self, client, http_client):
        http_client.add(detail_url(1), HttpResponse(404, b'{"detail": 404}'))

        with pytest.raises(UnderlyingError):
            await client.fetch_exercise(1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"", b"   \n"])
    async def test_empty_body_is_no_data(self, client, http_client, body):
        http_client.add(detail_url(1), HttpResponse(200, body))

        with pytest.raises(NoDataError):
            await client.fetch_exercise(1)


class TestTransportErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [
            aiohttp.ClientConnectionError("connection refused"),
            asyncio.TimeoutError(),
            ConnectionResetError("reset"),
        ],
    )
    async def test_transport_failure_is_underlying(self, client, http_client, exc):
        http_client.add(detail_url(1), exc)

        with pytest.raises(UnderlyingError) as exc_info:
            await client.fetch_exercise(1)

        assert exc_info.value.cause is exc
        assert exc_info.value.__cause__ is exc

    @pytest.mark.asyncio
    async def test_invalid_url_is_invalid_url(self, client, http_client):
        http_client.add(detail_url(1), aiohttp.InvalidURL("http://[bad"))

        with pytest.raises(InvalidURLError):
            await client.fetch_exercise(1)

    @pytest.mark.asyncio
    async def test_unencodable_cursor_host_is_invalid_url(self, client, http_client):
        cursor = "http://a..b/x"
        error = UnicodeError("encoding with 'idna' codec failed (label empty or too long)")
        http_client.add(cursor, error)

        with pytest.raises(InvalidURLError) as exc_info:
            await client.fetch_page(cursor)

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_every_failure_is_a_wger_error(self, client, http_client):
        http_client.add(detail_url(1), aiohttp.ServerDisconnectedError())

        with pytest.raises(WgerAPIError):
            await client.fetch_exercise(1)


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_async_context_manager_closes_transport(self, wger_config):
        http_client = FakeHttpClient()

        async with WgerClient(wger_config, http_client):
            pass

        assert http_client.closed

    @pytest.mark.asyncio
    async def test_concurrent_independent_calls(self, client, http_client):
        for exercise_id in (1, 2, 3):
            http_client.add(detail_url(exercise_id), json_response(200, {"id": exercise_id}))

        results = await asyncio.gather(*(client.fetch_exercise(i) for i in (1, 2, 3)))

        assert [r.id for r in results] == [1, 2, 3]
