"""Handler chain that turns a decoded server error body into a WgerAPIError.

New error kinds are added by registering a handler, not by editing the client.
"""

from typing import Protocol

from wger_catalog.ingestion.adapters.wger_plugin.exceptions import WgerAPIError
from wger_catalog.ingestion.adapters.wger_plugin.models import ServerErrorBody


class IErrorHandler(Protocol):
    def can_handle(self, status_code: int, body: ServerErrorBody) -> bool: ...

    def handle(
        self, status_code: int, body: ServerErrorBody, endpoint: str
    ) -> WgerAPIError: ...


class ErrorMapperChain:
    """Ordered handlers with a fallback; the first handler that accepts wins."""

    def __init__(self, fallback: IErrorHandler):
        self._handlers: list[IErrorHandler] = []
        self._fallback = fallback

    def register(self, handler: IErrorHandler) -> None:
        self._handlers.append(handler)

    def map_error(
        self, status_code: int, body: ServerErrorBody, endpoint: str
    ) -> WgerAPIError:
        handler = next(
            (h for h in self._handlers if h.can_handle(status_code, body)),
            self._fallback,
        )
        return handler.handle(status_code, body, endpoint)
