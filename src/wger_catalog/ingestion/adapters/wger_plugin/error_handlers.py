"""Concrete error handlers for wger error mapping.

The server reports failures as {"detail": "..."}; the detail string, not the
status code, selects the error kind.
Add new error kinds by creating a handler and registering it with
ErrorMapperChain.
"""

from wger_catalog.ingestion.adapters.wger_plugin.exceptions import (
    NotFoundError,
    OtherError,
    WgerAPIError,
)
from wger_catalog.ingestion.adapters.wger_plugin.models import ServerErrorBody
from wger_catalog.ingestion.adapters.wger_plugin.strategies import (
    ErrorMapperChain,
    IErrorHandler,
)

NOT_FOUND_DETAIL = "Not found."


class NotFoundHandler(IErrorHandler):
    """Handle the exact "Not found." detail."""

    def can_handle(self, status_code: int, body: ServerErrorBody) -> bool:
        return body.detail == NOT_FOUND_DETAIL

    def handle(
        self, status_code: int, body: ServerErrorBody, endpoint: str
    ) -> WgerAPIError:
        return NotFoundError(body.detail, status_code=status_code, endpoint=endpoint)


class OtherDetailHandler(IErrorHandler):
    """Handle any other detail string verbatim."""

    def can_handle(self, status_code: int, body: ServerErrorBody) -> bool:
        return True

    def handle(
        self, status_code: int, body: ServerErrorBody, endpoint: str
    ) -> WgerAPIError:
        return OtherError(body.detail, status_code=status_code, endpoint=endpoint)


def create_error_mapper_chain() -> ErrorMapperChain:
    """Factory to create pre-configured error mapper chain.

    Returns:
        Chain with all standard error handlers registered
    """
    chain = ErrorMapperChain(fallback=OtherDetailHandler())
    chain.register(NotFoundHandler())
    return chain
