"""Human-readable messages for wger errors."""

from wger_catalog.ingestion.adapters.wger_plugin.exceptions import WgerAPIError


def user_message(error: WgerAPIError) -> str:
    """Short message suitable for an alert or stderr.

    Fixed text per error kind; OtherError shows the server detail and
    DecodingError/UnderlyingError show their wrapped cause.
    """
    return error.user_message
