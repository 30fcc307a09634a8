"""Transport port: what the wger client needs from an HTTP library."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class HttpResponse:
    """Status and undecoded body of one completed request."""

    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""


class IHttpClient(Protocol):
    """Performs GET requests. Decoding, error mapping and pacing live above it.

    Implementations raise transport failures (connection, timeout, malformed
    URL) as exceptions and return every HTTP status as an HttpResponse.
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HttpResponse: ...

    async def close(self) -> None: ...
