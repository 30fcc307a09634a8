"""Immutable settings handed to the transport and the wger client.

Built once by the dependency container from ConfigState; components never
read the global configuration themselves.
"""

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://wger.de/api/v2"


@dataclass(frozen=True)
class HttpClientConfig:
    timeout: float = 30.0
    connect_timeout: float = 10.0
    verify_ssl: bool = True


@dataclass(frozen=True)
class WgerConfig:
    base_url: str = DEFAULT_BASE_URL
    # Pause between sequential detail requests, in seconds
    variation_delay: float = 0.2
    page_size: int | None = None
    language: int | None = None
    http_config: HttpClientConfig = field(default_factory=HttpClientConfig)

    def __post_init__(self):
        if self.variation_delay < 0:
            raise ValueError("variation_delay must be >= 0")
