"""Dependency injection container for the wger ingestion layer.

Wires abstractions and their implementations together.
This is the single place where concrete implementations are chosen.

Usage:
    container = WgerDependencyContainer(base_url="https://wger.de/api/v2")
    client = container.create_wger_client()
"""

from wger_catalog.config.state import ConfigState
from wger_catalog.ingestion.adapters.wger_plugin.client import WgerClient
from wger_catalog.ingestion.adapters.wger_plugin.error_handlers import (
    create_error_mapper_chain,
)
from wger_catalog.ingestion.adapters.wger_plugin.strategies import ErrorMapperChain
from wger_catalog.ingestion.config.value_objects import (
    DEFAULT_BASE_URL,
    HttpClientConfig,
    WgerConfig,
)
from wger_catalog.ingestion.connectors.aiohttp_client import AiohttpClient
from wger_catalog.ingestion.ports import IHttpClient


class WgerDependencyContainer:
    """Dependency injection container for the wger client.

    Responsible for:
    1. Choosing concrete implementations for each protocol
    2. Creating configuration value objects
    3. Wiring dependencies together

    Tests can subclass this and override methods to inject fakes.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        variation_delay: float = 0.2,
        page_size: int | None = None,
        language: int | None = None,
        http_config: HttpClientConfig | None = None,
    ):
        self.http_config = http_config or HttpClientConfig()
        self.config = WgerConfig(
            base_url=base_url,
            variation_delay=variation_delay,
            page_size=page_size,
            language=language,
            http_config=self.http_config,
        )

    def create_http_client(self) -> IHttpClient:
        """Create HTTP client implementation.

        Override this in tests to inject a fake HTTP client.
        """
        return AiohttpClient(self.http_config)

    def create_error_mapper(self) -> ErrorMapperChain:
        return create_error_mapper_chain()

    def create_wger_client(self) -> WgerClient:
        """Create fully-wired WgerClient."""
        return WgerClient(
            config=self.config,
            http_client=self.create_http_client(),
            error_mapper=self.create_error_mapper(),
        )


def create_wger_client_from_settings(settings: ConfigState) -> WgerClient:
    """Factory function to create WgerClient from a ConfigState.

    Args:
        settings: Loaded configuration state

    Returns:
        Fully configured WgerClient
    """
    wger = settings.wger
    container = WgerDependencyContainer(
        base_url=wger.base_url,
        variation_delay=wger.variation_delay,
        page_size=wger.page_size,
        language=wger.language,
        http_config=HttpClientConfig(
            timeout=wger.timeout,
            connect_timeout=wger.connect_timeout,
            verify_ssl=wger.verify_ssl,
        ),
    )
    return container.create_wger_client()
