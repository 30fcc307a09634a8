from .state import (  # noqa: F401
    ConfigLoader,
    ConfigState,
    LoggingConfig,
    WgerSettings,
    get_config,
)

__all__ = [
    "ConfigLoader",
    "ConfigState",
    "LoggingConfig",
    "WgerSettings",
    "get_config",
]
