from .value_objects import HttpClientConfig, WgerConfig  # noqa: F401

__all__ = ["HttpClientConfig", "WgerConfig"]
