from .aiohttp_client import AiohttpClient  # noqa: F401

__all__ = ["AiohttpClient"]
