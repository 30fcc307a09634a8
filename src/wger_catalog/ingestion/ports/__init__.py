"""Ports (protocols) for the ingestion layer."""

from .http import HttpResponse, IHttpClient  # noqa: F401
from .services import IExerciseService  # noqa: F401

__all__ = [
    "IHttpClient",
    "HttpResponse",
    "IExerciseService",
]
