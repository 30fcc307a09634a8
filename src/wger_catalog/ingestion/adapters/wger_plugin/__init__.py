"""wger exercise API plugin: records, error taxonomy, endpoint resolution and client."""

from .exceptions import (  # noqa: F401
    DecodingError,
    InvalidResponseError,
    InvalidURLError,
    NoDataError,
    NotFoundError,
    OtherError,
    UnderlyingError,
    WgerAPIError,
)
from .models import (  # noqa: F401
    ExerciseListPage,
    ExerciseRecord,
    ImageRecord,
    ServerErrorBody,
)

__all__ = [
    "WgerAPIError",
    "InvalidURLError",
    "InvalidResponseError",
    "NoDataError",
    "NotFoundError",
    "OtherError",
    "DecodingError",
    "UnderlyingError",
    "ExerciseRecord",
    "ExerciseListPage",
    "ImageRecord",
    "ServerErrorBody",
]
