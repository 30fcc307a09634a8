"""
Endpoint resolution for the wger API.

Maps a logical request to the concrete GET target (URL + query params).
Resolution is pure and total: it never performs I/O and never fails.
"""

from dataclasses import dataclass, field
from typing import Any, Union

EXERCISE_INFO_PATH = "/exerciseinfo"


@dataclass(frozen=True)
class ListExercises:
    """One page of /exerciseinfo."""

    limit: int | None = None
    offset: int | None = None
    language: int | None = None

    @property
    def path(self) -> str:
        return EXERCISE_INFO_PATH

    @property
    def params(self) -> dict[str, Any]:
        params = {
            "limit": self.limit,
            "offset": self.offset,
            "language": self.language,
        }
        return {key: value for key, value in params.items() if value is not None}


@dataclass(frozen=True)
class ExerciseDetail:
    """A single exercise by id."""

    exercise_id: int

    @property
    def path(self) -> str:
        return f"{EXERCISE_INFO_PATH}/{self.exercise_id}"

    @property
    def params(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class PageCursor:
    """An opaque next/previous URL taken from a list page."""

    url: str


Route = Union[ListExercises, ExerciseDetail, PageCursor]


@dataclass(frozen=True)
class ResolvedRequest:
    url: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def endpoint(self) -> str:
        """URL without scheme and host, used as log/error context."""
        _, _, rest = self.url.partition("://")
        _, slash, path = rest.partition("/")
        return slash + path if slash else self.url


def resolve(route: Route, base_url: str) -> ResolvedRequest:
    """Build the GET target for a route.

    Args:
        route: Logical request
        base_url: API root, e.g. "https://wger.de/api/v2"

    Returns:
        ResolvedRequest with full URL and query params
    """
    if isinstance(route, PageCursor):
        return ResolvedRequest(url=route.url)
    return ResolvedRequest(url=base_url.rstrip("/") + route.path, params=route.params)
