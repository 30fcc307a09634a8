"""Headless presentation layer: observable view-model state for a UI or the CLI."""

from .messages import user_message  # noqa: F401
from .observable import Observable  # noqa: F401
from .view_models import ExerciseDetailViewModel, ExercisesViewModel  # noqa: F401

__all__ = [
    "Observable",
    "ExercisesViewModel",
    "ExerciseDetailViewModel",
    "user_message",
]
