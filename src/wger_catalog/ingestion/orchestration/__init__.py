"""Request orchestration: lifetime scopes and paced variation fetching."""

from .scope import FetchScope  # noqa: F401
from .variation_aggregator import VariationAggregator  # noqa: F401

__all__ = ["FetchScope", "VariationAggregator"]
