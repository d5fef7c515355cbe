"""Normalize, join, count and narrow: the shared core of every view."""

from .aggregate import aggregate, by_country, by_discipline, by_medal, nest, totals
from .join import build_index, join, resolve_row
from .names import name_key, normalize_name
from .selection import restrict, top_k

__all__ = [
    "aggregate",
    "build_index",
    "by_country",
    "by_discipline",
    "by_medal",
    "join",
    "name_key",
    "nest",
    "normalize_name",
    "resolve_row",
    "restrict",
    "top_k",
    "totals",
]
