"""Input adapters that turn raw CSV tables into person records."""

from .tables import (
    SourceLoadError,
    SourceTable,
    load_source,
    load_sources,
    load_table,
    rows_to_records,
)

__all__ = [
    "SourceLoadError",
    "SourceTable",
    "load_source",
    "load_sources",
    "load_table",
    "rows_to_records",
]
