"""Helpers to load source CSVs into person records."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from podium.config_loader import DEFAULT_ROSTER_MAPPING, SourceProfile, SourceSpec
from podium.models import PersonRecord


logger = logging.getLogger(__name__)


class SourceLoadError(RuntimeError):
    """Raised when a source table cannot be read at all."""

    def __init__(self, path: Path, reason: str, *, missing: bool = False) -> None:
        super().__init__(f"Unable to load {path}: {reason}")
        self.path = path
        self.missing = missing


@dataclass(frozen=True)
class SourceTable:
    """Rows of one input table plus the name order its names are stored in."""

    rows: Tuple[PersonRecord, ...]
    reversed: bool = False

    @classmethod
    def from_rows(cls, rows: Iterable[PersonRecord], *, reversed: bool = False) -> "SourceTable":
        return cls(rows=tuple(rows), reversed=reversed)


def rows_to_records(
    rows: Iterable[Mapping[str, Optional[str]]],
    *,
    mapping: Mapping[str, str] | None = None,
) -> List[PersonRecord]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    return [PersonRecord.from_mapping(row, mapping) for row in rows]


def load_table(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[PersonRecord]:
    """Read a CSV with a header row into records.

    Cells may be blank or absent; only an unreadable file raises.
    """

    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            records = rows_to_records(reader, mapping=mapping)
    except FileNotFoundError:
        raise SourceLoadError(path, "file not found", missing=True) from None
    except (csv.Error, UnicodeDecodeError, OSError) as exc:
        raise SourceLoadError(path, str(exc)) from exc
    logger.debug("Loaded %d rows from %s", len(records), path)
    return records


def load_source(data_dir: Path, spec: SourceSpec) -> SourceTable:
    records = load_table(data_dir / spec.filename, mapping=spec.mapping)
    return SourceTable.from_rows(records, reversed=spec.reversed)


def load_sources(
    data_dir: Path,
    tables: Sequence[str],
    *,
    profile: SourceProfile | None = None,
) -> dict[str, SourceTable]:
    """Load the named tables from ``data_dir`` using ``profile`` overrides."""

    profile = profile or SourceProfile()
    return {table: load_source(data_dir, profile.source(table)) for table in tables}
