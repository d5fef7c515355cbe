"""Hash join of medal rows onto a roster via normalized name keys."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from podium.config.countries import DEFAULT_ALIASER
from podium.models import JoinedRecord, PersonRecord


logger = logging.getLogger(__name__)

RowKey = Callable[[PersonRecord], Optional[str]]
RowValue = Callable[[PersonRecord], Optional[str]]


def build_index(rows: Iterable[PersonRecord], key: RowKey, value: RowValue) -> Dict[str, str]:
    """Map each row key to its value, skipping rows missing either.

    Duplicate keys keep the last row seen.
    """

    index: Dict[str, str] = {}
    for row in rows:
        row_key = key(row)
        row_value = value(row)
        if not row_key or not row_value:
            continue
        index[row_key] = row_value
    return index


def resolve_row(row: PersonRecord, index: Mapping[str, str], key: RowKey) -> Optional[JoinedRecord]:
    """Return the joined record for ``row``, or ``None`` when its key is unknown."""

    row_key = key(row)
    if not row_key:
        return None
    country = index.get(row_key)
    if country is None:
        return None
    return JoinedRecord(country=country, discipline=row.discipline, medal=row.medal_type)


def join(
    primary_rows: Iterable[PersonRecord],
    secondary_rows: Iterable[PersonRecord],
    primary_key: RowKey,
    secondary_key: RowKey,
    *,
    value: RowValue | None = None,
) -> List[JoinedRecord]:
    """Inner-join secondary rows onto the primary index.

    ``value`` extracts the attached value (the canonical country by default)
    from each primary row. Unmatched secondary rows are dropped.
    """

    value = value or DEFAULT_ALIASER.country_of
    index = build_index(primary_rows, primary_key, value)

    joined: List[JoinedRecord] = []
    dropped = 0
    for row in secondary_rows:
        record = resolve_row(row, index, secondary_key)
        if record is None:
            dropped += 1
            continue
        joined.append(record)

    logger.debug("Joined %d rows against %d index keys (%d dropped)", len(joined), len(index), dropped)
    return joined
