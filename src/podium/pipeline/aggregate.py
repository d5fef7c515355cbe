"""Counting joined records by one or two categorical dimensions."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from podium.models import AggregateEntry, JoinedRecord


Dimension = Callable[[JoinedRecord], Optional[str]]


def aggregate(
    records: Iterable[JoinedRecord],
    dim1: Dimension,
    dim2: Dimension | None = None,
) -> List[AggregateEntry]:
    """Count records per ``dim1`` value, or per ``(dim1, dim2)`` pair.

    Entries come out in first-seen order. A record whose dimension value is
    ``None`` is not counted.
    """

    counts: Counter[Union[str, Tuple[str, str]]] = Counter()
    for record in records:
        first = dim1(record)
        if first is None:
            continue
        if dim2 is None:
            counts[first] += 1
            continue
        second = dim2(record)
        if second is None:
            continue
        counts[(first, second)] += 1
    return [AggregateEntry(key=key, count=count) for key, count in counts.items()]


def nest(entries: Sequence[AggregateEntry]) -> Dict[str, List[Tuple[str, int]]]:
    """Group two-dimension entries as ``dim1 -> [(dim2, count), ...]``.

    Single-dimension entries have no inner key and are skipped.
    """

    nested: Dict[str, List[Tuple[str, int]]] = {}
    for entry in entries:
        if not isinstance(entry.key, tuple):
            continue
        outer, inner = entry.key
        nested.setdefault(outer, []).append((inner, entry.count))
    return nested


def totals(records: Iterable[JoinedRecord], dim: Dimension) -> List[Tuple[str, int]]:
    return [(str(entry.key), entry.count) for entry in aggregate(records, dim)]


def by_country(record: JoinedRecord) -> Optional[str]:
    return record.country


def by_discipline(record: JoinedRecord) -> Optional[str]:
    return record.discipline


def by_medal(record: JoinedRecord) -> Optional[str]:
    return record.medal
