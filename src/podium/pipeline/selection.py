"""Top-K narrowing of aggregate groups and the matching record filter."""

from __future__ import annotations

from typing import Collection, Iterable, List, Sequence, Tuple, Union

from podium.models import AggregateEntry, JoinedRecord

from .aggregate import Dimension


GroupKey = Union[str, Tuple[str, str]]
Ranked = Union[AggregateEntry, Tuple[GroupKey, int]]


def _pair(entry: Ranked) -> Tuple[GroupKey, int]:
    if isinstance(entry, AggregateEntry):
        return entry.key, entry.count
    key, count = entry
    return key, count


def top_k(entries: Sequence[Ranked], k: int) -> List[GroupKey]:
    """Return the ``k`` keys with the highest counts.

    Ties keep their input order. Fewer than ``k`` keys are returned when the
    input is shorter, and none when ``k`` is not positive. Two-dimension keys
    come back as the same ``(dim1, dim2)`` tuples.
    """

    if k <= 0:
        return []
    pairs = [_pair(entry) for entry in entries]
    ranked = sorted(pairs, key=lambda item: -item[1])
    return [key for key, _ in ranked[:k]]


def restrict(
    records: Iterable[JoinedRecord],
    dim1: Dimension,
    keep1: Collection[str],
    dim2: Dimension,
    keep2: Collection[str],
) -> List[JoinedRecord]:
    """Keep records whose values survive narrowing on both dimensions."""

    allowed1 = set(keep1)
    allowed2 = set(keep2)
    return [
        record
        for record in records
        if dim1(record) in allowed1 and dim2(record) in allowed2
    ]
