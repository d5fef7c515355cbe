from podium.models import AggregateEntry, JoinedRecord
from podium.pipeline import aggregate, by_country, by_discipline, by_medal, nest, totals


def _records() -> list[JoinedRecord]:
    return [
        JoinedRecord(country="X", discipline="A"),
        JoinedRecord(country="X", discipline="A"),
        JoinedRecord(country="X", discipline="B"),
    ]


def test_two_dimension_rollup():
    entries = aggregate(_records(), by_country, by_discipline)

    assert entries == [
        AggregateEntry(key=("X", "A"), count=2),
        AggregateEntry(key=("X", "B"), count=1),
    ]
    assert nest(entries) == {"X": [("A", 2), ("B", 1)]}


def test_single_dimension_counts_in_first_seen_order():
    records = [
        JoinedRecord(country="Y", discipline="A"),
        JoinedRecord(country="X", discipline="A"),
        JoinedRecord(country="Y", discipline="B"),
    ]

    assert totals(records, by_country) == [("Y", 2), ("X", 1)]


def test_missing_dimension_values_are_not_counted():
    records = [
        JoinedRecord(country="X", discipline="A", medal="Gold Medal"),
        JoinedRecord(country="X", discipline="A"),
        JoinedRecord(country="X"),
    ]

    assert aggregate(records, by_discipline, by_medal) == [
        AggregateEntry(key=("A", "Gold Medal"), count=1)
    ]
    assert totals(records, by_discipline) == [("A", 2)]


def test_empty_input_gives_empty_output():
    assert aggregate([], by_country) == []
    assert aggregate([], by_country, by_discipline) == []
    assert nest([]) == {}


def test_nest_skips_single_dimension_entries():
    assert nest(aggregate(_records(), by_country)) == {}
    mixed = aggregate(_records(), by_country) + aggregate(_records(), by_country, by_discipline)
    assert nest(mixed) == {"X": [("A", 2), ("B", 1)]}
