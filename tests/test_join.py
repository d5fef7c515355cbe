from podium.models import JoinedRecord, PersonRecord
from podium.pipeline import build_index, join, name_key, resolve_row


def test_join_is_inner():
    primary = [PersonRecord(name="Jane Doe", country="X")]
    secondary = [
        PersonRecord(name="Doe Jane", discipline="Fencing"),
        PersonRecord(name="No Match", discipline="Judo"),
    ]

    joined = join(primary, secondary, name_key(reversed=False), name_key(reversed=True))

    assert joined == [JoinedRecord(country="X", discipline="Fencing")]


def test_join_carries_medal_and_canonical_country():
    primary = [PersonRecord(name="LEDECKY Katie", country="USA", country_long="United States")]
    secondary = [PersonRecord(name="Katie LEDECKY", discipline="Swimming", medal_type="Gold Medal")]

    joined = join(primary, secondary, name_key(reversed=True), name_key(reversed=False))

    assert joined == [
        JoinedRecord(country="United States of America", discipline="Swimming", medal="Gold Medal")
    ]


def test_duplicate_primary_keys_keep_last_row():
    rows = [
        PersonRecord(name="Jane Doe", country="First"),
        PersonRecord(name="JANE DOE", country="Second"),
    ]

    index = build_index(rows, name_key(), lambda row: row.country)

    assert index == {"jane doe": "Second"}


def test_primary_rows_missing_fields_are_not_indexed():
    rows = [
        PersonRecord(name=None, country="X"),
        PersonRecord(name="Jane Doe"),
        PersonRecord(name="John Roe", country="Y"),
    ]

    index = build_index(rows, name_key(), lambda row: row.country)

    assert index == {"john roe": "Y"}


def test_resolve_row_returns_none_for_drops():
    index = {"jane doe": "X"}
    key = name_key()

    assert resolve_row(PersonRecord(name="Jane Doe", discipline="Judo"), index, key) == JoinedRecord(
        country="X", discipline="Judo"
    )
    assert resolve_row(PersonRecord(name="Someone Else"), index, key) is None
    assert resolve_row(PersonRecord(), index, key) is None


def test_custom_value_function():
    primary = [PersonRecord(name="Jane Doe", country="fra")]
    secondary = [PersonRecord(name="Jane Doe")]

    joined = join(primary, secondary, name_key(), name_key(), value=lambda row: (row.country or "").upper())

    assert joined[0].country == "FRA"


def test_join_of_empty_inputs_is_empty():
    key = name_key()
    assert join([], [], key, key) == []
    assert join([PersonRecord(name="Jane Doe", country="X")], [], key, key) == []
    assert join([], [PersonRecord(name="Jane Doe")], key, key) == []
