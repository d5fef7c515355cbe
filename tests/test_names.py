from podium.models import PersonRecord
from podium.pipeline import name_key, normalize_name


def test_reversed_and_plain_orders_share_a_key():
    assert normalize_name("Doe Jane", reversed=True) == "jane doe"
    assert normalize_name("Jane Doe", reversed=False) == "jane doe"


def test_single_token_is_lowercased():
    assert normalize_name("Madonna") == "madonna"
    assert normalize_name("MADONNA", reversed=True) == "madonna"


def test_only_first_two_tokens_are_used():
    assert normalize_name("LEDECKY Katie Anne") == "ledecky katie"
    assert normalize_name("LEDECKY Katie Anne", reversed=True) == "katie ledecky"


def test_whitespace_runs_are_collapsed():
    assert normalize_name("  Jane \t  Doe  ") == "jane doe"


def test_empty_name_gives_empty_key():
    assert normalize_name("") == ""
    assert normalize_name("   ", reversed=True) == ""


def test_name_key_skips_rows_without_names():
    key = name_key(reversed=True)
    assert key(PersonRecord(name="BILES Simone")) == "simone biles"
    assert key(PersonRecord(name=None)) is None
    assert key(PersonRecord()) is None
