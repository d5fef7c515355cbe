from pathlib import Path

import pytest

from podium.config import VIEW_NAMES, get_settings, iter_settings
from podium.config_loader import SourceProfile


def test_get_settings_is_case_insensitive():
    settings = get_settings("FLOW")
    assert settings.top_k == 8
    assert settings.roster == "athletes"


def test_choropleth_has_no_top_k():
    assert get_settings("choropleth").top_k is None


def test_get_settings_missing_raises():
    with pytest.raises(KeyError):
        get_settings("scatter")


def test_iter_settings_matches_view_names():
    assert tuple(settings.name for settings in iter_settings()) == VIEW_NAMES


def test_source_profile_defaults():
    profile = SourceProfile()

    assert profile.athletes.filename == "athletes.csv"
    assert profile.athletes.reversed is True
    assert profile.medals.reversed is False
    assert profile.medals.mapping["medal_type"] == "medal_type"


def test_source_profile_round_trip_with_partial_file(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text('{"medals": {"filename": "results.csv", "mapping": {"medal_type": "medal"}}}', encoding="utf-8")

    profile = SourceProfile.load(path)

    assert profile.medals.filename == "results.csv"
    assert profile.medals.mapping == {"name": "name", "discipline": "discipline", "medal_type": "medal"}
    assert profile.athletes.filename == "athletes.csv"

    saved = tmp_path / "saved.json"
    profile.save(saved)
    assert SourceProfile.load(saved) == profile


def test_source_profile_unknown_table():
    with pytest.raises(KeyError):
        SourceProfile().source("coaches")
