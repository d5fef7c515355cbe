"""Per-view settings for the three visualizations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional


@dataclass(frozen=True)
class ViewSettings:
    name: str
    top_k: Optional[int]
    roster: str
    description: str


_VIEW_SETTINGS: Dict[str, ViewSettings] = {
    "flow": ViewSettings(
        name="flow",
        top_k=8,
        roster="athletes",
        description="Country to discipline to medal flows",
    ),
    "heatmap": ViewSettings(
        name="heatmap",
        top_k=15,
        roster="medallists",
        description="Medals per country and discipline",
    ),
    "choropleth": ViewSettings(
        name="choropleth",
        top_k=None,
        roster="medallists",
        description="Total medals per country",
    ),
}


def iter_settings() -> Iterable[ViewSettings]:
    """Return an iterator of all configured views."""

    return _VIEW_SETTINGS.values()


def get_settings(view: str) -> ViewSettings:
    """Fetch settings for a view name, raising KeyError if missing."""

    key = view.lower()
    if key not in _VIEW_SETTINGS:
        raise KeyError(f"No view configured for name={view!r}")
    return _VIEW_SETTINGS[key]


VIEW_NAMES: tuple[str, ...] = tuple(_VIEW_SETTINGS)
