"""Per-country medal totals for the world map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from podium.config.countries import CountryAliaser
from podium.ingest import SourceTable
from podium.pipeline import by_country, totals

from .common import join_tables


@dataclass(frozen=True)
class ChoroplethView:
    """Total medals per canonical country.

    Countries absent from ``counts`` have no data; the map shades them with
    its fallback color instead of dropping them.
    """

    counts: Dict[str, int]

    def value_for(self, country: str) -> Optional[int]:
        return self.counts.get(country)

    def fill(self, feature_names: Iterable[str]) -> Dict[str, Optional[int]]:
        return {name: self.value_for(name) for name in feature_names}


def compute_choropleth_view(
    roster: SourceTable,
    medals: SourceTable,
    *,
    aliaser: CountryAliaser | None = None,
) -> ChoroplethView:
    records = join_tables(roster, medals, aliaser=aliaser)
    return ChoroplethView(counts=dict(totals(records, by_country)))
