"""Country label aliases resolving NOC codes and team names to map countries."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from podium.models import PersonRecord


# Canonical names follow the world-atlas (Natural Earth 110m) ``name`` property
# so that choropleth features and aggregated countries share one vocabulary.
COUNTRY_ALIAS_GROUPS: Dict[str, List[str]] = {
    "United States of America": ["USA", "United States", "United States of America"],
    "United Kingdom": ["GBR", "Great Britain", "United Kingdom"],
    "China": ["CHN", "People's Republic of China", "China"],
    "Taiwan": ["TPE", "Chinese Taipei", "Taiwan"],
    "Hong Kong": ["HKG", "Hong Kong, China", "Hong Kong"],
    "South Korea": ["KOR", "Korea", "Republic of Korea", "South Korea"],
    "North Korea": ["PRK", "DPR Korea", "Democratic People's Republic of Korea", "North Korea"],
    "Russia": ["RUS", "ROC", "URS", "Russian Federation", "Soviet Union", "Russia"],
    "Germany": ["GER", "FRG", "GDR", "West Germany", "East Germany", "Germany"],
    "Czechia": ["CZE", "TCH", "Czech Republic", "Czechoslovakia", "Czechia"],
    "Iran": ["IRI", "IR Iran", "Islamic Republic of Iran", "Iran"],
    "Turkey": ["TUR", "Türkiye", "Turkiye", "Turkey"],
    "Moldova": ["MDA", "Republic of Moldova", "Moldova"],
    "Tanzania": ["TAN", "United Republic of Tanzania", "Tanzania"],
    "Côte d'Ivoire": ["CIV", "Cote d'Ivoire", "Ivory Coast", "Côte d'Ivoire"],
    "Laos": ["LAO", "Lao People's Democratic Republic", "Laos"],
    "Syria": ["SYR", "Syrian Arab Republic", "Syria"],
    "Vietnam": ["VIE", "Viet Nam", "Vietnam"],
    "Brunei": ["BRU", "Brunei Darussalam", "Brunei"],
    "Bolivia": ["BOL", "Plurinational State of Bolivia", "Bolivia"],
    "Venezuela": ["VEN", "Bolivarian Republic of Venezuela", "Venezuela"],
    "Dominican Rep.": ["DOM", "Dominican Republic"],
    "Central African Rep.": ["CAF", "Central African Republic"],
    "Bosnia and Herz.": ["BIH", "Bosnia and Herzegovina"],
    "Eq. Guinea": ["GEQ", "Equatorial Guinea"],
    "S. Sudan": ["SSD", "South Sudan"],
    "Solomon Is.": ["SOL", "Solomon Islands"],
    "eSwatini": ["SWZ", "Eswatini", "Swaziland"],
    "Macedonia": ["MKD", "North Macedonia"],
    "Dem. Rep. Congo": ["COD", "Democratic Republic of the Congo", "DR Congo"],
    "Congo": ["CGO", "Republic of the Congo", "Congo"],
    "Serbia": ["SRB", "Serbia and Montenegro", "Serbia"],
    "Netherlands": ["NED", "Netherlands"],
    "Switzerland": ["SUI", "Switzerland"],
    "Greece": ["GRE", "Greece"],
    "Denmark": ["DEN", "Denmark"],
    "Croatia": ["CRO", "Croatia"],
    "Slovenia": ["SLO", "Slovenia"],
    "South Africa": ["RSA", "South Africa"],
    "Portugal": ["POR", "Portugal"],
    "Philippines": ["PHI", "Philippines"],
    "Indonesia": ["INA", "Indonesia"],
    "Malaysia": ["MAS", "Malaysia"],
    "Algeria": ["ALG", "Algeria"],
    "Mongolia": ["MGL", "Mongolia"],
    "Palestine": ["PLE", "Palestine"],
    "Timor-Leste": ["TLS", "Timor-Leste", "East Timor"],
}


def _build_alias_lookup(groups: Mapping[str, List[str]]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for canonical, variants in groups.items():
        for variant in variants:
            lookup.setdefault(variant, canonical)
    return lookup


@dataclass(frozen=True)
class CountryAliaser:
    """Resolve raw country/team labels through an immutable alias table."""

    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    def canonicalize(self, primary: Optional[str], long: Optional[str] = None) -> Optional[str]:
        """Return the canonical country for a row, or ``None`` when unlabeled.

        The long label wins over the short one. Matching is exact: no case or
        whitespace folding is applied, and labels missing from the table are
        returned unchanged.
        """

        label = long or primary
        if not label:
            return None
        return self.aliases.get(label, label)

    def country_of(self, row: PersonRecord) -> Optional[str]:
        return self.canonicalize(row.country, row.country_long)


COUNTRY_ALIASES: Mapping[str, str] = MappingProxyType(_build_alias_lookup(COUNTRY_ALIAS_GROUPS))

DEFAULT_ALIASER = CountryAliaser(COUNTRY_ALIASES)
