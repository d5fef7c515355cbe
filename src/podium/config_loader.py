"""Persist and load per-table source profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


DEFAULT_ROSTER_MAPPING = {
    "name": "name",
    "country": "country",
    "country_long": "country_long",
}

DEFAULT_MEDALS_MAPPING = {
    "name": "name",
    "discipline": "discipline",
    "medal_type": "medal_type",
}


@dataclass
class SourceSpec:
    filename: str
    mapping: Dict[str, str]
    reversed: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {"filename": self.filename, "mapping": self.mapping, "reversed": self.reversed}

    def merged(self, data: Dict[str, Any]) -> "SourceSpec":
        return SourceSpec(
            filename=data.get("filename", self.filename),
            mapping=self.mapping | data.get("mapping", {}),
            reversed=bool(data.get("reversed", self.reversed)),
        )


def _default_athletes() -> SourceSpec:
    return SourceSpec("athletes.csv", DEFAULT_ROSTER_MAPPING.copy(), reversed=True)


def _default_medallists() -> SourceSpec:
    return SourceSpec("medallists.csv", DEFAULT_ROSTER_MAPPING.copy(), reversed=True)


def _default_medals() -> SourceSpec:
    return SourceSpec("medals.csv", DEFAULT_MEDALS_MAPPING.copy(), reversed=False)


@dataclass
class SourceProfile:
    """File names, column mappings and name order for each input table."""

    athletes: SourceSpec = field(default_factory=_default_athletes)
    medallists: SourceSpec = field(default_factory=_default_medallists)
    medals: SourceSpec = field(default_factory=_default_medals)

    def source(self, table: str) -> SourceSpec:
        if table not in {"athletes", "medallists", "medals"}:
            raise KeyError(f"Unknown source table {table!r}")
        return getattr(self, table)

    @classmethod
    def load(cls, path: Path) -> "SourceProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        defaults = cls()
        return cls(
            athletes=defaults.athletes.merged(data.get("athletes", {})),
            medallists=defaults.medallists.merged(data.get("medallists", {})),
            medals=defaults.medals.merged(data.get("medals", {})),
        )

    def save(self, path: Path) -> None:
        payload = {
            "athletes": self.athletes.to_payload(),
            "medallists": self.medallists.to_payload(),
            "medals": self.medals.to_payload(),
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
