"""Record types shared across ingestion, pipeline and view layers."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PersonRecord(BaseModel):
    """One row of an input table. Every field may be missing."""

    name: Optional[str] = None
    country: Optional[str] = None
    country_long: Optional[str] = None
    discipline: Optional[str] = None
    medal_type: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Optional[str]], mapping: Mapping[str, str]) -> "PersonRecord":
        def extract(spec: Optional[str | Sequence[str]]) -> Optional[str]:
            if spec is None:
                return None
            if isinstance(spec, str):
                value = row.get(spec)
                value = value.strip() if value is not None else ""
                return value or None
            parts = [(row.get(col) or "").strip() for col in spec]
            joined = " ".join(part for part in parts if part)
            return joined or None

        def parse_spec(key: str) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key)
            if spec is None:
                return None
            if "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        return cls(**{field: extract(parse_spec(field)) for field in cls.model_fields})


class JoinedRecord(BaseModel):
    """A medal row whose athlete was resolved to a country."""

    country: str
    discipline: Optional[str] = None
    medal: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AggregateEntry(BaseModel):
    key: Union[str, Tuple[str, str]]
    count: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)
