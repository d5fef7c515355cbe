"""Athlete name keys used to join tables that store names in different orders."""

from __future__ import annotations

from typing import Callable, Optional

from podium.models import PersonRecord


def normalize_name(name: str, reversed: bool = False) -> str:
    """Reduce a full name to a lowercase ``"first last"`` join key.

    Only the first two whitespace-separated tokens are used. With
    ``reversed`` the source is read as ``"LAST First"`` and flipped. A single
    token is returned lowercased as-is, so mononyms can collide.
    """

    tokens = name.split()
    if len(tokens) < 2:
        return tokens[0].lower() if tokens else ""
    first, second = tokens[0], tokens[1]
    if reversed:
        first, second = second, first
    return f"{first} {second}".lower()


def name_key(reversed: bool = False) -> Callable[[PersonRecord], Optional[str]]:
    """Build a row key function; rows without a usable name map to ``None``."""

    def key(row: PersonRecord) -> Optional[str]:
        if not row.name:
            return None
        return normalize_name(row.name, reversed) or None

    return key
