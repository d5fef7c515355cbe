"""Configuration helpers for country aliases and view settings."""

from .countries import COUNTRY_ALIASES, DEFAULT_ALIASER, CountryAliaser
from .views import VIEW_NAMES, ViewSettings, get_settings, iter_settings

__all__ = [
    "COUNTRY_ALIASES",
    "DEFAULT_ALIASER",
    "CountryAliaser",
    "VIEW_NAMES",
    "ViewSettings",
    "get_settings",
    "iter_settings",
]
