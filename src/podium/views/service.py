"""Load the tables a view needs and compute it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from podium.config.countries import CountryAliaser
from podium.config.views import get_settings
from podium.config_loader import SourceProfile
from podium.ingest import SourceTable, load_sources

from .choropleth import compute_choropleth_view
from .export import AnyView
from .flow import compute_flow_view
from .heatmap import compute_heatmap_view


logger = logging.getLogger(__name__)


def required_tables(view: str) -> tuple[str, str]:
    settings = get_settings(view)
    return settings.roster, "medals"


def compute_view(
    view: str,
    tables: Mapping[str, SourceTable],
    *,
    aliaser: CountryAliaser | None = None,
    top_k: int | None = None,
) -> AnyView:
    """Run one view's pipeline over already loaded tables."""

    settings = get_settings(view)
    roster_name, medals_name = required_tables(view)
    roster = tables[roster_name]
    medals = tables[medals_name]

    if settings.name == "flow":
        return compute_flow_view(roster, medals, aliaser=aliaser, top_k=top_k)
    if settings.name == "heatmap":
        return compute_heatmap_view(roster, medals, aliaser=aliaser, top_k=top_k)
    return compute_choropleth_view(roster, medals, aliaser=aliaser)


def load_view(
    view: str,
    data_dir: Path,
    *,
    profile: SourceProfile | None = None,
    aliaser: CountryAliaser | None = None,
    top_k: int | None = None,
) -> AnyView:
    """Read the view's source files from ``data_dir`` and compute it.

    Each call reads its own copy of the files. ``SourceLoadError`` propagates
    when a file is missing or unreadable.
    """

    tables = load_sources(data_dir, required_tables(view), profile=profile)
    logger.debug("Computing %s view from %s", view, data_dir)
    return compute_view(view, tables, aliaser=aliaser, top_k=top_k)
