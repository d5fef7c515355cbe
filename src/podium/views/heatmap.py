"""Heatmap cells of medal counts per country and discipline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from podium.config.countries import CountryAliaser
from podium.config.views import get_settings
from podium.ingest import SourceTable
from podium.pipeline import aggregate, by_country, by_discipline

from .common import join_tables, narrow


@dataclass(frozen=True)
class HeatmapCell:
    row: str
    col: str
    value: int


@dataclass(frozen=True)
class HeatmapView:
    """Cells plus the row and column order (highest totals first).

    Axes list only countries and disciplines that have at least one cell.
    """

    rows: List[str]
    columns: List[str]
    cells: List[HeatmapCell]


def compute_heatmap_view(
    roster: SourceTable,
    medals: SourceTable,
    *,
    aliaser: CountryAliaser | None = None,
    top_k: int | None = None,
) -> HeatmapView:
    k = top_k if top_k is not None else get_settings("heatmap").top_k or 0
    records = join_tables(roster, medals, aliaser=aliaser)
    countries, disciplines, kept = narrow(records, k)

    cells = [
        HeatmapCell(row=entry.key[0], col=entry.key[1], value=entry.count)
        for entry in aggregate(kept, by_country, by_discipline)
    ]
    used_rows = {cell.row for cell in cells}
    used_columns = {cell.col for cell in cells}
    return HeatmapView(
        rows=[country for country in countries if country in used_rows],
        columns=[discipline for discipline in disciplines if discipline in used_columns],
        cells=cells,
    )
