"""Flat CSV export of computed views."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Union

from .choropleth import ChoroplethView
from .flow import FlowView
from .heatmap import HeatmapView


AnyView = Union[FlowView, HeatmapView, ChoroplethView]


def export_view_to_csv(view: AnyView) -> str:
    """Serialize a view as CSV: one row per edge, cell or country."""

    buffer = StringIO()
    writer = csv.writer(buffer)

    if isinstance(view, FlowView):
        writer.writerow(("source", "target", "weight"))
        for edge in view.edges:
            writer.writerow((edge.source, edge.target, edge.weight))
    elif isinstance(view, HeatmapView):
        writer.writerow(("row", "col", "value"))
        for cell in view.cells:
            writer.writerow((cell.row, cell.col, cell.value))
    elif isinstance(view, ChoroplethView):
        writer.writerow(("country", "count"))
        for country, count in view.counts.items():
            writer.writerow((country, count))
    else:
        raise TypeError(f"Unsupported view type {type(view).__name__}")

    return buffer.getvalue()


__all__ = [
    "export_view_to_csv",
]
