"""View orchestrators shaping pipeline output for each visualization."""

from .choropleth import ChoroplethView, compute_choropleth_view
from .export import AnyView, export_view_to_csv
from .flow import FlowEdge, FlowView, compute_flow_view
from .heatmap import HeatmapCell, HeatmapView, compute_heatmap_view
from .service import compute_view, load_view, required_tables

__all__ = [
    "AnyView",
    "ChoroplethView",
    "FlowEdge",
    "FlowView",
    "HeatmapCell",
    "HeatmapView",
    "compute_choropleth_view",
    "compute_flow_view",
    "compute_heatmap_view",
    "compute_view",
    "export_view_to_csv",
    "load_view",
    "required_tables",
]
