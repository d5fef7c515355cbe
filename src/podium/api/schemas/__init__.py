"""Pydantic models for API I/O."""

from .views import (
    ChoroplethViewResponse,
    FlowEdgeResponse,
    FlowViewResponse,
    HeatmapCellResponse,
    HeatmapViewResponse,
    ViewSummaryResponse,
)

__all__ = [
    "ChoroplethViewResponse",
    "FlowEdgeResponse",
    "FlowViewResponse",
    "HeatmapCellResponse",
    "HeatmapViewResponse",
    "ViewSummaryResponse",
]
