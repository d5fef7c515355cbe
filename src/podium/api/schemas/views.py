from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class FlowEdgeResponse(BaseModel):
    source: str
    target: str
    weight: int = Field(..., ge=1)


class FlowViewResponse(BaseModel):
    nodes: List[str]
    edges: List[FlowEdgeResponse]


class HeatmapCellResponse(BaseModel):
    row: str
    col: str
    value: int = Field(..., ge=1)


class HeatmapViewResponse(BaseModel):
    rows: List[str]
    columns: List[str]
    cells: List[HeatmapCellResponse]


class ChoroplethViewResponse(BaseModel):
    counts: Dict[str, int]
    fill: Dict[str, Optional[int]] = Field(default_factory=dict)


class ViewSummaryResponse(BaseModel):
    name: str
    top_k: Optional[int] = None
    roster: str
    description: str
