"""Flow diagram edges: country to discipline to medal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from podium.config.countries import CountryAliaser
from podium.config.views import get_settings
from podium.ingest import SourceTable
from podium.pipeline import aggregate, by_country, by_discipline, by_medal

from .common import join_tables, narrow


@dataclass(frozen=True)
class FlowEdge:
    source: str
    target: str
    weight: int


@dataclass(frozen=True)
class FlowView:
    """Edge list for a Sankey-style diagram plus its distinct node names."""

    nodes: List[str]
    edges: List[FlowEdge]


def _nodes(edges: List[FlowEdge]) -> List[str]:
    seen: dict[str, None] = {}
    for edge in edges:
        seen.setdefault(edge.source, None)
        seen.setdefault(edge.target, None)
    return list(seen)


def compute_flow_view(
    roster: SourceTable,
    medals: SourceTable,
    *,
    aliaser: CountryAliaser | None = None,
    top_k: int | None = None,
) -> FlowView:
    """Build country->discipline and discipline->medal edges.

    Both edge groups are counted from the same records, narrowed to the top
    ``top_k`` countries and disciplines.
    """

    k = top_k if top_k is not None else get_settings("flow").top_k or 0
    records = join_tables(roster, medals, aliaser=aliaser)
    _, _, kept = narrow(records, k)

    edges: List[FlowEdge] = []
    for dim1, dim2 in ((by_country, by_discipline), (by_discipline, by_medal)):
        for entry in aggregate(kept, dim1, dim2):
            source, target = entry.key
            edges.append(FlowEdge(source=source, target=target, weight=entry.count))
    return FlowView(nodes=_nodes(edges), edges=edges)
