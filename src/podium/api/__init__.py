"""REST API serving render-ready Olympic views."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from dataclasses import asdict

from podium.api.schemas import (
    ChoroplethViewResponse,
    FlowViewResponse,
    HeatmapViewResponse,
    ViewSummaryResponse,
)
from podium.config import VIEW_NAMES, iter_settings
from podium.config_loader import SourceProfile
from podium.ingest import SourceLoadError
from podium.views import AnyView, export_view_to_csv, load_view


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "PODIUM_DATA_DIR"


def _default_data_dir() -> Path:
    return Path(os.environ.get(DATA_DIR_ENV, "data"))


def create_app(data_dir: Path | None = None, profile: SourceProfile | None = None) -> FastAPI:
    app = FastAPI(title="podium views")
    app.state.data_dir = data_dir or _default_data_dir()
    app.state.profile = profile or SourceProfile()

    def compute(view: str, top_k: int | None = None) -> AnyView:
        # Every request reads its own copy of the source files.
        try:
            return load_view(
                view,
                app.state.data_dir,
                profile=app.state.profile,
                top_k=top_k,
            )
        except SourceLoadError as exc:
            logger.warning("Failed to load %s view: %s", view, exc)
            status = 404 if exc.missing else 422
            raise HTTPException(status_code=status, detail=str(exc)) from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/views", response_model=list[ViewSummaryResponse])
    async def list_views() -> list[ViewSummaryResponse]:
        return [ViewSummaryResponse(**asdict(settings)) for settings in iter_settings()]

    @app.get("/views/flow", response_model=FlowViewResponse)
    async def flow_view(top_k: int | None = Query(None, ge=1)) -> FlowViewResponse:
        view = compute("flow", top_k)
        return FlowViewResponse.model_validate(asdict(view))

    @app.get("/views/heatmap", response_model=HeatmapViewResponse)
    async def heatmap_view(top_k: int | None = Query(None, ge=1)) -> HeatmapViewResponse:
        view = compute("heatmap", top_k)
        return HeatmapViewResponse.model_validate(asdict(view))

    @app.get("/views/choropleth", response_model=ChoroplethViewResponse)
    async def choropleth_view(feature: list[str] | None = Query(None)) -> ChoroplethViewResponse:
        view = compute("choropleth")
        return ChoroplethViewResponse(counts=view.counts, fill=view.fill(feature or []))

    @app.get("/views/{name}/export")
    async def export_view(name: str, top_k: int | None = Query(None, ge=1)) -> Response:
        if name not in VIEW_NAMES:
            raise HTTPException(status_code=404, detail=f"Unknown view {name!r}")
        csv_text = export_view_to_csv(compute(name, top_k))
        headers = {"Content-Disposition": f'attachment; filename="{name}.csv"'}
        return Response(content=csv_text, media_type="text/csv", headers=headers)

    return app
