"""HTTP routes exposing the last stats snapshot."""

from __future__ import annotations

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from ptp_stats.reporter.interface import ReportSource

router = APIRouter()


def get_report_source(request: Request) -> ReportSource:
    source: ReportSource | None = getattr(request.app.state, "stats", None)
    if source is None:
        raise RuntimeError("Stats reporter not configured on application state")
    return source


@router.get("/", summary="Flattened counters from the last snapshot")
async def get_report(source: ReportSource = Depends(get_report_source)) -> JSONResponse:
    """Return the bare name -> value mapping of the last snapshot."""
    return JSONResponse(source.report())


@router.get("/health", tags=["system"], summary="Health check")
async def health_check() -> JSONResponse:
    """Return liveness response for uptime monitoring."""
    return JSONResponse({"ok": True, "data": {"status": "healthy"}})


def create_app(source: ReportSource) -> FastAPI:
    """Build the reporting application bound to ``source``."""

    app = FastAPI(title="PTP stats", version="0.1.0")
    app.state.stats = source
    app.include_router(router)
    return app
