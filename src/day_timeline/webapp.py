"""FastAPI application that exposes a local web UI and API for the activity log."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from .config import TimelineSettings
from .logfile import append_entry
from .parser import ParseError
from .presentation import report_payload
from .timeline import Clock, load_report

logger = logging.getLogger(__name__)


class LogEntryPayload(BaseModel):
    name: str = ""

    model_config = ConfigDict(extra="forbid")


def create_app(
    *,
    settings: Optional[TimelineSettings] = None,
    clock: Clock = datetime.now,
) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or TimelineSettings()

    app = FastAPI(title="Day Timeline", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.log_path = Path(resolved_settings.log_path)
    app.state.clock = clock
    logger.info("Serving timeline for %s", app.state.log_path)

    static_dir = Path(resolved_settings.static_dir)
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        log_path: Path = request.app.state.log_path
        return {
            "log_path": str(log_path),
            "log_exists": log_path.exists(),
        }

    @app.get("/api/report")
    def report(request: Request) -> Dict[str, Any]:
        state = request.app.state
        try:
            loaded = load_report(state.log_path, state.clock)
        except ParseError as exc:
            logger.error("Cannot render %s: %s", state.log_path, exc)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        except OSError as exc:
            logger.exception("Failed to read %s", state.log_path)
            raise HTTPException(status_code=500, detail="Failed to read log file.") from exc
        return report_payload(loaded, state.clock)

    @app.post("/api/log")
    def log_entry(payload: LogEntryPayload, request: Request) -> Dict[str, Any]:
        state = request.app.state
        try:
            event = append_entry(state.log_path, payload.name, state.clock)
        except OSError as exc:
            logger.exception("Failed to append to %s", state.log_path)
            raise HTTPException(status_code=500, detail="Failed to write log file.") from exc
        return {"name": event.name, "start": event.start.isoformat()}

    @app.get("/")
    def index():
        index_path = (static_dir / "index.html").resolve()
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="UI not found")
        return FileResponse(index_path)

    return app
