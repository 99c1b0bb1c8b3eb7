# prioritykit/main.py

from __future__ import annotations

import logging

from fastapi import FastAPI

from prioritykit.config import setup_json_logging, settings
from prioritykit.api.routes.ideas import router as ideas_router
from prioritykit.api.routes.releases import router as releases_router


def create_app() -> FastAPI:
    setup_json_logging(log_level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO))

    app = FastAPI(
        title="PRIORITYKIT - Prioritization & Release API",
        version="0.1.0",
    )

    app.include_router(ideas_router)
    app.include_router(releases_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
