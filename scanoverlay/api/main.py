"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scanoverlay.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Room Measurement Overlay",
        description="Scan-to-model alignment and measurement overlay engine",
        version="0.1.0",
    )

    # CORS, the viewer is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
