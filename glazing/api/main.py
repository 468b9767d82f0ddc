"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from glazing.api.routes import router
from glazing.config import settings


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        description="Parametric dimensioning for secondary glazing inserts",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
