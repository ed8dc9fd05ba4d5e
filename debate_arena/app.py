"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_exception_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    HOST,
    PORT,
    engine,
    init_db,
    setup_logging,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db(reset=DB_RESET)
    logger.info("Connected to {}", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(title="Debate Arena API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=ALLOWED_CORS_ORIGINS != ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run("debate_arena.app:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
