import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncEngine

from rps_api import create_engine, load_secrets
from rps_api.db import build_session_factory
from rps_api.domain.game_rules import InvalidMoveError, MoveGenerator, RandomMoveGenerator
from rps_api.exceptions import StorageUnavailableError
from rps_api.models.schemas import Base
from rps_api.routers import game

logging.basicConfig(level=load_secrets.log_level)


async def invalid_move_handler(request: Request, exc: InvalidMoveError):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "parameter": to_camel(exc.param_name)},
    )


async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


def create_app(
    move_generator: MoveGenerator | None = None, engine: AsyncEngine | None = None
) -> FastAPI:
    """Build the API application.

    Args:
        move_generator (MoveGenerator | None): Source of computer moves, random by default
        engine (AsyncEngine | None): Database engine, the configured one by default

    Returns:
        FastAPI: Application with routes, CORS and error handlers installed
    """
    if engine is None:
        engine = create_engine.engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create missing tables before serving and dispose the engine afterwards."""
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logging.info(f"Start Server (database: {engine.url.render_as_string(hide_password=True)})")
        try:
            yield
        finally:
            await engine.dispose()
            logging.info("Stop Server")

    app = FastAPI(title="Rock-Paper-Scissors API", lifespan=lifespan)
    app.state.move_generator = move_generator or RandomMoveGenerator()
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=load_secrets.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(InvalidMoveError, invalid_move_handler)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)
    app.include_router(game.game_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    return app


app = create_app()


def run():
    uvicorn.run(app, host=load_secrets.server_host, port=load_secrets.server_port)


if __name__ == "__main__":
    run()
