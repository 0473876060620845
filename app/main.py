"""oracle-core: FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI

from app.admin import setup_admin
from app.api import oracle, sessions
from app.infra.config import settings
from app.infra.db import init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("oracle-core")

try:
    __version__ = version("oracle-core")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
    try:
        await init_db()
    except Exception:
        logger.warning(
            "Could not create history tables. "
            "Apply migrations with `alembic upgrade head`.",
            exc_info=True,
        )
    yield


app = FastAPI(
    title="oracle-core",
    description="Procedural oracle engine for solo tabletop play",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(oracle.router)
app.include_router(sessions.router)

setup_admin(app)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "engine": "oracle-core", "version": __version__}


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.app_debug)
