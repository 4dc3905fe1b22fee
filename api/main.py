"""
FastAPI application entry point.

Run with: uvicorn main:app  (from the `api/` directory), or `python main.py`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from albums import service as album_service
from albums.cache import AlbumCache
from albums.repository import AlbumStore
from albums.router import router as albums_router
from core import config, db

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Any failure here is fatal: uvicorn will refuse to start serving.
    try:
        cfg = config.load_config()
        await db.init_client(cfg.uri)
        await db.ping()
        logger.info("mongo_ping_ok database=%s", config.database_name())

        store = AlbumStore(db.collection(config.database_name(), config.collection_name()))
        cache = AlbumCache()
        await album_service.load_albums(store, cache)
    except Exception:
        logger.exception("startup_failed")
        try:
            await db.close_client()
        except Exception:
            # The startup error above is the one that must propagate.
            logger.exception("mongo_close_failed")
        raise

    app.state.album_store = store
    app.state.album_cache = cache
    try:
        yield
    finally:
        await db.close_client()


app = FastAPI(title="Album Service API", lifespan=lifespan)

app.include_router(albums_router, tags=["albums"])


@app.exception_handler(album_service.AlbumError)
async def handle_album_error(_: Request, exc: album_service.AlbumError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("invalid_payload path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": album_service.INVALID_PAYLOAD_MESSAGE},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "album service api"}


if __name__ == "__main__":
    uvicorn.run(app, host=config.host(), port=config.port())
