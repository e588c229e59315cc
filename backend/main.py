"""
DB Explorer — generic REST CRUD over relational tables.
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import health, tables
from config import settings
from core.catalog import build_catalog
from core.db_connector import Database, create_engine_from_url
from core.errors import CatalogError, ExplorerError
from core.explorer import Explorer

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("db_explorer")

SUPPORTED_METHODS = {"GET", "PUT", "POST", "DELETE"}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder({"error": message}))


async def explorer_error_handler(request: Request, exc: ExplorerError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unmatched path shapes (404) and known verbs on the wrong shape (405) both mean no such table route
    if exc.status_code in (404, 405) and request.method in SUPPORTED_METHODS:
        return error_response(404, "unknown table")
    if exc.status_code == 405:
        return error_response(405, "unsupported method")
    return error_response(exc.status_code, str(exc.detail))


def create_app(database_url: Optional[str] = None) -> FastAPI:
    url = database_url or settings.DATABASE_URL

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("DB Explorer starting up…")
        try:
            engine = create_engine_from_url(url, echo=settings.SQL_ECHO)
        except ValueError as e:
            raise CatalogError(str(e)) from e
        try:
            db = Database(engine)
            catalog = build_catalog(db)
            app.state.explorer = Explorer(
                db, catalog, empty_list_not_found=settings.EMPTY_LIST_NOT_FOUND,
            )
            logger.info("Serving %d tables: %s", len(catalog.tables), ", ".join(catalog.tables))
            yield
        finally:
            engine.dispose()
            logger.info("DB Explorer shutting down.")

    app = FastAPI(
        title="DB Explorer",
        description="Generic REST CRUD API over the tables of a relational database.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/_docs",
        redoc_url=None,
        openapi_url="/_openapi.json",
    )

    # ── CORS ──────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ────────────────────────────────────────────────────────────────
    app.add_exception_handler(ExplorerError, explorer_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(tables.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT, log_level=settings.LOG_LEVEL.lower())
