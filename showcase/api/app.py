import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from typing import Optional

from ..config import Settings, settings as default_settings
from ..database.database import Database
from ..exceptions import PersistenceError
from .endpoints import artists_router, artworks_router, exhibitions_router

logger = logging.getLogger(__name__)

def create_app(database: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the REST API over ``database``, or over the configured database URL"""
    settings = settings or default_settings
    if database is None:
        database = Database(settings.database_url, echo=settings.echo_sql)

    app = FastAPI(title="Art Showcase")
    app.state.database = database

    for router in (artists_router, artworks_router, exhibitions_router):
        app.include_router(router, prefix=settings.api_prefix)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} {exc.details}")
        return JSONResponse(status_code=503, content={"detail": exc.message})

    return app
