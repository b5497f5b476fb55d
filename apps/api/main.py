"""FastAPI application entrypoint for the room escape reservation backend."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.api.routers import members, reservations, themes, times, waitings
from core.config import settings
from core.exceptions import RoomescapeException
from core.logging import get_logger, setup_logging
from db.session import close_db, init_db


setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("Starting %s...", settings.app_name)

    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield

    logger.info("Shutting down %s...", settings.app_name)
    close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.app_name,
    description="Room escape reservations with waiting lists",
    version="1.0.0",
    lifespan=lifespan
)


@app.exception_handler(RoomescapeException)
async def roomescape_exception_handler(request: Request, exc: RoomescapeException):
    logger.warning(
        "Request rejected",
        extra={"error": exc.type.name, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.type.name, "message": exc.type.message},
    )


app.include_router(reservations.router, prefix=settings.api_prefix)
app.include_router(waitings.router, prefix=settings.api_prefix)
app.include_router(themes.router, prefix=settings.api_prefix)
app.include_router(times.router, prefix=settings.api_prefix)
app.include_router(members.router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "app": settings.app_name,
        "status": "healthy",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "apps.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
