from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from shortlink_app.config import settings
from shortlink_app.dependencies import get_url_service
from shortlink_app.exceptions import PersistenceError
from shortlink_app.services.url_service import URLService
from shortlink_app.logging_config import configure_logging
from shortlink_app.api import urls, redirect

logger = configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the store before the first request, flush it on shutdown"""
    provider = app.dependency_overrides.get(get_url_service, get_url_service)
    store = provider().store
    logger.info("Serving %d short links at %s", len(store), settings.base_url)

    yield

    try:
        store.close()
    except PersistenceError:
        logger.exception("Final snapshot flush failed")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener backed by a durable JSON snapshot",
    debug=settings.debug,
    lifespan=lifespan
)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


# Service paths carry a character outside the code alphabet so they can
# never shadow a short code
@app.get("/_health")
def health_check(url_service: URLService = Depends(get_url_service)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "links": len(url_service.store)
    }




######## Include routers
# Redirect router goes last: its "/{short_code}" route matches everything
app.include_router(urls.router)
app.include_router(redirect.router)
