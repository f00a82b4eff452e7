import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from alias_shortener.config import settings
from alias_shortener.dependencies import get_logger
from alias_shortener.api.v1 import urls, redirect
from alias_shortener.schemas.url import Response
from alias_shortener.storage.errors import StorageUnavailableError

logger = get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Short aliases for long URLs, with redirects",
    debug=settings.environment == "local"
)


@app.exception_handler(StorageUnavailableError)
def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    """Backend failures become a generic 500; details stay in the logs"""
    logger.error("storage unavailable", extra={"op": exc.op, "error": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=Response.failure("internal error").model_dump(exclude_none=True),
    )


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(urls.router)
app.include_router(redirect.router)

logger.info(
    "application configured",
    extra={"environment": settings.environment, "storage_backend": settings.storage_backend},
)
logger.debug("debug messages are enabled")


if __name__ == "__main__":
    logger.info("starting server", extra={"address": f"{settings.host}:{settings.port}"})
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.http_idle_timeout,
        timeout_graceful_shutdown=settings.http_timeout,
    )
    logger.info("server stopped")
