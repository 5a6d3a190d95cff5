from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from cwa_weather.api import routes
from cwa_weather.config import get_settings
from cwa_weather.middleware.request_tracker import RequestTrackerMiddleware
from cwa_weather.schemas.responses import ErrorResponse
from cwa_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

NOT_FOUND_MESSAGE = "Path not found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting CWA Weather Proxy API...",
        extra={"environment": settings.environment, "port": settings.port},
    )
    if not settings.cwa_api_key:
        logger.warning("CWA_API_KEY is not set, weather lookups will fail")

    app.state.http_client = httpx.AsyncClient(timeout=settings.cwa_api_timeout)

    yield

    logger.info("Shutting down CWA Weather Proxy API...")
    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(
    app, endpoint="/prometheus-metrics", include_in_schema=False
)

app.include_router(routes.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        error = NOT_FOUND_MESSAGE
    else:
        error = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=error).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


def run():
    uvicorn.run(
        "cwa_weather.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
