from app.api.router import router as api_router
from app.core.config import get_analytics_config
from app.dependencies.container import database, lifespan
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from shared.utils.errors import AuthenticationError, SeriesTypeMismatchError, WellnessException
from shared.utils.logger import get_logger
from shared.utils.logging_config import log_error_with_context, setup_logging

config = get_analytics_config()
setup_logging(config.service_name, log_level=config.log_level, json_logs=config.json_logs)
logger = get_logger(__name__)

app = FastAPI(
    title="Wellness Analytics",
    description="Participation, completion and engagement statistics with audit reports.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WellnessException)
async def wellness_exception_handler(request: Request, exc: WellnessException) -> JSONResponse:
    if isinstance(exc, SeriesTypeMismatchError):
        log_error_with_context(logger, exc, {"path": request.url.path, **exc.details})
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, **exc.details},
        headers=headers,
    )


app.include_router(api_router)


@app.get("/")
async def root() -> dict:
    return {
        "service": config.service_name,
        "status": "operational",
        "docs": "/docs",
    }


@app.get("/health", tags=["health"])
async def health() -> dict:
    return {
        "status": "healthy",
        "service": config.service_name,
        "version": "0.1.0",
        "database": database.status(),
    }


@app.get("/metrics", tags=["health"])
async def metrics() -> PlainTextResponse:
    return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.service_port, log_level=config.log_level.lower())
