"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.api.endpoints import health
from app.core.config import get_settings
from app.core.exceptions import StoreError
from app.db.session import create_tables, engine

settings = get_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create missing tables if enabled; shutdown: dispose the pool."""
    if settings.create_tables:
        await create_tables()
    logger.info("%s starting (environment=%s)", settings.app_name, settings.environment)
    yield
    await engine.dispose()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("[API] %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 with the same {"error": ...} body as every other failure."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning("[API] %s %s rejected: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=422, content={"error": f"Invalid request: {details}"})


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow everything in debug, localhost in development, CORS_ORIGINS otherwise
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("[API] %s %s", request.method, request.url.path)
        return await call_next(request)

    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/")
    def root():
        return {
            "message": "Fitness Tracker REST API",
            "endpoints": [
                f"{settings.api_prefix}/{name}"
                for name in ("workouts", "musclegroups", "nutrition", "recovery", "equipment")
            ],
        }

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
    )
