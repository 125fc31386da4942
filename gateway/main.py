"""
Provider Gateway - Main Application
Chat completions, text uploads to object storage, and a composed health check
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gateway.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from gateway.api.routes import router
from gateway.config import Settings, get_settings, resolve_config_file
from gateway.errors import GatewayError
from gateway.services.clients import Clients, build_clients
from gateway.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application startup and shutdown"""
    settings: Settings = app.state.settings

    logger.info("=" * 70)
    logger.info(f"Starting {settings.app_name} v{settings.version}")
    logger.info(f"Environment: {settings.environment}")
    config_file = resolve_config_file()
    if config_file is None:
        logger.info("Config file not found, using defaults and environment variables")
    else:
        logger.info(f"Config file: {config_file}")
    logger.info(f"Configuration loaded: Port={settings.port}, Storage endpoint={settings.storage_endpoint}")
    logger.info("=" * 70)

    owns_clients = app.state.clients is None
    if owns_clients:
        app.state.clients = build_clients(settings)

    yield

    logger.info("Shutting down application...")
    clients: Clients = app.state.clients
    if owns_clients and clients.completion is not None:
        await clients.completion.close()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None, clients: Optional[Clients] = None) -> FastAPI:
    """Build the application; injected clients skip construction at startup."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Chat completions and object storage uploads behind one API",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.clients = clients

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )

    app.include_router(router)

    @app.get("/")
    async def root():
        return {
            "service": settings.app_name,
            "version": settings.version,
            "environment": settings.environment,
            "status": "operational",
        }

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error" if settings.is_production() else str(exc),
                "type": "internal_error",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gateway.main:app",
        host=settings.host,
        port=int(settings.port),
        reload=settings.environment == "development",
    )
