"""FastAPI application entry point."""
import logging
import logging.handlers
import time
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from translate_gateway.api.translate import router as translate_router
from translate_gateway.api.webhook import router as webhook_router
from translate_gateway.core.config import Settings, settings as default_settings
from translate_gateway.services.gateway.errors import (
    MALFORMED_BODY_MESSAGE,
    TranslationError,
    resolve_public_message,
    resolve_status_code,
)
from translate_gateway.services.gateway.orchestrator import TranslationOrchestrator
from translate_gateway.services.gateway.registry import ProviderRegistry, build_registry

LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5  # Keep 5 backup files

logger = logging.getLogger(__name__)

_logging_configured = False


def configure_logging(app_settings: Settings) -> None:
    """Configure root logging once per process: console plus optional rotating file."""
    global _logging_configured
    if _logging_configured:
        return

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    level = logging.DEBUG if app_settings.DEBUG else getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if app_settings.LOG_TO_FILE:
        log_dir = Path(app_settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME
        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging configured. Log file: {log_file}")

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _logging_configured = True


def create_app(
    app_settings: Optional[Settings] = None,
    registry: Optional[ProviderRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded settings)
        registry: Provider registry (defaults to one built from the settings)

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or default_settings
    configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Translation gateway dispatching to LLM providers",
        version="1.0.0",
    )
    app.state.settings = app_settings
    app.state.registry = registry if registry is not None else build_registry(app_settings)
    app.state.orchestrator = TranslationOrchestrator(app.state.registry)

    cors_origins = app_settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TranslationError)
    async def translation_error_handler(request: Request, exc: TranslationError):
        """Render translation failures as {"error": <public message>}."""
        return JSONResponse(
            status_code=resolve_status_code(exc),
            content={"error": resolve_public_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render framework HTTP errors (404, 405, body decoding) as {"error": ...}."""
        if exc.status_code == status.HTTP_400_BAD_REQUEST and request.method in ("POST", "PUT", "PATCH"):
            # FastAPI raises 400 when the body cannot be decoded at all
            logger.info(f"Undecodable request body on {request.method} {request.url.path}: {exc.detail}")
            message = MALFORMED_BODY_MESSAGE
        else:
            message = exc.detail if isinstance(exc.detail, str) and exc.detail else "Request failed."
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Reject unparseable or non-object bodies before they reach the orchestrator."""
        logger.info(f"Malformed request body on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": MALFORMED_BODY_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Last-resort handler; never exposes internals to the caller."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error."},
        )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests."""
        start_time = time.time()
        logger.info(f"Request: {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Time: {process_time:.3f}s"
        )
        return response

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint. Reports which providers have credentials, never the credentials."""
        registry: ProviderRegistry = app.state.registry
        return {
            "status": "healthy",
            "default_provider": registry.default_identifier,
            "providers": [
                {"provider": identifier, "configured": provider.is_configured}
                for identifier, provider in registry.providers.items()
            ],
        }

    app.include_router(translate_router)
    app.include_router(webhook_router)

    return app


app = create_app()


def run() -> None:
    """Run the gateway with uvicorn."""
    import uvicorn
    logger.info(f"Webhook listening on {default_settings.PORT}")
    uvicorn.run(
        "translate_gateway.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=False,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
