"""FastAPI application factory for the notifier.

The notifier domain must already be initialized (see ``src/app.py``). Each
request runs inside the notifier's Protean domain context.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from notifier.api.routes import router as notifications_router
from notifier.config import NotifierSettings, get_settings
from notifier.domain import notifier
from notifier.service import NotificationService
from notifier.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


def create_app(settings: NotifierSettings | None = None, service: NotificationService | None = None) -> FastAPI:
    """Build the application.

    ``service`` may be passed in pre-built (tests inject fake channels and a
    static resolver); otherwise it is assembled from ``settings``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        nonlocal service
        with notifier.domain_context():
            if service is None:
                service = NotificationService.from_settings(notifier, settings)
            if settings.SEED_NOTIFICATION_TYPES:
                service.seed_types()
        app.state.notifications = service

        logger.info("Notifier started", site=settings.SITE_NAME, email_backend=settings.EMAIL_BACKEND)
        yield

        await service.drain()
        logger.info("Notifier stopped")

    app = FastAPI(
        title="Notifier API",
        description="Storefront notification inbox and delivery preferences",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the notifier's Protean domain context for each request."""
        add_context(path=request.url.path, user_id=request.headers.get("X-User-Id"))
        try:
            with notifier.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    # ---------------------------------------------------------------------------
    # Error translation
    # ---------------------------------------------------------------------------
    @app.exception_handler(ObjectNotFoundError)
    async def not_found_handler(request: Request, exc: ObjectNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": exc.messages})

    # ---------------------------------------------------------------------------
    # Routers
    # ---------------------------------------------------------------------------
    app.include_router(notifications_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": notifier.name})

    return app

