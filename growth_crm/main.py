import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from .core.config import Settings, settings as default_settings
from .core.database import RecordStore
from .core.logging_config import configure_logging
from .routes import contact, prospects, clients, interactions, dashboard, email, options
from .seeds.sample_data import seed_admin_user, seed_sample_data
from .services.notification_service import NotificationDispatcher, NotificationService
from .services.smtp_service import SMTPService

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError):
    """Flatten pydantic errors into [{field, message}] naming the offending field"""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return errors


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    mailer: Optional[SMTPService] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> FastAPI:
    """
    Build the API around one record store and one notification channel.

    Tests pass their own store, mailer or dispatcher; production uses the
    environment settings and an SMTP mailer.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    store = store or RecordStore()
    notifier = NotificationService(
        mailer or SMTPService.from_settings(settings),
        recipient=settings.NOTIFICATION_EMAIL,
    )
    dispatcher = dispatcher or NotificationDispatcher(notifier)

    if settings.SEED_SAMPLE_DATA:
        with store.session() as db:
            seed_sample_data(db)
            seed_admin_user(db, settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        dispatcher.shutdown(wait=False)
        store.dispose()

    app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.notifier = notifier
    app.state.dispatcher = dispatcher

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    # CORS middleware - MUST be added BEFORE routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check route BEFORE routers
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    # Include routers
    app.include_router(contact.router, prefix="/api", tags=["contact"])
    app.include_router(prospects.router, prefix="/api/prospects", tags=["prospects"])
    app.include_router(clients.router, prefix="/api/clients", tags=["clients"])
    app.include_router(
        interactions.router, prefix="/api/interactions", tags=["interactions"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
    app.include_router(email.router, prefix="/api", tags=["email"])
    app.include_router(options.router, prefix="/api/options", tags=["options"])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report every failed field as a client error"""
        errors = _field_errors(exc)
        logger.info(f"Validation failed for {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "message": "Validation failed",
                "errors": errors,
            },
        )

    # Global exception handler; internal details stay in the log
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "type": "internal_server_error"
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
