import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hospital_forms.api import appointments, contact, health, health_packages
from hospital_forms.core.config import Settings, get_settings, settings
from hospital_forms.core.errors import register_exception_handlers
from hospital_forms.core.logging import setup_logging, get_logger, CorrelationIdMiddleware
from hospital_forms.services.forms import INTAKE_SCHEMAS
from hospital_forms.services.intake import IntakeHandler
from hospital_forms.services.mailer import Mailer, SMTPMailer
from hospital_forms.services.store import SubmissionStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    mailer = app.state.mailer
    verify = getattr(mailer, "verify", None)
    if app.state.settings.SMTP_VERIFY_ON_STARTUP and verify is not None:
        # Vérification non bloquante, uniquement pour les logs
        asyncio.get_running_loop().run_in_executor(None, verify)
    logger.info("Hospital forms API starting up", intakes=sorted(app.state.intake_handlers))
    yield
    logger.info("Hospital forms API shutting down")


def create_app(settings: Optional[Settings] = None, mailer: Optional[Mailer] = None) -> FastAPI:
    settings = settings or get_settings()
    mailer = mailer or SMTPMailer(settings)

    app = FastAPI(
        title="Apex Hospital Forms API",
        description="Rendez-vous, contact et demandes de bilans de santé du site de l'hôpital",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Un store par formulaire, vide à chaque démarrage
    app.state.settings = settings
    app.state.mailer = mailer
    app.state.stores = {kind: SubmissionStore(kind) for kind in INTAKE_SCHEMAS}
    app.state.intake_handlers = {
        kind: IntakeHandler(schema, app.state.stores[kind], mailer, settings)
        for kind, schema in INTAKE_SCHEMAS.items()
    }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_list(),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With", "Accept", "Origin"],
        expose_headers=["X-Correlation-ID"],
        max_age=86400,
    )

    app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(app, settings)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(appointments.router, prefix="/api/appointments", tags=["appointments"])
    app.include_router(contact.router, prefix="/api/contact", tags=["contact"])
    app.include_router(health_packages.router, prefix="/api/health-packages", tags=["health-packages"])
    return app


setup_logging(settings.LOG_LEVEL)

app = create_app()
