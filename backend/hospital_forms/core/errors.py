# hospital_forms/core/errors.py
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hospital_forms.core.config import Settings
from hospital_forms.core.logging import get_logger

logger = get_logger(__name__)


class IntakeError(Exception):
    """Base des erreurs du workflow de soumission."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(IntakeError):
    """Champs manquants ou mal formés : corrigible par l'appelant."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, fields: List[str]):
        super().__init__(message)
        self.fields = list(fields)


class RequestError(IntakeError):
    """Corps de requête illisible (JSON invalide ou non-objet)."""

    status_code = status.HTTP_400_BAD_REQUEST


class TransportUnavailable(IntakeError):
    """Transport SMTP non configuré. Jamais exposé à l'appelant."""


class NotificationFailure(IntakeError):
    """Échec d'un envoi alors que le transport était configuré."""


class InternalError(IntakeError):
    """Faute inattendue pendant la construction ou le stockage d'un enregistrement."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail


def _error_body(error: str, **extra) -> dict:
    body = {"success": False, "error": error}
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, fields=exc.fields),
        )

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError):
        details = exc.detail if settings.is_development else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, details=details),
        )

    # Ce handler est servi par ServerErrorMiddleware, en dehors de
    # CorrelationIdMiddleware : l'en-tête est reposé depuis request.state
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        correlation_id = getattr(request.state, "correlation_id", None)
        logger.error(
            "Unhandled error",
            path=request.url.path,
            correlation_id=correlation_id,
            exc_info=exc,
        )
        details = str(exc) if settings.is_development else None
        headers = {"X-Correlation-ID": correlation_id} if correlation_id else None
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error", details=details),
            headers=headers,
        )
