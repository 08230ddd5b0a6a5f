# hospital_forms/services/intake.py
"""Workflow commun des formulaires : validation, stockage, notifications.

Un seul handler, paramétré par un `IntakeSchema` (modèle pydantic d'entrée,
templates, sujets d'email). Les trois formulaires du site en sont des
instances (voir `hospital_forms.services.forms`).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Type
from uuid import uuid4

from pydantic import ValidationError as PayloadError

from hospital_forms.core.config import Settings
from hospital_forms.core.errors import InternalError, RequestError, ValidationError
from hospital_forms.core.logging import get_logger
from hospital_forms.schemas.payloads import FORMAT_ERROR_TYPES, IntakePayload
from hospital_forms.schemas.submissions import (
    IntakeDiagnostics,
    IntakeStatus,
    SubmissionRecord,
)
from hospital_forms.services.mailer import Mailer
from hospital_forms.services.notifications import (
    NotificationReport,
    OutgoingEmail,
    dispatch_notifications,
)
from hospital_forms.services.store import SubmissionStore
from hospital_forms.services.templates import render_email

logger = get_logger(__name__)

EmailStatus = Literal["sent", "partial", "failed", "disabled"]


@dataclass(frozen=True)
class IntakeSchema:
    kind: str
    label: str
    id_field: str
    payload_model: Type[IntakePayload]
    record_model: Type[SubmissionRecord]
    initial_status: str
    admin_template: str
    user_template: str
    admin_subject: Callable[[Any, Settings], str]
    user_subject: Callable[[Any, Settings], str]
    submitted_message: str
    failure_message: str


@dataclass
class SubmissionResult:
    schema: IntakeSchema
    record: SubmissionRecord
    email_status: EmailStatus
    message: str
    warning: Optional[str] = None
    notifications: Optional[NotificationReport] = field(default=None, repr=False)

    def to_response(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "success": True,
            "message": self.message,
            self.schema.id_field: self.record.id,
            "emailStatus": self.email_status,
        }
        if self.warning:
            body["warning"] = self.warning
        return body


def new_submission_id() -> str:
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _error_field(error: Dict[str, Any]) -> str:
    return str(error["loc"][0]) if error["loc"] else "body"


def to_validation_error(exc: PayloadError) -> ValidationError:
    """Traduit les erreurs pydantic : les champs manquants d'abord, seuls."""
    errors = exc.errors()
    missing = [_error_field(error) for error in errors if error["type"] == "missing"]
    if missing:
        return ValidationError(f"Missing required field(s): {', '.join(missing)}", missing)

    fields: List[str] = []
    messages: List[str] = []
    for error in errors:
        name = _error_field(error)
        if name in fields:
            continue
        fields.append(name)
        if error["type"] in FORMAT_ERROR_TYPES:
            messages.append(error["msg"])
        else:
            messages.append(f"Please provide a valid {name}.")
    return ValidationError(" ".join(messages), fields)


def validate_payload(schema: IntakeSchema, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Valide le corps via le modèle pydantic du formulaire.

    Renvoie les champs normalisés (noms d'attributs). Lève `ValidationError`
    sans aucun effet de bord.
    """
    try:
        submission = schema.payload_model.model_validate(dict(payload))
    except PayloadError as exc:
        raise to_validation_error(exc) from exc
    return submission.model_dump()


class IntakeHandler:
    def __init__(
        self,
        schema: IntakeSchema,
        store: SubmissionStore,
        mailer: Mailer,
        settings: Settings,
        id_factory: Callable[[], str] = new_submission_id,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.schema = schema
        self.store = store
        self.mailer = mailer
        self.settings = settings
        self.id_factory = id_factory
        self.clock = clock

    def submit(self, payload: Any) -> SubmissionResult:
        if not isinstance(payload, Mapping):
            raise RequestError("Request body must be a JSON object.")

        try:
            clean = validate_payload(self.schema, payload)
        except ValidationError as exc:
            logger.info("Submission rejected", intake=self.schema.kind, fields=exc.fields)
            raise

        try:
            record = self.schema.record_model(
                id=self.id_factory(),
                status=self.schema.initial_status,
                created_at=self.clock(),
                **clean,
            )
            total = self.store.append(record)
        except Exception as exc:
            logger.exception("Submission storage failed", intake=self.schema.kind)
            raise InternalError(self.schema.failure_message, detail=str(exc)) from exc

        logger.info("Submission stored", intake=self.schema.kind, id=record.id, total=total)

        report = dispatch_notifications(
            self.mailer,
            admin=OutgoingEmail(
                role="admin",
                to=self.settings.ADMIN_EMAIL,
                subject=self.schema.admin_subject(record, self.settings),
                render=lambda: render_email(self.schema.admin_template, self.settings, record=record),
            ),
            user=OutgoingEmail(
                role="user",
                to=record.email,
                subject=self.schema.user_subject(record, self.settings),
                render=lambda: render_email(self.schema.user_template, self.settings, record=record),
            ),
            intake=self.schema.kind,
            id=record.id,
        )
        return self.compose_result(record, report)

    def compose_result(self, record: SubmissionRecord, report: NotificationReport) -> SubmissionResult:
        base = self.schema.submitted_message

        if not report.transport_configured:
            return SubmissionResult(
                self.schema, record, "disabled",
                f"{base} (Email notifications are currently unavailable)",
                notifications=report,
            )

        if report.user.sent and report.admin.sent:
            return SubmissionResult(
                self.schema, record, "sent",
                f"{base} Confirmation email sent.",
                notifications=report,
            )

        if report.user.sent:
            return SubmissionResult(
                self.schema, record, "partial",
                f"{base} Confirmation email sent to you.",
                notifications=report,
            )

        failures = []
        if report.admin.failed:
            failures.append("Failed to send admin notification")
        failures.append("Failed to send confirmation email")
        return SubmissionResult(
            self.schema, record, "failed",
            f"{base} We will contact you soon.",
            warning="; ".join(failures),
            notifications=report,
        )

    def status(self) -> IntakeStatus:
        last = self.store.last()
        return IntakeStatus(
            message=f"{self.schema.label} API is working",
            total=self.store.count(),
            last_submitted_at=last.created_at if last else None,
        )

    def diagnostics(self) -> IntakeDiagnostics:
        return IntakeDiagnostics(
            status=f"{self.schema.label} API is working",
            timestamp=self.clock(),
            total=self.store.count(),
            email_configured=bool(self.mailer.is_configured),
            admin_email=bool(self.settings.ADMIN_EMAIL),
        )
