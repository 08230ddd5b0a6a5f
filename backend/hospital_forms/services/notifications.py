# hospital_forms/services/notifications.py
"""Envoi best-effort des emails admin et utilisateur.

Chaque envoi est isolé : un échec est journalisé et reporté dans le
résultat, jamais relevé vers l'appelant. Les deux envois sont séquentiels.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from hospital_forms.core.errors import TransportUnavailable
from hospital_forms.core.logging import get_logger
from hospital_forms.services.mailer import Mailer

logger = get_logger(__name__)

DeliveryStatus = Literal["sent", "failed", "skipped"]
Role = Literal["admin", "user"]


@dataclass(frozen=True)
class OutgoingEmail:
    role: Role
    to: Optional[str]
    subject: str
    render: Callable[[], str]


@dataclass(frozen=True)
class DeliveryOutcome:
    role: Role
    status: DeliveryStatus
    error: Optional[str] = None

    @property
    def sent(self) -> bool:
        return self.status == "sent"

    @property
    def failed(self) -> bool:
        return self.status == "failed"


@dataclass(frozen=True)
class NotificationReport:
    transport_configured: bool
    admin: DeliveryOutcome
    user: DeliveryOutcome


def deliver(mailer: Mailer, email: OutgoingEmail, **log_context) -> DeliveryOutcome:
    if not mailer.is_configured or not email.to:
        logger.info("Email skipped", role=email.role, **log_context)
        return DeliveryOutcome(email.role, "skipped")

    try:
        html = email.render()
        mailer.send(to=email.to, subject=email.subject, html=html)
    except TransportUnavailable:
        logger.info("Email skipped", role=email.role, **log_context)
        return DeliveryOutcome(email.role, "skipped")
    except Exception as exc:
        logger.error("Email failed", role=email.role, error=str(exc), **log_context)
        return DeliveryOutcome(email.role, "failed", str(exc))

    logger.info("Email sent", role=email.role, **log_context)
    return DeliveryOutcome(email.role, "sent")


def dispatch_notifications(
    mailer: Mailer,
    admin: OutgoingEmail,
    user: OutgoingEmail,
    **log_context,
) -> NotificationReport:
    admin_outcome = deliver(mailer, admin, **log_context)
    user_outcome = deliver(mailer, user, **log_context)
    return NotificationReport(
        transport_configured=bool(mailer.is_configured),
        admin=admin_outcome,
        user=user_outcome,
    )
