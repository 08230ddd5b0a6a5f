# hospital_forms/services/mailer.py
"""Transport SMTP pour les emails transactionnels.

Le reste du code ne voit que `send(to=..., subject=..., html=...)` ;
la configuration (hôte, port, sécurité, identifiants) vient des Settings.
"""
from __future__ import annotations

import smtplib
import ssl
from email.message import EmailMessage
from typing import Protocol

from hospital_forms.core.config import Settings
from hospital_forms.core.errors import NotificationFailure, TransportUnavailable
from hospital_forms.core.logging import get_logger
from hospital_forms.utils.formatting import html_to_text

logger = get_logger(__name__)


class Mailer(Protocol):
    is_configured: bool

    def send(self, *, to: str, subject: str, html: str) -> None: ...


class SMTPMailer:
    def __init__(self, settings: Settings):
        self.host = settings.SMTP_HOST
        self.port = settings.SMTP_PORT
        self.security = settings.smtp_security()
        self.user = settings.SMTP_USER
        self.password = settings.SMTP_PASS
        self.sender = settings.SMTP_FROM or settings.SMTP_USER
        self.timeout = settings.SMTP_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.user and self.password)

    def _connect(self) -> smtplib.SMTP:
        if self.security == "ssl":
            context = ssl.create_default_context()
            client = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        else:
            client = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            if self.security == "starttls":
                client.starttls(context=ssl.create_default_context())
        try:
            client.login(self.user, self.password)
        except BaseException:
            client.close()
            raise
        return client

    def send(self, *, to: str, subject: str, html: str) -> None:
        if not self.is_configured:
            raise TransportUnavailable("SMTP_USER/SMTP_PASS are not configured")

        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = to
        # un en-tête ne peut pas contenir de retour à la ligne
        msg["Subject"] = " ".join(subject.split())
        msg.set_content(html_to_text(html))
        msg.add_alternative(html, subtype="html")

        try:
            with self._connect() as client:
                client.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationFailure(f"SMTP send to {to} failed: {exc}") from exc

    def verify(self) -> bool:
        """Ouvre et authentifie une connexion pour les logs ; ne lève jamais."""
        if not self.is_configured:
            logger.warning("SMTP transport not configured, email notifications disabled")
            return False
        try:
            with self._connect() as client:
                client.noop()
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP verify failed", host=self.host, port=self.port, error=str(exc))
            return False
        logger.info("SMTP transporter ready", host=self.host, port=self.port, security=self.security)
        return True
