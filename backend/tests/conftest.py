"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient

from hospital_forms.core.config import Settings
from hospital_forms.core.errors import NotificationFailure, TransportUnavailable


class FakeMailer:
    """Mailer en mémoire : enregistre les envois, peut échouer par destinataire."""

    def __init__(self, configured: bool = True, fail_for: tuple = ()):
        self.is_configured = configured
        self.fail_for = set(fail_for)
        self.sent = []

    def send(self, *, to: str, subject: str, html: str) -> None:
        if not self.is_configured:
            raise TransportUnavailable("not configured")
        if to in self.fail_for:
            raise NotificationFailure(f"SMTP send to {to} failed: 550 mailbox unavailable")
        self.sent.append({"to": to, "subject": subject, "html": html})

    def recipients(self) -> list:
        return [item["to"] for item in self.sent]


ADMIN = "ops@apexhospital.test"


@pytest.fixture
def admin_email():
    return ADMIN


@pytest.fixture
def settings():
    """Settings with SMTP credentials and an admin address."""
    return Settings(
        SMTP_USER="mailer@apexhospital.test",
        SMTP_PASS="secret",
        ADMIN_EMAIL=ADMIN,
        SMTP_VERIFY_ON_STARTUP=False,
        ENVIRONMENT="production",
        CORS_ORIGINS="*",
    )


@pytest.fixture
def make_mailer():
    """Factory for FakeMailer instances."""
    return FakeMailer


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def make_client(settings):
    """Build a client around a fresh app (fresh, empty stores)."""
    from main import create_app

    def _make(mailer=None, raise_server_exceptions=True, **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(settings=app_settings, mailer=mailer or FakeMailer())
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)
    return _make


@pytest.fixture
def client(make_client, mailer):
    return make_client(mailer)


@pytest.fixture
def appointment_payload():
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "age": 34,
        "phone": "9876543210",
        "gender": "F",
        "department": "Cardiology",
        "doctor": "Dr. Mehta",
        "date": "2025-03-01",
        "time": "10:00",
    }


@pytest.fixture
def contact_payload():
    return {
        "name": "Ravi",
        "email": "ravi@example.com",
        "subject": "Visiting hours",
        "message": "Hello\nWhat are the visiting hours?",
    }


@pytest.fixture
def inquiry_payload():
    return {
        "name": "Meera Iyer",
        "email": "  Meera.Iyer@Example.com ",
        "mobile": " 9123456780 ",
        "date": "2025-04-12",
        "packageName": "Executive Health Check",
        "message": "Fasting required?",
    }
