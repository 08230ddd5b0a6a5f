# hospital_forms/core/deps.py
from fastapi import Request

from hospital_forms.core.config import Settings
from hospital_forms.services.intake import IntakeHandler


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def intake_handler(kind: str):
    def dependency(request: Request) -> IntakeHandler:
        return request.app.state.intake_handlers[kind]
    return dependency
