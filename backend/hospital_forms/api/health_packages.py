# hospital_forms/api/health_packages.py
from hospital_forms.api.intake import build_intake_router
from hospital_forms.services.forms import HEALTH_PACKAGES

router = build_intake_router(HEALTH_PACKAGES)
