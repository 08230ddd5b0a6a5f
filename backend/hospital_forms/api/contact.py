# hospital_forms/api/contact.py
from hospital_forms.api.intake import build_intake_router
from hospital_forms.services.forms import CONTACT

router = build_intake_router(CONTACT)
