# hospital_forms/api/appointments.py
from hospital_forms.api.intake import build_intake_router
from hospital_forms.services.forms import APPOINTMENTS

router = build_intake_router(APPOINTMENTS)
