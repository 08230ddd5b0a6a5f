# hospital_forms/api/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from hospital_forms.core.config import Settings
from hospital_forms.core.deps import get_settings_from_app

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings_from_app)):
    # Basique, compatible supervision
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
    }
