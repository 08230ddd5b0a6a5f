# hospital_forms/utils/validation.py
import re
from typing import Any, Optional

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# [0-9] et non \d : \d accepte aussi les chiffres Unicode (arabes, devanagari...)
PHONE_RE = re.compile(r"[0-9]{10}")
AGE_RE = re.compile(r"[+]?[0-9]{1,3}")

MIN_AGE = 1
MAX_AGE = 120


def is_valid_email(s: str) -> bool:
    return EMAIL_RE.fullmatch(s) is not None


def is_valid_phone(s: str) -> bool:
    return PHONE_RE.fullmatch(s.strip()) is not None


def parse_age(value: Any) -> Optional[int]:
    """Retourne l'âge entier dans [1, 120], ou None s'il est invalide."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if isinstance(value, str):
        # au plus 3 chiffres : int() refuse les chaînes de plus de 4300 chiffres
        value = value.strip()
        if not AGE_RE.fullmatch(value):
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if MIN_AGE <= value <= MAX_AGE else None
