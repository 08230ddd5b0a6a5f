# hospital_forms/schemas/payloads.py
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from hospital_forms.utils.validation import MAX_AGE, MIN_AGE, is_valid_email, is_valid_phone, parse_age

# Types d'erreurs dont le message est déjà destiné à l'utilisateur
FORMAT_ERROR_TYPES = frozenset({"invalid_email", "invalid_phone", "invalid_age"})


class IntakePayload(BaseModel):
    """Champs communs à tous les formulaires publics."""

    name: str
    email: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        # absent, null ou vide après strip : tous traités comme manquants
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            if value is None or value == "":
                continue
            cleaned[key] = value
        return cleaned

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.lower()
        if not is_valid_email(v):
            raise PydanticCustomError("invalid_email", "Please provide a valid email address.")
        return v

    # phone / mobile n'existent que dans certains formulaires ; un téléphone
    # optionnel absent garde sa valeur par défaut et n'est pas vérifié
    @field_validator("phone", "mobile", check_fields=False)
    @classmethod
    def check_phone(cls, v: str, info: ValidationInfo) -> str:
        if not is_valid_phone(v):
            raise PydanticCustomError(
                "invalid_phone",
                "Please provide a valid 10-digit {field} number.",
                {"field": info.field_name},
            )
        return v


class AppointmentPayload(IntakePayload):
    phone: str
    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    gender: str
    department: str
    doctor: str
    date: str
    time: str
    reason: str = ""

    @field_validator("age", mode="before")
    @classmethod
    def parse_age_value(cls, v: Any) -> int:
        age = parse_age(v)
        if age is None:
            raise PydanticCustomError(
                "invalid_age", f"Please provide a valid age between {MIN_AGE} and {MAX_AGE}."
            )
        return age


class ContactPayload(IntakePayload):
    phone: str = ""
    subject: str
    message: str


class HealthPackagePayload(IntakePayload):
    mobile: str
    date: str
    message: str = ""
    package_name: str = ""
