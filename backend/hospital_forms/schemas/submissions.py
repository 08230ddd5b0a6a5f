# hospital_forms/schemas/submissions.py
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Literal
from datetime import datetime


class SubmissionRecord(BaseModel):
    id: str
    status: Literal["new", "pending"]
    created_at: datetime
    name: str
    email: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class AppointmentRecord(SubmissionRecord):
    phone: str
    age: int
    gender: str
    department: str
    doctor: str
    date: str
    time: str
    reason: str = ""


class ContactRecord(SubmissionRecord):
    phone: str = ""
    subject: str
    message: str


class HealthPackageInquiryRecord(SubmissionRecord):
    mobile: str
    date: str
    message: str = ""
    package_name: str = ""


class IntakeStatus(BaseModel):
    message: str
    total: int
    last_submitted_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class IntakeDiagnostics(BaseModel):
    status: str
    timestamp: datetime
    total: int
    email_configured: bool
    admin_email: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ErrorOut(BaseModel):
    success: bool = False
    error: str
    fields: Optional[list[str]] = Field(default=None)
    details: Optional[str] = None
