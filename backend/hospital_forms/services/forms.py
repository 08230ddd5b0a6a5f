# hospital_forms/services/forms.py
from hospital_forms.schemas.payloads import (
    AppointmentPayload,
    ContactPayload,
    HealthPackagePayload,
)
from hospital_forms.schemas.submissions import (
    AppointmentRecord,
    ContactRecord,
    HealthPackageInquiryRecord,
)
from hospital_forms.services.intake import IntakeSchema

APPOINTMENTS = IntakeSchema(
    kind="appointment",
    label="Appointments",
    id_field="appointmentId",
    payload_model=AppointmentPayload,
    record_model=AppointmentRecord,
    initial_status="pending",
    admin_template="appointment_admin",
    user_template="appointment_patient",
    admin_subject=lambda r, s: "New Appointment Booking",
    user_subject=lambda r, s: f"Appointment Confirmation - {r.department} Department",
    submitted_message="Appointment booked!",
    failure_message="Failed to book appointment. Try again later.",
)

CONTACT = IntakeSchema(
    kind="contact",
    label="Contact",
    id_field="contactId",
    payload_model=ContactPayload,
    record_model=ContactRecord,
    initial_status="new",
    admin_template="contact_admin",
    user_template="contact_user",
    admin_subject=lambda r, s: f"Contact Form: {r.subject}",
    user_subject=lambda r, s: f"Thank you for contacting {s.HOSPITAL_NAME}",
    submitted_message="Thank you for your message! We will get back to you soon.",
    failure_message="Failed to send message. Please try again.",
)

HEALTH_PACKAGES = IntakeSchema(
    kind="health_package",
    label="Health Packages",
    id_field="inquiryId",
    payload_model=HealthPackagePayload,
    record_model=HealthPackageInquiryRecord,
    initial_status="new",
    admin_template="health_package_admin",
    user_template="health_package_user",
    admin_subject=lambda r, s: f"New Health Package Inquiry - {r.package_name or 'General'}",
    user_subject=lambda r, s: f"Health Package Inquiry Received - {r.package_name or 'General'}",
    submitted_message="Your inquiry has been submitted successfully!",
    failure_message="Failed to submit inquiry. Please try again later.",
)

INTAKE_SCHEMAS = {schema.kind: schema for schema in (APPOINTMENTS, CONTACT, HEALTH_PACKAGES)}
