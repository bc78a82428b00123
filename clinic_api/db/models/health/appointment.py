# clinic_api/models/appointment.py
from beanie import Document

from ....schemas.common.common import RequiredText

class Appointment(Document):
    patientName: RequiredText
    doctorName: RequiredText
    date: RequiredText

    class Settings:
        name = "appointments"
        validate_on_save = True
