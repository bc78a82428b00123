# clinic_api/models/doctor.py
from beanie import Document

from ....schemas.common.common import RequiredText

class Doctor(Document):
    name: RequiredText
    specialization: RequiredText
    phone: RequiredText

    class Settings:
        name = "doctors"
        validate_on_save = True
