# clinic_api/models/patient.py
from beanie import Document
from pydantic import ConfigDict, Field

from ....schemas.common.common import RequiredText
from ....schemas.patients.patient import Gender

class Patient(Document):
    model_config = ConfigDict(use_enum_values=True)

    name: RequiredText
    age: int = Field(ge=0)
    gender: Gender

    class Settings:
        name = "patients"
        validate_on_save = True
