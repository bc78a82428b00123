# clinic_api/schemas/patient.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..common.common import RequiredText

class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

class PatientBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: RequiredText
    age: int = Field(ge=0)
    gender: Gender

class PatientCreate(PatientBase):
    pass

class PatientUpdate(BaseModel):
    name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None

class PatientResponse(PatientBase):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str = Field(serialization_alias="_id")
