# clinic_api/schemas/doctor.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..common.common import RequiredText

class DoctorBase(BaseModel):
    name: RequiredText
    specialization: RequiredText
    phone: RequiredText

class DoctorCreate(DoctorBase):
    pass

class DoctorUpdate(BaseModel):
    name: Optional[str] = None
    specialization: Optional[str] = None
    phone: Optional[str] = None

class DoctorResponse(DoctorBase):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
