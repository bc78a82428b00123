# clinic_api/schemas/appointment.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ..common.common import RequiredText

class AppointmentBase(BaseModel):
    patientName: RequiredText
    doctorName: RequiredText
    date: RequiredText

class AppointmentCreate(AppointmentBase):
    pass

class AppointmentUpdate(BaseModel):
    patientName: Optional[str] = None
    doctorName: Optional[str] = None
    date: Optional[str] = None

class AppointmentResponse(AppointmentBase):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
