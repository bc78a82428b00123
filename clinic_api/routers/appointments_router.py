from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.appointments_service import AppointmentsService
from ..exceptions import StoreError
from ..persistence.store import DocumentStore, get_store
from ..schemas.appointments.appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from ..schemas.common.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/appointments",
    tags=["Appointments"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_appointments_service(store: DocumentStore = Depends(get_store)) -> AppointmentsService:
    return AppointmentsService(repo=store.appointments)


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    appointment_data: AppointmentCreate,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        appt = await appt_service.create(appointment_data.model_dump())
        return AppointmentResponse(**appt)
    except StoreError as e:
        logger.error(f"Error creating appointment: {e.detail}")
        raise HTTPException(status_code=400, detail="Error creating appointment")


@router.get("", response_model=List[AppointmentResponse])
async def list_appointments(
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    appts = await appt_service.list_all()
    return [AppointmentResponse(**a) for a in appts]


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    appointment_data: AppointmentUpdate,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        appt = await appt_service.update(appointment_id, appointment_data.model_dump(exclude_unset=True))
        return AppointmentResponse(**appt)
    except StoreError as e:
        logger.error(f"Error updating appointment {appointment_id}: {e.detail}")
        raise HTTPException(status_code=400, detail="Error updating appointment")


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(
    appointment_id: str,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        await appt_service.delete(appointment_id)
    except StoreError as e:
        logger.error(f"Error deleting appointment {appointment_id}: {e.detail}")
        raise HTTPException(status_code=500, detail="Error deleting appointment")
    return MessageResponse(message="Appointment deleted successfully")
