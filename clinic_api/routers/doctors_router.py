from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from ..application.services.doctors_service import DoctorsService
from ..exceptions import StoreError
from ..persistence.store import DocumentStore, get_store
from ..schemas.doctors.doctor import DoctorCreate, DoctorUpdate, DoctorResponse
from ..schemas.common.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/doctors",
    tags=["Doctors"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_doctors_service(store: DocumentStore = Depends(get_store)) -> DoctorsService:
    return DoctorsService(repo=store.doctors)


@router.post("", response_model=DoctorResponse, status_code=201)
async def create_doctor(
    doctor_data: DoctorCreate,
    doctor_service: DoctorsService = Depends(get_doctors_service),
):
    try:
        d = await doctor_service.create(doctor_data.model_dump())
        return DoctorResponse(**d)
    except StoreError as e:
        logger.error(f"Error while adding doctor: {e.detail}")
        raise HTTPException(status_code=400, detail="Error creating doctor")


@router.get("", response_model=List[DoctorResponse])
async def list_doctors(
    doctor_service: DoctorsService = Depends(get_doctors_service),
):
    doctors = await doctor_service.list_all()
    return [DoctorResponse(**d) for d in doctors]


@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(
    doctor_id: str,
    doctor_data: DoctorUpdate,
    doctor_service: DoctorsService = Depends(get_doctors_service),
):
    try:
        d = await doctor_service.update(doctor_id, doctor_data.model_dump(exclude_unset=True))
        return DoctorResponse(**d)
    except StoreError as e:
        logger.error(f"Error updating doctor {doctor_id}: {e.detail}")
        raise HTTPException(status_code=400, detail="Error updating doctor")


@router.delete("/{doctor_id}", status_code=204, response_class=Response)
async def delete_doctor(
    doctor_id: str,
    doctor_service: DoctorsService = Depends(get_doctors_service),
):
    try:
        await doctor_service.delete(doctor_id)
    except StoreError as e:
        logger.error(f"Error deleting doctor {doctor_id}: {e.detail}")
        raise HTTPException(status_code=500, detail="Error deleting doctor")
    return Response(status_code=204)
