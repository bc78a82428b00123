from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from ..application.services.patients_service import PatientsService
from ..exceptions import StoreError
from ..persistence.store import DocumentStore, get_store
from ..schemas.patients.patient import PatientCreate, PatientUpdate, PatientResponse
from ..schemas.common.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/patients",
    tags=["Patients"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_patients_service(store: DocumentStore = Depends(get_store)) -> PatientsService:
    return PatientsService(repo=store.patients)


@router.post("", response_model=PatientResponse, status_code=201)
async def create_patient(
    patient_data: PatientCreate,
    patient_service: PatientsService = Depends(get_patients_service),
):
    try:
        p = await patient_service.create(patient_data.model_dump())
        return PatientResponse(**p)
    except StoreError as e:
        logger.error(f"Error while adding patient: {e.detail}")
        raise HTTPException(status_code=400, detail="Error creating patient")


@router.get("", response_model=List[PatientResponse])
async def list_patients(
    patient_service: PatientsService = Depends(get_patients_service),
):
    patients = await patient_service.list_all()
    return [PatientResponse(**p) for p in patients]


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: str,
    patient_data: PatientUpdate,
    patient_service: PatientsService = Depends(get_patients_service),
):
    try:
        p = await patient_service.update(patient_id, patient_data.model_dump(exclude_unset=True))
        return PatientResponse(**p)
    except StoreError as e:
        logger.error(f"Error updating patient {patient_id}: {e.detail}")
        raise HTTPException(status_code=400, detail="Error updating patient")


@router.delete("/{patient_id}", status_code=204, response_class=Response)
async def delete_patient(
    patient_id: str,
    patient_service: PatientsService = Depends(get_patients_service),
):
    try:
        await patient_service.delete(patient_id)
    except StoreError as e:
        logger.error(f"Error deleting patient {patient_id}: {e.detail}")
        raise HTTPException(status_code=500, detail="Error deleting patient")
    return Response(status_code=204)
