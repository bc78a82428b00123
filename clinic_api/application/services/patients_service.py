from .resource_service import ResourceService
from ...schemas.patients.patient import PatientCreate


class PatientsService(ResourceService):
    label = "Patient"
    schema = PatientCreate
