from .resource_service import ResourceService
from ...schemas.doctors.doctor import DoctorCreate


class DoctorsService(ResourceService):
    label = "Doctor"
    schema = DoctorCreate
