from .resource_service import ResourceService
from ...schemas.appointments.appointment import AppointmentCreate


class AppointmentsService(ResourceService):
    label = "Appointment"
    schema = AppointmentCreate
