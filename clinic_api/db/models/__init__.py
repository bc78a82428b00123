# Models package (re-export feature modules for stable imports)
from .health.appointment import Appointment
from .health.doctor import Doctor
from .health.patient import Patient

DOCUMENT_MODELS = [Appointment, Doctor, Patient]

__all__ = [
    "Appointment",
    "Doctor",
    "Patient",
    "DOCUMENT_MODELS",
]
