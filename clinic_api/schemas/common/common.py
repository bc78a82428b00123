# clinic_api/schemas/common.py
from pydantic import BaseModel, Field
from typing import List, Optional, Any, Annotated

# Required text: present and non-empty
RequiredText = Annotated[str, Field(min_length=1)]


class ErrorResponse(BaseModel):
    success: bool = False
    data: Optional[Any] = None
    error: str
    details: Optional[List[str]] = None

class MessageResponse(BaseModel):
    message: str

class StorageStatus(BaseModel):
    backend: str
    ok: bool
    error: Optional[str] = None

class HealthResponse(BaseModel):
    status: str  # 'healthy' | 'degraded'
    service: str
    version: str
    timestamp: str
    storage: StorageStatus
