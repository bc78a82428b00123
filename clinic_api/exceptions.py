from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from pydantic import ValidationError
from typing import List, Optional, Sequence, Any
import logging

logger = logging.getLogger(__name__)


class APIException(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class EntityValidationError(APIException):
    """A candidate document failed its schema. ``errors`` holds one message per field."""

    def __init__(self, errors: List[str], detail: str = "Validation failed"):
        super().__init__(status_code=400, detail=detail)
        self.errors = errors


class NotFoundError(APIException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)


class StoreError(APIException):
    """Connectivity or operational failure reported by the document store."""

    def __init__(self, detail: str = "Database error", status_code: int = 500):
        super().__init__(status_code=status_code, detail=detail)


def format_error_messages(errors: Sequence[dict]) -> List[str]:
    """Render pydantic error dicts as ``"<field>: <reason>"`` strings."""
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        messages.append(f"{field}: {msg}" if field else msg)
    return messages


def validation_error_from(exc: ValidationError) -> EntityValidationError:
    return EntityValidationError(format_error_messages(exc.errors()))


def create_error_response(error_message: Any, details: Optional[List[str]] = None) -> dict:
    """Create a standardized error response"""
    body = {
        "success": False,
        "data": None,
        "error": error_message,
    }
    if details is not None:
        body["details"] = details
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Custom exception handler for HTTPException"""
    details = getattr(exc, "errors", None)
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.detail, details),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of FastAPI's 422."""
    details = format_error_messages(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content=create_error_response("Validation failed", details),
    )
