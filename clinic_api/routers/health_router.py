from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from ..config import settings
from ..persistence.store import DocumentStore, get_store
from ..schemas.common.common import HealthResponse, StorageStatus

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(store: DocumentStore = Depends(get_store)):
    ok = store.init_ok and await store.ping()
    return HealthResponse(
        status="healthy" if ok else "degraded",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        storage=StorageStatus(backend=store.backend, ok=ok, error=store.init_error),
    )
