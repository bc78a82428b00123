import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from ..application.ports.resource_repo import ResourceRepository
from ..config import Settings
from ..database import create_mongo_client, init_database, ping
from ..db.models import Appointment, Doctor, Patient
from ..infrastructure.persistence.memory.memory_repository import InMemoryRepository
from ..infrastructure.persistence.mongo.repositories.beanie_repository import BeanieRepository

logger = logging.getLogger(__name__)

BACKENDS = ("mongo", "memory")


@dataclass
class DocumentStore:
    appointments: ResourceRepository
    doctors: ResourceRepository
    patients: ResourceRepository
    backend: str
    client: Optional[AsyncMongoClient] = None
    init_ok: bool = True
    init_error: Optional[str] = None

    async def ping(self) -> bool:
        if self.client is None:
            return self.init_ok
        try:
            await ping(self.client)
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()


def create_memory_store() -> DocumentStore:
    return DocumentStore(
        appointments=InMemoryRepository("appointments"),
        doctors=InMemoryRepository("doctors"),
        patients=InMemoryRepository("patients"),
        backend="memory",
    )


async def create_mongo_store(settings: Settings) -> DocumentStore:
    client = create_mongo_client(settings.MONGODB_URI)
    store = DocumentStore(
        appointments=BeanieRepository(Appointment),
        doctors=BeanieRepository(Doctor),
        patients=BeanieRepository(Patient),
        backend="mongo",
        client=client,
    )
    try:
        await init_database(client, settings.mongodb_database)
        await ping(client)
        logger.info("Connected to MongoDB")
    except Exception as e:
        # Keep serving; requests fail with StoreError and /health reports degraded
        store.init_ok = False
        store.init_error = str(e)
        logger.error(f"Failed to connect to MongoDB: {e}")
    return store


async def open_store(settings: Settings) -> DocumentStore:
    backend = settings.STORAGE_BACKEND.lower()
    if backend not in BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r}. Must be one of: {list(BACKENDS)}")
    logger.info(f"Using {backend} storage backend")
    if backend == "memory":
        return create_memory_store()
    return await create_mongo_store(settings)


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store
