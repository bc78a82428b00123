import logging
from beanie import init_beanie
from pymongo import AsyncMongoClient

from .config import settings
from .db.models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


def create_mongo_client(uri: str = None) -> AsyncMongoClient:
    """Create the process-wide client. Connections are opened lazily."""
    return AsyncMongoClient(uri or settings.MONGODB_URI, tz_aware=True)


async def init_database(client: AsyncMongoClient, database_name: str = None) -> None:
    """Bind the document models to their collections."""
    database = client[database_name or settings.mongodb_database]
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)


async def ping(client: AsyncMongoClient) -> None:
    await client.admin.command("ping")
