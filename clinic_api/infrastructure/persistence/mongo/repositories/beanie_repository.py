import logging
from typing import Any, Dict, List, Optional, Type

from beanie import Document, UpdateResponse
from beanie.exceptions import CollectionWasNotInitialized
from bson import ObjectId
from pymongo.errors import PyMongoError

from .....application.ports.resource_repo import ResourceRepository, Record
from .....exceptions import StoreError

logger = logging.getLogger(__name__)

STORE_ERRORS = (PyMongoError, CollectionWasNotInitialized)


class BeanieRepository(ResourceRepository):
    def __init__(self, document_cls: Type[Document]):
        self.document_cls = document_cls
        self.fields = [name for name in document_cls.model_fields if name not in ("id", "revision_id")]

    @property
    def collection_name(self) -> str:
        return self.document_cls.Settings.name

    def _to_record(self, doc: Document) -> Record:
        record = {"id": str(doc.id)}
        record.update(doc.model_dump(include=set(self.fields)))
        return record

    def _object_id(self, resource_id: str) -> Optional[ObjectId]:
        if not ObjectId.is_valid(resource_id):
            return None
        return ObjectId(resource_id)

    def _store_error(self, action: str, exc: Exception) -> StoreError:
        logger.error(f"{self.collection_name}: {action} failed: {exc}")
        return StoreError(f"Database error while trying to {action}")

    async def create(self, data: Dict[str, Any]) -> Record:
        try:
            doc = self.document_cls(**data)
            await doc.insert()
        except STORE_ERRORS as e:
            raise self._store_error("create document", e)
        return self._to_record(doc)

    async def list_all(self) -> List[Record]:
        try:
            docs = await self.document_cls.find_all().to_list()
        except STORE_ERRORS as e:
            raise self._store_error("list documents", e)
        return [self._to_record(d) for d in docs]

    async def get(self, resource_id: str) -> Optional[Record]:
        oid = self._object_id(resource_id)
        if oid is None:
            return None
        try:
            doc = await self.document_cls.get(oid)
        except STORE_ERRORS as e:
            raise self._store_error(f"read document {resource_id}", e)
        return self._to_record(doc) if doc else None

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Record]:
        oid = self._object_id(resource_id)
        if oid is None:
            return None
        try:
            if not changes:
                doc = await self.document_cls.get(oid)
            else:
                doc = await self.document_cls.find_one({"_id": oid}).update(
                    {"$set": changes}, response_type=UpdateResponse.NEW_DOCUMENT
                )
        except STORE_ERRORS as e:
            raise self._store_error(f"update document {resource_id}", e)
        return self._to_record(doc) if doc else None

    async def delete(self, resource_id: str) -> bool:
        oid = self._object_id(resource_id)
        if oid is None:
            return False
        try:
            result = await self.document_cls.find_one({"_id": oid}).delete()
        except STORE_ERRORS as e:
            raise self._store_error(f"delete document {resource_id}", e)
        return bool(result and result.deleted_count)
