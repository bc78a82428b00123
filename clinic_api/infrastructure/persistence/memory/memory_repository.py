import copy
from typing import Any, Dict, List, Optional

from bson import ObjectId

from ....application.ports.resource_repo import ResourceRepository, Record


class InMemoryRepository(ResourceRepository):
    """Process-local store. Documents keep insertion order."""

    def __init__(self, name: str = "documents") -> None:
        self.name = name
        self._store: Dict[str, Dict[str, Any]] = {}

    def _to_record(self, resource_id: str) -> Record:
        record = {"id": resource_id}
        record.update(copy.deepcopy(self._store[resource_id]))
        return record

    async def create(self, data: Dict[str, Any]) -> Record:
        resource_id = str(ObjectId())
        self._store[resource_id] = copy.deepcopy(data)
        return self._to_record(resource_id)

    async def list_all(self) -> List[Record]:
        return [self._to_record(rid) for rid in self._store]

    async def get(self, resource_id: str) -> Optional[Record]:
        if resource_id not in self._store:
            return None
        return self._to_record(resource_id)

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Record]:
        if resource_id not in self._store:
            return None
        self._store[resource_id].update(copy.deepcopy(changes))
        return self._to_record(resource_id)

    async def delete(self, resource_id: str) -> bool:
        return self._store.pop(resource_id, None) is not None
