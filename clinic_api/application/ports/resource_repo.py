from typing import Any, Dict, List, Optional, Protocol

# A stored document as a plain dict: "id" plus the entity fields.
Record = Dict[str, Any]


class ResourceRepository(Protocol):
    async def create(self, data: Dict[str, Any]) -> Record:
        ...

    async def list_all(self) -> List[Record]:
        ...

    async def get(self, resource_id: str) -> Optional[Record]:
        ...

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Optional[Record]:
        ...

    async def delete(self, resource_id: str) -> bool:
        ...
