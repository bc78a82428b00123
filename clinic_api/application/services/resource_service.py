from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Type

from pydantic import BaseModel, ValidationError

from ..ports.resource_repo import ResourceRepository, Record
from ...exceptions import NotFoundError, validation_error_from


@dataclass
class ResourceService:
    """Validate-then-persist operations for one entity type.

    Subclasses name the entity and the schema every stored document must
    satisfy. Validation failures raise EntityValidationError, unknown ids
    raise NotFoundError and store failures propagate as StoreError.
    """

    repo: ResourceRepository

    label: ClassVar[str] = "Resource"
    schema: ClassVar[Type[BaseModel]] = BaseModel

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return self.schema.model_validate(data).model_dump()
        except ValidationError as e:
            raise validation_error_from(e)

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    async def create(self, data: Dict[str, Any]) -> Record:
        return await self.repo.create(self.validate(data))

    async def list_all(self) -> List[Record]:
        return await self.repo.list_all()

    async def update(self, resource_id: str, changes: Dict[str, Any]) -> Record:
        current = await self.repo.get(resource_id)
        if not current:
            raise self.not_found()
        changes = {k: v for k, v in changes.items() if k != "id"}
        merged = {k: v for k, v in current.items() if k != "id"}
        merged.update(changes)
        validated = self.validate(merged)
        updated = await self.repo.update(resource_id, {k: validated[k] for k in changes if k in validated})
        if not updated:
            # removed between the read and the write
            raise self.not_found()
        return updated

    async def delete(self, resource_id: str) -> None:
        if not await self.repo.delete(resource_id):
            raise self.not_found()
