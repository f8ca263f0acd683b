from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel
from hospital.utils.hospital_logger import HospitalLogger

T = TypeVar("T", bound=BaseModel)

class InMemoryRepository(Generic[T]):
    """
    List-backed store with auto-incrementing integer ids.

    Lookups are linear scans in insertion order. The id counter only moves
    forward, so an id is never handed out twice even after a delete.
    Every successful add, update and delete writes one line to the audit log.
    """

    entity_name = "Entity"

    def __init__(self, logger: HospitalLogger):
        self.logger = logger
        self._items: List[T] = []
        self._next_id = 1

    def describe(self, entity: T) -> str:
        return getattr(entity, "name", f"ID {entity.id}")

    def _added_message(self, entity: T) -> str:
        return f"{self.entity_name} added: {self.describe(entity)}"

    def add(self, entity: T) -> T:
        entity.id = self._next_id
        self._next_id += 1
        self._items.append(entity)
        self.logger.log(self._added_message(entity))
        return entity

    def get_by_id(self, entity_id: int) -> Optional[T]:
        return next((item for item in self._items if item.id == entity_id), None)

    def get_all(self) -> List[T]:
        return list(self._items)

    def update(self, entity: T) -> None:
        for index, item in enumerate(self._items):
            if item.id == entity.id:
                self._items[index] = entity
                self.logger.log(f"{self.entity_name} updated: {self.describe(entity)}")
                return

    def delete(self, entity_id: int) -> None:
        entity = self.get_by_id(entity_id)
        if entity is None:
            return
        self._items.remove(entity)
        self.logger.log(f"{self.entity_name} deleted: {self.describe(entity)}")

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)
