"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.domain.entities.base import BaseEntity


T = TypeVar("T", bound=BaseEntity)


class BaseRepository(ABC, Generic[T]):
    """Base repository interface for all entities."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> T | None:
        """Get entity by ID."""
        pass

    @abstractmethod
    def get_all(self) -> list[T]:
        """Get all entities."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count entities."""
        pass
