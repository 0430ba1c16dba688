"""Domain entities."""

from src.domain.entities.base import BaseEntity
from src.domain.entities.candidate import Candidate


__all__ = ["BaseEntity", "Candidate"]
