"""Persistence layer for candidate data."""

from src.infrastructure.persistence.candidate_repository_impl import (
    FlatFileCandidateRepository,
)
from src.infrastructure.persistence.flat_file_store import FlatFileStore


__all__ = ["FlatFileCandidateRepository", "FlatFileStore"]
