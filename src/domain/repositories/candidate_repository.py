"""Candidate repository interface."""

from abc import abstractmethod
from dataclasses import dataclass

from src.domain.entities.candidate import Candidate
from src.domain.repositories.base import BaseRepository
from src.domain.value_objects.search_field import SearchField


ERROR_INVALID_INDEX = "Invalid candidate index"
ERROR_NOT_FOUND = "Candidate not found"


@dataclass(frozen=True)
class LoadReport:
    """load()の結果.

    error_messageが設定されている場合はファイルを読めなかったことを示し、
    「候補者0件」と「読み込み失敗」を区別できる。
    """

    loaded: int
    skipped: int
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.error_message is None


class CandidateRepository(BaseRepository[Candidate]):
    """Repository interface for candidates.

    候補者一覧を唯一所有する。更新系は検証に通ったレコードだけを受け付け、
    失敗理由は例外ではなく文字列で返す（成功時はNone）。
    取得系は防御的コピーを返す。
    """

    @abstractmethod
    def load(self) -> LoadReport:
        """Reload the collection from the backing file."""
        pass

    @abstractmethod
    def save_all(self) -> str | None:
        """Write the whole collection to the backing file."""
        pass

    @abstractmethod
    def get(self, index: int) -> Candidate | None:
        """Get candidate at position (0-based)."""
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Candidate | None:
        """Get the first candidate whose name matches (case-insensitive)."""
        pass

    @abstractmethod
    def add(self, candidate: Candidate) -> str | None:
        """Validate and append a candidate."""
        pass

    @abstractmethod
    def update(self, index: int, candidate: Candidate) -> str | None:
        """Validate and replace the candidate at position."""
        pass

    @abstractmethod
    def update_by_id(self, candidate_id: str, candidate: Candidate) -> str | None:
        """Validate and replace the candidate with the given ID."""
        pass

    @abstractmethod
    def delete(self, index: int) -> str | None:
        """Remove the candidate at position.

        後続の候補者の位置は1つずつ前に詰まる。
        """
        pass

    @abstractmethod
    def delete_by_id(self, candidate_id: str) -> str | None:
        """Remove the candidate with the given ID."""
        pass

    @abstractmethod
    def search(
        self, query: str | None, field: SearchField | None = None
    ) -> list[Candidate]:
        """Search candidates by case-insensitive substring."""
        pass

    @abstractmethod
    def filter_by_region(self, region: str | None) -> list[Candidate]:
        """Filter candidates by administrative region."""
        pass

    @abstractmethod
    def sorted_by_surname(self) -> list[Candidate]:
        """Get all candidates ordered by surname."""
        pass
