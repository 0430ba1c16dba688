"""Flat-file candidate repository implementation."""

import uuid

from src.common.logging import get_logger
from src.domain.entities.candidate import Candidate
from src.domain.repositories.candidate_repository import (
    ERROR_INVALID_INDEX,
    ERROR_NOT_FOUND,
    CandidateRepository,
    LoadReport,
)
from src.domain.services.candidate_search_service import CandidateSearchService
from src.domain.services.candidate_validator import CandidateValidator
from src.domain.services.interfaces.candidate_record_codec import (
    ICandidateRecordCodec,
)
from src.domain.value_objects.search_field import SearchField
from src.infrastructure.exceptions import FileAccessError
from src.infrastructure.persistence.flat_file_store import FlatFileStore


logger = get_logger(__name__)


class FlatFileCandidateRepository(CandidateRepository):
    """テキストファイルに保存する候補者リポジトリ.

    メモリ上の一覧が唯一の可変データで、更新のたびに一覧全体を
    コーデックで直列化してファイルを上書きする。
    保存に失敗した更新はメモリ上でも取り消し、ファイルとの不整合を残さない。

    シングルスレッド（UIスレッド）からの利用を前提とし、ロックは持たない。
    """

    def __init__(
        self,
        file_store: FlatFileStore,
        codec: ICandidateRecordCodec,
        validator: CandidateValidator | None = None,
        search_service: CandidateSearchService | None = None,
        autoload: bool = True,
    ) -> None:
        """
        Args:
            file_store: ファイル読み書き
            codec: ファイル書式
            validator: 入力チェック
            search_service: 検索・絞り込み
            autoload: Trueなら生成時にload()する
        """
        self.file_store = file_store
        self.codec = codec
        self.validator = validator or CandidateValidator()
        self.search_service = search_service or CandidateSearchService()
        self._candidates: list[Candidate] = []
        self._loaded = False
        self.last_load_report: LoadReport | None = None
        if autoload:
            self.load()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> LoadReport:
        """ファイルから一覧を読み直す.

        壊れたレコードはスキップし件数をレポートに残す。
        ファイルを読めない場合は空の一覧とエラー内容を返す。
        """
        self._candidates.clear()
        try:
            content = self.file_store.read_all()
        except FileAccessError as e:
            self._loaded = False
            report = LoadReport(loaded=0, skipped=0, error_message=e.message)
            self.last_load_report = report
            return report

        result = self.codec.decode(content)
        self._candidates.extend(result.candidates)
        self._loaded = True

        report = LoadReport(loaded=len(result.candidates), skipped=len(result.skipped))
        self.last_load_report = report
        logger.info(
            "Loaded candidates",
            path=str(self.file_store.path),
            format=self.codec.format_name,
            loaded=report.loaded,
            skipped=report.skipped,
        )
        return report

    def save_all(self) -> str | None:
        """一覧全体を現在の順序で書き出す."""
        try:
            self.file_store.write_all(self.codec.encode(self._candidates))
        except FileAccessError as e:
            return e.message
        return None

    def get_all(self) -> list[Candidate]:
        return [c.copy() for c in self._candidates]

    def count(self) -> int:
        return len(self._candidates)

    def get(self, index: int) -> Candidate | None:
        if not self._in_bounds(index):
            return None
        return self._candidates[index].copy()

    def get_by_id(self, entity_id: str) -> Candidate | None:
        index = self._index_of(entity_id)
        return None if index is None else self._candidates[index].copy()

    def get_by_name(self, name: str) -> Candidate | None:
        wanted = name.strip().lower()
        for candidate in self._candidates:
            if candidate.name.strip().lower() == wanted:
                return candidate.copy()
        return None

    def add(self, candidate: Candidate) -> str | None:
        error = self.validator.validate(candidate)
        if error is not None:
            logger.info("Rejected candidate", operation="add", reason=error)
            return error

        stored = candidate.copy()
        if self._index_of(stored.id) is not None:
            # 同じIDが既にあれば新しいIDを振り直す
            stored = stored.with_id(str(uuid.uuid4()))
        self._candidates.append(stored)

        error = self.save_all()
        if error is not None:
            self._candidates.pop()
        return error

    def update(self, index: int, candidate: Candidate) -> str | None:
        error = self.validator.validate(candidate)
        if error is not None:
            logger.info("Rejected candidate", operation="update", reason=error)
            return error
        if not self._in_bounds(index):
            return ERROR_INVALID_INDEX
        return self._replace(index, candidate)

    def update_by_id(self, candidate_id: str, candidate: Candidate) -> str | None:
        error = self.validator.validate(candidate)
        if error is not None:
            logger.info("Rejected candidate", operation="update", reason=error)
            return error
        index = self._index_of(candidate_id)
        if index is None:
            return ERROR_NOT_FOUND
        return self._replace(index, candidate)

    def delete(self, index: int) -> str | None:
        if not self._in_bounds(index):
            return ERROR_INVALID_INDEX
        removed = self._candidates.pop(index)

        error = self.save_all()
        if error is not None:
            self._candidates.insert(index, removed)
        return error

    def delete_by_id(self, candidate_id: str) -> str | None:
        index = self._index_of(candidate_id)
        if index is None:
            return ERROR_NOT_FOUND
        return self.delete(index)

    def search(
        self, query: str | None, field: SearchField | None = None
    ) -> list[Candidate]:
        if not self.validator.is_valid_search_query(query):
            return []
        return [
            c.copy() for c in self.search_service.search(self._candidates, query, field)
        ]

    def filter_by_region(self, region: str | None) -> list[Candidate]:
        return [
            c.copy()
            for c in self.search_service.filter_by_region(self._candidates, region)
        ]

    def sorted_by_surname(self) -> list[Candidate]:
        ordered = self.search_service.sorted_by_surname(self._candidates)
        return [c.copy() for c in ordered]

    def _replace(self, index: int, candidate: Candidate) -> str | None:
        # 置き換え後も同じレコードを指すようにIDは引き継ぐ
        previous = self._candidates[index]
        self._candidates[index] = candidate.with_id(previous.id)

        error = self.save_all()
        if error is not None:
            self._candidates[index] = previous
        return error

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._candidates)

    def _index_of(self, candidate_id: str) -> int | None:
        for index, candidate in enumerate(self._candidates):
            if candidate.id == candidate_id:
                return index
        return None
