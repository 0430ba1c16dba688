"""アプリケーションのコンポジションルート.

リポジトリ・ユースケースの生成をここに集約し、画面やCLIには
生成済みのインスタンスを渡す。プロセス内で一つのコンテナを共有する。
"""

from functools import cached_property

from src.application.usecases.convert_candidate_file_usecase import (
    ConvertCandidateFileUseCase,
)
from src.application.usecases.manage_candidates_usecase import ManageCandidatesUseCase
from src.application.usecases.search_candidates_usecase import SearchCandidatesUseCase
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.services.candidate_search_service import CandidateSearchService
from src.domain.services.candidate_validator import CandidateValidator
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.importers import CODECS_BY_FORMAT, create_codec
from src.infrastructure.persistence.candidate_repository_impl import (
    FlatFileCandidateRepository,
)
from src.infrastructure.persistence.flat_file_store import FlatFileStore


class RepositoryContainer:
    """リポジトリの生成."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @cached_property
    def _candidate_repository(self) -> FlatFileCandidateRepository:
        return FlatFileCandidateRepository(
            file_store=FlatFileStore(self._settings.candidates_file),
            codec=create_codec(self._settings.file_format),
            validator=CandidateValidator(),
            search_service=CandidateSearchService(),
        )

    def candidate_repository(self) -> CandidateRepository:
        """候補者リポジトリ（コンテナ内で単一インスタンス）."""
        return self._candidate_repository


class UseCaseContainer:
    """ユースケースの生成."""

    def __init__(self, settings: Settings, repositories: RepositoryContainer) -> None:
        self._settings = settings
        self._repositories = repositories

    def manage_candidates_usecase(self) -> ManageCandidatesUseCase:
        return ManageCandidatesUseCase(
            candidate_repository=self._repositories.candidate_repository(),
            default_image_path=self._settings.default_image_path,
        )

    def search_candidates_usecase(self) -> SearchCandidatesUseCase:
        return SearchCandidatesUseCase(
            candidate_repository=self._repositories.candidate_repository(),
            min_query_length=self._settings.min_search_query_length,
        )

    def convert_candidate_file_usecase(self) -> ConvertCandidateFileUseCase:
        return ConvertCandidateFileUseCase(
            codecs={name: create_codec(name) for name in CODECS_BY_FORMAT},
            file_store_factory=FlatFileStore,
        )


class Container:
    """DIコンテナ."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.repositories = RepositoryContainer(self.settings)
        self.use_cases = UseCaseContainer(self.settings, self.repositories)


_container: Container | None = None


def init_container(settings: Settings | None = None) -> Container:
    """コンテナを生成して共有インスタンスとして登録する."""
    global _container
    _container = Container(settings)
    return _container


def get_container() -> Container:
    """共有コンテナを返す.

    Raises:
        RuntimeError: init_container()が未実行の場合
    """
    if _container is None:
        raise RuntimeError("Container is not initialized. Call init_container().")
    return _container


def reset_container() -> None:
    """共有コンテナを破棄する（テスト用）."""
    global _container
    _container = None
