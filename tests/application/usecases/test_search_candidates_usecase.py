"""SearchCandidatesUseCaseのテスト."""

from unittest.mock import MagicMock

import pytest

from src.application.dtos.search_candidates_dto import SearchCandidatesInputDto
from src.application.usecases.search_candidates_usecase import SearchCandidatesUseCase
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.value_objects.search_field import SearchField
from tests.fixtures.candidate_factories import create_sample_candidates


@pytest.fixture
def mock_candidate_repository():
    return MagicMock(spec=CandidateRepository)


@pytest.fixture
def use_case(mock_candidate_repository):
    return SearchCandidatesUseCase(
        candidate_repository=mock_candidate_repository, min_query_length=2
    )


class TestSearchCandidates:
    """executeメソッドのテスト."""

    def test_short_query_waits_for_input(self, use_case, mock_candidate_repository):
        """最小文字数未満のクエリは検索せず入力待ちになることを確認."""
        result = use_case.execute(SearchCandidatesInputDto(query="n"))

        assert result.is_searching is False
        assert result.is_empty is False
        assert "2 characters" in result.prompt_message
        mock_candidate_repository.search.assert_not_called()

    def test_query_searches_repository(self, use_case, mock_candidate_repository):
        """クエリと検索項目がリポジトリに渡されることを確認."""
        mock_candidate_repository.search.return_value = create_sample_candidates()[:1]

        result = use_case.execute(
            SearchCandidatesInputDto(query=" ncr ", field=SearchField.NAME)
        )

        assert result.is_searching is True
        assert [c.name for c in result.candidates] == ["Maria Santos"]
        mock_candidate_repository.search.assert_called_once_with(
            "ncr", SearchField.NAME
        )

    def test_no_match_is_empty(self, use_case, mock_candidate_repository):
        """一致しない場合は0件表示になることを確認."""
        mock_candidate_repository.search.return_value = []

        result = use_case.execute(SearchCandidatesInputDto(query="zzz"))

        assert result.is_searching is True
        assert result.is_empty is True

    def test_region_only(self, use_case, mock_candidate_repository):
        """地域だけを指定した場合は地域で絞り込むことを確認."""
        mock_candidate_repository.filter_by_region.return_value = (
            create_sample_candidates()[1:]
        )

        result = use_case.execute(SearchCandidatesInputDto(region="Region VII"))

        assert [c.name for c in result.candidates] == ["Pedro Aquino", "Ana Bautista"]
        mock_candidate_repository.search.assert_not_called()

    def test_query_and_region_are_combined(self, use_case, mock_candidate_repository):
        """クエリと地域の両方に一致する候補者だけを返すことを確認."""
        candidates = create_sample_candidates()
        mock_candidate_repository.search.return_value = [candidates[0], candidates[2]]
        mock_candidate_repository.filter_by_region.return_value = candidates[1:]

        result = use_case.execute(
            SearchCandidatesInputDto(query="senator", region="Central Visayas")
        )

        assert [c.name for c in result.candidates] == ["Ana Bautista"]

    def test_sort_by_surname(self, use_case, mock_candidate_repository):
        """姓順を指定すると結果が並べ替えられることを確認."""
        mock_candidate_repository.search.return_value = create_sample_candidates()

        result = use_case.execute(
            SearchCandidatesInputDto(query="party", sort_by_surname=True)
        )

        assert [c.name for c in result.candidates] == [
            "Pedro Aquino",
            "Ana Bautista",
            "Maria Santos",
        ]

    def test_repository_error(self, use_case, mock_candidate_repository):
        """例外が発生した場合にエラーを返すことを確認."""
        mock_candidate_repository.search.side_effect = Exception("boom")

        result = use_case.execute(SearchCandidatesInputDto(query="ncr"))

        assert result.success is False
        assert result.error_message == "boom"
