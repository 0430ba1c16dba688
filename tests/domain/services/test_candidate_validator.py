"""Tests for CandidateValidator."""

import pytest

from src.domain.services.candidate_validator import (
    ERROR_EMPTY_PARTY,
    ERROR_EMPTY_POSITION,
    ERROR_INVALID_AGE,
    ERROR_INVALID_EXPERIENCE,
    ERROR_INVALID_NAME,
    ERROR_NULL_CANDIDATE,
    CandidateValidator,
)
from src.domain.value_objects.social_stance import Stance
from tests.fixtures.candidate_factories import create_candidate


@pytest.fixture
def validator() -> CandidateValidator:
    return CandidateValidator()


class TestCandidateValidator:
    """CandidateValidator.validate のテスト."""

    def test_valid_candidate_returns_none(self, validator: CandidateValidator) -> None:
        """正しいレコードはNoneを返すこと."""
        assert validator.validate(create_candidate()) is None

    def test_none_candidate(self, validator: CandidateValidator) -> None:
        """Noneは拒否されること."""
        assert validator.validate(None) == ERROR_NULL_CANDIDATE

    @pytest.mark.parametrize("name", ["", "   ", "A", "x" * 101])
    def test_invalid_name(self, validator: CandidateValidator, name: str) -> None:
        """氏名が空・1文字・101文字以上なら拒否されること."""
        assert validator.validate(create_candidate(name=name)) == ERROR_INVALID_NAME

    @pytest.mark.parametrize("name", ["Al", "x" * 100])
    def test_name_length_boundaries(
        self, validator: CandidateValidator, name: str
    ) -> None:
        """氏名2文字・100文字は許可されること."""
        assert validator.validate(create_candidate(name=name)) is None

    @pytest.mark.parametrize(
        ("age", "expected"),
        [
            (17, ERROR_INVALID_AGE),
            (18, None),
            (100, None),
            (101, ERROR_INVALID_AGE),
        ],
    )
    def test_age_boundaries(
        self, validator: CandidateValidator, age: int, expected: str | None
    ) -> None:
        """年齢は18〜100のみ許可されること."""
        assert validator.validate(create_candidate(age=age)) == expected

    def test_bool_age_is_rejected(self, validator: CandidateValidator) -> None:
        """boolは年齢として扱わないこと."""
        assert validator.validate(create_candidate(age=True)) == ERROR_INVALID_AGE

    def test_empty_position(self, validator: CandidateValidator) -> None:
        """役職が空白のみなら拒否されること."""
        result = validator.validate(create_candidate(position=" "))
        assert result == ERROR_EMPTY_POSITION

    def test_empty_party(self, validator: CandidateValidator) -> None:
        """所属政党が空なら拒否されること."""
        result = validator.validate(create_candidate(party_affiliation=""))
        assert result == ERROR_EMPTY_PARTY

    @pytest.mark.parametrize(
        ("years", "expected"),
        [
            (-1, ERROR_INVALID_EXPERIENCE),
            (0, None),
            (80, None),
            (81, ERROR_INVALID_EXPERIENCE),
        ],
    )
    def test_experience_boundaries(
        self, validator: CandidateValidator, years: int, expected: str | None
    ) -> None:
        """経験年数は0〜80のみ許可されること."""
        candidate = create_candidate(years_of_experience=years)
        assert validator.validate(candidate) == expected

    def test_first_violation_wins(self, validator: CandidateValidator) -> None:
        """複数違反がある場合、検査順で最初の違反を返すこと."""
        candidate = create_candidate(name="A", age=5, position="")
        assert validator.validate(candidate) == ERROR_INVALID_NAME

    def test_null_list_field(self, validator: CandidateValidator) -> None:
        """リスト項目がNoneなら拒否されること."""
        candidate = create_candidate()
        candidate.notable_laws = None
        assert validator.validate(candidate) == "Notable laws list cannot be null"

    def test_empty_lists_are_allowed(self, validator: CandidateValidator) -> None:
        """空リストは許可されること."""
        candidate = create_candidate(
            platforms=[],
            supported_issues=[],
            opposed_issues=[],
            notable_laws=[],
            social_stance={},
        )
        assert validator.validate(candidate) is None

    def test_unknown_social_issue(self, validator: CandidateValidator) -> None:
        """カタログ外の争点は拒否されること."""
        candidate = create_candidate(social_stance={"Pineapple Pizza": Stance.AGREE})
        assert validator.validate(candidate) == "Unknown social issue: Pineapple Pizza"

    def test_invalid_stance_value(self, validator: CandidateValidator) -> None:
        """Stance以外の値は拒否されること."""
        candidate = create_candidate(social_stance={"Federalism": "Maybe"})
        assert validator.validate(candidate) == "Invalid stance for Federalism: Maybe"


class TestIsValidSearchQuery:
    """CandidateValidator.is_valid_search_query のテスト."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [(None, False), ("", False), ("   ", False), ("ncr", True)],
    )
    def test_is_valid_search_query(self, query: str | None, expected: bool) -> None:
        """空白のみ・Noneは無効なクエリであること."""
        assert CandidateValidator.is_valid_search_query(query) is expected
