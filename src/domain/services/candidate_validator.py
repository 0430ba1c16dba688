"""候補者データのバリデーションサービス.

登録・更新前に候補者レコードを検査し、最初に違反したルールの
メッセージを返す。状態を持たないため、インスタンスは共有してよい。
"""

from typing import Any

from src.domain.entities.candidate import Candidate
from src.domain.value_objects.social_stance import SOCIAL_ISSUES, Stance


MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MIN_AGE = 18
MAX_AGE = 100
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 80

ERROR_NULL_CANDIDATE = "Candidate cannot be null"
ERROR_INVALID_NAME = (
    f"Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters"
)
ERROR_INVALID_AGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"
ERROR_EMPTY_POSITION = "Position cannot be empty"
ERROR_EMPTY_PARTY = "Party affiliation cannot be empty"
ERROR_INVALID_EXPERIENCE = (
    f"Experience must be between {MIN_EXPERIENCE} and {MAX_EXPERIENCE} years"
)

# 検査順に並べたリスト項目（属性名, 表示名）
_LIST_FIELDS: tuple[tuple[str, str], ...] = (
    ("platforms", "Platforms list"),
    ("supported_issues", "Supported issues list"),
    ("opposed_issues", "Opposed issues list"),
    ("notable_laws", "Notable laws list"),
    ("social_stance", "Social stance list"),
)


class CandidateValidator:
    """候補者レコードの入力チェック."""

    def validate(self, candidate: Candidate | None) -> str | None:
        """候補者レコードを検査する.

        検査順:
            1. レコードがNoneでない
            2. 氏名が空でなく2〜100文字
            3. 年齢が18〜100
            4. 役職が空でない
            5. 所属政党が空でない
            6. 経験年数が0〜80
            7. 各リスト項目がNoneでない（空は可）
            8. スタンスの争点がカタログ内、値がStance

        Returns:
            問題なければNone、違反があれば最初の違反内容
        """
        if candidate is None:
            return ERROR_NULL_CANDIDATE

        if _is_blank(candidate.name):
            return ERROR_INVALID_NAME
        if not MIN_NAME_LENGTH <= len(candidate.name) <= MAX_NAME_LENGTH:
            return ERROR_INVALID_NAME

        if not _in_range(candidate.age, MIN_AGE, MAX_AGE):
            return ERROR_INVALID_AGE

        if _is_blank(candidate.position):
            return ERROR_EMPTY_POSITION

        if _is_blank(candidate.party_affiliation):
            return ERROR_EMPTY_PARTY

        if not _in_range(candidate.years_of_experience, MIN_EXPERIENCE, MAX_EXPERIENCE):
            return ERROR_INVALID_EXPERIENCE

        for attribute, label in _LIST_FIELDS:
            if getattr(candidate, attribute, None) is None:
                return f"{label} cannot be null"

        return self._validate_social_stance(candidate.social_stance)

    @staticmethod
    def _validate_social_stance(social_stance: dict[str, Stance]) -> str | None:
        for issue, stance in social_stance.items():
            if issue not in SOCIAL_ISSUES:
                return f"Unknown social issue: {issue}"
            if not isinstance(stance, Stance):
                return f"Invalid stance for {issue}: {stance}"
        return None

    @staticmethod
    def is_valid_search_query(query: str | None) -> bool:
        """検索クエリが空白のみでないかを判定する."""
        return query is not None and bool(query.strip())


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _in_range(value: Any, low: int, high: int) -> bool:
    # boolはintのサブクラスなので除外する
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    return low <= value <= high
