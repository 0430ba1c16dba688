"""候補者検索に関するDTO."""

from dataclasses import dataclass, field

from src.application.dtos.candidate_dto import CandidateOutputItem
from src.domain.value_objects.search_field import SearchField


@dataclass
class SearchCandidatesInputDto:
    """候補者検索の入力DTO.

    Attributes:
        query: 検索文字列（最小文字数未満なら検索しない）
        field: 検索対象の絞り込み（Noneなら全項目）
        region: 地域での絞り込み
        sort_by_surname: Trueなら姓順、Falseなら登録順
    """

    query: str | None = None
    field: SearchField | None = None
    region: str | None = None
    sort_by_surname: bool = False


@dataclass
class SearchCandidatesOutputDto:
    """候補者検索の出力DTO.

    is_searchingがFalseのときは「入力待ち」を表し、
    画面は結果や0件表示ではなくprompt_messageを出す。
    """

    is_searching: bool
    candidates: list[CandidateOutputItem] = field(default_factory=list)
    prompt_message: str | None = None
    success: bool = True
    error_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.is_searching and not self.candidates
