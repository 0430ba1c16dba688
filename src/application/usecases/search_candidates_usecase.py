"""候補者検索のユースケース."""

from src.application.dtos.candidate_dto import CandidateOutputItem
from src.application.dtos.search_candidates_dto import (
    SearchCandidatesInputDto,
    SearchCandidatesOutputDto,
)
from src.common.logging import get_logger
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.services.candidate_search_service import CandidateSearchService


logger = get_logger(__name__)

PROMPT_MESSAGE = "Type at least {min_length} characters to search for candidates"


class SearchCandidatesUseCase:
    """候補者検索のユースケース.

    検索欄の入力確定（Enter）やデバウンス後に呼ばれる。
    最小文字数に満たないクエリは検索せず入力待ちとして扱う。
    """

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        search_service: CandidateSearchService | None = None,
        min_query_length: int = 2,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            candidate_repository: 候補者リポジトリインスタンス
            search_service: 並べ替えに使う検索サービス
            min_query_length: 検索を開始する最小文字数
        """
        self.candidate_repository = candidate_repository
        self.search_service = search_service or CandidateSearchService()
        self.min_query_length = min_query_length

    def execute(self, input_dto: SearchCandidatesInputDto) -> SearchCandidatesOutputDto:
        """候補者を検索する.

        - クエリが最小文字数以上: 部分一致検索（地域指定があればさらに絞り込む）
        - クエリが短く地域指定あり: 地域だけで絞り込む
        - どちらもなし: 入力待ち
        """
        query = (input_dto.query or "").strip()
        has_query = len(query) >= self.min_query_length
        has_region = bool(input_dto.region and input_dto.region.strip())

        if not has_query and not has_region:
            return SearchCandidatesOutputDto(
                is_searching=False,
                prompt_message=PROMPT_MESSAGE.format(min_length=self.min_query_length),
            )

        try:
            if has_query:
                candidates = self.candidate_repository.search(query, input_dto.field)
                if has_region:
                    in_region = {
                        c.id
                        for c in self.candidate_repository.filter_by_region(
                            input_dto.region
                        )
                    }
                    candidates = [c for c in candidates if c.id in in_region]
            else:
                candidates = self.candidate_repository.filter_by_region(
                    input_dto.region
                )

            if input_dto.sort_by_surname:
                candidates = self.search_service.sorted_by_surname(candidates)

            return SearchCandidatesOutputDto(
                is_searching=True,
                candidates=[CandidateOutputItem.from_entity(c) for c in candidates],
            )
        except Exception as e:
            logger.error(f"Failed to search candidates: {e}")
            return SearchCandidatesOutputDto(
                is_searching=True, success=False, error_message=str(e)
            )
