"""候補者管理のユースケース."""

from src.application.dtos.candidate_dto import (
    CandidateOutputItem,
    CreateCandidateInputDto,
    CreateCandidateOutputDto,
    DeleteCandidateInputDto,
    DeleteCandidateOutputDto,
    GetCandidateInputDto,
    GetCandidateOutputDto,
    ListCandidatesOutputDto,
    LoadCandidatesOutputDto,
    UpdateCandidateInputDto,
    UpdateCandidateOutputDto,
)
from src.common.logging import get_logger
from src.domain.repositories.candidate_repository import CandidateRepository
from src.domain.value_objects.region import REGIONS
from src.domain.value_objects.social_stance import SOCIAL_ISSUES, Stance


logger = get_logger(__name__)

ERROR_TARGET_REQUIRED = "Candidate index or ID is required"


class ManageCandidatesUseCase:
    """候補者管理のユースケース.

    管理画面からの登録・更新・削除を受け付ける。
    検証エラー・範囲外エラーは例外にせず出力DTOのerror_messageで返す。
    """

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        default_image_path: str | None = None,
    ) -> None:
        """ユースケースを初期化する.

        Args:
            candidate_repository: 候補者リポジトリインスタンス
            default_image_path: 画像未指定時に使うプレースホルダ
        """
        self.candidate_repository = candidate_repository
        self.default_image_path = default_image_path

    def load_candidates(self) -> LoadCandidatesOutputDto:
        """データファイルから候補者を読み直す."""
        try:
            report = self.candidate_repository.load()
            return LoadCandidatesOutputDto(
                success=report.success,
                loaded=report.loaded,
                skipped=report.skipped,
                error_message=report.error_message,
            )
        except Exception as e:
            logger.error(f"Failed to load candidates: {e}")
            return LoadCandidatesOutputDto(success=False, error_message=str(e))

    def list_candidates(self, sort_by_surname: bool = False) -> ListCandidatesOutputDto:
        """候補者一覧を取得する."""
        try:
            if sort_by_surname:
                candidates = self.candidate_repository.sorted_by_surname()
            else:
                candidates = self.candidate_repository.get_all()
            return ListCandidatesOutputDto(
                candidates=[CandidateOutputItem.from_entity(c) for c in candidates]
            )
        except Exception as e:
            logger.error(f"Failed to list candidates: {e}")
            return ListCandidatesOutputDto(
                candidates=[], success=False, error_message=str(e)
            )

    def get_candidate(self, input_dto: GetCandidateInputDto) -> GetCandidateOutputDto:
        """位置・ID・氏名のいずれかで候補者を1件取得する."""
        try:
            if input_dto.candidate_id is not None:
                candidate = self.candidate_repository.get_by_id(input_dto.candidate_id)
            elif input_dto.index is not None:
                candidate = self.candidate_repository.get(input_dto.index)
            elif input_dto.name is not None:
                candidate = self.candidate_repository.get_by_name(input_dto.name)
            else:
                return GetCandidateOutputDto(
                    success=False, error_message=ERROR_TARGET_REQUIRED
                )

            if candidate is None:
                return GetCandidateOutputDto(
                    success=False, error_message="Candidate not found"
                )
            return GetCandidateOutputDto(
                candidate=CandidateOutputItem.from_entity(candidate)
            )
        except Exception as e:
            logger.error(f"Failed to get candidate: {e}")
            return GetCandidateOutputDto(success=False, error_message=str(e))

    def create_candidate(
        self, input_dto: CreateCandidateInputDto
    ) -> CreateCandidateOutputDto:
        """候補者を登録する."""
        try:
            candidate = input_dto.form.to_entity(self.default_image_path)
        except ValueError as e:
            return CreateCandidateOutputDto(success=False, error_message=str(e))

        try:
            error = self.candidate_repository.add(candidate)
            if error is not None:
                return CreateCandidateOutputDto(success=False, error_message=error)

            # 重複IDの振り直しがあり得るので、末尾のレコードからIDを得る
            stored = self.candidate_repository.get(
                self.candidate_repository.count() - 1
            )
            return CreateCandidateOutputDto(
                success=True, candidate_id=stored.id if stored else candidate.id
            )
        except Exception as e:
            logger.error(f"Failed to create candidate: {e}")
            return CreateCandidateOutputDto(success=False, error_message=str(e))

    def update_candidate(
        self, input_dto: UpdateCandidateInputDto
    ) -> UpdateCandidateOutputDto:
        """候補者を更新する（レコード全体の置き換え）."""
        try:
            candidate = input_dto.form.to_entity(self.default_image_path)
        except ValueError as e:
            return UpdateCandidateOutputDto(success=False, error_message=str(e))

        try:
            if input_dto.candidate_id is not None:
                error = self.candidate_repository.update_by_id(
                    input_dto.candidate_id, candidate
                )
            elif input_dto.index is not None:
                error = self.candidate_repository.update(input_dto.index, candidate)
            else:
                error = ERROR_TARGET_REQUIRED

            if error is not None:
                return UpdateCandidateOutputDto(success=False, error_message=error)
            return UpdateCandidateOutputDto(success=True)
        except Exception as e:
            logger.error(f"Failed to update candidate: {e}")
            return UpdateCandidateOutputDto(success=False, error_message=str(e))

    def delete_candidate(
        self, input_dto: DeleteCandidateInputDto
    ) -> DeleteCandidateOutputDto:
        """候補者を削除する."""
        try:
            if input_dto.candidate_id is not None:
                error = self.candidate_repository.delete_by_id(input_dto.candidate_id)
            elif input_dto.index is not None:
                error = self.candidate_repository.delete(input_dto.index)
            else:
                error = ERROR_TARGET_REQUIRED

            if error is not None:
                return DeleteCandidateOutputDto(success=False, error_message=error)
            return DeleteCandidateOutputDto(success=True)
        except Exception as e:
            logger.error(f"Failed to delete candidate: {e}")
            return DeleteCandidateOutputDto(success=False, error_message=str(e))

    def get_social_issue_options(self) -> list[str]:
        """社会問題の選択肢を取得する."""
        return list(SOCIAL_ISSUES)

    def get_stance_options(self) -> list[str]:
        """立場の選択肢を取得する."""
        return [stance.value for stance in Stance]

    def get_region_options(self) -> list[str]:
        """地域の選択肢を取得する."""
        return [region.label for region in REGIONS]
