"""候補者データファイルの書式変換ユースケース.

旧形式（区切り形式）のファイルをキー・値ブロック形式へ移行する用途を想定。
逆方向の変換も同じ手順で行える。
"""

from collections.abc import Callable, Mapping
from pathlib import Path

from src.application.dtos.convert_candidate_file_dto import (
    ConvertCandidateFileInputDto,
    ConvertCandidateFileOutputDto,
)
from src.common.logging import get_logger
from src.domain.services.interfaces.candidate_file_store import ICandidateFileStore
from src.domain.services.interfaces.candidate_record_codec import (
    ICandidateRecordCodec,
)


logger = get_logger(__name__)


class ConvertCandidateFileUseCase:
    """候補者データファイルの書式変換."""

    def __init__(
        self,
        codecs: Mapping[str, ICandidateRecordCodec],
        file_store_factory: Callable[[Path], ICandidateFileStore],
    ) -> None:
        """ユースケースを初期化する.

        Args:
            codecs: 書式名 → コーデック
            file_store_factory: パスからファイルストアを生成する関数
        """
        self.codecs = codecs
        self.file_store_factory = file_store_factory

    def execute(
        self, input_dto: ConvertCandidateFileInputDto
    ) -> ConvertCandidateFileOutputDto:
        """変換元を読み、壊れたレコードを除いて変換先に書き出す."""
        source_codec = self.codecs.get(input_dto.source_format)
        target_codec = self.codecs.get(input_dto.target_format)
        if source_codec is None or target_codec is None:
            unknown = (
                input_dto.source_format
                if source_codec is None
                else input_dto.target_format
            )
            return ConvertCandidateFileOutputDto(
                success=False, error_message=f"Unknown candidate file format: {unknown}"
            )

        source_path = Path(input_dto.source_path)
        target_path = Path(input_dto.target_path)
        if source_path.resolve() == target_path.resolve():
            return ConvertCandidateFileOutputDto(
                success=False,
                error_message="Source and target must be different files",
            )

        try:
            source = self.file_store_factory(source_path)
            if not source.path.exists():
                return ConvertCandidateFileOutputDto(
                    success=False,
                    error_message=f"Source file not found: {source.path}",
                )
            result = source_codec.decode(source.read_all())

            target = self.file_store_factory(target_path)
            target.write_all(target_codec.encode(result.candidates))
        except Exception as e:
            logger.error(f"Failed to convert candidate file: {e}")
            return ConvertCandidateFileOutputDto(success=False, error_message=str(e))

        logger.info(
            "Converted candidate file",
            source=str(source_path),
            target=str(target_path),
            converted=len(result.candidates),
            skipped=len(result.skipped),
        )
        return ConvertCandidateFileOutputDto(
            success=True,
            converted=len(result.candidates),
            skipped=len(result.skipped),
        )
