"""候補者データファイルの書式変換に関するDTO."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ConvertCandidateFileInputDto:
    """書式変換の入力DTO."""

    source_path: Path
    source_format: str
    target_path: Path
    target_format: str


@dataclass
class ConvertCandidateFileOutputDto:
    """書式変換の出力DTO."""

    success: bool
    converted: int = 0
    skipped: int = 0
    error_message: str | None = None
