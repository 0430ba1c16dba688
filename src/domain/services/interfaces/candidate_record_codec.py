"""候補者データファイルの書式変換インターフェース."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from src.domain.entities.candidate import Candidate


@dataclass(frozen=True)
class SkippedRecord:
    """読み込めずにスキップしたレコード."""

    line_number: int
    reason: str


@dataclass
class DecodeResult:
    """ファイル全体の解析結果."""

    candidates: list[Candidate] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)


class ICandidateRecordCodec(Protocol):
    """候補者レコードとテキスト表現の相互変換.

    decodeは壊れたレコードがあっても中断せず、SkippedRecordとして報告する。
    """

    format_name: str

    def encode(self, candidates: Sequence[Candidate]) -> str:
        """候補者一覧をファイル全体のテキストに変換する."""
        ...

    def decode(self, text: str) -> DecodeResult:
        """ファイル全体のテキストを候補者一覧に変換する."""
        ...
