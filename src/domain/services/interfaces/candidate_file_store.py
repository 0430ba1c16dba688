"""候補者データファイルの読み書きインターフェース."""

from pathlib import Path
from typing import Protocol


class ICandidateFileStore(Protocol):
    """ファイル全体をテキストとして読み書きする.

    実装はI/Oに失敗した場合に例外を送出する。
    """

    path: Path

    def ensure_exists(self) -> None:
        """親ディレクトリと空ファイルを用意する."""
        ...

    def read_all(self) -> str:
        """ファイル全体を読む."""
        ...

    def write_all(self, content: str) -> None:
        """ファイル全体を上書きする."""
        ...
