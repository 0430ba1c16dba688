"""Flat file access for the candidate data file."""

from pathlib import Path

from src.common.logging import get_logger
from src.infrastructure.exceptions import FileAccessError


logger = get_logger(__name__)


class FlatFileStore:
    """候補者データファイル全体の読み書き.

    書き込みは既存内容の上書きのみ（追記・一時ファイル経由のリネームはしない）。
    書き込み途中で異常終了するとファイルが壊れる可能性がある。

    I/O例外はログに記録したうえでFileAccessErrorとして呼び出し元に伝える。
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def ensure_exists(self) -> None:
        """親ディレクトリと空ファイルを作成する（既にあれば何もしない）."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            logger.error(
                "Failed to create candidate file", path=str(self.path), error=str(e)
            )
            raise FileAccessError(self.path, str(e)) from e

    def read_all(self) -> str:
        """ファイル全体をテキストとして読む."""
        self.ensure_exists()
        try:
            return self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Failed to read candidate file", path=str(self.path), error=str(e)
            )
            raise FileAccessError(self.path, str(e)) from e

    def write_all(self, content: str) -> None:
        """ファイル全体を上書きする."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding=self.encoding)
        except OSError as e:
            logger.error(
                "Failed to write candidate file", path=str(self.path), error=str(e)
            )
            raise FileAccessError(self.path, str(e)) from e
