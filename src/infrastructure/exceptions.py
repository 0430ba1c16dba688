"""Infrastructure layer exceptions."""

from pathlib import Path


class InfrastructureError(Exception):
    """インフラ層の例外の基底クラス."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FileAccessError(InfrastructureError):
    """候補者データファイルの読み書きに失敗した場合の例外."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Error accessing file: {path} ({reason})")
        self.path = Path(path)
        self.reason = reason


class RecordParseError(InfrastructureError):
    """1件分のレコードが解析できなかった場合の例外.

    ロード処理ではこの例外を受けて該当レコードのみスキップする。
    """

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{reason}")
        self.reason = reason
        self.line_number = line_number
