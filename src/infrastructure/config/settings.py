"""Application settings.

環境変数（GABAY_プレフィックス）と.envファイルから設定を読み込む。
設定の参照はget_settings()経由で行うこと。
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities.candidate import Candidate


DEFAULT_CANDIDATES_FILE = "data/candidates.txt"
DEFAULT_IMAGE_PATH = Candidate.DEFAULT_IMAGE_PATH


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に.envファイルを探す."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """Gabay settings."""

    model_config = SettingsConfigDict(
        env_prefix="GABAY_",
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    candidates_file: Path = Field(
        default=Path(DEFAULT_CANDIDATES_FILE),
        description="候補者データファイルのパス",
    )
    file_format: Literal["key_value", "delimited"] = Field(
        default="key_value",
        description="候補者データファイルの書式",
    )
    log_level: str = Field(default="INFO", description="ログレベル")
    log_json: bool = Field(default=False, description="JSON形式でログを出力する")
    default_image_path: str = Field(
        default=DEFAULT_IMAGE_PATH,
        description="画像未設定時のプレースホルダ画像パス",
    )
    min_search_query_length: int = Field(
        default=2,
        ge=1,
        description="検索を開始する最小文字数",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """キャッシュされた設定インスタンスを返す."""
    return Settings()


def reload_settings() -> Settings:
    """設定キャッシュを破棄して再読込する."""
    get_settings.cache_clear()
    return get_settings()
