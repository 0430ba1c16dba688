"""
Configuration module for Gabay.

設定管理の一元化モジュール。settings.pyが唯一のエントリーポイント。
"""

from src.infrastructure.config.settings import (
    DEFAULT_CANDIDATES_FILE,
    DEFAULT_IMAGE_PATH,
    ENV_FILE_PATH,
    Settings,
    find_env_file,
    get_settings,
    reload_settings,
)


__all__ = [
    "DEFAULT_CANDIDATES_FILE",
    "DEFAULT_IMAGE_PATH",
    "ENV_FILE_PATH",
    "Settings",
    "find_env_file",
    "get_settings",
    "reload_settings",
]
