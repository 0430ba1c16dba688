"""ロギング設定モジュール.

structlogを標準ライブラリのloggingに接続し、アプリケーション全体で
同じハンドラ・フォーマットを使うようにする。
"""

import logging
import sys

from typing import Any

import structlog


_configured = False


def setup_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """ロギングを初期化する.

    CLIなどのエントリーポイントで一度だけ呼び出す。
    二回目以降の呼び出しはログレベルのみ更新する。

    Args:
        level: ログレベル名（DEBUG, INFO, WARNING, ERROR）
        json_logs: TrueならJSON形式で出力する
    """
    global _configured

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _configured:
        return

    shared_processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: Any
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"]
        )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 標準loggingから出たレコードも同じレンダラーで整形する
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.handlers = [handler]

    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """名前付きロガーを取得する."""
    return structlog.get_logger(name)
