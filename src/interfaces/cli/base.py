"""CLIコマンドの共通基盤."""

import functools
import sys

from collections.abc import Callable
from typing import Any

import click

from src.common.logging import get_logger
from src.infrastructure.exceptions import InfrastructureError


logger = get_logger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """コマンド実行中の例外をメッセージ表示と終了コード1に変換する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except InfrastructureError as e:
            logger.error("Command failed", command=func.__name__, error=e.message)
            BaseCommand.echo_error(e.message)
            sys.exit(1)
        except Exception as e:
            logger.exception("Unexpected error", command=func.__name__)
            BaseCommand.echo_error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper


class BaseCommand:
    """コマンド群の基底クラス."""

    @staticmethod
    def echo_info(message: str):
        """Show an info message"""
        click.echo(message)

    @staticmethod
    def echo_success(message: str):
        """Show a success message"""
        click.echo(click.style(f"✓ {message}", fg="green"))

    @staticmethod
    def echo_warning(message: str):
        """Show a warning message"""
        click.echo(click.style(f"⚠️  {message}", fg="yellow"))

    @staticmethod
    def echo_error(message: str):
        """Show an error message"""
        click.echo(click.style(f"✗ {message}", fg="red"), err=True)

    def get_commands(self) -> list[click.Command]:
        """Get list of commands"""
        return []
