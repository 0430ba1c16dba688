"""Gabay CLI entry point."""

from pathlib import Path

import click

from src.common.logging import setup_logging
from src.infrastructure.config.settings import get_settings
from src.infrastructure.di.container import init_container
from src.interfaces.cli.commands.candidate_commands import CandidateCommands


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    envvar="GABAY_CANDIDATES_FILE",
    help="候補者データファイルのパス",
)
@click.option(
    "--format",
    "file_format",
    type=click.Choice(["key_value", "delimited"]),
    help="候補者データファイルの書式",
)
def main(data_file: str | None, file_format: str | None):
    """Candidate profile store (候補者プロフィール管理)."""
    settings = get_settings()
    overrides: dict[str, object] = {}
    if data_file:
        overrides["candidates_file"] = Path(data_file)
    if file_format:
        overrides["file_format"] = file_format
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(level=settings.log_level, json_logs=settings.log_json)
    init_container(settings)


for command in CandidateCommands().get_commands():
    main.add_command(command)


if __name__ == "__main__":
    main()
