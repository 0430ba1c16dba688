"""Commands for managing candidate profiles.

候補者データファイルの一覧・検索・登録・更新・削除と、
旧形式ファイルの変換を行う。
"""

import dataclasses
import sys

from pathlib import Path

import click

from src.application.dtos.candidate_dto import (
    CandidateFormDto,
    CandidateOutputItem,
    CreateCandidateInputDto,
    DeleteCandidateInputDto,
    GetCandidateInputDto,
    UpdateCandidateInputDto,
)
from src.application.dtos.convert_candidate_file_dto import (
    ConvertCandidateFileInputDto,
)
from src.application.dtos.search_candidates_dto import SearchCandidatesInputDto
from src.domain.value_objects.search_field import SearchField
from src.infrastructure.di.container import Container, get_container, init_container
from src.infrastructure.importers import CODECS_BY_FORMAT
from src.interfaces.cli.base import BaseCommand, with_error_handling


FORMAT_CHOICES = click.Choice(sorted(CODECS_BY_FORMAT))
FIELD_CHOICES = click.Choice([f.value for f in SearchField], case_sensitive=False)


def _get_container() -> Container:
    try:
        return get_container()
    except RuntimeError:
        return init_container()


def _parse_stances(values: tuple[str, ...]) -> dict[str, str]:
    """"Issue=Stance"形式のオプション値を辞書にする."""
    stances: dict[str, str] = {}
    for value in values:
        issue, sep, stance = value.rpartition("=")
        if not sep or not issue.strip() or not stance.strip():
            raise click.BadParameter(
                f"expected ISSUE=STANCE, got {value!r}", param_hint="--stance"
            )
        stances[issue.strip()] = stance.strip()
    return stances


def _form_from_item(item: CandidateOutputItem) -> CandidateFormDto:
    return CandidateFormDto(
        name=item.name,
        age=item.age,
        position=item.position,
        party_affiliation=item.party_affiliation,
        region=item.region,
        years_of_experience=item.years_of_experience,
        campaign_slogan=item.campaign_slogan,
        platforms=list(item.platforms),
        supported_issues=list(item.supported_issues),
        opposed_issues=list(item.opposed_issues),
        notable_laws=list(item.notable_laws),
        image_path=item.image_path,
        social_stance=dict(item.social_stance),
    )


def _echo_summary(index: int | None, item: CandidateOutputItem) -> None:
    prefix = f"[{index}] " if index is not None else ""
    region = f" - {item.region}" if item.region else ""
    click.echo(
        f"{prefix}{item.name} ({item.position}, {item.party_affiliation}){region}"
    )


def _echo_detail(item: CandidateOutputItem) -> None:
    click.echo(f"Name: {item.name}")
    click.echo(f"ID: {item.id}")
    click.echo(f"Age: {item.age}")
    click.echo(f"Position: {item.position}")
    click.echo(f"Party Affiliation: {item.party_affiliation}")
    click.echo(f"Region: {item.region}")
    click.echo(f"Years of Experience: {item.years_of_experience}")
    click.echo(f"Campaign Slogan: {item.campaign_slogan}")
    click.echo(f"Platforms: {', '.join(item.platforms)}")
    click.echo(f"Supported Issues: {', '.join(item.supported_issues)}")
    click.echo(f"Opposed Issues: {', '.join(item.opposed_issues)}")
    click.echo(f"Notable Laws: {', '.join(item.notable_laws)}")
    click.echo(f"Image: {item.image_path}")
    if item.social_stance:
        click.echo("Stances On Social Issues:")
        for issue, stance in item.social_stance.items():
            click.echo(f"  {issue} - {stance}")


def _profile_options(required: bool):
    """add/updateで共通の候補者項目オプション."""

    def decorator(func):
        options = [
            click.option("--name", required=required, help="氏名"),
            click.option("--age", type=int, required=required, help="年齢（18〜100）"),
            click.option("--position", required=required, help="立候補する役職"),
            click.option("--party", required=required, help="所属政党"),
            click.option("--region", help="地域（例: NCR）"),
            click.option("--experience", type=int, help="政治経験年数（0〜80）"),
            click.option("--slogan", help="キャンペーンスローガン"),
            click.option("--platform", "platforms", multiple=True, help="公約"),
            click.option(
                "--supports", "supported_issues", multiple=True, help="支持する争点"
            ),
            click.option(
                "--opposes", "opposed_issues", multiple=True, help="反対する争点"
            ),
            click.option("--law", "notable_laws", multiple=True, help="主な法案"),
            click.option("--image", "image_path", help="画像パス"),
            click.option(
                "--stance",
                "stances",
                multiple=True,
                help='社会問題への立場（例: "Divorce=Agree"）',
            ),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


class CandidateCommands(BaseCommand):
    """Commands for candidate profiles."""

    def get_commands(self) -> list[click.Command]:
        """Get list of candidate commands"""
        return [
            CandidateCommands.list_candidates,
            CandidateCommands.search_candidates,
            CandidateCommands.show_candidate,
            CandidateCommands.add_candidate,
            CandidateCommands.update_candidate,
            CandidateCommands.delete_candidate,
            CandidateCommands.load_candidates,
            CandidateCommands.show_options,
            CandidateCommands.convert_file,
        ]

    @staticmethod
    @click.command("list")
    @click.option("--sort-surname", is_flag=True, help="姓で並べ替える")
    @with_error_handling
    def list_candidates(sort_surname: bool = False):
        """候補者一覧を表示"""
        usecase = _get_container().use_cases.manage_candidates_usecase()
        result = usecase.list_candidates(sort_by_surname=sort_surname)
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Failed to list")
            sys.exit(1)

        if not result.candidates:
            CandidateCommands.echo_warning("No candidates registered")
            return

        for index, item in enumerate(result.candidates):
            _echo_summary(None if sort_surname else index, item)
        CandidateCommands.echo_info(f"{len(result.candidates)} candidate(s)")

    @staticmethod
    @click.command("search")
    @click.argument("query", required=False, default="")
    @click.option("--field", type=FIELD_CHOICES, help="検索対象の項目")
    @click.option("--region", help="地域で絞り込む")
    @click.option("--sort-surname", is_flag=True, help="姓で並べ替える")
    @with_error_handling
    def search_candidates(
        query: str = "",
        field: str | None = None,
        region: str | None = None,
        sort_surname: bool = False,
    ):
        """候補者を検索

        名前・政党・役職・争点・地域などを大文字小文字を区別せず部分一致で検索する。
        """
        usecase = _get_container().use_cases.search_candidates_usecase()
        result = usecase.execute(
            SearchCandidatesInputDto(
                query=query,
                field=SearchField.from_label(field) if field else None,
                region=region,
                sort_by_surname=sort_surname,
            )
        )

        if not result.is_searching:
            CandidateCommands.echo_info(result.prompt_message or "")
            return
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Search failed")
            sys.exit(1)
        if result.is_empty:
            CandidateCommands.echo_warning("No candidates found")
            return

        for item in result.candidates:
            _echo_summary(None, item)
        CandidateCommands.echo_info(f"{len(result.candidates)} candidate(s) found")

    @staticmethod
    @click.command("show")
    @click.option("--index", type=int, help="一覧上の位置（0始まり）")
    @click.option("--id", "candidate_id", help="候補者ID")
    @click.option("--name", help="氏名（完全一致・大文字小文字無視）")
    @with_error_handling
    def show_candidate(
        index: int | None = None,
        candidate_id: str | None = None,
        name: str | None = None,
    ):
        """候補者の詳細を表示"""
        usecase = _get_container().use_cases.manage_candidates_usecase()
        result = usecase.get_candidate(
            GetCandidateInputDto(index=index, candidate_id=candidate_id, name=name)
        )
        if not result.success or result.candidate is None:
            CandidateCommands.echo_error(result.error_message or "Candidate not found")
            sys.exit(1)
        _echo_detail(result.candidate)

    @staticmethod
    @click.command("add")
    @_profile_options(required=True)
    @with_error_handling
    def add_candidate(
        name: str,
        age: int,
        position: str,
        party: str,
        region: str | None,
        experience: int | None,
        slogan: str | None,
        platforms: tuple[str, ...],
        supported_issues: tuple[str, ...],
        opposed_issues: tuple[str, ...],
        notable_laws: tuple[str, ...],
        image_path: str | None,
        stances: tuple[str, ...],
    ):
        """候補者を登録"""
        form = CandidateFormDto(
            name=name,
            age=age,
            position=position,
            party_affiliation=party,
            region=region or "",
            years_of_experience=experience or 0,
            campaign_slogan=slogan or "",
            platforms=list(platforms),
            supported_issues=list(supported_issues),
            opposed_issues=list(opposed_issues),
            notable_laws=list(notable_laws),
            image_path=image_path or "",
            social_stance=_parse_stances(stances),
        )

        usecase = _get_container().use_cases.manage_candidates_usecase()
        result = usecase.create_candidate(CreateCandidateInputDto(form=form))
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Failed to add")
            sys.exit(1)
        CandidateCommands.echo_success(f"Added {form.name} (ID: {result.candidate_id})")

    @staticmethod
    @click.command("update")
    @click.option("--index", "target_index", type=int, help="一覧上の位置（0始まり）")
    @click.option("--id", "candidate_id", help="候補者ID")
    @_profile_options(required=False)
    @with_error_handling
    def update_candidate(
        target_index: int | None,
        candidate_id: str | None,
        name: str | None,
        age: int | None,
        position: str | None,
        party: str | None,
        region: str | None,
        experience: int | None,
        slogan: str | None,
        platforms: tuple[str, ...],
        supported_issues: tuple[str, ...],
        opposed_issues: tuple[str, ...],
        notable_laws: tuple[str, ...],
        image_path: str | None,
        stances: tuple[str, ...],
    ):
        """候補者を更新

        指定しなかった項目は現在の値を引き継ぐ。リスト項目は指定すると置き換わる。
        """
        if target_index is None and candidate_id is None:
            raise click.UsageError("--index or --id is required")

        usecase = _get_container().use_cases.manage_candidates_usecase()
        current = usecase.get_candidate(
            GetCandidateInputDto(index=target_index, candidate_id=candidate_id)
        )
        if not current.success or current.candidate is None:
            CandidateCommands.echo_error(current.error_message or "Candidate not found")
            sys.exit(1)

        form = _form_from_item(current.candidate)
        overrides = {
            "name": name,
            "age": age,
            "position": position,
            "party_affiliation": party,
            "region": region,
            "years_of_experience": experience,
            "campaign_slogan": slogan,
            "image_path": image_path,
            "platforms": list(platforms) if platforms else None,
            "supported_issues": list(supported_issues) if supported_issues else None,
            "opposed_issues": list(opposed_issues) if opposed_issues else None,
            "notable_laws": list(notable_laws) if notable_laws else None,
        }
        form = dataclasses.replace(
            form, **{k: v for k, v in overrides.items() if v is not None}
        )
        if stances:
            form.social_stance.update(_parse_stances(stances))

        result = usecase.update_candidate(
            UpdateCandidateInputDto(
                form=form,
                index=target_index,
                candidate_id=candidate_id,
            )
        )
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Failed to update")
            sys.exit(1)
        CandidateCommands.echo_success(f"Updated {form.name}")

    @staticmethod
    @click.command("delete")
    @click.option("--index", type=int, help="一覧上の位置（0始まり）")
    @click.option("--id", "candidate_id", help="候補者ID")
    @click.option("--yes", is_flag=True, help="確認なしで削除")
    @with_error_handling
    def delete_candidate(
        index: int | None = None,
        candidate_id: str | None = None,
        yes: bool = False,
    ):
        """候補者を削除"""
        if index is None and candidate_id is None:
            raise click.UsageError("--index or --id is required")

        usecase = _get_container().use_cases.manage_candidates_usecase()
        current = usecase.get_candidate(
            GetCandidateInputDto(index=index, candidate_id=candidate_id)
        )
        if not current.success or current.candidate is None:
            CandidateCommands.echo_error(current.error_message or "Candidate not found")
            sys.exit(1)

        if not yes and not click.confirm(
            f"Delete {current.candidate.name}?", default=False
        ):
            CandidateCommands.echo_warning("Cancelled")
            return

        result = usecase.delete_candidate(
            DeleteCandidateInputDto(index=index, candidate_id=candidate_id)
        )
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Failed to delete")
            sys.exit(1)
        CandidateCommands.echo_success(f"Deleted {current.candidate.name}")

    @staticmethod
    @click.command("load")
    @with_error_handling
    def load_candidates():
        """データファイルを読み直して件数を表示"""
        usecase = _get_container().use_cases.manage_candidates_usecase()
        result = usecase.load_candidates()
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Failed to load")
            sys.exit(1)

        CandidateCommands.echo_success(f"Loaded {result.loaded} candidate(s)")
        if result.skipped:
            CandidateCommands.echo_warning(
                f"Skipped {result.skipped} malformed record(s)"
            )

    @staticmethod
    @click.command("options")
    @with_error_handling
    def show_options():
        """社会問題・立場・地域の選択肢を表示"""
        usecase = _get_container().use_cases.manage_candidates_usecase()

        click.echo("=== Social Issues ===")
        for issue in usecase.get_social_issue_options():
            click.echo(f"  {issue}")
        click.echo("\n=== Stances ===")
        for stance in usecase.get_stance_options():
            click.echo(f"  {stance}")
        click.echo("\n=== Regions ===")
        for region in usecase.get_region_options():
            click.echo(f"  {region}")

    @staticmethod
    @click.command("convert")
    @click.argument("source", type=click.Path(dir_okay=False))
    @click.argument("target", type=click.Path(dir_okay=False))
    @click.option(
        "--from",
        "source_format",
        type=FORMAT_CHOICES,
        default="delimited",
        show_default=True,
        help="変換元の書式",
    )
    @click.option(
        "--to",
        "target_format",
        type=FORMAT_CHOICES,
        default="key_value",
        show_default=True,
        help="変換先の書式",
    )
    @with_error_handling
    def convert_file(source: str, target: str, source_format: str, target_format: str):
        """候補者データファイルの書式を変換"""
        usecase = _get_container().use_cases.convert_candidate_file_usecase()
        result = usecase.execute(
            ConvertCandidateFileInputDto(
                source_path=Path(source),
                source_format=source_format,
                target_path=Path(target),
                target_format=target_format,
            )
        )
        if not result.success:
            CandidateCommands.echo_error(result.error_message or "Conversion failed")
            sys.exit(1)

        CandidateCommands.echo_success(
            f"Converted {result.converted} candidate(s) to {target_format}"
        )
        if result.skipped:
            CandidateCommands.echo_warning(
                f"Skipped {result.skipped} malformed record(s)"
            )
