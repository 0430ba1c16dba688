"""候補者CLIコマンドのテスト."""

from pathlib import Path

import pytest

from click.testing import CliRunner

from src.infrastructure.di.container import reset_container
from src.infrastructure.importers.delimited_record_codec import DelimitedRecordCodec
from src.infrastructure.importers.key_value_block_codec import KeyValueBlockCodec
from src.interfaces.cli.cli import main
from tests.fixtures.candidate_factories import create_sample_candidates


_SETUP_LOGGING_PATH = "src.interfaces.cli.cli.setup_logging"

MARIA_ARGS = [
    "add",
    "--name",
    "Maria Santos",
    "--age",
    "52",
    "--position",
    "Senator",
    "--party",
    "Liberal Party",
    "--region",
    "NCR",
    "--platform",
    "Healthcare",
    "--stance",
    "Legalization of Divorce=Agree",
]


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(_SETUP_LOGGING_PATH, lambda **kwargs: None)
    reset_container()
    yield
    reset_container()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "candidates.txt"


@pytest.fixture
def populated_file(data_file: Path) -> Path:
    data_file.write_text(
        KeyValueBlockCodec().encode(create_sample_candidates()), encoding="utf-8"
    )
    return data_file


def _invoke(data_file: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(main, ["--data-file", str(data_file), *args])


class TestAddAndList:
    """add / list コマンドのテスト."""

    def test_add_then_list(self, data_file: Path) -> None:
        """追加した候補者が一覧に表示されること."""
        added = _invoke(data_file, *MARIA_ARGS)

        assert added.exit_code == 0, added.output
        assert "Added Maria Santos" in added.output

        listed = _invoke(data_file, "list")

        assert listed.exit_code == 0
        assert "[0] Maria Santos (Senator, Liberal Party) - NCR" in listed.output
        assert "Stances On Social Issues:" in data_file.read_text(encoding="utf-8")

    def test_add_invalid_age(self, data_file: Path) -> None:
        """年齢が範囲外なら終了コード1でエラーを表示すること."""
        args = [*MARIA_ARGS]
        args[args.index("52")] = "15"

        result = _invoke(data_file, *args)

        assert result.exit_code == 1
        assert "Age must be between 18 and 100" in result.output

    def test_add_invalid_stance_option(self, data_file: Path) -> None:
        """ISSUE=STANCE形式でない--stanceは使い方エラーになること."""
        args = [*MARIA_ARGS[:-1], "Federalism"]

        result = _invoke(data_file, *args)

        assert result.exit_code == 2

    def test_list_empty(self, data_file: Path) -> None:
        """候補者がいなければその旨を表示すること."""
        result = _invoke(data_file, "list")

        assert result.exit_code == 0
        assert "No candidates registered" in result.output

    def test_list_sorted_by_surname(self, populated_file: Path) -> None:
        """姓順で一覧を表示できること."""
        result = _invoke(populated_file, "list", "--sort-surname")

        assert result.exit_code == 0
        output = result.output
        assert output.index("Pedro Aquino") < output.index("Ana Bautista")
        assert output.index("Ana Bautista") < output.index("Maria Santos")


class TestSearch:
    """search コマンドのテスト."""

    def test_search_by_region_text(self, populated_file: Path) -> None:
        """地域名の部分一致で検索できること."""
        result = _invoke(populated_file, "search", "ncr")

        assert result.exit_code == 0
        assert "Maria Santos" in result.output
        assert "Pedro Aquino" not in result.output

    def test_short_query_shows_prompt(self, populated_file: Path) -> None:
        """短すぎるクエリでは入力を促すメッセージを表示すること."""
        result = _invoke(populated_file, "search", "n")

        assert result.exit_code == 0
        assert "Type at least 2 characters" in result.output

    def test_search_with_field_and_region(self, populated_file: Path) -> None:
        """検索項目と地域を組み合わせて検索できること."""
        result = _invoke(
            populated_file,
            "search",
            "senator",
            "--field",
            "position",
            "--region",
            "Region VII",
        )

        assert result.exit_code == 0
        assert "Ana Bautista" in result.output
        assert "Maria Santos" not in result.output

    def test_search_no_results(self, populated_file: Path) -> None:
        """一致しなければ0件の旨を表示すること."""
        result = _invoke(populated_file, "search", "zzz")

        assert "No candidates found" in result.output


class TestShowUpdateDelete:
    """show / update / delete コマンドのテスト."""

    def test_show_by_name(self, populated_file: Path) -> None:
        """氏名で詳細を表示できること."""
        result = _invoke(populated_file, "show", "--name", "pedro aquino")

        assert result.exit_code == 0
        assert "Party Affiliation: Akbayan" in result.output
        assert "Reinstating the Death Penalty - Disagree" in result.output

    def test_show_missing(self, populated_file: Path) -> None:
        """存在しない位置は終了コード1になること."""
        result = _invoke(populated_file, "show", "--index", "9")

        assert result.exit_code == 1
        assert "Candidate not found" in result.output

    def test_update_keeps_unspecified_fields(self, populated_file: Path) -> None:
        """指定した項目だけが変わり、他の項目は引き継がれること."""
        result = _invoke(populated_file, "update", "--index", "0", "--age", "60")

        assert result.exit_code == 0, result.output
        shown = _invoke(populated_file, "show", "--index", "0")
        assert "Age: 60" in shown.output
        assert "Name: Maria Santos" in shown.output
        assert "ID: 11111111-1111-4111-8111-111111111111" in shown.output
        assert "Same-Sex Marriage - Agree" in shown.output

    def test_update_requires_target(self, populated_file: Path) -> None:
        """位置もIDも指定しなければ使い方エラーになること."""
        result = _invoke(populated_file, "update", "--age", "60")

        assert result.exit_code == 2

    def test_delete_with_confirmation_flag(self, populated_file: Path) -> None:
        """--yesで確認なしに削除でき、後続の位置が詰まること."""
        result = _invoke(populated_file, "delete", "--index", "0", "--yes")

        assert result.exit_code == 0
        assert "Deleted Maria Santos" in result.output
        listed = _invoke(populated_file, "list")
        assert "[0] Pedro Aquino" in listed.output

    def test_delete_cancelled(self, populated_file: Path) -> None:
        """確認で拒否すると削除しないこと."""
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["--data-file", str(populated_file), "delete", "--index", "0"],
            input="n\n",
        )

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert "Maria Santos" in populated_file.read_text(encoding="utf-8")


class TestLoadOptionsConvert:
    """load / options / convert コマンドのテスト."""

    def test_load_reports_skipped(self, data_file: Path) -> None:
        """読み込み件数とスキップ件数を表示すること."""
        data_file.write_text(
            "Name: No Age\n\n"
            + KeyValueBlockCodec().encode(create_sample_candidates()),
            encoding="utf-8",
        )

        result = _invoke(data_file, "load")

        assert result.exit_code == 0
        assert "Loaded 3 candidate(s)" in result.output
        assert "Skipped 1 malformed record(s)" in result.output

    def test_options(self, data_file: Path) -> None:
        """争点・立場・地域の選択肢を表示すること."""
        result = _invoke(data_file, "options")

        assert result.exit_code == 0
        assert "Minimum Wage Standardization" in result.output
        assert "No Data" in result.output
        assert "BARMM (Bangsamoro Autonomous Region in Muslim Mindanao)" in result.output

    def test_convert_delimited_file(self, data_file: Path, tmp_path: Path) -> None:
        """区切り形式のファイルをキー・値形式に変換できること."""
        legacy = tmp_path / "legacy.txt"
        legacy.write_text(
            DelimitedRecordCodec().encode(create_sample_candidates()), encoding="utf-8"
        )
        target = tmp_path / "converted.txt"

        result = _invoke(data_file, "convert", str(legacy), str(target))

        assert result.exit_code == 0, result.output
        assert "Converted 3 candidate(s) to key_value" in result.output
        listed = _invoke(target, "list")
        assert "[2] Ana Bautista" in listed.output
