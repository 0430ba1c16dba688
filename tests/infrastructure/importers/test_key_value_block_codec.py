"""キー・値ブロック形式コーデックのテスト."""

from datetime import datetime

import pytest

from src.domain.value_objects.social_stance import Stance
from src.infrastructure.importers._constants import FILE_HEADER
from src.infrastructure.importers.key_value_block_codec import KeyValueBlockCodec
from tests.fixtures.candidate_factories import (
    create_candidate,
    create_sample_candidates,
)


SAMPLE_FILE = """\
# Candidate Profiles - Generated by Gabay Application
# Last updated: 2025-03-01T10:00:00

Name: Maria Santos
Age: 52
Running Position: Senator
Party Affiliation: Liberal Party
Hometown Region: NCR
Years of Experience: 20
Campaign Slogan: Para sa Bayan
Platform: Women's Rights;Healthcare
Supported Issues: Education
Opposed Issues:
Notable Laws Enacted: RA 11210
Image: resources/images/candidates/maria.jpg
Stances On Social Issues:
Legalization of Divorce - Agree
Federalism - Nuetral
Same-Sex Marriage - Maybe

Name: Pedro Aquino
age: 38
Position: Party-list Representative
Party Affiliation: Akbayan
Social Stance: Federalism - Disagree
Social Stances: Anti-Terror Law - Disagree;Mandatory ROTC for Senior High Students - Agree
"""


@pytest.fixture
def codec() -> KeyValueBlockCodec:
    return KeyValueBlockCodec(clock=lambda: datetime(2025, 3, 1, 10, 0, 0))


class TestDecode:
    """KeyValueBlockCodec.decode のテスト."""

    def test_decodes_blocks_with_aliases(self, codec: KeyValueBlockCodec) -> None:
        """別名のキーを含むブロックを読めること."""
        result = codec.decode(SAMPLE_FILE)

        assert result.skipped == []
        assert [c.name for c in result.candidates] == ["Maria Santos", "Pedro Aquino"]
        maria = result.candidates[0]
        assert maria.age == 52
        assert maria.position == "Senator"
        assert maria.region == "NCR"
        assert maria.years_of_experience == 20
        assert maria.platforms == ["Women's Rights", "Healthcare"]
        assert maria.opposed_issues == []
        assert maria.notable_laws == ["RA 11210"]

    def test_nested_stance_section(self, codec: KeyValueBlockCodec) -> None:
        """入れ子のスタンスセクションを読み、解釈できない行は捨てること."""
        maria = codec.decode(SAMPLE_FILE).candidates[0]
        assert maria.social_stance == {
            "Legalization of Divorce": Stance.AGREE,
            "Federalism": Stance.NEUTRAL,
        }

    def test_single_line_and_legacy_stances(self, codec: KeyValueBlockCodec) -> None:
        """1行形式と旧形式のスタンスを読めること."""
        pedro = codec.decode(SAMPLE_FILE).candidates[1]
        assert pedro.social_stance == {
            "Federalism": Stance.DISAGREE,
            "Anti-Terror Law": Stance.DISAGREE,
            "Mandatory ROTC for Senior High Students": Stance.AGREE,
        }

    def test_missing_optional_fields_use_defaults(
        self, codec: KeyValueBlockCodec
    ) -> None:
        """省略された項目は既定値になること."""
        pedro = codec.decode(SAMPLE_FILE).candidates[1]
        assert pedro.years_of_experience == 0
        assert pedro.region == ""
        assert pedro.platforms == []

    def test_stance_section_ends_at_known_key(self, codec: KeyValueBlockCodec) -> None:
        """スタンスセクションの後に既知のキーが来たら通常の項目として読むこと."""
        text = (
            "Name: Ana Bautista\n"
            "Age: 41\n"
            "Stances On Social Issues:\n"
            "Federalism - Agree\n"
            "Position: Governor\n"
            "Party Affiliation: Independent\n"
        )
        candidate = codec.decode(text).candidates[0]
        assert candidate.social_stance == {"Federalism": Stance.AGREE}
        assert candidate.position == "Governor"

    def test_skips_block_with_invalid_age(self, codec: KeyValueBlockCodec) -> None:
        """年齢が整数でないブロックはスキップし、他のブロックは読むこと."""
        text = SAMPLE_FILE.replace("Age: 52", "Age: fifty-two")

        result = codec.decode(text)

        assert [c.name for c in result.candidates] == ["Pedro Aquino"]
        assert len(result.skipped) == 1
        assert result.skipped[0].line_number == 4

    def test_skips_block_without_age(self, codec: KeyValueBlockCodec) -> None:
        """年齢のないブロックはスキップされること."""
        result = codec.decode("Name: Nobody\nPosition: Mayor\n")
        assert result.candidates == []
        assert result.skipped[0].reason == "candidate block has no age"

    def test_lines_before_first_block_are_ignored(
        self, codec: KeyValueBlockCodec
    ) -> None:
        """最初のName行より前の行は無視されること."""
        result = codec.decode("Age: 40\nName: Late Start\nAge: 33\n")
        assert len(result.candidates) == 1
        assert result.candidates[0].age == 33

    def test_ids_are_stable_without_id_line(self, codec: KeyValueBlockCodec) -> None:
        """ID行のないブロックは何度読んでも同じIDになること."""
        first = codec.decode(SAMPLE_FILE).candidates
        second = codec.decode(SAMPLE_FILE).candidates
        assert [c.id for c in first] == [c.id for c in second]
        assert first[0].id != first[1].id


class TestEncode:
    """KeyValueBlockCodec.encode のテスト."""

    def test_writes_header_and_blocks(self, codec: KeyValueBlockCodec) -> None:
        """ヘッダと空行区切りのブロックを書き出すこと."""
        candidate = create_candidate(id="abc")

        lines = codec.encode([candidate]).split("\n")

        assert lines[0] == FILE_HEADER
        assert lines[1] == "# Last updated: 2025-03-01T10:00:00"
        assert lines[2] == ""
        assert lines[3] == "Name: Juan Dela Cruz"
        assert lines[4] == "ID: abc"
        assert "Stances On Social Issues:" in lines
        assert "Legalization of Divorce - Agree" in lines

    def test_round_trip_preserves_candidates(self, codec: KeyValueBlockCodec) -> None:
        """書き出したテキストを読み直すと同じ内容になること."""
        candidates = create_sample_candidates()
        candidates.append(
            create_candidate(
                campaign_slogan="Bayan: Una; Lagi",
                platforms=["Roads; Bridges"],
                notable_laws=["Line one\nLine two"],
            )
        )

        decoded = codec.decode(codec.encode(candidates)).candidates

        assert [c.to_dict() for c in decoded] == [c.to_dict() for c in candidates]

    def test_round_trip_keeps_surrounding_whitespace(
        self, codec: KeyValueBlockCodec
    ) -> None:
        """値の前後の空白やタブも読み直しで失われないこと."""
        candidate = create_candidate(
            name=" Jane Cruz ",
            campaign_slogan="  Serve ",
            region="　NCR",
            platforms=[" Health", "Jobs "],
            notable_laws=["\tRA 1\t"],
        )

        lines = codec.encode_record(candidate)
        decoded = codec.decode(codec.encode([candidate])).candidates[0]

        assert "Name: \\sJane Cruz\\s" in lines
        assert decoded.to_dict() == candidate.to_dict()

    def test_candidate_without_stances_has_no_section(
        self, codec: KeyValueBlockCodec
    ) -> None:
        """スタンスがなければセクション見出しを書かないこと."""
        lines = codec.encode_record(create_candidate(social_stance={}))
        assert "Stances On Social Issues:" not in lines
        assert lines[-1].startswith("Image:")

    def test_empty_values_have_no_trailing_space(
        self, codec: KeyValueBlockCodec
    ) -> None:
        """空の値の行末に空白を残さないこと."""
        lines = codec.encode_record(create_candidate(platforms=[], region=""))
        assert "Platforms:" in lines
        assert "Region:" in lines
