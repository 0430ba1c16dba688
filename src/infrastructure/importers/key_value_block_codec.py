"""キー・値ブロック形式の候補者データ書式.

1候補者を複数行の"Key: value"で表す。"Name:"行が新しいブロックの開始。
空行と"#"で始まる行は読み飛ばす。スタンスは次のどちらでも書ける:

    Social Stance: Federalism - Agree

    Stances On Social Issues:
    Federalism - Agree
    Same-Sex Marriage - Neutral

入れ子セクションは、次に既知のキーが現れるまで"Issue - Stance"行を消費する。
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from src.common.logging import get_logger
from src.domain.entities.candidate import Candidate
from src.domain.services.interfaces.candidate_record_codec import (
    DecodeResult,
    SkippedRecord,
)
from src.domain.value_objects.social_stance import SOCIAL_ISSUES, Stance
from src.infrastructure.exceptions import RecordParseError
from src.infrastructure.importers._constants import (
    FILE_HEADER,
    KEY_ALIASES,
    LAST_UPDATED_PREFIX,
    LEGACY_SOCIAL_STANCES_KEY,
    LIST_ATTRIBUTES,
    LIST_DELIMITER,
    SOCIAL_STANCE_KEY,
    SOCIAL_STANCES_SECTION,
)
from src.infrastructure.importers._utils import (
    derive_record_id,
    escape,
    join_list,
    parse_stance_entry,
    parse_strict_int,
    split_list,
    unescape,
)


logger = get_logger(__name__)

# 小文字キー → 属性名
_ATTRIBUTE_BY_KEY: dict[str, str] = {
    alias.lower(): attribute
    for attribute, aliases in KEY_ALIASES.items()
    for alias in aliases
}
_STANCE_KEYS = frozenset(
    {SOCIAL_STANCE_KEY.lower(), LEGACY_SOCIAL_STANCES_KEY.lower()}
)
# 行頭・行末で読み捨てる空白。値の端の空白はエスケープして書くのでここでは落ちない
_LINE_PADDING = " \t\r"


@dataclass
class _Block:
    """解析途中の候補者ブロック."""

    line_number: int
    values: dict[str, str] = field(default_factory=dict)
    stance_entries: list[tuple[int, str]] = field(default_factory=list)


class KeyValueBlockCodec:
    """キー・値ブロック形式の読み書き."""

    format_name = "key_value"

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        """
        Args:
            clock: ヘッダの更新日時に使う時刻関数
        """
        self._clock = clock

    def encode(self, candidates: Sequence[Candidate]) -> str:
        """ヘッダ付きのファイル全体テキストを生成する."""
        lines = [
            FILE_HEADER,
            f"{LAST_UPDATED_PREFIX}{self._clock().isoformat(timespec='seconds')}",
            "",
        ]
        for candidate in candidates:
            lines.extend(self.encode_record(candidate))
            lines.append("")
        return "\n".join(lines) + "\n"

    def encode_record(self, candidate: Candidate) -> list[str]:
        """候補者1名分の行を返す。IDはName行の直後に置く."""
        lines = [
            f"Name: {escape(candidate.name)}",
            f"ID: {escape(candidate.id)}",
            f"Age: {candidate.age}",
            f"Position: {escape(candidate.position)}",
            f"Party Affiliation: {escape(candidate.party_affiliation)}",
            f"Region: {escape(candidate.region or '')}",
            f"Years of Experience: {candidate.years_of_experience}",
            f"Campaign Slogan: {escape(candidate.campaign_slogan or '')}",
            f"Platforms: {join_list(candidate.platforms, LIST_DELIMITER)}",
            f"Supported Issues: {join_list(candidate.supported_issues, LIST_DELIMITER)}",
            f"Opposed Issues: {join_list(candidate.opposed_issues, LIST_DELIMITER)}",
            f"Notable Laws: {join_list(candidate.notable_laws, LIST_DELIMITER)}",
            f"Image: {escape(candidate.image_path or '')}",
        ]
        stance_lines = [
            f"{issue} - {candidate.social_stance[issue].value}"
            for issue in SOCIAL_ISSUES
            if issue in candidate.social_stance
        ]
        if stance_lines:
            lines.append(SOCIAL_STANCES_SECTION)
            lines.extend(stance_lines)
        # 行末の空白は読み込み時に落ちるので書き出しでも揃える
        return [line.rstrip() for line in lines]

    def decode(self, text: str) -> DecodeResult:
        """ファイル全体を解析する。壊れたブロックはスキップして報告する."""
        result = DecodeResult()
        for block in self._split_blocks(text):
            try:
                result.candidates.append(self._build_candidate(block))
            except RecordParseError as e:
                logger.warning(
                    "Skipping malformed candidate block",
                    line_number=block.line_number,
                    reason=e.reason,
                )
                result.skipped.append(SkippedRecord(block.line_number, e.reason))
        return result

    def _split_blocks(self, text: str) -> list[_Block]:
        blocks: list[_Block] = []
        current: _Block | None = None
        in_stance_section = False

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip(_LINE_PADDING)
            if not line or line.startswith("#"):
                continue

            key, has_colon, value = line.partition(":")
            value = value.strip(_LINE_PADDING)
            key_lower = key.strip().lower() if has_colon else ""

            if key_lower == "name":
                current = _Block(line_number=line_number)
                blocks.append(current)
                in_stance_section = False
            elif current is None:
                logger.debug(
                    "Ignoring line outside candidate block", line_number=line_number
                )
                continue

            if line == SOCIAL_STANCES_SECTION:
                in_stance_section = True
                continue

            is_known_key = key_lower in _ATTRIBUTE_BY_KEY or key_lower in _STANCE_KEYS
            if in_stance_section and not is_known_key:
                current.stance_entries.append((line_number, line))
                continue
            in_stance_section = False

            if key_lower == SOCIAL_STANCE_KEY.lower():
                current.stance_entries.append((line_number, value))
            elif key_lower == LEGACY_SOCIAL_STANCES_KEY.lower():
                for entry in split_list(value, LIST_DELIMITER):
                    current.stance_entries.append((line_number, entry))
            elif key_lower in _ATTRIBUTE_BY_KEY:
                current.values[_ATTRIBUTE_BY_KEY[key_lower]] = value
            else:
                logger.debug(
                    "Ignoring unrecognized line", line_number=line_number, line=line
                )

        return blocks

    def _build_candidate(self, block: _Block) -> Candidate:
        values = block.values
        name = unescape(values.get("name", ""))
        if not name.strip():
            raise RecordParseError("candidate block has no name", block.line_number)
        if "age" not in values:
            raise RecordParseError("candidate block has no age", block.line_number)

        age = parse_strict_int(values["age"], "age", block.line_number)
        years_raw = values.get("years_of_experience", "")
        years_of_experience = (
            parse_strict_int(years_raw, "yearsOfExperience", block.line_number)
            if years_raw
            else 0
        )

        candidate_id = unescape(values.get("id", "")).strip()
        lists = {
            attribute: split_list(values.get(attribute, ""), LIST_DELIMITER)
            for attribute in LIST_ATTRIBUTES
        }

        return Candidate(
            id=candidate_id or derive_record_id(block.line_number, name),
            name=name,
            age=age,
            position=unescape(values.get("position", "")),
            party_affiliation=unescape(values.get("party_affiliation", "")),
            region=unescape(values.get("region", "")),
            years_of_experience=years_of_experience,
            campaign_slogan=unescape(values.get("campaign_slogan", "")),
            image_path=unescape(values.get("image_path", "")),
            social_stance=_parse_stances(block.stance_entries),
            **lists,
        )


def _parse_stances(entries: list[tuple[int, str]]) -> dict[str, Stance]:
    stances: dict[str, Stance] = {}
    for line_number, entry in entries:
        parsed = parse_stance_entry(entry)
        if parsed is None:
            logger.warning(
                "Ignoring unrecognized social stance",
                line_number=line_number,
                entry=entry,
            )
            continue
        issue, stance = parsed
        stances[issue] = stance
    return stances
