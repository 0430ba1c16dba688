"""区切り形式（1行1レコード）の候補者データ書式.

フィールドは"|"区切り、リスト項目は";"区切り。順序は固定:
name, age, position, partyAffiliation, region, yearsOfExperience,
campaignSlogan, platforms, supportedIssues, opposedIssues, notableLaws,
imagePath, socialStance（"Issue:Stance"のリスト）。
14番目のフィールドには候補者IDを書く（旧ファイルには無い）。
"""

from collections.abc import Callable, Sequence

from src.common.logging import get_logger
from src.domain.entities.candidate import Candidate
from src.domain.services.interfaces.candidate_record_codec import (
    DecodeResult,
    SkippedRecord,
)
from src.domain.value_objects.social_stance import SOCIAL_ISSUES, Stance
from src.infrastructure.exceptions import RecordParseError
from src.infrastructure.importers._constants import (
    FIELD_DELIMITER,
    LIST_DELIMITER,
    REQUIRED_FIELD_COUNT,
)
from src.infrastructure.importers._utils import (
    derive_record_id,
    escape,
    join_list,
    parse_stance_entry,
    parse_strict_int,
    split_escaped,
    split_list,
    split_raw_list,
    unescape,
)


logger = get_logger(__name__)


class DelimitedRecordCodec:
    """区切り形式の読み書き."""

    format_name = "delimited"

    def encode(self, candidates: Sequence[Candidate]) -> str:
        """候補者一覧を1行1レコードのテキストにする."""
        return "".join(self.encode_record(c) + "\n" for c in candidates)

    def encode_record(self, candidate: Candidate) -> str:
        """候補者1名分を1行にする（末尾改行なし）."""
        scalar_specials = FIELD_DELIMITER + LIST_DELIMITER
        fields = [
            escape(candidate.name, scalar_specials),
            str(candidate.age),
            escape(candidate.position, scalar_specials),
            escape(candidate.party_affiliation, scalar_specials),
            escape(candidate.region or "", scalar_specials),
            str(candidate.years_of_experience),
            escape(candidate.campaign_slogan or "", scalar_specials),
            join_list(candidate.platforms, LIST_DELIMITER),
            join_list(candidate.supported_issues, LIST_DELIMITER),
            join_list(candidate.opposed_issues, LIST_DELIMITER),
            join_list(candidate.notable_laws, LIST_DELIMITER),
            escape(candidate.image_path or "", scalar_specials),
            join_list(_stance_items(candidate.social_stance), LIST_DELIMITER),
            escape(candidate.id, scalar_specials),
        ]
        return FIELD_DELIMITER.join(fields)

    def decode(self, text: str) -> DecodeResult:
        """ファイル全体を解析する。壊れた行はスキップして報告する."""
        result = DecodeResult()
        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.rstrip("\r")
            if not line.strip():
                continue
            try:
                result.candidates.append(self.decode_record(line, line_number))
            except RecordParseError as e:
                logger.warning(
                    "Skipping malformed candidate record",
                    line_number=line_number,
                    reason=e.reason,
                )
                result.skipped.append(SkippedRecord(line_number, e.reason))
        return result

    def decode_record(self, line: str, line_number: int = 1) -> Candidate:
        """1行を候補者に変換する.

        ID列のない13列の行は旧アプリが書いたエスケープなしのデータとして扱い、
        バックスラッシュも値の一部として読む。ID列のある行だけをエスケープ済みとみなす。

        Raises:
            RecordParseError: フィールド数不足、または数値項目が整数でない場合
        """
        raw_parts = line.split(FIELD_DELIMITER)
        if len(raw_parts) == REQUIRED_FIELD_COUNT:
            text: Callable[[str], str] = str
            items: Callable[[str, str], list[str]] = split_raw_list
            parts = raw_parts
        else:
            text = unescape
            items = split_list
            parts = split_escaped(line, FIELD_DELIMITER)
        if len(parts) < REQUIRED_FIELD_COUNT:
            raise RecordParseError(
                f"expected at least {REQUIRED_FIELD_COUNT} fields, got {len(parts)}",
                line_number=line_number,
            )

        age = parse_strict_int(parts[1], "age", line_number)
        years_of_experience = parse_strict_int(
            parts[5], "yearsOfExperience", line_number
        )
        candidate_id = text(parts[13]).strip() if len(parts) > 13 else ""

        return Candidate(
            id=candidate_id or derive_record_id(line_number, line),
            name=text(parts[0]),
            age=age,
            position=text(parts[2]),
            party_affiliation=text(parts[3]),
            region=text(parts[4]),
            years_of_experience=years_of_experience,
            campaign_slogan=text(parts[6]),
            platforms=items(parts[7], LIST_DELIMITER),
            supported_issues=items(parts[8], LIST_DELIMITER),
            opposed_issues=items(parts[9], LIST_DELIMITER),
            notable_laws=items(parts[10], LIST_DELIMITER),
            image_path=text(parts[11]),
            social_stance=_parse_stances(
                items(parts[12], LIST_DELIMITER), line_number
            ),
        )


def _stance_items(social_stance: dict[str, Stance]) -> list[str]:
    # カタログ順で書き出す
    return [
        f"{issue}:{social_stance[issue].value}"
        for issue in SOCIAL_ISSUES
        if issue in social_stance
    ]


def _parse_stances(entries: list[str], line_number: int) -> dict[str, Stance]:
    stances: dict[str, Stance] = {}
    for entry in entries:
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
