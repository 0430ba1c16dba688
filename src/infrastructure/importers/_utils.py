"""候補者データファイル書式の共通ユーティリティ関数."""

import re
import uuid

from src.domain.value_objects.social_stance import Stance, canonical_issue
from src.infrastructure.exceptions import RecordParseError


ESCAPE_CHAR = "\\"

# 改行とタブはエスケープ後の文字に置き換える（レコード境界を壊さないため）
_CONTROL_ESCAPES: dict[str, str] = {"\n": "n", "\r": "r", "\t": "t"}
# 値の先頭・末尾の空白。読み込み時の行の前後空白除去で消えないようにする
_EDGE_SPACE_ESCAPE = "s"
_CONTROL_UNESCAPES: dict[str, str] = {
    **{v: k for k, v in _CONTROL_ESCAPES.items()},
    _EDGE_SPACE_ESCAPE: " ",
}

# 符号付きASCII数字のみ（空白・小数・全角数字は不可）
_STRICT_INT_RE = re.compile(r"[+-]?[0-9]+")

# ID未記載の旧データ用。同じファイルを何度読んでも同じIDになる
_LEGACY_ID_NAMESPACE = uuid.UUID("6f1c2d3e-8a4b-4c5d-9e6f-0a1b2c3d4e5f")


def escape(value: str, specials: str = "") -> str:
    """区切り文字・改行・バックスラッシュをエスケープする.

    先頭と末尾の空白は"\\s"で書き出す。

    Args:
        value: 元の文字列
        specials: 追加でエスケープする区切り文字
    """
    body = value.strip(" ")
    leading = len(value) - len(value.lstrip(" "))
    trailing = len(value) - len(value.rstrip(" ")) if body else 0
    edge = ESCAPE_CHAR + _EDGE_SPACE_ESCAPE

    out: list[str] = [edge] * leading
    for ch in body:
        if ch in _CONTROL_ESCAPES:
            out.append(ESCAPE_CHAR + _CONTROL_ESCAPES[ch])
        elif ch == ESCAPE_CHAR or ch in specials:
            out.append(ESCAPE_CHAR + ch)
        else:
            out.append(ch)
    out.extend([edge] * trailing)
    return "".join(out)


def unescape(value: str) -> str:
    """escape()の逆変換.

    末尾の孤立したバックスラッシュはそのまま残す。
    """
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == ESCAPE_CHAR and i + 1 < len(value):
            nxt = value[i + 1]
            out.append(_CONTROL_UNESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def split_escaped(text: str, separator: str) -> list[str]:
    """エスケープされていない区切り文字で分割する.

    各要素のエスケープシーケンスは保持したまま返すので、
    入れ子の区切り（フィールド→リスト項目）にもう一度使える。
    """
    parts: list[str] = []
    buf: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ESCAPE_CHAR and i + 1 < len(text):
            buf.append(text[i : i + 2])
            i += 2
            continue
        if ch == separator:
            parts.append("".join(buf))
            buf = []
            i += 1
            continue
        buf.append(ch)
        i += 1
    parts.append("".join(buf))
    return parts


def join_list(items: list[str], separator: str = ";") -> str:
    """リスト項目をエスケープして連結する."""
    return separator.join(escape(item, specials=separator + "|") for item in items)


def split_list(value: str, separator: str = ";") -> list[str]:
    """連結されたリスト項目を分割する。空の項目は捨てる."""
    items = (unescape(part) for part in split_escaped(value, separator))
    return [item for item in items if item.strip()]


def split_raw_list(value: str, separator: str = ";") -> list[str]:
    """エスケープなしで書かれた旧データのリスト項目を分割する。空の項目は捨てる."""
    return [item for item in value.split(separator) if item.strip()]


def parse_strict_int(value: str, field_name: str, line_number: int) -> int:
    """整数項目を厳密に解析する.

    前後の空白や小数点、全角数字を含む場合はレコード全体を不正とする。
    """
    if not _STRICT_INT_RE.fullmatch(value):
        raise RecordParseError(
            f"{field_name} is not an integer: {value!r}", line_number=line_number
        )
    return int(value)


def parse_stance_entry(entry: str) -> tuple[str, Stance] | None:
    """スタンス1件（"Issue - Stance" または "Issue:Stance" 形式）を解析する.

    カタログ外の争点や解釈できない立場の場合はNoneを返す。
    """
    if " - " in entry:
        issue, _, label = entry.partition(" - ")
    elif ":" in entry:
        issue, _, label = entry.partition(":")
    else:
        return None
    canonical = canonical_issue(issue)
    stance = Stance.parse(label)
    if canonical is None or stance is None:
        return None
    return canonical, stance


def derive_record_id(line_number: int, source: str) -> str:
    """ID列を持たないレコードに決定的なIDを割り当てる."""
    return str(uuid.uuid5(_LEGACY_ID_NAMESPACE, f"{line_number}:{source}"))
