"""社会問題に対するスタンスの値オブジェクト."""

from enum import Enum


class Stance(str, Enum):
    """社会問題に対する候補者の立場."""

    AGREE = "Agree"
    DISAGREE = "Disagree"
    NEUTRAL = "Neutral"
    NO_DATA = "No Data"

    @classmethod
    def parse(cls, label: str | None) -> "Stance | None":
        """表記ゆれを吸収してStanceに変換する.

        大文字小文字を区別しない。既存データに残る"Nuetral"も
        Neutralとして扱う。解釈できない場合はNoneを返す。
        """
        if label is None:
            return None
        normalized = " ".join(label.split()).lower()
        if not normalized:
            return None
        if normalized == "nuetral":
            return cls.NEUTRAL
        for stance in cls:
            if stance.value.lower() == normalized:
                return stance
        return None


# 管理画面の社会問題パネルに並ぶ固定の争点一覧（表示順）
SOCIAL_ISSUES: tuple[str, ...] = (
    "Legalization of Divorce",
    "Passing the SOGIE Equality Bill",
    "Reinstating the Death Penalty",
    "Lowering the Age of Criminal Responsibility",
    "Federalism",
    "Mandatory ROTC for Senior High Students",
    "Same-Sex Marriage",
    "Anti-Terror Law",
    "Jeepney Modernization Program",
    "Foreign Investment in Land Ownership",
    "Universal Healthcare Funding",
    "Mandatory Sex Education",
    "Minimum Wage Standardization",
)

_ISSUES_BY_LOWER: dict[str, str] = {issue.lower(): issue for issue in SOCIAL_ISSUES}


def canonical_issue(name: str) -> str | None:
    """争点名をカタログ上の正式表記に揃える（該当なしはNone）."""
    return _ISSUES_BY_LOWER.get(" ".join(name.split()).lower())
