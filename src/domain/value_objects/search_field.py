"""検索対象フィールドの値オブジェクト."""

from enum import Enum


class SearchField(str, Enum):
    """検索画面のフィルタドロップダウンで選べる検索対象."""

    NAME = "Name"
    PARTYLIST = "Partylist"
    ISSUE = "Issue"
    POSITION = "Position"

    @classmethod
    def from_label(cls, label: str) -> "SearchField":
        """ラベル（大文字小文字無視）からSearchFieldを得る."""
        for field in cls:
            if field.value.lower() == label.strip().lower():
                return field
        raise ValueError(f"Unknown search field: {label}")
