"""Candidate entity."""

import copy

from typing import Any

from src.domain.entities.base import BaseEntity
from src.domain.value_objects.social_stance import Stance, canonical_issue


class Candidate(BaseEntity):
    """候補者プロフィールを表すエンティティ.

    一覧・詳細・比較画面で表示する候補者1名分のデータ。
    リスト項目は常にlist（空リスト可）、social_stanceは
    争点名からStanceへの辞書として保持する。
    """

    DEFAULT_IMAGE_PATH = "resources/images/candidates/default_candidate.jpg"

    def __init__(
        self,
        name: str,
        age: int,
        position: str,
        party_affiliation: str,
        region: str | None = "",
        years_of_experience: int = 0,
        campaign_slogan: str | None = "",
        platforms: list[str] | None = None,
        supported_issues: list[str] | None = None,
        opposed_issues: list[str] | None = None,
        notable_laws: list[str] | None = None,
        image_path: str | None = None,
        social_stance: dict[str, Stance] | None = None,
        id: str | None = None,
    ) -> None:
        """候補者エンティティを初期化する.

        Args:
            name: 氏名
            age: 年齢
            position: 立候補する役職（例: "Senator"）
            party_affiliation: 所属政党
            region: 出身地域
            years_of_experience: 政治経験年数
            campaign_slogan: 選挙スローガン
            platforms: 公約
            supported_issues: 支持する政策課題
            opposed_issues: 反対する政策課題
            notable_laws: 主な成立法案
            image_path: 顔写真のパス（空ならプレースホルダ）
            social_stance: 争点ごとの立場
            id: 候補者ID（未指定なら採番）
        """
        super().__init__(id)
        self.name = name
        self.age = age
        self.position = position
        self.party_affiliation = party_affiliation
        self.region = region or ""
        self.years_of_experience = years_of_experience
        self.campaign_slogan = campaign_slogan or ""
        self.platforms = list(platforms) if platforms is not None else []
        self.supported_issues = (
            list(supported_issues) if supported_issues is not None else []
        )
        self.opposed_issues = list(opposed_issues) if opposed_issues is not None else []
        self.notable_laws = list(notable_laws) if notable_laws is not None else []
        self.image_path = image_path or self.DEFAULT_IMAGE_PATH
        self.social_stance = dict(social_stance) if social_stance is not None else {}

    @property
    def surname(self) -> str:
        """氏名の最後の単語を姓として返す."""
        parts = self.name.split()
        return parts[-1] if parts else ""

    def stance_on(self, issue: str) -> Stance:
        """指定した争点への立場を返す（未登録ならNO_DATA）."""
        key = canonical_issue(issue) or issue
        return self.social_stance.get(key, Stance.NO_DATA)

    def copy(self) -> "Candidate":
        """同じIDを持つ独立したコピーを返す."""
        return copy.deepcopy(self)

    def with_id(self, id: str) -> "Candidate":
        """IDだけ差し替えたコピーを返す."""
        duplicated = self.copy()
        duplicated.id = id
        return duplicated

    def to_dict(self) -> dict[str, Any]:
        """全フィールドを辞書で返す（比較・表示用）."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "position": self.position,
            "party_affiliation": self.party_affiliation,
            "region": self.region,
            "years_of_experience": self.years_of_experience,
            "campaign_slogan": self.campaign_slogan,
            "platforms": list(self.platforms),
            "supported_issues": list(self.supported_issues),
            "opposed_issues": list(self.opposed_issues),
            "notable_laws": list(self.notable_laws),
            "image_path": self.image_path,
            "social_stance": {
                issue: stance.value for issue, stance in self.social_stance.items()
            },
        }

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"Candidate(id={self.id!r}, name={self.name!r}, "
            f"position={self.position!r})"
        )
