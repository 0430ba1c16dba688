"""候補者管理に関するDTO.

このモジュールは候補者の登録・更新・削除・一覧取得のDTOを定義します。
"""

from dataclasses import dataclass, field

from src.domain.entities.candidate import Candidate
from src.domain.value_objects.social_stance import Stance, canonical_issue


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class CandidateFormDto:
    """入力フォームから集めた候補者データ.

    social_stanceは画面上のラベル（"Agree"など）のまま受け取る。
    """

    name: str
    age: int
    position: str
    party_affiliation: str
    region: str = ""
    years_of_experience: int = 0
    campaign_slogan: str = ""
    platforms: list[str] = field(default_factory=list)
    supported_issues: list[str] = field(default_factory=list)
    opposed_issues: list[str] = field(default_factory=list)
    notable_laws: list[str] = field(default_factory=list)
    image_path: str = ""
    social_stance: dict[str, str] = field(default_factory=dict)

    def to_entity(self, default_image_path: str | None = None) -> Candidate:
        """エンティティに変換する.

        "No Data"のスタンスは未回答と同じなので保存しない。

        Raises:
            ValueError: 争点または立場のラベルが解釈できない場合
        """
        stances: dict[str, Stance] = {}
        for issue, label in self.social_stance.items():
            canonical = canonical_issue(issue)
            if canonical is None:
                raise ValueError(f"Unknown social issue: {issue}")
            stance = Stance.parse(label)
            if stance is None:
                raise ValueError(f"Invalid stance for {canonical}: {label}")
            if stance is not Stance.NO_DATA:
                stances[canonical] = stance

        return Candidate(
            name=self.name.strip(),
            age=self.age,
            position=self.position.strip(),
            party_affiliation=self.party_affiliation.strip(),
            region=self.region.strip(),
            years_of_experience=self.years_of_experience,
            campaign_slogan=self.campaign_slogan.strip(),
            platforms=_clean(self.platforms),
            supported_issues=_clean(self.supported_issues),
            opposed_issues=_clean(self.opposed_issues),
            notable_laws=_clean(self.notable_laws),
            image_path=self.image_path.strip() or default_image_path,
            social_stance=stances,
        )


@dataclass
class CreateCandidateInputDto:
    """候補者登録の入力DTO."""

    form: CandidateFormDto


@dataclass
class UpdateCandidateInputDto:
    """候補者更新の入力DTO.

    candidate_idを指定した場合はIDで、そうでなければindexで対象を特定する。
    """

    form: CandidateFormDto
    index: int | None = None
    candidate_id: str | None = None


@dataclass
class DeleteCandidateInputDto:
    """候補者削除の入力DTO."""

    index: int | None = None
    candidate_id: str | None = None


@dataclass
class GetCandidateInputDto:
    """候補者1件取得の入力DTO."""

    index: int | None = None
    candidate_id: str | None = None
    name: str | None = None


# =============================================================================
# Output DTOs
# =============================================================================


@dataclass
class CandidateOutputItem:
    """候補者の出力アイテム."""

    id: str
    name: str
    age: int
    position: str
    party_affiliation: str
    region: str
    years_of_experience: int
    campaign_slogan: str
    platforms: list[str]
    supported_issues: list[str]
    opposed_issues: list[str]
    notable_laws: list[str]
    image_path: str
    social_stance: dict[str, str]

    @classmethod
    def from_entity(cls, entity: Candidate) -> "CandidateOutputItem":
        """エンティティから出力アイテムを生成する."""
        return cls(
            id=entity.id,
            name=entity.name,
            age=entity.age,
            position=entity.position,
            party_affiliation=entity.party_affiliation,
            region=entity.region,
            years_of_experience=entity.years_of_experience,
            campaign_slogan=entity.campaign_slogan,
            platforms=list(entity.platforms),
            supported_issues=list(entity.supported_issues),
            opposed_issues=list(entity.opposed_issues),
            notable_laws=list(entity.notable_laws),
            image_path=entity.image_path,
            social_stance={
                issue: stance.value for issue, stance in entity.social_stance.items()
            },
        )


@dataclass
class ListCandidatesOutputDto:
    """候補者一覧取得の出力DTO."""

    candidates: list[CandidateOutputItem]
    success: bool = True
    error_message: str | None = None


@dataclass
class GetCandidateOutputDto:
    """候補者1件取得の出力DTO."""

    candidate: CandidateOutputItem | None = None
    success: bool = True
    error_message: str | None = None


@dataclass
class CreateCandidateOutputDto:
    """候補者登録の出力DTO."""

    success: bool
    candidate_id: str | None = None
    error_message: str | None = None


@dataclass
class UpdateCandidateOutputDto:
    """候補者更新の出力DTO."""

    success: bool
    error_message: str | None = None


@dataclass
class DeleteCandidateOutputDto:
    """候補者削除の出力DTO."""

    success: bool
    error_message: str | None = None


@dataclass
class LoadCandidatesOutputDto:
    """候補者データ再読込の出力DTO."""

    success: bool
    loaded: int = 0
    skipped: int = 0
    error_message: str | None = None


def _clean(items: list[str]) -> list[str]:
    return [item.strip() for item in items if item and item.strip()]
