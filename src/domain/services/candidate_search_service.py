"""候補者検索サービス.

部分一致検索（大文字小文字無視）、地域での絞り込み、姓順の並べ替えを提供する。
いずれも入力の並び順を保ったまま新しいリストを返し、元のリストは変更しない。
"""

from collections.abc import Iterable, Sequence

from src.domain.entities.candidate import Candidate
from src.domain.value_objects.region import find_region
from src.domain.value_objects.search_field import SearchField


class CandidateSearchService:
    """候補者の検索・絞り込み・並べ替え."""

    def matches(
        self,
        candidate: Candidate,
        query: str,
        field: SearchField | None = None,
    ) -> bool:
        """候補者がクエリに一致するかを判定する.

        fieldを指定しない場合は全項目のOR条件。スタンスは値（Agree等）で照合する。
        fieldを指定した場合はその項目群だけを照合する。

        Args:
            candidate: 判定対象
            query: 検索文字列（前後の空白も含めて照合する。空白のみは一致なし）
            field: 検索対象の絞り込み
        """
        if not query.strip():
            return False
        needle = query.lower()
        return any(needle in text.lower() for text in self._texts(candidate, field))

    def search(
        self,
        candidates: Iterable[Candidate],
        query: str | None,
        field: SearchField | None = None,
    ) -> list[Candidate]:
        """クエリに一致する候補者を元の順序で返す."""
        if query is None or not query.strip():
            return []
        return [c for c in candidates if self.matches(c, query, field)]

    def filter_by_region(
        self, candidates: Iterable[Candidate], region: str | None
    ) -> list[Candidate]:
        """地域で絞り込む.

        カタログにある地域なら短縮表記・通称・ラベルのどれで保存されていても一致する。
        カタログ外の文字列は大文字小文字無視の完全一致で比較する。
        """
        if region is None or not region.strip():
            return list(candidates)
        target = find_region(region)
        if target is None:
            wanted = region.strip().lower()
            return [c for c in candidates if c.region.strip().lower() == wanted]
        return [c for c in candidates if c.region and target.matches(c.region)]

    def sorted_by_surname(self, candidates: Sequence[Candidate]) -> list[Candidate]:
        """姓（氏名の最後の単語）順に並べる。同姓は氏名全体で比較する."""
        return sorted(
            candidates,
            key=lambda c: (c.surname.lower(), c.name.strip().lower()),
        )

    @staticmethod
    def _texts(candidate: Candidate, field: SearchField | None) -> list[str]:
        if field is SearchField.NAME:
            return [candidate.name]
        if field is SearchField.PARTYLIST:
            return [candidate.party_affiliation]
        if field is SearchField.POSITION:
            return [candidate.position]
        if field is SearchField.ISSUE:
            return [
                *candidate.platforms,
                *candidate.supported_issues,
                *candidate.opposed_issues,
                *candidate.notable_laws,
                *candidate.social_stance.keys(),
            ]
        return [
            candidate.name,
            candidate.position,
            candidate.party_affiliation,
            candidate.region,
            candidate.campaign_slogan,
            *candidate.platforms,
            *candidate.supported_issues,
            *candidate.opposed_issues,
            *candidate.notable_laws,
            *(stance.value for stance in candidate.social_stance.values()),
        ]
