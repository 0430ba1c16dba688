"""Domain value objects."""

from src.domain.value_objects.region import REGIONS, Region, find_region
from src.domain.value_objects.search_field import SearchField
from src.domain.value_objects.social_stance import (
    SOCIAL_ISSUES,
    Stance,
    canonical_issue,
)


__all__ = [
    "REGIONS",
    "Region",
    "SOCIAL_ISSUES",
    "SearchField",
    "Stance",
    "canonical_issue",
    "find_region",
]
