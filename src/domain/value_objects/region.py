"""フィリピンの行政地域（Region）カタログ."""

import re

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """行政地域.

    code: 短縮表記（例: "NCR", "Region IV-A"）
    name: 通称（例: "National Capital Region"）
    """

    code: str
    name: str

    @property
    def label(self) -> str:
        """ドロップダウンに表示するラベル."""
        return f"{self.code} ({self.name})"

    def matches(self, value: str) -> bool:
        """ラベル・短縮表記・通称のいずれかと一致するか（大文字小文字無視）."""
        target = " ".join(value.split()).lower()
        return target in (
            self.label.lower(),
            self.code.lower(),
            self.name.lower(),
        )


REGIONS: tuple[Region, ...] = (
    Region("Region I", "Ilocos Region"),
    Region("Region II", "Cagayan Valley"),
    Region("Region III", "Central Luzon"),
    Region("Region IV-A", "CALABARZON"),
    Region("Region IV-B", "MIMAROPA"),
    Region("Region V", "Bicol Region"),
    Region("Region VI", "Western Visayas"),
    Region("Region VII", "Central Visayas"),
    Region("Region VIII", "Eastern Visayas"),
    Region("Region IX", "Zamboanga Peninsula"),
    Region("Region X", "Northern Mindanao"),
    Region("Region XI", "Davao Region"),
    Region("Region XII", "SOCCSKSARGEN"),
    Region("Region XIII", "Caraga"),
    Region("NCR", "National Capital Region"),
    Region("CAR", "Cordillera Administrative Region"),
    Region("BARMM", "Bangsamoro Autonomous Region in Muslim Mindanao"),
)

# "NCR (National Capital Region)" 形式のラベル
_LABEL_RE = re.compile(r"^(?P<code>[^()]+?)\s*\((?P<name>[^()]+)\)$")


def find_region(value: str | None) -> Region | None:
    """入力文字列に対応する地域を返す.

    "NCR", "National Capital Region", "NCR (National Capital Region)"
    のいずれの表記でも同じ地域に解決する。
    """
    if not value or not value.strip():
        return None
    for region in REGIONS:
        if region.matches(value):
            return region
    match = _LABEL_RE.match(value.strip())
    if match:
        return find_region(match.group("code"))
    return None
