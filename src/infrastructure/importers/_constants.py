"""候補者データファイル書式の共通定数."""

# 区切り形式（1行1レコード）
FIELD_DELIMITER = "|"
LIST_DELIMITER = ";"
REQUIRED_FIELD_COUNT = 13

# キー・値形式のヘッダ
FILE_HEADER = "# Candidate Profiles - Generated by Gabay Application"
LAST_UPDATED_PREFIX = "# Last updated: "

# キー・値形式のキー（ファイル上の表記 → 属性名）
# 同じ属性に複数の表記がある場合、先頭のものを書き出しに使う
KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("Name",),
    "id": ("ID",),
    "age": ("Age",),
    "position": ("Position", "Positions", "Running Position"),
    "party_affiliation": ("Party Affiliation",),
    "region": ("Region", "Hometown Region"),
    "years_of_experience": ("Years of Experience",),
    "campaign_slogan": ("Campaign Slogan",),
    "platforms": ("Platforms", "Platform"),
    "supported_issues": ("Supported Issues",),
    "opposed_issues": ("Opposed Issues",),
    "notable_laws": ("Notable Laws", "Notable Laws Enacted"),
    "image_path": ("Image",),
}

LIST_ATTRIBUTES: frozenset[str] = frozenset(
    {"platforms", "supported_issues", "opposed_issues", "notable_laws"}
)

SOCIAL_STANCE_KEY = "Social Stance"
LEGACY_SOCIAL_STANCES_KEY = "Social Stances"
SOCIAL_STANCES_SECTION = "Stances On Social Issues:"
