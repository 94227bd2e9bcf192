"""Prefecture lookup table for the radar command.

Coordinates are those of each prefectural office. Every prefecture can be
reached by its romaji name, its kanji name (with and without the 都/府/県
suffix) and a handful of common alternative spellings or typos.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

DEFAULT_PREFECTURE = "tokyo"


@dataclass(frozen=True)
class Prefecture:
    kanji_name: str
    lat: float
    lon: float

    @property
    def short_kanji_name(self) -> str:
        """大阪府 -> 大阪; 北海道 stays as is."""
        if self.kanji_name[-1] in "都府県":
            return self.kanji_name[:-1]
        return self.kanji_name


_CANONICAL: Dict[str, Prefecture] = {
    "hokkaido": Prefecture("北海道", 43.06417, 141.34694),
    "aomori": Prefecture("青森県", 40.82444, 140.74),
    "iwate": Prefecture("岩手県", 39.70361, 141.1525),
    "miyagi": Prefecture("宮城県", 38.26889, 140.87194),
    "akita": Prefecture("秋田県", 39.71861, 140.1025),
    "yamagata": Prefecture("山形県", 38.24056, 140.36333),
    "fukushima": Prefecture("福島県", 37.75, 140.46778),
    "ibaraki": Prefecture("茨城県", 36.34139, 140.44667),
    "tochigi": Prefecture("栃木県", 36.56583, 139.88361),
    "gunma": Prefecture("群馬県", 36.39111, 139.06083),
    "saitama": Prefecture("埼玉県", 35.85694, 139.64889),
    "chiba": Prefecture("千葉県", 35.60472, 140.12333),
    "tokyo": Prefecture("東京都", 35.68944, 139.69167),
    "kanagawa": Prefecture("神奈川県", 35.44778, 139.6425),
    "niigata": Prefecture("新潟県", 37.90222, 139.02361),
    "toyama": Prefecture("富山県", 36.69528, 137.21139),
    "ishikawa": Prefecture("石川県", 36.59444, 136.62556),
    "fukui": Prefecture("福井県", 36.06528, 136.22194),
    "yamanashi": Prefecture("山梨県", 35.66389, 138.56833),
    "nagano": Prefecture("長野県", 36.65139, 138.18111),
    "gifu": Prefecture("岐阜県", 35.39111, 136.72222),
    "shizuoka": Prefecture("静岡県", 34.97694, 138.38306),
    "aichi": Prefecture("愛知県", 35.18028, 136.90667),
    "mie": Prefecture("三重県", 34.73028, 136.50861),
    "shiga": Prefecture("滋賀県", 35.00444, 135.86833),
    "kyoto": Prefecture("京都府", 35.02139, 135.75556),
    "osaka": Prefecture("大阪府", 34.68639, 135.52),
    "hyogo": Prefecture("兵庫県", 34.69139, 135.18306),
    "nara": Prefecture("奈良県", 34.68528, 135.83278),
    "wakayama": Prefecture("和歌山県", 34.22611, 135.1675),
    "tottori": Prefecture("鳥取県", 35.50361, 134.23833),
    "shimane": Prefecture("島根県", 35.47222, 133.05056),
    "okayama": Prefecture("岡山県", 34.66167, 133.935),
    "hiroshima": Prefecture("広島県", 34.39639, 132.45944),
    "yamaguchi": Prefecture("山口県", 34.18583, 131.47139),
    "tokushima": Prefecture("徳島県", 34.06583, 134.55944),
    "kagawa": Prefecture("香川県", 34.34028, 134.04333),
    "ehime": Prefecture("愛媛県", 33.84167, 132.76611),
    "kochi": Prefecture("高知県", 33.55972, 133.53111),
    "fukuoka": Prefecture("福岡県", 33.60639, 130.41806),
    "saga": Prefecture("佐賀県", 33.24944, 130.29889),
    "nagasaki": Prefecture("長崎県", 32.74472, 129.87361),
    "kumamoto": Prefecture("熊本県", 32.78972, 130.74167),
    "oita": Prefecture("大分県", 33.23806, 131.6125),
    "miyazaki": Prefecture("宮崎県", 31.91111, 131.42389),
    "kagoshima": Prefecture("鹿児島県", 31.56028, 130.55806),
    "okinawa": Prefecture("沖縄県", 26.2125, 127.68111),
}

# Alternative romanisations (kunrei-shiki, long vowels) and frequent typos
_SPELLING_ALIASES: Dict[str, List[str]] = {
    "hokkaido": ["hokkaidou", "hokkaidoh", "hokaido"],
    "fukushima": ["fukusima", "hukushima"],
    "ibaraki": ["ibaragi"],
    "tochigi": ["totigi"],
    "gunma": ["gumma"],
    "chiba": ["tiba"],
    "tokyo": ["tokio", "toukyou", "toukyo", "tohkyoh", "neo tokio", "neo tokyo", "tokoy", "tkoyo"],
    "kanagawa": ["kanagwa", "kangawa"],
    "niigata": ["nigata", "niigta"],
    "ishikawa": ["isikawa"],
    "yamanashi": ["yamanasi"],
    "gifu": ["gihu"],
    "shizuoka": ["sizuoka", "shizouka"],
    "aichi": ["aiti"],
    "shiga": ["siga"],
    "kyoto": ["kyouto", "kioto", "kyoot"],
    "osaka": ["oosaka", "ohsaka", "osaak"],
    "hyogo": ["hyougo", "hyoogo"],
    "tottori": ["totori"],
    "shimane": ["simane"],
    "hiroshima": ["hirosima", "hiroshmia"],
    "yamaguchi": ["yamaguti"],
    "tokushima": ["tokusima"],
    "kochi": ["kouchi", "kohchi"],
    "fukuoka": ["fukuoaka", "hukuoka"],
    "oita": ["ooita", "ohita"],
    "kagoshima": ["kagosima"],
    "okinawa": ["okianwa"],
}


def _build_directory() -> Mapping[str, Prefecture]:
    table: Dict[str, Prefecture] = dict(_CANONICAL)
    for key, pref in _CANONICAL.items():
        table[pref.kanji_name] = pref
        table[pref.short_kanji_name] = pref
    for key, aliases in _SPELLING_ALIASES.items():
        for alias in aliases:
            table[alias] = _CANONICAL[key]
    return MappingProxyType(table)


PREFECTURES: Mapping[str, Prefecture] = _build_directory()


def resolve(token: Optional[str]) -> Prefecture:
    """Look up a prefecture by user input; anything unknown maps to Tokyo."""
    key = (token or "").strip().lower()
    return PREFECTURES.get(key) or PREFECTURES[DEFAULT_PREFECTURE]


def canonical_keys() -> List[str]:
    return list(_CANONICAL)


def aliases_for(key: str) -> List[str]:
    """All lookup keys bound to the same prefecture as ``key``, itself included."""
    pref = PREFECTURES.get(key.strip().lower())
    if pref is None:
        return []
    return [k for k, v in PREFECTURES.items() if v is pref]
