"""
Constants for the WoW API client library.
Region hosts and locales follow the Battle.net community API partitions.
"""

from collections import namedtuple
from types import MappingProxyType

Region = namedtuple("Region", ["host", "locales"])

_US = Region("us.battle.net", ("en_US", "es_MX", "pt_BR"))
_EU = Region("eu.battle.net", ("en_GB", "es_ES", "fr_FR", "ru_RU", "de_DE", "pt_PT", "it_IT"))
_KR = Region("kr.battle.net", ("ko_KR",))
_TW = Region("tw.battle.net", ("zh_TW",))
_CN = Region("www.battle.com.cn", ("zh_CN",))

# Short codes and long names are aliases for the same entry
REGIONS = MappingProxyType({
    "US": _US,
    "United States": _US,
    "EU": _EU,
    "Europe": _EU,
    "KR": _KR,
    "Korea": _KR,
    "TW": _TW,
    "Taiwan": _TW,
    "ZH": _CN,
    "CN": _CN,
    "China": _CN,
})

API_PREFIX = "/api/wow/"

# Extra sections the character endpoint accepts in its ``fields`` parameter
CHARACTER_FIELDS = frozenset([
    "achievements",
    "appearance",
    "feed",
    "guild",
    "hunterPets",
    "items",
    "mounts",
    "pets",
    "petSlots",
    "professions",
    "progression",
    "pvp",
    "quests",
    "reputation",
    "stats",
    "talents",
    "titles",
])

# Path segment requesting region-wide challenge mode leaderboards
CHALLENGE_REGION = "region"

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_DATE = "Date"

SIGNATURE_HMAC = "hmac"
SIGNATURE_LEGACY = "legacy"
SIGNATURE_MODES = (SIGNATURE_HMAC, SIGNATURE_LEGACY)

# Placeholder the legacy signer emits instead of the digest
LEGACY_SIGNATURE_PAYLOAD = b"hi"

SCHEMES = ("http", "https")

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,              # HTTP timeout in seconds
    'signature_mode': SIGNATURE_HMAC,
    'scheme': 'http',
    'host': None,               # overrides the region host when set
}
