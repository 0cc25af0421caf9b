"""
WoW API Client Library

A Python client library for the region-partitioned World of Warcraft
community API, with optional Battle.net HMAC request signing.

Example usage:
    from wow_client import WoWClient

    with WoWClient("EU", "de_DE") as client:
        character = client.get_character("Blackhand", "Thrall", fields=["guild"])
"""

from .client import WoWClient, resolve_region, validate_character_fields
from .exceptions import (
    WoWClientError,
    InvalidRegionError,
    InvalidLocaleError,
    InvalidFieldsError,
    NetworkError,
    DecodeError,
    SigningError,
    ConfigurationError
)
from .constants import (
    REGIONS,
    CHARACTER_FIELDS,
    DEFAULT_CONFIG,
    SIGNATURE_HMAC,
    SIGNATURE_LEGACY
)
from .models import (
    Record,
    Achievement,
    Criterion,
    AuctionData,
    AuctionFile,
    BattlePetAbility,
    SpeciesAbility,
    BattlePetSpecies,
    BattlePet,
    Challenge,
    ChallengeGroup,
    ChallengeMap,
    ChallengeTime,
    Character
)

__version__ = "1.0.0"
__all__ = [
    "WoWClient",
    "resolve_region",
    "validate_character_fields",
    "WoWClientError",
    "InvalidRegionError",
    "InvalidLocaleError",
    "InvalidFieldsError",
    "NetworkError",
    "DecodeError",
    "SigningError",
    "ConfigurationError",
    "REGIONS",
    "CHARACTER_FIELDS",
    "DEFAULT_CONFIG",
    "SIGNATURE_HMAC",
    "SIGNATURE_LEGACY",
    "Record",
    "Achievement",
    "Criterion",
    "AuctionData",
    "AuctionFile",
    "BattlePetAbility",
    "SpeciesAbility",
    "BattlePetSpecies",
    "BattlePet",
    "Challenge",
    "ChallengeGroup",
    "ChallengeMap",
    "ChallengeTime",
    "Character"
]
