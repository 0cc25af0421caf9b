"""
Records returned by the WoW community API.

Each record is a frozen pydantic model whose fields are aliased to the
camelCase keys of the upstream JSON. Fields without a default are required.
``to_dict`` re-encodes only the keys the response actually carried.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import DecodeError


class Record(BaseModel):
    """Base class providing JSON decoding and re-encoding for records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_dict(cls, data: Any):
        """
        Build a record from a decoded JSON object.

        Raises:
            DecodeError: If data does not match the record shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Response does not match {cls.__name__}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Encode the record back into its JSON shape."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class Criterion(Record):
    id: int
    description: Optional[str] = None
    order_index: Optional[int] = Field(None, alias="orderIndex")
    max: Optional[int] = None


class Achievement(Record):
    """An achievement definition."""

    id: int
    title: str
    points: Optional[int] = None
    description: Optional[str] = None
    reward: Optional[str] = None
    reward_items: Optional[List[Dict[str, Any]]] = Field(None, alias="rewardItems")
    icon: Optional[str] = None
    criteria: Optional[List[Criterion]] = None
    account_wide: Optional[bool] = Field(None, alias="accountWide")
    faction_id: Optional[int] = Field(None, alias="factionId")


class AuctionFile(Record):
    """Location of an auction house dump; ``last_modified`` is in epoch milliseconds."""

    url: str
    last_modified: Optional[int] = Field(None, alias="lastModified")


class AuctionData(Record):
    files: List[AuctionFile]


class BattlePetAbility(Record):
    """A battle pet ability."""

    id: int
    name: str
    icon: Optional[str] = None
    cooldown: Optional[int] = None
    rounds: Optional[int] = None
    pet_type_id: Optional[int] = Field(None, alias="petTypeId")
    is_passive: Optional[bool] = Field(None, alias="isPassive")
    shows_hints: Optional[bool] = Field(None, alias="showHints")


class SpeciesAbility(BattlePetAbility):
    """An ability as listed on a species, with its slot and unlock level."""

    slot: Optional[int] = None
    order: Optional[int] = None
    required_level: Optional[int] = Field(None, alias="requiredLevel")


class BattlePetSpecies(Record):
    species_id: int = Field(alias="speciesId")
    pet_type_id: Optional[int] = Field(None, alias="petTypeId")
    creature_id: Optional[int] = Field(None, alias="creatureId")
    name: Optional[str] = None
    can_battle: Optional[bool] = Field(None, alias="canBattle")
    icon: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    abilities: Optional[List[SpeciesAbility]] = None


class BattlePet(Record):
    """Stats of a battle pet at a given level, breed and quality."""

    species_id: int = Field(alias="speciesId")
    breed_id: Optional[int] = Field(None, alias="breedId")
    pet_quality_id: Optional[int] = Field(None, alias="petQualityId")
    level: Optional[int] = None
    health: Optional[int] = None
    power: Optional[int] = None
    speed: Optional[int] = None


class ChallengeTime(Record):
    time: int
    hours: Optional[int] = None
    minutes: Optional[int] = None
    seconds: Optional[int] = None
    milliseconds: Optional[int] = None
    is_positive: Optional[bool] = Field(None, alias="isPositive")


class ChallengeMap(Record):
    id: int
    name: Optional[str] = None
    slug: Optional[str] = None
    has_challenge_mode: Optional[bool] = Field(None, alias="hasChallengeMode")
    bronze_criteria: Optional[ChallengeTime] = Field(None, alias="bronzeCriteria")
    silver_criteria: Optional[ChallengeTime] = Field(None, alias="silverCriteria")
    gold_criteria: Optional[ChallengeTime] = Field(None, alias="goldCriteria")


class ChallengeGroup(Record):
    """One ranked group run; members are kept as raw character/spec objects."""

    ranking: int
    time: Optional[ChallengeTime] = None
    date: Optional[str] = None
    medal: Optional[str] = None
    faction: Optional[str] = None
    is_recurring: Optional[bool] = Field(None, alias="isRecurring")
    members: Optional[List[Dict[str, Any]]] = None


class Challenge(Record):
    """Challenge mode leaderboard for one map. ``realm`` is absent on region-wide boards."""

    map: ChallengeMap
    groups: List[ChallengeGroup]
    realm: Optional[Dict[str, Any]] = None


class ChallengeSet(Record):
    challenges: List[Challenge] = Field(alias="challenge")


class Character(Record):
    """
    A character profile.

    The profile header is always present. The remaining attributes hold the
    raw JSON of each extra field and are only populated when that field was
    requested.
    """

    name: str
    realm: str
    last_modified: Optional[int] = Field(None, alias="lastModified")
    battlegroup: Optional[str] = None
    class_id: Optional[int] = Field(None, alias="class")
    race: Optional[int] = None
    gender: Optional[int] = None
    level: Optional[int] = None
    achievement_points: Optional[int] = Field(None, alias="achievementPoints")
    thumbnail: Optional[str] = None
    calc_class: Optional[str] = Field(None, alias="calcClass")
    faction: Optional[int] = None
    total_honorable_kills: Optional[int] = Field(None, alias="totalHonorableKills")

    achievements: Optional[Dict[str, Any]] = None
    appearance: Optional[Dict[str, Any]] = None
    feed: Optional[List[Dict[str, Any]]] = None
    guild: Optional[Dict[str, Any]] = None
    hunter_pets: Optional[List[Dict[str, Any]]] = Field(None, alias="hunterPets")
    items: Optional[Dict[str, Any]] = None
    mounts: Optional[Dict[str, Any]] = None
    pets: Optional[Dict[str, Any]] = None
    pet_slots: Optional[List[Dict[str, Any]]] = Field(None, alias="petSlots")
    professions: Optional[Dict[str, Any]] = None
    progression: Optional[Dict[str, Any]] = None
    pvp: Optional[Dict[str, Any]] = None
    quests: Optional[List[int]] = None
    reputation: Optional[List[Dict[str, Any]]] = None
    stats: Optional[Dict[str, Any]] = None
    talents: Optional[List[Dict[str, Any]]] = None
    titles: Optional[List[Dict[str, Any]]] = None
