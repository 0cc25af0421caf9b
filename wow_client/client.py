"""
Client for the region-partitioned WoW community API.

This module resolves regions and locales, builds locale-aware request URLs,
signs requests with the Battle.net ``BNET`` HMAC-SHA1 scheme and decodes
JSON responses into records.
"""

import base64
import hashlib
import hmac
import json
import logging
from email.utils import formatdate
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit

import requests

from .constants import (
    API_PREFIX,
    CHALLENGE_REGION,
    CHARACTER_FIELDS,
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_DATE,
    LEGACY_SIGNATURE_PAYLOAD,
    REGIONS,
    SCHEMES,
    SIGNATURE_LEGACY,
    SIGNATURE_MODES,
)
from .exceptions import (
    ConfigurationError,
    DecodeError,
    InvalidFieldsError,
    InvalidLocaleError,
    InvalidRegionError,
    NetworkError,
    SigningError,
)
from .models import (
    Achievement,
    AuctionData,
    BattlePet,
    BattlePetAbility,
    BattlePetSpecies,
    Challenge,
    ChallengeSet,
    Character,
)

logger = logging.getLogger(__name__)


def resolve_region(region: str, locale: str = "") -> Tuple[str, str]:
    """
    Resolve a region identifier and locale to a host and a valid locale.

    Args:
        region: Short code or full name, e.g. "US" or "United States"
        locale: Requested locale; empty selects the region default

    Returns:
        Tuple of (host, locale)

    Raises:
        InvalidRegionError: If the region is unknown
        InvalidLocaleError: If the locale is not offered by the region
    """
    entry = REGIONS.get(region)
    if entry is None:
        raise InvalidRegionError(region)

    if not locale:
        return entry.host, entry.locales[0]

    if locale not in entry.locales:
        raise InvalidLocaleError(locale, region)

    return entry.host, locale


def validate_character_fields(fields: Iterable[str]):
    """
    Check requested character fields against the recognized set.

    Raises:
        InvalidFieldsError: Listing every unrecognized field
    """
    bad_fields = [name for name in fields if name not in CHARACTER_FIELDS]
    if bad_fields:
        raise InvalidFieldsError(bad_fields)


def _segment(value) -> str:
    return quote(str(value), safe='')


class WoWClient:
    """
    Client for the WoW community API of a single region.

    Host, locale and credentials are fixed at construction. Requests are
    signed only when a secret is configured.
    """

    def __init__(self, region: str, locale: str = "", secret: Optional[str] = None,
                 public_key: Optional[str] = None, **config):
        """
        Initialize the client.

        Args:
            region: Region code or name ("US", "Europe", ...)
            locale: Locale for localized responses; empty uses the region default
            secret: Shared secret for request signing
            public_key: Public key sent alongside the signature
            **config: Configuration options (timeout, signature_mode, scheme, host)
        """
        host, self._locale = resolve_region(region, locale)
        self._region = region
        self._secret = secret
        self._public_key = public_key

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}
        self._validate_config()

        self._host = self.config['host'] or host

        self.session = requests.Session()

    def _validate_config(self):
        """Validate client configuration."""
        if self._secret and not self._public_key:
            raise ConfigurationError("public_key is required when a secret is set")

        timeout = self.config['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        if self.config['signature_mode'] not in SIGNATURE_MODES:
            raise ConfigurationError(
                f"signature_mode must be one of {', '.join(SIGNATURE_MODES)}"
            )

        if self.config['scheme'] not in SCHEMES:
            raise ConfigurationError(f"scheme must be one of {', '.join(SCHEMES)}")

    @property
    def region(self) -> str:
        return self._region

    @property
    def host(self) -> str:
        return self._host

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def secret(self) -> Optional[str]:
        return self._secret

    @property
    def public_key(self) -> Optional[str]:
        return self._public_key

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Build the full request URL for an API path.

        The caller's params are copied, never modified. ``locale`` is always
        set to the client locale, keys are sorted and values percent-encoded.
        Parameters whose value is None are dropped.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        query['locale'] = self._locale

        query_string = urlencode(sorted(query.items()), safe=',', quote_via=quote)
        return f"{self.config['scheme']}://{self._host}{API_PREFIX}{path.lstrip('/')}?{query_string}"

    def sign_request(self, verb: str, date: str, path: str) -> str:
        """
        Compute the base64 HMAC-SHA1 signature of a request.

        The signed string is ``verb\\ndate\\npath\\n``. In legacy mode the
        digest is discarded and a fixed placeholder is returned instead.

        Raises:
            SigningError: If the digest cannot be computed
        """
        string_to_sign = "\n".join([verb, date, path, ""])
        try:
            mac = hmac.new(
                self._secret.encode('utf-8'),
                string_to_sign.encode('utf-8'),
                hashlib.sha1
            )
            digest = mac.digest()
        except (AttributeError, TypeError, ValueError) as e:
            raise SigningError(f"Could not sign request: {e}") from e

        if self.config['signature_mode'] == SIGNATURE_LEGACY:
            digest = LEGACY_SIGNATURE_PAYLOAD

        return base64.b64encode(digest).decode('ascii')

    def authorization_header(self, signature: str) -> str:
        """Format the ``Authorization`` header value for a signature."""
        return f"BNET {self._public_key}:{signature}"

    def _auth_headers(self, url: str) -> Dict[str, str]:
        if not self._secret:
            return {}

        date = formatdate(usegmt=True)
        signature = self.sign_request('GET', date, urlsplit(url).path)
        return {
            HEADER_DATE: date,
            HEADER_AUTHORIZATION: self.authorization_header(signature),
        }

    def fetch(self, path: str, params: Optional[Mapping[str, Any]] = None) -> bytes:
        """
        Perform a GET request and return the raw response body.

        The HTTP status is not checked; the body is returned regardless.

        Raises:
            NetworkError: If the request cannot be completed
            SigningError: If the request cannot be signed
        """
        url = self.build_url(path, params)
        headers = self._auth_headers(url)

        logger.debug("GET %s", url)
        try:
            response = self.session.request(
                'GET', url, headers=headers, timeout=self.config['timeout']
            )
        except requests.RequestException as e:
            raise NetworkError(f"HTTP request failed: {e}") from e

        body = response.content
        logger.debug("%s responded %s (%d bytes)", url, response.status_code, len(body))
        return body

    def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Perform a GET request and parse the JSON body.

        Raises:
            NetworkError: If the request cannot be completed
            DecodeError: If the body is not valid JSON
        """
        body = self.fetch(path, params)
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Response for '{path}' is not valid JSON: {e}") from e

    def _get_record(self, record, path: str, params: Optional[Mapping[str, Any]] = None):
        data = self.get_json(path, params)
        try:
            return record.from_dict(data)
        except DecodeError as e:
            if isinstance(data, dict) and data.get('status') == 'nok':
                raise DecodeError(f"{e} (upstream reason: {data.get('reason')})") from e
            raise

    def get_achievement(self, achievement_id: int) -> Achievement:
        """Fetch an achievement by id."""
        return self._get_record(Achievement, f"achievement/{int(achievement_id)}")

    def get_auction_data(self, realm: str) -> AuctionData:
        """Fetch the auction dump locations for a realm."""
        return self._get_record(AuctionData, f"auction/data/{_segment(realm)}")

    def get_battle_pet_ability(self, ability_id: int) -> BattlePetAbility:
        return self._get_record(BattlePetAbility, f"battlePet/ability/{int(ability_id)}")

    def get_battle_pet_species(self, species_id: int) -> BattlePetSpecies:
        return self._get_record(BattlePetSpecies, f"battlePet/species/{int(species_id)}")

    def get_battle_pet(self, species_id: int, level: int, breed_id: int, quality_id: int) -> BattlePet:
        """Fetch battle pet stats for a species at a level, breed and quality."""
        params = {
            'level': str(int(level)),
            'breedId': str(int(breed_id)),
            'qualityId': str(int(quality_id)),
        }
        return self._get_record(BattlePet, f"battlePet/stats/{int(species_id)}", params)

    get_battle_pet_stats = get_battle_pet

    def get_challenges(self, realm: str = "") -> List[Challenge]:
        """
        Fetch challenge mode leaderboards.

        An empty realm requests the region-wide leaderboards.
        """
        segment = _segment(realm) if realm else CHALLENGE_REGION
        return self._get_record(ChallengeSet, f"challenge/{segment}").challenges

    get_challenge = get_challenges

    def get_character(self, realm: str, name: str, fields: Optional[Iterable[str]] = None) -> Character:
        """
        Fetch a character profile, optionally with extra fields.

        A single field name may be passed as a plain string.

        Raises:
            InvalidFieldsError: If any requested field is not recognized
        """
        if isinstance(fields, str):
            fields = [fields]
        fields = list(fields or [])
        validate_character_fields(fields)

        params = {'fields': ','.join(fields)} if fields else None
        return self._get_record(Character, f"character/{_segment(realm)}/{_segment(name)}", params)

    get_character_with_fields = get_character

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
