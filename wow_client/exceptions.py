"""
Custom exceptions for the WoW API client library.
"""


class WoWClientError(Exception):
    """Base exception for WoW API client errors."""
    pass


class InvalidRegionError(WoWClientError):
    """Raised when a region identifier matches no known region."""

    def __init__(self, region):
        self.region = region
        super().__init__(f"Region '{region}' is not valid")


class InvalidLocaleError(WoWClientError):
    """Raised when a locale is not offered by the requested region."""

    def __init__(self, locale, region):
        self.locale = locale
        self.region = region
        super().__init__(f"Locale '{locale}' is not valid for region '{region}'")


class InvalidFieldsError(WoWClientError):
    """Raised when character fields fall outside the recognized set."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"The following fields are not valid: {self.fields}")


class NetworkError(WoWClientError):
    """Raised when an HTTP request cannot be completed."""
    pass


class DecodeError(WoWClientError):
    """Raised when a response body is not JSON or does not match the record shape."""
    pass


class SigningError(WoWClientError):
    """Raised when the request signature cannot be computed."""
    pass


class ConfigurationError(WoWClientError):
    """Raised when client configuration is invalid."""
    pass
