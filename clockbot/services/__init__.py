"""Services module for Clock Bot business logic."""

from .errors import ClockBotError, LookupFailure, UnsupportedPlatform, UserNotFound, TimezoneUnset
from .geocoding_service import GeocodeProvider, GoogleGeocoder
from .timezone_service import TimezoneProvider, GoogleTimezoneClient
from .lookup_service import LookupService
from .user_directory import UserDirectory, SlackUserDirectory
from .time_commands import TimeCommands

__all__ = [
    "ClockBotError",
    "LookupFailure",
    "UnsupportedPlatform",
    "UserNotFound",
    "TimezoneUnset",
    "GeocodeProvider",
    "GoogleGeocoder",
    "TimezoneProvider",
    "GoogleTimezoneClient",
    "LookupService",
    "UserDirectory",
    "SlackUserDirectory",
    "TimeCommands",
]
