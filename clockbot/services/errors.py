"""Exceptions raised by Clock Bot services."""


class ClockBotError(Exception):
    """Base class for errors reported back to the chat."""


class LookupFailure(ClockBotError):
    """Geocoding or timezone service did not return a usable answer."""

    def __init__(self, message: str, status: str = ""):
        super().__init__(message)
        self.status = status


class UnsupportedPlatform(ClockBotError):
    """No user directory is available on this chat platform."""

    def __init__(self, platform: str):
        super().__init__(f"user lookups need {platform}")
        self.platform = platform


class UserNotFound(ClockBotError):
    def __init__(self, username: str):
        super().__init__(f"unknown user {username}")
        self.username = username


class TimezoneUnset(ClockBotError):
    def __init__(self, username: str):
        super().__init__(f"no timezone for {username}")
        self.username = username
