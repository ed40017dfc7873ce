"""Data types shared by the lookup services and handlers."""

from .schemas import Location, TimezoneInfo, LookupResult, UserProfile

__all__ = ["Location", "TimezoneInfo", "LookupResult", "UserProfile"]
