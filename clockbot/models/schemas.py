"""
Dataclass definitions for Clock Bot lookups.

These values are built per request from API payloads and never persisted.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Location:
    """A resolved place."""
    query: str  # Text the user asked for, or a default label
    lat: float
    lng: float
    address: str  # Display string

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.lat, self.lng)

    @classmethod
    def from_default(cls, name: str, lat: float, lng: float) -> "Location":
        return cls(
            query=name,
            lat=lat,
            lng=lng,
            address=f"{name} @ {lat}, {lng}"
        )

    @classmethod
    def from_geocode_result(cls, query: str, result: dict) -> "Location":
        location = result["geometry"]["location"]
        return cls(
            query=query,
            lat=float(location["lat"]),
            lng=float(location["lng"]),
            address=result.get("formatted_address", "")
        )


@dataclass(frozen=True)
class TimezoneInfo:
    """Offsets reported by the timezone service for one coordinate pair."""
    raw_offset: int  # seconds
    dst_offset: int  # seconds
    status: str = "OK"
    time_zone_id: Optional[str] = None
    time_zone_name: Optional[str] = None

    @property
    def total_offset(self) -> int:
        return self.raw_offset + self.dst_offset

    @classmethod
    def from_dict(cls, data: dict) -> "TimezoneInfo":
        return cls(
            raw_offset=int(data.get("rawOffset", 0)),
            dst_offset=int(data.get("dstOffset", 0)),
            status=data.get("status", "OK"),
            time_zone_id=data.get("timeZoneId"),
            time_zone_name=data.get("timeZoneName")
        )


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one place lookup."""
    location: Location
    timezone: TimezoneInfo


@dataclass(frozen=True)
class UserProfile:
    """Chat user as seen through a user directory."""
    name: str
    utc_offset: Optional[float] = None  # seconds, already DST-adjusted
    label: Optional[str] = None

    @property
    def has_timezone(self) -> bool:
        # bool is an int subclass but never a valid offset
        return isinstance(self.utc_offset, (int, float)) and not isinstance(self.utc_offset, bool)

    @classmethod
    def from_slack_member(cls, member: dict) -> "UserProfile":
        return cls(
            name=member["name"],
            utc_offset=member.get("tz_offset"),
            label=member.get("tz_label") or None
        )
