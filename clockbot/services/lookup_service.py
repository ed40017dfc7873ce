"""
Location and timezone lookups.

Chains the geocoder and the timezone provider, with a shortcut for the
configured default locations.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple, Union

from .api_client import STATUS_INVALID_RESPONSE
from .errors import LookupFailure
from .geocoding_service import GeocodeProvider
from .timezone_service import TimezoneProvider
from ..config import DEFAULT_TIMEZONES
from ..models import Location, TimezoneInfo, LookupResult

logger = logging.getLogger(__name__)

STATUS_OK = "OK"


class LookupService:
    """
    Service for resolving places to their current UTC offset.

    Default table names skip geocoding and use their stored coordinates.
    """

    def __init__(
        self,
        geocoder: GeocodeProvider,
        timezones: TimezoneProvider,
        defaults: Optional[Dict[str, Tuple[float, float]]] = None
    ):
        self.geocoder = geocoder
        self.timezones = timezones
        self.defaults = dict(DEFAULT_TIMEZONES if defaults is None else defaults)

    async def fetch_location(self, name: str) -> Location:
        """Resolve ``name`` to a Location, raising LookupFailure on error."""
        # Exact match only, "berlin" goes through the geocoder
        if name in self.defaults:
            lat, lng = self.defaults[name]
            return Location.from_default(name, lat, lng)

        data = await self.geocoder.geocode(name)
        if not isinstance(data, dict):
            data = {"status": STATUS_INVALID_RESPONSE}
        status = data.get("status")
        results = data.get("results") or []

        if status == STATUS_OK and not results:
            status = "ZERO_RESULTS"

        if status != STATUS_OK:
            logger.warning(f"Geocoding '{name}' failed: {status}")
            raise LookupFailure(f"geocoding failed ({status})", status=status)

        try:
            return Location.from_geocode_result(name, results[0])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Malformed geocoding result for '{name}': {e!r}")
            raise LookupFailure(
                f"geocoding failed ({STATUS_INVALID_RESPONSE})",
                status=STATUS_INVALID_RESPONSE
            ) from e

    async def fetch_timezone(self, loc: Location) -> TimezoneInfo:
        """Look up offsets for ``loc``, raising LookupFailure on error."""
        data = await self.timezones.get_timezone(*loc.coordinates)
        if not isinstance(data, dict):
            data = {"status": STATUS_INVALID_RESPONSE}
        status = data.get("status")

        if status != STATUS_OK:
            logger.warning(f"Timezone lookup for {loc.query} failed: {status}")
            raise LookupFailure(f"timezone lookup failed ({status})", status=status)

        try:
            return TimezoneInfo.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Malformed timezone result for {loc.query}: {e!r}")
            raise LookupFailure(
                f"timezone lookup failed ({STATUS_INVALID_RESPONSE})",
                status=STATUS_INVALID_RESPONSE
            ) from e

    async def lookup(self, query: str) -> LookupResult:
        loc = await self.fetch_location(query)
        tz = await self.fetch_timezone(loc)
        return LookupResult(location=loc, timezone=tz)

    async def lookup_defaults(self) -> List[Tuple[str, Union[LookupResult, Exception]]]:
        """
        Look up every default location in parallel.

        Returns (label, result-or-error) pairs in table order. A failed
        lookup does not affect the others.
        """
        labels = list(self.defaults)
        tasks = [self.lookup(label) for label in labels]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        for label, result in zip(labels, results):
            if isinstance(result, Exception):
                logger.warning(f"Default location {label} unavailable: {result}")

        return list(zip(labels, results))
