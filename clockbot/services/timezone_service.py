"""
Timezone lookups for Clock Bot.

Resolves coordinates to UTC and daylight-saving offsets with the Google
Time Zone API. All DST rules live on the service side.
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol

from .api_client import ApiClient
from .formatting import utc_now
from ..config import TIMEZONE_API_URL, GOOGLE_API_KEY, API_TIMEOUT

logger = logging.getLogger(__name__)


class TimezoneProvider(Protocol):
    """Anything that can map coordinates to offsets.

    Returns ``{"status": ..., "rawOffset": seconds, "dstOffset": seconds}``.
    """

    async def get_timezone(self, lat: float, lng: float) -> Dict[str, Any]:
        ...


class GoogleTimezoneClient(ApiClient):
    """TimezoneProvider backed by maps.googleapis.com."""

    def __init__(
        self,
        api_key: str = GOOGLE_API_KEY,
        url: str = TIMEZONE_API_URL,
        timeout: int = API_TIMEOUT,
        clock: Optional[Callable[[], int]] = None
    ):
        super().__init__(timeout=timeout)
        self.api_key = api_key
        self.url = url
        self.clock = clock or utc_now

    async def get_timezone(self, lat: float, lng: float) -> Dict[str, Any]:
        # dstOffset depends on the instant, so always ask about "now"
        params = {
            "location": f"{lat},{lng}",
            "timestamp": str(self.clock()),
        }
        if self.api_key:
            params["key"] = self.api_key

        data = await self._get_json(self.url, params=params)
        logger.debug(f"Timezone for {lat},{lng}: status {data.get('status')}")
        return data
