"""
Geocoding for Clock Bot.

Turns free text ("Tokyo", "10 Downing St") into coordinates plus a
formatted address using the Google Geocoding API.
"""

import logging
from typing import Any, Dict, Protocol

from .api_client import ApiClient
from ..config import GEOCODE_API_URL, GOOGLE_API_KEY, API_TIMEOUT

logger = logging.getLogger(__name__)


class GeocodeProvider(Protocol):
    """Anything that can geocode a place name.

    Returns the raw payload: ``{"status": ..., "results": [...]}`` where each
    result carries ``geometry.location.{lat,lng}`` and ``formatted_address``.
    """

    async def geocode(self, text: str) -> Dict[str, Any]:
        ...


class GoogleGeocoder(ApiClient):
    """GeocodeProvider backed by maps.googleapis.com."""

    def __init__(
        self,
        api_key: str = GOOGLE_API_KEY,
        url: str = GEOCODE_API_URL,
        timeout: int = API_TIMEOUT
    ):
        super().__init__(timeout=timeout)
        self.api_key = api_key
        self.url = url

    async def geocode(self, text: str) -> Dict[str, Any]:
        params = {"address": text}
        if self.api_key:
            params["key"] = self.api_key

        data = await self._get_json(self.url, params=params)
        logger.debug(f"Geocoded '{text}': status {data.get('status')}")
        return data
