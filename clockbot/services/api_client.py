"""
Shared HTTP plumbing for the JSON web services Clock Bot talks to.

Transport problems never escape as exceptions: they are folded into the
payload's ``status`` field so callers check a single success condition.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from ..config import API_TIMEOUT

logger = logging.getLogger(__name__)

STATUS_TIMEOUT = "TIMEOUT"
STATUS_REQUEST_FAILED = "REQUEST_FAILED"
STATUS_INVALID_RESPONSE = "INVALID_RESPONSE"


class ApiClient:
    """Owns a lazily created aiohttp session."""

    def __init__(self, timeout: int = API_TIMEOUT):
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(limit=10)  # Limit concurrent connections
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                connector=connector
            )
        return self._session

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """GET ``url`` and decode the JSON body."""
        try:
            session = await self._get_session()
            async with session.get(url, params=params, headers=headers) as response:
                if response.status != 200:
                    logger.warning(f"{url} returned HTTP {response.status}")
                    return {"status": f"HTTP_{response.status}"}
                return await response.json(content_type=None)
        except asyncio.TimeoutError:
            logger.warning(f"Timeout after {self.timeout}s fetching {url}")
            return {"status": STATUS_TIMEOUT}
        except aiohttp.ClientError as e:
            logger.warning(f"Network error fetching {url}: {e}")
            return {"status": STATUS_REQUEST_FAILED}
        except ValueError as e:
            logger.warning(f"Malformed JSON from {url}: {e}")
            return {"status": STATUS_INVALID_RESPONSE}
