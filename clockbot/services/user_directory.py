"""
User directories for /time for <name>.

A directory maps a chat username to a profile with a UTC offset. The Slack
implementation mirrors a workspace's member list in memory.
"""

import logging
import time
from typing import Dict, Optional, Protocol

from .api_client import ApiClient
from ..config import SLACK_API_URL, USER_DIRECTORY_REFRESH, API_TIMEOUT
from ..models import UserProfile

logger = logging.getLogger(__name__)

PAGE_SIZE = 200


class UserDirectory(Protocol):
    async def find_by_name(self, name: str) -> Optional[UserProfile]:
        ...


class SlackUserDirectory(ApiClient):
    """
    UserDirectory over the Slack Web API ``users.list`` method.

    Members are loaded once at startup and reloaded when a lookup misses
    and the copy is older than ``refresh_interval`` seconds.
    """

    def __init__(
        self,
        token: str,
        url: str = SLACK_API_URL,
        refresh_interval: int = USER_DIRECTORY_REFRESH,
        timeout: int = API_TIMEOUT
    ):
        super().__init__(timeout=timeout)
        self.token = token
        self.url = url
        self.refresh_interval = refresh_interval
        self._users: Dict[str, UserProfile] = {}
        self._loaded_at: Optional[float] = None

    @property
    def is_stale(self) -> bool:
        if self._loaded_at is None:
            return True
        return time.monotonic() - self._loaded_at >= self.refresh_interval

    async def load(self) -> bool:
        """Fetch all workspace members. Keeps the previous copy on failure."""
        users: Dict[str, UserProfile] = {}
        cursor = ""
        headers = {"Authorization": f"Bearer {self.token}"}

        while True:
            params = {"limit": str(PAGE_SIZE)}
            if cursor:
                params["cursor"] = cursor

            data = await self._get_json(f"{self.url}/users.list", params=params, headers=headers)
            if not data.get("ok"):
                logger.warning(
                    f"Slack users.list failed: {data.get('error') or data.get('status')}"
                )
                return False

            for member in data.get("members", []):
                if member.get("deleted") or not member.get("name"):
                    continue
                profile = UserProfile.from_slack_member(member)
                users[profile.name] = profile

            cursor = (data.get("response_metadata") or {}).get("next_cursor", "")
            if not cursor:
                break

        self._users = users
        self._loaded_at = time.monotonic()
        logger.info(f"Loaded {len(users)} Slack users")
        return True

    async def find_by_name(self, name: str) -> Optional[UserProfile]:
        """Exact, case-sensitive match on the Slack username."""
        user = self._users.get(name)
        if user is None and self.is_stale:
            await self.load()
            user = self._users.get(name)
        return user
