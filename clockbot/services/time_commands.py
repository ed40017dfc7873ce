"""
Replies for the /time command family.

Platform independent: every method returns the reply text, the chat
adapter only sends it.
"""

import logging
from typing import Callable, Optional

from .errors import ClockBotError, UnsupportedPlatform, UserNotFound, TimezoneUnset
from .formatting import utc_now, get_offset_time, render_message, render_labelled
from .lookup_service import LookupService
from .user_directory import UserDirectory
from ..config import USER_DIRECTORY_PLATFORM
from ..langs import get_string
from ..models import LookupResult, UserProfile

logger = logging.getLogger(__name__)


class TimeCommands:
    """Builds replies for ``time``, ``time in <place>`` and ``time for <name>``."""

    def __init__(
        self,
        lookup: LookupService,
        users: Optional[UserDirectory] = None,
        platform: str = USER_DIRECTORY_PLATFORM,
        clock: Callable[[], int] = utc_now
    ):
        self.lookup = lookup
        self.users = users
        self.platform = platform
        self.clock = clock

    async def show_defaults(self) -> str:
        """Current time for every default location, in table order."""
        results = await self.lookup.lookup_defaults()
        now = self.clock()

        parts = []
        errors = []
        for label, result in results:
            if isinstance(result, LookupResult):
                parts.append(render_labelled(label, result.timezone.total_offset, now))
            else:
                errors.append(result)
                parts.append(get_string("time_entry_unavailable", label=label))

        if results and len(errors) == len(results):
            return get_string("time_no_idea", error=errors[0])

        return ", ".join(parts)

    async def show_for_place(self, query: str) -> str:
        try:
            result = await self.lookup.lookup(query)
        except ClockBotError as e:
            return get_string("time_no_idea", error=e)
        return render_message(result.location, result.timezone, self.clock())

    async def resolve_user(self, username: str) -> UserProfile:
        """Find ``username`` in the directory and check it has an offset."""
        if self.users is None:
            raise UnsupportedPlatform(self.platform)

        user = await self.users.find_by_name(username)
        if user is None:
            raise UserNotFound(username)
        if not user.has_timezone:
            raise TimezoneUnset(username)
        return user

    async def show_for_user(self, username: str) -> str:
        """Time for a chat user, using their profile offset as-is (no DST added)."""
        if username.startswith("@"):
            username = username[1:]

        try:
            user = await self.resolve_user(username)
        except UnsupportedPlatform as e:
            return get_string("time_unsupported_platform", platform=e.platform)
        except UserNotFound as e:
            return get_string("time_unknown_user", username=e.username)
        except TimezoneUnset as e:
            return get_string(
                "time_unknown_timezone",
                username=e.username,
                platform=self.platform
            )

        text = get_offset_time(user.utc_offset, self.clock())
        if user.label:
            text += f" ({user.label})"
        return text
