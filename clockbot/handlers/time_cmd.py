"""
Handler for the /time command.

/time - Current time in the default locations
/time in <place> - Current time in a geocoded place
/time for <username> - Current time for a user of the directory platform
"""

import logging
import re

from pyrogram import Client, filters
from pyrogram.types import Message
from pyrogram.enums import ParseMode

from ..langs import get_string

logger = logging.getLogger(__name__)

PLACE_PATTERN = re.compile(r"^in\s+(.+)$", re.IGNORECASE | re.DOTALL)
USER_PATTERN = re.compile(r"^for\s+(@?\S+)$", re.IGNORECASE)


def register_time_handler(app: Client, services):
    """Register the /time command handler."""

    @app.on_message(filters.command(["time", "times"]))
    async def handle_time(client: Client, message: Message):
        """
        Handle /time (or /times), /time in <place> and /time for <username>.

        Lookup failures are answered in the chat, never raised.
        """
        user_id = message.from_user.id if message.from_user else 0
        args = (message.text or "").split(maxsplit=1)

        if len(args) < 2:
            text = await services.commands.show_defaults()
            logger.info(f"/time by user {user_id}")
            await message.reply(text, parse_mode=ParseMode.DISABLED)
            return

        # /times is only an alias for the plain defaults listing
        command = message.command[0].lower() if message.command else "time"
        if command == "times":
            await message.reply(get_string("time_usage"), parse_mode=ParseMode.HTML)
            return

        rest = args[1].strip()

        match = PLACE_PATTERN.match(rest)
        if match:
            query = match.group(1).strip()
            text = await services.commands.show_for_place(query)
            logger.info(f"/time in '{query}' by user {user_id}")
            await message.reply(text, parse_mode=ParseMode.DISABLED)
            return

        match = USER_PATTERN.match(rest)
        if match:
            username = match.group(1)
            text = await services.commands.show_for_user(username)
            logger.info(f"/time for {username} by user {user_id}")
            await message.reply(text, parse_mode=ParseMode.DISABLED)
            return

        await message.reply(get_string("time_usage"), parse_mode=ParseMode.HTML)
