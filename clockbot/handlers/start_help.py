"""
Handler for /start and /help commands.

/start - Welcome message (brief in groups, detailed in private)
/help - Full command reference
"""

import logging

from pyrogram import Client, filters
from pyrogram.types import Message, InlineKeyboardMarkup, InlineKeyboardButton
from pyrogram.enums import ChatType, ParseMode

from ..config import DEFAULT_TIMEZONES
from ..langs import get_string

logger = logging.getLogger(__name__)

# Cache for bot username
_bot_username = None


async def get_bot_username(client: Client) -> str:
    """Get and cache the bot's username."""
    global _bot_username
    if _bot_username is None:
        me = await client.get_me()
        _bot_username = me.username
    return _bot_username


def help_text(services) -> str:
    return get_string(
        "help_text",
        defaults=", ".join(DEFAULT_TIMEZONES),
        platform=services.commands.platform
    )


def register_start_help_handlers(app: Client, services):
    """Register /start and /help handlers."""

    @app.on_message(filters.command("start"))
    async def handle_start(client: Client, message: Message):
        """
        Handle /start command.

        In private: Show welcome, or help for the "help" deep link
        In groups: Show brief text with button that opens DM
        """
        args = (message.text or "").split(maxsplit=1)
        if len(args) > 1 and args[1].strip() == "help":
            await message.reply(help_text(services), parse_mode=ParseMode.HTML)
            return

        if message.chat.type == ChatType.PRIVATE:
            await message.reply(get_string("start_private"), parse_mode=ParseMode.HTML)
            return

        bot_username = await get_bot_username(client)
        deep_link = f"https://t.me/{bot_username}?start=help"

        keyboard = InlineKeyboardMarkup([
            [InlineKeyboardButton(
                get_string("start_button"),
                url=deep_link
            )]
        ])
        await message.reply(
            get_string("start_group"),
            parse_mode=ParseMode.HTML,
            reply_markup=keyboard
        )

    @app.on_message(filters.command("help"))
    async def handle_help(client: Client, message: Message):
        """Handle /help command - show full command reference."""
        await message.reply(help_text(services), parse_mode=ParseMode.HTML)
