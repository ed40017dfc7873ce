"""
Clock Bot - Main Entry Point

A Telegram bot that tells the current time around the world.

Features:
- /time - Current time in a set of default timezones
- /time in <place> - Current time anywhere (geocoded)
- /time for <username> - Current time for a Slack workspace member

Usage:
    python -m clockbot.main

Environment Variables:
    API_ID - Telegram API ID
    API_HASH - Telegram API Hash
    BOT_TOKEN - Bot token from @BotFather
    GOOGLE_API_KEY - Google Maps web services key (optional)
    SLACK_TOKEN - Slack token with users:read, enables /time for (optional)
"""

import asyncio
import logging
import signal
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Load .env file BEFORE importing config
from dotenv import load_dotenv

_env_file = Path(__file__).parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

from pyrogram import Client
from pyrogram.types import BotCommand

from .config import (
    API_ID, API_HASH, BOT_TOKEN, DATA_DIR,
    SLACK_TOKEN, LOG_LEVEL, BOT_COMMANDS
)
from .services import (
    GoogleGeocoder, GoogleTimezoneClient, LookupService,
    SlackUserDirectory, TimeCommands
)
from .handlers import register_all_handlers

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Container for all bot services."""
    geocoder: GoogleGeocoder
    timezones: GoogleTimezoneClient
    lookup: LookupService
    users: Optional[SlackUserDirectory]
    commands: TimeCommands

    async def close(self):
        await self.geocoder.close()
        await self.timezones.close()
        if self.users:
            await self.users.close()


class ClockBot:
    """
    Main bot class that orchestrates all components.

    Lifecycle:
    1. Create services
    2. Load the user directory (if configured)
    3. Register handlers
    4. Start bot
    5. Handle graceful shutdown
    """

    def __init__(self):
        self.client: Optional[Client] = None
        self.services: Optional[Services] = None
        self._shutdown_event = asyncio.Event()

    async def start(self):
        """Initialize and start the bot."""
        logger.info("Starting Clock Bot...")

        # Validate configuration
        if not all([API_ID, API_HASH, BOT_TOKEN]):
            logger.error(
                "Missing configuration! Set API_ID, API_HASH, and BOT_TOKEN "
                "environment variables."
            )
            sys.exit(1)

        self.services = await self._create_services()

        # Create Pyrogram client
        self.client = Client(
            name="clockbot",
            api_id=API_ID,
            api_hash=API_HASH,
            bot_token=BOT_TOKEN,
            workdir=str(DATA_DIR)  # Store session in data dir
        )

        # Register all command handlers
        register_all_handlers(self.client, self.services)

        # Setup signal handlers for graceful shutdown
        self._setup_signal_handlers()

        # Start the bot
        logger.info("Connecting to Telegram...")
        await self.client.start()

        me = await self.client.get_me()
        logger.info(f"Bot started as @{me.username} (ID: {me.id})")

        # Register bot commands with Telegram
        await self._register_commands()

        # Wait for shutdown signal
        await self._shutdown_event.wait()

        # Graceful shutdown
        await self.shutdown()

    async def _create_services(self) -> Services:
        geocoder = GoogleGeocoder()
        timezones = GoogleTimezoneClient()
        lookup = LookupService(geocoder, timezones)

        users = None
        if SLACK_TOKEN:
            users = SlackUserDirectory(SLACK_TOKEN)
            if not await users.load():
                logger.warning("Slack user directory unavailable, will retry on demand")
        else:
            logger.info("SLACK_TOKEN not set, /time for is disabled")

        return Services(
            geocoder=geocoder,
            timezones=timezones,
            lookup=lookup,
            users=users,
            commands=TimeCommands(lookup, users)
        )

    async def shutdown(self):
        """Gracefully shutdown the bot."""
        logger.info("Shutting down...")

        # Stop the client
        if self.client:
            await self.client.stop()

        # Close HTTP sessions
        if self.services:
            await self.services.close()

        logger.info("Shutdown complete.")

    async def _register_commands(self):
        """Register bot commands with Telegram."""
        try:
            commands = [
                BotCommand(command=cmd, description=desc)
                for cmd, desc in BOT_COMMANDS
            ]
            await self.client.set_bot_commands(commands)
            logger.info(f"Registered {len(commands)} bot commands")
        except Exception as e:
            logger.warning(f"Failed to register bot commands: {e}")

    def _setup_signal_handlers(self):
        """Setup handlers for graceful shutdown on SIGINT/SIGTERM."""
        loop = asyncio.get_running_loop()

        def signal_handler():
            logger.info("Received shutdown signal")
            self._shutdown_event.set()

        # Handle both SIGINT (Ctrl+C) and SIGTERM
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, signal_handler)
            except NotImplementedError:
                # Windows doesn't support add_signal_handler
                signal.signal(sig, lambda s, f: signal_handler())


def main():
    """Entry point for the bot."""
    bot = ClockBot()

    try:
        asyncio.run(bot.start())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
