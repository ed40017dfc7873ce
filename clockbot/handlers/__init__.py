"""Command handlers for Clock Bot."""

from .time_cmd import register_time_handler
from .start_help import register_start_help_handlers

__all__ = [
    "register_time_handler",
    "register_start_help_handlers",
    "register_all_handlers",
]


def register_all_handlers(app, services):
    """Register all command handlers with the bot."""
    register_start_help_handlers(app, services)
    register_time_handler(app, services)
