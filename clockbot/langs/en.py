"""
English translations for Clock Bot.
All user-facing strings are defined here.
"""

STRINGS = {
    # ==================== START & HELP ====================
    "start_private": (
        "<b>Welcome to Clock Bot!</b>\n\n"
        "Ask me what time it is anywhere in the world.\n\n"
        "<b>Quick Start:</b>\n"
        "• /time - Times in the default timezones\n"
        "• /time in <code>&lt;place&gt;</code> - Time in any place\n\n"
        "Use /help for all commands."
    ),

    "start_group": (
        "<b>Clock Bot</b> - What time is it over there?\n"
        "Tap the button below for usage guide."
    ),

    "start_button": "How to use",

    "help_text": (
        "<b>Clock Bot Commands</b>\n\n"
        "/time - Current time in {defaults}\n"
        "/time in <code>&lt;place&gt;</code> - Current time in any place\n"
        "/time for <code>&lt;username&gt;</code> - Current time for a {platform} user\n"
        "/help - Show this help\n\n"
        "<b>Examples:</b>\n"
        "<code>/time in Tokyo</code>\n"
        "<code>/time in 10 Downing Street</code>\n"
        "<code>/time for @alice</code>"
    ),

    # ==================== TIME ====================
    "time_usage": (
        "<b>Usage:</b>\n"
        "<code>/time</code>\n"
        "<code>/time in &lt;place&gt;</code>\n"
        "<code>/time for &lt;username&gt;</code>"
    ),

    "time_entry_unavailable": "{label}: unavailable",

    "time_no_idea": "Sorry, no idea: {error}",

    "time_unsupported_platform": "Sorry, this only works on {platform}.",

    "time_unknown_user": "Sorry, I don't know who {username} is.",

    "time_unknown_timezone": (
        "Sorry, I don't know what timezone {username} is in. "
        "Maybe ask them to update their {platform} profile?"
    ),
}
