"""
Clock Bot - A Telegram bot that tells the time around the world.

Features:
- Current time in a set of default timezones
- Current time in any geocoded place
- Current time for a Slack workspace member
"""

__version__ = "1.0.0"
__author__ = "Clock Bot"
