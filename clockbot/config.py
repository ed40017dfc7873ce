"""
Configuration module for Clock Bot.
All configurable settings are centralized here.
"""

import os
from pathlib import Path

# Bot credentials - set via environment variables
API_ID = int(os.getenv("API_ID", "0"))
API_HASH = os.getenv("API_HASH", "")
BOT_TOKEN = os.getenv("BOT_TOKEN", "")

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / "data"

# Pyrogram keeps its session file here
DATA_DIR.mkdir(exist_ok=True)

# Google Maps web services (the key is optional for low volumes)
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")
GEOCODE_API_URL = "https://maps.googleapis.com/maps/api/geocode/json"
TIMEZONE_API_URL = "https://maps.googleapis.com/maps/api/timezone/json"
API_TIMEOUT = int(os.getenv("API_TIMEOUT", "10"))  # seconds per request

# Slack workspace used as the user directory for /time for <name>
SLACK_TOKEN = os.getenv("SLACK_TOKEN", "")
SLACK_API_URL = "https://slack.com/api"
USER_DIRECTORY_PLATFORM = "Slack"
USER_DIRECTORY_REFRESH = int(os.getenv("USER_DIRECTORY_REFRESH", "300"))  # seconds

# Default locations for /time, in display order: label -> (lat, lng)
DEFAULT_TIMEZONES = {
    "Pacific": (37.7833, -122.4167),  # San Francisco
    "Central": (41.836944, -87.684722),  # Chicago
    "Eastern": (40.7127, -74.0059),  # NYC
    "UK": (51.507222, -0.1275),  # London
    "Berlin": (52.5167, 13.3833),
}

# Bot commands to register
BOT_COMMANDS = [
    ("time", "Current time in the default timezones, a place or for a user"),
    ("help", "Show help message"),
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
