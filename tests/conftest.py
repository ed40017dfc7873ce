"""Shared fixtures: mocked providers wired into a LookupService."""

from unittest.mock import AsyncMock

import pytest

from clockbot.config import DEFAULT_TIMEZONES
from clockbot.services import LookupService

from .fakes import BERLIN_GEOCODE, offsets_by_latitude


@pytest.fixture
def geocoder():
    mock = AsyncMock()
    mock.geocode = AsyncMock(return_value=BERLIN_GEOCODE)
    return mock


@pytest.fixture
def timezones():
    mock = AsyncMock()
    mock.get_timezone = AsyncMock(side_effect=offsets_by_latitude)
    return mock


@pytest.fixture
def lookup(geocoder, timezones):
    return LookupService(geocoder, timezones, DEFAULT_TIMEZONES)
