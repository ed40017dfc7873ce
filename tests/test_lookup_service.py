"""Tests for location and timezone lookups."""

import pytest

from clockbot.config import DEFAULT_TIMEZONES
from clockbot.models import Location, LookupResult
from clockbot.services import LookupFailure

from .fakes import timezone_payload


class TestFetchLocation:
    """Tests for LookupService.fetch_location."""

    @pytest.mark.asyncio
    async def test_default_names_skip_geocoding(self, lookup, geocoder):
        for name, (lat, lng) in DEFAULT_TIMEZONES.items():
            loc = await lookup.fetch_location(name)
            assert (loc.lat, loc.lng) == (lat, lng)
            assert loc.query == name
        geocoder.geocode.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_address(self, lookup):
        loc = await lookup.fetch_location("Berlin")
        assert loc.address == "Berlin @ 52.5167, 13.3833"

    @pytest.mark.asyncio
    async def test_default_match_is_case_sensitive(self, lookup, geocoder):
        loc = await lookup.fetch_location("berlin")
        geocoder.geocode.assert_awaited_once_with("berlin")
        assert loc.address == "Berlin, Germany"

    @pytest.mark.asyncio
    async def test_geocoded_location(self, lookup):
        loc = await lookup.fetch_location("Berlin, DE")
        assert loc == Location(
            query="Berlin, DE", lat=52.52, lng=13.405, address="Berlin, Germany"
        )

    @pytest.mark.asyncio
    async def test_geocoding_error_carries_status(self, lookup, geocoder):
        geocoder.geocode.return_value = {"status": "ZERO_RESULTS", "results": []}
        with pytest.raises(LookupFailure) as exc:
            await lookup.fetch_location("Atlantis")
        assert str(exc.value) == "geocoding failed (ZERO_RESULTS)"
        assert exc.value.status == "ZERO_RESULTS"

    @pytest.mark.asyncio
    async def test_ok_without_results_is_a_failure(self, lookup, geocoder):
        geocoder.geocode.return_value = {"status": "OK", "results": []}
        with pytest.raises(LookupFailure, match="ZERO_RESULTS"):
            await lookup.fetch_location("nowhere")

    @pytest.mark.asyncio
    async def test_transport_status_is_reported(self, lookup, geocoder):
        geocoder.geocode.return_value = {"status": "TIMEOUT"}
        with pytest.raises(LookupFailure, match=r"geocoding failed \(TIMEOUT\)"):
            await lookup.fetch_location("Tokyo")


class TestFetchTimezone:
    """Tests for LookupService.fetch_timezone."""

    @pytest.mark.asyncio
    async def test_returns_offsets(self, lookup, timezones):
        timezones.get_timezone.side_effect = None
        timezones.get_timezone.return_value = timezone_payload(3600, 3600)
        loc = Location(query="x", lat=1.5, lng=2.5, address="")

        tz = await lookup.fetch_timezone(loc)

        timezones.get_timezone.assert_awaited_once_with(1.5, 2.5)
        assert tz.raw_offset == 3600
        assert tz.dst_offset == 3600
        assert tz.total_offset == 7200
        assert tz.time_zone_id == "Etc/Test"

    @pytest.mark.asyncio
    async def test_error_carries_status(self, lookup, timezones):
        timezones.get_timezone.side_effect = None
        timezones.get_timezone.return_value = {"status": "OVER_QUERY_LIMIT"}
        loc = Location(query="x", lat=1.5, lng=2.5, address="")

        with pytest.raises(LookupFailure) as exc:
            await lookup.fetch_timezone(loc)
        assert str(exc.value) == "timezone lookup failed (OVER_QUERY_LIMIT)"


class TestLookup:
    """Tests for end-to-end and fan-out lookups."""

    @pytest.mark.asyncio
    async def test_lookup_default(self, lookup):
        result = await lookup.lookup("Berlin")
        assert isinstance(result, LookupResult)
        assert result.location.query == "Berlin"
        assert result.timezone.total_offset == 3600

    @pytest.mark.asyncio
    async def test_geocoding_failure_skips_timezone(self, lookup, geocoder, timezones):
        geocoder.geocode.return_value = {"status": "REQUEST_DENIED"}
        with pytest.raises(LookupFailure):
            await lookup.lookup("Tokyo")
        timezones.get_timezone.assert_not_called()

    @pytest.mark.asyncio
    async def test_defaults_in_table_order(self, lookup, geocoder):
        results = await lookup.lookup_defaults()
        assert [label for label, _ in results] == list(DEFAULT_TIMEZONES)
        assert all(isinstance(r, LookupResult) for _, r in results)
        geocoder.geocode.assert_not_called()

    @pytest.mark.asyncio
    async def test_defaults_isolate_failures(self, lookup, timezones):
        def fail_for_london(lat, lng):
            if lat == 51.507222:
                return {"status": "UNKNOWN_ERROR"}
            return timezone_payload(0)

        timezones.get_timezone.side_effect = fail_for_london

        results = dict(await lookup.lookup_defaults())

        assert isinstance(results["UK"], LookupFailure)
        assert isinstance(results["Berlin"], LookupResult)
        assert sum(isinstance(r, LookupResult) for r in results.values()) == 4


class TestMalformedPayloads:
    """Badly formed service replies become LookupFailure."""

    @pytest.mark.asyncio
    async def test_result_without_geometry(self, lookup, geocoder):
        geocoder.geocode.return_value = {"status": "OK", "results": [{"formatted_address": "X"}]}
        with pytest.raises(LookupFailure) as exc:
            await lookup.fetch_location("Somewhere")
        assert str(exc.value) == "geocoding failed (INVALID_RESPONSE)"
        assert exc.value.status == "INVALID_RESPONSE"

    @pytest.mark.asyncio
    async def test_non_numeric_coordinates(self, lookup, geocoder):
        geocoder.geocode.return_value = {
            "status": "OK",
            "results": [{"geometry": {"location": {"lat": "north", "lng": None}}}],
        }
        with pytest.raises(LookupFailure, match=r"geocoding failed \(INVALID_RESPONSE\)"):
            await lookup.fetch_location("Somewhere")

    @pytest.mark.asyncio
    async def test_geocode_body_not_a_dict(self, lookup, geocoder):
        geocoder.geocode.return_value = None
        with pytest.raises(LookupFailure, match=r"geocoding failed \(INVALID_RESPONSE\)"):
            await lookup.fetch_location("Somewhere")

    @pytest.mark.asyncio
    async def test_non_numeric_offsets(self, lookup, timezones):
        timezones.get_timezone.side_effect = None
        timezones.get_timezone.return_value = {"status": "OK", "rawOffset": None, "dstOffset": 0}
        loc = Location(query="x", lat=1.5, lng=2.5, address="")
        with pytest.raises(LookupFailure) as exc:
            await lookup.fetch_timezone(loc)
        assert str(exc.value) == "timezone lookup failed (INVALID_RESPONSE)"

    @pytest.mark.asyncio
    async def test_timezone_body_not_a_dict(self, lookup, timezones):
        timezones.get_timezone.side_effect = None
        timezones.get_timezone.return_value = ["OK"]
        loc = Location(query="x", lat=1.5, lng=2.5, address="")
        with pytest.raises(LookupFailure, match=r"timezone lookup failed \(INVALID_RESPONSE\)"):
            await lookup.fetch_timezone(loc)
