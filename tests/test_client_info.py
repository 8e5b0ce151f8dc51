"""
Zwanski API: Client Reflection, Clock and Catalog Unit Tests
=============================================================

What:  Header reflection, CF-Ray parsing, timestamp formatting, the server
       clock snapshot, the simulated score and the device table.
"""

import re
from datetime import datetime, timedelta, timezone

import pytest
from starlette.datastructures import Headers

from zwanski_api.services.client_info import (
    SECURITY_RECOMMENDATIONS,
    browser_fingerprint,
    client_ip,
    edge_location,
    geolocation,
    header_or_unknown,
)
from zwanski_api.services.clock import clock_snapshot, readable_local_time, utc_timestamp
from zwanski_api.services.device_catalog import DEVICES, lookup_device
from zwanski_api.services.site_score import RECOMMENDATIONS, score_site

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestHeaderReflection:

    def test_header_lookup_is_case_insensitive(self):
        headers = Headers({"cf-connecting-ip": "198.51.100.7"})
        assert header_or_unknown(headers, "CF-Connecting-IP") == "198.51.100.7"

    def test_missing_and_empty_headers_read_unknown(self):
        headers = Headers({"CF-IPCountry": ""})
        assert header_or_unknown(headers, "CF-IPCountry") == "unknown"
        assert header_or_unknown(headers, "CF-Connecting-IP") == "unknown"

    def test_client_ip(self, edge_headers):
        result = client_ip(Headers(edge_headers))
        assert result.ip == "203.0.113.42"
        assert ISO_UTC.match(result.timestamp)

    def test_geolocation(self, edge_headers):
        result = geolocation(Headers(edge_headers))
        assert result.country == "TN"
        assert result.city == "TUN"
        assert result.coordinates.latitude == "36.8065"
        assert result.coordinates.longitude == "10.1815"

    def test_geolocation_without_edge(self):
        result = geolocation(Headers({}))
        assert result.country == "unknown"
        assert result.city == "unknown"
        assert result.coordinates.latitude == "unknown"
        assert result.coordinates.longitude == "unknown"

    def test_fingerprint(self, edge_headers):
        result = browser_fingerprint(Headers(edge_headers))
        assert result.user_agent == edge_headers["User-Agent"]
        assert result.country == "TN"
        assert result.https is True
        assert result.privacy_rating == "good"
        assert result.security_recommendations == list(SECURITY_RECOMMENDATIONS)


class TestEdgeLocation:

    @pytest.mark.parametrize(
        "ray, expected",
        [
            ("8f1a2b3c4d5e6f70-LHR", "LHR"),
            ("abc-CDG-extra", "CDG"),
            ("8f1a2b3c4d5e6f70", "unknown"),
            ("8f1a2b3c4d5e6f70-", "unknown"),
            ("", "unknown"),
            (None, "unknown"),
        ],
    )
    def test_edge_location(self, ray, expected):
        assert edge_location(ray) == expected


class TestClock:

    FIXED = datetime(2024, 12, 3, 10, 30, 45, 123456, tzinfo=timezone.utc)

    def test_utc_timestamp_format(self):
        assert utc_timestamp(self.FIXED) == "2024-12-03T10:30:45.123Z"

    def test_utc_timestamp_converts_offsets(self):
        plus_one = timezone(timedelta(hours=1))
        moment = datetime(2024, 12, 3, 11, 30, 45, tzinfo=plus_one)
        assert utc_timestamp(moment) == "2024-12-03T10:30:45.000Z"

    def test_current_timestamp_format(self):
        assert ISO_UTC.match(utc_timestamp())

    def test_clock_snapshot(self):
        snapshot = clock_snapshot(self.FIXED)
        assert snapshot.utc_timestamp == "2024-12-03T10:30:45.123Z"
        assert snapshot.unix_timestamp == 1733221845
        local_offset = self.FIXED.astimezone().utcoffset()
        assert snapshot.timezone_offset == int(local_offset.total_seconds() // 60)
        assert snapshot.readable == readable_local_time(self.FIXED.astimezone())

    @pytest.mark.parametrize(
        "moment, expected",
        [
            (datetime(2024, 12, 3, 9, 5, 7), "12/3/2024, 9:05:07 AM"),
            (datetime(2024, 1, 15, 0, 0, 0), "1/15/2024, 12:00:00 AM"),
            (datetime(2024, 7, 4, 12, 30, 0), "7/4/2024, 12:30:00 PM"),
            (datetime(2024, 7, 4, 23, 59, 59), "7/4/2024, 11:59:59 PM"),
        ],
    )
    def test_readable_local_time(self, moment, expected):
        assert readable_local_time(moment) == expected


class TestSiteScore:

    def test_scores_within_ranges(self):
        for _ in range(50):
            report = score_site("example.com")
            assert 70 <= report.overall_score <= 99
            assert 60 <= report.seo_score <= 99
            assert 65 <= report.performance_score <= 99
            assert 70 <= report.security_score <= 99
            assert isinstance(report.mobile_friendly, bool)
            assert isinstance(report.cdn_detected, bool)

    def test_fixed_fields(self):
        report = score_site("example.com/path")
        assert report.domain == "example.com/path"
        assert report.https_enabled is True
        assert report.recommendations == list(RECOMMENDATIONS)
        assert len(report.recommendations) == 4
        assert ISO_UTC.match(report.analyzed_at)


class TestDeviceCatalog:

    def test_known_device(self):
        result = lookup_device("Galaxy23")
        assert result.model == "Galaxy23"
        assert result.specs == '6.1" AMOLED, Snapdragon 8 Gen 2'
        assert result.os == "Android 13+"
        assert result.maintenance == "very_good"
        assert result.carrier_support == "all"
        assert result.repair_difficulty == "moderate"
        assert result.lifecycle == "active"

    def test_lookup_is_case_sensitive(self):
        assert lookup_device("iphone14").specs == "N/A"

    def test_default_model(self):
        result = lookup_device(None)
        assert result.model == "Unknown"
        assert result.specs == "N/A"
        assert result.os == "Unknown"
        assert result.maintenance == "unknown"
        assert result.carrier_support == "check_carrier"

    def test_table_is_read_only(self):
        assert set(DEVICES) == {"iPhone13", "iPhone14", "Galaxy23"}
        with pytest.raises(TypeError):
            DEVICES["Pixel8"] = {}
