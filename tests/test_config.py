"""
Zwanski API: Settings Validation Tests
=======================================

What:  Bounds and normalization applied by the Settings validators.
"""

import pytest
from pydantic import ValidationError

from zwanski_api.config import Settings


class TestUpstreamTimeout:

    @pytest.mark.parametrize("value", [0.1, 5.0, 60.0])
    def test_accepts_inclusive_range(self, value):
        assert Settings(upstream_timeout=value).upstream_timeout == value

    @pytest.mark.parametrize("value", [0.0, 0.09, 60.1])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError):
            Settings(upstream_timeout=value)


class TestNormalization:

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_ping_scheme_is_lowercased(self):
        assert Settings(ping_scheme="HTTP").ping_scheme == "http"

    def test_unknown_ping_scheme_rejected(self):
        with pytest.raises(ValidationError):
            Settings(ping_scheme="ftp")
