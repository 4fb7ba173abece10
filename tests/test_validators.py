"""
Tests for parameter validation helpers.
"""

import pytest

from src.geomag_service.query.validators import (
    Validation,
    validate_enumerated,
    validate_pattern,
    validate_time,
    is_edge_channel,
    is_location_code,
)

# 2024-01-01T00:00:00Z
DAY_START = 1704067200


class TestValidateEnumerated:
    """Test enumerated value validation."""

    def test_accepts_member(self):
        result = validate_enumerated("format", "json", ["iaga2002", "json"])
        assert result.ok
        assert result.value == "json"

    def test_rejects_non_member_naming_field_and_value(self):
        result = validate_enumerated("format", "xml", ["iaga2002", "json"])
        assert not result.ok
        assert result.value is None
        assert "format" in result.error
        assert '"xml"' in result.error

    def test_match_is_case_exact(self):
        result = validate_enumerated("format", "JSON", ["iaga2002", "json"])
        assert not result.ok

    def test_integer_members(self):
        assert validate_enumerated("sampling_period", 60, (1, 60, 3600)).ok
        assert not validate_enumerated("sampling_period", 30, (1, 60, 3600)).ok


class TestPatterns:
    """Test structural pattern checks."""

    @pytest.mark.parametrize("value", ["R0", "A0", "D0", "Q0", "99", "ZZ"])
    def test_location_codes(self, value):
        assert is_location_code(value)

    @pytest.mark.parametrize("value", ["r0", "R", "R00", "", "variation", "R0\n"])
    def test_not_location_codes(self, value):
        assert not is_location_code(value)

    @pytest.mark.parametrize("value", ["MVH", "ZZZ", "H10", "SSF"])
    def test_edge_channels(self, value):
        assert is_edge_channel(value)

    @pytest.mark.parametrize("value", ["zzzz", "1VH", "MV", "MVHX", "mvh", "M-H"])
    def test_not_edge_channels(self, value):
        assert not is_edge_channel(value)

    def test_validate_pattern_failure_message(self):
        result = validate_pattern("type", "bad", r"^[A-Z0-9]{2}$")
        assert not result.ok
        assert result.error == 'Bad type value "bad"'


class TestValidateTime:
    """Test time parsing validation."""

    def test_iso_timestamp(self):
        result = validate_time("starttime", "2024-01-01T00:00:00Z")
        assert result.ok
        assert result.value == DAY_START

    def test_date_only_is_utc_midnight(self):
        assert validate_time("starttime", "2024-01-01").value == DAY_START

    def test_offset_is_converted(self):
        result = validate_time("endtime", "2024-01-01T01:00:00+01:00")
        assert result.value == DAY_START

    def test_unparseable_names_field(self):
        result = validate_time("endtime", "bogus")
        assert not result.ok
        assert "endtime" in result.error


def test_validation_constructors():
    assert Validation.success(5) == Validation(value=5, error=None)
    assert not Validation.failure("nope").ok
