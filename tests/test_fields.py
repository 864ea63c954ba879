"""
Unit Tests for Field Resolution

Tests for:
- asctime formatting from datetimes and epoch timestamps
- Missing and falsy fields rendering as empty strings
- String padding and truncation
- Record field views and error extraction
"""

import logging
import sys
import time
from datetime import datetime

import pytest

from browserkit.domain.formatting.fields import FieldResolver, error_of, fields_of, pad
from browserkit.domain.formatting.grammar import DirectiveType, FormatDirective


class TestFieldResolver:
    """Tests for FieldResolver.resolve."""

    def test_asctime_from_datetime(self):
        """Should format a datetime creation time with strftime tokens."""
        resolver = FieldResolver("%Y-%m-%d %H:%M:%S")
        fields = {"created": datetime(2024, 1, 2, 3, 4, 5)}

        assert resolver.resolve(fields, FormatDirective("asctime")) == "2024-01-02 03:04:05"

    def test_asctime_from_epoch(self):
        """Should format an epoch creation time in local time."""
        resolver = FieldResolver("%H:%M:%S")
        created = 1_700_000_000.0

        expected = time.strftime("%H:%M:%S", time.localtime(created))
        assert resolver.resolve({"created": created}, FormatDirective("asctime")) == expected

    def test_asctime_ignores_directive_type(self):
        """Should return the formatted time even for a numeric type."""
        resolver = FieldResolver("%Y")
        directive = FormatDirective("asctime", type=DirectiveType.INT)

        assert resolver.resolve({"created": datetime(1999, 5, 5)}, directive) == "1999"

    @pytest.mark.parametrize("fields", [{}, {"name": None}, {"name": ""}, {"name": 0}])
    def test_missing_or_falsy_field_is_empty(self, fields):
        """Should render missing and falsy fields as an empty string."""
        assert FieldResolver("%H").resolve(fields, FormatDirective("name")) == ""

    def test_string_padding_right_aligned(self):
        """Should right-align to the width by default."""
        directive = FormatDirective("name", width=6)

        assert FieldResolver("%H").resolve({"name": "app"}, directive) == "   app"

    def test_string_padding_left_aligned(self):
        """Should left-align with the - flag."""
        directive = FormatDirective("name", flag="-", width=6)

        assert FieldResolver("%H").resolve({"name": "app"}, directive) == "app   "

    def test_string_coerces_non_strings(self):
        """Should convert non-string values for s directives."""
        assert FieldResolver("%H").resolve({"lineno": 42}, FormatDirective("lineno")) == "42"

    def test_numeric_types_pass_raw_value(self):
        """Should leave values untouched for non-string directives."""
        payload = {"a": [1, 2]}
        resolver = FieldResolver("%H")

        assert resolver.resolve({"n": 42}, FormatDirective("n", type=DirectiveType.INT)) == 42
        assert resolver.resolve({"p": payload}, FormatDirective("p", type=DirectiveType.OBJECT)) is payload


class TestPad:
    """Tests for printf-style string padding."""

    def test_precision_truncates(self):
        """Should truncate to the precision before padding."""
        assert pad("warning", "-", 5, 4) == "warn "

    def test_no_width_no_padding(self):
        """Should leave the text alone without width."""
        assert pad("text", "", None, None) == "text"


class TestFieldsOf:
    """Tests for record field extraction."""

    def test_log_record_message_is_derived(self, make_record):
        """Should expose the merged message without mutating the record."""
        record = make_record("hello %s", args=("world",))

        fields = fields_of(record)

        assert fields["message"] == "hello world"
        assert fields["levelname"] == "INFO"
        assert not hasattr(record, "message")

    def test_mapping_record_is_read_only(self):
        """Should return a read-only view of a mapping record."""
        fields = fields_of({"name": "app"})

        with pytest.raises(TypeError):
            fields["name"] = "other"  # type: ignore[index]


class TestErrorOf:
    """Tests for error value extraction."""

    def test_error_field(self):
        """Should prefer an explicit error field."""
        error = ValueError("boom")

        assert error_of({"error": error}) is error

    def test_exc_info_tuple(self):
        """Should fall back to the exception carried in exc_info."""
        try:
            raise KeyError("missing")
        except KeyError:
            exc_info = sys.exc_info()

        assert error_of({"exc_info": exc_info}) is exc_info[1]

    def test_log_record_exc_info(self, make_record):
        """Should read exc_info from a stdlib record."""
        error = RuntimeError("bad")
        record = make_record(exc_info=(RuntimeError, error, None))

        assert error_of(fields_of(record)) is error

    def test_no_error(self, make_record):
        """Should return None for records without an error."""
        assert error_of(fields_of(make_record())) is None
        assert error_of({"exc_info": None}) is None

    def test_logging_module_record_keys(self):
        """Should work with records created by logging.makeLogRecord."""
        record = logging.makeLogRecord({"msg": "x", "error": "oops"})

        assert error_of(fields_of(record)) == "oops"
