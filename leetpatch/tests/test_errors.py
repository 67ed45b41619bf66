"""Unit tests for parse error types."""

import pytest

from leetpatch.errors import (
    InvalidAddressError,
    InvalidHexValueError,
    MalformedPatchLineError,
    MissingOrMalformedHeaderError,
    ParseErrorKind,
    PatchParseError,
    StreamReadError,
)


class TestParseErrorKind:
    def test_kind_values(self):
        assert {kind.value for kind in ParseErrorKind} == {
            "missing_or_malformed_header",
            "invalid_address",
            "invalid_hex_value",
            "malformed_patch_line",
            "stream_read_failure",
        }


class TestPatchParseErrors:
    """Tests for the PatchParseError hierarchy."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (MissingOrMalformedHeaderError("bad header", 1, "x"), ParseErrorKind.MISSING_OR_MALFORMED_HEADER),
            (InvalidAddressError(2, "ZZ"), ParseErrorKind.INVALID_ADDRESS),
            (InvalidHexValueError(2, "old", "F"), ParseErrorKind.INVALID_HEX_VALUE),
            (MalformedPatchLineError("no colon", 2, "x"), ParseErrorKind.MALFORMED_PATCH_LINE),
            (StreamReadError(4, OSError("boom")), ParseErrorKind.STREAM_READ_FAILURE),
        ],
    )
    def test_subclasses_carry_kind(self, error: PatchParseError, kind: ParseErrorKind):
        """Every subclass is a PatchParseError with its own kind."""
        assert isinstance(error, PatchParseError)
        assert error.kind == kind

    def test_message_includes_line_number(self):
        error = InvalidAddressError(12, "ZZ")

        assert str(error).startswith("line 12: ")
        assert "'ZZ'" in str(error)

    def test_hex_value_error_names_field(self):
        error = InvalidHexValueError(3, "new", "ABC")

        assert error.field == "new"
        assert error.token == "ABC"
        assert "new value" in str(error)

    def test_stream_read_error_keeps_cause(self):
        cause = OSError("device went away")

        error = StreamReadError(5, cause)

        assert error.cause is cause
        assert error.token == ""
        assert error.details == {"cause_type": "OSError"}
        assert "device went away" in str(error)

    def test_to_dict(self):
        error = InvalidHexValueError(3, "old", "F")

        assert error.to_dict() == {
            "kind": "invalid_hex_value",
            "message": error.message,
            "line_number": 3,
            "token": "F",
            "field": "old",
            "details": {},
        }

    def test_can_be_raised_and_caught_as_base(self):
        with pytest.raises(PatchParseError):
            raise MalformedPatchLineError("missing ':'", 2, "hello")
