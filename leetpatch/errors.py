from enum import StrEnum
from typing import Any


class ParseErrorKind(StrEnum):
    MISSING_OR_MALFORMED_HEADER = "missing_or_malformed_header"
    INVALID_ADDRESS = "invalid_address"
    INVALID_HEX_VALUE = "invalid_hex_value"
    MALFORMED_PATCH_LINE = "malformed_patch_line"
    STREAM_READ_FAILURE = "stream_read_failure"


class PatchParseError(Exception):
    """Base class for every failure raised while decoding a patch file."""

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        line_number: int,
        token: str,
        field: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.line_number = line_number
        self.token = token
        self.field = field
        self.details = details or {}

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "message": self.message,
            "line_number": self.line_number,
            "token": self.token,
            "field": self.field,
            "details": self.details,
        }


class MissingOrMalformedHeaderError(PatchParseError):
    def __init__(
        self,
        message: str,
        line_number: int,
        token: str,
    ):
        super().__init__(
            ParseErrorKind.MISSING_OR_MALFORMED_HEADER,
            message,
            line_number,
            token,
        )


class InvalidAddressError(PatchParseError):
    def __init__(
        self,
        line_number: int,
        token: str,
    ):
        super().__init__(
            ParseErrorKind.INVALID_ADDRESS,
            f"invalid address {token!r}: expected base-16 digits",
            line_number,
            token,
        )


class InvalidHexValueError(PatchParseError):
    """Raised when an old/new value is empty, has odd length or non-hex characters."""

    def __init__(
        self,
        line_number: int,
        field: str,
        token: str,
    ):
        super().__init__(
            ParseErrorKind.INVALID_HEX_VALUE,
            f"invalid {field} value {token!r}: expected an even number of hex digits",
            line_number,
            token,
            field=field,
        )


class MalformedPatchLineError(PatchParseError):
    def __init__(
        self,
        message: str,
        line_number: int,
        token: str,
    ):
        super().__init__(
            ParseErrorKind.MALFORMED_PATCH_LINE,
            message,
            line_number,
            token,
        )


class StreamReadError(PatchParseError):
    """
    The input source failed while being consumed.

    The underlying exception is kept in `cause` and chained as `__cause__`
    by the decoder.
    """

    def __init__(
        self,
        line_number: int,
        cause: Exception,
    ):
        super().__init__(
            ParseErrorKind.STREAM_READ_FAILURE,
            f"failed to read input: {cause}",
            line_number,
            "",
            details={
                "cause_type": type(cause).__name__,
            },
        )
        self.cause = cause
