from leetpatch.decoder import (
    DecoderState,
    decode,
    decode_bytes,
    decode_text,
    parse_address,
    parse_header,
    parse_hex_bytes,
    parse_patch_line,
)
from leetpatch.dialects import (
    BUILTIN_DIALECTS,
    STANDARD,
    X64DBG,
    PatchDialect,
    detect_dialect,
    get_dialect,
)
from leetpatch.encoder import encode, format_header, format_record
from leetpatch.errors import (
    InvalidAddressError,
    InvalidHexValueError,
    MalformedPatchLineError,
    MissingOrMalformedHeaderError,
    ParseErrorKind,
    PatchParseError,
    StreamReadError,
)
from leetpatch.models import PatchFile, PatchRecord

__all__ = [
    "DecoderState",
    "decode",
    "decode_bytes",
    "decode_text",
    "parse_address",
    "parse_header",
    "parse_hex_bytes",
    "parse_patch_line",
    "BUILTIN_DIALECTS",
    "STANDARD",
    "X64DBG",
    "PatchDialect",
    "detect_dialect",
    "get_dialect",
    "encode",
    "format_header",
    "format_record",
    "InvalidAddressError",
    "InvalidHexValueError",
    "MalformedPatchLineError",
    "MissingOrMalformedHeaderError",
    "ParseErrorKind",
    "PatchParseError",
    "StreamReadError",
    "PatchFile",
    "PatchRecord",
]
