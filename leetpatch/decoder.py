import io
import re
from collections.abc import Iterable, Iterator
from enum import StrEnum
from typing import IO

from leetpatch.dialects import BUILTIN_DIALECTS, STANDARD, PatchDialect, detect_dialect
from leetpatch.errors import (
    InvalidAddressError,
    InvalidHexValueError,
    MalformedPatchLineError,
    MissingOrMalformedHeaderError,
    StreamReadError,
)
from leetpatch.models import PatchFile, PatchRecord

HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
HEX_BYTES_RE = re.compile(r"(?:[0-9A-Fa-f]{2})+")

PatchSource = IO[bytes] | IO[str] | Iterable[bytes] | Iterable[str] | bytes | str


class DecoderState(StrEnum):
    EXPECT_HEADER = "EXPECT_HEADER"
    EXPECT_PATCH_OR_END = "EXPECT_PATCH_OR_END"


def _read_lines(source: PatchSource) -> Iterator[tuple[int, str]]:
    """
    Yield `(line_number, line)` pairs from `source` in a single forward pass.

    - `bytes`/`str` documents are wrapped in an in-memory stream
    - byte lines are decoded as UTF-8
    - the trailing `\\n` and one `\\r` are removed
    - read failures are re-raised as `StreamReadError`
    """

    if isinstance(source, bytes):
        source = io.BytesIO(source)
    elif isinstance(source, str):
        source = io.StringIO(source)

    lines = iter(source)
    line_number = 0
    while True:
        try:
            raw = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(line_number + 1, e) from e
        line_number += 1

        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise StreamReadError(line_number, e) from e

        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        if line_number == 1:
            raw = raw.removeprefix("\ufeff")

        yield line_number, raw


def parse_header(
    line: str,
    line_number: int,
    dialect: PatchDialect | None = None,
) -> tuple[PatchDialect, str]:
    """
    Parse the header line and return the dialect it belongs to together
    with the target filename.

    When `dialect` is given only its header form is accepted; otherwise the
    dialect is picked by `detect_dialect`.
    """

    stripped = line.strip()
    if dialect is None:
        candidates = BUILTIN_DIALECTS
        dialect = detect_dialect(stripped)
    else:
        candidates = (dialect,)

    if dialect is not None:
        filename = dialect.match_header(stripped)
        if filename is not None:
            return dialect, filename

    expected = " or ".join(
        repr(c.header_template.format(filename="<filename>")) for c in candidates
    )
    raise MissingOrMalformedHeaderError(
        f"malformed header {stripped!r}: expected {expected}",
        line_number,
        line,
    )


def parse_address(token: str, line_number: int) -> int:
    if not HEX_DIGITS_RE.fullmatch(token):
        raise InvalidAddressError(line_number, token)
    return int(token, 16)


def parse_hex_bytes(token: str, line_number: int, field: str) -> bytes:
    if not HEX_BYTES_RE.fullmatch(token):
        raise InvalidHexValueError(line_number, field, token)
    return bytes.fromhex(token)


def parse_patch_line(
    line: str,
    line_number: int,
    dialect: PatchDialect = STANDARD,
) -> PatchRecord:
    text = line.strip()

    address_token, sep, values = text.partition(dialect.address_separator)
    if not sep:
        raise MalformedPatchLineError(
            f"missing {dialect.address_separator!r} after address in {text!r}",
            line_number,
            line,
        )

    old_token, sep, new_token = values.partition(dialect.value_separator)
    if not sep:
        raise MalformedPatchLineError(
            f"missing {dialect.value_separator!r} between old and new values in {text!r}",
            line_number,
            line,
        )

    return PatchRecord(
        target_address=parse_address(address_token.strip(), line_number),
        old=parse_hex_bytes(old_token.strip(), line_number, "old"),
        new=parse_hex_bytes(new_token.strip(), line_number, "new"),
    )


def decode(source: PatchSource, dialect: PatchDialect | None = None) -> PatchFile:
    """
    Decode a 1337 patch file.

    The first non-blank line is the header, every later non-blank line is
    one patch record. Raises a `PatchParseError` subclass on the first
    malformed construct; nothing is skipped or recovered.
    """

    state = DecoderState.EXPECT_HEADER
    target_filename = ""
    patches: list[PatchRecord] = []
    lines_read = 0

    for line_number, line in _read_lines(source):
        lines_read = line_number
        if not line.strip():
            continue

        if state is DecoderState.EXPECT_HEADER:
            dialect, target_filename = parse_header(line, line_number, dialect)
            state = DecoderState.EXPECT_PATCH_OR_END
            continue

        patches.append(parse_patch_line(line, line_number, dialect))

    if state is DecoderState.EXPECT_HEADER:
        raise MissingOrMalformedHeaderError(
            "missing header: input has no non-blank lines",
            lines_read + 1,
            "",
        )

    return PatchFile(target_filename=target_filename, patches=tuple(patches))


def decode_text(text: str, dialect: PatchDialect | None = None) -> PatchFile:
    return decode(io.StringIO(text), dialect)


def decode_bytes(data: bytes, dialect: PatchDialect | None = None) -> PatchFile:
    return decode(io.BytesIO(data), dialect)
