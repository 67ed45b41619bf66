import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatchDialect(BaseModel):
    """
    Grammar settings for one flavour of the 1337 patch format.

    - `header_pattern` is matched against the stripped header line and must
      define a `filename` group
    - `header_template` renders a header from `{filename}`
    - `address_digits` is the zero-padded width the encoder uses (0 = minimal)
    - `strip_filename` drops blanks around an unquoted filename
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str
    header_pattern: str
    header_template: str
    address_separator: str = Field(min_length=1)
    value_separator: str = Field(min_length=1)
    address_digits: int = Field(default=0, ge=0)
    strip_filename: bool = False

    @field_validator("header_pattern")
    @classmethod
    def check_header_pattern(cls, v: str) -> str:
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"header_pattern does not compile: {e}") from e
        if "filename" not in compiled.groupindex:
            raise ValueError("header_pattern must define a (?P<filename>...) group")
        return v

    def match_header(self, line: str) -> str | None:
        match = re.fullmatch(self.header_pattern, line)
        if match is None:
            return None
        filename = match.group("filename")
        if self.strip_filename:
            filename = filename.strip()
        return filename or None


STANDARD = PatchDialect(
    name="standard",
    header_pattern=r'1337 patch for file\s+"(?P<filename>.*)"',
    header_template='1337 patch for file "{filename}"',
    address_separator=":",
    value_separator=",",
)

# Export format of x64dbg's "Patch file" dialog.
X64DBG = PatchDialect(
    name="x64dbg",
    header_pattern=r">(?P<filename>.*)",
    header_template=">{filename}",
    address_separator=":",
    value_separator="->",
    address_digits=16,
    strip_filename=True,
)

BUILTIN_DIALECTS: tuple[PatchDialect, ...] = (STANDARD, X64DBG)


def get_dialect(name: str) -> PatchDialect:
    for dialect in BUILTIN_DIALECTS:
        if dialect.name == name.lower():
            return dialect
    known = ", ".join(d.name for d in BUILTIN_DIALECTS)
    raise KeyError(f"Unknown dialect: {name} (known: {known})")


def detect_dialect(header_line: str) -> PatchDialect | None:
    line = header_line.strip()
    for dialect in BUILTIN_DIALECTS:
        if dialect.match_header(line) is not None:
            return dialect
    return None
