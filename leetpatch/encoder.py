import logging

from leetpatch.dialects import STANDARD, PatchDialect
from leetpatch.models import PatchFile, PatchRecord

logger = logging.getLogger(__name__)


def format_header(target_filename: str, dialect: PatchDialect = STANDARD) -> str:
    if "\n" in target_filename or "\r" in target_filename:
        raise ValueError(f"Filename cannot span lines: {target_filename!r}")
    if dialect.strip_filename and target_filename != target_filename.strip():
        raise ValueError(
            f"{dialect.name} headers cannot carry surrounding whitespace: {target_filename!r}"
        )
    return dialect.header_template.format(filename=target_filename)


def format_record(record: PatchRecord, dialect: PatchDialect = STANDARD) -> str:
    address = f"{record.target_address:X}".zfill(dialect.address_digits)
    return (
        f"{address}{dialect.address_separator}"
        f"{record.old.hex().upper()}{dialect.value_separator}"
        f"{record.new.hex().upper()}"
    )


def encode(patch_file: PatchFile, dialect: PatchDialect = STANDARD) -> str:
    lines = [format_header(patch_file.target_filename, dialect)]
    lines.extend(format_record(patch, dialect) for patch in patch_file.patches)
    logger.debug(
        "Encoded %d patch records as %s", len(patch_file.patches), dialect.name
    )
    return "\n".join(lines) + "\n"
