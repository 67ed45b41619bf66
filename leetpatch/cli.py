import json
from pathlib import Path

import typer

from leetpatch.decoder import decode
from leetpatch.dialects import PatchDialect, get_dialect
from leetpatch.encoder import encode
from leetpatch.errors import PatchParseError
from leetpatch.logging import LOG_LEVEL_ENV, get_logger, setup_logging
from leetpatch.models import PatchFile

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True)


def _resolve_dialect(name: str | None, option: str = "--dialect") -> PatchDialect | None:
    if name is None:
        return None
    try:
        return get_dialect(name)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint=option)


def _load(path: Path, dialect: PatchDialect | None) -> PatchFile:
    if not path.is_file():
        raise typer.BadParameter(f"Patch file not found: {path}", param_hint="PATH")

    logger.info("Decoding %s", path)
    try:
        with path.open("rb") as f:
            patch_file = decode(f, dialect)
    except PatchParseError as exc:
        logger.error("Failed to decode %s: %s", path, exc)
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=1)

    logger.debug(
        "Decoded %d patch records for %s from %s",
        len(patch_file.patches),
        patch_file.target_filename,
        path,
    )
    return patch_file


@app.command("show")
def show_cmd(
    path: Path,
    dialect: str | None = typer.Option(None, "--dialect", help="standard or x64dbg (default: detect)"),
    as_json: bool = typer.Option(False, "--json", help="Print the decoded file as JSON"),
):
    patch_file = _load(path, _resolve_dialect(dialect))

    if as_json:
        typer.echo(json.dumps(patch_file.model_dump(mode="json"), indent=2))
        return

    typer.echo(f"Target: {patch_file.target_filename}")
    typer.echo(f"Patches: {len(patch_file.patches)}")
    for patch in patch_file.patches:
        typer.echo(f"  {patch}")


@app.command("check")
def check_cmd(
    path: Path,
    dialect: str | None = typer.Option(None, "--dialect", help="standard or x64dbg (default: detect)"),
):
    patch_file = _load(path, _resolve_dialect(dialect))
    typer.echo(f"OK: {len(patch_file.patches)} patches for {patch_file.target_filename}")


@app.command("convert")
def convert_cmd(
    path: Path,
    to: str = typer.Option(..., "--to", help="Dialect to write: standard or x64dbg"),
    dialect: str | None = typer.Option(None, "--dialect", help="Input dialect (default: detect)"),
):
    target = _resolve_dialect(to, "--to")
    patch_file = _load(path, _resolve_dialect(dialect))
    try:
        typer.echo(encode(patch_file, target), nl=False)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--to")


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar=LOG_LEVEL_ENV,
        help="Logging level (defaults to $LEETPATCH_LOG_LEVEL or WARNING)",
    ),
):
    """
    Inspect 1337 patch files
    """
    try:
        setup_logging(level=log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level")
