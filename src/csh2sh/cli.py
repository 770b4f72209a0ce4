"""
Command-line interface for csh2sh.

    csh2sh convert deploy.csh              # writes deploy.sh
    csh2sh convert ./src --to encoding     # re-encodes a directory tree
    csh2sh analyze deploy.csh --format json
    csh2sh encode ./project windows-1252 utf-8 --ext .java,.js --no-backup
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from csh2sh.analyzer import analyze_file
from csh2sh.blocks import FunctionBlockTracker
from csh2sh.config import load_config
from csh2sh.encoding import DEFAULT_EXTENSIONS, convert_directory
from csh2sh.errors import ConversionError, InvalidInputError
from csh2sh.registry import get_converter
from csh2sh.serialization import report_to_json, report_to_yaml, translations_to_yaml
from csh2sh.text import split_lines
from csh2sh.transpiler import ScriptTranspiler

cli = typer.Typer(
    name="csh2sh",
    help="Convert C shell scripts to Bash, and re-encode source trees",
    no_args_is_help=True,
)


@cli.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@cli.command("convert")
def convert_cmd(
    input_path: Path = typer.Argument(..., help="File (or directory) to convert"),
    to: str = typer.Option("sh", "--to", "-t", help="Target kind (sh, encoding)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML transpiler configuration"),
):
    """Convert one input through the converter registered for its extension."""
    if config is not None and to.lower() != "sh":
        _fail(InvalidInputError(f"--config only applies to --to sh, not {to}"))
    try:
        if config is not None:
            converter = ScriptTranspiler(load_config(str(config)))
        else:
            converter = get_converter(input_path, to)
        output = converter.convert(input_path)
    except ConversionError as e:
        _fail(e)
    typer.echo(f"Converted: {output.absolute()}")


@cli.command("analyze")
def analyze_cmd(
    input_path: Path = typer.Argument(..., help="C shell script to analyze"),
    fmt: str = typer.Option("yaml", "--format", "-f", help="Report format (yaml, json)"),
    trace: bool = typer.Option(False, "--trace", help="Print the per-line translation trace instead"),
):
    """Print an inventory report (or a translation trace) for a script."""
    try:
        if trace:
            text = input_path.read_text(encoding="utf-8")
            translations = ScriptTranspiler().translate(split_lines(text), FunctionBlockTracker())
            typer.echo(translations_to_yaml(translations), nl=False)
            return
        report = analyze_file(str(input_path))
    except (FileNotFoundError, ConversionError) as e:
        _fail(e)

    if fmt == "json":
        typer.echo(report_to_json(report))
    elif fmt == "yaml":
        typer.echo(report_to_yaml(report), nl=False)
    else:
        _fail(InvalidInputError(f"Unknown report format: {fmt}"))


@cli.command("encode")
def encode_cmd(
    root: Path = typer.Argument(..., help="Directory to process recursively"),
    source_encoding: str = typer.Argument(..., help="Current encoding, e.g. windows-1252"),
    target_encoding: str = typer.Argument(..., help="Encoding to write, e.g. utf-8"),
    ext: Optional[str] = typer.Option(None, "--ext", help="Comma-separated extensions, e.g. .java,.js"),
    backup: bool = typer.Option(True, "--backup/--no-backup", help="Keep a .bak copy of each file"),
    silent: bool = typer.Option(False, "--silent", help="Do not report each converted file"),
):
    """Re-encode every matching file under a directory."""
    extensions = ext.split(",") if ext else DEFAULT_EXTENSIONS
    try:
        convert_directory(root, source_encoding, target_encoding, extensions, backup=backup, silent=silent)
    except ConversionError as e:
        _fail(e)
    if not silent:
        typer.echo("Conversion finished.")


def main_entry() -> None:
    cli()


if __name__ == "__main__":
    main_entry()
