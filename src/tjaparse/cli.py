import json
import sys
from dataclasses import asdict
from enum import Enum
from pathlib import Path

import click
from loguru import logger

from .exceptions import DecodeError, ParseError
from .models import Chart
from .parser import parse
from .render import render_headers

# TJA files in the wild are UTF-8 (often with a BOM) or Shift_JIS.
DEFAULT_ENCODINGS = ("utf-8-sig", "cp932")

_LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


def _read_text(path: Path, encoding: str | None) -> str:
    """Decode *path* with *encoding*, or with the first default that fits."""
    data = path.read_bytes()
    encodings = (encoding,) if encoding else DEFAULT_ENCODINGS
    for candidate in encodings:
        try:
            return data.decode(candidate)
        except UnicodeDecodeError:
            logger.debug("{} is not valid {}", path, candidate)
    raise DecodeError(str(path), encodings)


def _jsonable(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _chart_summary(chart: Chart) -> dict:
    """Headers in full plus a per-course summary; block bodies are counted, not dumped."""
    return {
        "headers": _jsonable(asdict(chart.headers)),
        "courses": [
            {
                "kind": course.kind.value,
                "level": course.level,
                "balloon": course.balloon,
                "scoreinit": course.scoreinit,
                "scorediff": course.scorediff,
                "headers": _jsonable(asdict(course.headers)),
                "commands": [[c.name, c.value] for c in course.commands],
                "blocks": [
                    {
                        "start_line": block.start_line,
                        "end_line": block.end_line,
                        "player": block.player,
                        "lines": len(block.body),
                    }
                    for block in course.blocks
                ],
            }
            for course in chart.courses
        ],
    }


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    if verbose:
        logger.add(lambda msg: click.echo(msg, err=True, nl=False), level="DEBUG", format=_LOG_FORMAT)
        logger.enable("tjaparse")


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--format", "output_format", type=click.Choice(["json", "tja"]),
              default="json", show_default=True, envvar="TJAPARSE_FORMAT",
              help="Print headers as JSON or as TJA header lines.")
@click.option("--encoding", default=None, metavar="ENC", envvar="TJAPARSE_ENCODING",
              help="Text encoding of PATH (default: UTF-8, then Shift_JIS).")
@click.option("-v", "--verbose", is_flag=True, default=False, envvar="TJAPARSE_VERBOSE",
              help="Log each decoding step to stderr.")
def main(path: Path, output_format: str, encoding: str | None, verbose: bool) -> None:
    """Parse a TJA chart file and print its headers.

    \b
    Exit status:
      0  the chart parsed
      1  the file could not be decoded or the chart is malformed
    """
    _configure_logging(verbose)

    # --- Decode ---
    try:
        text = _read_text(path, encoding)
    except DecodeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except LookupError:
        click.echo(f"Error: Unknown encoding {encoding}", err=True)
        sys.exit(1)

    # --- Parse ---
    try:
        chart = parse(text)
    except ParseError as exc:
        # line numbers are zero-based internally
        click.echo(f"Error: {exc.kind.value} at line {exc.line + 1}, column {exc.column}", err=True)
        sys.exit(1)

    # --- Output ---
    if output_format == "tja":
        click.echo(render_headers(chart.headers), nl=False)
        return

    click.echo(json.dumps(_chart_summary(chart), ensure_ascii=False, indent=2))
