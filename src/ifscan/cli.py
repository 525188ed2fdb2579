from __future__ import annotations

import io
import logging
import sys

import typer

from ifscan.core.errors import InputReadError
from ifscan.core.logging import configure_logging
from ifscan.core.model import ParseContext
from ifscan.parser.scanner import scan
from ifscan.render.report_text import render_table, summary_lines
from ifscan.source.lines import iter_lines

# Undecodable bytes survive as surrogates on the way in and are restored on the way out.
INPUT_ENCODING = "utf-8"
INPUT_ERRORS = "surrogateescape"

logger = logging.getLogger("ifscan")

app = typer.Typer(add_completion=False)


def scan_stdin() -> ParseContext:
    logger.info("reading input from stdin")
    stream = io.TextIOWrapper(sys.stdin.buffer, encoding=INPUT_ENCODING, errors=INPUT_ERRORS)
    try:
        return scan(iter_lines(stream))
    finally:
        stream.detach()
        logger.info("reading input from stdin -- done")


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print one row per interface found in the configuration on stdin."""
    configure_logging(verbose)
    try:
        ctx = scan_stdin()
    except InputReadError as exc:
        logger.error("error: %s", exc)
        raise typer.Exit(code=1)

    for line in summary_lines(ctx):
        logger.info("scan: %s", line)
    for row in render_table(ctx.table.values()):
        typer.echo(row.encode(INPUT_ENCODING, INPUT_ERRORS))
    logger.info("end")


if __name__ == "__main__":
    app()
