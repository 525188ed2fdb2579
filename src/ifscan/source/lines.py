from __future__ import annotations

from typing import Iterator, TextIO

from ifscan.core.errors import InputReadError


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from ``stream`` with trailing CR/LF removed.

    Read failures other than end of stream are raised as InputReadError.
    """
    while True:
        try:
            raw = stream.readline()
        except OSError as exc:
            raise InputReadError(f"error reading lines: {exc}") from exc
        if raw == "":
            return
        yield raw.rstrip("\r\n")
