import io

import pytest

from ifscan.core.errors import InputReadError
from ifscan.source.lines import iter_lines


class _BrokenStream:
    def __init__(self, good: list[str]) -> None:
        self._good = list(good)

    def readline(self) -> str:
        if self._good:
            return self._good.pop(0)
        raise OSError("device went away")


def test_iter_lines_strips_line_endings() -> None:
    stream = io.StringIO("interface Gi0/1\r\n description uplink\n!\n")
    assert list(iter_lines(stream)) == ["interface Gi0/1", " description uplink", "!"]


def test_iter_lines_keeps_last_line_without_newline() -> None:
    stream = io.StringIO("a\nb")
    assert list(iter_lines(stream)) == ["a", "b"]


def test_iter_lines_wraps_read_errors() -> None:
    lines = iter_lines(_BrokenStream(["interface Gi0/1\n"]))
    assert next(lines) == "interface Gi0/1"
    with pytest.raises(InputReadError):
        next(lines)
