# file_io.py - line reading and output writing for tweet files

import os
from typing import Iterable, Iterator, Optional

from markov_tweeter.core.errors import InvalidArgument
from markov_tweeter.utils.logger_utils import get_log


def iter_file_lines(path: Optional[str]) -> Iterator[str]:
    """
    Yield the lines of `path` one at a time, without trailing newlines.
    The path is checked eagerly so a missing file fails at the call site;
    the file is opened on the first read and closed after the last line,
    or when the returned generator is closed. Callers that may stop early
    should close it (e.g. with contextlib.closing).
    """
    if path is None:
        raise InvalidArgument("path cannot be None")
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    return _lines(path)


def _lines(path: str) -> Iterator[str]:
    with open(path, "r", encoding="utf-8", newline="") as fh:
        for line in fh:
            yield line.rstrip("\r\n")


def write_strings_to_file(strings: Iterable[str], path: str, append: bool = False) -> None:
    """
    Write each string on its own line.
    append=True keeps the previous contents, otherwise the file is overwritten.
    """
    mode = "a" if append else "w"
    parent = os.path.dirname(path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, mode, encoding="utf-8") as fh:
            n = 0
            for s in strings:
                fh.write(s + "\n")
                n += 1
    except OSError as e:
        get_log().error(f"Write to {path} failed: {e}")
        raise
    get_log().info(f"Wrote {n} lines to {path} ({'append' if append else 'overwrite'})")
