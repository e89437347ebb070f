"""Reading text streams, files and console input."""

from __future__ import annotations

import os
import re
import sys
from typing import TextIO

from utilbox.config import DEFAULT_ENCODING

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def read_all_as_string(reader: TextIO) -> str:
    """
    Read everything remaining in an open text stream.

    The stream is not closed; the caller owns it. Read errors propagate.
    """
    return reader.read()


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def read_all_as_lines(reader: TextIO) -> list[str]:
    """
    Read every remaining line, without its terminator. The stream is not closed.

    Lines end at LF, CRLF or a lone CR, whatever newline translation the stream
    itself does or does not apply.
    """
    text = reader.read()
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_file_as_string(path: str | os.PathLike[str], encoding: str = DEFAULT_ENCODING) -> str:
    """Read a whole text file. Line endings are returned untranslated."""
    with open(path, encoding=encoding, newline="") as f:
        return read_all_as_string(f)


def get_user_input(prompt: str | None) -> str | None:
    """
    Write prompt to stdout, then read one line from stdin.

    Returns the line without its terminator, or None at end of input. stdin is
    closed afterwards, so any later console read in this process will fail.
    """
    if prompt:
        sys.stdout.write(prompt)
        sys.stdout.flush()
    reader = sys.stdin
    try:
        line = reader.readline()
    finally:
        reader.close()
    if not line:
        return None
    return _strip_terminator(line)
