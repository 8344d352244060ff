"""Reading tokens, lines and numbers from checked streams."""

from __future__ import annotations

import math
import os
import re
from enum import Enum

from judgekit.verdict import Verdict
from judgekit.verdict import quit as _quit

__all__ = ["StreamRole", "InputStream", "english_ending", "compress"]

_BLANKS = " \t\n\r"
_INTEGER = re.compile(r"0|-?[1-9][0-9]*")
_DOUBLE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)


class StreamRole(Enum):
    """Which file a stream holds: the test input, the participant output or the answer."""

    INPUT = "input"
    OUTPUT = "output"
    ANSWER = "answer"

    @property
    def failure(self) -> Verdict:
        """Verdict used when this stream is malformed."""
        return Verdict.PE if self is StreamRole.OUTPUT else Verdict.FAIL


def english_ending(n: int) -> str:
    """Ordinal suffix for n: st, nd, rd or th."""
    if (n // 10) % 10 == 1:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def compress(text: str) -> str:
    """Shorten long text for messages, keeping its start and end."""
    if len(text) <= 64:
        return text
    return text[:30] + "..." + text[-31:]


class InputStream:
    """A cursor over the whole text of one stream."""

    def __init__(self, text: str, role: StreamRole) -> None:
        self.text = text
        self.role = role
        self._pos = 0

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], role: StreamRole) -> InputStream:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            return cls(handle.read(), role)

    def _fail(self, message: str) -> None:
        _quit(self.role.failure, message)

    def _skip_blanks(self) -> None:
        while self._pos < len(self.text) and self.text[self._pos] in _BLANKS:
            self._pos += 1

    def seek_eof(self) -> bool:
        """Skip blanks and report whether nothing else is left."""
        self._skip_blanks()
        return self.eof()

    def eof(self) -> bool:
        """Report whether the cursor is at the very end of the stream."""
        return self._pos >= len(self.text)

    def read_token(self) -> str:
        """Skip blanks and read the next run of non-blank characters."""
        self._skip_blanks()
        if self.eof():
            self._fail("Unexpected end of file - token expected")
        start = self._pos
        while self._pos < len(self.text) and self.text[self._pos] not in _BLANKS:
            self._pos += 1
        return self.text[start:self._pos]

    def read_word(self) -> str:
        """Read the next whitespace-separated word."""
        return self.read_token()

    def read_line(self) -> str:
        """Read up to the end of the current line, dropping carriage returns."""
        if self.eof():
            self._fail("Unexpected end of file - line expected")
        end = self.text.find("\n", self._pos)
        if end < 0:
            line = self.text[self._pos:]
            self._pos = len(self.text)
        else:
            line = self.text[self._pos:end]
            self._pos = end + 1
        return line.replace("\r", "")

    def _to_int(self, token: str, bounds: tuple[int, int]) -> int:
        if not _INTEGER.fullmatch(token):
            self._fail(f'Expected integer, but "{compress(token)}" found')
        value = int(token)
        low, high = bounds
        if not low <= value <= high:
            self._fail(f"Integer {compress(token)} violates the range [{low}, {high}]")
        return value

    def read_int(self) -> int:
        """Read a signed 32-bit integer."""
        return self._to_int(self.read_token(), _INT32)

    def read_long(self) -> int:
        """Read a signed 64-bit integer."""
        return self._to_int(self.read_token(), _INT64)

    def parse_long(self, token: str) -> int:
        """Interpret an already read token as a signed 64-bit integer."""
        return self._to_int(token, _INT64)

    def read_double(self) -> float:
        """Read a finite floating-point number."""
        token = self.read_token()
        if not _DOUBLE.fullmatch(token):
            self._fail(f'Expected double, but "{compress(token)}" found')
        value = float(token)
        if not math.isfinite(value):
            self._fail(f'Expected double, but "{compress(token)}" found')
        return value