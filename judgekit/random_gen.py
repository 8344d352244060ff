"""Seeded random numbers, weighted choices and generation from simple patterns."""

from __future__ import annotations

import hashlib
import random
import re
from dataclasses import dataclass
from typing import MutableSequence, Sequence, Union

__all__ = ["Pattern", "Random"]

_WEIGHT_LOOP_LIMIT = 25


@dataclass(frozen=True)
class _Chars:
    chars: tuple[str, ...]

    def regex(self) -> str:
        unique = sorted(set(self.chars))
        if len(unique) == 1:
            return re.escape(unique[0])
        return "[" + "".join(re.escape(c) for c in unique) + "]"

    def emit(self, rng: Random, out: list[str]) -> None:
        out.append(self.chars[rng.below(len(self.chars))])


@dataclass(frozen=True)
class _Seq:
    items: tuple[_Node, ...]

    def regex(self) -> str:
        return "".join(item.regex() for item in self.items)

    def emit(self, rng: Random, out: list[str]) -> None:
        for item in self.items:
            item.emit(rng, out)


@dataclass(frozen=True)
class _Alt:
    options: tuple[_Node, ...]

    def regex(self) -> str:
        return "(?:" + "|".join(option.regex() for option in self.options) + ")"

    def emit(self, rng: Random, out: list[str]) -> None:
        self.options[rng.below(len(self.options))].emit(rng, out)


@dataclass(frozen=True)
class _Repeat:
    node: _Node
    low: int
    high: int | None

    def regex(self) -> str:
        upper = "" if self.high is None else str(self.high)
        return f"(?:{self.node.regex()}){{{self.low},{upper}}}"

    def emit(self, rng: Random, out: list[str]) -> None:
        if self.high is None:
            raise ValueError("cannot generate from an unbounded repetition")
        for _ in range(rng.randint(self.low, self.high)):
            self.node.emit(rng, out)


_Node = Union[_Chars, _Seq, _Alt, _Repeat]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _error(self, message: str) -> ValueError:
        return ValueError(f"invalid pattern {self.text!r} at {self.pos}: {message}")

    def _peek(self) -> str | None:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def parse(self) -> _Node:
        node = self._alternation()
        if self.pos < len(self.text):
            raise self._error("unexpected ')'")
        return node

    def _alternation(self) -> _Node:
        options = [self._sequence()]
        while self._peek() == "|":
            self.pos += 1
            options.append(self._sequence())
        return options[0] if len(options) == 1 else _Alt(tuple(options))

    def _sequence(self) -> _Node:
        items: list[_Node] = []
        while (c := self._peek()) is not None and c not in "|)":
            items.append(self._quantified(self._atom()))
        return _Seq(tuple(items))

    def _atom(self) -> _Node:
        c = self.text[self.pos]
        if c == "(":
            self.pos += 1
            inner = self._alternation()
            if self._peek() != ")":
                raise self._error("missing ')'")
            self.pos += 1
            return inner
        if c == "[":
            return self._char_set()
        if c in "{}*+?]":
            raise self._error(f"unexpected {c!r}")
        return _Chars((self._plain_char(),))

    def _plain_char(self) -> str:
        c = self.text[self.pos]
        if c == "\\":
            self.pos += 1
            if self.pos >= len(self.text):
                raise self._error("dangling escape")
            c = self.text[self.pos]
        self.pos += 1
        return c

    def _char_set(self) -> _Node:
        self.pos += 1
        chars: list[str] = []
        while True:
            c = self._peek()
            if c is None:
                raise self._error("unterminated character set")
            if c == "]":
                self.pos += 1
                break
            start = self._plain_char()
            if (
                self._peek() == "-"
                and self.pos + 1 < len(self.text)
                and self.text[self.pos + 1] != "]"
            ):
                self.pos += 1
                end = self._plain_char()
                if ord(end) < ord(start):
                    raise self._error(f"bad range {start}-{end}")
                chars.extend(chr(code) for code in range(ord(start), ord(end) + 1))
            else:
                chars.append(start)
        if not chars:
            raise self._error("empty character set")
        return _Chars(tuple(chars))

    def _quantified(self, atom: _Node) -> _Node:
        c = self._peek()
        if c == "*":
            self.pos += 1
            return _Repeat(atom, 0, None)
        if c == "+":
            self.pos += 1
            return _Repeat(atom, 1, None)
        if c == "?":
            self.pos += 1
            return _Repeat(atom, 0, 1)
        if c == "{":
            close = self.text.find("}", self.pos)
            if close < 0:
                raise self._error("missing '}'")
            body = self.text[self.pos + 1:close]
            bounds = body.split(",")
            if len(bounds) > 2 or not all(b.isdigit() for b in bounds):
                raise self._error(f"bad repetition {{{body}}}")
            low = int(bounds[0])
            high = int(bounds[-1])
            if low > high:
                raise self._error(f"bad repetition {{{body}}}")
            self.pos = close + 1
            return _Repeat(atom, low, high)
        return atom


class Pattern:
    """A small regular pattern that can both match and generate strings."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._node = _Parser(text).parse()
        self._regex = re.compile(self._node.regex(), re.DOTALL)

    def matches(self, text: str) -> bool:
        """Whether the whole of text matches the pattern."""
        return self._regex.fullmatch(text) is not None

    def generate(self, rng: Random) -> str:
        """Produce a random string matching the pattern."""
        out: list[str] = []
        self._node.emit(rng, out)
        return "".join(out)

    def __repr__(self) -> str:
        return f"Pattern({self.text!r})"


class Random:
    """A deterministic random source with inclusive ranges and weighted draws."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(seed)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Random:
        """Seed from command-line arguments, so equal arguments give equal output."""
        digest = hashlib.sha256("\x00".join(args).encode("utf-8")).digest()
        return cls(int.from_bytes(digest[:8], "big"))

    def randint(self, low: int, high: int) -> int:
        """A uniform integer in [low, high]."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def below(self, n: int) -> int:
        """A uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self._rng.randrange(n)

    def wnext(self, low: int, high: int, weight: int) -> int:
        """An integer in [low, high] skewed high for positive weight, low for negative.

        The result is distributed like the maximum (or minimum) of |weight| + 1
        uniform draws.
        """
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        if weight == 0:
            return self.randint(low, high)
        draws = abs(weight) + 1
        if abs(weight) < _WEIGHT_LOOP_LIMIT:
            values = [self.randint(low, high) for _ in range(draws)]
            return max(values) if weight > 0 else min(values)
        p = self._rng.random() ** (1.0 / draws)
        if weight < 0:
            p = 1.0 - p
        size = high - low + 1
        return low + min(int(p * size), size - 1)

    def wnext_below(self, n: int, weight: int) -> int:
        """A weighted integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return self.wnext(0, n - 1, weight)

    def pattern(self, text: str) -> str:
        """A random string matching the given pattern."""
        return Pattern(text).generate(self)

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle items in place."""
        self._rng.shuffle(items)