"""Checkers for outputs laid out as numbered "Case k:" blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from judgekit.scalar_checkers import Source, _run
from judgekit.tokens import InputStream, compress
from judgekit.verdict import Outcome, Verdict
from judgekit.verdict import quit as stop

__all__ = ["check_caseicmp", "check_casencmp", "check_casewcmp"]

_CASE = "Case"

T = TypeVar("T")


def _expect_case_word(stream: InputStream, test_case: int) -> None:
    word = stream.read_token()
    if word != _CASE:
        stop(
            stream.role.failure,
            f"Expected '{_CASE}' but found '{compress(word)}' [test case {test_case}]",
        )


def _expect_case_number(stream: InputStream, test_case: int) -> None:
    expected = f"{test_case}:"
    found = stream.read_token()
    if found != expected:
        stop(
            stream.role.failure,
            f"Expected '{compress(expected)}' but found '{compress(found)}' "
            f"[test case {test_case}]",
        )


def _read_single_values(stream: InputStream) -> list[int]:
    values: list[int] = []
    test_case = 1
    while not stream.seek_eof():
        _expect_case_word(stream, test_case)
        _expect_case_number(stream, test_case)
        values.append(stream.read_long())
        test_case += 1
    return values


def _single_values(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = _read_single_values(ans)
    pa = _read_single_values(ouf)

    for index, (j, p) in enumerate(zip(ja, pa), start=1):
        if j != p:
            stop(Verdict.WA, f"Expected {j} found {p} [test case {index}]")

    if len(ja) != len(pa):
        stop(Verdict.PE, f"Expected {len(ja)} test case(s) but found {len(pa)}")

    shown = ja if len(ja) <= 5 else [*ja[:3], "...", *ja[-2:]]
    message = f"{len(ja)} case(s):" + "".join(f" {value}" for value in shown)
    return Outcome(Verdict.OK, message)


@dataclass
class _CaseReader(Generic[T]):
    """Reads consecutive case blocks; a block ends where the next "Case" begins."""

    stream: InputStream
    convert: Callable[[InputStream, str], T]
    preread_case: bool = False

    def read_case(self, test_case: int) -> list[T]:
        if not self.preread_case:
            _expect_case_word(self.stream, test_case)
        _expect_case_number(self.stream, test_case)
        items: list[T] = []
        while not self.stream.seek_eof():
            item = self.stream.read_token()
            if item == _CASE:
                self.preread_case = True
                break
            items.append(self.convert(self.stream, item))
        return items


def _compare_cases(
    ans: InputStream,
    ouf: InputStream,
    convert: Callable[[InputStream, str], T],
    describe: Callable[[list[T]], str],
) -> Outcome:
    jury = _CaseReader(ans, convert)
    participant = _CaseReader(ouf, convert)
    test_case = 0
    while not ans.seek_eof():
        test_case += 1
        ja = jury.read_case(test_case)
        pa = participant.read_case(test_case)
        if ja != pa:
            stop(
                Verdict.WA,
                f"Sequences differ: jury has {describe(ja)}, but participant has "
                f"{describe(pa)} [test case {test_case}]",
            )
    return Outcome(Verdict.OK, f"{test_case} test cases(s)")


def _describe_longs(values: list[int]) -> str:
    if not values:
        return '"" [size=0]'
    shown = values if len(values) <= 5 else [*values[:3], "...", *values[-2:]]
    return f'"{" ".join(str(value) for value in shown)}" [size={len(values)}]'


def _describe_words(words: list[str]) -> str:
    if not words:
        return '"" [size=0]'
    return f'"{compress(" ".join(words).strip())}" [size={len(words)}]'


def _keep_word(_stream: InputStream, word: str) -> str:
    return word


def check_caseicmp(answer: Source, output: Source) -> Outcome:
    """Compare one signed 64-bit integer per "Case k:" line."""
    return _run(answer, output, _single_values)


def check_casencmp(answer: Source, output: Source) -> Outcome:
    """Compare sequences of signed 64-bit integers case by case."""
    return _run(
        answer,
        output,
        lambda ans, ouf: _compare_cases(ans, ouf, InputStream.parse_long, _describe_longs),
    )


def check_casewcmp(answer: Source, output: Source) -> Outcome:
    """Compare sequences of tokens case by case."""
    return _run(
        answer,
        output,
        lambda ans, ouf: _compare_cases(ans, ouf, _keep_word, _describe_words),
    )