"""Checkers that compare a single value from the answer with the output."""

from __future__ import annotations

import re
from typing import Callable, Union

from judgekit.numeric import double_compare
from judgekit.tokens import InputStream, StreamRole, compress
from judgekit.verdict import Outcome, Quit, Verdict, quit_points, quit_points_info
from judgekit.verdict import quit as stop

__all__ = [
    "check_acmp",
    "check_dcmp",
    "check_hcmp",
    "check_icmp",
    "check_rcmp",
    "check_yesno",
    "check_pointscmp",
    "check_pointsinfo",
]

Source = Union[str, InputStream]
Body = Callable[[InputStream, InputStream], Outcome]

_HUGE_INTEGER = re.compile(r"0|-?[1-9][0-9]*")
_ABSOLUTE_EPS = 1.5e-6
_RELATIVE_EPS = 1e-6
_YES = "YES"
_NO = "NO"
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def _as_stream(source: Source, role: StreamRole) -> InputStream:
    if isinstance(source, InputStream):
        return source
    return InputStream(source, role)


def _run(answer: Source, output: Source, body: Body) -> Outcome:
    """Run a check on texts or streams and always return an Outcome."""
    ans = _as_stream(answer, StreamRole.ANSWER)
    ouf = _as_stream(output, StreamRole.OUTPUT)
    try:
        return body(ans, ouf)
    except Quit as raised:
        return raised.outcome


def _upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def _absolute_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = ans.read_double()
    pa = ouf.read_double()
    if abs(ja - pa) > _ABSOLUTE_EPS + 1e-15:
        stop(Verdict.WA, f"expected {ja:.10f}, found {pa:.10f}")
    return Outcome(Verdict.OK, f"answer is {ja:.10f}")


def _relative_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = ans.read_double()
    pa = ouf.read_double()
    if not double_compare(ja, pa, _RELATIVE_EPS):
        stop(Verdict.WA, f"expected {ja:.10f}, found {pa:.10f}")
    return Outcome(Verdict.OK, f"answer is {ja:.10f}")


def _huge_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = ans.read_word()
    pa = ouf.read_word()
    if not _HUGE_INTEGER.fullmatch(ja):
        stop(Verdict.FAIL, f"{compress(ja)} is not a valid integer")
    if not ans.seek_eof():
        stop(Verdict.FAIL, "expected exactly one token in the answer file")
    if not _HUGE_INTEGER.fullmatch(pa):
        stop(Verdict.PE, f"{compress(pa)} is not a valid integer")
    if ja != pa:
        stop(Verdict.WA, f"expected '{compress(ja)}', found '{compress(pa)}'")
    return Outcome(Verdict.OK, f"answer is '{compress(ja)}'")


def _int_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = ans.read_int()
    pa = ouf.read_int()
    if ja != pa:
        stop(Verdict.WA, f"expected {ja}, found {pa}")
    return Outcome(Verdict.OK, f"answer is {ja}")


def _yesno_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = _upper(ans.read_word())
    pa = _upper(ouf.read_word())
    if ja not in (_YES, _NO):
        stop(Verdict.FAIL, f"{_YES} or {_NO} expected in answer, but {compress(ja)} found")
    if pa not in (_YES, _NO):
        stop(Verdict.PE, f"{_YES} or {_NO} expected, but {compress(pa)} found")
    if ja != pa:
        stop(Verdict.WA, f"expected {compress(ja)}, found {compress(pa)}")
    return Outcome(Verdict.OK, f"answer is {ja}")


def _points_check(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = ans.read_double()
    pa = ouf.read_double()
    quit_points(abs(ja - pa), f"ja={ja:.4f} pa={pa:.4f}")
    raise AssertionError("unreachable")


def _points_info_check(ans: InputStream, ouf: InputStream) -> Outcome:
    pa = ouf.read_double()
    ja = ans.read_double()
    quit_points_info(f"pa={pa:f},ja={ja:f}", f"d={abs(ja - pa):f}")
    raise AssertionError("unreachable")


def check_acmp(answer: Source, output: Source) -> Outcome:
    """Compare two doubles with maximal absolute error 1.5e-6."""
    return _run(answer, output, _absolute_check)


def check_rcmp(answer: Source, output: Source) -> Outcome:
    """Compare two doubles with maximal absolute error 1.5e-6."""
    return _run(answer, output, _absolute_check)


def check_dcmp(answer: Source, output: Source) -> Outcome:
    """Compare two doubles with maximal absolute or relative error 1e-6."""
    return _run(answer, output, _relative_check)


def check_hcmp(answer: Source, output: Source) -> Outcome:
    """Compare two signed integers of arbitrary length."""
    return _run(answer, output, _huge_check)


def check_icmp(answer: Source, output: Source) -> Outcome:
    """Compare two signed 32-bit integers."""
    return _run(answer, output, _int_check)


def check_yesno(answer: Source, output: Source) -> Outcome:
    """Compare a single YES or NO, case-insensitively."""
    return _run(answer, output, _yesno_check)


def check_pointscmp(answer: Source, output: Source) -> Outcome:
    """Award the absolute difference of two doubles as points."""
    return _run(answer, output, _points_check)


def check_pointsinfo(answer: Source, output: Source) -> Outcome:
    """Accept, reporting both doubles as points information."""
    return _run(answer, output, _points_info_check)