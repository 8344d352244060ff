"""Checkers that compare sequences of numbers, tokens or lines."""

from __future__ import annotations

from judgekit.numeric import double_compare, double_delta
from judgekit.scalar_checkers import Source, _run, _upper
from judgekit.tokens import InputStream, compress, english_ending
from judgekit.verdict import Outcome, Verdict
from judgekit.verdict import quit as stop

__all__ = [
    "check_ncmp",
    "check_uncmp",
    "check_wcmp",
    "check_rncmp",
    "check_rcmp4",
    "check_rcmp6",
    "check_rcmp9",
    "check_nyesno",
    "check_fcmp",
    "check_lcmp",
]

_YES = "YES"
_NO = "NO"


def _count_rest(stream: InputStream, read) -> int:
    count = 0
    while not stream.seek_eof():
        read()
        count += 1
    return count


def _check_lengths(ans: InputStream, ouf: InputStream, n: int, read_ans, read_ouf) -> None:
    extra_in_ans = _count_rest(ans, read_ans)
    extra_in_ouf = _count_rest(ouf, read_ouf)
    if extra_in_ans > 0:
        stop(
            Verdict.WA,
            f"Answer contains longer sequence [length = {n + extra_in_ans}], "
            f"but output contains {n} elements",
        )
    if extra_in_ouf > 0:
        stop(
            Verdict.WA,
            f"Output contains longer sequence [length = {n + extra_in_ouf}], "
            f"but answer contains {n} elements",
        )


def _ordered_longs(ans: InputStream, ouf: InputStream) -> Outcome:
    n = 0
    first: list[str] = []
    while not ans.seek_eof() and not ouf.seek_eof():
        n += 1
        j = ans.read_long()
        p = ouf.read_long()
        if j != p:
            stop(
                Verdict.WA,
                f"{n}{english_ending(n)} numbers differ - expected: '{j}', found: '{p}'",
            )
        if n <= 5:
            first.append(str(j))
    _check_lengths(ans, ouf, n, ans.read_long, ouf.read_long)
    if n <= 5:
        return Outcome(Verdict.OK, f'{n} number(s): "{compress(" ".join(first))}"')
    return Outcome(Verdict.OK, f"{n} numbers")


def _unordered_longs(ans: InputStream, ouf: InputStream) -> Outcome:
    ja = []
    while not ans.seek_eof():
        ja.append(ans.read_long())
    pa = []
    while not ouf.seek_eof():
        pa.append(ouf.read_long())
    if len(ja) != len(pa):
        stop(Verdict.WA, f"Expected {len(ja)} elements, but {len(pa)} found")
    ja.sort()
    pa.sort()
    if ja != pa:
        stop(
            Verdict.WA,
            "Expected sequence and output are different (as unordered sequences) "
            f"[size={len(ja)}]",
        )
    if not ja:
        message = "empty sequence"
    elif len(ja) == 1:
        message = "1 number:"
    else:
        message = f"{len(ja)} numbers (in increasing order):"
    shown = ja if len(ja) <= 5 else [*ja[:2], "...", *ja[-2:]]
    message += "".join(f" {value}" for value in shown)
    return Outcome(Verdict.OK, message)


def _words(ans: InputStream, ouf: InputStream) -> Outcome:
    n = 0
    j = ""
    while not ans.seek_eof() and not ouf.seek_eof():
        n += 1
        j = ans.read_word()
        p = ouf.read_word()
        if j != p:
            stop(
                Verdict.WA,
                f"{n}{english_ending(n)} words differ - expected: '{compress(j)}', "
                f"found: '{compress(p)}'",
            )
    if ans.seek_eof() and ouf.seek_eof():
        if n == 1:
            return Outcome(Verdict.OK, f'"{compress(j)}"')
        return Outcome(Verdict.OK, f"{n} tokens")
    if ans.seek_eof():
        stop(Verdict.WA, "Participant output contains extra tokens")
    stop(Verdict.WA, "Unexpected EOF in the participants output")
    raise AssertionError("unreachable")


def _absolute_sequence(ans: InputStream, ouf: InputStream) -> Outcome:
    eps = 1.5e-5
    n = 0
    while not ans.seek_eof():
        n += 1
        j = ans.read_double()
        p = ouf.read_double()
        if abs(j - p) > eps + 1e-15:
            stop(
                Verdict.WA,
                f"{n}{english_ending(n)} numbers differ - expected: '{j:.10f}', "
                f"found: '{p:.10f}'",
            )
    return Outcome(Verdict.OK, f"{n} numbers")


def _relative_sequence(ans: InputStream, ouf: InputStream, eps: float, digits: int) -> Outcome:
    n = 0
    j = p = 0.0
    while not ans.seek_eof():
        n += 1
        j = ans.read_double()
        p = ouf.read_double()
        if not double_compare(j, p, eps):
            stop(
                Verdict.WA,
                f"{n}{english_ending(n)} numbers differ - expected: '{j:.{digits}f}', "
                f"found: '{p:.{digits}f}', error = '{double_delta(j, p):.{digits}f}'",
            )
    if n == 1:
        return Outcome(
            Verdict.OK,
            f"found '{p:.{digits}f}', expected '{j:.{digits}f}', "
            f"error '{double_delta(j, p):.{digits}f}'",
        )
    return Outcome(Verdict.OK, f"{n} numbers")


def _yes_no_sequence(ans: InputStream, ouf: InputStream) -> Outcome:
    index = yes_count = no_count = 0
    pa = ""
    while not ans.seek_eof() and not ouf.seek_eof():
        index += 1
        ja = _upper(ans.read_token())
        pa = _upper(ouf.read_token())
        where = f"[{index}{english_ending(index)} token]"
        if ja not in (_YES, _NO):
            stop(
                Verdict.FAIL,
                f"{_YES} or {_NO} expected in answer, but {compress(ja)} found {where}",
            )
        if pa == _YES:
            yes_count += 1
        elif pa == _NO:
            no_count += 1
        else:
            stop(Verdict.PE, f"{_YES} or {_NO} expected, but {compress(pa)} found {where}")
        if ja != pa:
            stop(Verdict.WA, f"expected {compress(ja)}, found {compress(pa)} {where}")
    _check_lengths(ans, ouf, index, ans.read_token, ouf.read_token)
    if index == 0:
        return Outcome(Verdict.OK, "Empty output")
    if index == 1:
        return Outcome(Verdict.OK, pa)
    return Outcome(
        Verdict.OK,
        f"{index} token(s): yes count is {yes_count}, no count is {no_count}",
    )


def _compare_lines(ans: InputStream, ouf: InputStream, same, shown_from_output: bool) -> Outcome:
    shown = ""
    n = 0
    while not ans.eof():
        j = ans.read_line()
        if j == "" and ans.eof():
            break
        p = ouf.read_line()
        shown = p if shown_from_output else j
        n += 1
        if not same(j, p):
            stop(
                Verdict.WA,
                f"{n}{english_ending(n)} lines differ - expected: '{compress(j)}', "
                f"found: '{compress(p)}'",
            )
    if n == 1:
        return Outcome(Verdict.OK, f"single line: '{compress(shown)}'")
    return Outcome(Verdict.OK, f"{n} lines")


def check_ncmp(answer: Source, output: Source) -> Outcome:
    """Compare ordered sequences of signed 64-bit integers."""
    return _run(answer, output, _ordered_longs)


def check_uncmp(answer: Source, output: Source) -> Outcome:
    """Compare unordered sequences of signed 64-bit integers."""
    return _run(answer, output, _unordered_longs)


def check_wcmp(answer: Source, output: Source) -> Outcome:
    """Compare sequences of tokens."""
    return _run(answer, output, _words)


def check_rncmp(answer: Source, output: Source) -> Outcome:
    """Compare sequences of doubles with maximal absolute error 1.5e-5."""
    return _run(answer, output, _absolute_sequence)


def check_rcmp4(answer: Source, output: Source) -> Outcome:
    """Compare sequences of doubles with absolute or relative error 1e-4."""
    return _run(answer, output, lambda ans, ouf: _relative_sequence(ans, ouf, 1e-4, 5))


def check_rcmp6(answer: Source, output: Source) -> Outcome:
    """Compare sequences of doubles with absolute or relative error 1e-6."""
    return _run(answer, output, lambda ans, ouf: _relative_sequence(ans, ouf, 1e-6, 7))


def check_rcmp9(answer: Source, output: Source) -> Outcome:
    """Compare sequences of doubles with absolute or relative error 1e-9."""
    return _run(answer, output, lambda ans, ouf: _relative_sequence(ans, ouf, 1e-9, 10))


def check_nyesno(answer: Source, output: Source) -> Outcome:
    """Compare sequences of YES/NO tokens, case-insensitively."""
    return _run(answer, output, _yes_no_sequence)


def check_fcmp(answer: Source, output: Source) -> Outcome:
    """Compare files as sequences of lines, exactly."""
    return _run(
        answer,
        output,
        lambda ans, ouf: _compare_lines(ans, ouf, lambda j, p: j == p, shown_from_output=False),
    )


def check_lcmp(answer: Source, output: Source) -> Outcome:
    """Compare files as sequences of lines of whitespace-separated tokens."""
    return _run(
        answer,
        output,
        lambda ans, ouf: _compare_lines(
            ans, ouf, lambda j, p: j.split() == p.split(), shown_from_output=True
        ),
    )