"""Interactor for the A+B problem."""

from __future__ import annotations

from typing import Callable, Union

from judgekit.tokens import InputStream, StreamRole
from judgekit.verdict import Outcome, Quit, Verdict

__all__ = ["a_plus_b"]

Source = Union[str, InputStream]


def _as_stream(source: Source, role: StreamRole) -> InputStream:
    return source if isinstance(source, InputStream) else InputStream(source, role)


def a_plus_b(
    test: Source,
    solution: Source,
    send: Callable[[str], None],
    record: Callable[[str], None],
) -> Outcome:
    """Send each query from the test to the solution and record its answers.

    The test holds the number of queries followed by pairs of integers; each
    pair is passed to send as a line, and the solution's reply is passed to
    record for a checker to verify later.
    """
    inf = _as_stream(test, StreamRole.INPUT)
    ouf = _as_stream(solution, StreamRole.OUTPUT)
    try:
        n = inf.read_int()
        for _ in range(n):
            a = inf.read_int()
            b = inf.read_int()
            send(f"{a} {b}\n")
            record(f"{ouf.read_int()}\n")
    except Quit as stop:
        return stop.outcome
    return Outcome(Verdict.OK, f"{n} queries processed")