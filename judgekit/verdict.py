"""Verdicts and the exception that ends a check."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Verdict", "Outcome", "Quit", "quit", "quit_points", "quit_points_info"]


class Verdict(Enum):
    """Result category of a check; the value is the label shown to the user."""

    OK = "ok"
    WA = "wrong answer"
    PE = "wrong output format"
    FAIL = "FAIL"
    POINTS = "points"

    @property
    def exit_code(self) -> int:
        """Process exit status conventionally used for this verdict."""
        return _EXIT_CODES[self]


_EXIT_CODES = {
    Verdict.OK: 0,
    Verdict.WA: 1,
    Verdict.PE: 2,
    Verdict.FAIL: 3,
    Verdict.POINTS: 7,
}


def _format_points(points: float) -> str:
    text = f"{points:.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Outcome:
    """The final result of a check."""

    verdict: Verdict
    message: str
    points: float | None = None
    points_info: str | None = None

    def render(self) -> str:
        """Return the one-line report for this outcome."""
        parts = [self.verdict.value]
        if self.points is not None:
            parts.append(_format_points(self.points))
        if self.points_info is not None:
            parts.append(f"points_info={self.points_info}")
        if self.message:
            parts.append(self.message)
        return " ".join(parts)


class Quit(Exception):
    """Raised to end a check with a definite outcome."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(outcome.render())
        self.outcome = outcome

    @property
    def verdict(self) -> Verdict:
        return self.outcome.verdict

    @property
    def message(self) -> str:
        return self.outcome.message


def quit(verdict: Verdict, message: str) -> None:  # noqa: A001
    """End the check with the given verdict and message."""
    if verdict is Verdict.POINTS:
        raise ValueError("use quit_points to end a check with points")
    raise Quit(Outcome(verdict, message))


def quit_points(points: float, message: str) -> None:
    """End the check awarding the given number of points."""
    raise Quit(Outcome(Verdict.POINTS, message, points=float(points)))


def quit_points_info(info: str, message: str) -> None:
    """End the check as accepted, attaching extra scoring information."""
    raise Quit(Outcome(Verdict.OK, message, points_info=info))