"""Command line for running checkers and generators."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence, Union

from judgekit import case_checkers, scalar_checkers, sequence_checkers
from judgekit import generators as gen
from judgekit.random_gen import Random
from judgekit.tokens import InputStream, StreamRole
from judgekit.verdict import Outcome, Verdict

__all__ = ["run_checker", "main"]

Source = Union[str, InputStream]

_CHECKERS: dict[str, Callable[[Source, Source], Outcome]] = {
    "acmp": scalar_checkers.check_acmp,
    "dcmp": scalar_checkers.check_dcmp,
    "hcmp": scalar_checkers.check_hcmp,
    "icmp": scalar_checkers.check_icmp,
    "rcmp": scalar_checkers.check_rcmp,
    "yesno": scalar_checkers.check_yesno,
    "pointscmp": scalar_checkers.check_pointscmp,
    "pointsinfo": scalar_checkers.check_pointsinfo,
    "ncmp": sequence_checkers.check_ncmp,
    "uncmp": sequence_checkers.check_uncmp,
    "wcmp": sequence_checkers.check_wcmp,
    "rncmp": sequence_checkers.check_rncmp,
    "rcmp4": sequence_checkers.check_rcmp4,
    "rcmp6": sequence_checkers.check_rcmp6,
    "rcmp9": sequence_checkers.check_rcmp9,
    "nyesno": sequence_checkers.check_nyesno,
    "fcmp": sequence_checkers.check_fcmp,
    "lcmp": sequence_checkers.check_lcmp,
    "caseicmp": case_checkers.check_caseicmp,
    "casencmp": case_checkers.check_casencmp,
    "casewcmp": case_checkers.check_casewcmp,
}


def run_checker(name: str, answer: Source, output: Source) -> Outcome:
    """Run the named checker on the answer and the participant output."""
    try:
        checker = _CHECKERS[name]
    except KeyError:
        raise ValueError(f"unknown checker: {name}") from None
    return checker(answer, output)


def _opt_int(args: Sequence[str], index: int) -> int:
    if index >= len(args):
        raise ValueError(f"missing argument #{index + 1}")
    try:
        return int(args[index])
    except ValueError:
        raise ValueError(f"argument #{index + 1} must be an integer, got {args[index]!r}") from None


def _opt_str(args: Sequence[str], index: int) -> str:
    if index >= len(args):
        raise ValueError(f"missing argument #{index + 1}")
    return args[index]


def _structured(_rng: Random, args: Sequence[str]) -> str:
    count = _opt_int(args, 0)
    parts = [
        (_opt_int(args, i), _opt_str(args, i + 1)) for i in range(1, 1 + 2 * count, 2)
    ]
    return gen.structured_string(parts)


_GENERATORS: dict[str, Callable[[Random, Sequence[str]], str]] = {
    "bgen": lambda rng, _args: gen.binary_string(rng),
    "gen-bipartite-graph": lambda rng, args: gen.bipartite_graph(
        rng, _opt_int(args, 0), _opt_int(args, 1), _opt_int(args, 2)
    ),
    "gen-rooted-tree-graph": lambda rng, args: gen.rooted_tree(
        rng, _opt_int(args, 0), _opt_int(args, 1)
    ),
    "gen-tree-graph": lambda rng, args: gen.tree(rng, _opt_int(args, 0), _opt_int(args, 1)),
    "gs": _structured,
    "igen": lambda rng, _args: gen.uniform_int(rng),
    "iwgen": lambda rng, args: gen.weighted_int(rng, _opt_int(args, 0)),
    "sgen": lambda rng, _args: gen.random_token(rng),
    "swgen": lambda rng, args: gen.weighted_token(rng, _opt_int(args, 0)),
}

_MULTITEST = "multigen"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="judgekit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="compare a participant output with the answer")
    check.add_argument("name", choices=sorted(_CHECKERS))
    check.add_argument("answer", help="path of the answer file")
    check.add_argument("output", help="path of the participant output")

    generate = commands.add_parser("generate", help="print a generated test")
    generate.add_argument(
        "--directory", default=".", help=f"where {_MULTITEST} writes its test files"
    )
    generate.add_argument("name", choices=sorted([*_GENERATORS, _MULTITEST]))
    generate.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def _check(args: argparse.Namespace) -> int:
    try:
        answer = InputStream.from_path(args.answer, StreamRole.ANSWER)
        output = InputStream.from_path(args.output, StreamRole.OUTPUT)
    except OSError as error:
        outcome = Outcome(Verdict.FAIL, f"cannot read input: {error}")
    else:
        outcome = run_checker(args.name, answer, output)
    print(outcome.render())
    return outcome.verdict.exit_code


def _generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    rng = Random.from_args(args.args)
    if args.name == _MULTITEST:
        directory = Path(args.directory)
        for index, text in enumerate(gen.multitest(rng), start=1):
            (directory / str(index)).write_text(text, encoding="utf-8")
        return 0
    try:
        text = _GENERATORS[args.name](rng, args.args)
    except ValueError as error:
        parser.error(str(error))
    sys.stdout.write(text)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: run a checker or a generator and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "check":
        return _check(args)
    return _generate(parser, args)


if __name__ == "__main__":
    sys.exit(main())