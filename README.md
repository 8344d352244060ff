# judgekit

Tools for preparing and judging programming-contest problems:

- **checkers** that compare a contestant's output with the jury's answer and
  return an outcome: accepted, wrong answer, wrong output format, checker
  failure, or a points score;
- **generators** that produce test inputs reproducibly from a seed;
- an **interactor** for an A+B style interactive problem.

Only the standard library is needed at run time.

## Installation

```
pip install judgekit
```

To run the test suite, install the `test` extra and run `pytest`.

## Outcomes and verdicts

`judgekit.verdict` defines:

- `Verdict`, an enum with members `OK`, `WA`, `PE`, `FAIL` and `POINTS`.
  Each value is the label shown to the user (`"ok"`, `"wrong answer"`,
  `"wrong output format"`, `"FAIL"`, `"points"`), and `exit_code` gives the
  conventional process status (0, 1, 2, 3 and 7).
- `Outcome`, a frozen dataclass with `verdict`, `message`, and optional
  `points` and `points_info`. `Outcome.render()` returns a one-line report,
  for example `wrong answer expected 3, found 4` or `points 0.5 ja=1.0000 pa=1.5000`.
- `Quit`, the exception that carries an `Outcome`.
- `quit(verdict, message)`, `quit_points(points, message)` and
  `quit_points_info(info, message)`, which raise `Quit`. `quit` refuses
  `Verdict.POINTS`; use `quit_points` for that.

## Reading input

`judgekit.tokens.InputStream(text, role)` is a cursor over the text of one
stream, and `InputStream.from_path(path, role)` reads a file. It offers
`seek_eof`, `eof`, `read_token`, `read_word`, `read_line`, `read_int`
(signed 32-bit), `read_long` (signed 64-bit), `parse_long` for an already
read token, and `read_double` (finite values only).

The `StreamRole` (`INPUT`, `OUTPUT`, `ANSWER`) decides what happens when a
value is malformed or missing: a bad participant output ends the check with
`Verdict.PE`, anything else with `Verdict.FAIL`.

The module also has `english_ending(n)` (`"st"`, `"nd"`, `"rd"` or `"th"`)
and `compress(text)`, which shortens text longer than 64 characters to its
start, `...`, and its end.

## Checkers

Every checker takes `(answer, output)`, each either a string or an
`InputStream`, and returns an `Outcome`; it never raises `Quit` to the
caller.

| Function | Module | Compares |
|---|---|---|
| `check_icmp` | `scalar_checkers` | one signed 32-bit integer |
| `check_hcmp` | `scalar_checkers` | one signed integer of any length; the answer must hold exactly one token |
| `check_acmp`, `check_rcmp` | `scalar_checkers` | one double, absolute error 1.5e-6 |
| `check_dcmp` | `scalar_checkers` | one double, absolute or relative error 1e-6 |
| `check_yesno` | `scalar_checkers` | one YES/NO, case-insensitive |
| `check_pointscmp` | `scalar_checkers` | awards the absolute difference of two doubles as points |
| `check_pointsinfo` | `scalar_checkers` | accepts and attaches both doubles as points information |
| `check_ncmp` | `sequence_checkers` | ordered sequence of 64-bit integers |
| `check_uncmp` | `sequence_checkers` | unordered sequence of 64-bit integers |
| `check_wcmp` | `sequence_checkers` | sequence of tokens |
| `check_rncmp` | `sequence_checkers` | sequence of doubles, absolute error 1.5e-5 |
| `check_rcmp4`, `check_rcmp6`, `check_rcmp9` | `sequence_checkers` | sequence of doubles, absolute or relative error 1e-4 / 1e-6 / 1e-9 |
| `check_nyesno` | `sequence_checkers` | sequence of YES/NO tokens, case-insensitive |
| `check_fcmp` | `sequence_checkers` | files line by line, exactly |
| `check_lcmp` | `sequence_checkers` | files line by line, comparing the tokens of each line |
| `check_caseicmp` | `case_checkers` | `Case i: <int>` lines |
| `check_casencmp` | `case_checkers` | `Case i: <int> <int> ...` blocks |
| `check_casewcmp` | `case_checkers` | `Case i: <token> <token> ...` blocks |

```python
from judgekit.sequence_checkers import check_ncmp

outcome = check_ncmp("1 2 3", "1 2 4")
print(outcome.render())   # wrong answer 3rd numbers differ - expected: '3', found: '4'
```

`judgekit.cli.run_checker(name, answer, output)` runs a checker by its short
name (`icmp`, `wcmp`, `casencmp`, ...) and raises `ValueError` for an
unknown name.

The floating-point tolerance rules are available on their own in
`judgekit.numeric`: `double_compare(expected, result, max_error)` accepts a
result within the error either absolutely or relatively, and handles NaN
and infinities; `double_delta(expected, result)` gives the smaller of the
absolute and relative error.

## Random numbers and patterns

`judgekit.random_gen.Random(seed)` is a deterministic random source.
`Random.from_args(args)` seeds it from a list of strings, so the same
command-line arguments always give the same tests. It offers:

- `randint(low, high)`: uniform in `[low, high]`;
- `below(n)`: uniform in `[0, n)`;
- `wnext(low, high, weight)`: distributed like the maximum of `weight + 1`
  uniform draws for a positive weight, the minimum of `-weight + 1` draws
  for a negative one, uniform for zero; `wnext_below(n, weight)` is the
  same over `[0, n)`;
- `pattern(text)`: a random string matching a pattern;
- `shuffle(items)`: shuffles a list in place.

`Pattern(text)` parses a small pattern language: literal characters,
backslash escapes, character sets with ranges such as `[a-zA-Z0-9]`,
groups `( )`, alternation `|`, and the repetitions `{n}`, `{n,m}`, `?`,
`*` and `+`. `Pattern.matches(text)` tests a whole string;
`Pattern.generate(rng)` produces a matching string, and raises
`ValueError` for the unbounded `*` and `+`.

## Generators

The functions in `judgekit.generators` return the text of a test, each line
ending with a newline:

- `binary_string(rng)`: 100 binary digits, about 10% ones;
- `bipartite_graph(rng, n, m, k)`: `n m k` then `k` distinct edges between
  shuffled vertex labels;
- `rooted_tree(rng, n, t)`: `n` then the parents of vertices 2..n, with
  vertex 1 as the root;
- `tree(rng, n, t)`: `n` then `n - 1` shuffled edges;
- `structured_string(parts)`: each `(count, period)` pair repeated and
  joined, e.g. `[(1, "a"), (5, "b"), (1, "a")]` gives `abbbbba`;
- `uniform_int(rng)` and `weighted_int(rng, weight)`: an integer in
  `[1, 10^6]`;
- `random_token(rng)` and `weighted_token(rng, weight)`: a token of 1 to
  1000 Latin letters and digits; the weight skews the length limit;
- `multitest(rng, count=10)`: a list of A+B tests, test `i` holding two
  numbers in `[1, i*i]`.

For the tree generators the weight `t` is passed to `wnext_below` when
choosing each parent: large positive values give long chains, large
negative values give stars.

```python
from judgekit.random_gen import Random
from judgekit.generators import tree, weighted_token

rng = Random(7)
print(tree(rng, 10, 0), end="")
print(weighted_token(rng, -100), end="")
```

## Interactor

`judgekit.interactor.a_plus_b(test, solution, send, record)` reads the
number of queries and the pairs of integers from `test`, calls `send` with
each pair as a line, reads the solution's reply from `solution` and passes
it to `record` as a line. It returns an `Outcome`, such as
`ok 3 queries processed`, or the failure that stopped it.

## Command line

The `judgekit` command has two subcommands.

```
judgekit check wcmp answer.txt output.txt
```

runs a checker on two files, prints the rendered outcome and exits with the
verdict's exit code. An unreadable file gives a `FAIL` outcome.

```
judgekit generate gs 3 1 a 5 b 1 a
judgekit generate gen-tree-graph 10 0
judgekit generate --directory tests multigen
```

prints a generated test to standard output. The generator names are
`bgen`, `gen-bipartite-graph`, `gen-rooted-tree-graph`, `gen-tree-graph`,
`gs`, `igen`, `iwgen`, `sgen` and `swgen`; the arguments after the name
are passed to the generator and also seed the random source. `multigen`
instead writes ten A+B tests to files named `1` to `10` in `--directory`
(the current directory by default).

Run `judgekit --help` for the full list of options.

## What it does not do

judgekit compares texts and produces texts. It does not compile or run
solutions, enforce time or memory limits, or connect an interactor to a
running process: `a_plus_b` works through the `send` and `record`
callables you give it. There are no input validators.