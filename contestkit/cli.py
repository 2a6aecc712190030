"""Command line runner that reads a problem's input text and prints its answers."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from contestkit.arithmetic import (
    attacker_wins,
    avoid_square_prefixes,
    can_join,
    game_winner,
    max_permutation_score,
    smallest_distinguishing_modulus,
)
from contestkit.arrays import (
    max_largest_coin,
    max_pairwise_difference,
    max_triple_beauty,
    min_max_step,
    recover_array,
    tea_consumption,
)
from contestkit.constructive import is_consistent, removal_operations
from contestkit.dp import (
    count_beautiful_subsequences,
    knapsack_counts,
    min_deletions_to_blocks,
    min_skip_points,
    min_split_penalty,
)
from contestkit.graphs import count_good_segments, count_greetings, count_readings
from contestkit.greedy import (
    count_unmatched,
    min_attacks,
    min_contrast_length,
    min_operations,
)
from contestkit.grids import is_pushable, min_steps_to_unify
from contestkit.queries import max_and_reach, max_modulus
from contestkit.selection import best_activity_sum, max_painted_sum, min_after_operations
from contestkit.strings import can_arrange_zeros, can_be_smaller, color_brackets


class _Reader:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._tokens = deque(text.split())

    def word(self) -> str:
        try:
            return self._tokens.popleft()
        except IndexError:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def chars(self, count: int) -> str:
        """Read ``count`` characters, whether written apart or run together."""
        collected: list[str] = []
        needed = count
        while needed > 0:
            token = self.word()
            collected.append(token[:needed])
            if len(token) > needed:
                self._tokens.appendleft(token[needed:])
            needed -= len(token[:needed])
        return "".join(collected)


Solver = Callable[[_Reader], Iterator[str]]
_PROBLEMS: dict[str, Solver] = {}


def _problem(name: str, *, multi: bool = True) -> Callable[[Solver], Solver]:
    def register(solve: Solver) -> Solver:
        if multi:

            def each_case(reader: _Reader) -> Iterator[str]:
                for _ in range(reader.number()):
                    yield from solve(reader)

            _PROBLEMS[name] = each_case
        else:
            _PROBLEMS[name] = solve
        return solve

    return register


def _join(values: Iterable[object]) -> str:
    return " ".join(map(str, values))


def _yes(flag: bool) -> str:
    return "YES" if flag else "NO"


@_problem("abc321f", multi=False)
def _abc321f(r: _Reader) -> Iterator[str]:
    q, k = r.numbers(2)
    queries = [(r.word(), r.number()) for _ in range(q)]
    yield from map(str, knapsack_counts(k, queries))


@_problem("1418c")
def _1418c(r: _Reader) -> Iterator[str]:
    yield str(min_skip_points(r.numbers(r.number())))


@_problem("1771b")
def _1771b(r: _Reader) -> Iterator[str]:
    n, m = r.numbers(2)
    yield str(count_good_segments(n, r.pairs(m)))


@_problem("1795c")
def _1795c(r: _Reader) -> Iterator[str]:
    n = r.number()
    a = r.numbers(n)
    b = r.numbers(n)
    yield _join(tea_consumption(a, b))


@_problem("1826d")
def _1826d(r: _Reader) -> Iterator[str]:
    yield str(max_triple_beauty(r.numbers(r.number())))


@_problem("1830a")
def _1830a(r: _Reader) -> Iterator[str]:
    n = r.number()
    yield str(count_readings(n, r.pairs(n - 1)))


@_problem("1832c")
def _1832c(r: _Reader) -> Iterator[str]:
    yield str(min_contrast_length(r.numbers(r.number())))


@_problem("1837d")
def _1837d(r: _Reader) -> Iterator[str]:
    result = color_brackets(r.chars(r.number()))
    if result is None:
        yield "-1"
        return
    count, colors = result
    yield str(count)
    yield _join(colors)


@_problem("1848b")
def _1848b(r: _Reader) -> Iterator[str]:
    n, k = r.numbers(2)
    yield str(min_max_step(k, r.numbers(n)))


@_problem("1857c")
def _1857c(r: _Reader) -> Iterator[str]:
    n = r.number()
    yield _join(recover_array(n, r.numbers(n * (n - 1) // 2)))


@_problem("1872d")
def _1872d(r: _Reader) -> Iterator[str]:
    yield str(max_permutation_score(*r.numbers(3)))


@_problem("1878e")
def _1878e(r: _Reader) -> Iterator[str]:
    a = r.numbers(r.number())
    queries = r.pairs(r.number())
    yield _join(max_and_reach(a, queries))


@_problem("1881e")
def _1881e(r: _Reader) -> Iterator[str]:
    yield str(min_deletions_to_blocks(r.numbers(r.number())))


@_problem("1883g")
def _1883g(r: _Reader) -> Iterator[str]:
    n, _ = r.numbers(2)
    a = r.numbers(n - 1)
    b = r.numbers(n)
    yield str(count_unmatched(a, b))


@_problem("1891")
def _1891(r: _Reader) -> Iterator[str]:
    yield str(min_attacks(r.numbers(r.number())))


@_problem("1904c")
def _1904c(r: _Reader) -> Iterator[str]:
    n, k = r.numbers(2)
    yield str(min_after_operations(r.numbers(n), k))


@_problem("1909b")
def _1909b(r: _Reader) -> Iterator[str]:
    yield str(smallest_distinguishing_modulus(r.numbers(r.number())))


@_problem("1914d")
def _1914d(r: _Reader) -> Iterator[str]:
    n = r.number()
    a, b, c = (r.numbers(n) for _ in range(3))
    yield str(best_activity_sum(a, b, c))


@_problem("1915")
def _1915(r: _Reader) -> Iterator[str]:
    yield str(count_greetings(r.pairs(r.number())))


@_problem("1919c")
def _1919c(r: _Reader) -> Iterator[str]:
    yield str(min_split_penalty(r.numbers(r.number())))


@_problem("1931e")
def _1931e(r: _Reader) -> Iterator[str]:
    n, m = r.numbers(2)
    yield game_winner(m, r.numbers(n))


@_problem("2050f")
def _2050f(r: _Reader) -> Iterator[str]:
    n, q = r.numbers(2)
    a = r.numbers(n)
    yield _join(max_modulus(a, r.pairs(q)))


@_problem("2069a")
def _2069a(r: _Reader) -> Iterator[str]:
    n = r.number()
    yield _yes(is_consistent(r.numbers(n - 2)))


@_problem("2069b")
def _2069b(r: _Reader) -> Iterator[str]:
    n, m = r.numbers(2)
    grid = [r.numbers(m) for _ in range(n)]
    yield str(min_steps_to_unify(grid))


@_problem("2069c")
def _2069c(r: _Reader) -> Iterator[str]:
    yield str(count_beautiful_subsequences(r.numbers(r.number())))


@_problem("2071a")
def _2071a(r: _Reader) -> Iterator[str]:
    yield _yes(can_join(r.number()))


@_problem("2071b")
def _2071b(r: _Reader) -> Iterator[str]:
    permutation = avoid_square_prefixes(r.number())
    yield "-1" if permutation is None else _join(permutation)


@_problem("2075a")
def _2075a(r: _Reader) -> Iterator[str]:
    yield str(min_operations(*r.numbers(2)))


@_problem("2075b")
def _2075b(r: _Reader) -> Iterator[str]:
    n, k = r.numbers(2)
    yield str(max_painted_sum(r.numbers(n), k))


@_problem("2085a")
def _2085a(r: _Reader) -> Iterator[str]:
    _, k = r.numbers(2)
    yield "yes" if can_be_smaller(r.word(), k) else "no"


@_problem("2085b")
def _2085b(r: _Reader) -> Iterator[str]:
    operations = removal_operations(r.numbers(r.number()))
    yield str(len(operations))
    for l, right in operations:
        yield f"{l} {right}"


@_problem("2090a")
def _2090a(r: _Reader) -> Iterator[str]:
    yield _yes(attacker_wins(*r.numbers(3)))


@_problem("2090b")
def _2090b(r: _Reader) -> Iterator[str]:
    n, m = r.numbers(2)
    yield _yes(is_pushable([r.chars(m) for _ in range(n)]))


@_problem("2092a")
def _2092a(r: _Reader) -> Iterator[str]:
    yield str(max_pairwise_difference(r.numbers(r.number())))


@_problem("2092b")
def _2092b(r: _Reader) -> Iterator[str]:
    r.number()
    a = r.word()
    b = r.word()
    yield _yes(can_arrange_zeros(a, b))


@_problem("2092c")
def _2092c(r: _Reader) -> Iterator[str]:
    yield str(max_largest_coin(r.numbers(r.number())))


PROBLEMS = sorted(_PROBLEMS)


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output text."""
    try:
        solve = _PROBLEMS[problem.lower()]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return "".join(f"{line}\n" for line in solve(_Reader(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from its input text."
    )
    parser.add_argument("problem", type=str.lower, choices=PROBLEMS)
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    try:
        output = run(args.problem, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0