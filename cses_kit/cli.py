"""Command line entry point: solve one problem from whitespace-separated input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

from cses_kit import dynamic, intro_math, intro_search

Handler = Callable[[Iterator[str]], list[str]]

_PROBLEMS: dict[str, Handler] = {}


class InputError(ValueError):
    """Raised when the input ends early or holds an unusable token."""


def _problem(name: str) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _word(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise InputError("unexpected end of input") from None


def _int(tokens: Iterator[str]) -> int:
    token = _word(tokens)
    try:
        return int(token)
    except ValueError:
        raise InputError(f"expected an integer, got {token!r}") from None


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [_int(tokens) for _ in range(count)]


def _words(tokens: Iterator[str], count: int) -> list[str]:
    return [_word(tokens) for _ in range(count)]


def _joined(values) -> str:
    return " ".join(map(str, values))


@_problem("book-shop")
def _book_shop(tokens: Iterator[str]) -> list[str]:
    n, budget = _ints(tokens, 2)
    prices = _ints(tokens, n)
    pages = _ints(tokens, n)
    return [str(dynamic.book_shop(prices, pages, budget))]


@_problem("coin-combinations-i")
def _coin_combinations_i(tokens: Iterator[str]) -> list[str]:
    n, target = _ints(tokens, 2)
    return [str(dynamic.coin_combinations_ordered(_ints(tokens, n), target))]


@_problem("coin-combinations-ii")
def _coin_combinations_ii(tokens: Iterator[str]) -> list[str]:
    n, target = _ints(tokens, 2)
    return [str(dynamic.coin_combinations_unordered(_ints(tokens, n), target))]


@_problem("dice-combinations")
def _dice_combinations(tokens: Iterator[str]) -> list[str]:
    return [str(dynamic.dice_combinations(_int(tokens)))]


@_problem("grid-paths")
def _grid_paths(tokens: Iterator[str]) -> list[str]:
    size = _int(tokens)
    return [str(dynamic.grid_paths(_words(tokens, size)))]


@_problem("minimizing-coins")
def _minimizing_coins(tokens: Iterator[str]) -> list[str]:
    n, target = _ints(tokens, 2)
    return [str(dynamic.minimizing_coins(_ints(tokens, n), target))]


@_problem("removing-digits")
def _removing_digits(tokens: Iterator[str]) -> list[str]:
    return [str(dynamic.removing_digits(_int(tokens)))]


@_problem("apple-division")
def _apple_division(tokens: Iterator[str]) -> list[str]:
    n = _int(tokens)
    return [str(intro_search.apple_division(_ints(tokens, n)))]


@_problem("bit-strings")
def _bit_strings(tokens: Iterator[str]) -> list[str]:
    return [str(intro_math.bit_strings(_int(tokens)))]


@_problem("chessboard-and-queens")
def _chessboard(tokens: Iterator[str]) -> list[str]:
    return [str(intro_search.chessboard_queens(_words(tokens, 8)))]


@_problem("coin-piles")
def _coin_piles(tokens: Iterator[str]) -> list[str]:
    tests = _int(tokens)
    return [
        "YES" if intro_math.coin_piles(*_ints(tokens, 2)) else "NO" for _ in range(tests)
    ]


@_problem("creating-strings")
def _creating_strings(tokens: Iterator[str]) -> list[str]:
    arrangements = intro_search.creating_strings(_word(tokens))
    return [str(len(arrangements)), *arrangements]


@_problem("digit-queries")
def _digit_queries(tokens: Iterator[str]) -> list[str]:
    queries = _int(tokens)
    return [str(intro_math.digit_query(_int(tokens))) for _ in range(queries)]


@_problem("gray-code")
def _gray_code(tokens: Iterator[str]) -> list[str]:
    return intro_search.gray_code(_int(tokens))


@_problem("grid-path-description")
def _grid_path_description(tokens: Iterator[str]) -> list[str]:
    return [str(intro_search.grid_path_count(_word(tokens)))]


@_problem("increasing-array")
def _increasing_array(tokens: Iterator[str]) -> list[str]:
    n = _int(tokens)
    return [str(intro_math.increasing_array(_ints(tokens, n)))]


@_problem("missing-number")
def _missing_number(tokens: Iterator[str]) -> list[str]:
    n = _int(tokens)
    values = _ints(tokens, max(n - 1, 0))
    return [str(intro_math.missing_number(n, values))]


@_problem("number-spiral")
def _number_spiral(tokens: Iterator[str]) -> list[str]:
    tests = _int(tokens)
    return [str(intro_math.number_spiral(*_ints(tokens, 2))) for _ in range(tests)]


@_problem("palindrome-reorder")
def _palindrome_reorder(tokens: Iterator[str]) -> list[str]:
    result = intro_search.palindrome_reorder(_word(tokens))
    return ["NO SOLUTION" if result is None else result]


@_problem("permutations")
def _permutations(tokens: Iterator[str]) -> list[str]:
    result = intro_math.beautiful_permutation(_int(tokens))
    return ["NO SOLUTION" if result is None else _joined(result)]


@_problem("repetitions")
def _repetitions(tokens: Iterator[str]) -> list[str]:
    return [str(intro_math.repetitions(_word(tokens)))]


@_problem("tower-of-hanoi")
def _tower_of_hanoi(tokens: Iterator[str]) -> list[str]:
    moves = intro_search.tower_of_hanoi(_int(tokens))
    return [str(len(moves)), *(_joined(move) for move in moves)]


@_problem("trailing-zeros")
def _trailing_zeros(tokens: Iterator[str]) -> list[str]:
    return [str(intro_math.trailing_zeros(_int(tokens)))]


@_problem("two-knights")
def _two_knights(tokens: Iterator[str]) -> list[str]:
    return [str(count) for count in intro_math.two_knights(_int(tokens))]


@_problem("two-sets")
def _two_sets(tokens: Iterator[str]) -> list[str]:
    result = intro_math.two_sets(_int(tokens))
    if result is None:
        return ["NO"]
    first, second = result
    return ["YES", str(len(first)), _joined(first), str(len(second)), _joined(second)]


@_problem("weird-algorithm")
def _weird_algorithm(tokens: Iterator[str]) -> list[str]:
    return [_joined(intro_math.weird_algorithm(_int(tokens)))]


def problems() -> list[str]:
    """Return the names of the problems the command can solve."""
    return sorted(_PROBLEMS)


def main(argv: list[str] | None = None) -> int:
    """Solve the named problem, reading input from a file or standard input."""
    parser = argparse.ArgumentParser(
        prog="cses-kit",
        description="Solve a problem from whitespace-separated input.",
    )
    parser.add_argument("problem", choices=problems(), help="problem to solve")
    parser.add_argument(
        "-i", "--input", type=Path, help="read input from this file instead of stdin"
    )
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        lines = _PROBLEMS[args.problem](iter(text.split()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())