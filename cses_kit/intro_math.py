"""Closed-form and counting solutions to the introductory problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

from cses_kit.dynamic import MOD


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by repeated squaring.

    A base divisible by the modulus yields 0, even for a zero exponent.
    """
    _check_non_negative("exponent", exponent)
    _check_positive("modulus", modulus)
    base %= modulus
    if base == 0:
        return 0
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        base = base * base % modulus
    return result


def bit_strings(n: int) -> int:
    """Count the bit strings of length ``n``, modulo 1e9+7."""
    return mod_pow(2, n, MOD)


def coin_piles(a: int, b: int) -> bool:
    """Tell whether two piles can be emptied by removing 1 and 2 coins (or 2 and 1) per move."""
    return min(a, b) * 2 >= max(a, b) and (a + b) % 3 == 0


def digit_query(k: int) -> int:
    """Return the ``k``-th digit (1-based) of the string 123456789101112..."""
    _check_positive("k", k)
    width = 1
    block = 9
    position = k
    while position > block:
        position -= block
        width += 1
        block = 9 * 10 ** (width - 1) * width
    position -= 1
    number = 10 ** (width - 1) + position // width
    return int(str(number)[position % width])


def increasing_array(values: Iterable[int]) -> int:
    """Return the fewest unit increments that make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def missing_number(n: int, values: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``values``."""
    _check_non_negative("n", n)
    return n * (n + 1) // 2 - sum(values)


def number_spiral(row: int, col: int) -> int:
    """Return the number in the given cell of the infinite number spiral."""
    _check_positive("row", row)
    _check_positive("col", col)
    if row > col:
        if row % 2 == 0:
            return row * row - col + 1
        return (row - 1) * (row - 1) + col
    if col % 2 == 0:
        return (col - 1) * (col - 1) + row
    return col * col - row + 1


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one, or None."""
    _check_non_negative("n", n)
    if n in (2, 3):
        return None
    if n == 1:
        return [1]
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def repetitions(sequence: Sequence) -> int:
    """Return the length of the longest run of equal consecutive items."""
    return max((sum(1 for _ in run) for _, run in groupby(sequence)), default=0)


def trailing_zeros(n: int) -> int:
    """Count the trailing zeros of ``n!``."""
    _check_non_negative("n", n)
    count = 0
    power = 5
    while n // power > 0:
        count += n // power
        power *= 5
    return count


def two_knights(n: int) -> list[int]:
    """For each board size 1..n, count the ways to place two non-attacking knights."""
    _check_non_negative("n", n)
    counts = []
    for size in range(1, n + 1):
        cells = size * size
        counts.append(cells * (cells - 1) // 2 - 4 * (size - 1) * (size - 2))
    return counts


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum, or return None when impossible."""
    _check_non_negative("n", n)
    if (n * (n + 1) // 2) % 2:
        return None
    first: list[int] = []
    second: list[int] = []
    if n % 4 == 0:
        for value in range(1, n + 1):
            (first if value % 4 in (0, 1) else second).append(value)
    else:
        for value in range(1, n):
            (first if value % 4 in (1, 2) else second).append(value)
        second.append(n)
    return first, second


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence starting at ``n`` and ending at 1."""
    _check_positive("n", n)
    sequence = [n]
    while n != 1:
        n = 3 * n + 1 if n & 1 else n // 2
        sequence.append(n)
    return sequence