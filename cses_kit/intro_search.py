"""Exhaustive-search solutions to the introductory problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

_SIZE = 7
_PATH_LENGTH = _SIZE * _SIZE - 1
_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def apple_division(weights: Iterable[int]) -> int:
    """Return the smallest difference between the weights of two groups of apples."""
    values = list(weights)
    if any(weight < 0 for weight in values):
        raise ValueError("weights must be non-negative")
    total = sum(values)
    sums = {0}
    for weight in values:
        sums |= {partial + weight for partial in sums}
    best = max(partial for partial in sums if partial <= total // 2)
    return total - 2 * best


def chessboard_queens(board: Iterable[str]) -> int:
    """Count the ways to place eight non-attacking queens on free (``.``) squares."""
    rows = [line.strip() for line in board]
    if len(rows) != 8 or any(len(line) != 8 for line in rows):
        raise ValueError("board must be 8 rows of 8 squares")

    def place(col: int, used: frozenset, diag: frozenset, anti: frozenset) -> int:
        if col == 8:
            return 1
        return sum(
            place(col + 1, used | {row}, diag | {row - col}, anti | {row + col})
            for row in range(8)
            if rows[row][col] == "."
            and row not in used
            and row - col not in diag
            and row + col not in anti
        )

    return place(0, frozenset(), frozenset(), frozenset())


def _arrangements(counts: Counter, length: int) -> Iterator[str]:
    if length == 0:
        yield ""
        return
    for char in sorted(counts):
        if counts[char]:
            counts[char] -= 1
            for rest in _arrangements(counts, length - 1):
                yield char + rest
            counts[char] += 1


def creating_strings(text: str) -> list[str]:
    """Return every distinct rearrangement of ``text`` in lexicographic order."""
    return list(_arrangements(Counter(text), len(text)))


def gray_code(n: int) -> list[str]:
    """Return the ``n``-bit reflected Gray code as bit strings."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def grid_path_count(description: str) -> int:
    """Count paths through a 7x7 grid from top-left to bottom-left matching ``description``.

    The description has 48 characters, each a move ``U``, ``D``, ``L``, ``R`` or ``?``.
    """
    if len(description) != _PATH_LENGTH:
        raise ValueError(f"description must have {_PATH_LENGTH} characters")
    if set(description) - set("?UDLR"):
        raise ValueError("description may hold only ?, U, D, L and R")

    visited = [[False] * _SIZE for _ in range(_SIZE)]
    count = 0

    def inside(i: int, j: int) -> bool:
        return 0 <= i < _SIZE and 0 <= j < _SIZE

    def open_neighbours(i: int, j: int) -> tuple[int, int]:
        vertical = sum(1 for di in (-1, 1) if inside(i + di, j) and not visited[i + di][j])
        horizontal = sum(1 for dj in (-1, 1) if inside(i, j + dj) and not visited[i][j + dj])
        return vertical, horizontal

    def dead_end(i: int, j: int) -> bool:
        if visited[i][j]:
            return False
        free = sum(open_neighbours(i, j))
        if (i, j) == (_SIZE - 1, 0) and free > 0:
            return False
        return free < 2

    def splits_grid(i: int, j: int) -> bool:
        vertical, horizontal = open_neighbours(i, j)
        return (horizontal, vertical) in ((0, 2), (2, 0))

    def walk(step: int, i: int, j: int) -> None:
        nonlocal count
        if visited[i][j]:
            return
        visited[i][j] = True
        blocked = 0
        if (i, j) == (_SIZE - 1, 0):
            if step == _PATH_LENGTH:
                count += 1
            else:
                visited[i][j] = False
                blocked += 1
        for di, dj in ((-1, -1), (-1, 1), (1, 1), (1, -1)):
            if inside(i + di, j + dj):
                blocked += dead_end(i + di, j + dj)
        blocked += splits_grid(i, j)
        if blocked:
            visited[i][j] = False
            return
        if step < _PATH_LENGTH:
            move = description[step]
            options = "UDLR" if move == "?" else move
            for name in options:
                di, dj = _MOVES[name]
                if inside(i + di, j + dj):
                    walk(step + 1, i + di, j + dj)
        visited[i][j] = False

    walk(0, 0, 0)
    return count


def palindrome_reorder(text: str) -> str | None:
    """Rearrange ``text`` into a palindrome, or return None when none exists."""
    counts = Counter(text)
    odd = [char for char, amount in counts.items() if amount % 2]
    if len(odd) > 1:
        return None
    middle = odd[0] * counts[odd[0]] if odd else ""
    half = "".join(
        char * (amount // 2) for char, amount in sorted(counts.items()) if char not in odd
    )
    return half + middle + half[::-1]


def _hanoi(source: int, spare: int, target: int, disks: int) -> Iterator[tuple[int, int]]:
    if disks == 0:
        return
    yield from _hanoi(source, target, spare, disks - 1)
    yield source, target
    yield from _hanoi(spare, source, target, disks - 1)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` disks from peg 1 to peg 3."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return list(_hanoi(1, 2, 3, n))