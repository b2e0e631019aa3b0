"""Dynamic-programming solutions: knapsack, coin counting, dice sums and grid paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

_UNREACHABLE = 10_000_006


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the largest page total of books bought within ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _check_non_negative("budget", budget)
    if any(price < 0 for price in prices):
        raise ValueError("prices must be non-negative")
    best = [0] * (budget + 1)
    for price, page_count in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + page_count)
    return best[budget]


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo 1e9+7."""
    values = _positive_coins(coins)
    _check_non_negative("target", target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``, modulo 1e9+7.

    Each entry of ``coins`` is treated as its own coin kind.
    """
    values = sorted(_positive_coins(coins))
    _check_non_negative("target", target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Count ordered dice throws (faces 1 to 6) summing to ``n``, modulo 1e9+7."""
    _check_non_negative("n", n)
    ways = [0] * (n + 1)
    ways[0] = 1
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in range(1, 7) if face <= total) % MOD
    return ways[n]


def grid_paths(grid: Iterable[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right of a square grid.

    Cells marked ``*`` are traps and cannot be entered. The count is taken modulo 1e9+7.
    """
    rows = [line.strip() for line in grid]
    size = len(rows)
    if size == 0:
        return 0
    if any(len(line) != size for line in rows):
        raise ValueError("grid must be square")
    paths = [0] * (size + 1)
    for i, line in enumerate(rows):
        for j, cell in enumerate(line, start=1):
            if cell == "*":
                paths[j] = 0
            elif i == 0 and j == 1:
                paths[j] = 1
            else:
                paths[j] = (paths[j] + paths[j - 1]) % MOD
    return paths[size]


def minimizing_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 when it cannot be formed."""
    values = _positive_coins(coins)
    _check_non_negative("target", target)
    fewest = [0] + [_UNREACHABLE] * target
    for amount in range(1, target + 1):
        fewest[amount] = min(
            (fewest[amount - coin] + 1 for coin in values if coin <= amount),
            default=_UNREACHABLE,
        )
        fewest[amount] = min(fewest[amount], _UNREACHABLE)
    return fewest[target] if fewest[target] < _UNREACHABLE else -1


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach zero by subtracting one of the current digits."""
    _check_non_negative("n", n)
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = min(
            steps[value - int(digit)] + 1 for digit in str(value) if digit != "0"
        )
    return steps[n]