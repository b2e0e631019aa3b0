import math

import pytest

from cses_kit.dynamic import (
    MOD,
    book_shop,
    coin_combinations_ordered,
    coin_combinations_unordered,
    dice_combinations,
    grid_paths,
    minimizing_coins,
    removing_digits,
)


# ---------------------------------------------------------------- book_shop

def test_book_shop_worked_example():
    assert book_shop([4, 8, 5, 3], [5, 12, 8, 1], 10) == 13


def test_book_shop_zero_budget_buys_nothing():
    assert book_shop([4, 8, 5, 3], [5, 12, 8, 1], 0) == 0


def test_book_shop_buys_everything_when_affordable():
    prices = [4, 8, 5, 3]
    pages = [5, 12, 8, 1]
    assert book_shop(prices, pages, sum(prices)) == sum(pages)


def test_book_shop_each_book_at_most_once():
    assert book_shop([2], [7], 100) == 7


def test_book_shop_order_invariant():
    prices = [4, 8, 5, 3, 6]
    pages = [5, 12, 8, 1, 9]
    pairs = list(zip(prices, pages))[::-1]
    assert book_shop([p for p, _ in pairs], [q for _, q in pairs], 12) == book_shop(
        prices, pages, 12
    )


def test_book_shop_monotone_in_budget():
    prices = [4, 8, 5, 3, 6]
    pages = [5, 12, 8, 1, 9]
    results = [book_shop(prices, pages, b) for b in range(30)]
    assert results == sorted(results)


def test_book_shop_mismatched_lengths():
    with pytest.raises(ValueError):
        book_shop([1, 2], [3], 5)


def test_book_shop_negative_budget():
    with pytest.raises(ValueError):
        book_shop([1], [1], -1)


# ------------------------------------------------------------ coin counting

def test_coin_combinations_ordered_worked_example():
    assert coin_combinations_ordered([2, 3, 5], 9) == 8


def test_coin_combinations_unordered_worked_example():
    assert coin_combinations_unordered([2, 3, 5], 9) == 3


@pytest.mark.parametrize("target", [0, 1, 7, 50])
def test_single_unit_coin_has_one_way(target):
    assert coin_combinations_ordered([1], target) == 1
    assert coin_combinations_unordered([1], target) == 1


def test_unordered_ignores_coin_order():
    assert coin_combinations_unordered([5, 2, 3], 40) == coin_combinations_unordered(
        [2, 3, 5], 40
    )


@pytest.mark.parametrize("target", range(0, 30))
def test_ordered_at_least_unordered(target):
    coins = [2, 3, 5]
    assert coin_combinations_ordered(coins, target) >= coin_combinations_unordered(
        coins, target
    )


def test_unreachable_target_has_no_ways():
    assert coin_combinations_ordered([2], 7) == 0
    assert coin_combinations_unordered([2], 7) == 0


def test_coin_counts_stay_below_modulus():
    assert 0 <= coin_combinations_ordered([1, 2], 5000) < MOD
    assert 0 <= coin_combinations_unordered([1, 2, 3], 5000) < MOD


def test_coin_counting_rejects_bad_coins():
    with pytest.raises(ValueError):
        coin_combinations_ordered([0, 1], 5)
    with pytest.raises(ValueError):
        coin_combinations_unordered([-1], 5)


def test_coin_counting_rejects_negative_target():
    with pytest.raises(ValueError):
        coin_combinations_ordered([1], -3)


# ------------------------------------------------------------------- dice

def test_dice_zero_has_single_empty_throw():
    assert dice_combinations(0) == 1


@pytest.mark.parametrize("n", [1, 5, 6, 20, 100])
def test_dice_equals_ordered_coins_one_to_six(n):
    assert dice_combinations(n) == coin_combinations_ordered(range(1, 7), n)


@pytest.mark.parametrize("n", [6, 10, 37])
def test_dice_recurrence(n):
    assert dice_combinations(n) == sum(dice_combinations(n - k) for k in range(1, 7)) % MOD


def test_dice_large_is_reduced():
    assert 0 <= dice_combinations(10_000) < MOD


def test_dice_negative():
    with pytest.raises(ValueError):
        dice_combinations(-1)


# -------------------------------------------------------------- grid paths

@pytest.mark.parametrize("size", [1, 2, 3, 6])
def test_open_grid_matches_binomial(size):
    grid = ["." * size] * size
    assert grid_paths(grid) == math.comb(2 * size - 2, size - 1)


def test_grid_trap_in_start_blocks_everything():
    assert grid_paths(["*..", "...", "..."]) == 0


def test_grid_trap_in_end_blocks_everything():
    assert grid_paths(["...", "...", "..*"]) == 0


def test_grid_transpose_invariant():
    grid = ["....", ".*..", "...*", "*..."]
    transposed = ["".join(col) for col in zip(*grid)]
    assert grid_paths(transposed) == grid_paths(grid)


def test_grid_extra_trap_never_adds_paths():
    grid = ["....", ".*..", "...*", "*..."]
    blocked = ["....", ".*..", ".*.*", "*..."]
    assert grid_paths(blocked) <= grid_paths(grid)


def test_grid_rows_with_whitespace_are_stripped():
    assert grid_paths(["..\n", "..\n"]) == grid_paths(["..", ".."])


def test_grid_empty():
    assert grid_paths([]) == 0


def test_grid_not_square():
    with pytest.raises(ValueError):
        grid_paths(["...", ".."])


# -------------------------------------------------------- minimizing coins

@pytest.mark.parametrize("target", [0, 1, 13, 200])
def test_minimizing_with_unit_coin(target):
    assert minimizing_coins([1], target) == target


@pytest.mark.parametrize("target", [3, 11, 97])
def test_minimizing_exact_coin(target):
    assert minimizing_coins([1, target], target) == 1


def test_minimizing_impossible_returns_minus_one():
    assert minimizing_coins([2, 4], 7) == -1


def test_minimizing_uses_no_more_than_greedy_unit_fill():
    coins = [1, 5, 7]
    for target in range(60):
        best = minimizing_coins(coins, target)
        assert 0 <= best <= target


def test_minimizing_triangle_inequality():
    coins = [3, 5, 7]
    for target in range(8, 60):
        best = minimizing_coins(coins, target)
        for coin in coins:
            prev = minimizing_coins(coins, target - coin)
            if prev != -1:
                assert best != -1 and best <= prev + 1


def test_minimizing_rejects_bad_input():
    with pytest.raises(ValueError):
        minimizing_coins([0], 3)
    with pytest.raises(ValueError):
        minimizing_coins([1], -2)


# --------------------------------------------------------- removing digits

def test_removing_digits_zero():
    assert removing_digits(0) == 0


@pytest.mark.parametrize("n", range(1, 10))
def test_single_digit_takes_one_step(n):
    assert removing_digits(n) == 1


@pytest.mark.parametrize("n", [10, 27, 99, 305, 1000])
def test_removing_digits_is_optimal_over_one_step(n):
    best = removing_digits(n)
    options = [removing_digits(n - int(d)) + 1 for d in str(n) if d != "0"]
    assert best == min(options)


def test_removing_digits_bounded_by_n():
    for n in range(1, 200):
        assert 1 <= removing_digits(n) <= n


def test_removing_digits_negative():
    with pytest.raises(ValueError):
        removing_digits(-5)