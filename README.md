# cses_kit

Solutions to the introductory and dynamic-programming problems of the CSES
problem set. Each problem is an ordinary Python function: pass in the
problem's input and get its answer back. A `cses-kit` command solves a
problem from input in the judge's whitespace-separated format.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped by topic:

- `cses_kit.dynamic`: `book_shop`, `coin_combinations_ordered`,
  `coin_combinations_unordered`, `dice_combinations`, `grid_paths`,
  `minimizing_coins`, `removing_digits`
- `cses_kit.intro_math`: `mod_pow`, `bit_strings`, `coin_piles`,
  `digit_query`, `increasing_array`, `missing_number`, `number_spiral`,
  `beautiful_permutation`, `repetitions`, `trailing_zeros`, `two_knights`,
  `two_sets`, `weird_algorithm`
- `cses_kit.intro_search`: `apple_division`, `chessboard_queens`,
  `creating_strings`, `gray_code`, `grid_path_count`, `palindrome_reorder`,
  `tower_of_hanoi`

```python
from cses_kit.dynamic import book_shop, dice_combinations, minimizing_coins
from cses_kit.intro_math import bit_strings, trailing_zeros, two_sets
from cses_kit.intro_search import gray_code

book_shop([4, 8, 5, 3], [5, 12, 8, 1], 10)   # 13
dice_combinations(3)                         # 4
minimizing_coins([1, 5, 7], 11)              # 3
bit_strings(3)                               # 8
trailing_zeros(20)                           # 4
gray_code(2)                                 # ['00', '01', '11', '10']
two_sets(5)                                  # None
```

Counting problems (`coin_combinations_*`, `dice_combinations`, `grid_paths`,
`bit_strings`) report their answers modulo 1,000,000,007.

Problems with no answer return `None` (`beautiful_permutation`, `two_sets`,
`palindrome_reorder`); `minimizing_coins` returns `-1` when the target cannot
be formed. Invalid arguments such as negative sizes or non-positive coin
values raise `ValueError`.

## Command line

```
cses-kit PROBLEM [-i FILE]
```

`cses-kit` reads the problem's input from standard input, or from `FILE`
with `-i`/`--input`, and prints the answer lines. Problem names:

`apple-division`, `bit-strings`, `book-shop`, `chessboard-and-queens`,
`coin-combinations-i`, `coin-combinations-ii`, `coin-piles`,
`creating-strings`, `dice-combinations`, `digit-queries`, `gray-code`,
`grid-path-description`, `grid-paths`, `increasing-array`,
`minimizing-coins`, `missing-number`, `number-spiral`,
`palindrome-reorder`, `permutations`, `removing-digits`, `repetitions`,
`tower-of-hanoi`, `trailing-zeros`, `two-knights`, `two-sets`,
`weird-algorithm`.

```
echo "4 10  4 8 5 3  5 12 8 1" | cses-kit book-shop
13
```

If the input ends early, holds a token that is not a number where one is
expected, or is otherwise invalid, the command prints `error: ...` to
standard error and exits with status 1. `cses_kit.cli.problems()` returns
the list of problem names.

```
cses-kit --help
```