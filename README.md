# contestkit

A collection of solved competitive programming problems, each one exposed as
an ordinary Python function that takes Python values and returns Python
values. Judge-formatted input is only needed when using the command line.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                    | Functions and classes                                                                                                   |
|---------------------------|-------------------------------------------------------------------------------------------------------------------------|
| `contestkit.dp`           | `knapsack_counts`, `min_skip_points`, `min_deletions_to_blocks`, `min_split_penalty`, `count_beautiful_subsequences`    |
| `contestkit.greedy`       | `min_contrast_length`, `count_unmatched`, `min_attacks`, `min_operations`                                               |
| `contestkit.arrays`       | `tea_consumption`, `max_triple_beauty`, `min_max_step`, `recover_array`, `max_pairwise_difference`, `max_largest_coin`  |
| `contestkit.graphs`       | `count_readings`, `count_good_segments`, `count_greetings`                                                              |
| `contestkit.grids`        | `min_steps_to_unify`, `is_pushable`                                                                                     |
| `contestkit.strings`      | `color_brackets`, `can_be_smaller`, `can_arrange_zeros`                                                                 |
| `contestkit.queries`      | `GcdSegmentTree`, `max_and_reach`, `max_modulus`                                                                        |
| `contestkit.arithmetic`   | `max_permutation_score`, `smallest_distinguishing_modulus`, `can_join`, `is_square_triangular`, `avoid_square_prefixes`, `attacker_wins`, `game_winner` |
| `contestkit.selection`    | `min_after_operations`, `top_three`, `best_activity_sum`, `max_painted_sum`                                             |
| `contestkit.constructive` | `removal_operations`, `is_consistent`                                                                                   |
| `contestkit.cli`          | `run` and `main`: solving a problem from judge-formatted input text                                                     |

Every function has a short docstring describing what it computes.

## Using it as a library

```python
from contestkit.arithmetic import can_join
from contestkit.arrays import max_pairwise_difference
from contestkit.queries import GcdSegmentTree

can_join(4)                          # True
max_pairwise_difference([1, 5, 3])   # 4

tree = GcdSegmentTree(3)
tree.update(0, 4)
tree.update(1, 6)
tree.query(0, 2)                     # 2, the gcd over the half-open range [0, 2)
```

Functions raise `ValueError` (or `IndexError` for out-of-range positions in
`GcdSegmentTree`) on input they cannot handle. Where a problem itself defines
a "no answer" result, the function returns it instead: `color_brackets` and
`avoid_square_prefixes` return `None`, and `max_and_reach` reports `-1` for a
query with no answer.

Answers in `knapsack_counts` and `count_beautiful_subsequences` are taken
modulo 998244353.

## Command line

The `contestkit` command takes a problem id and reads judge-formatted input
from a file, or from standard input when no file is given. It writes the
answers in the judge's output format:

```
contestkit --help
printf '3\n1\n2\n4\n' | contestkit 2071a
```

The second command prints `YES`, `NO` and `YES` on separate lines.

Problem ids (case does not matter):

```
abc321f 1418c 1771b 1795c 1826d 1830a 1832c 1837d 1848b 1857c 1872d 1878e
1881e 1883g 1891 1904c 1909b 1914d 1915 1919c 1931e 2050f 2069a 2069b
2069c 2071a 2071b 2075a 2075b 2085a 2085b 2090a 2090b 2092a 2092b 2092c
```

Every problem except `abc321f` starts its input with the number of test
cases. If the input is malformed or a solver rejects it, the command prints
`error: ...` to standard error and exits with status 1.

The same can be done from Python with `contestkit.cli.run(problem, text)`,
which returns the output as a string and raises `ValueError` for an unknown
problem or bad input.

## What it does not do

contestkit only solves the problems listed above. It does not fetch problem
statements, check answers against expected output, or submit solutions.