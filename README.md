# algodrills

A collection of classic contest-programming exercises. Each one is solved as a
small Python function that takes ordinary values (lists, tuples, strings and
integers) and returns its answer. The problems are grouped by technique:

| Module | Contents |
| --- | --- |
| `algodrills.brute_force` | `subset_sum_bits`, `subset_sum_recursive`, `count_lakes`, `maze_shortest_path` |
| `algodrills.greedy` | `best_cow_line`, `fence_repair`, `coin_count`, `interval_scheduling`, `sarumans_army` |
| `algodrills.data_structure` | `expedition` (refuelling with a heap), `food_chain` (union-find) |
| `algodrills.dsu` | `DisjointSetUnion`, a union-find structure with union by size |
| `algodrills.dp` | `unbounded_knapsack`, `zero_one_knapsack`, `zero_one_knapsack_by_value`, `longest_common_subsequence`, `longest_increasing_subsequence`, `multiset_combinations`, `partition_count`, `bounded_subset_sum` |
| `algodrills.gcj` | `bribe_prisoners`, `crazy_rows`, `millionaire`, `minimum_scalar_product` |
| `algodrills.graph` | `conscription`, `layout` (difference constraints), `is_bipartite`, `second_shortest_path` |
| `algodrills.number_theory` | `is_prime`, `pow_mod`, `is_carmichael`, `Sieve`, `SegmentSieve`, `gcd`, `lattice_points_on_segment`, `extgcd`, `sugoroku` |
| `algodrills.cli` | `main`, the command-line entry point |

The package has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algodrills.greedy import best_cow_line, fence_repair
from algodrills.number_theory import Sieve, is_prime
from algodrills.dsu import DisjointSetUnion

best_cow_line("ACDBCB")      # "ABCBCD"
fence_repair([8, 5, 8])      # 34
is_prime(97)                 # True
Sieve(10).prime_count(10)    # 4

dsu = DisjointSetUnion(4)
dsu.unite(0, 1)
dsu.is_same(0, 1)            # True
dsu.size(0)                  # 2
dsu.count()                  # 3
```

A few conventions hold across the modules:

- Graph and puzzle inputs that number things (vertices, animals, prisoners'
  cells, cows) are 1-based, as they are stated in the problems.
- Where a problem can have no answer, the function returns `None`: an
  unreachable goal in `maze_shortest_path`, an unreachable destination in
  `expedition`, an unbounded distance in `layout`, no second path in
  `second_shortest_path`, an unreachable square in `sugoroku`.
- Invalid input, such as a negative capacity or modulus, a maze without `S`
  or `G`, or constraints that `layout` or `crazy_rows` cannot satisfy, raises
  `ValueError`.
- `is_prime` is plain trial division and reports `True` for 0 and 1, since
  neither has a divisor between 2 and its square root; `Sieve` and
  `SegmentSieve` mark 0 and 1 as not prime.

## Command line

Three of the exercises can be run from the shell. Each reads
whitespace-separated integers from standard input and prints its answer:

```
algodrills --help
```

| Command | Input | Output |
| --- | --- | --- |
| `algodrills subset-sum` | n, then n numbers, then the target sum | `Yes` or `No`, once from the bit-mask search and once from the recursive search |
| `algodrills scheduling` | n, then n pairs of start and end times | the number of jobs chosen |
| `algodrills sugoroku` | the two step lengths a and b | forward a, forward b, back a, back b on one line, or `-1` |

```
$ echo "4 1 2 4 7 13" | algodrills subset-sum
Yes
Yes
$ echo "5 1 3 2 5 4 7 6 9 8 10" | algodrills scheduling
3
$ echo "4 11" | algodrills sugoroku
3 0 0 1
```

When the input ends early or holds something that is not an integer, the
command prints `algodrills: <reason>` on standard error and exits with
status 1.

## What the command line does not cover

The other exercises are available only as library functions: the command
line has no subcommands for them, and it reads problems only from standard
input, never from files.