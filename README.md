# algokit

A collection of classic algorithms and data structures in plain Python, using
only the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.mathutils` | `gcd`, `lcm`, `phi`, `is_prime`, `prime_factorization`, divisor counts and sums, `ncr`/`npr`, `bin_pow`/`bin_mul`, `extended_gcd`, `find_any_solution`, base conversion, a few small geometry checks |
| `algokit.modint` | `ModInt`, integers modulo a fixed modulus (default 1 000 000 007) with `inverse` and `power` |
| `algokit.combinatorics` | `fast_power`, `inverse`, and `PowerInverse` with factorial tables for nCr/nPr modulo a prime |
| `algokit.hashing` | `StringHash`, a double polynomial hash over strings or integer sequences, 1-based positions |
| `algokit.bigint` | `BigInt`, non-negative arbitrary-size integers kept as base 10^9 limbs |
| `algokit.matrix` | `Matrix` with multiplication modulo 1 000 000 007, `identity`, `zero`, `transition`, `power`, `kth_term` |
| `algokit.sequences` | Kadane's `min_subarray_sum`/`max_subarray_sum`, Manacher's `longest_palindromic_substring`, `next_greater`, `prev_greater`, `next_smaller`, `prev_smaller` |
| `algokit.monotonic` | `MonotonicStack` and `MonotonicQueue` keeping a running aggregate (maximum by default) |
| `algokit.fenwick` | `FenwickTree`, `FenwickTree2D`, `RangeFenwickTree` |
| `algokit.grid_sums` | `PrefixSum2D` rectangle sums and `PartialSum2D` rectangle coverage counts |
| `algokit.compression` | `CoordinateCompressor` |
| `algokit.heap` | `Heap` ordered by a comparison function (max-heap by default) |
| `algokit.dsu` | `DSU`, union by size that also lists the members of each set |
| `algokit.segment_tree` | `MaxSegmentTree`, point assignment and range maximum |
| `algokit.hld` | `HLD`, heavy-light decomposition with path maximum queries |
| `algokit.lazy_segment_tree` | `LazySegmentTree` with range add and range sum |
| `algokit.hash_segment_tree` | `HashSegmentTree`, range hashes under point updates |
| `algokit.matching` | `max_matching`, Kuhn's bipartite matching |
| `algokit.shortest_paths` | `Edge`, `bellman_ford`, `longest_path`, `Dijkstra`, `floyd_warshall` |
| `algokit.graph` | `Graph` with DFS, BFS, cycle detection, degree-one peeling order and bipartiteness |
| `algokit.mst` | `Prim`, minimum (or, with `maximum=True`, maximum) spanning tree cost |
| `algokit.lca` | `LCA` and `WeightedLCA` by binary lifting |
| `algokit.geometry` | `Point`, a frozen 2D point/vector ordered by y then x |
| `algokit.convex_hull` | `convex_hull`, `orientation`, `is_collinear` |
| `algokit.cht` | `Line` and `LineContainer`, the convex hull trick (minimum by default, `maximum=True` for maximum) |
| `algokit.bst` | `BinarySearchTree`, unbalanced, with in/pre/post/level-order traversals |
| `algokit.persistent` | `PersistentSegmentTree` of sums and best prefix sums with versioned roots |

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## A few examples

```python
from algokit.mathutils import gcd, ncr, decimal_to_any_base
from algokit.fenwick import FenwickTree
from algokit.dsu import DSU
from algokit.sequences import longest_palindromic_substring
from algokit.bigint import BigInt

gcd(12, 18)                    # 6
ncr(5, 2)                      # 10
decimal_to_any_base(255, 16)   # "FF"

tree = FenwickTree(5)
tree.build([1, 2, 3, 4, 5])
tree.query(1, 3)               # 9

dsu = DSU(4)
dsu.union(1, 2)
dsu.same(1, 2)                 # True
dsu.component_count()          # 3

longest_palindromic_substring("babad")  # "bab"

str(BigInt("123456789012") * 2)         # "246913578024"
```

## Indexing conventions

- `FenwickTree`, `FenwickTree2D` and `RangeFenwickTree` take 0-based positions.
- `MaxSegmentTree`, `LazySegmentTree` and `HashSegmentTree` use positions
  1..size; `build` places `nums[i]` at position `i + 1`.
- `StringHash`, `PrefixSum2D` and `PartialSum2D` use 1-based, inclusive
  coordinates.
- `bellman_ford`, `longest_path` and `floyd_warshall` work on nodes 1..n;
  `Dijkstra`, `Graph`, `Prim`, `LCA` and `WeightedLCA` allocate nodes 0..n,
  so either numbering works; `DSU` covers `base..base + max_nodes - 1`.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
problem input from standard input or prints answers. Build the structures in
your own code and call their methods.