# algokit

A collection of classic algorithms and data structures in plain Python, with
no third-party runtime dependencies.

## Install

```
pip install .
pip install ".[test]"   # with the test tools
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.numtheory` | `is_prime` (deterministic Miller–Rabin for 64-bit inputs), `pollard_rho`, `ext_gcd`, `crt_coprime`, `crt_merge`, `mod_div`, `josephus`, `josephus_every_second` |
| `algokit.convolution` | `fft`, `multiply_real`, `multiply_mod` (any modulus), `ntt`, `multiply_ntt` and `ntt_classic` (modulo 998244353), `xor_convolution`, `min_plus_convex` |
| `algokit.linalg` | `Matrix` (modular, with `power` and `det`), `BitMatrix` (GF(2)), `lagrange_interpolate`, `ConsecutiveLagrange`, `berlekamp_massey` |
| `algokit.polynomial` | `Poly` modulo 998244353 with `+`, `-`, `*`, `derivative`, `integral`, `inverse`, `log`, `exp`, `pow` |
| `algokit.bits` | `XorBasis`, `subset_sums` (sum over submasks), `enumerate_submasks` |
| `algokit.rangequery` | `SparseTable` (range minimum), `FenwickTree` (with `kth`) |
| `algokit.strings` | `RollingHash`, `prefix_function`, `z_function`, `longest_palindrome` (Manacher), `min_rotation` |
| `algokit.suffix_array` | `SuffixArray` (`sa`, `lcp`, `pos`, `get_lcp`, `substring_cmp`, `left_right_lcp`), `kth_distinct_substring` |
| `algokit.treap` | implicit-key treap: `TreapNode`, `build`, `merge`, `split`, `cut`, `size`, `to_list` |
| `algokit.trie` | `BinaryTrie` for maximum XOR queries |
| `algokit.dp` | `count_no_adjacent_equal`, `count_in_range` (digit DP), `tree_knapsack` |
| `algokit.geometry` | `Point`, `Line`, `Polygon` (convex hull, point-in-polygon, convex hull queries), `halfplane_intersection`, and the predicates `sign`, `ori`, `between`, `segments_intersect`, `arg`, `abs2` |
| `algokit.planar` | `PlanarGraph.enumerate_faces` (twice the area of each bounded face) |
| `algokit.flow` | `Dinic` (max flow and `min_cut`), `MinCostFlow` |
| `algokit.matching` | `BipartiteMatching` (with `min_vertex_cover`), `KuhnMunkres` (maximum-weight assignment) |
| `algokit.tree` | `Tree` (binary-lifting `jump` and `lca`), `HeavyLight`, `DominatorTree` |
| `algokit.connectivity` | `EdgeBCC` (bridges and 2-edge-connected components), `vertex_bcc`, `articulation_points`, `count_c3_c4` |

## Examples

```python
from algokit.numtheory import is_prime, crt_merge
from algokit.convolution import multiply_ntt
from algokit.strings import prefix_function
from algokit.flow import Dinic

is_prime(998244353)                  # True
crt_merge(2, 3, 3, 5)                # (8, 15)
multiply_ntt([1, 1], [1, 1])         # [1, 2, 1]
prefix_function("abacaba")           # [0, 0, 1, 0, 1, 2, 3]

g = Dinic(4)
g.add_edge(0, 1, 3)
g.add_edge(1, 3, 2)
g.add_edge(0, 2, 2)
g.add_edge(2, 3, 3)
g.max_flow(0, 3)                     # 4
```

Vertices and positions are 0-based unless a docstring says otherwise (the
Fenwick tree and the treap count from 1). Whether a range is half-open or
inclusive is stated in each function's docstring. Invalid arguments raise
`ValueError` or `IndexError`; `crt_merge` returns `None` for an inconsistent
pair of congruences.

## What is not included

The package has no segment trees (lazy range add/assign, Li Chao, persistent),
no persistent disjoint set, no strongly connected component or 2-SAT solver,
and no tree isomorphism test. It is a library only: there is no command-line
program.

## Running the tests

```
pytest
```