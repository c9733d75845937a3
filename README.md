# algolib

Graph algorithms, bipartite matchings, matroid intersection and number theory,
written in plain Python with no runtime dependencies. Vertices are numbered from
zero throughout, and indices out of range raise `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs and trees

- `algolib.scc`: `StronglyConnectedComponents`. Add directed edges with `add`, then
  `solve()` (Tarjan) or `kosaraju()` returns a component index for every vertex.
  With `solve()`, a component reachable from another never has a smaller index.
- `algolib.two_sat`: `TwoSat`. `add(v, value_v)` forces a variable;
  `add(v, value_v, u, value_u)` adds the clause "v is value_v or u is value_u".
  `solve()` returns a satisfying list of booleans, or an empty list; `any()` says
  whether one exists.
- `algolib.dominator_tree`: `DominatorTree.solve(s)` returns the immediate dominator of
  every vertex; `s` maps to itself and unreachable vertices to `-1`.
- `algolib.prufer`: `build_prufer_code(edges)` and `decode_prufer_code(code)`.
- `algolib.chromatic`: `chromatic_number(n, edges)` gives the chromatic number of
  every vertex subset, indexed by bitmask; `find_coloring(n, edges)` gives an
  optimal colouring.
- `algolib.link_cut`: `LinkCut`, a link-cut tree with `link`, `cut`, `connected`,
  `set_root`, `parent`, `distance` and `lca`. `add()` appends a new vertex.
- `algolib.tree_bfs_ordering`: `TreeBfsOrdering`. After `build(root)`,
  `range(v, dist)` gives the slice of `order` holding the vertices of `v`'s subtree
  at depth `dist` below it, and `ranges(v, dist)` gives disjoint slices covering
  every vertex within `dist` of `v`.
- `algolib.graph`: the abstract `Graph` (an `Edge` list plus per-vertex edge indices)
  and `DirectedGraph`, with `dijkstra`, `bfs` (unreachable vertices get `inf`),
  `topsort` (empty on a cycle), `order`, `scc`, `build_dag` (condensation),
  `eulerian_path`, `build_path`, `reversed`/`reverse` and `pop`.
- `algolib.directed_mst`: `DirectedMinimumSpanningTree.solve(root)` returns the total
  cost and the parent of each vertex (the root is its own parent); it raises
  `ValueError` when a vertex cannot be reached from the root.

## Matchings

- `algolib.bipartite_matching`: `BipartiteMatching(n, m)`. `solve()` returns the
  size of a maximum matching and fills `left_match` and `right_match`;
  `minimum_vertex_cover()` returns the left and right vertices of a minimum cover.
  Both take `shuffle=True` to randomise the search order.
- `algolib.hungarian`: `Hungarian(matrix)` or `Hungarian.filled(n, value)`; the
  matrix is editable through indexing. `min_cost()` returns the cheapest assignment
  cost and fills `row_match` and `col_match`.
- `algolib.vertex_weighted_matching`: `VertexWeightedMatching(n, m)`, where an edge
  `(v, u)` costs `left_weights[v] + right_weights[u]`. `solve()` returns the size and
  cost of a maximum matching of minimum cost and fills `left_match` and
  `right_match`.

## Mathematics

- `algolib.modint`: `ModInt`, residues modulo 998244353 by default;
  `ModInt.with_modulus(mod)` gives the class for another modulus. Supports `+ - * /`,
  `**` (negative powers via the inverse), comparison, `parse`, `inv` and
  `primitive_root`. `normalize(value, mod)` reduces into `[0, mod)`.
- `algolib.combinatorics`: `Combinatorics(mod)` with lazily grown `fact`, `ifact`,
  `inv`, and `choose`, `choose_slow` (for huge `n`) and `catalan(n, m=None)`.
- `algolib.number_theory`: `extgcd(a, b)`, `find_square_root(a, p)` (returns `None`
  for a non-residue) and `gray_code(n)`.
- `algolib.factorizer`: `is_prime` (deterministic Miller–Rabin below 2**64),
  `find_any_nontrivial_divisor` (Pollard's rho), `prime_factors_with_duplicates`,
  `prime_factors` and `all_factors`.
- `algolib.sieve`: `Sieve(n)`, a linear sieve with `primes`, `smallest_factor`,
  `is_prime`, `prime_factors` and `all_factors`; values above `n` raise `ValueError`.
- `algolib.mod_of_linear`: `floor_sum`, `mod_sum`, `count_remainders`,
  `min_of_mod_of_linear` and `max_of_mod_of_linear` for `(k * x + b) mod m`.
- `algolib.linear_algebra`: `Gauss(n, is_zero)` for `n` equations
  `sum(a[i][j] * x[j]) + a[i][n] == 0`, with `transform()` and `solutions()`; and
  `Matrix`, with `zeros`, `identity`, `shape`, `*` and `power`.
- `algolib.matroid`: `matroid_intersection` returns a largest set independent in two
  matroids; `weighted_matroid_intersection` returns maximum-weight common independent
  sets of every size 0, 1, 2, ... (items need a `weight`). A matroid object provides
  `add(item)` and `independent_with(item)` and is copied with `deepcopy`. Ready-made
  ones: `ColorfulMatroid` (items with `color`), `LinearMatroid` (items with an integer
  `value`, over GF(2)) and `GraphMatroid(n)` (items with endpoints `v` and `u`).
- `algolib.prefix_sums`: `PrefixSums(values).query(l, r)` sums `values[l:r]`.

## Examples

```python
from algolib.graph import DirectedGraph

graph = DirectedGraph(4)
graph.add(0, 1, 5)
graph.add(0, 2, 1)
graph.add(2, 1, 2)
print(graph.dijkstra([0]))  # [0, 3, 1, inf]
```

```python
from algolib.hungarian import Hungarian

print(Hungarian([[4, 1, 3], [2, 0, 5], [3, 2, 2]]).min_cost())  # 5
```

```python
from algolib.factorizer import prime_factors
from algolib.combinatorics import Combinatorics

print(prime_factors(360))              # [(2, 3), (3, 2), (5, 1)]
print(Combinatorics().choose(5, 2))    # 10
```

## What is not included

The package has no network flow algorithms (maximum flow, minimum cut, minimum cost
flow), no matching for general non-bipartite graphs, no disjoint-set union structure
of its own, and no rooted-forest or LCA helper beyond `LinkCut.lca`. There is no
command-line tool; everything is used as a library.