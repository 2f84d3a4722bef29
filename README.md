# algokit

Classic algorithms on graphs, binary trees and a day-by-day harvest
schedule. It is written in plain Python and has no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs: `algokit.graph`

`Graph(size)` is an adjacency list over the nodes `0 .. size-1`. If a node is
outside that range, `add_edge` and `neighbours` raise `IndexError`.

```python
from algokit.graph import Graph, has_directed_cycle, has_undirected_cycle

g = Graph(4)
g.add_edge(0, 1)                 # undirected by default
g.add_edge(2, 3, directed=True)
g.neighbours(0)                  # [1]
print(g.format())                # one "node->a,b," line per node
g.bfs()                          # breadth-first order of node 0's component
g.bfs_all()                      # breadth-first order over every component
g.dfs_all()                      # depth-first preorder over every component

has_directed_cycle(3, [(1, 2), (2, 3), (3, 1)])   # True; nodes are numbered 1..n
has_undirected_cycle([(0, 1), (1, 2), (2, 0)])    # True
```

The module also provides two functions that take a plain adjacency list, which is
a sequence of neighbour lists:

- `in_degrees(adjacency)` returns the in-degree of each node.
- `topological_sort_bfs(adjacency)` returns the nodes in Kahn order. If the graph
  has a cycle, the result is shorter than the graph.

## Shortest paths: `algokit.shortest_paths`

`WeightedGraph(size, directed=False)` holds weighted edges over `0 .. size-1`.
Undirected graphs store each edge in both directions.

```python
from algokit.shortest_paths import WeightedGraph

dag = WeightedGraph(6, directed=True)
dag.add_edge(0, 1, 5)
dag.add_edge(1, 2, 2)
dag.add_edge(2, 4, -3)
dag.topological_order()   # reverse DFS post-order over the nodes with edges
dag.dag_distances(1)      # {node: distance}; math.inf if unreachable

roads = WeightedGraph(3)
roads.add_edge(0, 1, 4)
roads.add_edge(1, 2, 1)
roads.dijkstra(0)         # [0, 4, 5]
```

`dag_distances` accepts negative weights but expects an acyclic graph.
`dijkstra` expects non-negative weights. Both functions return `math.inf` for
unreachable nodes. `format()` renders the graph as `u->[v,w]; ...` lines.

## Binary trees: `algokit.tree`

Trees are made of `Node(data, left, right)`. `build_tree` builds a tree from a
level-order string, with `N` marking a missing child:

```python
from algokit.tree import build_tree, vertical_order, top_view, left_view, diameter

root = build_tree("1 2 3 4 5 N 6")
vertical_order(root)   # columns left to right, top to bottom within each
top_view(root)         # topmost value of each column
left_view(root)        # leftmost value of each level
diameter(root)         # nodes on the longest path between two nodes
```

The module also provides these functions:

- `diagonal(root)` returns values grouped by column, then by level.
- `sum_of_longest_root_to_leaf_path(root)` returns the sum along the longest
  root-to-leaf path. If several paths share that length, the largest sum wins.
- `lca(root, n1, n2)` returns the lowest common ancestor node of two values.
- `count_paths_with_sum(root, k)` counts the downward paths that sum to `k`.
- `kth_ancestor(root, k, node)` returns the value of the k-th ancestor, or -1
  if there is none.
- `max_non_adjacent_sum(root)` returns the largest sum that never takes a parent
  together with its child.
- `height(root)` returns the number of nodes on the longest root-to-leaf path.

## Harvest scheduling: `algokit.harvest`

A `Plant(quantity, ripens, value)` is a batch of `quantity` seeds, each worth
`value`. It can be picked on any day after day `ripens`. Days are numbered
from 1.

- `max_harvest(days, capacity, plants)` picks up to `capacity` seeds a day, most
  valuable first, and returns the total value.
- `best_single_picks(days, plants)` takes at most one ripe plant a day, the most
  valuable first, and returns the sum of their values.

## Command-line tools

```
algokit-graph [FILE]
```

This reads a node count, an edge count and that many `u v` pairs from FILE, or
from standard input if no FILE is given. It adds each pair as an undirected
edge. It prints the adjacency list, then the breadth-first order over all
components.

```
algokit-harvest [--single] [FILE]
```

This reads a number of test cases. Each case starts with its number of days,
number of plants and daily capacity, followed by one `quantity ripens value`
triple per plant. For each case it prints `Case #i: total`. With `--single`,
it uses `best_single_picks`, which ignores the capacity.

Both commands exit with status 1 and print a message to standard error when the
input is malformed.

## What it does not do

The tree and shortest-path functions are available only as a library. The
package has no command for them and does not read trees or weighted graphs
interactively.