"""Unweighted graphs: traversals, topological sort and cycle detection."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class Graph:
    """An adjacency-list graph whose nodes are the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"graph size must be non-negative, got {size}")
        self.size = size
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} is outside 0..{self.size - 1}")

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``; undirected edges go both ways."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if not directed:
            self._adjacency[v].append(u)

    def neighbours(self, node: int) -> list[int]:
        """Return the nodes adjacent to ``node`` in insertion order."""
        self._check(node)
        return list(self._adjacency[node])

    def format(self) -> str:
        """Render the adjacency list, one ``node->a,b,`` line per node."""
        return "\n".join(
            f"{node}->" + "".join(f"{other}," for other in adjacent)
            for node, adjacent in enumerate(self._adjacency)
        )

    def _bfs_from(self, start: int, visited: list[bool]) -> Iterator[int]:
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            yield node
            for other in self._adjacency[node]:
                if not visited[other]:
                    visited[other] = True
                    queue.append(other)

    def bfs(self) -> list[int]:
        """Breadth-first order of the component that holds node 0."""
        if self.size == 0:
            return []
        return list(self._bfs_from(0, [False] * self.size))

    def bfs_all(self) -> list[int]:
        """Breadth-first order covering every component, lowest start first."""
        visited = [False] * self.size
        order: list[int] = []
        for start in range(self.size):
            if not visited[start]:
                order.extend(self._bfs_from(start, visited))
        return order

    def dfs_all(self) -> list[int]:
        """Depth-first preorder covering every component, lowest start first."""
        visited = [False] * self.size
        order: list[int] = []
        for start in range(self.size):
            if visited[start]:
                continue
            visited[start] = True
            order.append(start)
            stack = [iter(self._adjacency[start])]
            while stack:
                for other in stack[-1]:
                    if not visited[other]:
                        visited[other] = True
                        order.append(other)
                        stack.append(iter(self._adjacency[other]))
                        break
                else:
                    stack.pop()
        return order


def in_degrees(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Count the incoming edges of every node of an adjacency list."""
    degrees = [0] * len(adjacency)
    for adjacent in adjacency:
        for other in adjacent:
            degrees[other] += 1
    return degrees


def topological_sort_bfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's algorithm; the result is shorter than the graph if it has a cycle."""
    degrees = in_degrees(adjacency)
    queue = deque(node for node, degree in enumerate(degrees) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for other in adjacency[node]:
            degrees[other] -= 1
            if degrees[other] == 0:
                queue.append(other)
    return order


def has_directed_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the directed graph on nodes ``1 .. n`` has a cycle."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        for node in (u, v):
            if not 1 <= node <= n:
                raise IndexError(f"node {node} is outside 1..{n}")
        adjacency[u - 1].append(v - 1)
    return len(topological_sort_bfs(adjacency)) != n


def has_undirected_cycle(edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the undirected graph given by its edges has a cycle."""
    adjacency: dict[int, list[int]] = {}
    for u, v in edges:
        adjacency.setdefault(u, []).append(v)
        adjacency.setdefault(v, []).append(u)

    visited: set[int] = set()
    for start in adjacency:
        if start in visited:
            continue
        visited.add(start)
        queue: deque[tuple[int, int | None]] = deque([(start, None)])
        while queue:
            node, parent = queue.popleft()
            for other in adjacency[node]:
                if other not in visited:
                    visited.add(other)
                    queue.append((other, node))
                elif other != parent:
                    return True
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n m`` and ``m`` edges, print the graph and its BFS order."""
    parser = argparse.ArgumentParser(
        description="Print an undirected graph and its breadth-first order."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file holding node count, edge count and edges (default: stdin)",
    )
    args = parser.parse_args(argv)
    with args.input as stream:
        text = stream.read()

    try:
        numbers = [int(token) for token in text.split()]
        n, m, *rest = numbers
        if len(rest) < 2 * m:
            raise ValueError(f"expected {m} edges, got {len(rest) // 2}")
        graph = Graph(n)
        for u, v in zip(rest[0 : 2 * m : 2], rest[1 : 2 * m : 2]):
            graph.add_edge(u, v)
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(graph.format())
    print(" ".join(str(node) for node in graph.bfs_all()))
    return 0


if __name__ == "__main__":
    sys.exit(main())