"""Weighted graphs and single-source shortest paths."""

from __future__ import annotations

import heapq
import math


class WeightedGraph:
    """A weighted graph on nodes ``0 .. size - 1``, directed or undirected."""

    def __init__(self, size: int, directed: bool = False) -> None:
        if size < 0:
            raise ValueError(f"graph size must be non-negative, got {size}")
        self.size = size
        self.directed = directed
        self._adjacency: dict[int, list[tuple[int, int]]] = {}

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} is outside 0..{self.size - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge of the given weight; undirected graphs add it both ways."""
        self._check(u)
        self._check(v)
        self._adjacency.setdefault(u, []).append((v, weight))
        if not self.directed:
            self._adjacency.setdefault(v, []).append((u, weight))

    def format(self) -> str:
        """Render the nodes that have edges as ``u->[v,w]; ...`` lines."""
        return "\n".join(
            f"{node}->" + "".join(f"[{other},{weight}]; " for other, weight in edges)
            for node, edges in self._adjacency.items()
        )

    def topological_order(self) -> list[int]:
        """Reverse DFS post-order over the nodes that have edges."""
        visited = [False] * self.size
        postorder: list[int] = []
        for start in self._adjacency:
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency.get(start, ())))]
            while stack:
                node, edges = stack[-1]
                for other, _ in edges:
                    if not visited[other]:
                        visited[other] = True
                        stack.append((other, iter(self._adjacency.get(other, ()))))
                        break
                else:
                    stack.pop()
                    postorder.append(node)
        postorder.reverse()
        return postorder

    def dag_distances(self, source: int) -> dict[int, float]:
        """Shortest distances from ``source`` in a DAG; ``math.inf`` if unreachable.

        Negative weights are allowed.
        """
        self._check(source)
        distance: dict[int, float] = {node: math.inf for node in range(self.size)}
        distance[source] = 0
        for node in self.topological_order():
            if distance[node] == math.inf:
                continue
            for other, weight in self._adjacency.get(node, ()):
                candidate = distance[node] + weight
                if candidate < distance[other]:
                    distance[other] = candidate
        return distance

    def dijkstra(self, source: int) -> list[float]:
        """Shortest distances from ``source``; ``math.inf`` for unreachable nodes."""
        self._check(source)
        distance: list[float] = [math.inf] * self.size
        distance[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            current, node = heapq.heappop(heap)
            if current > distance[node]:
                continue
            for other, weight in self._adjacency.get(node, ()):
                candidate = current + weight
                if candidate < distance[other]:
                    distance[other] = candidate
                    heapq.heappush(heap, (candidate, other))
        return distance