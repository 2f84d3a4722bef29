"""Graph traversal, shortest paths, binary-tree and harvest-scheduling algorithms."""

__version__ = "0.1.0"
__all__ = ["graph", "shortest_paths", "tree", "harvest"]