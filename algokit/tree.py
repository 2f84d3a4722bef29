"""Binary trees: level-order construction, views, paths and ancestors."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(text: str) -> Node | None:
    """Build a tree from space-separated level-order values, ``N`` meaning no node."""
    tokens = text.split()
    if not tokens or tokens[0].startswith("N"):
        return None

    values = iter(tokens[1:])
    root = Node(int(tokens[0]))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(values, None)
        if left is None:
            break
        if left != "N":
            node.left = Node(int(left))
            queue.append(node.left)
        right = next(values, None)
        if right is None:
            break
        if right != "N":
            node.right = Node(int(right))
            queue.append(node.right)
    return root


def _level_order(root: Node | None) -> Iterator[tuple[Node, int, int]]:
    """Yield ``(node, column, level)`` in breadth-first order."""
    if root is None:
        return
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, level = queue.popleft()
        yield node, column, level
        if node.left is not None:
            queue.append((node.left, column - 1, level + 1))
        if node.right is not None:
            queue.append((node.right, column + 1, level + 1))


def vertical_order(root: Node | None) -> list[int]:
    """Values column by column from left to right, top to bottom within a column."""
    columns: dict[int, list[int]] = defaultdict(list)
    for node, column, _ in _level_order(root):
        columns[column].append(node.data)
    return [value for column in sorted(columns) for value in columns[column]]


def top_view(root: Node | None) -> list[int]:
    """The topmost value of every column, from left to right."""
    first: dict[int, int] = {}
    for node, column, _ in _level_order(root):
        first.setdefault(column, node.data)
    return [first[column] for column in sorted(first)]


def left_view(root: Node | None) -> list[int]:
    """The leftmost value of every level, from the root down."""
    first: dict[int, int] = {}
    for node, _, level in _level_order(root):
        first.setdefault(level, node.data)
    return [first[level] for level in sorted(first)]


def diagonal(root: Node | None) -> list[int]:
    """Values grouped by column, then by level, in breadth-first order within each."""
    cells: dict[tuple[int, int], list[int]] = defaultdict(list)
    for node, column, level in _level_order(root):
        cells[column, level].append(node.data)
    return [value for key in sorted(cells) for value in cells[key]]


def sum_of_longest_root_to_leaf_path(root: Node | None) -> int:
    """Sum of the longest root-to-leaf path; the larger sum wins among equals."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        length, total = max(walk(node.left), walk(node.right))
        return length + 1, total + node.data

    return walk(root)[1]


def lca(root: Node | None, n1: int, n2: int) -> Node | None:
    """Lowest common ancestor of the nodes holding ``n1`` and ``n2``."""
    if root is None:
        return None
    if root.data in (n1, n2):
        return root
    left = lca(root.left, n1, n2)
    right = lca(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def count_paths_with_sum(root: Node | None, k: int) -> int:
    """Count the downward paths whose values add up to ``k``."""
    path: list[int] = []

    def walk(node: Node | None) -> int:
        if node is None:
            return 0
        path.append(node.data)
        count = walk(node.left) + walk(node.right)
        running = 0
        for value in reversed(path):
            running += value
            if running == k:
                count += 1
        path.pop()
        return count

    return walk(root)


def _path_to(root: Node | None, target: int) -> list[Node] | None:
    if root is None:
        return None
    if root.data == target:
        return [root]
    for child in (root.left, root.right):
        below = _path_to(child, target)
        if below is not None:
            return [root, *below]
    return None


def kth_ancestor(root: Node | None, k: int, node: int) -> int:
    """Value of the ``k``-th ancestor of ``node``, or -1 if there is none."""
    path = _path_to(root, node)
    steps = max(k, 1)
    if path is None or steps >= len(path):
        return -1
    return path[-1 - steps].data


def max_non_adjacent_sum(root: Node | None) -> int:
    """Largest sum of values in which no parent is taken with its child."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_with, left_without = walk(node.left)
        right_with, right_without = walk(node.right)
        with_node = node.data + left_without + right_without
        without_node = max(left_with, left_without) + max(right_with, right_without)
        return with_node, without_node

    return max(walk(root))


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def diameter(root: Node | None) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def walk(node: Node | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_best = walk(node.left)
        right_height, right_best = walk(node.right)
        through = left_height + right_height + 1
        return (
            max(left_height, right_height) + 1,
            max(through, left_best, right_best),
        )

    return walk(root)[1]