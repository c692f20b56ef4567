"""Binary tree and binary search tree algorithms."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    val: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[Node]:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = Node(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = Node(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def _postorder(root: Optional[Node]) -> Iterator[int]:
    if root is None:
        return
    yield from _postorder(root.left)
    yield from _postorder(root.right)
    yield root.val


def postorder(root: Optional[Node]) -> list[int]:
    """Return the values in left, right, root order."""
    return list(_postorder(root))


def greater_sum(root: Optional[Node]) -> Optional[Node]:
    """Replace every value with itself plus all greater values of the BST, in place."""
    running = 0

    def visit(node: Optional[Node]) -> None:
        nonlocal running
        if node is None:
            return
        visit(node.right)
        node.val += running
        running = node.val
        visit(node.left)

    visit(root)
    return root


def search_bst(root: Optional[Node], val: int) -> Optional[Node]:
    """Return the node holding val in a BST, or None."""
    node = root
    while node is not None:
        if node.val == val:
            return node
        node = node.left if node.val > val else node.right
    return None


def check_height(root: Optional[Node]) -> int:
    """Return the height of a balanced tree, or -1 if it is not balanced."""
    if root is None:
        return 0
    left = check_height(root.left)
    if left == -1:
        return -1
    right = check_height(root.right)
    if right == -1:
        return -1
    if abs(left - right) > 1:
        return -1
    return max(left, right) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """Tell whether no node's subtrees differ in height by more than one."""
    return check_height(root) != -1


def _grouped_bfs(root: Optional[Node], left_step: int, right_step: int) -> list[list[int]]:
    if root is None:
        return []
    groups: defaultdict[int, list[int]] = defaultdict(list)
    queue = deque([(root, 0)])
    while queue:
        node, key = queue.popleft()
        groups[key].append(node.val)
        if node.left:
            queue.append((node.left, key + left_step))
        if node.right:
            queue.append((node.right, key + right_step))
    return [groups[key] for key in sorted(groups)]


def diagonal_traversal(root: Optional[Node]) -> list[list[int]]:
    """Group values by diagonal; right children stay on their parent's diagonal."""
    return _grouped_bfs(root, 1, 0)


def vertical_order_traversal(root: Optional[Node]) -> list[list[int]]:
    """Group values by horizontal distance from the root, leftmost column first."""
    return _grouped_bfs(root, -1, 1)


def height(root: Optional[Node]) -> int:
    """Return the number of levels in the tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: Optional[Node]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def depth(node: Optional[Node]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def level_order(root: Optional[Node]) -> list[int]:
    """Return the values in breadth-first order."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return result


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def right_side_view(root: Optional[Node]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    view: list[int] = []

    def visit(node: Optional[Node], level: int) -> None:
        if node is None:
            return
        if level == len(view):
            view.append(node.val)
        visit(node.right, level + 1)
        visit(node.left, level + 1)

    visit(root, 0)
    return view