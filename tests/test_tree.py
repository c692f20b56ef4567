import pytest

from algodrills.tree import (
    Node,
    build_tree,
    check_height,
    count_nodes,
    diagonal_traversal,
    diameter,
    greater_sum,
    height,
    is_balanced,
    level_order,
    postorder,
    right_side_view,
    search_bst,
    vertical_order_traversal,
)


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.val] + _inorder(node.right)


def _complete(n):
    return build_tree(list(range(1, n + 1)))


def _source_view_tree():
    nodes = {i: Node(i) for i in range(1, 10)}
    nodes[1].left, nodes[1].right = nodes[2], nodes[3]
    nodes[2].left, nodes[2].right = nodes[4], nodes[5]
    nodes[3].left, nodes[3].right = nodes[6], nodes[7]
    nodes[4].left = nodes[8]
    nodes[8].right = nodes[9]
    return nodes[1]


def _chain(n):
    root = Node(1)
    node = root
    for v in range(2, n + 1):
        node.left = Node(v)
        node = node.left
    return root


def test_level_order_round_trip():
    values = list(range(1, 8))
    assert level_order(build_tree(values)) == values


def test_build_tree_with_gaps():
    values = [1, 2, 3, None, 4, None, 5]
    root = build_tree(values)
    present = [v for v in values if v is not None]
    assert level_order(root) == present
    assert count_nodes(root) == len(present)
    assert root.left.left is None
    assert root.left.right.val == 4


def test_empty_tree():
    assert build_tree([]) is None
    assert level_order(None) == []
    assert vertical_order_traversal(None) == []
    assert diagonal_traversal(None) == []
    assert count_nodes(None) == height(None) == diameter(None) == 0


def test_postorder_source_tree():
    assert postorder(_complete(7)) == [4, 5, 2, 6, 7, 3, 1]


def test_postorder_invariants():
    values = [5, 3, 8, None, 4, 7, 9]
    result = postorder(build_tree(values))
    assert sorted(result) == sorted(v for v in values if v is not None)
    assert result[-1] == values[0]


@pytest.mark.parametrize("levels", [1, 2, 3, 4, 5])
def test_height_of_complete_tree(levels):
    assert height(_complete(2**levels - 1)) == levels


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_diameter_of_chain(n):
    assert diameter(_chain(n)) == n - 1
    assert height(_chain(n)) == n


def test_diameter_bounds():
    root = _source_view_tree()
    h = height(root)
    d = diameter(root)
    assert h - 1 <= d <= 2 * (h - 1)


def test_balanced_complete_tree():
    root = _complete(7)
    assert is_balanced(root)
    assert check_height(root) == height(root)


def test_unbalanced_source_tree():
    a, b, c, d = Node(1), Node(2), Node(3), Node(4)
    a.left, a.right = b, c
    b.left, b.right = d, Node(5)
    d.left, d.right = Node(6), Node(7)
    assert check_height(a) == -1
    assert not is_balanced(a)


def test_search_bst():
    values = [4, 2, 6, 1, 3, 5, 7]
    root = build_tree(values)
    for v in values:
        found = search_bst(root, v)
        assert found.val == v
    assert search_bst(root, 42) is None
    assert search_bst(None, 4) is None


def test_greater_sum_invariants():
    values = [4, 2, 6, 1, 3, 5, 7]
    root = greater_sum(build_tree(values))
    order = _inorder(root)
    assert order[0] == sum(values)
    assert order[-1] == max(values)
    assert all(x > y for x, y in zip(order, order[1:]))


def test_diagonal_traversal_invariants():
    root = _complete(7)
    groups = diagonal_traversal(root)
    assert sorted(v for g in groups for v in g) == list(range(1, 8))
    spine = []
    node = root
    while node:
        spine.append(node.val)
        node = node.right
    assert groups[0] == spine


def test_vertical_order_source_tree():
    assert vertical_order_traversal(_complete(7)) == [[4], [2], [1, 5, 6], [3], [7]]


def test_vertical_order_chain_columns():
    groups = vertical_order_traversal(_chain(4))
    assert groups == [[v] for v in range(4, 0, -1)]


def test_right_side_view_source_tree():
    assert right_side_view(_source_view_tree()) == [1, 3, 7, 8, 9]


def test_right_side_view_invariants():
    root = build_tree([1, 2, 3, 4, None, None, None, 5])
    view = right_side_view(root)
    assert len(view) == height(root)
    assert view[0] == root.val