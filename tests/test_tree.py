import pytest

from huffpack.minheap import MinHeap, Node
from huffpack.tree import HuffmanTree


def _heap(keys):
    return MinHeap(Node(key=k, symbol=i) for i, k in enumerate(keys))


def _leaves(node):
    if node is None:
        return []
    if node.is_leaf():
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def test_root_key_is_total_weight():
    keys = [5, 9, 12, 13, 16, 45]
    tree = HuffmanTree(_heap(keys))
    assert tree.root.key == sum(keys)
    assert tree.leaf_count == len(keys)


def test_heap_is_consumed():
    heap = _heap([3, 1, 4, 1, 5])
    HuffmanTree(heap)
    assert len(heap) == 0


def test_tree_is_full_and_keeps_all_leaves():
    keys = [5, 9, 12, 13, 16, 45]
    tree = HuffmanTree(_heap(keys))
    assert len(tree.in_order()) == 2 * len(keys) - 1
    assert sorted(n.key for n in _leaves(tree.root)) == sorted(keys)


def test_internal_key_is_sum_of_children():
    tree = HuffmanTree(_heap([2, 7, 1, 8, 2, 8]))

    def check(node):
        if node.is_leaf():
            return
        assert node.key == node.left.key + node.right.key
        assert node.left.parent is node
        assert node.right.parent is node
        check(node.left)
        check(node.right)

    check(tree.root)
    assert tree.root.parent is None


def test_in_order_two_leaves():
    tree = HuffmanTree(_heap([2, 1]))
    assert tree.in_order() == [1, 3, 2]


def test_render_single_node():
    tree = HuffmanTree(_heap([7]))
    assert tree.render() == "└──7\n"


def test_render_two_leaves():
    tree = HuffmanTree(_heap([1, 2]))
    assert tree.render() == "└──3\n    ├──2d\n    └──1e\n"


def test_empty_heap_gives_empty_tree():
    tree = HuffmanTree(MinHeap())
    assert tree.root is None
    assert tree.leaf_count == 0
    assert tree.in_order() == []
    assert tree.render() == ""


@pytest.mark.parametrize("keys", [[1], [4, 4], [1, 2, 3, 4, 5, 6, 7]])
def test_clear(keys):
    tree = HuffmanTree(_heap(keys))
    tree.clear()
    assert tree.root is None
    assert tree.in_order() == []
    assert tree.leaf_count == 0