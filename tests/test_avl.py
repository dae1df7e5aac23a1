from typing import Optional

import pytest

from treeindex.avl import AVLTree, balance_factor, rebalance
from treeindex.nodes import Node

FRUITS = [
    ("banana", 1),
    ("morango", 2),
    ("morango", 3),
    ("cereja", 3),
    ("abacaxi", 4),
    ("uva", 5),
    ("laranja", 6),
    ("manga", 7),
    ("kiwi", 8),
    ("pera", 9),
    ("ameixa", 10),
    ("figo", 11),
    ("goiaba", 12),
    ("limao", 13),
    ("melancia", 14),
    ("pessego", 15),
    ("tangerina", 16),
]


def _checked_height(node: Optional[Node]) -> int:
    """Real height of a subtree; fails the test on any unbalanced node."""
    if node is None:
        return -1
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    assert abs(left - right) <= 1, f"unbalanced at {node.word}"
    assert node.height == max(left, right) + 1
    return max(left, right) + 1


def test_create_tree_is_empty():
    tree = AVLTree()
    assert tree.root is None
    assert list(tree.nodes()) == []


def test_first_insert_creates_plain_node():
    tree = AVLTree()
    result = tree.insert("morango", 1)
    node = tree.root
    assert result.num_comparisons == 0
    assert node.word == "morango"
    assert node.document_ids == [1]
    assert node.parent is None
    assert node.left is None
    assert node.right is None
    assert node.height == 0


def test_rebalance_rotates_left_on_right_chain():
    root = Node("banana", [1])
    root.right = Node("morango", [2], parent=root, height=1)
    root.right.right = Node("uva", [3], parent=root.right)
    root.height = 2
    new_root = rebalance(root)
    assert new_root.word == "morango"
    assert new_root.left.word == "banana"
    assert new_root.right.word == "uva"
    assert new_root.left.parent is new_root
    assert new_root.height == 1


def test_rebalance_rotates_right_on_left_chain():
    root = Node("morango", [1])
    root.left = Node("banana", [2], parent=root, height=1)
    root.left.left = Node("abacaxi", [3], parent=root.left)
    root.height = 2
    new_root = rebalance(root)
    assert new_root.word == "banana"
    assert new_root.right.word == "morango"
    assert new_root.left.word == "abacaxi"
    assert new_root.right.parent is new_root


def test_rebalance_leaves_balanced_node():
    root = Node("banana", [1], height=1)
    root.left = Node("abacaxi", [2])
    assert rebalance(root) is root


def test_balance_factor():
    root = Node("banana", [1])
    root.left = Node("abacaxi", [2])
    root.right = Node("morango", [3])
    assert balance_factor(root) == 0
    assert balance_factor(None) == 0
    root.right = None
    assert balance_factor(root) == 1


def test_double_rotation_left_right():
    tree = AVLTree()
    for word, doc in [("c", 1), ("a", 2), ("b", 3)]:
        tree.insert(word, doc)
    assert tree.root.word == "b"
    assert tree.root.left.word == "a"
    assert tree.root.right.word == "c"


def test_double_rotation_right_left():
    tree = AVLTree()
    for word, doc in [("a", 1), ("c", 2), ("b", 3)]:
        tree.insert(word, doc)
    assert tree.root.word == "b"
    assert tree.root.left.word == "a"
    assert tree.root.right.word == "c"


def test_insert_keeps_tree_balanced():
    tree = AVLTree()
    for word, doc in FRUITS:
        tree.insert(word, doc)
    words = [node.word for node in tree.nodes()]
    assert len(words) == 16
    assert words == sorted({word for word, _ in FRUITS})
    assert _checked_height(tree.root) == tree.root.height


def test_insert_ascending_sequence_stays_balanced():
    tree = AVLTree()
    for i in range(200):
        tree.insert(f"w{i:03d}", i)
    assert _checked_height(tree.root) == tree.root.height
    assert [node.word for node in tree.nodes()] == [f"w{i:03d}" for i in range(200)]


def test_duplicate_word_collects_ids():
    tree = AVLTree()
    for word, doc in FRUITS:
        tree.insert(word, doc)
    assert tree.search("morango").document_ids == [2, 3]


def test_search():
    tree = AVLTree()
    tree.insert("banana", 1)
    tree.insert("morango", 2)
    tree.insert("abacaxi", 3)

    banana = tree.search("banana")
    assert banana.found
    assert banana.document_ids == [1]
    assert banana.num_comparisons == 1

    morango = tree.search("morango")
    assert morango.found
    assert morango.document_ids == [2]
    assert morango.num_comparisons == 2

    abacaxi = tree.search("abacaxi")
    assert abacaxi.found
    assert abacaxi.document_ids == [3]

    missing = tree.search("nao_existe")
    assert not missing.found
    assert missing.document_ids == []


def test_search_empty_tree():
    result = AVLTree().search("banana")
    assert not result.found
    assert result.num_comparisons == 0


@pytest.mark.parametrize(
    "words, expected",
    [
        (["banana", "morango"], 1),
        (["banana", "morango", "uva"], 2),
        (["banana", "banana"], 1),
    ],
)
def test_insert_comparisons(words, expected):
    tree = AVLTree()
    results = [tree.insert(word, doc) for doc, word in enumerate(words)]
    assert results[-1].num_comparisons == expected
    assert results[-1].execution_time >= 0.0