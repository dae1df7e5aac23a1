from treeindex.bst import BinarySearchTree
from treeindex.nodes import format_index, format_tree, print_tree


def _print_tree_sample():
    tree = BinarySearchTree()
    tree.insert("banana", 1)
    tree.insert("morango", 2)
    tree.insert("cereja", 3)
    tree.insert("banana", 4)
    tree.insert("abobora", 5)
    tree.insert("morango", 6)
    return tree


def test_create_tree():
    tree = BinarySearchTree()
    assert tree.root is None
    assert tree.nil is None


def test_insert_node_structure():
    tree = BinarySearchTree()
    tree.insert("banana", 1)
    tree.insert("abacaxi", 2)
    tree.insert("morango", 3)
    tree.insert("banana", 4)
    root = tree.root
    assert root.word == "banana"
    assert root.left.word == "abacaxi"
    assert root.right.word == "morango"
    assert root.document_ids == [1, 4]

    tree.insert("banana", 42)
    tree.insert("banana", 99)
    assert tree.root.document_ids == [1, 4, 42, 99]


def test_insert_sets_parents():
    tree = _print_tree_sample()
    root = tree.root
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.parent is root
    assert root.right.left.parent is root.right


def test_insert_comparisons():
    tree = BinarySearchTree()
    assert tree.insert("banana", 1).num_comparisons == 0
    assert tree.insert("abacaxi", 2).num_comparisons == 1
    assert tree.insert("morango", 3).num_comparisons == 1
    assert tree.insert("cereja", 4).num_comparisons == 2
    assert tree.insert("banana", 5).num_comparisons == 1


def test_insert_and_search():
    tree = BinarySearchTree()
    tree.insert("banana", 1)
    tree.insert("morango", 2)
    tree.insert("abacaxi", 3)
    tree.insert("banana", 4)

    result1 = tree.search("banana")
    assert result1.found and result1.document_ids == [1, 4]
    result2 = tree.search("morango")
    assert result2.found and result2.document_ids == [2]
    result3 = tree.search("abacaxi")
    assert result3.found and result3.document_ids == [3]
    result4 = tree.search("nao_existe")
    assert not result4.found and result4.document_ids == []


def test_search_comparisons_for_missing_word():
    tree = BinarySearchTree()
    tree.insert("banana", 1)
    tree.insert("morango", 2)
    assert tree.search("zebra").num_comparisons == 2
    assert tree.search("abacaxi").num_comparisons == 1


def test_print_index():
    tree = _print_tree_sample()
    assert format_index(tree) == (
        "abobora: 5\n"
        "banana: 1, 4\n"
        "cereja: 3\n"
        "morango: 2, 6\n"
    )


def test_print_tree(capsys):
    tree = _print_tree_sample()
    expected = (
        "banana\n"
        "    --- abobora\n"
        "    +-- morango\n"
        "        --- cereja\n"
    )
    assert format_tree(tree) == expected
    print_tree(tree)
    assert capsys.readouterr().out == expected


def test_sorted_insertion_degenerates():
    tree = BinarySearchTree()
    words = ["a", "b", "c", "d"]
    for i, word in enumerate(words):
        tree.insert(word, i)
    node = tree.root
    chain = []
    while node is not None:
        assert node.left is None
        chain.append(node.word)
        node = node.right
    assert chain == words
    assert tree.search("d").num_comparisons == 4