"""Structural measurements of index trees and benchmark statistics."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Sequence

from .avl import AVLTree
from .bst import BinarySearchTree
from .documents import Document
from .nodes import BinaryTree, Node
from .rbt import RedBlackTree

_TREE_TYPES: dict[str, type[BinaryTree]] = {
    "bst": BinarySearchTree,
    "avl": AVLTree,
    "rbt": RedBlackTree,
}

# Below this many documents every search is repeated to smooth out timings.
_REPEAT_THRESHOLD = 800
_SMALL_INDEX_REPEATS = 50


@dataclass
class TreeStats:
    """Costs and shape of a tree built from a set of documents."""

    n_docs: int = 0
    num_comparisons_insertion_mean: int = 0
    num_comparisons_insertion: int = 0
    execution_time_insertion_mean: float = 0.0
    execution_time_insertion: float = 0.0
    num_comparisons_search_mean: int = 0
    num_comparisons_search_max: int = 0
    tree_height: int = 0
    min_branch: int = 0
    num_nodes: int = 0
    execution_time_search_max: float = 0.0
    execution_time_search_mean: float = 0.0
    size: int = 0


def make_tree(tree_type: str) -> BinaryTree:
    """Create an empty tree of type 'bst', 'avl' or 'rbt'."""
    try:
        return _TREE_TYPES[tree_type]()
    except KeyError:
        raise ValueError(f"unknown tree type: {tree_type!r}") from None


def _present(node: Optional[Node], nil: Optional[Node]) -> bool:
    return node is not None and node is not nil


def _children(node: Node, nil: Optional[Node]) -> list[Node]:
    return [child for child in (node.left, node.right) if _present(child, nil)]


def _preorder(node: Optional[Node], nil: Optional[Node]) -> Iterator[Node]:
    stack = [node] if _present(node, nil) else []
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(_children(current, nil)))


def tree_height(node: Optional[Node], nil: Optional[Node] = None) -> int:
    """Number of edges on the longest branch; -1 for an empty tree."""
    level = [node] if _present(node, nil) else []
    result = -1
    while level:
        result += 1
        level = [child for current in level for child in _children(current, nil)]
    return result


def min_branch(node: Optional[Node], nil: Optional[Node] = None) -> int:
    """Number of edges from the root to the nearest leaf; 0 for an empty tree."""
    if not _present(node, nil):
        return 0
    level = [node]
    depth = 0
    while True:
        following: list[Node] = []
        for current in level:
            children = _children(current, nil)
            if not children:
                return depth
            following.extend(children)
        level = following
        depth += 1


def collect_words(node: Optional[Node], nil: Optional[Node] = None) -> list[str]:
    """The words of the subtree in sorted (in-order) order."""
    words: list[str] = []
    stack: list[Node] = []
    current = node
    while stack or _present(current, nil):
        while _present(current, nil):
            stack.append(current)
            current = current.left
        visited = stack.pop()
        words.append(visited.word)
        current = visited.right
    return words


def tree_size(node: Optional[Node], nil: Optional[Node] = None) -> int:
    """Bytes held by the subtree's nodes, words and document id lists."""
    return sum(
        sys.getsizeof(current)
        + sys.getsizeof(current.word)
        + sys.getsizeof(current.document_ids)
        for current in _preorder(node, nil)
    )


def all_balanced(node: Optional[Node], nil: Optional[Node] = None) -> bool:
    """Whether every node's subtree heights differ by at most one."""
    heights: dict[int, int] = {}
    for current in reversed(list(_preorder(node, nil))):
        left = heights[id(current.left)] if _present(current.left, nil) else -1
        right = heights[id(current.right)] if _present(current.right, nil) else -1
        if abs(left - right) > 1:
            return False
        heights[id(current)] = max(left, right) + 1
    return True


def tree_stats(
    tree_type: str, n_docs: int, n_max_docs: int, docs: Sequence[Document]
) -> TreeStats:
    """Build a tree from the first documents and measure inserts and searches.

    An unknown tree type yields statistics that hold only n_docs.
    """
    stats = TreeStats(n_docs=n_docs)
    try:
        tree = make_tree(tree_type)
    except ValueError:
        return stats

    insertions = 0
    for document in islice(docs, max(0, min(n_docs, n_max_docs))):
        for word in document.content:
            result = tree.insert(word, document.doc_id)
            stats.num_comparisons_insertion += result.num_comparisons
            stats.execution_time_insertion += result.execution_time
            insertions += 1
    if insertions:
        stats.execution_time_insertion_mean = stats.execution_time_insertion / insertions
        stats.num_comparisons_insertion_mean = stats.num_comparisons_insertion // insertions

    words = collect_words(tree.root, tree.nil)
    stats.num_nodes = len(words)

    repeats = _SMALL_INDEX_REPEATS if n_docs < _REPEAT_THRESHOLD else 1
    comparisons_sum = 0
    time_sum = 0.0
    for word in words:
        total_comparisons = 0
        total_time = 0.0
        for _ in range(repeats):
            result = tree.search(word)
            total_comparisons += result.num_comparisons
            total_time += result.execution_time
        comparisons = total_comparisons // repeats
        elapsed = total_time / repeats
        comparisons_sum += comparisons
        time_sum += elapsed
        stats.num_comparisons_search_max = max(stats.num_comparisons_search_max, comparisons)
        stats.execution_time_search_max = max(stats.execution_time_search_max, elapsed)
    if words:
        stats.num_comparisons_search_mean = comparisons_sum // len(words)
        stats.execution_time_search_mean = time_sum / len(words)

    if tree_type == "avl" and tree.root is not None:
        stats.tree_height = tree.root.height
    else:
        stats.tree_height = tree_height(tree.root, tree.nil)
    stats.min_branch = min_branch(tree.root, tree.nil)
    return stats