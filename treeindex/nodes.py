"""Tree nodes, operation results and the shared binary-tree machinery."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from time import perf_counter
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a word and the documents it appears in."""

    word: str = ""
    document_ids: list[int] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    height: int = 0
    is_red: bool = False


@dataclass
class InsertResult:
    """Cost of a single insertion."""

    num_comparisons: int = 0
    execution_time: float = 0.0


@dataclass
class SearchResult:
    """Outcome and cost of a single search."""

    found: bool = False
    document_ids: list[int] = field(default_factory=list)
    execution_time: float = 0.0
    num_comparisons: int = 0


def _elapsed_ms(start: float) -> float:
    return (perf_counter() - start) * 1000.0


class BinaryTree(ABC):
    """An inverted index stored as a binary search tree of words."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self.nil: Optional[Node] = None

    def _is_leaf(self, node: Optional[Node]) -> bool:
        return node is None or node is self.nil

    @abstractmethod
    def _insert_word(self, word: str, document_id: int) -> int:
        """Insert the word and return the number of comparisons made."""

    def insert(self, word: str, document_id: int) -> InsertResult:
        """Add a word occurrence; return the comparisons and time spent."""
        start = perf_counter()
        comparisons = self._insert_word(word, document_id)
        return InsertResult(comparisons, _elapsed_ms(start))

    def search(self, word: str) -> SearchResult:
        """Look a word up, counting one comparison per visited node."""
        if self._is_leaf(self.root):
            return SearchResult()
        start = perf_counter()
        result = SearchResult()
        current = self.root
        while not self._is_leaf(current):
            result.num_comparisons += 1
            if word == current.word:
                result.found = True
                result.document_ids = list(current.document_ids)
                break
            current = current.right if word > current.word else current.left
        result.execution_time = _elapsed_ms(start)
        return result

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes in order of their words."""
        stack: list[Node] = []
        current = self.root
        while stack or not self._is_leaf(current):
            while not self._is_leaf(current):
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node
            current = node.right


def height(node: Optional[Node]) -> int:
    """Stored height of a node, -1 for an absent one."""
    return -1 if node is None else node.height


def _update_height(node: Node) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_right(node: Node) -> Node:
    """Rotate the subtree right and return its new root."""
    new_root = node.left
    node.left = new_root.right
    if new_root.right is not None:
        new_root.right.parent = node
    new_root.right = node
    new_root.parent = node.parent
    node.parent = new_root
    _update_height(node)
    _update_height(new_root)
    return new_root


def rotate_left(node: Node) -> Node:
    """Rotate the subtree left and return its new root."""
    new_root = node.right
    node.right = new_root.left
    if new_root.left is not None:
        new_root.left.parent = node
    new_root.left = node
    new_root.parent = node.parent
    node.parent = new_root
    _update_height(node)
    _update_height(new_root)
    return new_root


def format_index(tree: BinaryTree) -> str:
    """Render the index as one 'word: id, id' line per word, in order."""
    return "".join(
        f"{node.word}: {', '.join(str(i) for i in node.document_ids)}\n"
        for node in tree.nodes()
        if node.document_ids
    )


def print_index(tree: BinaryTree) -> None:
    """Write the index to standard output."""
    sys.stdout.write(format_index(tree))


def format_tree(tree: BinaryTree) -> str:
    """Render the tree shape, marking left children '--- ' and right '+-- '."""
    if tree._is_leaf(tree.root):
        return ""
    lines: list[str] = []
    stack: list[tuple[Node, str, str]] = [(tree.root, "", "")]
    while stack:
        node, prefix, marker = stack.pop()
        lines.append(f"{prefix}{marker}{node.word}\n")
        child_prefix = prefix + "    "
        if not tree._is_leaf(node.right):
            stack.append((node.right, child_prefix, "+-- "))
        if not tree._is_leaf(node.left):
            stack.append((node.left, child_prefix, "--- "))
    return "".join(lines)


def print_tree(tree: BinaryTree) -> None:
    """Write the tree shape to standard output."""
    sys.stdout.write(format_tree(tree))