"""Self-balancing AVL tree index."""

from __future__ import annotations

from typing import Optional

from .nodes import BinaryTree, Node, height, rotate_left, rotate_right


def _refresh_height(node: Node) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def balance_factor(node: Optional[Node]) -> int:
    """Height of the left subtree minus that of the right; 0 for no node."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rebalance(node: Node) -> Node:
    """Restore the AVL property at a node and return the subtree's root."""
    factor = balance_factor(node)
    if factor > 1:
        if balance_factor(node.left) < 0:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if factor < -1:
        if balance_factor(node.right) > 0:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree(BinaryTree):
    """Binary search tree kept height-balanced by rotations."""

    def _insert_word(self, word: str, document_id: int) -> int:
        self.root, comparisons = self._insert_at(self.root, word, document_id)
        return comparisons

    def _insert_at(
        self, node: Optional[Node], word: str, document_id: int
    ) -> tuple[Node, int]:
        if node is None:
            return Node(word, [document_id]), 0
        if word < node.word:
            node.left, comparisons = self._insert_at(node.left, word, document_id)
        elif word > node.word:
            node.right, comparisons = self._insert_at(node.right, word, document_id)
        else:
            node.document_ids.append(document_id)
            return node, 1
        _refresh_height(node)
        return rebalance(node), comparisons + 1