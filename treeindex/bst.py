"""Unbalanced binary search tree index."""

from __future__ import annotations

from .nodes import BinaryTree, Node


class BinarySearchTree(BinaryTree):
    """Plain binary search tree: words are placed without rebalancing."""

    def _insert_word(self, word: str, document_id: int) -> int:
        if self.root is None:
            self.root = Node(word, [document_id])
            return 0
        comparisons = 0
        current = self.root
        while True:
            comparisons += 1
            if word == current.word:
                current.document_ids.append(document_id)
                return comparisons
            if word < current.word:
                if current.left is None:
                    current.left = Node(word, [document_id], parent=current)
                    return comparisons
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(word, [document_id], parent=current)
                    return comparisons
                current = current.right