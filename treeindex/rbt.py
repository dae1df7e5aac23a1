"""Red-black tree index with a shared black sentinel for empty children."""

from __future__ import annotations

from .nodes import BinaryTree, Node, height, rotate_left, rotate_right


class RedBlackTree(BinaryTree):
    """Binary search tree balanced by node colours."""

    def __init__(self) -> None:
        super().__init__()
        self.nil: Node = Node(height=-1, is_red=False)

    def _new_node(self, word: str, document_id: int) -> Node:
        return Node(word, [document_id], left=self.nil, right=self.nil, is_red=True)

    def _insert_word(self, word: str, document_id: int) -> int:
        if self.root is None:
            node = self._new_node(word, document_id)
            node.parent = self.nil
            node.is_red = False
            self.root = node
            return 0
        comparisons = self._insert_below(self.root, word, document_id)
        self.root.is_red = False
        return comparisons

    def _insert_below(self, node: Node, word: str, document_id: int) -> int:
        comparisons = 1
        if word < node.word:
            if node.left is self.nil:
                child = self._new_node(word, document_id)
                child.parent = node
                node.left = child
                self._fix_insert(child)
                self.root.is_red = False
            else:
                comparisons += self._insert_below(node.left, word, document_id)
        elif word > node.word:
            if node.right is self.nil:
                child = self._new_node(word, document_id)
                child.parent = node
                node.right = child
                self._fix_insert(child)
                self.root.is_red = False
            else:
                comparisons += self._insert_below(node.right, word, document_id)
        else:
            node.document_ids.append(document_id)
        node.height = max(height(node.left), height(node.right)) + 1
        return comparisons

    def _rotate_grandparent(self, grandparent: Node, rotate) -> None:
        above = grandparent.parent
        if grandparent is self.root:
            self.root = rotate(grandparent)
        elif grandparent is above.left:
            above.left = rotate(grandparent)
        else:
            above.right = rotate(grandparent)

    def _fix_insert(self, node: Node) -> None:
        while node.parent.is_red:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.is_red:
                    parent.is_red = False
                    uncle.is_red = False
                    grandparent.is_red = True
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    grandparent.left = rotate_left(node)
                node.parent.is_red = False
                grandparent.is_red = True
                self._rotate_grandparent(grandparent, rotate_right)
            else:
                uncle = grandparent.left
                if uncle.is_red:
                    parent.is_red = False
                    uncle.is_red = False
                    grandparent.is_red = True
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    grandparent.right = rotate_right(node)
                node.parent.is_red = False
                grandparent.is_red = True
                self._rotate_grandparent(grandparent, rotate_left)
            return