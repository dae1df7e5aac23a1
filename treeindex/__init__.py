"""Inverted word index built on BST, AVL and red-black trees, with statistics and CSV export."""

__version__ = "0.1.0"