"""Binary search tree."""

from dsa_lite.tree.bst import BinarySearchNode, BinarySearchTree

__all__ = [
    "BinarySearchNode",
    "BinarySearchTree",
]
