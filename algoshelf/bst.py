"""Binary search tree operations built on :class:`TreeNode`."""

from __future__ import annotations

from itertools import islice, pairwise
from typing import Optional

from algoshelf.trees import TreeNode, iter_inorder


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based); -1 for an empty tree."""
    if root is None:
        return -1
    if k < 1:
        raise IndexError("k must be at least 1")
    node = next(islice(iter_inorder(root), k - 1, None), None)
    if node is None:
        raise IndexError("k is larger than the number of nodes")
    return node.val


def bst_lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest common ancestor of ``p`` and ``q`` found by comparing values."""
    while root is not None:
        if p.val > root.val and q.val > root.val:
            root = root.right
        elif p.val < root.val and q.val < root.val:
            root = root.left
        else:
            return root
    return None


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _splice(node: TreeNode) -> Optional[TreeNode]:
    """Remove ``node`` and return the subtree that takes its place."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    _rightmost(node.left).right = node.right
    return node.left


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove the node holding ``key`` in place and return the new root."""
    if root is None:
        return None
    if root.val == key:
        return _splice(root)
    node = root
    while node is not None:
        if node.val > key:
            if node.left is not None and node.left.val == key:
                node.left = _splice(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.val == key:
                node.right = _splice(node.right)
                break
            node = node.right
    return root


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val``, or None."""
    while root is not None and root.val != val:
        root = root.right if val > root.val else root.left
    return root


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf and return the root; equal values go left."""
    new = TreeNode(val)
    if root is None:
        return new
    node = root
    while True:
        if node.val < val:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True when the in-order values are strictly increasing."""
    values = (node.val for node in iter_inorder(root))
    return all(a < b for a, b in pairwise(values))