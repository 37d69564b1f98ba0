"""Binary tree node type, construction helper and classic tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        try:
            left = next(items)
        except StopIteration:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        try:
            right = next(items)
        except StopIteration:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    if p is None or q is None:
        return p is None and q is None
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def _mirror(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return (
        left.val == right.val
        and _mirror(left.left, right.right)
        and _mirror(left.right, right.left)
    )


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True when the tree is a mirror image of itself."""
    return root is None or _mirror(root.left, root.right)


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level from left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        values = [node.val for node in level]
        result.append(values[::-1] if depth % 2 else values)
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True when every node's subtree heights differ by at most one."""

    def height(node: Optional[TreeNode]) -> Optional[int]:
        if node is None:
            return 0
        left = height(node.left)
        if left is None:
            return None
        right = height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return height(root) is not None


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def iter_inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield nodes in in-order sequence without recursion."""
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            yield node
            node = node.right


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    return [node.val for node in iter_inorder(root)]


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The rightmost value at each depth."""
    return [level[-1].val for level in _levels(root)]


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return max(left, right) + 1

    height(root)
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both ``p`` and ``q`` (by identity) as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right