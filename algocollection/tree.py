"""Binary trees: in-order traversal and mirroring."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["TreeNode", "inorder", "mirror"]


@dataclass
class TreeNode:
    """A binary tree node holding *val* and optional children."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values of the tree under *root* in in-order sequence."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.val
    yield from inorder(root.right)


def mirror(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new tree that is the mirror image of the tree under *root*."""
    if root is None:
        return None
    return TreeNode(root.val, left=mirror(root.right), right=mirror(root.left))