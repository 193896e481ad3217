"""Ternary trees of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(eq=False)
class TreeNode:
    """A node with an integer value and up to three children."""

    value: int
    first: Optional["TreeNode"] = None
    second: Optional["TreeNode"] = None
    third: Optional["TreeNode"] = None
    visited: bool = False

    def children(self) -> List["TreeNode"]:
        """The children that are present, in order."""
        return [child for child in (self.first, self.second, self.third) if child is not None]

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return not self.children()


def format_tree(node: Optional[TreeNode], indent: int = 2, level: int = 0) -> str:
    """Write the tree in preorder, one value per line, indented by depth."""
    if node is None:
        return ""
    lines = [" " * (indent * level) + f"{node.value}\n"]
    lines.extend(format_tree(child, indent, level + 1) for child in node.children())
    return "".join(lines)


def get_parent(
    node: Optional[TreeNode], value: int, parent: Optional[TreeNode] = None
) -> Optional[TreeNode]:
    """Return the parent of the first node holding ``value``.

    Returns None when no node holds it, or when it is the root itself.
    """
    if node is None:
        return None
    if node.value == value:
        return parent
    for child in node.children():
        found = get_parent(child, value, node)
        if found is not None:
            return found
    return None