from typing import List

from dutree.tree import TreeNode
from dutree.utils.entry import Entry


def _size(item) -> int:
    entry = item.entry if isinstance(item, TreeNode) else item
    return entry.size or 0


def sort_entries(entries: List[Entry], inverted: bool = False) -> List[Entry]:
    """Stable sort by size, largest first unless inverted."""
    return sorted(entries, key=_size, reverse=not inverted)


def sort_tree(node: TreeNode, inverted: bool = False) -> None:
    """Sort children of every directory in place, level by level.

    Parameters
    ----------
    node : TreeNode
        Subtree root. Sizes must already be aggregated.
    inverted : bool, default=False
        Smallest first.
    """
    for _, current in node.walk():
        if current.is_dir:
            current.children.sort(key=_size, reverse=not inverted)


def rank_entries(root: TreeNode, include_dirs: bool = False, inverted: bool = False) -> List[Entry]:
    """Flatten tree into a size ranking.

    Parameters
    ----------
    root : TreeNode
        Aggregated tree.
    include_dirs : bool, default=False
        Rank directories, root included, next to files.
    inverted : bool, default=False
        Smallest first.

    Returns
    -------
    List[Entry]
        Ranked entries, equal sizes in discovery order.
    """
    return sort_entries(root.to_list(include_dirs), inverted)
