from typing import List

from dutree.tree import TreeNode
from dutree.utils.entry import Entry

SIZE_WIDTH = 12
BRANCH = '├── '
INDENT = '│   '


def render_flat(entries: List[Entry], top: int = 0, human_readable: bool = False) -> List[str]:
    """Ranked listing, one '<size> <full path>' line per entry.

    Parameters
    ----------
    entries : List[Entry]
        Already ranked entries.
    top : int, default=0
        Max lines, 0 for all.
    human_readable : bool, default=False
        Binary-prefixed sizes.

    Returns
    -------
    List[str]
        Output lines.
    """
    if top > 0:
        entries = entries[:top]
    return [f'{entry.format_size(human_readable):<{SIZE_WIDTH}} {entry.full_path}' for entry in entries]


def render_tree(root: TreeNode, human_readable: bool = False) -> List[str]:
    lines = []
    for depth, node in root.walk():
        lines.append(f'{INDENT * depth}{BRANCH}{node.entry.name} ({node.entry.format_size(human_readable)})')
    return lines
