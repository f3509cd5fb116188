import asyncio
from typing import Iterator, List

from dutree.utils.entry import Entry


class TreeNode:
    """Node of the scanned directory tree.

    Attributes
    ----------
    entry : Entry
        File or directory described by this node.
    children : list[TreeNode]
        Child nodes in discovery order, empty for files.
    lock : asyncio.Lock
        Guards appends to ``children``.
    """

    def __init__(self, entry: Entry):
        self.entry = entry
        self.children: List['TreeNode'] = []
        self.lock = asyncio.Lock()

    @classmethod
    def root(cls, path: str) -> 'TreeNode':
        """Creates root node for scan path.

        Parameters
        ----------
        path : str
            Scan root as given by the caller.

        Returns
        -------
        TreeNode
            Empty directory node of size 0.
        """
        return cls(Entry(path, '', True, 0))

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    async def add_child(self, entry: Entry) -> 'TreeNode':
        child = TreeNode(entry)
        async with self.lock:
            self.children.append(child)
        return child

    def calculate_size(self) -> int:
        """Post-order size rollup.

        Must only be called once traversal has finished.

        Returns
        -------
        int
            Cumulative size of this node.
        """
        nodes = [node for _, node in self.walk() if node.is_dir]
        for node in reversed(nodes):
            node.entry.size = sum(child.entry.size for child in node.children)
        return self.entry.size

    def walk(self, depth: int = 0) -> Iterator[tuple[int, 'TreeNode']]:
        """Pre-order iteration over (depth, node) pairs."""
        stack = [(depth, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.children))

    def to_list(self, include_dirs: bool = False) -> List[Entry]:
        return [node.entry for _, node in self.walk() if include_dirs or not node.is_dir]

    def length(self, include_dirs: bool = False) -> int:
        return sum(1 for _, node in self.walk() if include_dirs or not node.is_dir)
