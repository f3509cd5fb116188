import asyncio
import logging
import os
from typing import Any, Optional, Set, Tuple

import asyncio_pool
from tqdm.auto import tqdm

from dutree.asyncio.connector import AsyncConnector
from dutree.errors import ScanError
from dutree.tree import TreeNode

logger = logging.getLogger(__name__)


class Walker:
    """Concurrent directory walker.

    Every directory is listed by its own task. The root listing is depth 1
    and a subdirectory is one level deeper than the directory listing it;
    subdirectories deeper than ``max_depth`` are left out of the tree.

    Attributes
    ----------
    connector : AsyncConnector
        Directory reader.
    max_depth : int
        Max listing depth, 0 for unlimited.
    include_hidden : bool
        Keep entries whose name starts with '.'.
    num_workers : int
        Max concurrent listings, 0 spawns a task per directory.
    progress : tqdm, optional
        Progress bar advanced once per listed directory.
    directories_read : int
        Number of directories listed by the last walk.
    files_skipped : int
        Number of files dropped by the last walk because their size could not be read.
    """

    def __init__(
        self,
        connector: AsyncConnector,
        max_depth: int = 0,
        include_hidden: bool = False,
        num_workers: int = 0,
        progress: Optional[tqdm] = None
    ):
        self.connector = connector
        self.max_depth = max_depth
        self.include_hidden = include_hidden
        self.num_workers = num_workers
        self.progress = progress
        self.directories_read = 0
        self.files_skipped = 0
        self._pending = 0
        self._done: Optional[asyncio.Event] = None
        self._failure: Optional[Tuple[str, Exception]] = None
        self._tasks: Set[asyncio.Future[Any]] = set()
        self._pool: Optional[asyncio_pool.AioPool] = None

    async def walk(self, root_path: str) -> TreeNode:
        """Build tree for directory.

        Parameters
        ----------
        root_path : str
            Directory to scan.

        Returns
        -------
        TreeNode
            Root node. Sizes are not aggregated yet.

        Raises
        ------
        ScanError
            If any directory could not be listed.
        """
        root = TreeNode.root(root_path)
        self.directories_read = 0
        self.files_skipped = 0
        self._pending = 0
        self._done = asyncio.Event()
        self._failure = None
        self._tasks = set()
        if self.num_workers > 0:
            try:
                async with asyncio_pool.AioPool(size=self.num_workers) as pool:
                    self._pool = pool
                    await self._join(root_path, root)
            finally:
                self._pool = None
        else:
            await self._join(root_path, root)
        if self._failure is not None:
            path, err = self._failure
            if not isinstance(err, OSError):
                raise err
            raise ScanError(path, err) from err
        return root

    async def _join(self, root_path: str, root: TreeNode) -> None:
        self._spawn(root_path, root, 1)
        await self._done.wait()
        if self._failure is not None:
            await self._cancel()

    async def _cancel(self) -> None:
        # pooled tasks drain on their own and are joined when the pool exits
        if self._pool is not None:
            return
        tasks = [task for task in self._tasks if not task.done()]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _spawn(self, path: str, node: TreeNode, depth: int) -> None:
        self._pending += 1
        coro = self._visit(path, node, depth)
        if self._pool is not None:
            task = self._pool.spawn_n(coro)
        else:
            task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _visit(self, path: str, node: TreeNode, depth: int) -> None:
        try:
            await self._read_folder(path, node, depth)
        except Exception as err:
            logger.debug('failed to list %s: %s', path, err)
            if self._failure is None:
                self._failure = (path, err)
            self._done.set()
        finally:
            self._pending -= 1
            if self._pending == 0:
                self._done.set()

    async def _read_folder(self, path: str, node: TreeNode, depth: int) -> None:
        if self._failure is not None:
            return
        entries = await self.connector.scandir(path)
        self.directories_read += 1
        if self.progress is not None:
            self.progress.update(1)
        for entry in entries:
            if self._failure is not None:
                return
            if not self.include_hidden and entry.name.startswith('.'):
                continue
            if entry.is_dir:
                if self.max_depth > 0 and depth + 1 > self.max_depth:
                    continue
                child = await node.add_child(entry)
                self._spawn(os.path.join(path, entry.name), child, depth + 1)
            elif entry.size is None:
                logger.debug('skipping %s: size unavailable', entry.full_path)
                self.files_skipped += 1
            else:
                await node.add_child(entry)
