import os
from typing import List
from contextlib import asynccontextmanager

import aiofiles.os
from aiofiles.ospath import wrap

from dutree.utils.entry import Entry
from dutree.asyncio.connector import AsyncConnector


def _list_entries(path: str) -> List[Entry]:
    result = []
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if is_dir:
            result.append(Entry(entry.name, path, True))
            continue
        try:
            size = entry.stat(follow_symlinks=False).st_size
        except OSError:
            size = None
        result.append(Entry(entry.name, path, False, size))
    return result


_scandir = wrap(_list_entries)


class AsyncLocalConnector(AsyncConnector):
    """Async local file system reader.

    Each listing runs in the loop's default executor, so listings of
    different directories proceed in parallel.
    """

    @classmethod
    @asynccontextmanager
    async def connect(cls) -> 'AsyncLocalConnector':
        """Connects to file system.

        Yields
        -------
        AsyncLocalConnector
            Class instance
        """
        yield cls()

    async def isdir(self, path: str) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def scandir(self, path: str) -> List[Entry]:
        return await _scandir(path)
