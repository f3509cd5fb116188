from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncGenerator, List

from dutree.utils.entry import Entry


class AsyncConnector(ABC):
    """Abstract class for async directory reader."""

    @asynccontextmanager
    async def connect(self) -> AsyncGenerator['AsyncConnector', None]:
        """Connects to file system.

        Yields
        -------
        AsyncConnector
            Class instance
        """
        yield self

    @abstractmethod
    async def isdir(self, path: str) -> bool:
        """Check that path exists and is a directory.

        Parameters
        ----------
        path : str
            Path to check.

        Returns
        -------
        bool
            True for an existing directory.
        """
        pass

    @abstractmethod
    async def scandir(self, path: str) -> List[Entry]:
        """List immediate directory content with sizes.

        Parameters
        ----------
        path : str
            Directory path.

        Returns
        -------
        List[Entry]
            Directory contents. Directories have size 0, files whose
            size could not be read have size None.

        Raises
        ------
        OSError
            If the directory itself cannot be read.
        """
        pass
