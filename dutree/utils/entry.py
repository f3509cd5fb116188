import os
from dataclasses import dataclass
from typing import Optional

from dutree.utils.units import format_bytes


@dataclass
class Entry:
    name: str
    containing_path: str
    is_dir: bool
    size: Optional[int] = 0

    @property
    def full_path(self) -> str:
        path = os.path.join(self.containing_path, self.name)
        if self.is_dir and not path.endswith(os.sep):
            path += os.sep
        return path

    def format_size(self, human_readable: bool = False) -> str:
        """Size as a display string.

        Parameters
        ----------
        human_readable : bool, default=False
            Use binary-prefixed units instead of raw bytes.

        Returns
        -------
        str
            Formatted size.
        """
        size = self.size or 0
        if human_readable:
            return format_bytes(size)
        return str(size)
