from dataclasses import dataclass, fields
from typing import Any, Optional

import yaml


@dataclass
class ScanOptions:
    """Scan and output options.

    Attributes
    ----------
    folder : str, optional
        Directory to scan.
    inverted : bool
        Smallest entries first.
    max_depth : int
        Max directory listing depth, 0 for unlimited.
    include_hidden : bool
        Keep entries whose name starts with '.'.
    tree : bool
        Render indented tree instead of ranked list.
    top : int
        Max ranked lines, 0 for all. Ignored in tree mode.
    include_dirs : bool
        Rank directories next to files. Ignored in tree mode.
    human_readable : bool
        Binary-prefixed sizes.
    verbose : bool
        Report counts and timings.
    workers : int
        Max concurrent directory listings, 0 for unlimited.
    """

    folder: Optional[str] = None
    inverted: bool = False
    max_depth: int = 0
    include_hidden: bool = False
    tree: bool = False
    top: int = 0
    include_dirs: bool = False
    human_readable: bool = False
    verbose: bool = False
    workers: int = 0

    @classmethod
    def from_yaml(cls, path: str, **overrides: Any) -> 'ScanOptions':
        """Creates options from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.
        **overrides
            Values taking precedence over the file, None values are ignored.

        Returns
        -------
        ScanOptions
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise TypeError(f"invalid configuration in '{path}': expected a mapping")
        config.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**config)

    @classmethod
    def field_names(cls) -> list[str]:
        return [field.name for field in fields(cls)]

    def validate(self) -> Optional[str]:
        if not self.folder:
            return 'folder is required'
        if self.max_depth < 0:
            return 'max depth must be >= 0'
        if self.top < 0:
            return 'top must be >= 0'
        if self.workers < 0:
            return 'workers must be >= 0'
        return None
