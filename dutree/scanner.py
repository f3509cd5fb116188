import time
from dataclasses import dataclass, field
from typing import List, Optional

from tqdm.auto import tqdm

from dutree.asyncio.connector import AsyncConnector
from dutree.asyncio.local import AsyncLocalConnector
from dutree.config import ScanOptions
from dutree.errors import UsageError
from dutree.render import render_flat, render_tree
from dutree.sorting import rank_entries, sort_tree
from dutree.tree import TreeNode
from dutree.walker import Walker


@dataclass
class ScanReport:
    """Scan result with diagnostics.

    Times are in seconds.
    """

    root: TreeNode
    lines: List[str] = field(default_factory=list)
    entry_count: int = 0
    directories_read: int = 0
    files_skipped: int = 0
    discovery_time: float = 0.0
    sort_time: float = 0.0
    render_time: float = 0.0
    total_time: float = 0.0


class Scanner:
    """Scan, aggregate, sort and render a directory.

    Attributes
    ----------
    options : ScanOptions
        Scan and output options.
    connector : AsyncConnector
        Directory reader.
    """

    def __init__(self, options: ScanOptions, connector: Optional[AsyncConnector] = None):
        self.options = options
        self.connector = connector if connector is not None else AsyncLocalConnector()

    async def run(self, progress: bool = False) -> ScanReport:
        """Run full scan.

        Parameters
        ----------
        progress : bool, default=False
            Show progress bar while discovering.

        Returns
        -------
        ScanReport
            Rendered lines and diagnostics.

        Raises
        ------
        UsageError
            If scan root is not an existing directory.
        ScanError
            If a directory could not be listed.
        """
        options = self.options
        start_time = time.perf_counter()
        async with self.connector.connect() as connector:
            if not await connector.isdir(options.folder):
                raise UsageError(options.folder)
            pbar = tqdm(desc='Directories', unit='dir', leave=False) if progress else None
            try:
                walker = Walker(connector, options.max_depth, options.include_hidden, options.workers, pbar)
                root = await walker.walk(options.folder)
            finally:
                if pbar is not None:
                    pbar.close()
        root.calculate_size()
        report = ScanReport(root, directories_read=walker.directories_read, files_skipped=walker.files_skipped)
        report.discovery_time = time.perf_counter() - start_time

        start_sorting = time.perf_counter()
        if options.tree:
            sort_tree(root, options.inverted)
        else:
            entries = rank_entries(root, options.include_dirs, options.inverted)
        report.sort_time = time.perf_counter() - start_sorting

        start_printing = time.perf_counter()
        if options.tree:
            report.lines = render_tree(root, options.human_readable)
            report.entry_count = root.length(options.include_dirs)
        else:
            report.lines = render_flat(entries, options.top, options.human_readable)
            report.entry_count = len(entries)
        report.render_time = time.perf_counter() - start_printing

        report.total_time = time.perf_counter() - start_time
        return report
