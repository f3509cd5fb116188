"""Shared fixtures.

Ensure ``import dutree`` resolves to the local package when pytest runs
without the project installed.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Union

import pytest

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dutree.asyncio.connector import AsyncConnector  # noqa: E402
from dutree.utils.entry import Entry  # noqa: E402


class FakeConnector(AsyncConnector):
    """In-memory directory reader.

    ``listing`` maps a directory path to its entries as (name, size) pairs,
    size None marking a subdirectory, or to an exception raised on read.
    """

    def __init__(self, listing: Dict[str, Union[List[tuple], BaseException]], unreadable: tuple = ()):
        self.listing = listing
        self.unreadable = set(unreadable)
        self.reads: List[str] = []

    async def isdir(self, path: str) -> bool:
        return path in self.listing

    async def scandir(self, path: str) -> List[Entry]:
        self.reads.append(path)
        content = self.listing[path]
        if isinstance(content, BaseException):
            raise content
        result = []
        for name, size in content:
            if size is None:
                result.append(Entry(name, path, True))
            elif name in self.unreadable:
                result.append(Entry(name, path, False, None))
            else:
                result.append(Entry(name, path, False, size))
        return result


def make_files(root: Path, files: Dict[str, int]) -> None:
    for rel_path, size in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b'x' * size)


@pytest.fixture
def sample_root(tmp_path: Path) -> str:
    """/r with a.txt (100), sub/b.txt (50) and hidden sub/.c (10)."""
    root = tmp_path / 'r'
    make_files(root, {'a.txt': 100, 'sub/b.txt': 50, 'sub/.c': 10})
    return str(root)


@pytest.fixture
def deep_root(tmp_path: Path) -> str:
    root = tmp_path / 'deep'
    make_files(root, {
        'top.bin': 7,
        'l1/f1': 11,
        'l1/l2/f2': 13,
        'l1/l2/l3/f3': 17,
        'l1/l2b/f2b': 19,
        '.hidden/inner/f': 23,
        'l1/.h': 29,
        'empty/.keep': 0,
    })
    os.makedirs(root / 'void')
    return str(root)


def find(node, path: str):
    """Descendant of ``node`` at an os.sep separated relative path.

    Raises KeyError when no such node was discovered.
    """
    for name in filter(None, path.split(os.sep)):
        for child in node.children:
            if child.entry.name == name:
                node = child
                break
        else:
            raise KeyError(path)
    return node


def pytest_sessionfinish(session, exitstatus):
    """Let pytest's tmp_path cleanup remove the deep directory chains some
    tests create; its recursive rmtree exceeds the default recursion limit.
    Runs after all tests, so the limit seen by the code under test is unchanged.
    """
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))
