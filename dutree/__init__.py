from dutree.asyncio.connector import AsyncConnector
from dutree.asyncio.local import AsyncLocalConnector
from dutree.config import ScanOptions
from dutree.errors import DutreeError, ScanError, UsageError
from dutree.scanner import ScanReport, Scanner
from dutree.tree import TreeNode
from dutree.utils.entry import Entry
from dutree.walker import Walker
