class DutreeError(Exception):
    """Base class for dutree errors."""


class UsageError(DutreeError):
    """Scan root is missing or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Folder path specified '{path}' does not exists OR is not a directory.")


class ScanError(DutreeError):
    """Directory could not be read during traversal."""

    def __init__(self, path: str, reason: BaseException):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read directory '{path}': {reason}")
