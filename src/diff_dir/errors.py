"""Exceptions raised by diff-dir.

The string form of every exception is the exact diagnostic line written to stderr.
"""

import os


def os_error_str(e: OSError) -> str:
    if e.strerror:
        return e.strerror
    if e.errno:
        return os.strerror(e.errno)
    return str(e)


class DiffDirError(Exception):
    pass


class UsageError(DiffDirError):
    pass


class RootValidationError(DiffDirError):
    pass


class NotADirectoryRootError(RootValidationError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Not a directory: {path}")
        self.path = path


class SameDirectoriesError(RootValidationError):
    def __init__(self) -> None:
        super().__init__("Same directories")


class TraversalError(DiffDirError):
    """A fatal error that aborts the whole comparison run."""


class DirectoryReadError(TraversalError):
    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"Failed to read {path}: {os_error_str(error)}")
        self.path = path


class EntryStatError(TraversalError):
    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"{path}: {os_error_str(error)}")
        self.path = path


class AccessProbeError(TraversalError):
    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"Failed to access {path}: {os_error_str(error)}")
        self.path = path


class FileChangedError(TraversalError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File changed: {path}")
        self.path = path
