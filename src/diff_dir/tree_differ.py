import os
from collections.abc import Callable
from typing import Protocol

from loguru import logger

from diff_dir.comparator import check_same
from diff_dir.errors import DirectoryReadError, EntryStatError
from diff_dir.models import PATH_SEP, DiffEvent, DiffSummary, DirectoryPair

DiffEventSink = Callable[[DiffEvent], None]


class DirListing(Protocol):
    """What os.scandir returns: an iterator of entries holding an open directory handle."""

    def __next__(self) -> os.DirEntry: ...

    def close(self) -> None: ...


class TreeDiffer:
    """Two-pass directory tree diff.

    The forward pass walks tree A and fully checks every regular file against its
    counterpart in tree B. The reverse pass walks tree B and only checks that each
    entry exists in tree A. Every event goes to the 'report' sink as soon as it is
    found, and any TraversalError aborts the whole run.
    """

    def __init__(self, report: DiffEventSink) -> None:
        self._report = report
        self.summary = DiffSummary()

    def run(self, dir_a: str, dir_b: str) -> DiffSummary:
        self.summary = DiffSummary()

        logger.info(f'Forward pass: checking "{dir_a}" against "{dir_b}"...')
        self.compare(dir_a, dir_b, full_check=True)

        logger.info(f'Reverse pass: checking "{dir_b}" entries exist in "{dir_a}"...')
        self.compare(dir_b, dir_a, full_check=False)

        logger.info(
            f"Found {self.summary.num_differs} differing"
            f" and {self.summary.num_missing} missing entries."
        )

        return self.summary

    def compare(self, root_a: str, root_b: str, full_check: bool) -> None:
        # One open listing per level of the current descent, innermost last.
        open_dirs: list[tuple[DirListing, DirectoryPair]] = []

        try:
            open_dirs.append((_open_dir(root_a), DirectoryPair(root_a, root_b)))

            while open_dirs:
                entries, pair = open_dirs[-1]

                entry = _next_entry(entries, pair.path_a)
                if entry is None:
                    entries.close()
                    open_dirs.pop()
                    continue

                child = pair.child(entry.name)

                if _is_dir_entry(entry, child.path_a):
                    logger.debug(f'Descending into "{child.path_a}".')
                    open_dirs.append((_open_dir(child.path_a), child))
                    continue

                event = check_same(
                    child.path_a,
                    child.path_b,
                    full_check,
                    _is_regular_entry(entry, child.path_a),
                )
                if event:
                    self._emit(event)
        finally:
            for entries, _pair in open_dirs:
                entries.close()

    def _emit(self, event: DiffEvent) -> None:
        self.summary.add(event)
        self._report(event)


def _open_dir(path: str) -> DirListing:
    try:
        # The root "/" is held as "" after trailing separators are stripped.
        return os.scandir(path or PATH_SEP)
    except OSError as e:
        raise DirectoryReadError(path, e) from e


def _next_entry(entries: DirListing, dir_path: str) -> os.DirEntry | None:
    try:
        return next(entries, None)
    except OSError as e:
        raise DirectoryReadError(dir_path, e) from e


# The listing's own type tag is used where the filesystem provides one. An unknown
# tag is resolved by scandir with an lstat, so regular files always get a full check.
def _is_dir_entry(entry: os.DirEntry, path: str) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as e:
        raise EntryStatError(path, e) from e


def _is_regular_entry(entry: os.DirEntry, path: str) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError as e:
        raise EntryStatError(path, e) from e
