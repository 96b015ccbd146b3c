"""Find difference of two directories recursively based on file size and modification time."""

from diff_dir.comparator import check_same, get_entry_stat
from diff_dir.models import DiffEvent, DiffKind, DiffSummary, DirectoryPair, EntryKind, EntryStat
from diff_dir.tree_differ import TreeDiffer
from diff_dir.validate import validate_roots

__version__ = "0.1.0"

PROG_NAME = "diff-dir"
VERSION = "v0.1"

__all__ = [
    "PROG_NAME",
    "VERSION",
    "DiffEvent",
    "DiffKind",
    "DiffSummary",
    "DirectoryPair",
    "EntryKind",
    "EntryStat",
    "TreeDiffer",
    "__version__",
    "check_same",
    "get_entry_stat",
    "validate_roots",
]
