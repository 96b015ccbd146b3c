from dataclasses import dataclass
from enum import Enum

PATH_SEP = "/"


class EntryKind(Enum):
    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"  # symlink, device, fifo or socket
    ABSENT = "absent"


class DiffKind(Enum):
    DIFFERS = "DIFFERS"
    MISSING = "MISSING"


@dataclass(frozen=True)
class EntryStat:
    """What one lstat of a path found.

    Size and mtime are only meaningful for regular files. The mtime is in whole
    seconds so every comparison in a run uses the same resolution.
    """

    path: str
    kind: EntryKind
    size: int = 0
    mtime: int = 0

    @property
    def exists(self) -> bool:
        return self.kind != EntryKind.ABSENT

    @property
    def is_regular(self) -> bool:
        return self.kind == EntryKind.REGULAR

    def same_size_and_mtime(self, other: "EntryStat") -> bool:
        return self.size == other.size and self.mtime == other.mtime


@dataclass(frozen=True)
class DiffEvent:
    kind: DiffKind
    path: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}"


@dataclass(frozen=True)
class DirectoryPair:
    path_a: str
    path_b: str

    def child(self, name: str) -> "DirectoryPair":
        return DirectoryPair(join_path(self.path_a, name), join_path(self.path_b, name))


@dataclass
class DiffSummary:
    num_differs: int = 0
    num_missing: int = 0

    @property
    def num_events(self) -> int:
        return self.num_differs + self.num_missing

    def add(self, event: DiffEvent) -> None:
        if event.kind == DiffKind.DIFFERS:
            self.num_differs += 1
        else:
            self.num_missing += 1


def join_path(prefix: str, name: str) -> str:
    # Plain concatenation: repeated separators are left as they are.
    return f"{prefix}{PATH_SEP}{name}"
