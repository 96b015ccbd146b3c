import os
import stat

from diff_dir.errors import AccessProbeError, EntryStatError, FileChangedError
from diff_dir.models import DiffEvent, DiffKind, EntryKind, EntryStat


def get_entry_stat(path: str, must_exist: bool) -> EntryStat:
    """Stat 'path' without following symlinks.

    With 'must_exist' the path has to be a regular file: a missing path is an
    EntryStatError and any other type is a FileChangedError. Without it, a missing
    path comes back as ABSENT and other types are returned for the caller to judge.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError as e:
        if must_exist:
            raise EntryStatError(path, e) from e
        return EntryStat(path, EntryKind.ABSENT)
    except OSError as e:
        raise EntryStatError(path, e) from e

    if not stat.S_ISREG(st.st_mode):
        if must_exist:
            raise FileChangedError(path)
        kind = EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.OTHER
        return EntryStat(path, kind)

    # Whole seconds, floored like tv_sec.
    mtime = st.st_mtime_ns // 1_000_000_000
    return EntryStat(path, EntryKind.REGULAR, size=st.st_size, mtime=mtime)


def path_exists(path: str) -> bool:
    """Existence probe with access(F_OK) semantics: symlinks are followed."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise AccessProbeError(path, e) from e

    return True


def check_same(
    path_self: str, path_other: str, first_pass: bool, check_size: bool
) -> DiffEvent | None:
    if not first_pass or not check_size:
        if not path_exists(path_other):
            return DiffEvent(DiffKind.MISSING, path_other)
        return None

    self_stat = get_entry_stat(path_self, must_exist=True)
    other_stat = get_entry_stat(path_other, must_exist=False)

    if not other_stat.exists:
        return DiffEvent(DiffKind.MISSING, path_other)

    if not other_stat.is_regular or not self_stat.same_size_and_mtime(other_stat):
        return DiffEvent(DiffKind.DIFFERS, path_self)

    return None
