import os
import stat

from loguru import logger

from diff_dir.errors import (
    NotADirectoryRootError,
    RootValidationError,
    SameDirectoriesError,
    os_error_str,
)
from diff_dir.models import PATH_SEP


def validate_roots(dir1: str, dir2: str) -> tuple[str, str]:
    """Check both roots are existing, distinct directories.

    Returns the original argument strings with trailing separators removed. The
    canonical paths are only used to detect a directory being compared with itself;
    the traversal and every reported path work from the arguments as given.
    """
    real_dir1 = get_real_dir(dir1)
    real_dir2 = get_real_dir(dir2)

    logger.debug(f'Canonical roots: "{real_dir1}" and "{real_dir2}".')

    if real_dir1 == real_dir2:
        raise SameDirectoriesError

    return strip_trailing_seps(dir1), strip_trailing_seps(dir2)


def get_real_dir(path: str) -> str:
    try:
        st = os.stat(path)
    except OSError as e:
        msg = f"{path}: {os_error_str(e)}"
        raise RootValidationError(msg) from e

    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectoryRootError(path)

    try:
        return os.path.realpath(path, strict=True)
    except OSError as e:
        msg = f"{path}: {os_error_str(e)}"
        raise RootValidationError(msg) from e


def strip_trailing_seps(path: str) -> str:
    # "/" becomes "" so that joined entry paths read "/name".
    return path.rstrip(PATH_SEP)
