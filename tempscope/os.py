"""
Filesystem and process-environment boundary for the scratch tools.

Everything tempscope needs from the host goes through here: the system temp
location, directory creation, recursive removal and the running process name.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
import shutil
import sys
import tempfile

from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class RemovalResult:
    """
    Outcome of a recursive directory removal.

    Attributes:
        path: Directory that removal was attempted on.
        error: Exception raised by the removal, None on success.
    """
    path: Path
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


# Methods --------------------------------------------------------------------------------------------------------------

def system_temp_dir() -> Path:
    """Return the system temporary directory as resolved by tempfile.gettempdir()."""
    return Path(tempfile.gettempdir())


def create_dir(path: str | os.PathLike[str], *, exist_ok: bool = False) -> Path:
    """
    Create a directory including missing parents.

    Args:
        path: Directory to create.
        exist_ok: If False, raises FileExistsError when the directory already exists.

    Returns:
        Path: The created directory.

    Raises:
        FileExistsError: If path exists and exist_ok=False, or path exists and is not a directory.
        PermissionError: If lacking permission to create the directory.
        OSError: If creation fails for other reasons (disk full, invalid name, etc.).
    """
    dir_path = Path(path)
    # Path.mkdir() may raise PermissionError, OSError (propagated)
    dir_path.mkdir(parents=True, exist_ok=exist_ok)
    return dir_path


def remove_dir(path: str | os.PathLike[str]) -> RemovalResult:
    """
    Recursively remove a directory and report the outcome instead of raising.

    A missing directory is reported as a failure with FileNotFoundError, callers
    decide whether that matters.

    Args:
        path: Directory to remove.

    Returns:
        RemovalResult: ok=True if the tree was removed, otherwise the error that stopped removal.
            The tree may be partially removed on failure.

    Examples:
        >>> result = remove_dir("/tmp/app_1234")
        >>> result.ok
        True
    """
    dir_path = Path(path)
    try:
        shutil.rmtree(dir_path)
    except OSError as exc:
        logger.debug("Failed to remove directory %s: %s", dir_path, exc)
        return RemovalResult(dir_path, exc)
    return RemovalResult(dir_path)


def process_name(file_name: str | None = None) -> str:
    """
    Return the display name of the running entry script.

    The basename of sys.argv[0] without a '.py' suffix, '' in an interactive session.
    """
    file_name = (sys.argv[0] if sys.argv else "") if file_name is None else file_name
    py_name = os.path.basename(file_name)
    py_name = py_name.removesuffix('.py')
    return py_name
