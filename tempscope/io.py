"""
File I/O for scratch files that can remove themselves when closed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging
import os
from pathlib import Path
from typing import IO, Callable, Union

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

# Windows only, the OS removes the file when the last handle is closed
_O_TEMPORARY = getattr(os, "O_TEMPORARY", 0)

TempFileOpener = Callable[[Path, bool], IO[bytes]]
"""Strategy that opens a temp file: opener(path, keep_file) -> binary file object."""


# Classes --------------------------------------------------------------------------------------------------------------

class TempFileIO(io.FileIO):
    """
    A binary read/write file that is created exclusively and optionally deleted on close.

    The file is opened in 'x+' mode: it must not exist yet, which guarantees the
    handle owns a freshly created file. With delete_on_close=True the file is
    removed from disk when the handle is closed, either explicitly, by leaving
    a with-block or when the object is garbage collected. On Windows the
    O_TEMPORARY flag is requested as well so the OS removes the file even if the
    process dies with the handle open.

    Args:
        path: Path of the file to create.
        delete_on_close: Remove the file when the handle is closed.

    Attributes:
        path: Path of the file as a Path object.
        delete_on_close: Whether close() removes the file.

    Notes:
        Sharing is not restricted on POSIX systems, other processes can open the
        file by path while this handle is open.

    Example:
        >>> with TempFileIO("/tmp/work/scratch.bin") as f:
        ...     f.write(b"payload")
        ...     f.seek(0)
        ...     data = f.read()
        >>> os.path.exists("/tmp/work/scratch.bin")
        False
    """

    path: Path
    delete_on_close: bool
    _created: bool

    def __init__(
            self,
            path: Union[str, os.PathLike[str]],
            delete_on_close: bool = True,
    ) -> None:
        # Path("") normalizes to "."
        if os.fspath(path) in ("", os.curdir):
            raise ValueError(f"TempFileIO path required, got {path!r}")

        self.path = Path(path)
        self.delete_on_close = delete_on_close
        self._created = False

        super().__init__(self.path, "x+", opener=self._open_flags)

        self._created = True

    def _open_flags(self, path: str | os.PathLike[str], flags: int) -> int:
        if self.delete_on_close:
            flags |= _O_TEMPORARY
        return os.open(path, flags, 0o600)

    def close(self) -> None:
        """Close the file and remove it when delete_on_close is set."""
        if self.closed:
            return
        try:
            super().close()
        finally:
            # Only remove a file this handle created, never a pre-existing one
            if self.delete_on_close and getattr(self, "_created", False):
                try:
                    self.path.unlink(missing_ok=True)
                except OSError as exc:
                    logger.debug("Failed to delete temp file %s on close: %s", self.path, exc)

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<TempFileIO path={str(self.path)!r} delete_on_close={self.delete_on_close} {state}>"


# Methods --------------------------------------------------------------------------------------------------------------

def open_temp_file(path: Union[str, os.PathLike[str]], keep_file: bool = False) -> TempFileIO:
    """
    Default temp file opener: create path exclusively for reading and writing.

    Args:
        path: Path of the file to create, must not exist.
        keep_file: If False, the file is deleted when the returned handle is closed.
            If True, the file stays on disk after close.

    Returns:
        TempFileIO: Open binary handle positioned at offset 0.

    Raises:
        FileExistsError: If path already exists.
        FileNotFoundError: If the parent directory does not exist.
        PermissionError: If lacking permission to create the file.
        OSError: For other open failures (disk full, invalid name, etc.).
    """
    return TempFileIO(path, delete_on_close=not keep_file)
