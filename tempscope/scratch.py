#
# Tempscope Scratch Directory Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
import time
import weakref
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, IO

# Local ----------------------------------------------------------------------------------------------------------------
from .io import TempFileOpener, open_temp_file
from .os import create_dir, process_name, remove_dir, system_temp_dir
from .random import unique_id
from .validators import validate_dir_path, validate_extension, validate_prefix

logger = logging.getLogger(__name__)

# Constants ------------------------------------------------------------------------------------------------------------

DEFAULT_TEMP_FILE_EXTENSION = ".tmp"

# Process-scoped naming prefix, None until first read or explicit set
_naming_prefix: str | None = None


# Methods --------------------------------------------------------------------------------------------------------------

def get_naming_prefix() -> str:
    """
    Return the process-wide prefix for scratch directory names.

    Resolved on first read to the entry script name followed by '_', e.g. 'train_'.
    """
    global _naming_prefix
    if _naming_prefix is None:
        _naming_prefix = process_name() + "_"
    return _naming_prefix


def set_naming_prefix(prefix: str) -> None:
    """
    Set the process-wide prefix for scratch directory names.

    Affects every ScratchDirectory constructed afterwards, existing instances keep
    their directories. Set it before the first ScratchDirectory is created when
    directory names must be reproducible.

    Raises:
        TypeError: If prefix is not a str (including None).
        ValueError: If prefix contains a path separator.
    """
    global _naming_prefix
    _naming_prefix = validate_prefix(prefix)


def reset_naming_prefix() -> None:
    """Forget the configured prefix, the next read resolves the default again."""
    global _naming_prefix
    _naming_prefix = None


def _discard_removal(path: Path) -> None:
    # Teardown never raises, a failed removal is only logged
    result = remove_dir(path)
    if not result.ok:
        logger.debug("Scratch directory %s not fully removed: %s", path, result.error)


# Classes --------------------------------------------------------------------------------------------------------------

class ScratchDirectory:
    """
    A private scratch directory that hands out unique temp file names and removes itself at scope end.

    The directory is created by the constructor under base_parent_dir (the system temp
    directory by default) and named from the process naming prefix plus a
    process-relative monotonic tick, e.g. '/tmp/train_81273645512'. File names inside it
    are fresh UUIDs plus an extension. Issued names can be recorded in issued_names,
    per instance via store_names or per call via store.

    The scope ends on close(), on leaving a with-block, or as a last resort when the
    object is garbage collected or the interpreter exits. Ending the scope makes one
    best-effort attempt to remove the directory tree; failures are swallowed, so the
    directory may survive if, for example, another process holds one of its files
    open. Using the instance after its scope ended is not supported.

    Instances are not thread-safe, serialize concurrent use externally.

    Args:
        base_parent_dir: Directory to create the scratch directory in. None means
            the system temp directory.
        store_names: Default for recording issued names in issued_names.
        prefix: Directory name prefix for this instance. None means get_naming_prefix().

    Raises:
        TypeError: If base_parent_dir or prefix has the wrong type.
        ValueError: If prefix contains a path separator.
        OSError: If the directory cannot be created.

    Examples:
        >>> with ScratchDirectory(store_names=True) as scratch:
        ...     a = scratch.get_temp_file_name(".txt")
        ...     a.write_text("draft")
        ...     with scratch.get_temp_file_stream(".bin") as f:
        ...         f.write(b"\\x00\\x01")
        >>> a.exists()
        False
    """

    def __init__(
            self,
            base_parent_dir: str | os.PathLike[str] | None = None,
            store_names: bool = False,
            *,
            prefix: str | None = None,
    ) -> None:
        parent = system_temp_dir() if base_parent_dir is None else validate_dir_path(base_parent_dir,
                                                                                      name="base_parent_dir")
        prefix = get_naming_prefix() if prefix is None else validate_prefix(prefix)

        self._store_names = bool(store_names)
        self._issued_names: list[Path] = []
        self._base_dir = parent / f"{prefix}{time.perf_counter_ns()}"

        # Creation errors propagate
        create_dir(self._base_dir)
        self._finalizer = weakref.finalize(self, _discard_removal, self._base_dir)
        logger.debug("Created scratch directory %s", self._base_dir)

    # ----- Properties -----

    @property
    def base_dir(self) -> Path:
        """Scratch directory owned by this instance."""
        return self._base_dir

    @property
    def store_names(self) -> bool:
        """Default for recording issued names."""
        return self._store_names

    @property
    def issued_names(self) -> tuple[Path, ...]:
        """Recorded paths in issue order, empty when nothing was recorded."""
        return tuple(self._issued_names)

    @property
    def closed(self) -> bool:
        """True once the scope ended and the directory removal was attempted."""
        return not self._finalizer.alive

    # ----- Names and streams -----

    def get_temp_file_name(self, extension: str = DEFAULT_TEMP_FILE_EXTENSION, store: bool | None = None) -> Path:
        """
        Return a fresh file path inside base_dir, the file itself is not created.

        Args:
            extension: Suffix appended verbatim to the generated name, e.g. '.txt'.
            store: Record the path in issued_names. None uses store_names.

        Returns:
            Path: base_dir / '<uuid><extension>'.

        Raises:
            TypeError: If extension is not a str.
            ValueError: If extension is empty.
        """
        validate_extension(extension)

        if store is None:
            store = self._store_names

        path = self._base_dir / (unique_id() + extension)
        if store:
            self._issued_names.append(path)
        return path

    def get_temp_file_stream(
            self,
            extension: str = DEFAULT_TEMP_FILE_EXTENSION,
            store: bool | None = None,
            *,
            keep_file: bool = False,
            opener: TempFileOpener | None = None,
    ) -> IO[bytes]:
        """
        Create a fresh file inside base_dir and return it open for reading and writing.

        Naming and recording follow get_temp_file_name(). By default the file is created
        exclusively and deleted as soon as the handle is closed, independent of this
        scope. With keep_file=True it stays on disk until the scope ends or clear() runs.

        Args:
            extension: Suffix appended verbatim to the generated name.
            store: Record the path in issued_names. None uses store_names.
            keep_file: Keep the file on disk after the handle is closed.
            opener: Custom strategy opener(path, keep_file) -> binary file object, used
                instead of the default exclusive open. It decides buffering, sharing and
                whether to honor keep_file.

        Returns:
            IO[bytes]: Open handle owned by the caller.

        Raises:
            TypeError: If extension is not a str.
            ValueError: If extension is empty.
            OSError: If the file cannot be opened; anything the custom opener raises propagates.

        Examples:
            >>> with scratch.get_temp_file_stream(".csv", keep_file=True) as f:
            ...     f.write(b"a,b\\n")
            ...     kept = f.name
        """
        path = self.get_temp_file_name(extension, store)
        if opener is None:
            return open_temp_file(path, keep_file)
        return opener(path, keep_file)

    # ----- Lifecycle -----

    def clear(self) -> None:
        """
        Remove every file from base_dir and forget issued names, keeping the scope alive.

        The directory is deleted best-effort and recreated. Removal failures are ignored,
        so files held open by other processes may survive.

        Raises:
            OSError: If base_dir cannot be recreated.
        """
        self._issued_names.clear()
        _discard_removal(self._base_dir)
        create_dir(self._base_dir, exist_ok=True)
        logger.debug("Cleared scratch directory %s", self._base_dir)

    def close(self) -> None:
        """End the scope and remove base_dir best-effort. Repeated calls do nothing."""
        if self._finalizer.alive:
            logger.debug("Removing scratch directory %s", self._base_dir)
        self._finalizer()

    def __enter__(self) -> "ScratchDirectory":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __fspath__(self) -> str:
        return os.fspath(self._base_dir)

    def __repr__(self) -> str:
        state = ", closed" if self.closed else ""
        return (f"{type(self).__name__}(base_dir={str(self._base_dir)!r}, "
                f"store_names={self._store_names}{state})")


@contextmanager
def scratch_dir(
        base_parent_dir: str | os.PathLike[str] | None = None,
        store_names: bool = False,
        *,
        prefix: str | None = None,
) -> Iterator[ScratchDirectory]:
    """
    Context manager that provides a live ScratchDirectory.
    The directory and its contents are removed best-effort upon exiting the 'with' block.
    """
    scratch = ScratchDirectory(base_parent_dir, store_names, prefix=prefix)
    try:
        yield scratch
    finally:
        scratch.close()
