#
# Tempscope Ad-hoc Temp File Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from contextlib import contextmanager
from typing import IO, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .io import TempFileOpener, open_temp_file
from .os import system_temp_dir
from .random import random_file_name
from .scratch import DEFAULT_TEMP_FILE_EXTENSION
from .validators import validate_extension


# Methods --------------------------------------------------------------------------------------------------------------

def create_temp_file_stream(
        extension: str | None = None,
        *,
        opener: TempFileOpener | None = None,
        keep_file: bool = False,
) -> IO[bytes]:
    """
    Create a single temp file directly in the system temp directory and return it open.

    Stateless, no ScratchDirectory is involved: the caller owns both the handle and,
    with keep_file=True, the file left behind.

    Args:
        extension: Suffix appended verbatim to a random base name. None means '.tmp',
            '' means no extension.
        opener: Custom strategy opener(path, keep_file) -> binary file object. It receives
            the chosen path and keep_file and decides itself whether to delete on close.
            None uses the default exclusive read/write open.
        keep_file: If False, the default open deletes the file when the handle is closed.

    Returns:
        IO[bytes]: Open handle positioned at offset 0.

    Raises:
        TypeError: If extension is not a str or None.
        ValueError: If extension contains a path separator.
        OSError: If the file cannot be opened (permission denied, disk full, etc.).
            Anything the custom opener raises propagates.

    Examples:
        Self-cleaning scratch file:

        >>> with create_temp_file_stream() as f:
        ...     f.write(b"scratch")
        ...     path = f.name
        >>> os.path.exists(path)
        False

        Keep the file for a later move:

        >>> with create_temp_file_stream(".json", keep_file=True) as f:
        ...     f.write(b"{}")
        ...     path = f.name
        >>> shutil.move(path, "result.json")
    """
    if extension is None:
        extension = DEFAULT_TEMP_FILE_EXTENSION
    validate_extension(extension, allow_empty=True)

    path = system_temp_dir() / (random_file_name() + extension)
    if opener is None:
        return open_temp_file(path, keep_file)
    return opener(path, keep_file)


@contextmanager
def temp_file(extension: str | None = None, *, opener: TempFileOpener | None = None) -> Iterator[IO[bytes]]:
    """
    Context manager that provides an open self-deleting temp file in the system temp directory.
    The handle is closed upon exiting the 'with' block; the default open then removes the file.
    """
    f = create_temp_file_stream(extension, opener=opener, keep_file=False)
    try:
        yield f
    finally:
        f.close()
