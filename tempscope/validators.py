"""
Tempscope Argument Validators

Validation of the small set of inputs the scratch tools accept from callers:
file extensions, directory name prefixes and directory paths. These validators check both type and content
and return the normalized value so they can be used inline.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from pathlib import Path


# Methods --------------------------------------------------------------------------------------------------------------

def validate_extension(extension: str, *, name: str = "extension", allow_empty: bool = False) -> str:
    """
    Validate a file extension to be appended to a generated file name.

    The extension is used verbatim, no leading dot is added. Both '.txt' and
    '_part.bin' are accepted.

    Args:
        extension: Extension string.
        name: Argument name used in error messages.
        allow_empty: If True, accept '' (no extension).

    Returns:
        The extension unchanged.

    Raises:
        TypeError: If extension is not a str (including None).
        ValueError: If extension is empty and allow_empty is False, or contains a path separator.

    Examples:
        >>> validate_extension(".txt")
        '.txt'

        >>> validate_extension("")
        Traceback (most recent call last):
            ...
        ValueError: extension must be a non-empty string, got ''
    """
    if not isinstance(extension, str):
        raise TypeError(f"{name} must be a str, got {type(extension).__name__}: {extension!r}")

    if not extension and not allow_empty:
        raise ValueError(f"{name} must be a non-empty string, got {extension!r}")

    _check_no_separators(extension, name)

    return extension


def validate_prefix(prefix: str, *, name: str = "prefix") -> str:
    """
    Validate a directory name prefix, the empty string included.

    The prefix must form a single path component so the directory built from it
    stays directly inside its parent.

    Raises:
        TypeError: If prefix is not a str (including None).
        ValueError: If prefix contains a path separator or a drive.
    """
    if not isinstance(prefix, str):
        raise TypeError(f"{name} must be a str, got {type(prefix).__name__}: {prefix!r}")

    _check_no_separators(prefix, name)
    if os.path.splitdrive(prefix)[0]:
        raise ValueError(f"{name} must not contain a drive, got {prefix!r}")

    return prefix


def validate_dir_path(path: str | os.PathLike[str], *, name: str = "path") -> Path:
    """
    Validate a directory path argument and return it as a Path.

    Only the type is checked here, the directory is not required to exist.

    Raises:
        TypeError: If path is None or not str/PathLike.
        ValueError: If path is an empty string.
    """
    if path is None:
        raise TypeError(f"{name} must not be None")
    if not isinstance(path, (str, os.PathLike)):
        raise TypeError(f"{name} must be str or PathLike, got {type(path).__name__}: {path!r}")
    if isinstance(path, str) and not path:
        raise ValueError(f"{name} must be a non-empty path, got {path!r}")

    return Path(path)


# Private methods ------------------------------------------------------------------------------------------------------

def _check_no_separators(value: str, name: str) -> None:
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in value for sep in separators):
        raise ValueError(f"{name} must not contain path separators, got {value!r}")
