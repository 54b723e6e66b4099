"""
Tempscope Random Name Tools
"""

# Standard library -----------------------------------------------------------------------------------------------------
import random
import string
import uuid

# Constants ------------------------------------------------------------------------------------------------------------

DEFAULT_RANDOM_NAME_LENGTH = 12
RANDOM_NAME_ALPHABET = string.ascii_lowercase + string.digits


# Methods --------------------------------------------------------------------------------------------------------------

def random_file_name(length: int = DEFAULT_RANDOM_NAME_LENGTH, seed: int | None = None) -> str:
    """
    Return a random file base name made of lowercase letters and digits.

    The name carries no extension, callers append their own.

    Args:
        length: Number of characters, must be positive.
        seed: If provided, use a dedicated deterministic RNG seeded with this value.
              If None, use random.SystemRandom (cryptographically strong).

    Returns:
        Random name like 'k3x9q0d2mz7a'.

    Raises:
        ValueError: If length is not positive.
    """
    if length < 1:
        raise ValueError(f"length must be positive, got {length!r}")

    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    return "".join(rng.choice(RANDOM_NAME_ALPHABET) for _ in range(length))


def unique_id() -> str:
    """
    Return a fresh 128-bit identifier in canonical UUID form.

    Collisions are not checked, a random UUID4 is unique for any practical process lifetime.

    Examples:
        >>> unique_id()
        '3f2b8c1e-6d3a-4a9e-9c57-0e2f5b7d1a44'
    """
    return str(uuid.uuid4())
