#
# Tempscope - Random Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import uuid

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from tempscope.random import RANDOM_NAME_ALPHABET, random_file_name, unique_id


# Tests ----------------------------------------------------------------------------------------------------------------

class TestRandomFileName:
    def test_default_length_and_alphabet(self):
        """Produce a name of default length using only lowercase letters and digits."""
        name = random_file_name()
        assert len(name) == 12
        assert set(name) <= set(RANDOM_NAME_ALPHABET)

    @pytest.mark.parametrize("length", [1, 8, 32])
    def test_custom_length(self, length: int):
        """Honor explicit name length."""
        assert len(random_file_name(length)) == length

    def test_seed_is_deterministic(self):
        """Return the same name for the same seed."""
        assert random_file_name(seed=108) == random_file_name(seed=108)

    def test_unseeded_names_differ(self):
        """Produce distinct names across calls without a seed."""
        names = {random_file_name() for _ in range(200)}
        assert len(names) == 200

    @pytest.mark.parametrize("length", [0, -3])
    def test_non_positive_length_raises(self, length: int):
        """Reject non-positive lengths."""
        with pytest.raises(ValueError, match=r"(?i).*positive.*"):
            random_file_name(length)


class TestUniqueId:
    def test_is_uuid4(self):
        """Return a canonical version 4 UUID string."""
        value = unique_id()
        parsed = uuid.UUID(value)
        assert parsed.version == 4
        assert str(parsed) == value

    def test_ids_are_distinct(self):
        """Produce pairwise distinct identifiers."""
        ids = [unique_id() for _ in range(500)]
        assert len(set(ids)) == len(ids)
