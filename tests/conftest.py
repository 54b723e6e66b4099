#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import tempfile
from pathlib import Path

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
import tempscope.scratch as scratch_mod
from tempscope.scratch import ScratchDirectory


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_naming_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with an unresolved process naming prefix."""
    monkeypatch.setattr(scratch_mod, "_naming_prefix", None)


@pytest.fixture
def system_temp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the system temp directory to a private per-test directory."""
    temp_root = tmp_path / "system_temp"
    temp_root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_root))
    return temp_root


@pytest.fixture
def scratch(tmp_path: Path):
    """A live ScratchDirectory that records names, closed after the test."""
    scratch = ScratchDirectory(tmp_path, store_names=True, prefix="test_")
    yield scratch
    scratch.close()
