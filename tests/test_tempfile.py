#
# Tempscope - Ad-hoc Temp File Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import gc
import io
import tempfile
from pathlib import Path

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from tempscope.io import TempFileIO
from tempscope.tempfile import create_temp_file_stream, temp_file


# Tests ----------------------------------------------------------------------------------------------------------------

class TestCreateTempFileStream:
    def test_default_deleted_on_release(self, system_temp: Path):
        """Create a .tmp file in system temp that disappears on close."""
        f = create_temp_file_stream()
        path = Path(f.name)
        assert isinstance(f, TempFileIO)
        assert path.parent == system_temp
        assert path.suffix == ".tmp"
        f.write(b"\x00\x01\x02")
        f.close()
        assert not path.exists()

    def test_deleted_on_release_without_close(self, system_temp: Path):
        """Remove the file when an unclosed stream is collected."""
        f = create_temp_file_stream()
        path = Path(f.name)
        f.write(b"dropped")
        assert path.exists()
        del f
        gc.collect()
        assert not path.exists()

    def test_keep_file(self, system_temp: Path):
        """Leave the file present at the returned path with keep_file."""
        with create_temp_file_stream(keep_file=True) as f:
            f.write(b"kept")
            path = Path(f.name)
        assert path.read_bytes() == b"kept"

    def test_extension(self, system_temp: Path):
        """Append the given extension to a random base name."""
        with create_temp_file_stream(".json") as f:
            path = Path(f.name)
            assert path.name.endswith(".json")
            assert len(path.name) > len(".json")

    def test_empty_extension(self, system_temp: Path):
        """Use the bare random name for an empty extension."""
        with create_temp_file_stream("") as f:
            assert "." not in Path(f.name).name

    def test_names_are_distinct(self, system_temp: Path):
        """Pick a fresh name on every call."""
        handles = [create_temp_file_stream() for _ in range(25)]
        try:
            assert len({Path(f.name) for f in handles}) == 25
        finally:
            for f in handles:
                f.close()
        assert list(system_temp.iterdir()) == []

    @pytest.mark.parametrize("keep_file", [False, True])
    def test_opener_receives_path_and_keep_flag(self, system_temp: Path, keep_file: bool):
        """Delegate opening to the caller strategy."""
        calls = []

        def opener(path: Path, keep: bool):
            calls.append((path, keep))
            return open(path, "w+b")

        f = create_temp_file_stream(opener=opener, keep_file=keep_file)
        assert isinstance(f, io.BufferedRandom)
        f.close()

        path, keep = calls[0]
        assert keep is keep_file
        assert path.parent == system_temp
        assert path.suffix == ".tmp"
        # A plain open() ignores the delete hint, the strategy decides
        assert path.exists()

    def test_opener_with_extension(self, system_temp: Path):
        """Combine a custom opener with an explicit extension."""

        def opener(path: Path, keep: bool):
            return TempFileIO(path, delete_on_close=not keep)

        with create_temp_file_stream(".part", opener=opener) as f:
            path = Path(f.name)
            assert path.suffix == ".part"
            assert path.exists()
        assert not path.exists()

    def test_open_failure_propagates(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Propagate open errors without retrying."""
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            create_temp_file_stream()

    def test_invalid_extension(self, system_temp: Path):
        """Reject extensions with path separators and non-str values."""
        with pytest.raises(ValueError):
            create_temp_file_stream("/x")
        with pytest.raises(TypeError):
            create_temp_file_stream(5)


class TestTempFile:
    def test_temp_file(self, system_temp: Path):
        """Yield an open handle and remove the file on exit."""
        with temp_file(".bin") as f:
            f.write(b"data")
            f.seek(0)
            assert f.read() == b"data"
            path = Path(f.name)
            assert path.exists()
        assert f.closed
        assert not path.exists()

    def test_temp_file_on_error(self, system_temp: Path):
        """Close and remove the file when the block raises."""
        with pytest.raises(KeyError):
            with temp_file() as f:
                path = Path(f.name)
                raise KeyError("boom")
        assert not path.exists()
