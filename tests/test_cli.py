"""Tests for the CLI implementation."""

import json
import struct

import pytest
from typer.testing import CliRunner

from typedfile import TypedFile, ElementKind
from typedfile.cli import app, collect_values


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def ints_path(self, tmp_path):
        """Int32 file holding 1..5."""
        path = tmp_path / "ints.bin"
        TypedFile(path, ElementKind.INT32).write([1, 2, 3, 4, 5])
        return path

    def test_read_prints_line(self, runner, ints_path):
        """Test that read prints every element followed by the separator."""
        result = runner.invoke(app, ["read", str(ints_path)])

        assert result.exit_code == 0
        assert result.stdout == "1 2 3 4 5 \n"

    def test_read_custom_separator(self, runner, ints_path):
        result = runner.invoke(app, ["read", str(ints_path), "--sep", ","])

        assert result.exit_code == 0
        assert result.stdout == "1,2,3,4,5,\n"

    def test_read_jsonl(self, runner, tmp_path):
        path = tmp_path / "words.bin"
        TypedFile(path, ElementKind.TEXT).write(["a b", "c"])

        result = runner.invoke(app, ["read", str(path), "--kind", "text", "--jsonl"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert [json.loads(line) for line in lines] == ["a b", "c"]

    def test_read_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["read", str(tmp_path / "missing.bin")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_read_misaligned_file(self, runner, tmp_path):
        path = tmp_path / "odd.bin"
        path.write_bytes(b"\x01\x00\x00")

        result = runner.invoke(app, ["read", str(path)])

        assert result.exit_code == 1

    def test_write_values(self, runner, tmp_path):
        path = tmp_path / "out.bin"

        result = runner.invoke(app, ["write", str(path), "7", "8", "9", "--kind", "int16"])

        assert result.exit_code == 0
        assert "wrote 3 int16 elements" in result.stdout
        assert path.read_bytes() == struct.pack("<3h", 7, 8, 9)

    def test_write_range(self, runner, tmp_path):
        path = tmp_path / "out.bin"

        result = runner.invoke(app, ["write", str(path), "--range", "0", "4"])

        assert result.exit_code == 0
        assert TypedFile(path, ElementKind.INT32).read_all() == [0, 1, 2, 3]

    def test_write_bad_value(self, runner, tmp_path):
        path = tmp_path / "out.bin"

        result = runner.invoke(app, ["write", str(path), "abc"])

        assert result.exit_code == 1
        assert not path.exists()

    def test_write_out_of_range(self, runner, tmp_path):
        result = runner.invoke(app, ["write", str(tmp_path / "out.bin"), "300", "--kind", "byte"])

        assert result.exit_code == 1
        assert "Cannot encode" in result.output

    def test_append(self, runner, ints_path):
        result = runner.invoke(app, ["append", str(ints_path), "6"])

        assert result.exit_code == 0
        assert TypedFile(ints_path, ElementKind.INT32).read_all() == [1, 2, 3, 4, 5, 6]

    def test_truncate(self, runner, ints_path):
        result = runner.invoke(app, ["truncate", str(ints_path), "3"])

        assert result.exit_code == 0
        assert ints_path.stat().st_size == 12

    def test_truncate_too_far(self, runner, ints_path):
        result = runner.invoke(app, ["truncate", str(ints_path), "10"])

        assert result.exit_code == 1
        assert "too short" in result.output
        assert ints_path.stat().st_size == 20

    def test_truncate_text_unsupported(self, runner, tmp_path):
        path = tmp_path / "words.bin"
        TypedFile(path, ElementKind.TEXT).write(["a"])

        result = runner.invoke(app, ["truncate", str(path), "0", "--kind", "text"])

        assert result.exit_code == 1

    def test_count(self, runner, ints_path):
        result = runner.invoke(app, ["count", str(ints_path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "5"

    def test_delete(self, runner, ints_path):
        result = runner.invoke(app, ["delete", str(ints_path)])

        assert result.exit_code == 0
        assert not ints_path.exists()

        result = runner.invoke(app, ["delete", str(ints_path)])
        assert result.exit_code == 0
        assert "does not exist" in result.stdout

    def test_delete_directory_fails_cleanly(self, runner, tmp_path):
        """Test that an undeletable path reports an error instead of a traceback."""
        target = tmp_path / "subdir"
        target.mkdir()

        result = runner.invoke(app, ["delete", str(target)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert target.is_dir()

    def test_verbose_flag(self, runner, ints_path):
        result = runner.invoke(app, ["--verbose", "count", str(ints_path)])

        assert result.exit_code == 0


class TestCollectValues:
    """Test turning CLI input into typed values."""

    def test_values(self):
        assert collect_values(ElementKind.FLOAT64, ["1", "2.5"], None) == [1.0, 2.5]

    def test_range(self):
        assert collect_values(ElementKind.INT64, None, (3, 0)) == [3, 2, 1]

    def test_range_placeholder_is_ignored(self):
        assert collect_values(ElementKind.INT32, ["4"], (None, None)) == [4]

    def test_values_and_range_conflict(self):
        with pytest.raises(ValueError, match="not both"):
            collect_values(ElementKind.INT32, ["1"], (0, 2))

    def test_nothing(self):
        assert collect_values(ElementKind.INT32, None, None) == []
