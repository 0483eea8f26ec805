"""
Unit tests for the `digestr` command.

Tests the CLI in-process with click's CliRunner:
- Digesting literal strings and files
- Output encodings and output files
- Listing mode
- Error reporting and exit codes
- Settings from .digestr.toml and the environment
"""

import hashlib

import pytest
from click.testing import CliRunner

from digestr.cli import cli
from digestr.hashing.registry import default_registry
from digestr.presenters.listing import format_algorithm_list

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


class TestDigestCommand:
    """Tests for ALGORITHM INPUT invocations."""

    def test_sha256_of_abc(self, runner):
        """The SHA-256 'abc' vector is printed as hex with one newline."""
        result = runner.invoke(cli, ["sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output == f"{ABC_SHA256}\n"

    def test_empty_string(self, runner):
        result = runner.invoke(cli, ["md5", ""])

        assert result.exit_code == 0, result.output
        assert result.output == "d41d8cd98f00b204e9800998ecf8427e\n"

    def test_file_input(self, runner, write_file):
        content = b"line one\nline two\n" * 10_000
        path = write_file("input.txt", content)

        result = runner.invoke(cli, ["-f", "sha1", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == hashlib.sha1(content).hexdigest()

    def test_file_and_string_agree(self, runner, write_file):
        """Hashing a file equals hashing its text passed as INPUT."""
        path = write_file("greeting.txt", "grüße".encode())

        from_file = runner.invoke(cli, ["--file", "blake3", str(path)])
        from_string = runner.invoke(cli, ["blake3", "grüße"])

        assert from_file.exit_code == from_string.exit_code == 0
        assert from_file.output == from_string.output

    @pytest.mark.parametrize(
        ("encoding", "expected"),
        [
            ("hex", ABC_SHA256),
            ("base64", "ungWv48Bz+pBQUDeXa4iI7ADYaOWF3qctBD/YfIAFa0="),
        ],
    )
    def test_encoding_option(self, runner, encoding, expected):
        result = runner.invoke(cli, ["-e", encoding, "sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output == f"{expected}\n"

    def test_base32(self, runner):
        result = runner.invoke(cli, ["--encoding", "base32", "md5", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("======")

    def test_output_file(self, runner, tmp_path):
        """-o writes the digest and one newline to the file, nothing to stdout."""
        target = tmp_path / "out.txt"

        result = runner.invoke(cli, ["-o", str(target), "sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output == ""
        assert target.read_text() == f"{ABC_SHA256}\n"

    def test_output_file_overwritten(self, runner, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("stale\n")

        result = runner.invoke(cli, ["--output", str(target), "md5", "abc"])

        assert result.exit_code == 0, result.output
        assert target.read_text() == "900150983cd24fb0d6963f7d28e17f72\n"

    def test_verbose_keeps_result_line(self, runner):
        """Diagnostics never replace the digest line."""
        result = runner.invoke(cli, ["-v", "sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert ABC_SHA256 in result.output.splitlines()


class TestListCommand:
    """Tests for --list."""

    def test_list(self, runner):
        result = runner.invoke(cli, ["--list"])

        assert result.exit_code == 0, result.output
        assert result.output == format_algorithm_list(default_registry()) + "\n"
        assert result.output.splitlines()[0] == "Algorithm count: 24"

    def test_list_ignores_positionals(self, runner):
        """Listing mode wins over an algorithm/input pair."""
        result = runner.invoke(cli, ["-l", "sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output.startswith("Algorithm count: 24\n")
        assert ABC_SHA256 not in result.output

    def test_list_to_file(self, runner, tmp_path):
        target = tmp_path / "algorithms.txt"

        result = runner.invoke(cli, ["-l", "-o", str(target)])

        assert result.exit_code == 0, result.output
        text = target.read_text(encoding="utf-8")
        assert text.endswith("˪→ shake256\n")
        assert not text.endswith("\n\n")


class TestErrors:
    """Tests for error reporting."""

    def test_unknown_algorithm(self, runner):
        result = runner.invoke(cli, ["not-a-real-algorithm", "abc"])

        assert result.exit_code == 1
        assert "Error: Unknown hash algorithm: 'not-a-real-algorithm'" in result.output

    def test_unknown_algorithm_writes_no_output(self, runner, tmp_path):
        """A failed run leaves neither stdout output nor a new output file."""
        target = tmp_path / "out.txt"

        result = runner.invoke(cli, ["-o", str(target), "not-a-real-algorithm", "abc"])

        assert result.exit_code == 1
        assert not target.exists()

    def test_unknown_algorithm_leaves_existing_output(self, runner, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("previous\n")

        result = runner.invoke(cli, ["-o", str(target), "SHA256", "abc"])

        assert result.exit_code == 1
        assert target.read_text() == "previous\n"

    def test_family_name_is_not_an_algorithm(self, runner):
        result = runner.invoke(cli, ["sha2", "abc"])

        assert result.exit_code == 1
        assert "Unknown hash algorithm" in result.output

    def test_unknown_encoding(self, runner, tmp_path):
        target = tmp_path / "out.txt"

        result = runner.invoke(cli, ["-e", "HEX", "-o", str(target), "sha256", "abc"])

        assert result.exit_code == 1
        assert "Error: Unknown encoding: 'HEX'" in result.output
        assert not target.exists()

    def test_empty_encoding_is_rejected(self, runner):
        """An explicit empty -e is an unknown encoding, not the configured default."""
        result = runner.invoke(cli, ["-e", "", "sha256", "abc"])

        assert result.exit_code == 1
        assert "Error: Unknown encoding: ''" in result.output
        assert ABC_SHA256 not in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["-f", "sha256", str(tmp_path / "absent.bin")])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_directory_input(self, runner, tmp_path):
        result = runner.invoke(cli, ["-f", "sha256", str(tmp_path)])

        assert result.exit_code == 1
        assert "directory" in result.output

    @pytest.mark.parametrize("args", [[], ["sha256"], ["-f"], ["-e", "hex"]])
    def test_missing_arguments(self, runner, args):
        """Without --list, both ALGORITHM and INPUT are required."""
        result = runner.invoke(cli, args)

        assert result.exit_code == 2
        assert "Error: Missing ALGORITHM and INPUT" in result.output

    def test_help(self, runner):
        result = runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        assert "--encoding" in result.output
        assert "--list" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("digestr, version ")


class TestConfiguredDefaults:
    """Tests for settings picked up by the CLI."""

    def test_encoding_from_config_file(self, runner, tmp_path):
        (tmp_path / ".digestr.toml").write_text('[digest]\nencoding = "base64"\n')

        result = runner.invoke(cli, ["sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output == "ungWv48Bz+pBQUDeXa4iI7ADYaOWF3qctBD/YfIAFa0=\n"

    def test_option_beats_config_file(self, runner, tmp_path):
        (tmp_path / ".digestr.toml").write_text('[digest]\nencoding = "base64"\n')

        result = runner.invoke(cli, ["-e", "hex", "sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output == f"{ABC_SHA256}\n"

    def test_encoding_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("DIGESTR_DIGEST__ENCODING", "base32")

        result = runner.invoke(cli, ["md5", "abc"])

        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("======")

    def test_small_chunk_size_from_config(self, runner, tmp_path, write_file):
        """chunk_size only changes how files are read, never the digest."""
        (tmp_path / ".digestr.toml").write_text("[digest]\nchunk_size = 1024\n")
        content = bytes(range(256)) * 100
        path = write_file("data.bin", content)

        result = runner.invoke(cli, ["-f", "sha3_256", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == hashlib.sha3_256(content).hexdigest()

    def test_invalid_config_value(self, runner, tmp_path):
        (tmp_path / ".digestr.toml").write_text("[digest]\nchunk_size = 1\n")

        result = runner.invoke(cli, ["sha256", "abc"])

        assert result.exit_code == 1
        assert "Error: Invalid digestr configuration" in result.output

    def test_malformed_config_is_ignored(self, runner, tmp_path):
        (tmp_path / ".digestr.toml").write_text("[digest\nencoding = ")

        result = runner.invoke(cli, ["sha256", "abc"])

        assert result.exit_code == 0, result.output
        assert ABC_SHA256 in result.output.splitlines()
        assert "Failed to parse" not in result.output
