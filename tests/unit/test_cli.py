"""
Unit tests for the digestfmt CLI.

Commands are invoked through the top-level group with Click's CliRunner,
so settings loading and logging setup run exactly as they do from a shell.
"""

import hashlib
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from digestfmt.cli import __version__, cli

MD5_ABC = "900150983cd24fb0d6963f7d28e17f72"
SHA1_EMPTY = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


class TestHashCommand:
    """Tests for 'digestfmt hash'."""

    def test_named_algorithm(self, runner):
        result = runner.invoke(cli, ["hash", "-a", "MD5", "abc"])
        assert result.exit_code == 0, result.output
        assert result.output == f"{MD5_ABC}\n"

    def test_defaults_to_strongest(self, runner):
        smart = runner.invoke(cli, ["hash", "abc"])
        sha512 = runner.invoke(cli, ["sha512", "abc"])

        assert smart.exit_code == 0
        assert len(smart.output.strip()) == 128
        assert smart.output == sha512.output

    def test_reads_stdin_when_text_omitted(self, runner):
        result = runner.invoke(cli, ["hash", "-a", "md5"], input="abc")
        assert result.output == f"{MD5_ABC}\n"

    def test_dash_reads_stdin(self, runner):
        result = runner.invoke(cli, ["hash", "-a", "MD5", "-"], input="abc")
        assert result.output == f"{MD5_ABC}\n"

    def test_non_utf8_stdin_is_read_as_latin1(self, runner):
        result = runner.invoke(cli, ["hash", "-a", "MD5"], input=b"\xe9")
        assert result.exit_code == 0, result.output
        assert result.output == hashlib.md5(b"\xe9").hexdigest() + "\n"

    def test_utf8_stdin_matches_latin1_bytes(self, runner):
        utf8 = runner.invoke(cli, ["md5"], input="\u00e9".encode("utf-8"))
        latin1 = runner.invoke(cli, ["md5"], input=b"\xe9")
        assert utf8.output == latin1.output

    def test_empty_text_argument(self, runner):
        result = runner.invoke(cli, ["hash", "--algorithm", "SHA-1", ""])
        assert result.output == f"{SHA1_EMPTY}\n"

    def test_show_algorithm(self, runner):
        result = runner.invoke(cli, ["hash", "--show-algorithm", "-a", "MD5", "abc"])
        assert result.output == f"MD5:{MD5_ABC}\n"

    def test_show_algorithm_names_the_strongest(self, runner):
        result = runner.invoke(cli, ["hash", "--show-algorithm", "abc"])
        assert result.output.startswith("SHA-512:")

    def test_unknown_algorithm_fails(self, runner):
        result = runner.invoke(cli, ["hash", "-a", "unknown-alg", "abc"])
        assert result.exit_code == 1
        assert "Unknown hash algorithm" in result.output

    def test_uses_configured_default(self, runner, write_config):
        write_config('[hash]\ndefault = "MD5"\n')
        result = runner.invoke(cli, ["hash", "abc"])
        assert result.output == f"{MD5_ABC}\n"

    def test_env_default(self, runner, monkeypatch):
        monkeypatch.setenv("DIGESTFMT_HASH__DEFAULT", "SHA-1")
        result = runner.invoke(cli, ["hash", ""])
        assert result.output == f"{SHA1_EMPTY}\n"

    def test_option_beats_configured_default(self, runner, write_config):
        write_config('[hash]\ndefault = "SHA-1"\n')
        result = runner.invoke(cli, ["hash", "-a", "MD5", "abc"])
        assert result.output == f"{MD5_ABC}\n"

    def test_latin1_encoding(self, runner):
        euro = runner.invoke(cli, ["md5", "€"])
        question = runner.invoke(cli, ["md5", "?"])
        assert euro.output == question.output


class TestShortcutCommands:
    """Tests for md5 / sha1 / sha512."""

    def test_md5(self, runner):
        assert runner.invoke(cli, ["md5", "abc"]).output == f"{MD5_ABC}\n"

    def test_sha1(self, runner):
        assert runner.invoke(cli, ["sha1", ""]).output == f"{SHA1_EMPTY}\n"

    def test_sha512_length(self, runner):
        result = runner.invoke(cli, ["sha512", "abc"])
        assert result.exit_code == 0
        assert len(result.output.strip()) == 128

    def test_shortcut_reads_stdin(self, runner):
        assert runner.invoke(cli, ["md5"], input="abc").output == f"{MD5_ABC}\n"


class TestAlgorithmsCommand:
    """Tests for 'digestfmt algorithms'."""

    def test_lists_standard_algorithms_in_order(self, runner):
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0

        names = [line.split()[0] for line in result.output.splitlines()]
        assert names == ["MD2", "MD5", "SHA-1", "SHA-256", "SHA-384", "SHA-512"]

    def test_marks_strongest(self, runner):
        result = runner.invoke(cli, ["algorithms"])
        strongest = [line for line in result.output.splitlines() if "(strongest)" in line]
        assert len(strongest) == 1
        assert strongest[0].split()[0] == "SHA-512"
        assert "128 hex chars" in strongest[0]

    def test_all_includes_extras(self, runner):
        result = runner.invoke(cli, ["algorithms", "--all"])
        assert "BLAKE3" in result.output


class TestConfigCommand:
    """Tests for 'digestfmt config'."""

    def test_set_then_get(self, runner, tmp_path: Path):
        set_result = runner.invoke(cli, ["config", "set", "hash.default", "SHA-256"])
        assert set_result.exit_code == 0, set_result.output
        assert "Set hash.default = SHA-256" in set_result.output
        assert (tmp_path / ".digestfmt" / "config.toml").exists()

        get_result = runner.invoke(cli, ["config", "get", "hash.default"])
        assert get_result.output == "hash.default: SHA-256\n"

    def test_get_unset(self, runner):
        result = runner.invoke(cli, ["config", "get", "hash.default"])
        assert result.output == "hash.default: (not set)\n"

    def test_set_invalid_key(self, runner):
        result = runner.invoke(cli, ["config", "set", "hash.primary", "MD5"])
        assert result.exit_code == 1
        assert "Unknown config key" in result.output

    def test_list(self, runner):
        result = runner.invoke(cli, ["config", "list"])
        assert "hash.default" in result.output
        assert "logging.level" in result.output

    def test_set_reports_invalid_existing_file(self, runner, write_config):
        write_config('[logging]\nlevel = "loud"\n')

        result = runner.invoke(cli, ["config", "set", "logging.level", "info"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestGroup:
    """Tests for the top-level group."""

    def test_no_subcommand_prints_help(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "digestfmt" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert __version__ in result.output

    def test_invalid_config_fails_cleanly(self, runner, write_config):
        write_config('[logging]\nlevel = "loud"\n')
        result = runner.invoke(cli, ["md5", "abc"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_module_entry_point(self, tmp_path: Path):
        result = subprocess.run(
            [sys.executable, "-m", "digestfmt", "md5", "abc"],
            cwd=tmp_path,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == MD5_ABC
