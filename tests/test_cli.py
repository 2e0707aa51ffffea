"""Tests for the factorial command line."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from core import __version__
from core.config_file import CONFIG_FILENAME
from shell.cli import app

ROOT = Path(__file__).resolve().parent.parent
PROMPT = "Enter a positive integer: "

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run every command from an empty directory with a clean FACT_* env."""
    for name in ("FACT_STRICT", "FACT_LOG_LEVEL", "FACT_REPO_ROOT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_prompt_and_result():
    result = runner.invoke(app, [], input="5\n")

    assert result.exit_code == 0
    assert result.stdout == f"{PROMPT}Factorial of 5 = 120\n"


def test_argument_skips_prompt():
    result = runner.invoke(app, ["10"])

    assert result.exit_code == 0
    assert result.stdout == "Factorial of 10 = 3628800\n"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("0", "Factorial of 0 = 1"),
        ("20", "Factorial of 20 = 2432902008176640000"),
        ("21", "Factorial of 21 = 14197454024290336768"),
        ("70", "Factorial of 70 = 0"),
        ("abc", "Factorial of 0 = 1"),
        ("  7 apples", "Factorial of 7 = 5040"),
        ("", "Factorial of 0 = 1"),
    ],
)
def test_default_mode_keeps_stream_semantics(line, expected):
    """Malformed input reads as 0 and large n wraps, both with exit 0."""
    result = runner.invoke(app, [], input=line)

    assert result.exit_code == 0
    assert result.stdout == f"{PROMPT}{expected}\n"


def test_blank_lines_before_number_are_skipped():
    """Leading empty lines are whitespace to the reader, not a failed read."""
    result = runner.invoke(app, [], input="\n  \n5\n")

    assert result.exit_code == 0
    assert result.stdout == f"{PROMPT}Factorial of 5 = 120\n"


def test_only_blank_lines_read_zero():
    result = runner.invoke(app, [], input="\n\n")

    assert result.exit_code == 0
    assert result.stdout == f"{PROMPT}Factorial of 0 = 1\n"


def test_very_long_number_clamps():
    result = runner.invoke(app, [], input="9" * 5000 + "\n")

    assert result.exit_code == 0
    assert result.stdout == f"{PROMPT}Factorial of 2147483647 = 0\n"


def test_very_long_number_strict_fails():
    result = runner.invoke(app, ["--strict"], input="9" * 5000 + "\n")

    assert result.exit_code == 1
    assert "integer out of range" in result.output


def test_negative_input_fails():
    result = runner.invoke(app, [], input="-3\n")

    assert result.exit_code == 1
    assert "Error: factorial is undefined for negative integers (n=-3)" in result.output
    assert "Factorial of" not in result.output


def test_negative_argument_fails():
    result = runner.invoke(app, ["-3"])

    assert result.exit_code == 1
    assert "negative integers" in result.output


class TestStrictMode:
    """--strict, FACT_STRICT and config-file strictness."""

    def test_strict_valid(self):
        result = runner.invoke(app, ["--strict", "20"])

        assert result.exit_code == 0
        assert result.stdout == "Factorial of 20 = 2432902008176640000\n"

    def test_strict_rejects_overflow(self):
        result = runner.invoke(app, ["--strict", "21"])

        assert result.exit_code == 1
        assert "21! does not fit in 64 unsigned bits" in result.output

    def test_strict_rejects_garbage(self):
        result = runner.invoke(app, ["--strict"], input="5abc\n")

        assert result.exit_code == 1
        assert "not an integer: '5abc'" in result.output

    def test_env_enables_strict(self, monkeypatch):
        monkeypatch.setenv("FACT_STRICT", "yes")

        result = runner.invoke(app, ["abc"])

        assert result.exit_code == 1
        assert "not an integer" in result.output

    def test_flag_overrides_config(self, isolated):
        (isolated / CONFIG_FILENAME).write_text("[factorial]\nstrict = true\n", encoding="utf-8")

        assert runner.invoke(app, ["21"]).exit_code == 1
        result = runner.invoke(app, ["--no-strict", "21"])
        assert result.exit_code == 0
        assert result.stdout == "Factorial of 21 = 14197454024290336768\n"

    def test_profile(self, isolated):
        (isolated / CONFIG_FILENAME).write_text(
            "[factorial]\nstrict = false\n[profiles.prod]\nfactorial = { strict = true }\n",
            encoding="utf-8",
        )

        assert runner.invoke(app, ["21"]).exit_code == 0
        assert runner.invoke(app, ["--profile", "prod", "21"]).exit_code == 1


def test_invalid_config_file_fails(isolated):
    (isolated / CONFIG_FILENAME).write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")

    result = runner.invoke(app, ["5"])

    assert result.exit_code == 1
    assert "logging.level must be one of" in result.output


def test_unknown_profile_fails():
    result = runner.invoke(app, ["--profile", "dev", "5"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == f"factorial-cli {__version__}"


def test_init_config(isolated):
    result = runner.invoke(app, ["--init-config"])

    assert result.exit_code == 0
    assert (isolated / CONFIG_FILENAME).is_file()

    again = runner.invoke(app, ["--init-config"])
    assert again.exit_code == 1
    assert "already exists" in again.output


def test_init_config_honours_repo_root_env(tmp_path, monkeypatch):
    target = tmp_path / "elsewhere"
    target.mkdir()
    monkeypatch.setenv("FACT_REPO_ROOT", str(target))

    result = runner.invoke(app, ["--init-config"])

    assert result.exit_code == 0
    assert (target / CONFIG_FILENAME).is_file()
    assert not (tmp_path / CONFIG_FILENAME).exists()


def test_verbose_logs_to_stderr():
    result = runner.invoke(app, ["--verbose", "5"])

    assert result.exit_code == 0
    assert result.stdout == "Factorial of 5 = 120\n"
    assert "n=5 result=120" in result.stderr


def test_main_script_end_to_end(tmp_path):
    env = {k: v for k, v in os.environ.items() if not k.startswith("FACT_")}
    env["FACT_REPO_ROOT"] = str(tmp_path)

    result = subprocess.run(
        [sys.executable, "main.py"],
        cwd=ROOT,
        input="5\n",
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )

    assert result.returncode == 0
    assert result.stdout == f"{PROMPT}Factorial of 5 = 120\n"
    assert result.stderr == ""
