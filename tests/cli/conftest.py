# topmark:header:start
#
#   project      : Counterpart
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Counterpart in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative input paths and the discovered
``counterpart.toml`` / ``pyproject.toml`` belong to the temporary tree.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from counterpart.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["--dry-run", "lib/widget.rb"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def output_lines(result: Result) -> list[str]:
    """Return the non-empty lines of the combined CLI output."""
    return [line for line in result.output.splitlines() if line.strip()]


class ExecRecorder:
    """Stand-in for `os.execvp` that records the requested argv."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    def __call__(self, file: str, args: list[str]) -> None:
        self.calls.append(list(args))


@pytest.fixture
def exec_recorder(monkeypatch: pytest.MonkeyPatch) -> ExecRecorder:
    """Replace `os.execvp` so no editor process is ever started."""
    recorder = ExecRecorder()
    monkeypatch.setattr(os, "execvp", recorder)
    return recorder
