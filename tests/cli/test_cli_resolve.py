# topmark:header:start
#
#   project      : Counterpart
#   file         : test_cli_resolve.py
#   file_relpath : tests/cli/test_cli_resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for successful resolution.

The path echo always comes first; with ``--dry-run`` the companion follows on
its own line. Without ``--dry-run`` the editor is exec'd (recorded here).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from counterpart.cli.exit_codes import ExitCode
from tests.cli.conftest import ExecRecorder, output_lines, run_cli_in
from tests.conftest import mark_cli, write

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _rails_tree(root: Path) -> None:
    write(root / "counterpart.toml", 'project = "myproj"\n')
    write(root / "spec" / "models" / "widget_spec.rb")
    write(root / "lib" / "myproj" / "models" / "widget.rb")


@mark_cli
def test_dry_run_prints_echo_then_companion(tmp_path: Path) -> None:
    """``--dry-run`` prints the parsed path and the resolved companion."""
    _rails_tree(tmp_path)

    result: Result = run_cli_in(tmp_path, ["--dry-run", "spec/models/widget_spec.rb"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == [
        "spec/models/widget_spec.rb",
        "lib/myproj/models/widget.rb",
    ]


@mark_cli
def test_input_path_is_normalized_in_echo(tmp_path: Path) -> None:
    """Redundant separators and ``.`` segments are dropped before echoing."""
    write(tmp_path / "app" / "widget.rb")
    write(tmp_path / "app" / "widget.test.rb")

    result: Result = run_cli_in(tmp_path, ["--dry-run", "./app//widget.rb"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == ["app/widget.rb", "app/widget.test.rb"]


@mark_cli
def test_absolute_path_inside_cwd_is_relativized(tmp_path: Path) -> None:
    """An absolute path below the working root behaves like a relative one."""
    write(tmp_path / "app" / "widget.rb")
    write(tmp_path / "app" / "widget.test.rb")

    result: Result = run_cli_in(
        tmp_path, ["--dry-run", str(tmp_path.resolve() / "app" / "widget.test.rb")]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == ["app/widget.test.rb", "app/widget.rb"]


@mark_cli
def test_no_companion_exits_zero_with_echo_only(tmp_path: Path) -> None:
    """Finding nothing is not an error."""
    write(tmp_path / "lib" / "widget.rb")

    result: Result = run_cli_in(tmp_path, ["--dry-run", "lib/widget.rb"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == ["lib/widget.rb"]


@mark_cli
def test_editor_option_is_exec_d_with_companion(
    tmp_path: Path, exec_recorder: ExecRecorder
) -> None:
    """``--editor`` is split like a shell command and receives the target."""
    _rails_tree(tmp_path)

    result: Result = run_cli_in(
        tmp_path, ["--editor", "myeditor --wait", "spec/models/widget_spec.rb"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert exec_recorder.calls == [["myeditor", "--wait", "lib/myproj/models/widget.rb"]]
    assert output_lines(result) == ["spec/models/widget_spec.rb"]


@mark_cli
def test_editor_falls_back_to_environment(
    tmp_path: Path, exec_recorder: ExecRecorder, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``$EDITOR`` is used when no editor is configured."""
    write(tmp_path / "lib" / "widget.rb")
    write(tmp_path / "lib" / "widget.test.rb")
    monkeypatch.setenv("EDITOR", "nano")

    result: Result = run_cli_in(tmp_path, ["lib/widget.rb"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert exec_recorder.calls == [["nano", "lib/widget.test.rb"]]


@mark_cli
def test_configured_editor_beats_environment(
    tmp_path: Path, exec_recorder: ExecRecorder, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``editor`` from ``counterpart.toml`` takes precedence over ``$EDITOR``."""
    write(tmp_path / "counterpart.toml", 'editor = "emacs -nw"\n')
    write(tmp_path / "lib" / "widget.rb")
    write(tmp_path / "lib" / "widget.test.rb")
    monkeypatch.setenv("EDITOR", "nano")

    result: Result = run_cli_in(tmp_path, ["lib/widget.rb"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert exec_recorder.calls == [["emacs", "-nw", "lib/widget.test.rb"]]


@mark_cli
def test_explicit_config_file_is_applied(tmp_path: Path) -> None:
    """``--config`` layers an extra file over discovered ones."""
    write(tmp_path / "qa" / "widget.py")
    write(tmp_path / "pkg" / "widget.py")
    extra: Path = write(
        tmp_path / "conf" / "custom.toml",
        'test_directories = ["qa"]\nimplementation_roots = ["pkg"]\n',
    )

    result: Result = run_cli_in(tmp_path, ["--config", str(extra), "--dry-run", "qa/widget.py"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == ["qa/widget.py", "pkg/widget.py"]


@mark_cli
def test_version_flag(tmp_path: Path) -> None:
    """``--version`` prints the program name and exits."""
    result: Result = run_cli_in(tmp_path, ["--version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.startswith("counterpart, version ")
