# topmark:header:start
#
#   project      : Counterpart
#   file         : errors.py
#   file_relpath : src/counterpart/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click exceptions for the Counterpart CLI.

Library errors from `counterpart.errors` are re-raised as one of these so that
Click prints the message and exits with the matching `ExitCode`.

Styling:
    The project console is used when present in the Click context (see `show()`);
    otherwise Click's default error display applies.
"""

from __future__ import annotations

from typing import IO, Any

import click

from counterpart.cli.exit_codes import ExitCode


class CounterpartCliError(click.ClickException):
    """Base class for all Counterpart CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colored later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CounterpartUsageError(CounterpartCliError):
    """Malformed input path or invalid flag combination."""

    exit_code = ExitCode.USAGE_ERROR


class CounterpartFileNotFoundError(CounterpartCliError):
    """The input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CounterpartConfigError(CounterpartCliError):
    """A configuration source is unreadable or malformed."""

    exit_code = ExitCode.CONFIG_ERROR


class CounterpartLaunchError(CounterpartCliError):
    """The editor command could not be started."""

    exit_code = ExitCode.FAILURE
