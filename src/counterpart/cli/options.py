# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/counterpart/cli/options.py
#   project      : Counterpart
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic."""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from counterpart.cli.errors import CounterpartUsageError
from counterpart.config.logging import LOG_LEVELS

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level requested with ``-v`` / ``-q``.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The logging level, or None when neither flag is given (the
        ``COUNTERPART_LOG_LEVEL`` environment variable then applies).

    Raises:
        CounterpartUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CounterpartUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f
