# topmark:header:start
#
#   project      : Counterpart
#   file         : main.py
#   file_relpath : src/counterpart/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Counterpart command-line entry point.

``counterpart PATH`` echoes the parsed path, resolves its companion and opens
it in ``$EDITOR``. With ``--dry-run`` the companion is printed instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from counterpart.cli.console import ClickConsole
from counterpart.cli.errors import (
    CounterpartConfigError,
    CounterpartFileNotFoundError,
    CounterpartLaunchError,
    CounterpartUsageError,
)
from counterpart.cli.options import common_verbose_options, resolve_verbosity
from counterpart.config import MutableConfig
from counterpart.config.logging import get_logger, setup_logging
from counterpart.constants import COUNTERPART_VERSION
from counterpart.errors import ConfigError, InvalidPathError, PathNotFoundError
from counterpart.launcher import EditorLauncher, PrintLauncher
from counterpart.paths.lister import FilesystemLister
from counterpart.paths.model import parse
from counterpart.resolver.engine import Resolver

if TYPE_CHECKING:
    from counterpart.cli.console import ConsoleLike
    from counterpart.config import Config
    from counterpart.launcher import Launcher
    from counterpart.paths.model import ParsedPath
    from counterpart.resolver.types import ResolutionOutcome

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Configure logging and store the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)
    ctx.color = not no_color

    level: int | None = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)


def relative_to_root(raw_path: str, root: Path) -> str:
    """Return *raw_path* relative to *root* when it is an absolute path inside it."""
    p = Path(raw_path)
    if not p.is_absolute():
        return raw_path
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return raw_path


@click.command(
    name="counterpart",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Open the test file for an implementation file, or the other way around.",
)
@click.argument("path", type=str)
@click.option(
    "--editor",
    default=None,
    help="Editor command (overrides config and $EDITOR).",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Extra TOML config file, applied after discovered config files.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print the companion path instead of opening it.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.version_option(COUNTERPART_VERSION, "--version", prog_name="counterpart")
@click.pass_context
def cli(
    ctx: click.Context,
    path: str,
    editor: str | None,
    config_file: Path | None,
    dry_run: bool,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Counterpart CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]
    root: Path = Path.cwd()

    try:
        parsed: ParsedPath = parse(relative_to_root(path, root))
    except InvalidPathError as exc:
        raise CounterpartUsageError(str(exc)) from exc

    console.print(str(parsed))

    try:
        config: Config = MutableConfig.load_merged(
            root,
            extra_config=config_file,
            overrides={"editor": editor},
        ).freeze()
    except ConfigError as exc:
        raise CounterpartConfigError(str(exc)) from exc

    launcher: Launcher
    if dry_run:
        launcher = PrintLauncher(console.print, root=root)
    else:
        try:
            launcher = EditorLauncher(config.editor_command(), root=root)
        except ConfigError as exc:
            raise CounterpartConfigError(str(exc)) from exc

    lister = FilesystemLister(root, exclude_patterns=config.exclude_patterns)
    resolver = Resolver(config, lister, launcher, root=root)

    try:
        outcome: ResolutionOutcome = resolver.resolve(parsed)
    except PathNotFoundError as exc:
        raise CounterpartFileNotFoundError(str(exc)) from exc
    except OSError as exc:
        raise CounterpartLaunchError(f"Cannot start editor: {exc}") from exc

    logger.debug(
        "Resolved %s (%s): attempts=%s launched=%s",
        outcome.path,
        outcome.classification.value,
        list(outcome.attempts),
        outcome.launched,
    )


if __name__ == "__main__":
    cli()
