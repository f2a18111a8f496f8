# topmark:header:start
#
#   project      : Counterpart
#   file         : __main__.py
#   file_relpath : src/counterpart/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Counterpart via ``python -m counterpart``.

Delegates to `counterpart.cli.main.cli`, the same entry point as the
``counterpart`` console script.

Examples:
    Open the spec of a model::

        python -m counterpart lib/myproj/models/widget.rb
"""

from __future__ import annotations

from counterpart.cli.main import cli

if __name__ == "__main__":
    cli()
