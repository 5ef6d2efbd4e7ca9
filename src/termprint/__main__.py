# topmark:header:start
#
#   project      : Termprint
#   file         : __main__.py
#   file_relpath : src/termprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Termprint via ``python -m termprint``.

Delegates to [`termprint.cli.main.cli`][], the same entry point as the
``termprint`` console script.

Examples:
    Render a JSON term document as Markdown::

        python -m termprint render report.json --backend markdown
"""

from __future__ import annotations

from termprint.cli.main import cli

if __name__ == "__main__":
    cli()
