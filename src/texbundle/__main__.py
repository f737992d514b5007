# topmark:header:start
#
#   project      : TexBundle
#   file         : __main__.py
#   file_relpath : src/texbundle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TexBundle via ``python -m texbundle``.

Equivalent to running the ``texbundle`` console script.

Examples:
    List the bundles declared in a file::

        python -m texbundle list bundles.toml
"""

from __future__ import annotations

from texbundle.cli.main import cli

if __name__ == "__main__":
    cli()
