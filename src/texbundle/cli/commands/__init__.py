# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click commands of the TexBundle CLI."""

from __future__ import annotations
