# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for inspecting bundle declaration files."""

from __future__ import annotations
