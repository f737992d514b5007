# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for TexBundle.

- ``logging``: TRACE-aware logger, colored formatter and environment-driven setup.
- ``keys``: TOML section/key names of bundle declaration files.
- ``io``: loading bundle declarations from TOML into a registry.

This package module stays import-light; import ``texbundle.config.io`` explicitly
to avoid pulling the bundle model into logging setup.
"""

from __future__ import annotations
