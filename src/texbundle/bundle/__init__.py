# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/bundle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle model: named parser configuration facets and their merge policy."""

from __future__ import annotations

from .model import Bundle

__all__ = ["Bundle"]
