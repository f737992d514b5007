# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across TexBundle.

Included modules:

- ``handlers``
  The handler categories (`HandlerType`) and facet type aliases.

- ``errors``
  Exceptions raised by the convenience layers (strict lookup, composition,
  declaration loading).

- ``diagnostics``
  Diagnostic types collected while loading bundle declarations.

- ``enum_mixins``, ``formats``
  Small Enum utilities and the output format vocabulary.
"""

from __future__ import annotations
