# topmark:header:start
#
#   project      : TexBundle
#   file         : errors.py
#   file_relpath : src/texbundle/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by TexBundle library code.

Bundle construction, `Bundle.append` and the registry primitives never raise.
These exceptions belong to the convenience layers built on top of them
(strict lookups, composition, declaration file loading). CLI code converts them
into [`texbundle.cli.errors`][texbundle.cli.errors] exceptions.
"""

from __future__ import annotations


class BundleError(Exception):
    """Base class for all TexBundle library errors."""


class UnknownBundleError(BundleError, KeyError):
    """Raised when a bundle name is required but not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name: str = name

    def __str__(self) -> str:
        return f"Unknown bundle: {self.name!r}"


class BundleConfigError(BundleError):
    """Raised when a bundle declaration source cannot be read or parsed."""
