# topmark:header:start
#
#   project      : TexBundle
#   file         : keys.py
#   file_relpath : src/texbundle/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for bundle declaration files.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by bundle declaration files.

    Layout::

        [bundles.<name>]
        extends = ["<other>", ...]
        options = { <key> = <string|bool>, ... }

        [bundles.<name>.handler]
        <category> = ["<map>", ...]

        [bundles.<name>.fallback]
        <category> = "<method>"

        [bundles.<name>.items]
        <kind> = "<stack item class>"

        [bundles.<name>.tags]
        <kind> = "<tags class>"
    """

    # [bundles]
    SECTION_BUNDLES: Final[str] = "bundles"

    # [bundles.<name>]
    KEY_EXTENDS: Final[str] = "extends"
    KEY_HANDLER: Final[str] = "handler"
    KEY_FALLBACK: Final[str] = "fallback"
    KEY_ITEMS: Final[str] = "items"
    KEY_TAGS: Final[str] = "tags"
    KEY_OPTIONS: Final[str] = "options"

    # All keys accepted inside [bundles.<name>]
    BUNDLE_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_EXTENDS, KEY_HANDLER, KEY_FALLBACK, KEY_ITEMS, KEY_TAGS, KEY_OPTIONS}
    )
