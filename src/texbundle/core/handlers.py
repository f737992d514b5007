# topmark:header:start
#
#   project      : TexBundle
#   file         : handlers.py
#   file_relpath : src/texbundle/core/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Handler categories and facet type aliases.

A parser consults a *handler chain* per category: an ordered list of lookup-map
identifiers tried in priority order. The four categories are fixed. Everything a
bundle refers to beyond these keys (lookup maps, fallback methods, stack-item
classes, tagging strategies) is opaque to TexBundle.
"""

from __future__ import annotations

from typing import Any, Union

from texbundle.core.enum_mixins import KeyedStrEnum


class HandlerType(KeyedStrEnum):
    """The known handler categories, in canonical order."""

    CHARACTER = ("character", "Single characters", ("char",))
    DELIMITER = ("delimiter", "Delimiters", ("delim",))
    MACRO = ("macro", "Control sequences", ("command",))
    ENVIRONMENT = ("environment", "Environments", ("env",))


# Category -> ordered lookup-map identifiers (highest priority first).
HandlerConfig = dict[str, list[str]]
# Category -> fallback method reference.
FallbackConfig = dict[str, Any]
# Stack-item kind -> stack-item constructor reference.
StackItemConfig = dict[str, Any]
# Tag kind -> tagging strategy reference.
TagsConfig = dict[str, Any]
# Free-form options.
OptionValue = Union[str, bool]
OptionsConfig = dict[str, OptionValue]


def empty_handler_config() -> HandlerConfig:
    """Return a fresh handler config with every known category mapped to ``[]``."""
    return {category.key: [] for category in HandlerType}


def describe_ref(ref: object) -> str:
    """Return a stable, human-readable identifier for an opaque reference.

    Strings are returned unchanged. Classes and functions are rendered by their
    qualified name (``module.QualName``); anything else falls back to ``repr``.
    """
    if isinstance(ref, str):
        return ref
    qualname: str | None = getattr(ref, "__qualname__", None)
    if qualname:
        module: str | None = getattr(ref, "__module__", None)
        return f"{module}.{qualname}" if module else qualname
    return repr(ref)
