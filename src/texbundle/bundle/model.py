# topmark:header:start
#
#   project      : TexBundle
#   file         : model.py
#   file_relpath : src/texbundle/bundle/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle model and merge policy.

A `Bundle` is a named set of parser configuration facets:

    - ``handler``: per category, the ordered lookup-map identifiers to consult.
    - ``fallback``: per category, the method used when no map resolves a token.
    - ``items``: stack-item kind -> stack-item constructor.
    - ``tags``: tag kind -> tagging strategy.
    - ``options``: free-form settings (strings or booleans).

Merge policy (`Bundle.append`):
    - Handler chains: every identifier of the appended bundle is pushed to the
      *front* of the receiving chain, one element at a time, in the appended
      bundle's order. ``[x, y]`` with ``[a, b]`` appended becomes ``[b, a, x, y]``.
    - All other facets: key-wise overwrite, last appended wins. Keys absent from
      the appended bundle are kept.

Aliasing:
    - Facet maps are stored by reference, not copied. Code that keeps a
      reference to a map passed to the constructor can still mutate the bundle.
      Use `Bundle.copy` for an independent bundle.

Construction has no global side effect; registration is an explicit step on a
[`BundleRegistry`][texbundle.registry.BundleRegistry].
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from texbundle.config.logging import get_logger
from texbundle.core.handlers import HandlerType, describe_ref, empty_handler_config

if TYPE_CHECKING:
    from texbundle.config.logging import TexbundleLogger
    from texbundle.core.handlers import (
        FallbackConfig,
        HandlerConfig,
        OptionsConfig,
        StackItemConfig,
        TagsConfig,
    )

logger: TexbundleLogger = get_logger(__name__)


def _as_chain(value: Sequence[str]) -> list[str]:
    """Return ``value`` itself when it is a list, else a list copy of it.

    Chains must support front insertion, so tuples and other sequences are
    converted. Lists are kept by reference.
    """
    if isinstance(value, list):
        return value
    return list(value)


class Bundle:
    """Named, composable parser configuration.

    Attributes:
        handler (HandlerConfig): Category -> ordered lookup-map identifiers.
            Always holds the four `HandlerType` categories after construction.
        fallback (FallbackConfig): Category -> fallback method reference.
        items (StackItemConfig): Stack-item kind -> constructor reference.
        tags (TagsConfig): Tag kind -> tagging strategy reference.
        options (OptionsConfig): Free-form options.
    """

    __slots__ = ("_name", "handler", "fallback", "items", "tags", "options")

    def __init__(
        self,
        name: str,
        handler: Mapping[str, Sequence[str]] | None = None,
        fallback: FallbackConfig | None = None,
        items: StackItemConfig | None = None,
        tags: TagsConfig | None = None,
        options: OptionsConfig | None = None,
    ) -> None:
        """Create a bundle.

        Handler chains start out empty for every known category; chains given in
        ``handler`` replace the empty defaults wholesale. Category keys are resolved
        with `HandlerType.parse`, so aliases such as ``"command"`` are accepted;
        unknown categories are dropped (with a warning). The other facets are
        stored as given.

        Args:
            name (str): Bundle name.
            handler (Mapping[str, Sequence[str]] | None): Handler chains per category.
            fallback (FallbackConfig | None): Fallback method per category.
            items (StackItemConfig | None): Stack-item constructors per kind.
            tags (TagsConfig | None): Tagging strategies per kind.
            options (OptionsConfig | None): Free-form options.
        """
        self._name: str = name

        chains: HandlerConfig = empty_handler_config()
        seen: set[str] = set()
        for key, chain in (handler or {}).items():
            category: HandlerType | None = HandlerType.parse(key)
            if category is None:
                logger.warning(
                    "Bundle %r: ignoring unknown handler category %r (expected one of %s)",
                    name,
                    key,
                    ", ".join(HandlerType.keys()),
                )
                continue
            if category.key in seen:
                logger.warning(
                    "Bundle %r: handler category %r given more than once, keeping %r",
                    name,
                    category.key,
                    key,
                )
            seen.add(category.key)
            chains[category.key] = _as_chain(chain)
        self.handler: HandlerConfig = chains

        self.fallback: FallbackConfig = fallback if fallback is not None else {}
        self.items: StackItemConfig = items if items is not None else {}
        self.tags: TagsConfig = tags if tags is not None else {}
        self.options: OptionsConfig = options if options is not None else {}

    @property
    def name(self) -> str:
        """The bundle name (read-only)."""
        return self._name

    @property
    def is_empty(self) -> bool:
        """True if the bundle carries no handler entry and no other facet entry."""
        return not (
            any(self.handler.values()) or self.fallback or self.items or self.tags or self.options
        )

    def append(self, other: Bundle) -> None:
        """Fold the facets of ``other`` into this bundle, in place.

        Handler identifiers are inserted at the front of this bundle's chain one
        by one, so the appended identifiers end up ahead of the existing ones and
        in reverse order. Fallbacks, stack items, tags and options are
        overwritten key by key. Categories this bundle lacks are created.

        Args:
            other (Bundle): The bundle to fold into this one. ``other`` is not modified
                (unless it is this bundle).
        """
        logger.debug("Appending bundle %r to %r", other.name, self.name)

        for category, chain in other.handler.items():
            target: list[str] = self.handler.setdefault(category, [])
            # Snapshot: ``other`` may be ``self``
            for map_name in tuple(chain):
                target.insert(0, map_name)

        for category, method in other.fallback.items():
            self.fallback[category] = method
        self.items.update(other.items)
        self.tags.update(other.tags)
        self.options.update(other.options)

    def copy(self, name: str | None = None) -> Bundle:
        """Return an independent copy of this bundle.

        The facet dicts and handler chain lists are new; the referenced values
        (fallback methods, stack-item classes, ...) are shared.

        Args:
            name (str | None): Name of the copy. Defaults to this bundle's name.

        Returns:
            Bundle: The copy.
        """
        clone = Bundle(
            self.name if name is None else name,
            fallback=dict(self.fallback),
            items=dict(self.items),
            tags=dict(self.tags),
            options=dict(self.options),
        )
        # Assigned directly: categories added by `append` are kept as well.
        clone.handler = {category: list(chain) for category, chain in self.handler.items()}
        return clone

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly snapshot of this bundle.

        Opaque references are rendered with
        [`describe_ref`][texbundle.core.handlers.describe_ref].
        """
        return {
            "name": self.name,
            "handler": {category: list(chain) for category, chain in self.handler.items()},
            "fallback": {category: describe_ref(ref) for category, ref in self.fallback.items()},
            "items": {kind: describe_ref(ref) for kind, ref in self.items.items()},
            "tags": {kind: describe_ref(ref) for kind, ref in self.tags.items()},
            "options": dict(self.options),
        }

    def __repr__(self) -> str:
        chains: str = ", ".join(
            f"{category}={len(chain)}" for category, chain in self.handler.items()
        )
        return (
            f"Bundle(name={self.name!r}, handler=[{chains}], fallback={len(self.fallback)}, "
            f"items={len(self.items)}, tags={len(self.tags)}, options={len(self.options)})"
        )
