# topmark:header:start
#
#   project      : TexBundle
#   file         : registry.py
#   file_relpath : src/texbundle/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle registry: bundles addressable by name.

A `BundleRegistry` is an explicit object owned by whoever bootstraps the parser:
construct one at startup and pass it to the code that declares, extends or
queries bundles. There is no hidden process-wide instance.

Semantics:
    - Registering under a name that is already taken silently replaces the
      previous bundle (last write wins). There is no duplicate detection.
    - `BundleRegistry.lookup` reports an unknown name with ``None``; use
      `BundleRegistry.get` to get an `UnknownBundleError` instead.
    - Names are kept in insertion order. Replacing a bundle keeps its slot.

Typical usage:
    ```python
    from texbundle import Bundle, BundleRegistry

    registry = BundleRegistry()
    base = registry.create("base", handler={"macro": ["base-macros"]})
    registry.register(Bundle("ams", handler={"macro": ["ams-macros"]}))

    effective = registry.compose("base", "ams", name="session")
    ```

Thread safety:
    All operations are guarded by an `RLock`. Mutating a `Bundle` obtained from
    the registry (e.g. via `Bundle.append`) is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from texbundle.bundle.model import Bundle
from texbundle.config.logging import get_logger
from texbundle.core.errors import UnknownBundleError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from texbundle.config.logging import TexbundleLogger
    from texbundle.core.handlers import (
        FallbackConfig,
        OptionsConfig,
        StackItemConfig,
        TagsConfig,
    )

logger: TexbundleLogger = get_logger(__name__)


@dataclass(frozen=True)
class BundleMeta:
    """Stable, serializable metadata about a registered bundle.

    Attributes:
        name (str): Registry name (may differ from `Bundle.name` when registered
            under an explicit name).
        handler (tuple[tuple[str, tuple[str, ...]], ...]): Handler chains per category.
        fallback (tuple[str, ...]): Categories that have a fallback method.
        items (tuple[str, ...]): Stack-item kinds.
        tags (tuple[str, ...]): Tag kinds.
        options (tuple[str, ...]): Option keys.
    """

    name: str
    handler: tuple[tuple[str, tuple[str, ...]], ...] = ()
    fallback: tuple[str, ...] = ()
    items: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    options: tuple[str, ...] = ()

    @classmethod
    def from_bundle(cls, name: str, bundle: Bundle) -> BundleMeta:
        """Build metadata for ``bundle`` registered under ``name``."""
        return cls(
            name=name,
            handler=tuple((category, tuple(chain)) for category, chain in bundle.handler.items()),
            fallback=tuple(bundle.fallback),
            items=tuple(bundle.items),
            tags=tuple(bundle.tags),
            options=tuple(bundle.options),
        )


class BundleRegistry:
    """Keyed store of bundles, in insertion order."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._bundles: dict[str, Bundle] = {}

    # --- Core operations ---

    def register(self, bundle: Bundle, name: str | None = None) -> None:
        """Store ``bundle`` under ``name``, replacing any bundle already there.

        Args:
            bundle (Bundle): The bundle to store.
            name (str | None): Registry name. Defaults to ``bundle.name``.
        """
        key: str = bundle.name if name is None else name
        with self._lock:
            if key in self._bundles and self._bundles[key] is not bundle:
                logger.debug("Replacing bundle registered as %r", key)
            self._bundles[key] = bundle
        logger.trace("Registered bundle %r", key)

    def lookup(self, name: str) -> Bundle | None:
        """Return the bundle registered under ``name``, or ``None``."""
        with self._lock:
            return self._bundles.get(name)

    def names(self) -> Iterator[str]:
        """Iterate over registered names in insertion order.

        The iterator is lazy: the names are snapshotted on the first ``next()``
        call, so registrations made while iterating do not affect it. Call
        `names()` again for a fresh iterator.

        Yields:
            str: Registered bundle names.
        """
        with self._lock:
            snapshot: tuple[str, ...] = tuple(self._bundles)
        yield from snapshot

    def create(
        self,
        name: str,
        handler: Mapping[str, Sequence[str]] | None = None,
        fallback: FallbackConfig | None = None,
        items: StackItemConfig | None = None,
        tags: TagsConfig | None = None,
        options: OptionsConfig | None = None,
    ) -> Bundle:
        """Construct a bundle and register it under ``name`` in one step.

        Any bundle previously registered under ``name`` is replaced.

        Returns:
            Bundle: The newly created and registered bundle.
        """
        bundle = Bundle(
            name,
            handler=handler,
            fallback=fallback,
            items=items,
            tags=tags,
            options=options,
        )
        self.register(bundle)
        return bundle

    # --- Convenience ---

    def unregister(self, name: str) -> bool:
        """Remove the bundle registered under ``name``.

        Returns:
            bool: ``True`` if a bundle was removed, else ``False``.
        """
        with self._lock:
            existed: bool = self._bundles.pop(name, None) is not None
        if existed:
            logger.trace("Unregistered bundle %r", name)
        return existed

    def clear(self) -> None:
        """Remove all bundles."""
        with self._lock:
            self._bundles.clear()

    def get(self, name: str) -> Bundle:
        """Return the bundle registered under ``name``.

        Raises:
            UnknownBundleError: If no bundle is registered under ``name``.
        """
        bundle: Bundle | None = self.lookup(name)
        if bundle is None:
            raise UnknownBundleError(name)
        return bundle

    def compose(self, base: str, *names: str, name: str | None = None) -> Bundle:
        """Build a new bundle from registered ones.

        The result is a copy of the bundle registered as ``base`` with every
        bundle in ``names`` appended in order. Registered bundles are left
        untouched and the result is *not* registered.

        Args:
            base (str): Name of the bundle to start from.
            *names (str): Names of the bundles to append, in order.
            name (str | None): Name of the result. Defaults to ``base``.

        Returns:
            Bundle: The composed bundle.

        Raises:
            UnknownBundleError: If ``base`` or any of ``names`` is not registered.
        """
        with self._lock:
            start: Bundle = self.get(base)
            layers: list[Bundle] = [self.get(n) for n in names]
        result: Bundle = start.copy(name=base if name is None else name)
        for layer in layers:
            result.append(layer)
        logger.debug("Composed %r from %s", result.name, [base, *names])
        return result

    def as_mapping(self) -> Mapping[str, Bundle]:
        """Return a read-only snapshot mapping of registered bundles.

        Notes:
            The returned mapping is a `MappingProxyType` over a copy; later
            registrations are not reflected in it.
        """
        with self._lock:
            return MappingProxyType(dict(self._bundles))

    def iter_meta(self) -> Iterator[BundleMeta]:
        """Iterate over stable metadata for registered bundles.

        Yields:
            BundleMeta: Serializable metadata about each bundle.
        """
        for name, bundle in self.as_mapping().items():
            yield BundleMeta.from_bundle(name, bundle)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._bundles

    def __len__(self) -> int:
        with self._lock:
            return len(self._bundles)

    def __iter__(self) -> Iterator[str]:
        return self.names()

    def __repr__(self) -> str:
        return f"BundleRegistry({list(self.names())!r})"
