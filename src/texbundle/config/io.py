# topmark:header:start
#
#   project      : TexBundle
#   file         : io.py
#   file_relpath : src/texbundle/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load bundle declarations from TOML.

Parsing is done with `tomlkit` and the document is unwrapped to plain `dict`
structures before bundles are built from it. See
[`texbundle.config.keys.Toml`][texbundle.config.keys.Toml] for the layout.

Loading mirrors the permissive merge of the bundle model: user mistakes
(unknown handler categories, non-string chain entries, option values that are
neither strings nor booleans, ``extends`` targets that are not registered) are
skipped or coerced, logged, and recorded in a `DiagnosticLog`. Only an
unreadable file or invalid TOML syntax raises `BundleConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from texbundle.bundle.model import Bundle
from texbundle.config.keys import Toml
from texbundle.config.logging import get_logger
from texbundle.core.diagnostics import DiagnosticLog
from texbundle.core.errors import BundleConfigError
from texbundle.core.handlers import HandlerType

if TYPE_CHECKING:
    from pathlib import Path

    from texbundle.config.logging import TexbundleLogger
    from texbundle.core.handlers import HandlerConfig, OptionsConfig
    from texbundle.registry.registry import BundleRegistry

TomlTable = dict[str, Any]

logger: TexbundleLogger = get_logger(__name__)


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def _warn(diagnostics: DiagnosticLog, message: str) -> None:
    logger.warning("%s", message)
    diagnostics.add_warning(message)


# --- Checked getters ---


def get_table_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> TomlTable:
    """Extract a sub-table, recording a warning when the value is not a table.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. ``"[bundles.base]"``).
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.

    Returns:
        TomlTable: The sub-table, or ``{}`` when missing or malformed.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not is_toml_table(value):
        _warn(
            diagnostics,
            f"Expected table in {where}.{key}, got {type(value).__name__}: {value!r}",
        )
        return {}
    return value


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str]:
    """Extract a list of strings, dropping non-string entries with a warning.

    Behavior:
        - If the key is missing, returns [].
        - If the value is not a list, returns [] and records a warning.
        - Non-string items are ignored; each one records a warning.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. ``"[bundles.base.handler]"``).
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.

    Returns:
        list[str]: Filtered list containing only string entries, in order.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []

    loc: Final[str] = f"{where}.{key}"

    if not is_any_list(value):
        _warn(diagnostics, f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return []

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            _warn(diagnostics, f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_string_map_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> dict[str, str]:
    """Extract a table of string values (references named by identifier).

    Non-string values are dropped with a warning.

    Returns:
        dict[str, str]: The string entries of the table, in document order.
    """
    sub: TomlTable = get_table_value_checked(table, key, where=where, diagnostics=diagnostics)
    out: dict[str, str] = {}
    for name, value in sub.items():
        if isinstance(value, str):
            out[name] = value
        else:
            _warn(diagnostics, f"Ignoring non-string value in {where}.{key}.{name}: {value!r}")
    return out


def get_options_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> OptionsConfig:
    """Extract bundle options (strings or booleans).

    Integers and floats are coerced to strings (recorded as info). Any other
    value type is dropped with a warning.

    Returns:
        OptionsConfig: The option values, in document order.
    """
    sub: TomlTable = get_table_value_checked(table, key, where=where, diagnostics=diagnostics)
    out: OptionsConfig = {}
    for name, value in sub.items():
        loc: str = f"{where}.{key}.{name}"
        if isinstance(value, (str, bool)):
            out[name] = value
        elif isinstance(value, (int, float)):
            logger.info("Coercing %s to string: %r", loc, value)
            diagnostics.add_info(f"Coerced {loc} to string: {value!r}")
            out[name] = str(value)
        else:
            _warn(
                diagnostics,
                f"Ignoring option {loc}: expected string or boolean, "
                f"got {type(value).__name__}: {value!r}",
            )
    return out


# --- Parsing ---


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages (file path or ``"<string>"``).

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        BundleConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise BundleConfigError(f"Invalid TOML in {source}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if is_toml_table(data) else {}


def bundle_from_table(
    name: str,
    table: TomlTable,
    *,
    diagnostics: DiagnosticLog,
) -> tuple[Bundle, list[str]]:
    """Build a bundle from its ``[bundles.<name>]`` table.

    Args:
        name (str): Bundle name (the table key).
        table (TomlTable): The bundle table.
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.

    Returns:
        tuple[Bundle, list[str]]: The (unregistered) bundle and the names listed
            under ``extends``.
    """
    where: str = f"[{Toml.SECTION_BUNDLES}.{name}]"

    for key in table:
        if key not in Toml.BUNDLE_KEYS:
            _warn(diagnostics, f"Ignoring unknown key in {where}: {key!r}")

    handler_where: str = f"{where}.{Toml.KEY_HANDLER}"
    handler_table: TomlTable = get_table_value_checked(
        table, Toml.KEY_HANDLER, where=where, diagnostics=diagnostics
    )
    handler: HandlerConfig = {}
    for key in handler_table:
        category: HandlerType | None = HandlerType.parse(key)
        if category is None:
            _warn(
                diagnostics,
                f"Ignoring unknown handler category in {handler_where}: {key!r} "
                f"(expected one of {', '.join(HandlerType.keys())})",
            )
            continue
        if category.key in handler:
            _warn(
                diagnostics,
                f"Handler category {category.key!r} given more than once in {handler_where}; "
                f"keeping {key!r}",
            )
        handler[category.key] = get_string_list_value_checked(
            handler_table, key, where=handler_where, diagnostics=diagnostics
        )

    fallback: dict[str, str] = {}
    for key, method in get_string_map_checked(
        table, Toml.KEY_FALLBACK, where=where, diagnostics=diagnostics
    ).items():
        fallback_category: HandlerType | None = HandlerType.parse(key)
        if fallback_category is None:
            _warn(
                diagnostics,
                f"Ignoring unknown handler category in {where}.{Toml.KEY_FALLBACK}: {key!r}",
            )
            continue
        if fallback_category.key in fallback:
            _warn(
                diagnostics,
                f"Fallback category {fallback_category.key!r} given more than once in "
                f"{where}.{Toml.KEY_FALLBACK}; keeping {key!r}",
            )
        fallback[fallback_category.key] = method

    bundle = Bundle(
        name,
        handler=handler,
        fallback=fallback,
        items=get_string_map_checked(table, Toml.KEY_ITEMS, where=where, diagnostics=diagnostics),
        tags=get_string_map_checked(table, Toml.KEY_TAGS, where=where, diagnostics=diagnostics),
        options=get_options_checked(table, Toml.KEY_OPTIONS, where=where, diagnostics=diagnostics),
    )
    extends: list[str] = get_string_list_value_checked(
        table, Toml.KEY_EXTENDS, where=where, diagnostics=diagnostics
    )
    return bundle, extends


def _apply_extends(
    declared: Bundle,
    extends: list[str],
    registry: BundleRegistry,
    *,
    diagnostics: DiagnosticLog,
) -> Bundle:
    """Layer ``declared`` on top of the bundles it extends.

    The result starts as a copy of the first resolvable parent, the other
    parents are appended in order, and ``declared`` is appended last so its own
    chains get the highest priority and its other facets win. Registered
    parents are not modified. Without a resolvable parent, ``declared`` is
    returned as is.
    """
    parents: list[Bundle] = []
    for dependency in extends:
        parent: Bundle | None = registry.lookup(dependency)
        if parent is None:
            _warn(diagnostics, f"Bundle {declared.name!r} extends unknown bundle {dependency!r}")
            continue
        parents.append(parent)
    if not parents:
        return declared

    result: Bundle = parents[0].copy(name=declared.name)
    for parent in parents[1:]:
        result.append(parent)
    result.append(declared)
    return result


def load_bundles(
    text: str,
    registry: BundleRegistry,
    *,
    diagnostics: DiagnosticLog | None = None,
    source: str = "<string>",
) -> list[Bundle]:
    """Build and register the bundles declared in a TOML document.

    Bundles are processed in document order. For each one, every bundle named
    in ``extends`` is looked up in ``registry`` (so it may come from an earlier
    table of the same document or from earlier loads). The registered bundle is
    a copy of the first parent with the other parents and then the declared
    table appended, so the declaration overrides what it extends. It replaces
    any bundle of the same name.

    Args:
        text (str): TOML document text.
        registry (BundleRegistry): Registry receiving the bundles.
        diagnostics (DiagnosticLog | None): Log receiving warnings; a private log
            is used when omitted.
        source (str): Label used in messages.

    Returns:
        list[Bundle]: The registered bundles, in document order.

    Raises:
        BundleConfigError: If the text is not valid TOML.
    """
    diags: DiagnosticLog = diagnostics if diagnostics is not None else DiagnosticLog()
    data: TomlTable = parse_toml_text(text, source=source)

    section: Any | None = data.get(Toml.SECTION_BUNDLES)
    if section is None:
        diags.add_info(f"No [{Toml.SECTION_BUNDLES}] table in {source}")
        return []
    if not is_toml_table(section):
        _warn(diags, f"Expected table in [{Toml.SECTION_BUNDLES}] of {source}")
        return []

    loaded: list[Bundle] = []
    for name, table in section.items():
        if not is_toml_table(table):
            _warn(
                diags,
                f"Ignoring [{Toml.SECTION_BUNDLES}].{name} in {source}: "
                f"expected table, got {type(table).__name__}",
            )
            continue
        declared, extends = bundle_from_table(name, table, diagnostics=diags)
        bundle: Bundle = _apply_extends(declared, extends, registry, diagnostics=diags)
        registry.register(bundle)
        loaded.append(bundle)

    logger.debug("Loaded %d bundle(s) from %s", len(loaded), source)
    return loaded


def load_bundles_file(
    path: Path,
    registry: BundleRegistry,
    *,
    diagnostics: DiagnosticLog | None = None,
) -> list[Bundle]:
    """Read a UTF-8 TOML file and load the bundles it declares.

    See [`load_bundles`][texbundle.config.io.load_bundles].

    Raises:
        BundleConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BundleConfigError(f"Cannot read bundle declarations from {path}: {exc}") from exc
    return load_bundles(text, registry, diagnostics=diagnostics, source=str(path))
