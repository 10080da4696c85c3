# topmark:header:start
#
#   project      : EnumExtender
#   file         : loaders.py
#   file_relpath : src/enumextender/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render EnumExtender flags from TOML sources.

Sources, lowest to highest precedence:
- runtime defaults ([`EnumFlags`][enumextender.config.flags.EnumFlags]),
- ``[tool.enumextender]`` in ``pyproject.toml``,
- the root table of ``enumextender.toml``,
- explicit overrides passed by the caller (e.g. the CLI).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from enumextender.config.flags import EnumFlags, MutableEnumFlags
from enumextender.config.keys import Toml
from enumextender.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from enumextender.config.logging import EnumExtenderLogger

TomlTable = dict[str, Any]

logger: EnumExtenderLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_flags_table(data: Mapping[str, Any], *, is_pyproject: bool) -> TomlTable:
    """Return the table holding the flags within a parsed TOML document.

    Args:
        data (Mapping[str, Any]): Parsed TOML document.
        is_pyproject (bool): If True, read ``[tool.enumextender]``; otherwise the root table.

    Returns:
        TomlTable: The flags table (possibly empty).
    """
    if not is_pyproject:
        return dict(data)
    tool: Any = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return {}
    section: Any = cast("dict[str, Any]", tool).get(Toml.SECTION_PYPROJECT)
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def discover_config_files(root: Path) -> list[Path]:
    """Return existing config files in ``root``, lowest precedence first."""
    candidates: list[Path] = [root / Toml.PYPROJECT_FILENAME, root / Toml.CONFIG_FILENAME]
    return [p for p in candidates if p.is_file()]


def load_flags(
    paths: Iterable[Path] | None = None,
    *,
    root: Path | None = None,
    overrides: MutableEnumFlags | None = None,
) -> EnumFlags:
    """Resolve effective flags from TOML files and overrides.

    Args:
        paths (Iterable[Path] | None): Explicit config files, applied in order (last wins).
            When ``None``, files are discovered in ``root``.
        root (Path | None): Directory to search when ``paths`` is ``None``;
            defaults to the current working directory.
        overrides (MutableEnumFlags | None): Highest-precedence layer.

    Returns:
        EnumFlags: Frozen, fully-resolved flags.
    """
    files: list[Path] = (
        list(paths) if paths is not None else discover_config_files(root or Path.cwd())
    )
    merged = MutableEnumFlags()
    for path in files:
        data: TomlTable = load_toml_dict(path)
        table: TomlTable = extract_flags_table(
            data, is_pyproject=path.name == Toml.PYPROJECT_FILENAME
        )
        logger.debug("Loaded %d flag(s) from %s", len(table), path)
        merged = merged.merge_with(MutableEnumFlags.from_toml_table(table))
    if overrides is not None:
        merged = merged.merge_with(overrides)
    flags: EnumFlags = merged.freeze()
    logger.trace("Effective flags: %r", flags)
    return flags


def render_flags_toml(flags: EnumFlags, *, for_pyproject: bool = False) -> str:
    """Render flags as TOML text.

    Args:
        flags (EnumFlags): Flags to serialize.
        for_pyproject (bool): If True, nest the output under ``[tool.enumextender]``.

    Returns:
        str: TOML document text.
    """
    table: TomlTable = flags.to_toml_table()
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if for_pyproject:
        body = tomlkit.table()
        for key, value in table.items():
            body.add(key, value)
        tool = tomlkit.table(is_super_table=True)
        tool.add(Toml.SECTION_PYPROJECT, body)
        doc.add(Toml.SECTION_TOOL, tool)
    else:
        for key, value in table.items():
            doc.add(key, value)
    return tomlkit.dumps(doc)
