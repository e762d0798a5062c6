"""Resolve asset glob patterns against installed packages."""

from __future__ import annotations

import logging
from pathlib import Path

from wcmatch import glob

logger = logging.getLogger(__name__)

# Pattern syntax of the npm glob package: ``**``, brace sets, extglobs.
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NODIR


def resolve_asset_glob(
    node_modules: Path,
    module: str,
    pattern: str,
    *,
    log: logging.Logger | None = None,
) -> list[Path]:
    """Return the regular files under ``node_modules/<module>`` matching *pattern*.

    ``**`` matches any number of directories, ``{a,b}`` expands to
    alternatives and ``@(a|b)``-style extglobs are understood. Wildcards
    do not match hidden entries. Directories are never returned. A
    module that is not installed, or a pattern without matches, yields
    an empty list.

    Args:
        node_modules: Installed-dependency root.
        module: Package name, possibly scoped (``@scope/name``).
        pattern: Glob relative to the package folder.
        log: Logger to report through (defaults to the module logger).

    Returns:
        Sorted list of matching file paths.
    """
    log = log or logger
    module_root = node_modules / module
    if not module_root.is_dir():
        log.debug("Module %s not found under %s", module, node_modules)
        return []

    matches = glob.glob(pattern.lstrip("/"), flags=GLOB_FLAGS, root_dir=module_root)
    files = sorted({module_root / match for match in matches if (module_root / match).is_file()})
    if not files:
        log.debug("No files in %s match %s", module_root, pattern)
    return files
