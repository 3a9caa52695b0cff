"""Shared path utilities for the optional configuration file.

Policy (portable, checkout only):
- Config: repository-root ``<repo_root>/config/config.toml`` when lfmkit runs
  from a source checkout. An installed package has no repository root and
  therefore no default config file; pass an explicit path instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring an explicit override."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    default_path = default_factory()
    if default_path is None:
        return None
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path | None:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path | None: Detected repository root, or ``None`` when no marker
        exists (an installed package). The working directory is never used.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return None


def default_config_path() -> Path | None:
    """Get the default path to the TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    repo_root = _detect_repo_root()
    if repo_root is None:
        return None
    return (repo_root / "config" / "config.toml").resolve()


__all__ = [
    "default_config_path",
    "resolve_overridable_path",
]
