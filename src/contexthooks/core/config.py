"""Hook configuration discovery (global and workspace config.toml)."""

from __future__ import annotations

from pathlib import Path

from contexthooks.hooks.loader import load_hooks_file
from contexthooks.types.hooks import Hook

CONFIG_DIR = ".contexthooks"
CONFIG_FILE = "config.toml"


def global_config_path() -> Path:
    """~/.contexthooks/config.toml, whose hooks apply to every workspace."""
    return Path.home() / CONFIG_DIR / CONFIG_FILE


def workspace_config_path(cwd: str | None = None) -> Path:
    """<cwd>/.contexthooks/config.toml."""
    base = Path(cwd) if cwd else Path.cwd()
    return base / CONFIG_DIR / CONFIG_FILE


def load_configured_hooks(
    cwd: str | None = None, config_path: str | Path | None = None,
) -> list[Hook]:
    """Load hooks from an explicit file, or from the global and workspace configs.

    Global hooks come first and are marked ``is_global``. A workspace that
    resolves to the global config directory is not loaded twice.
    """
    if config_path is not None:
        return load_hooks_file(config_path)

    hooks: list[Hook] = []
    global_path = global_config_path()
    if global_path.exists():
        hooks.extend(load_hooks_file(global_path, is_global=True))

    local_path = workspace_config_path(cwd)
    if local_path.exists() and local_path.resolve() != global_path.resolve():
        hooks.extend(load_hooks_file(local_path))
    return hooks
