"""Build hook descriptors from agent and config documents.

Two document shapes are understood, and may be mixed:

* trigger sections, as written in agent files::

    {"createHooks": ["pwd && tree"], "promptHooks": ["git status"]}

  Section keys are ``createHooks`` / ``conversation_start`` and
  ``promptHooks`` / ``per_prompt``. A section is a list of entries or a
  mapping of ``name -> entry``.

* named hooks carrying their own trigger::

    {"hooks": {"branch": {"trigger": "per_prompt", "command": "git branch"}}}

An entry is either a command string or a mapping with ``command`` and any of
``disabled``, ``timeout_ms``, ``max_output_size``, ``cache_ttl_seconds``,
``type`` and ``name`` (camelCase spellings are accepted).
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from contexthooks.types.hooks import Hook, HookTrigger, HookType

logger = logging.getLogger(__name__)

_SECTION_TRIGGERS: dict[str, HookTrigger] = {
    "createHooks": HookTrigger.CONVERSATION_START,
    "conversation_start": HookTrigger.CONVERSATION_START,
    "conversationStart": HookTrigger.CONVERSATION_START,
    "promptHooks": HookTrigger.PER_PROMPT,
    "per_prompt": HookTrigger.PER_PROMPT,
    "perPrompt": HookTrigger.PER_PROMPT,
}

_FIELD_ALIASES = {
    "timeoutMs": "timeout_ms",
    "maxOutputSize": "max_output_size",
    "cacheTtlSeconds": "cache_ttl_seconds",
}

_INT_FIELDS = ("timeout_ms", "max_output_size", "cache_ttl_seconds")


def parse_trigger(value: Any) -> HookTrigger:
    """Parse ``per_prompt``, ``perPrompt``, ``per-prompt`` etc. into a trigger.

    Raises ValueError for unknown names.
    """
    if isinstance(value, HookTrigger):
        return value
    text = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", str(value).strip())
    return HookTrigger(text.replace("-", "_").lower())


def hooks_from_config(raw: dict[str, Any], *, is_global: bool = False) -> list[Hook]:
    """Build hooks from a parsed document, in document order."""
    hooks: list[Hook] = []
    for key, value in raw.items():
        if key in _SECTION_TRIGGERS:
            hooks.extend(_section_hooks(value, _SECTION_TRIGGERS[key], is_global))
        elif key == "hooks":
            hooks.extend(_named_hooks(value, is_global))
    return hooks


def load_hooks_file(path: str | Path, *, is_global: bool = False) -> list[Hook]:
    """Load hooks from a JSON, YAML or TOML file. Returns [] on failure."""
    raw = _parse_file(Path(path))
    if raw is None:
        return []
    if not isinstance(raw, dict):
        logger.warning("Hook config %s is not a mapping", path)
        return []
    return hooks_from_config(raw, is_global=is_global)


def _section_hooks(section: Any, trigger: HookTrigger, is_global: bool) -> list[Hook]:
    if section is None:
        return []
    if isinstance(section, dict):
        items = list(section.items())
    elif isinstance(section, list):
        items = [("", entry) for entry in section]
    else:
        logger.warning("Skipping %s hooks: expected a list or mapping", trigger.value)
        return []

    hooks: list[Hook] = []
    for name, entry in items:
        hook = _build_hook(entry, trigger, name=str(name), is_global=is_global)
        if hook is not None:
            hooks.append(hook)
    return hooks


def _named_hooks(section: Any, is_global: bool) -> list[Hook]:
    if isinstance(section, dict):
        hooks: list[Hook] = []
        for key, value in section.items():
            if key in _SECTION_TRIGGERS:
                # [hooks] table nesting trigger sections, as in TOML configs
                hooks.extend(_section_hooks(value, _SECTION_TRIGGERS[key], is_global))
                continue
            hook = _build_hook(value, None, name=str(key), is_global=is_global)
            if hook is not None:
                hooks.append(hook)
        return hooks
    if isinstance(section, list):
        return [
            hook for hook in (_build_hook(e, None, name="", is_global=is_global) for e in section)
            if hook is not None
        ]
    logger.warning("Skipping hooks: expected a list or mapping")
    return []


def _build_hook(
    entry: Any, trigger: HookTrigger | None, *, name: str, is_global: bool,
) -> Hook | None:
    if isinstance(entry, str):
        if trigger is None:
            logger.warning("Skipping hook %r: no trigger given", name or entry)
            return None
        return Hook.inline(trigger, entry, name=name, is_global=is_global)

    if not isinstance(entry, dict):
        logger.warning("Skipping hook %r: unsupported entry %r", name, entry)
        return None

    fields = {_FIELD_ALIASES.get(k, k): v for k, v in entry.items()}
    label = fields.get("name") or name or fields.get("command") or "?"

    try:
        if trigger is None:
            if "trigger" not in fields:
                raise ValueError("no trigger given")
            trigger = parse_trigger(fields["trigger"])
        hook_type = HookType(str(fields.get("type", HookType.INLINE.value)).lower())
        limits = {k: _non_negative_int(k, fields[k]) for k in _INT_FIELDS if k in fields}
    except ValueError as exc:
        logger.warning("Skipping hook %r: %s", label, exc)
        return None

    command = fields.get("command")
    return Hook(
        trigger=trigger,
        command=str(command) if command is not None else None,
        type=hook_type,
        disabled=bool(fields.get("disabled", False)),
        is_global=is_global,
        name=str(fields.get("name") or name),
        **limits,
    )


def _non_negative_int(field_name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    number = int(value)
    if number < 0:
        raise ValueError(f"{field_name} must not be negative, got {number}")
    return number


def _parse_file(path: Path) -> Any:
    """Parse a JSON, YAML or TOML file."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text()
    except OSError as exc:
        logger.warning("Cannot read hook config %s: %s", path, exc)
        return None

    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Failed to parse JSON hook config %s: %s", path, exc)
            return None
    if suffix in (".yml", ".yaml"):
        import yaml

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            logger.warning("Failed to parse YAML hook config %s: %s", path, exc)
            return None
    if suffix == ".toml":
        import tomllib

        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            logger.warning("Failed to parse TOML hook config %s: %s", path, exc)
            return None

    logger.warning("Unsupported hook config extension: %s", path)
    return None
