"""Optional repo guard configuration loader.

Supports repo-guard.config.json or repo-guard.config.yaml at the repository
root. The document is validated against its declared shape only; the v1
ruleset is fixed and is not customized by it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

from repoguard.schemas import schema_errors

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = (
    "repo-guard.config.json",
    "repo-guard.config.yaml",
    "repo-guard.config.yml",
)


class ConfigError(RuntimeError):
    """Raised when a configuration file is unreadable, malformed or invalid."""


@dataclass(frozen=True)
class ModeDefaults:
    """Per-mode path overrides as declared by the config document."""

    require_files: list[str] = field(default_factory=list)
    forbid_paths: list[str] = field(default_factory=list)
    require_action_yml: bool | None = None
    require_tags: bool | None = None


@dataclass(frozen=True)
class GuardConfig:
    """Parsed v1 configuration document."""

    schema: str
    version: str
    posture: Literal["deny"]
    repo: ModeDefaults | None = None
    marketplace: ModeDefaults | None = None
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: Path | None = None) -> GuardConfig:
        """Parse a validated config dict."""
        mode_defaults = data.get("mode_defaults", {})

        def _defaults(key: str) -> ModeDefaults | None:
            if key not in mode_defaults:
                return None
            raw = mode_defaults[key]
            return ModeDefaults(
                require_files=list(raw.get("require_files", [])),
                forbid_paths=list(raw.get("forbid_paths", [])),
                require_action_yml=raw.get("require_action_yml"),
                require_tags=raw.get("require_tags"),
            )

        return cls(
            schema=data["schema"],
            version=data["version"],
            posture=data["posture"],
            repo=_defaults("repo"),
            marketplace=_defaults("marketplace"),
            source=source,
        )


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    if path.suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Malformed JSON config at {path}: {e}") from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML config at {path}: {e}") from e


def parse_config_file(path: Path) -> GuardConfig:
    """Read, validate and parse one config file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated
    """
    data = _read_document(path)
    errors = schema_errors(data, "config")
    if errors:
        raise ConfigError(
            f"Invalid config structure in {path}:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    return GuardConfig.from_dict(data, source=path)


def load_guard_config(root: Path, explicit: Path | None = None) -> GuardConfig | None:
    """Load configuration for a root.

    Priority order:
    1. Explicit path (must exist)
    2. repo-guard.config.json, .yaml, .yml under root

    Returns:
        GuardConfig if a config file was found, None otherwise

    Raises:
        ConfigError: If the selected file is missing, malformed or invalid
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return parse_config_file(explicit)

    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            logger.debug("Using config %s", candidate)
            return parse_config_file(candidate)

    return None
