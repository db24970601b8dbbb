"""Checker settings and their YAML configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml


class ConfigError(RuntimeError):
    """Raised when a configuration file cannot be loaded."""


@dataclass(frozen=True, slots=True)
class CheckerSettings:
    """Paths and naming conventions of the provider repository under check."""

    provider: str = "alicloud"
    docs_dir: str = "website/docs/r"
    doc_suffix: str = ".html.markdown"
    resource_file_pattern: str | None = None
    test_file_pattern: str | None = None

    @property
    def resource_prefix(self) -> str:
        return f"{self.provider}_"

    @property
    def resource_file_regex(self) -> re.Pattern[str]:
        pattern = self.resource_file_pattern or rf"{re.escape(self.provider)}/resource[a-zA-Z_]*\.go"
        return re.compile(pattern)

    @property
    def test_file_regex(self) -> re.Pattern[str]:
        pattern = self.test_file_pattern or rf"{re.escape(self.provider)}/resource[a-zA-Z_]*_test\.go"
        return re.compile(pattern)

    def with_overrides(self, **overrides: Any) -> "CheckerSettings":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def load_mapping(path: Path, error_cls: type[RuntimeError]) -> Dict[str, Any]:
    """Read a YAML mapping from ``path``. JSON documents parse as YAML too."""

    if not path.exists():
        raise error_cls(f"File not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
        raise error_cls(f"Failed to read {path}") from exc

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise error_cls(f"Invalid YAML in {path}") from exc

    if not isinstance(data, Mapping):
        raise error_cls(f"Expected a mapping at the top level of {path}")

    return dict(data)


def load_settings(path: Path | None = None) -> CheckerSettings:
    """Return settings from ``path``, or the defaults when no path is given."""

    settings = CheckerSettings()
    if path is None:
        return settings

    data = load_mapping(path, ConfigError)
    known = {item.name for item in fields(CheckerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {path}: {', '.join(unknown)}")

    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Configuration key '{key}' must be a string")

    return settings.with_overrides(**data)


__all__ = ["CheckerSettings", "ConfigError", "load_mapping", "load_settings"]
