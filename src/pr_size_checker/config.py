"""Configuration loading for PR Size Checker."""

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ConfigError(ValueError):
    """Raised when size check configuration is invalid."""


@dataclass
class SizeSettings:
    """Raw size check settings, as read from YAML or the command line."""

    error_size: int = 500
    warning_size: int = 100
    exclude_title: str | None = None
    exclude_label: str | None = None
    exclude_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CheckerConfig:
    """Validated, immutable configuration consumed by the size checker."""

    error_size: int
    warning_size: int
    exclude_title: re.Pattern | None = None
    exclude_label: str | None = None
    exclude_paths: tuple[str, ...] = ()


def _split_outside_braces(value: str) -> list[str]:
    items = []
    current = []
    depth = 0
    for ch in value:
        if ch == "\n" or (ch == "," and depth == 0):
            items.append("".join(current))
            current = []
            depth = 0
            continue
        if ch == "{":
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
        current.append(ch)
    items.append("".join(current))
    return items


def split_patterns(value: str | list[str] | None) -> list[str]:
    """Normalize a path pattern list.

    Strings are split on newlines and on commas outside ``{...}`` groups,
    the way multi-line action inputs arrive. Blank entries are dropped.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = _split_outside_braces(value)
    else:
        items = [str(v) for v in value]
    return [item.strip() for item in items if item.strip()]


def load_settings(path: Path) -> SizeSettings:
    """Load settings from YAML file, with defaults for missing values."""
    settings = SizeSettings()

    if not path.exists():
        return settings

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config from {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    known = {
        k: v for k, v in data.items()
        if k in SizeSettings.__dataclass_fields__
    }

    if "exclude_paths" in known:
        paths = known["exclude_paths"]
        if paths is not None and not isinstance(paths, (list, str)):
            raise ConfigError("exclude_paths must be a list of glob patterns")
        known["exclude_paths"] = split_patterns(paths)

    for key, value in known.items():
        setattr(settings, key, value)

    return settings


def _to_size(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        size = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
    if size < 0:
        raise ConfigError(f"{name} must not be negative, got {size}")
    return size


def build_checker_config(settings: SizeSettings) -> CheckerConfig:
    """Validate settings and build the checker configuration.

    Empty strings for the title pattern and label count as unset.

    Raises:
        ConfigError: If a threshold or the title pattern is invalid
    """
    error_size = _to_size("error_size", settings.error_size)
    warning_size = _to_size("warning_size", settings.warning_size)

    for name in ("exclude_title", "exclude_label"):
        value = getattr(settings, name)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"{name} must be a string, got {value!r}")

    exclude_title = None
    if settings.exclude_title:
        try:
            exclude_title = re.compile(settings.exclude_title)
        except re.error as e:
            raise ConfigError(
                f"Invalid exclude_title pattern {settings.exclude_title!r}: {e}"
            ) from e

    return CheckerConfig(
        error_size=error_size,
        warning_size=warning_size,
        exclude_title=exclude_title,
        exclude_label=settings.exclude_label or None,
        exclude_paths=tuple(split_patterns(settings.exclude_paths)),
    )
