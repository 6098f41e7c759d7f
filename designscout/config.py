"""Configuration loading for designscout (.designscout.yml)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .logging import resolve_level

CONFIG_FILENAME = ".designscout.yml"

_FRAMEWORKS = ("auto", "react", "vue", "angular", "svelte")
_TRANSFORMS = ("kebab-case", "camelCase", "snake_case")
_THEME_FORMATS = ("tailwind", "styled-components", "material-ui", "css-variables", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class TokenConfig:
    """Defaults for design token extraction."""

    formats: List[str] = field(default_factory=lambda: ["css", "scss", "json", "yaml"])
    categories: List[str] = field(default_factory=list)
    transform: Optional[str] = None
    materialize_yaml: bool = True


@dataclass
class ComponentConfig:
    """Defaults for component library analysis."""

    framework: str = "auto"
    include_styles: bool = True
    exclude_patterns: List[str] = field(
        default_factory=lambda: ["node_modules", ".git", "dist", "build"]
    )
    depth: int = 10


@dataclass
class ThemeConfig:
    """Defaults for theme generation."""

    contrast_ratio: float = 4.5
    format: str = "json"


@dataclass
class DesignScoutConfig:
    """Represents the settings defined in .designscout.yml."""

    root: Path
    log_level: int = logging.INFO
    tokens: TokenConfig = field(default_factory=TokenConfig)
    components: ComponentConfig = field(default_factory=ComponentConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)


def load_config(config_path: Path) -> DesignScoutConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DesignScoutConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    try:
        log_level = resolve_level(_as_level(data.get("log_level")))
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    tokens = TokenConfig()
    token_data = _as_dict(data.get("tokens"))
    if token_data:
        formats = _as_str_list(token_data.get("formats"))
        if formats:
            tokens.formats = formats
        tokens.categories = _as_str_list(token_data.get("categories"))
        tokens.transform = _as_choice(token_data.get("transform"), _TRANSFORMS, "tokens.transform")
        materialize = _as_bool(token_data.get("materialize_yaml"))
        if materialize is not None:
            tokens.materialize_yaml = materialize

    components = ComponentConfig()
    component_data = _as_dict(data.get("components"))
    if component_data:
        components.framework = (
            _as_choice(component_data.get("framework"), _FRAMEWORKS, "components.framework")
            or components.framework
        )
        include_styles = _as_bool(component_data.get("include_styles"))
        if include_styles is not None:
            components.include_styles = include_styles
        if "exclude_patterns" in component_data:
            components.exclude_patterns = _as_str_list(component_data.get("exclude_patterns"))
        depth = _as_int(component_data.get("depth"))
        if depth is not None:
            components.depth = depth

    theme = ThemeConfig()
    theme_data = _as_dict(data.get("theme"))
    if theme_data:
        ratio = _as_float(theme_data.get("contrast_ratio"))
        if ratio is not None:
            theme.contrast_ratio = ratio
        theme.format = (
            _as_choice(theme_data.get("format"), _THEME_FORMATS, "theme.format") or theme.format
        )

    return DesignScoutConfig(
        root=root,
        log_level=log_level,
        tokens=tokens,
        components=components,
        theme=theme,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_level(value: Any) -> int | str | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return _as_str(value)


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_choice(value: Any, choices: Sequence[str], key: str) -> Optional[str]:
    text = _as_str(value)
    if text is None:
        return None
    if text not in choices:
        raise ConfigError(f"{key} must be one of {', '.join(choices)} (got {text!r})")
    return text


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ComponentConfig",
    "ConfigError",
    "DesignScoutConfig",
    "ThemeConfig",
    "TokenConfig",
    "load_config",
]
