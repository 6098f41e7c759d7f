"""Per-format design token extractors (CSS, SCSS, JSON, YAML)."""

from __future__ import annotations

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..models import DesignToken
from .classifier import infer_category, infer_type

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
# Innermost ``prelude { body }`` pairs; rules nested in @media still match.
_CSS_RULE = re.compile(r"([^{}]*)\{([^{}]*)\}")
_CSS_THEME_SELECTORS = (":root", "[data-theme")
_QUOTES = re.compile(r"['\"]")

_SCSS_VARIABLE = re.compile(r"\$([a-zA-Z0-9_-]+)\s*:\s*([^;]+);")


class TokenFormat(str, Enum):
    """Closed set of source formats the token pipeline understands."""

    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    YAML = "yaml"

    @property
    def extensions(self) -> Tuple[str, ...]:
        if self is TokenFormat.YAML:
            return ("yaml", "yml")
        return (self.value,)

    @classmethod
    def from_extension(cls, extension: str) -> Optional["TokenFormat"]:
        ext = extension.lower().lstrip(".")
        for member in cls:
            if ext in member.extensions:
                return member
        return None

    def extract(self, path: Path, *, materialize_yaml: bool = True) -> List[DesignToken]:
        """Run the extractor that belongs to this format."""
        if self is TokenFormat.CSS:
            return extract_from_css(path)
        if self is TokenFormat.SCSS:
            return extract_from_scss(path)
        if self is TokenFormat.JSON:
            return extract_from_json(path)
        return extract_from_yaml(path, materialize=materialize_yaml)


def _read_text(path: Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def _split_declarations(body: str) -> List[str]:
    """Split a rule body on ``;`` outside quotes and parentheses."""
    parts: List[str] = []
    current: List[str] = []
    quote: Optional[str] = None
    depth = 0
    for char in body:
        if quote:
            if char == quote:
                quote = None
        elif char in "'\"":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")" and depth:
            depth -= 1
        elif char == ";" and not depth:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def extract_from_css(path: Path) -> List[DesignToken]:
    """Collect custom properties declared under ``:root`` or ``[data-theme]`` rules."""
    content = _CSS_COMMENT.sub("", _read_text(path))
    tokens: List[DesignToken] = []

    for match in _CSS_RULE.finditer(content):
        selector = match.group(1).strip()
        if not any(marker in selector for marker in _CSS_THEME_SELECTORS):
            continue
        for declaration in _split_declarations(match.group(2)):
            prop, sep, raw_value = declaration.partition(":")
            prop = prop.strip()
            if not sep or not prop.startswith("--"):
                continue
            value = raw_value.strip()
            tokens.append(
                DesignToken(
                    name=prop[2:],
                    value=_QUOTES.sub("", value),
                    type=infer_type(prop, value),
                    category=infer_category(prop),
                    source=str(path),
                )
            )
    return tokens


def extract_from_scss(path: Path) -> List[DesignToken]:
    """Collect top-level ``$name: value;`` variable declarations."""
    content = _read_text(path)
    tokens: List[DesignToken] = []
    for name, value in _SCSS_VARIABLE.findall(content):
        tokens.append(
            DesignToken(
                name=name,
                value=value.strip(),
                type=infer_type(name, value),
                category=infer_category(name),
                source=str(path),
            )
        )
    return tokens


def extract_from_json(path: Path) -> List[DesignToken]:
    """Walk a JSON token document (plain nesting or Design Tokens format)."""
    data = json.loads(_read_text(path))
    return extract_from_mapping(data, str(path))


def extract_from_yaml(path: Path, *, materialize: bool = True) -> List[DesignToken]:
    """Parse a YAML token document and hand it to the JSON walker.

    With ``materialize`` the parsed document is first written next to the
    source as ``<stem>.json`` and extraction runs from that file, so tokens
    report the ``.json`` path as their source. The file is not removed.
    """
    data = yaml.safe_load(_read_text(path))
    encoded = json.dumps(_string_keys(data), indent=2, default=str)
    if materialize:
        target = Path(path).with_suffix(".json")
        target.write_text(encoded, encoding="utf-8")
        return extract_from_json(target)
    return extract_from_mapping(json.loads(encoded), str(path))


def extract_from_mapping(data: Any, source: str) -> List[DesignToken]:
    """Flatten a nested token mapping into dash-joined token names."""
    if not isinstance(data, dict):
        raise ValueError("token document root must be an object")
    tokens: List[DesignToken] = []
    _walk(data, "", None, source, tokens)
    return tokens


def _walk(
    node: Dict[str, Any],
    prefix: str,
    category: Optional[str],
    source: str,
    tokens: List[DesignToken],
) -> None:
    for key, value in node.items():
        name = f"{prefix}-{key}" if prefix else str(key)

        if isinstance(value, dict):
            if "value" in value:
                raw = value["value"]
                tokens.append(
                    DesignToken(
                        name=name,
                        value=raw,
                        type=value.get("type") or infer_type(name, _as_text(raw)),
                        category=category or infer_category(name),
                        description=value.get("description"),
                        source=source,
                    )
                )
            else:
                # Nested namespaces inherit the outermost key as their category.
                _walk(value, name, category or str(key), source, tokens)
            continue

        tokens.append(
            DesignToken(
                name=name,
                value=value,
                type=infer_type(name, _as_text(value)),
                category=category or infer_category(name),
                source=source,
            )
        )


def _string_keys(node: Any) -> Any:
    # YAML keys may load as dates or numbers; JSON objects only take strings.
    if isinstance(node, dict):
        return {str(key): _string_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_string_keys(item) for item in node]
    return node


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


__all__ = [
    "TokenFormat",
    "extract_from_css",
    "extract_from_json",
    "extract_from_mapping",
    "extract_from_scss",
    "extract_from_yaml",
]
