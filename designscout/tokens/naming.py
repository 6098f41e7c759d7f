"""Case conversion applied to extracted token names."""

from __future__ import annotations

import re
from typing import Optional

NAME_TRANSFORMS = ("kebab-case", "camelCase", "snake_case")

_KEBAB_SEPARATORS = re.compile(r"[_\s]+")
_SNAKE_SEPARATORS = re.compile(r"[-\s]+")
_CAMEL_SEPARATORS = re.compile(r"[-_\s]+(.)?")
_CAPITAL = re.compile(r"([A-Z])")


def transform_name(name: str, mode: Optional[str]) -> str:
    """Convert ``name`` to ``mode``; ``None`` leaves it untouched."""
    if mode is None:
        return name
    if mode == "kebab-case":
        result = _CAPITAL.sub(r"-\1", _KEBAB_SEPARATORS.sub("-", name)).lower()
        return result[1:] if result.startswith("-") else result
    if mode == "camelCase":
        return _CAMEL_SEPARATORS.sub(lambda match: (match.group(1) or "").upper(), name)
    if mode == "snake_case":
        result = _CAPITAL.sub(r"_\1", _SNAKE_SEPARATORS.sub("_", name)).lower()
        return result[1:] if result.startswith("_") else result
    raise ValueError(f"Unknown name transform: {mode}")


__all__ = ["NAME_TRANSFORMS", "transform_name"]
