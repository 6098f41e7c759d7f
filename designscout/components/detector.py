"""Framework detection for component source files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from ..models import ComponentProp
from .props import (
    extract_angular_props,
    extract_react_props,
    extract_svelte_props,
    extract_vue_props,
)

_REACT_MARKERS = ("import React", 'from "react"', "from 'react'")
_ANGULAR_MARKERS = ("@Component", "Angular", "@angular/")
_VUE_MARKERS = ("Vue.component", "defineComponent")


class Framework(str, Enum):
    REACT = "react"
    VUE = "vue"
    ANGULAR = "angular"
    SVELTE = "svelte"
    UNKNOWN = "unknown"

    def extract_props(self, content: str) -> List[ComponentProp]:
        """Run the prop extractor that belongs to this framework."""
        if self is Framework.REACT:
            return extract_react_props(content)
        if self is Framework.VUE:
            return extract_vue_props(content)
        if self is Framework.ANGULAR:
            return extract_angular_props(content)
        if self is Framework.SVELTE:
            return extract_svelte_props(content)
        return []


def detect_framework(file_path: str | Path, content: str) -> Framework:
    """Guess the framework from the file extension, then from content markers."""
    suffix = Path(file_path).suffix
    if suffix == ".vue":
        return Framework.VUE
    if suffix == ".svelte":
        return Framework.SVELTE

    if any(marker in content for marker in _REACT_MARKERS):
        return Framework.REACT
    if any(marker in content for marker in _ANGULAR_MARKERS):
        return Framework.ANGULAR
    if any(marker in content for marker in _VUE_MARKERS):
        return Framework.VUE
    return Framework.UNKNOWN


__all__ = ["Framework", "detect_framework"]
