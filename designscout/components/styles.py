"""Style extraction from styled-components templates and Vue ``<style>`` blocks."""

from __future__ import annotations

import re
from typing import Dict, List

from ..models import ComponentStyle

_STYLED_BLOCK = re.compile(r"const\s+(\w+)\s*=\s*styled\.\w+`([^`]+)`", re.DOTALL)
_DECLARATION = re.compile(r"(\w+(?:-\w+)*):\s*([^;\n]+);")
_VUE_STYLE_BLOCK = re.compile(r"<style[^>]*>([^<]+)</style>", re.DOTALL)
_CSS_RULE = re.compile(r"([^{]+){([^}]+)}")


def _declarations(text: str) -> Dict[str, str]:
    return {prop: value.strip() for prop, value in _DECLARATION.findall(text)}


def extract_component_styles(content: str, framework: str) -> List[ComponentStyle]:
    """Collect style blocks attached to a component source.

    ``framework`` only matters for Vue, whose first ``<style>`` block is
    parsed rule by rule in addition to any styled-components templates.
    """
    styles: List[ComponentStyle] = []

    for name, body in _STYLED_BLOCK.findall(content):
        styles.append(
            ComponentStyle(
                selector=name,
                properties=_declarations(body),
                responsive="@media" in body,
            )
        )

    if framework == "vue":
        block = _VUE_STYLE_BLOCK.search(content)
        if block:
            sheet = block.group(1)
            responsive = "@media" in sheet
            for selector, body in _CSS_RULE.findall(sheet):
                styles.append(
                    ComponentStyle(
                        selector=selector.strip(),
                        properties=_declarations(body),
                        responsive=responsive,
                    )
                )

    return styles


__all__ = ["extract_component_styles"]
