"""Best-effort prop extraction for React, Vue, Angular and Svelte sources."""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import ComponentProp

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

_TYPED_PAIR = re.compile(r"(\w+)(\?)?:\s*([^;\n]+)")


def _typed_pairs(body: str) -> List[ComponentProp]:
    """Parse ``name?: type`` pairs from a TypeScript type body."""
    return [
        ComponentProp(name=name, type=type_.strip(), required=not optional)
        for name, optional, type_ in _TYPED_PAIR.findall(body)
    ]


def _balanced_body(content: str, open_index: int) -> Optional[str]:
    """Return the text between the brace at ``open_index`` and its partner."""
    depth = 0
    for index in range(open_index, len(content)):
        char = content[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[open_index + 1 : index]
    return None


# ---------------------------------------------------------------------------
# React
# ---------------------------------------------------------------------------

_REACT_INTERFACE = re.compile(r"interface\s+(\w+Props)\s*{([^}]+)}", re.DOTALL)
_REACT_PROPTYPES = re.compile(r"(\w+)\.propTypes\s*=\s*{([^}]+)}", re.DOTALL)
_PROPTYPES_PAIR = re.compile(r"(\w+):\s*PropTypes\.(\w+)(\.isRequired)?")


def extract_react_props(content: str) -> List[ComponentProp]:
    """Props from the first ``*Props`` interface and the first ``propTypes`` block."""
    props: List[ComponentProp] = []

    interface = _REACT_INTERFACE.search(content)
    if interface:
        props.extend(_typed_pairs(interface.group(2)))

    prop_types = _REACT_PROPTYPES.search(content)
    if prop_types:
        for name, type_, required in _PROPTYPES_PAIR.findall(prop_types.group(2)):
            props.append(ComponentProp(name=name, type=type_, required=bool(required)))

    return props


# ---------------------------------------------------------------------------
# Vue
# ---------------------------------------------------------------------------

_VUE_DEFINE_PROPS = re.compile(r"defineProps<([^>]+)>", re.DOTALL)
_VUE_PROPS_OPTION = re.compile(r"props:\s*{")
_VUE_PROP_ENTRY = re.compile(r"(\w+):\s*{([^}]*)}")
_VUE_PROP_TYPE = re.compile(r"type:\s*(\w+)")
_VUE_PROP_DEFAULT = re.compile(r"default:\s*([^,\n]+)")


def extract_vue_props(content: str) -> List[ComponentProp]:
    """Props from ``defineProps<...>()`` and from the options-API ``props`` object."""
    props: List[ComponentProp] = []

    define_props = _VUE_DEFINE_PROPS.search(content)
    if define_props:
        props.extend(_typed_pairs(define_props.group(1)))

    option = _VUE_PROPS_OPTION.search(content)
    if option:
        body = _balanced_body(content, option.end() - 1)
        for name, config in _VUE_PROP_ENTRY.findall(body or ""):
            type_match = _VUE_PROP_TYPE.search(config)
            default_match = _VUE_PROP_DEFAULT.search(config)
            props.append(
                ComponentProp(
                    name=name,
                    type=type_match.group(1) if type_match else "any",
                    required="required: true" in config,
                    default_value=default_match.group(1).strip() if default_match else None,
                )
            )

    return props


# ---------------------------------------------------------------------------
# Angular
# ---------------------------------------------------------------------------

_ANGULAR_INPUT = re.compile(r"@Input\(\)\s*(\w+)(\?)?:\s*([^;\n=]+)")


def extract_angular_props(content: str) -> List[ComponentProp]:
    return [
        ComponentProp(name=name, type=type_.strip(), required=not optional)
        for name, optional, type_ in _ANGULAR_INPUT.findall(content)
    ]


# ---------------------------------------------------------------------------
# Svelte
# ---------------------------------------------------------------------------

_SVELTE_SCRIPT = re.compile(r"<script(?P<attrs>[^>]*)>(?P<body>.*?)</script>", re.DOTALL)
_SVELTE_EXPORT = re.compile(r"export\s+let\s+(\w+)\s*(?::\s*([^=;\n]+))?(?:=\s*([^;\n]+))?;?")


def _svelte_instance_script(content: str) -> str:
    blocks = list(_SVELTE_SCRIPT.finditer(content))
    if not blocks:
        return content
    return "\n".join(
        block.group("body") for block in blocks if "module" not in block.group("attrs")
    )


def extract_svelte_props(content: str) -> List[ComponentProp]:
    """``export let`` declarations in the instance script; defaults make a prop optional."""
    props: List[ComponentProp] = []
    for name, type_, default in _SVELTE_EXPORT.findall(_svelte_instance_script(content)):
        props.append(
            ComponentProp(
                name=name,
                type=type_.strip() or "any",
                required=not default,
                default_value=default.strip() or None,
            )
        )
    return props


__all__ = [
    "extract_angular_props",
    "extract_react_props",
    "extract_svelte_props",
    "extract_vue_props",
]
