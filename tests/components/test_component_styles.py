from __future__ import annotations

from designscout.components.detector import Framework
from designscout.components.styles import extract_component_styles

STYLED = """
import styled from 'styled-components';

const Wrapper = styled.div`
  display: flex;
  background-color: var(--color-surface);
  @media (max-width: 600px) {
    display: block;
  }
`;

const Label = styled.span`
  font-weight: 600;
`;
"""

VUE_SFC = """
<template><div class="card"></div></template>

<style scoped>
.card { color: red; }
@media (max-width: 600px) { .card { color: blue; } }
</style>
"""


def test_styled_components_templates() -> None:
    styles = extract_component_styles(STYLED, "react")

    assert [style.selector for style in styles] == ["Wrapper", "Label"]
    wrapper, label = styles
    assert wrapper.properties["background-color"] == "var(--color-surface)"
    assert wrapper.responsive is True
    assert label.properties == {"font-weight": "600"}
    assert label.responsive is False


def test_vue_style_block_rules_share_responsive_flag() -> None:
    styles = extract_component_styles(VUE_SFC, Framework.VUE)

    assert [style.selector for style in styles] == [".card", "@media (max-width: 600px)"]
    assert styles[0].properties == {"color": "red"}
    assert all(style.responsive for style in styles)


def test_style_blocks_are_ignored_outside_vue() -> None:
    assert extract_component_styles(VUE_SFC, Framework.SVELTE) == []
