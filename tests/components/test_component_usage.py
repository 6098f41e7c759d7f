from __future__ import annotations

from designscout.components.usage import (
    RECOMMEND_CUSTOMIZATION,
    RECOMMEND_SPLIT,
    RECOMMEND_VARIANTS,
    analyze_usage,
)
from designscout.models import ComponentProp, ComponentStyle


def _props(*names: str, type_: str = "boolean"):
    return [ComponentProp(name=name, type=type_, required=False) for name in names]


def test_button_like_component_is_simple_and_highly_reusable() -> None:
    props = [
        ComponentProp(name="children", type="React.ReactNode", required=True),
        ComponentProp(name="onClick", type="() => void", required=False),
        ComponentProp(name="variant", type="'primary' | 'secondary'", required=False),
    ]

    usage = analyze_usage(props, [])

    assert usage.complexity == "simple"
    assert usage.reusability == "high"
    assert usage.design_patterns == ["composition", "interactive", "variants"]
    assert usage.recommendations == [RECOMMEND_CUSTOMIZATION]


def test_many_props_make_a_component_complex() -> None:
    usage = analyze_usage(_props(*(f"p{index}" for index in range(11))), [])

    assert usage.complexity == "complex"
    assert usage.reusability == "low"
    assert usage.recommendations == [
        RECOMMEND_SPLIT,
        RECOMMEND_VARIANTS,
        RECOMMEND_CUSTOMIZATION,
    ]


def test_style_count_drives_medium_complexity() -> None:
    styles = [ComponentStyle(selector=f".s{index}") for index in range(4)]
    assert analyze_usage([], styles).complexity == "medium"


def test_class_name_prop_removes_customization_hint() -> None:
    usage = analyze_usage(_props("className", "size", type_="string"), [])

    assert usage.reusability == "medium"
    assert usage.design_patterns == ["variants"]
    assert usage.recommendations == []


def test_state_props() -> None:
    usage = analyze_usage(_props("disabled", "loading"), [])
    assert usage.design_patterns == ["states"]
