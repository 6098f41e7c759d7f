"""Tests for the operation registry and its validation gate."""

from __future__ import annotations

from pathlib import Path

import pytest

from designscout.config import DesignScoutConfig, ThemeConfig, TokenConfig
from designscout.errors import InvalidInputError, OperationNotFoundError
from designscout.operations import (
    ExtractDesignTokensRequest,
    get_operation,
    invoke,
    list_operations,
    validate_arguments,
)
from tests._fixtures.project_builder import ProjectBuilder

OPERATION_NAMES = [
    "extractDesignTokens",
    "analyzeComponentLibrary",
    "generateTheme",
    "generateColorScale",
    "checkAccessibility",
]


def test_list_operations_describes_every_operation() -> None:
    described = list_operations()

    assert [entry["name"] for entry in described] == OPERATION_NAMES
    for entry in described:
        assert entry["description"]
        assert entry["inputSchema"]["type"] == "object"

    theme_schema = described[2]["inputSchema"]
    assert "baseColors" in theme_schema["properties"]
    assert theme_schema["required"] == ["baseColors"]


def test_unknown_operation() -> None:
    with pytest.raises(OperationNotFoundError) as excinfo:
        invoke("explodeEverything", {})

    message = str(excinfo.value)
    assert message.startswith('Operation "explodeEverything" not found.')
    assert "extractDesignTokens" in message
    assert excinfo.value.available == OPERATION_NAMES


def test_aliases_and_field_names_are_both_accepted() -> None:
    operation = get_operation("extractDesignTokens")

    by_alias = validate_arguments(operation, {"source": "a.css", "includeMetadata": False})
    by_name = validate_arguments(operation, {"source": "a.css", "include_metadata": False})

    assert isinstance(by_alias, ExtractDesignTokensRequest)
    assert by_alias.include_metadata is False
    assert by_name.include_metadata is False


@pytest.mark.parametrize(
    ("name", "args", "location"),
    [
        ("extractDesignTokens", {}, "source"),
        ("extractDesignTokens", {"source": "  "}, "source"),
        ("extractDesignTokens", {"source": []}, "source"),
        ("extractDesignTokens", {"source": "a.css", "formats": ["less"]}, "formats.0"),
        ("extractDesignTokens", {"source": "a.css", "transform": "UPPER"}, "transform"),
        ("analyzeComponentLibrary", {"source": "src", "depth": -1}, "depth"),
        ("analyzeComponentLibrary", {"source": "src", "framework": "ember"}, "framework"),
        ("generateTheme", {"baseColors": []}, "baseColors"),
        ("generateTheme", {"baseColors": ["#fff"], "contrastRatio": 30}, "contrastRatio"),
        ("generateTheme", {"baseColors": ["#fff"], "modes": ["sepia"]}, "modes.0"),
        ("generateColorScale", {"baseColor": "#fff", "steps": 0}, "steps"),
        ("checkAccessibility", {"foreground": "#000"}, "background"),
    ],
)
def test_invalid_arguments_are_rejected(name: str, args: dict, location: str) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        invoke(name, args)

    assert any(error.startswith(f"{location}:") for error in excinfo.value.errors)
    assert str(excinfo.value).startswith(f"Invalid arguments for {name}:")


def test_arguments_must_be_a_mapping() -> None:
    with pytest.raises(InvalidInputError):
        invoke("generateColorScale", ["#fff"])  # type: ignore[arg-type]


def test_extract_design_tokens_operation(project_builder: ProjectBuilder) -> None:
    project_builder.write({"theme.css": ":root { --color-primary: #3b82f6; }"})

    result = invoke(
        "extractDesignTokens",
        {"source": [str(project_builder.path("theme.css"))], "includeMetadata": False},
    )

    assert set(result) == {"tokens", "validation"}
    assert result["tokens"]["color-primary"]["category"] == "brand"


def test_config_supplies_unspecified_options(project_builder: ProjectBuilder) -> None:
    project_builder.write({"tokens.json": '{"primaryColor": "#000", "space-sm": "4px"}'})
    config = DesignScoutConfig(
        root=project_builder.path(),
        tokens=TokenConfig(categories=["brand"], transform="snake_case"),
    )

    result = invoke(
        "extractDesignTokens", {"source": str(project_builder.path("tokens.json"))}, config=config
    )

    assert list(result["tokens"]) == ["primary_color"]


def test_request_overrides_config(project_builder: ProjectBuilder) -> None:
    project_builder.write({"tokens.json": '{"primaryColor": "#000"}'})
    config = DesignScoutConfig(
        root=project_builder.path(), tokens=TokenConfig(transform="snake_case")
    )

    result = invoke(
        "extractDesignTokens",
        {"source": str(project_builder.path("tokens.json")), "transform": "kebab-case"},
        config=config,
    )

    assert list(result["tokens"]) == ["primary-color"]


def test_analyze_component_library_operation(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {"Badge.tsx": "import React from 'react';\ninterface BadgeProps {\n  label: string;\n}\n"}
    )

    result = invoke("analyzeComponentLibrary", {"source": str(project_builder.path())})

    assert result["metadata"]["totalComponents"] == 1
    assert result["components"][0]["props"] == [
        {"name": "label", "type": "string", "required": True}
    ]


def test_analyze_missing_directory_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        invoke("analyzeComponentLibrary", {"source": str(tmp_path / "nope")})


def test_generate_theme_uses_config_format() -> None:
    config = DesignScoutConfig(root=Path.cwd(), theme=ThemeConfig(format="css-variables"))

    result = invoke("generateTheme", {"baseColors": ["#3b82f6"]}, config=config)

    assert isinstance(result["theme"], str)
    assert result["variations"]["scales"]["primary"][0] == 90


def test_generate_color_scale_operation() -> None:
    result = invoke("generateColorScale", {"baseColor": "#3b82f6", "steps": 4})

    assert result["baseColor"] == "#3b82f6"
    assert list(result["scale"]) == ["225", "450", "500", "675", "900"]


def test_check_accessibility_operation() -> None:
    result = invoke(
        "checkAccessibility",
        {"foreground": "#000000", "background": "#ffffff", "targetRatio": 7},
    )

    assert result["compliant"] is True
    assert result["ratio"] == pytest.approx(21.0)
