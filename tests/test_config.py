"""Tests for designscout.config."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from designscout.config import (
    ComponentConfig,
    ConfigError,
    DesignScoutConfig,
    ThemeConfig,
    TokenConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DesignScoutConfig)
    assert config.root == tmp_path.resolve()
    assert config.log_level == logging.INFO
    assert config.tokens == TokenConfig()
    assert config.tokens.formats == ["css", "scss", "json", "yaml"]
    assert config.components == ComponentConfig()
    assert config.components.exclude_patterns == ["node_modules", ".git", "dist", "build"]
    assert config.theme == ThemeConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".designscout.yml"
    config_file.write_text(
        """
log_level: debug
tokens:
  formats: [css, json]
  categories: [brand, spacing]
  transform: camelCase
  materialize_yaml: false
components:
  framework: vue
  include_styles: "no"
  exclude_patterns:
    - "**/stories/**"
  depth: 3
theme:
  contrast_ratio: 7
  format: tailwind
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.log_level == logging.DEBUG
    assert config.tokens.formats == ["css", "json"]
    assert config.tokens.categories == ["brand", "spacing"]
    assert config.tokens.transform == "camelCase"
    assert config.tokens.materialize_yaml is False

    assert config.components.framework == "vue"
    assert config.components.include_styles is False
    assert config.components.exclude_patterns == ["**/stories/**"]
    assert config.components.depth == 3

    assert config.theme.contrast_ratio == pytest.approx(7.0)
    assert config.theme.format == "tailwind"


def test_directory_argument_finds_config_file(tmp_path: Path) -> None:
    (tmp_path / ".designscout.yml").write_text("theme:\n  format: css-variables\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.theme.format == "css-variables"
    assert config.tokens == TokenConfig()


def test_empty_exclude_list_disables_default_excludes(tmp_path: Path) -> None:
    (tmp_path / ".designscout.yml").write_text(
        "components:\n  exclude_patterns: []\n", encoding="utf-8"
    )

    assert load_config(tmp_path).components.exclude_patterns == []


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / ".designscout.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).tokens == TokenConfig()


def test_numeric_log_level_is_used_as_is(tmp_path: Path) -> None:
    (tmp_path / ".designscout.yml").write_text("log_level: 10\n", encoding="utf-8")
    assert load_config(tmp_path).log_level == logging.DEBUG


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "tokens: [unclosed\n",
        "log_level: chatty\n",
        "tokens:\n  transform: SCREAMING_CASE\n",
        "components:\n  framework: ember\n",
        "theme:\n  format: bootstrap\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".designscout.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_choice_message_lists_options(tmp_path: Path) -> None:
    (tmp_path / ".designscout.yml").write_text("components:\n  framework: ember\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="components.framework must be one of auto, react"):
        load_config(tmp_path)
