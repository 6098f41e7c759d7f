"""Tests for file discovery and exclusion rules."""

from __future__ import annotations

import pytest

from designscout.scanner import build_ignore_rule, discover_files, resolve_root
from tests._fixtures.project_builder import ProjectBuilder


def _relative(builder: ProjectBuilder, paths) -> list[str]:
    return [path.relative_to(builder.path()).as_posix() for path in paths]


def test_files_grouped_by_extension_then_sorted(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "z.css": "",
            "b/a.css": "",
            "a.json": "",
            "notes.txt": "",
        }
    )

    found = discover_files(project_builder.path(), ["json", ".CSS"])

    assert _relative(project_builder, found) == ["a.json", "b/a.css", "z.css"]


def test_hidden_entries_skipped_by_default(project_builder: ProjectBuilder) -> None:
    project_builder.write({".cache/tokens.json": "", ".tokens.json": "", "tokens.json": ""})

    assert _relative(project_builder, discover_files(project_builder.path(), ["json"])) == [
        "tokens.json"
    ]
    assert _relative(
        project_builder, discover_files(project_builder.path(), ["json"], exclude_patterns=[])
    ) == [".cache/tokens.json", ".tokens.json", "tokens.json"]


def test_exclude_patterns(project_builder: ProjectBuilder) -> None:
    project_builder.write(
        {
            "node_modules/lib/Button.tsx": "",
            "src/Button.tsx": "",
            "src/stories/Button.stories.tsx": "",
            "dist/Button.tsx": "",
        }
    )

    found = discover_files(
        project_builder.path(),
        ["tsx"],
        exclude_patterns=["node_modules", "**/stories/**", "/dist/"],
    )

    assert _relative(project_builder, found) == ["src/Button.tsx"]


def test_depth_counts_directory_levels(project_builder: ProjectBuilder) -> None:
    project_builder.write({"a.css": "", "one/b.css": "", "one/two/c.css": ""})
    root = project_builder.path()

    assert _relative(project_builder, discover_files(root, ["css"], depth=0)) == ["a.css"]
    assert _relative(project_builder, discover_files(root, ["css"], depth=1)) == [
        "a.css",
        "one/b.css",
    ]


def test_build_ignore_rule_shapes() -> None:
    rule = build_ignore_rule("/build/")
    assert rule is not None
    assert (rule.pattern, rule.directory_only, rule.anchored) == ("build", True, True)
    assert rule.matches("build", True)
    assert not rule.matches("src/build", True)
    assert not rule.matches("build", False)

    assert build_ignore_rule("**/") is None
    assert build_ignore_rule("   ") is None


def test_resolve_root_errors(project_builder: ProjectBuilder) -> None:
    project_builder.write({"file.css": ""})

    with pytest.raises(FileNotFoundError, match="Source path not found"):
        resolve_root(project_builder.path("missing"))
    with pytest.raises(NotADirectoryError):
        resolve_root(project_builder.path("file.css"))
