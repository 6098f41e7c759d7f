"""Component library pipeline: discover, extract, score and aggregate."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..errors import InvalidInputError
from ..logging import get_logger
from ..models import (
    ComponentInfo,
    ComponentLibraryAnalysis,
    LibraryMetadata,
    LibraryPatterns,
    LibrarySuggestions,
)
from ..scanner import DEFAULT_COMPONENT_EXCLUDES, discover_files
from .dependencies import bucket_dependencies, collect_dependencies
from .detector import Framework, detect_framework
from .styles import extract_component_styles
from .usage import analyze_usage

COMPONENT_EXTENSIONS = ("tsx", "jsx", "vue", "svelte", "ts", "js")
DEFAULT_DEPTH = 10

SUGGEST_SPLIT = "Consider breaking down complex components into smaller, composable pieces"
SUGGEST_THEME = "Some components have many styles - consider extracting common styles to a theme"
SUGGEST_COMMON_PROPS = "Consider establishing common prop patterns across components"
SUGGEST_PATTERNS = "Establish consistent design patterns across your component library"
SUGGEST_ARIA = "Many components lack accessibility props - consider adding ARIA attributes"
SUGGEST_PROP_GROUPING = (
    "Components with many props might benefit from prop grouping or default prop objects"
)

_NAMING_STYLES = (
    ("PascalCase", re.compile(r"^[A-Z][A-Za-z0-9]*$")),
    ("camelCase", re.compile(r"^[a-z][a-z0-9]*[A-Z][A-Za-z0-9]*$")),
    ("kebab-case", re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)+$")),
    ("snake_case", re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)+$")),
)


def is_component_file(path: Path) -> bool:
    """Heuristic for files that hold a UI component."""
    stem = path.stem
    if stem[:1].isupper():
        return True
    if "component" in stem or "Component" in stem:
        return True
    return "/components/" in "/" + path.as_posix()


def _resolve_framework(framework: str | Framework | None) -> Optional[Framework]:
    if framework is None or framework == "auto":
        return None
    try:
        return Framework(framework)
    except ValueError as exc:
        raise InvalidInputError(f"Unsupported framework: {framework}") from exc


def _naming_style(name: str) -> Optional[str]:
    for label, pattern in _NAMING_STYLES:
        if pattern.match(name):
            return label
    return None


class ComponentLibraryPipeline:
    """Analyzes every component file below a directory."""

    def __init__(self, *, log_level: int = logging.INFO) -> None:
        self.logger = get_logger("components", level=log_level)

    def run(
        self,
        source: str | Path,
        *,
        framework: str | Framework | None = "auto",
        include_styles: bool = True,
        exclude_patterns: Optional[Sequence[str]] = None,
        depth: Optional[int] = DEFAULT_DEPTH,
    ) -> ComponentLibraryAnalysis:
        if not source or not str(source).strip():
            raise InvalidInputError("source must name a component directory")

        override = _resolve_framework(framework)
        excludes = DEFAULT_COMPONENT_EXCLUDES if exclude_patterns is None else exclude_patterns
        self.logger.info("Starting component library analysis for %s", source)

        files = [
            path
            for path in discover_files(
                source, COMPONENT_EXTENSIONS, exclude_patterns=excludes, depth=depth
            )
            if is_component_file(path)
        ]
        self.logger.debug("Found %d candidate component file(s)", len(files))

        components: List[ComponentInfo] = []
        detected: List[str] = []
        modules: List[str] = []
        errors: List[str] = []

        for path in files:
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                errors.append(f"Failed to analyze component {path}: {exc}")
                self.logger.error("Failed to analyze component %s: %s", path, exc)
                continue

            kind = override or detect_framework(path, content)
            if kind is Framework.UNKNOWN:
                self.logger.debug("Skipping %s: no framework detected", path)
                continue
            if kind.value not in detected:
                detected.append(kind.value)

            props = kind.extract_props(content)
            styles = extract_component_styles(content, kind) if include_styles else []
            for module in collect_dependencies(content):
                if module not in modules:
                    modules.append(module)

            components.append(
                ComponentInfo(
                    name=path.stem,
                    file_path=str(path),
                    framework=kind.value,
                    props=props,
                    styles=styles,
                    usage=analyze_usage(props, styles),
                )
            )

        patterns = _library_patterns(components)
        analysis = ComponentLibraryAnalysis(
            components=components,
            patterns=patterns,
            dependencies=bucket_dependencies(modules),
            suggestions=_library_suggestions(components, patterns),
            metadata=LibraryMetadata(
                total_components=len(components),
                analyzed_at=datetime.now(UTC).isoformat().replace("+00:00", "Z"),
                framework=", ".join(detected) if override is None else override.value,
                source_directory=str(source),
            ),
            errors=errors,
        )

        self.logger.info(
            "Component library analysis completed: %d components, frameworks [%s], %d patterns",
            len(components),
            ", ".join(detected),
            len(patterns.design_patterns),
        )
        return analysis


def _library_patterns(components: Sequence[ComponentInfo]) -> LibraryPatterns:
    prop_counts: Dict[str, int] = {}
    for component in components:
        for name in dict.fromkeys(prop.name for prop in component.props):
            prop_counts[name] = prop_counts.get(name, 0) + 1
    threshold = max(2, len(components) * 0.3)
    common_props = [name for name, count in prop_counts.items() if count >= threshold]

    design_patterns: List[str] = []
    for component in components:
        for tag in component.usage.design_patterns:
            if tag not in design_patterns:
                design_patterns.append(tag)

    styled = [component for component in components if component.styles]
    style_patterns: List[str] = []
    if any(style.responsive for component in styled for style in component.styles):
        style_patterns.append("responsive")
    if any(
        "var(--" in value
        for component in styled
        for style in component.styles
        for value in style.properties.values()
    ):
        style_patterns.append("css-variables")
    if any(component.framework != Framework.VUE.value for component in styled):
        style_patterns.append("styled-components")
    if any(component.framework == Framework.VUE.value for component in styled):
        style_patterns.append("scoped-styles")

    naming: List[str] = []
    for component in components:
        label = _naming_style(component.name)
        if label and label not in naming:
            naming.append(label)

    return LibraryPatterns(
        design_patterns=design_patterns,
        common_props=common_props,
        style_patterns=style_patterns,
        naming_conventions=naming,
    )


def _library_suggestions(
    components: Sequence[ComponentInfo], patterns: LibraryPatterns
) -> LibrarySuggestions:
    suggestions = LibrarySuggestions()

    if any(component.usage.complexity == "complex" for component in components):
        suggestions.optimization.append(SUGGEST_SPLIT)
    if any(len(component.styles) > 5 for component in components):
        suggestions.optimization.append(SUGGEST_THEME)

    if len(patterns.common_props) < 3:
        suggestions.consistency.append(SUGGEST_COMMON_PROPS)
    if len(patterns.design_patterns) < 2:
        suggestions.consistency.append(SUGGEST_PATTERNS)

    lacking_aria = [
        component
        for component in components
        if not any("aria" in prop.name or "role" in prop.name for prop in component.props)
    ]
    if len(lacking_aria) > len(components) * 0.8:
        suggestions.accessibility.append(SUGGEST_ARIA)

    if any(len(component.props) > 10 for component in components):
        suggestions.performance.append(SUGGEST_PROP_GROUPING)

    return suggestions


def analyze_component_library(
    source: str | Path,
    *,
    framework: str | Framework | None = "auto",
    include_styles: bool = True,
    exclude_patterns: Optional[Sequence[str]] = None,
    depth: Optional[int] = DEFAULT_DEPTH,
    log_level: int = logging.INFO,
) -> ComponentLibraryAnalysis:
    """Functional wrapper around :class:`ComponentLibraryPipeline`."""
    return ComponentLibraryPipeline(log_level=log_level).run(
        source,
        framework=framework,
        include_styles=include_styles,
        exclude_patterns=exclude_patterns,
        depth=depth,
    )


__all__ = [
    "COMPONENT_EXTENSIONS",
    "ComponentLibraryPipeline",
    "DEFAULT_DEPTH",
    "analyze_component_library",
    "is_component_file",
]
