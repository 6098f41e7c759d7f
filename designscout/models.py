"""Core data models shared across designscout components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

TOKEN_TYPES = ("color", "spacing", "typography", "shadow", "border", "size")


@dataclass
class DesignToken:
    """A named, typed design value extracted from a source file."""

    name: str
    value: Any
    type: str
    category: str
    source: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "type": self.type,
            "category": self.category,
        }
        if self.description is not None:
            data["description"] = self.description
        data["source"] = self.source
        return data


@dataclass
class TokenMetadata:
    """Bookkeeping for a single extraction run."""

    source_files: List[str]
    extracted_at: str
    total_tokens: int
    categories: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceFiles": list(self.source_files),
            "extractedAt": self.extracted_at,
            "totalTokens": self.total_tokens,
            "categories": list(self.categories),
        }


@dataclass
class ValidationReport:
    """Health summary attached to an extraction result."""

    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }


@dataclass
class TokenExtractionResult:
    """Aggregated tokens keyed by name plus run metadata and validation."""

    tokens: Dict[str, DesignToken]
    metadata: TokenMetadata
    validation: ValidationReport

    def tokens_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: token.to_dict() for name, token in self.tokens.items()}

    def to_dict(self, *, include_metadata: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tokens": self.tokens_dict()}
        if include_metadata:
            data["metadata"] = self.metadata.to_dict()
        data["validation"] = self.validation.to_dict()
        return data


@dataclass
class ComponentProp:
    """A prop declared by a component."""

    name: str
    type: str
    required: bool
    default_value: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "type": self.type, "required": self.required}
        if self.default_value is not None:
            data["defaultValue"] = self.default_value
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass
class ComponentStyle:
    """Declarations found in one style block attached to a component."""

    selector: str
    properties: Dict[str, str] = field(default_factory=dict)
    responsive: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "selector": self.selector,
            "properties": dict(self.properties),
            "responsive": self.responsive,
        }


@dataclass
class ComponentUsage:
    """Derived complexity, reusability and pattern assessment."""

    complexity: str
    reusability: str
    design_patterns: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "complexity": self.complexity,
            "reusability": self.reusability,
            "designPatterns": list(self.design_patterns),
            "recommendations": list(self.recommendations),
        }


@dataclass
class ComponentInfo:
    """A single UI component detected in one source file."""

    name: str
    file_path: str
    framework: str
    props: List[ComponentProp]
    styles: List[ComponentStyle]
    usage: ComponentUsage
    variants: List[Dict[str, Any]] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "filePath": self.file_path,
            "framework": self.framework,
            "props": [prop.to_dict() for prop in self.props],
            "styles": [style.to_dict() for style in self.styles],
            "variants": list(self.variants),
            "dependencies": list(self.dependencies),
            "usage": self.usage.to_dict(),
        }


@dataclass
class LibraryPatterns:
    """Cross-component patterns observed in a library."""

    design_patterns: List[str] = field(default_factory=list)
    common_props: List[str] = field(default_factory=list)
    style_patterns: List[str] = field(default_factory=list)
    naming_conventions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "designPatterns": list(self.design_patterns),
            "commonProps": list(self.common_props),
            "stylePatterns": list(self.style_patterns),
            "namingConventions": list(self.naming_conventions),
        }


@dataclass
class DependencyBuckets:
    """External import identifiers grouped by purpose."""

    framework: List[str] = field(default_factory=list)
    styling: List[str] = field(default_factory=list)
    utility: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "framework": list(self.framework),
            "styling": list(self.styling),
            "utility": list(self.utility),
        }


@dataclass
class LibrarySuggestions:
    """Population-level advice for a component library."""

    optimization: List[str] = field(default_factory=list)
    consistency: List[str] = field(default_factory=list)
    accessibility: List[str] = field(default_factory=list)
    performance: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "optimization": list(self.optimization),
            "consistency": list(self.consistency),
            "accessibility": list(self.accessibility),
            "performance": list(self.performance),
        }


@dataclass
class LibraryMetadata:
    total_components: int
    analyzed_at: str
    framework: str
    source_directory: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalComponents": self.total_components,
            "analyzedAt": self.analyzed_at,
            "framework": self.framework,
            "sourceDirectory": self.source_directory,
        }


@dataclass
class ComponentLibraryAnalysis:
    """Everything learned about a component library in one run."""

    components: List[ComponentInfo]
    patterns: LibraryPatterns
    dependencies: DependencyBuckets
    suggestions: LibrarySuggestions
    metadata: LibraryMetadata
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": [component.to_dict() for component in self.components],
            "patterns": self.patterns.to_dict(),
            "dependencies": self.dependencies.to_dict(),
            "suggestions": self.suggestions.to_dict(),
            "metadata": self.metadata.to_dict(),
            "errors": list(self.errors),
        }


@dataclass
class ContrastCheck:
    """Contrast ratio between two colors and whether it meets a target."""

    ratio: float
    compliant: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"ratio": self.ratio, "compliant": self.compliant}


@dataclass
class ThemeAccessibility:
    compliant: bool = True
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliant": self.compliant,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass
class ThemeResult:
    """Generated theme plus the color variations it was built from."""

    theme: Any
    colors: Dict[str, Any]
    scales: Dict[str, List[int]]
    accessibility: ThemeAccessibility
    examples: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "variations": {"colors": self.colors, "scales": self.scales},
            "accessibility": self.accessibility.to_dict(),
            "examples": list(self.examples),
        }


__all__ = [
    "TOKEN_TYPES",
    "ComponentInfo",
    "ComponentLibraryAnalysis",
    "ComponentProp",
    "ComponentStyle",
    "ComponentUsage",
    "ContrastCheck",
    "DependencyBuckets",
    "DesignToken",
    "LibraryMetadata",
    "LibraryPatterns",
    "LibrarySuggestions",
    "ThemeAccessibility",
    "ThemeResult",
    "TokenExtractionResult",
    "TokenMetadata",
    "ValidationReport",
]
