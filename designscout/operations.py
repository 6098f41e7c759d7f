"""Operation registry with a pydantic validation gate.

Every externally reachable operation is registered here under its public
camelCase name. ``invoke`` validates the raw argument mapping against the
operation's request model (camelCase aliases and snake_case names are both
accepted), fills unspecified options from ``.designscout.yml`` and returns a
JSON-ready dict.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .components import analyze_component_library
from .config import DesignScoutConfig
from .errors import InvalidInputError, OperationNotFoundError
from .logging import get_logger
from .theme import check_accessibility, generate_color_scale, generate_theme
from .tokens import extract_design_tokens

TokenFormatName = Literal["css", "scss", "json", "yaml"]
TransformName = Literal["kebab-case", "camelCase", "snake_case"]
FrameworkName = Literal["auto", "react", "vue", "angular", "svelte"]
ThemeFormatName = Literal["tailwind", "styled-components", "material-ui", "css-variables", "json"]
ThemeMode = Literal["light", "dark", "high-contrast"]


class OperationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ExtractDesignTokensRequest(OperationRequest):
    """Arguments for ``extractDesignTokens``."""

    source: Union[str, List[str]] = Field(
        ..., description="Source file path or directory, or array of paths"
    )
    categories: Optional[List[str]] = Field(
        default=None, description="Only keep tokens in these categories"
    )
    formats: Optional[List[TokenFormatName]] = Field(
        default=None, description="File formats to process"
    )
    output: Optional[str] = Field(default=None, description="Output file path for extracted tokens")
    transform: Optional[TransformName] = Field(
        default=None, description="Transform token names to the given case"
    )
    include_metadata: bool = Field(
        default=True, alias="includeMetadata", description="Include run metadata in the result"
    )
    materialize_yaml: Optional[bool] = Field(
        default=None,
        alias="materializeYaml",
        description="Write parsed YAML sources next to the original as .json",
    )

    @field_validator("source")
    @classmethod
    def _source_not_empty(cls, value: Union[str, List[str]]) -> Union[str, List[str]]:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("source must not be empty")
        elif not value or not all(item.strip() for item in value):
            raise ValueError("source must list at least one non-empty path")
        return value


class AnalyzeComponentLibraryRequest(OperationRequest):
    """Arguments for ``analyzeComponentLibrary``."""

    source: str = Field(..., min_length=1, description="Path to component library directory")
    framework: Optional[FrameworkName] = Field(
        default=None, description="Target framework (auto-detect if not specified)"
    )
    include_styles: Optional[bool] = Field(
        default=None, alias="includeStyles", description="Include style analysis in the results"
    )
    exclude_patterns: Optional[List[str]] = Field(
        default=None, alias="excludePatterns", description="Patterns to exclude from analysis"
    )
    depth: Optional[int] = Field(default=None, ge=0, description="Directory scanning depth")


class GenerateThemeRequest(OperationRequest):
    """Arguments for ``generateTheme``."""

    base_colors: List[str] = Field(
        ...,
        alias="baseColors",
        min_length=1,
        description="Base colors in hex, rgb, or hsl format",
    )
    modes: List[ThemeMode] = Field(default_factory=lambda: ["light"], description="Theme modes")
    format: Optional[ThemeFormatName] = Field(default=None, description="Output format for the theme")
    accessibility: bool = Field(default=True, description="Enable contrast checking")
    include_semantic_colors: bool = Field(
        default=True,
        alias="includeSemanticColors",
        description="Include semantic colors (success, warning, error, info)",
    )
    contrast_ratio: Optional[float] = Field(
        default=None,
        alias="contrastRatio",
        ge=1,
        le=21,
        description="Minimum contrast ratio (WCAG AA: 4.5, AAA: 7)",
    )


class GenerateColorScaleRequest(OperationRequest):
    """Arguments for ``generateColorScale``."""

    base_color: str = Field(..., alias="baseColor", min_length=1, description="Base color")
    steps: int = Field(default=10, ge=1, le=100, description="Number of shades to generate")


class CheckAccessibilityRequest(OperationRequest):
    """Arguments for ``checkAccessibility``."""

    foreground: str = Field(..., min_length=1, description="Foreground color")
    background: str = Field(..., min_length=1, description="Background color")
    target_ratio: float = Field(
        default=4.5, alias="targetRatio", ge=1, le=21, description="Required contrast ratio"
    )


Handler = Callable[[Any, DesignScoutConfig, int], Dict[str, Any]]


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    request_model: Type[OperationRequest]
    handler: Handler

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.request_model.model_json_schema(by_alias=True),
        }


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def _extract_design_tokens(
    request: ExtractDesignTokensRequest, config: DesignScoutConfig, log_level: int
) -> Dict[str, Any]:
    result = extract_design_tokens(
        request.source,
        categories=request.categories or config.tokens.categories or None,
        formats=request.formats or config.tokens.formats,
        transform=_pick(request.transform, config.tokens.transform),
        output=request.output,
        log_level=log_level,
        materialize_yaml=_pick(request.materialize_yaml, config.tokens.materialize_yaml),
    )
    return result.to_dict(include_metadata=request.include_metadata)


def _analyze_component_library(
    request: AnalyzeComponentLibraryRequest, config: DesignScoutConfig, log_level: int
) -> Dict[str, Any]:
    analysis = analyze_component_library(
        request.source,
        framework=_pick(request.framework, config.components.framework),
        include_styles=_pick(request.include_styles, config.components.include_styles),
        exclude_patterns=_pick(request.exclude_patterns, config.components.exclude_patterns),
        depth=_pick(request.depth, config.components.depth),
        log_level=log_level,
    )
    return analysis.to_dict()


def _generate_theme(
    request: GenerateThemeRequest, config: DesignScoutConfig, log_level: int
) -> Dict[str, Any]:
    result = generate_theme(
        request.base_colors,
        modes=request.modes,
        format=_pick(request.format, config.theme.format),
        accessibility=request.accessibility,
        include_semantic_colors=request.include_semantic_colors,
        contrast_ratio=_pick(request.contrast_ratio, config.theme.contrast_ratio),
        log_level=log_level,
    )
    return result.to_dict()


def _generate_color_scale(
    request: GenerateColorScaleRequest, config: DesignScoutConfig, log_level: int
) -> Dict[str, Any]:
    logger = get_logger("theme", level=log_level)
    return {
        "baseColor": request.base_color,
        "scale": generate_color_scale(request.base_color, request.steps, logger=logger),
    }


def _check_accessibility(
    request: CheckAccessibilityRequest, config: DesignScoutConfig, log_level: int
) -> Dict[str, Any]:
    return check_accessibility(
        request.foreground, request.background, request.target_ratio
    ).to_dict()


OPERATIONS: Dict[str, Operation] = {
    operation.name: operation
    for operation in (
        Operation(
            name="extractDesignTokens",
            description="Extract design tokens from CSS, SCSS, JSON, and YAML files",
            request_model=ExtractDesignTokensRequest,
            handler=_extract_design_tokens,
        ),
        Operation(
            name="analyzeComponentLibrary",
            description="Analyze component library structure, props, styles, and patterns",
            request_model=AnalyzeComponentLibraryRequest,
            handler=_analyze_component_library,
        ),
        Operation(
            name="generateTheme",
            description="Generate comprehensive theme configuration from base colors",
            request_model=GenerateThemeRequest,
            handler=_generate_theme,
        ),
        Operation(
            name="generateColorScale",
            description="Generate a lightness scale for a single base color",
            request_model=GenerateColorScaleRequest,
            handler=_generate_color_scale,
        ),
        Operation(
            name="checkAccessibility",
            description="Check the WCAG contrast ratio between two colors",
            request_model=CheckAccessibilityRequest,
            handler=_check_accessibility,
        ),
    )
}


def list_operations() -> List[Dict[str, Any]]:
    """Describe every registered operation, including its JSON input schema."""
    return [operation.describe() for operation in OPERATIONS.values()]


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise OperationNotFoundError(name, list(OPERATIONS)) from None


def _format_errors(exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")
    return messages


def validate_arguments(operation: Operation, args: Optional[Mapping[str, Any]]) -> OperationRequest:
    """Validate ``args`` against the operation's request model."""
    if args is not None and not isinstance(args, Mapping):
        raise InvalidInputError(f"Arguments for {operation.name} must be an object")
    try:
        return operation.request_model.model_validate(dict(args or {}))
    except ValidationError as exc:
        errors = _format_errors(exc)
        raise InvalidInputError(
            f"Invalid arguments for {operation.name}: {'; '.join(errors)}", errors=errors
        ) from exc


def invoke(
    name: str,
    args: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[DesignScoutConfig] = None,
    log_level: Optional[int] = None,
) -> Dict[str, Any]:
    """Validate ``args`` and run the named operation."""
    operation = get_operation(name)
    request = validate_arguments(operation, args)
    effective = config or DesignScoutConfig(root=Path.cwd())
    level = effective.log_level if log_level is None else log_level
    return operation.handler(request, effective, level)


__all__ = [
    "AnalyzeComponentLibraryRequest",
    "CheckAccessibilityRequest",
    "ExtractDesignTokensRequest",
    "GenerateColorScaleRequest",
    "GenerateThemeRequest",
    "OPERATIONS",
    "Operation",
    "OperationRequest",
    "get_operation",
    "invoke",
    "list_operations",
    "validate_arguments",
]
