"""Component library analysis: framework detection, props, styles and scoring."""

from .dependencies import bucket_dependencies, collect_dependencies
from .detector import Framework, detect_framework
from .pipeline import (
    COMPONENT_EXTENSIONS,
    ComponentLibraryPipeline,
    analyze_component_library,
    is_component_file,
)
from .props import (
    extract_angular_props,
    extract_react_props,
    extract_svelte_props,
    extract_vue_props,
)
from .styles import extract_component_styles
from .usage import analyze_usage

__all__ = [
    "COMPONENT_EXTENSIONS",
    "ComponentLibraryPipeline",
    "Framework",
    "analyze_component_library",
    "analyze_usage",
    "bucket_dependencies",
    "collect_dependencies",
    "detect_framework",
    "extract_angular_props",
    "extract_component_styles",
    "extract_react_props",
    "extract_svelte_props",
    "extract_vue_props",
    "is_component_file",
]
