"""designscout: design token and component metadata extraction."""

from .components import analyze_component_library
from .errors import DesignScoutError, InvalidInputError, OperationNotFoundError
from .operations import invoke, list_operations
from .theme import check_accessibility, generate_color_scale, generate_theme
from .tokens import extract_design_tokens

__version__ = "0.1.0"

__all__ = [
    "DesignScoutError",
    "InvalidInputError",
    "OperationNotFoundError",
    "analyze_component_library",
    "check_accessibility",
    "extract_design_tokens",
    "generate_color_scale",
    "generate_theme",
    "invoke",
    "list_operations",
]
