"""Design token extraction: format extractors, classifiers and the pipeline."""

from .classifier import infer_category, infer_type
from .extractors import (
    TokenFormat,
    extract_from_css,
    extract_from_json,
    extract_from_mapping,
    extract_from_scss,
    extract_from_yaml,
)
from .naming import NAME_TRANSFORMS, transform_name
from .pipeline import DEFAULT_FORMATS, TokenExtractionPipeline, extract_design_tokens, write_result

__all__ = [
    "DEFAULT_FORMATS",
    "NAME_TRANSFORMS",
    "TokenExtractionPipeline",
    "TokenFormat",
    "extract_design_tokens",
    "extract_from_css",
    "extract_from_json",
    "extract_from_mapping",
    "extract_from_scss",
    "extract_from_yaml",
    "infer_category",
    "infer_type",
    "transform_name",
    "write_result",
]
