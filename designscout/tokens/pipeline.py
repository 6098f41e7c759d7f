"""Token extraction pipeline: discover sources, extract, normalize, aggregate."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from ..errors import InvalidInputError
from ..logging import get_logger
from ..models import DesignToken, TokenExtractionResult, TokenMetadata, ValidationReport
from ..scanner import discover_files
from .extractors import TokenFormat
from .naming import transform_name

DEFAULT_FORMATS = tuple(member.value for member in TokenFormat)


def _as_sources(source: str | Path | Sequence[str | Path] | None) -> List[str]:
    if source is None:
        return []
    if isinstance(source, (str, Path)):
        return [str(source)] if str(source) else []
    return [str(item) for item in source if str(item)]


def _extensions_for(formats: Sequence[str]) -> List[str]:
    extensions: List[str] = []
    for fmt in formats:
        member = TokenFormat.from_extension(fmt)
        if member is None:
            # Unknown formats still drive discovery; dispatch warns about them.
            extensions.append(fmt.lstrip("."))
            continue
        extensions.extend(member.extensions)
    return extensions


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class TokenExtractionPipeline:
    """Turns token source files into one aggregated, validated token set."""

    def __init__(self, *, log_level: int = logging.INFO, materialize_yaml: bool = True) -> None:
        self.materialize_yaml = materialize_yaml
        self.logger = get_logger("tokens", level=log_level)

    def run(
        self,
        source: str | Path | Sequence[str | Path],
        *,
        categories: Optional[Sequence[str]] = None,
        formats: Optional[Sequence[str]] = None,
        transform: Optional[str] = None,
        output: str | Path | None = None,
    ) -> TokenExtractionResult:
        sources = _as_sources(source)
        if not sources:
            raise InvalidInputError("source must name at least one file or directory")

        formats = list(formats) if formats else list(DEFAULT_FORMATS)
        wanted = set(categories or [])
        self.logger.info("Starting design token extraction for %s", ", ".join(sources))

        tokens: Dict[str, DesignToken] = {}
        source_files: List[str] = []
        warnings: List[str] = []
        errors: List[str] = []

        for item in sources:
            path = Path(item)
            try:
                path.stat()
                if path.is_dir():
                    files = discover_files(path, _extensions_for(formats))
                else:
                    files = [path]
            except OSError as exc:
                errors.append(f"Failed to process source {item}: {_describe(exc)}")
                self.logger.error("Failed to process source %s: %s", item, exc)
                continue

            self.logger.debug("Source %s expanded to %d file(s)", item, len(files))
            for file_path in files:
                source_files.append(str(file_path))
                extension = file_path.suffix.lstrip(".")
                fmt = TokenFormat.from_extension(extension)
                if fmt is None:
                    warnings.append(f"Unsupported file format: {extension} ({file_path})")
                    continue

                try:
                    extracted = fmt.extract(file_path, materialize_yaml=self.materialize_yaml)
                except (OSError, ValueError, TypeError, RecursionError, yaml.YAMLError) as exc:
                    # JSONDecodeError and UnicodeDecodeError are ValueErrors.
                    errors.append(f"Failed to extract tokens from {file_path}: {_describe(exc)}")
                    self.logger.error("Failed to extract tokens from %s: %s", file_path, exc)
                    continue

                self.logger.debug("Extracted %d token(s) from %s", len(extracted), file_path)
                for token in extracted:
                    if transform:
                        token.name = transform_name(token.name, transform)
                    if wanted and token.category not in wanted:
                        continue
                    tokens[token.name] = token

        result = TokenExtractionResult(
            tokens=tokens,
            metadata=TokenMetadata(
                source_files=source_files,
                extracted_at=_timestamp(),
                total_tokens=len(tokens),
                categories=list(dict.fromkeys(token.category for token in tokens.values())),
            ),
            validation=ValidationReport(warnings=warnings, errors=errors),
        )

        if output:
            written = write_result(result, output)
            self.logger.info("Design tokens written to %s", written)

        self.logger.info(
            "Design token extraction completed: %d tokens, %d categories, %d warnings, %d errors",
            result.metadata.total_tokens,
            len(result.metadata.categories),
            len(warnings),
            len(errors),
        )
        return result


def write_result(result: TokenExtractionResult, output: str | Path) -> Path:
    """Serialize ``result`` according to the output path's extension."""
    target = Path(output)
    target.parent.mkdir(parents=True, exist_ok=True)
    suffix = target.suffix.lower()

    if suffix == ".json":
        target.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    elif suffix in {".yaml", ".yml"}:
        target.write_text(
            yaml.safe_dump(result.to_dict(), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    elif suffix == ".js":
        content = (
            f"export const designTokens = {json.dumps(result.tokens_dict(), indent=2)};\n\n"
            f"export const metadata = {json.dumps(result.metadata.to_dict(), indent=2)};"
        )
        target.write_text(content, encoding="utf-8")
    else:
        target = target.with_suffix(".json")
        target.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    return target


def extract_design_tokens(
    source: str | Path | Sequence[str | Path],
    *,
    categories: Optional[Sequence[str]] = None,
    formats: Optional[Sequence[str]] = None,
    transform: Optional[str] = None,
    output: str | Path | None = None,
    log_level: int = logging.INFO,
    materialize_yaml: bool = True,
) -> TokenExtractionResult:
    """Functional wrapper around :class:`TokenExtractionPipeline`."""
    pipeline = TokenExtractionPipeline(log_level=log_level, materialize_yaml=materialize_yaml)
    return pipeline.run(
        source,
        categories=categories,
        formats=formats,
        transform=transform,
        output=output,
    )


__all__ = [
    "DEFAULT_FORMATS",
    "TokenExtractionPipeline",
    "extract_design_tokens",
    "write_result",
]
