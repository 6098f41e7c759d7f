"""CLI entrypoints for designscout commands."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .config import ConfigError, load_config
from .errors import DesignScoutError
from .logging import configure_logging
from .operations import invoke, list_operations


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designscout",
        description="Extract design tokens and component metadata from front-end sources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .designscout.yml or the directory holding it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Extract design tokens from CSS, SCSS, JSON and YAML sources.",
    )
    _add_verbose_option(tokens_parser, suppress_default=True)
    tokens_parser.add_argument("source", nargs="+", help="Token files or directories.")
    tokens_parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=["css", "scss", "json", "yaml"],
        help="Restrict discovery to a format (repeatable).",
    )
    tokens_parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        help="Only keep tokens in this category (repeatable).",
    )
    tokens_parser.add_argument(
        "--transform",
        choices=["kebab-case", "camelCase", "snake_case"],
        help="Rewrite token names to the given case.",
    )
    tokens_parser.add_argument("--output", help="Also write the result to this file.")
    tokens_parser.add_argument(
        "--no-metadata",
        action="store_true",
        help="Omit run metadata from the printed result.",
    )
    tokens_parser.add_argument(
        "--no-materialize-yaml",
        action="store_true",
        help="Do not write parsed YAML sources back to disk as .json.",
    )

    components_parser = subparsers.add_parser(
        "components",
        help="Analyze a component library directory.",
    )
    _add_verbose_option(components_parser, suppress_default=True)
    components_parser.add_argument("source", help="Component library directory.")
    components_parser.add_argument(
        "--framework",
        choices=["auto", "react", "vue", "angular", "svelte"],
        help="Force a framework instead of detecting one per file.",
    )
    components_parser.add_argument(
        "--no-styles",
        action="store_true",
        help="Skip style extraction.",
    )
    components_parser.add_argument(
        "--exclude",
        dest="exclude_patterns",
        action="append",
        help="Exclude paths matching this pattern (repeatable; replaces the defaults).",
    )
    components_parser.add_argument("--depth", type=int, help="Maximum directory depth to scan.")

    theme_parser = subparsers.add_parser(
        "theme",
        help="Generate a theme from base colors.",
    )
    _add_verbose_option(theme_parser, suppress_default=True)
    theme_parser.add_argument("colors", nargs="+", help="Base colors (hex, rgb() or hsl()).")
    theme_parser.add_argument(
        "--mode",
        dest="modes",
        action="append",
        choices=["light", "dark", "high-contrast"],
        help="Theme mode to include (repeatable).",
    )
    theme_parser.add_argument(
        "--format",
        choices=["tailwind", "styled-components", "material-ui", "css-variables", "json"],
        help="Output format for the theme.",
    )
    theme_parser.add_argument("--contrast-ratio", type=float, help="Minimum contrast ratio.")
    theme_parser.add_argument(
        "--no-accessibility",
        action="store_true",
        help="Skip contrast checks.",
    )
    theme_parser.add_argument(
        "--no-semantic",
        action="store_true",
        help="Do not add semantic colors.",
    )

    operations_parser = subparsers.add_parser(
        "operations",
        help="List registered operations, or invoke one with JSON arguments.",
    )
    _add_verbose_option(operations_parser, suppress_default=True)
    operations_parser.add_argument("name", nargs="?", help="Operation to invoke.")
    operations_parser.add_argument(
        "--args",
        default="{}",
        help="JSON object with the operation arguments.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service (requires the 'service' extra).",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def _operation_call(args: argparse.Namespace) -> tuple[str, Dict[str, Any]]:
    if args.command == "tokens":
        payload: Dict[str, Any] = {
            "source": args.source,
            "includeMetadata": not args.no_metadata,
        }
        if args.formats:
            payload["formats"] = args.formats
        if args.categories:
            payload["categories"] = args.categories
        if args.transform:
            payload["transform"] = args.transform
        if args.output:
            payload["output"] = args.output
        if args.no_materialize_yaml:
            payload["materializeYaml"] = False
        return "extractDesignTokens", payload

    if args.command == "components":
        payload = {"source": args.source}
        if args.framework:
            payload["framework"] = args.framework
        if args.no_styles:
            payload["includeStyles"] = False
        if args.exclude_patterns:
            payload["excludePatterns"] = args.exclude_patterns
        if args.depth is not None:
            payload["depth"] = args.depth
        return "analyzeComponentLibrary", payload

    if args.command == "theme":
        payload = {
            "baseColors": args.colors,
            "accessibility": not args.no_accessibility,
            "includeSemanticColors": not args.no_semantic,
        }
        if args.modes:
            payload["modes"] = args.modes
        if args.format:
            payload["format"] = args.format
        if args.contrast_ratio is not None:
            payload["contrastRatio"] = args.contrast_ratio
        return "generateTheme", payload

    try:
        payload = json.loads(args.args)
    except json.JSONDecodeError as exc:
        raise DesignScoutError(f"--args is not valid JSON: {exc}") from exc
    return args.name, payload


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for designscout commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    verbose = bool(args.verbose)
    configure_logging(verbose=verbose)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
        return

    if args.command == "operations" and not args.name:
        print(json.dumps(list_operations(), indent=2))
        return

    log_level = logging.DEBUG if verbose else config.log_level
    try:
        name, payload = _operation_call(args)
        result = invoke(name, payload, config=config, log_level=log_level)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except DesignScoutError as exc:
        parser.exit(1, f"designscout {args.command} failed: {exc}\n")
    except Exception as exc:  # pragma: no cover - unexpected failure
        parser.exit(
            1, f"designscout {args.command} failed: {exc}\nRun with --verbose for more details.\n"
        )

    print(json.dumps(result, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
