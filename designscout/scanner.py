"""File discovery for token sources and component libraries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

DEFAULT_COMPONENT_EXCLUDES = ("node_modules", ".git", "dist", "build")
# Dot-prefixed entries are skipped unless a caller opts in with explicit patterns.
HIDDEN_ENTRIES = (".*",)


@dataclass
class IgnoreRule:
    """A gitignore-style exclusion pattern."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    """Parse one pattern; ``dir/`` matches directories only, ``/x`` is anchored."""
    pattern = pattern.strip()
    # Glob users write ``**/node_modules/**``; the walk only needs the segment.
    while pattern.startswith("**/"):
        pattern = pattern[3:]
    while pattern.endswith("/**"):
        pattern = pattern[:-3]
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def build_ignore_rules(patterns: Iterable[str]) -> List[IgnoreRule]:
    rules: List[IgnoreRule] = []
    for pattern in patterns:
        rule = build_ignore_rule(pattern)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def _iter_files(root: Path, rules: Sequence[IgnoreRule], depth: Optional[int]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""
        nesting = rel_dir.count("/") + 1 if rel_dir else 0

        if depth is not None and nesting >= depth:
            dirnames[:] = []
        else:
            kept = []
            for name in dirnames:
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if not _should_ignore(rel_path, True, rules):
                    kept.append(name)
            dirnames[:] = kept

        for filename in filenames:
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield current_dir / filename


def resolve_root(root: str | Path) -> Path:
    """Return ``root`` as an existing directory or raise."""
    root_path = Path(root).expanduser()
    if not root_path.exists():
        raise FileNotFoundError(f"Source path not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Source path is not a directory: {root}")
    return root_path


def discover_files(
    root: str | Path,
    extensions: Sequence[str],
    *,
    exclude_patterns: Optional[Sequence[str]] = None,
    depth: Optional[int] = None,
) -> List[Path]:
    """List files below ``root`` grouped by extension, in ``extensions`` order.

    Files within one extension are sorted by their path relative to ``root``.
    ``depth`` limits how many directory levels below ``root`` are descended
    (``0`` means the root directory only).
    """
    root_path = resolve_root(root)
    patterns = HIDDEN_ENTRIES if exclude_patterns is None else exclude_patterns
    rules = build_ignore_rules(patterns)
    found = list(_iter_files(root_path, rules, depth))

    ordered: List[Path] = []
    seen_extensions = set()
    for extension in extensions:
        ext = "." + extension.lower().lstrip(".")
        if ext in seen_extensions:
            continue
        seen_extensions.add(ext)
        matches = [path for path in found if path.suffix.lower() == ext]
        matches.sort(key=lambda path: path.relative_to(root_path).as_posix())
        ordered.extend(matches)
    return ordered


__all__ = [
    "DEFAULT_COMPONENT_EXCLUDES",
    "HIDDEN_ENTRIES",
    "IgnoreRule",
    "build_ignore_rule",
    "build_ignore_rules",
    "discover_files",
    "resolve_root",
]
