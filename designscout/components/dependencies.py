"""Import collection and dependency bucketing for component sources."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..models import DependencyBuckets

_IMPORT_FROM = re.compile(r"import[^;]+from\s+['\"]([^'\"]+)['\"]")

FRAMEWORK_MARKERS = ("react", "vue", "@angular", "svelte")
STYLING_MARKERS = ("styled-components", "@emotion", "sass", "less", "tailwind")


def collect_dependencies(content: str) -> List[str]:
    """Return external module specifiers imported by ``content``, first-seen order."""
    modules: List[str] = []
    for specifier in _IMPORT_FROM.findall(content):
        if specifier.startswith((".", "/")):
            continue
        if specifier not in modules:
            modules.append(specifier)
    return modules


def bucket_dependencies(modules: Iterable[str]) -> DependencyBuckets:
    """Group module specifiers by substring markers.

    A specifier can land in both ``framework`` and ``styling``; ``utility``
    holds the ones that matched neither.
    """
    buckets = DependencyBuckets()
    for module in dict.fromkeys(modules):
        is_framework = any(marker in module for marker in FRAMEWORK_MARKERS)
        is_styling = any(marker in module for marker in STYLING_MARKERS)
        if is_framework:
            buckets.framework.append(module)
        if is_styling:
            buckets.styling.append(module)
        if not is_framework and not is_styling:
            buckets.utility.append(module)
    return buckets


__all__ = [
    "FRAMEWORK_MARKERS",
    "STYLING_MARKERS",
    "bucket_dependencies",
    "collect_dependencies",
]
