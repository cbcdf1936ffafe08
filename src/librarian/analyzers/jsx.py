# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Heuristic analyzer for JavaScript/TypeScript component snippets."""

import logging
import re

from librarian.model import (
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    Category,
    ComponentRecord,
    default_record,
)

logger = logging.getLogger(__name__)

DEFAULT_FRAMEWORK_PACKAGE = "react"

_EXPORT_DEFAULT_FUNCTION = re.compile(r"export\s+default\s+function\s+(\w+)")
_CONST_COMPONENT = re.compile(r"const\s+(\w+)\s*=\s*(\(|props|{)")
_STATEMENT_BREAK = re.compile(r"[;\n]")
_IMPORT_KEYWORD = re.compile(r"\bimport\s")
_FROM_MODULE = re.compile(r"""\sfrom\s+['"]([^'"\n]*)['"]""")
_DOC_OPEN = "/**"
_DOC_CLOSE = "*/"
# JSDoc tag word; scoped package names such as @scope/pkg are prose.
_ANNOTATION_TAG = re.compile(r"(?:^|\s)@[A-Za-z]+(?=[\s{]|$)")

# Checked in order; the first group with a matching keyword wins.
_CATEGORY_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.MOLECULE, ("card", "modal", "nav")),
    (Category.ORGANISM, ("page", "layout", "dashboard")),
    (Category.LOGIC, ("provider", "context")),
)


class JsxAnalyzer:
    """Extract component metadata from pasted component source."""

    def __init__(self, framework_package: str = DEFAULT_FRAMEWORK_PACKAGE) -> None:
        """Initialize analyzer.

        Args:
            framework_package: UI framework package excluded from dependencies.
        """
        self._framework_package = framework_package

    def analyze(self, snippet: str) -> ComponentRecord:
        """Analyze a snippet and build a best-effort record.

        Args:
            snippet: Raw pasted source text.

        Returns:
            Extracted record; unresolved fields keep their fallback values.
        """
        if not isinstance(snippet, str):
            logger.warning(
                f"Snippet is not text; returning default record (type={type(snippet).__name__})"
            )
            return default_record()

        name = resolve_name(snippet)
        dependencies = resolve_dependencies(
            snippet, framework_package=self._framework_package
        )
        description = resolve_description(snippet)
        category = infer_category(name)
        if name is None:
            logger.debug(f"Name unresolved; using fallback (fallback={DEFAULT_NAME})")
        if description is None:
            logger.debug("Description unresolved; using fallback")
        return ComponentRecord(
            name=name or DEFAULT_NAME,
            category=category,
            dependencies=", ".join(dependencies),
            description=description or DEFAULT_DESCRIPTION,
        )


def analyze(snippet: str) -> ComponentRecord:
    """Analyze a snippet with the default framework settings."""
    return JsxAnalyzer().analyze(snippet)


def resolve_name(snippet: str) -> str | None:
    """Resolve the component name.

    A default-exported named function takes precedence over a ``const``
    binding initialized with a parameter list, ``props`` or an object.
    """
    match = _EXPORT_DEFAULT_FUNCTION.search(snippet) or _CONST_COMPONENT.search(
        snippet
    )
    if match is None:
        return None
    return match.group(1)


def resolve_dependencies(
    snippet: str, framework_package: str = DEFAULT_FRAMEWORK_PACKAGE
) -> list[str]:
    """Collect root package names from ``import ... from`` statements.

    Relative imports and the framework package itself are skipped. Each
    module is reduced to the segment before its first ``/``.

    Args:
        snippet: Raw source text.
        framework_package: Package name excluded from the result.

    Returns:
        Unique root package names in first-seen order.
    """
    packages: dict[str, None] = {}
    for statement in _STATEMENT_BREAK.split(snippet):
        keyword = _IMPORT_KEYWORD.search(statement)
        if keyword is None:
            continue
        match = _FROM_MODULE.search(statement, keyword.end())
        if match is None:
            continue
        module = match.group(1)
        if not module or module.startswith(".") or module == framework_package:
            continue
        packages.setdefault(module.split("/")[0], None)
    return list(packages)


def resolve_description(snippet: str) -> str | None:
    """Extract prose from the first ``/** ... */`` documentation comment.

    Lines are stripped of leading asterisks. Lines starting with ``@`` are
    dropped and annotation tags such as ``@param`` end the prose on their
    line.

    Args:
        snippet: Raw source text.

    Returns:
        Single-line description, or ``None`` when no prose was found.
    """
    start = snippet.find(_DOC_OPEN)
    if start == -1:
        return None
    end = snippet.find(_DOC_CLOSE, start + len(_DOC_OPEN))
    if end == -1:
        return None

    parts: list[str] = []
    for line in snippet[start + len(_DOC_OPEN) : end].splitlines():
        text = line.strip().lstrip("*").strip()
        if text.startswith("@"):
            continue
        tag = _ANNOTATION_TAG.search(text)
        if tag is not None:
            text = text[: tag.start()].strip()
        if text:
            parts.append(text)
    return " ".join(parts) or None


def infer_category(name: str | None) -> Category:
    """Guess a category from keywords in the component name."""
    if not name:
        return Category.ATOM
    lowered = name.lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.ATOM
