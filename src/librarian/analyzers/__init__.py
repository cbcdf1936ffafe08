# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Analyzer package for component snippets."""

from librarian.analyzers.jsx import JsxAnalyzer, analyze

__all__ = ["JsxAnalyzer", "analyze"]
