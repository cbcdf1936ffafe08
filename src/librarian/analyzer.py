"""Analyzer interfaces for snippet metadata extraction."""

from typing import Protocol

from librarian.model import ComponentRecord


class SnippetAnalyzer(Protocol):
    """Language-agnostic snippet analyzer contract."""

    def analyze(self, snippet: str) -> ComponentRecord:
        """Extract a best-effort record from raw snippet text.

        Implementations must not raise; unresolved fields keep their
        fallback values.
        """
