# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Export payload formatting for finalized records."""

import json
from typing import Any

from librarian.model import FinalizedRecord

DEFAULT_PREVIEW_LENGTH = 100
PREVIEW_MARKER = "... (full code stored)"


def format_payload(record: FinalizedRecord, snippet: str) -> dict[str, Any]:
    """Build the canonical export payload.

    Args:
        record: Finalized record.
        snippet: Full original snippet.

    Returns:
        Ordered mapping of record fields followed by the snippet.
    """
    return {
        "name": record.name,
        "category": record.category.value,
        "dependencies": list(record.dependencies),
        "description": record.description,
        "codeSnippet": snippet,
    }


def serialize_payload(payload: dict[str, Any]) -> str:
    """Serialize a payload to its stable JSON text form."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def format_preview(
    record: FinalizedRecord, snippet: str, limit: int = DEFAULT_PREVIEW_LENGTH
) -> dict[str, Any]:
    """Build a display payload with a truncated snippet.

    The preview is for humans only; automated consumers use
    :func:`format_payload`.

    Args:
        record: Finalized record.
        snippet: Full original snippet.
        limit: Number of leading snippet characters to keep.

    Returns:
        Payload whose ``codeSnippet`` is the truncated preview.
    """
    payload = format_payload(record, snippet)
    payload["codeSnippet"] = snippet[:limit] + PREVIEW_MARKER
    return payload
