# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for component librarian components."""

from librarian.analyzers import JsxAnalyzer, analyze
from librarian.config import LibrarianConfig
from librarian.export import format_payload, format_preview, serialize_payload
from librarian.model import (
    CATEGORIES,
    Category,
    ComponentRecord,
    FinalizedRecord,
    default_record,
    finalize_record,
    is_valid_category,
    normalize_dependencies,
)
from librarian.wizard import WizardController, WizardState, WizardStateError

__all__ = [
    "CATEGORIES",
    "Category",
    "ComponentRecord",
    "FinalizedRecord",
    "JsxAnalyzer",
    "LibrarianConfig",
    "WizardController",
    "WizardState",
    "WizardStateError",
    "analyze",
    "default_record",
    "finalize_record",
    "format_payload",
    "format_preview",
    "is_valid_category",
    "normalize_dependencies",
    "serialize_payload",
]
