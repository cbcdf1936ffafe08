# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for component metadata records."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Closed set of component categories."""

    ATOM = "Atom"
    MOLECULE = "Molecule"
    ORGANISM = "Organism"
    TEMPLATE = "Template"
    LOGIC = "Logic"
    UTILITY = "Utility"


CATEGORIES: tuple[str, ...] = tuple(category.value for category in Category)

DEFAULT_NAME = "UntitledComponent"
DEFAULT_CATEGORY = Category.ATOM
DEFAULT_DESCRIPTION = "No description extracted."


@dataclass(frozen=True)
class ComponentRecord:
    """Represent the editable draft of a component record.

    Attributes:
        name: Component identifier.
        category: Component category.
        dependencies: Comma-separated package names as shown for editing.
        description: Free-text description.
    """

    name: str = DEFAULT_NAME
    category: Category = DEFAULT_CATEGORY
    dependencies: str = ""
    description: str = DEFAULT_DESCRIPTION

    def dependency_list(self) -> list[str]:
        """Return the dependencies field as an ordered list."""
        return normalize_dependencies(self.dependencies)


@dataclass(frozen=True)
class FinalizedRecord:
    """Represent a confirmed component record.

    Attributes:
        name: Component identifier; never empty.
        category: Component category.
        dependencies: Ordered package names.
        description: Free-text description; never empty.
    """

    name: str
    category: Category
    dependencies: tuple[str, ...]
    description: str


def default_record() -> ComponentRecord:
    """Build a record with every field set to its fallback value."""
    return ComponentRecord()


def normalize_dependencies(raw: str) -> list[str]:
    """Split a comma-separated dependency string into package names.

    Tokens are trimmed and empty tokens dropped. Order and duplicates are
    kept as typed.

    Args:
        raw: Comma-separated dependency text.

    Returns:
        Ordered list of dependency names.
    """
    return [token.strip() for token in raw.split(",") if token.strip()]


def is_valid_category(value: object) -> bool:
    """Check whether a value names one of the supported categories.

    Args:
        value: ``Category`` member or exact category name.

    Returns:
        True when the value is part of the enumeration.
    """
    if isinstance(value, Category):
        return True
    return isinstance(value, str) and value in CATEGORIES


def finalize_record(record: ComponentRecord) -> FinalizedRecord:
    """Freeze a draft record for export.

    Blank names and descriptions fall back to their defaults.

    Args:
        record: Draft record from the review stage.

    Returns:
        Immutable finalized record.
    """
    name = record.name
    if not name.strip():
        logger.debug(f"Blank name replaced with fallback (fallback={DEFAULT_NAME})")
        name = DEFAULT_NAME
    description = record.description
    if not description.strip():
        description = DEFAULT_DESCRIPTION
    return FinalizedRecord(
        name=name,
        category=Category(record.category),
        dependencies=tuple(normalize_dependencies(record.dependencies)),
        description=description,
    )
