# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Runtime settings for the component librarian."""

import math
from dataclasses import dataclass

from librarian.analyzers.jsx import DEFAULT_FRAMEWORK_PACKAGE
from librarian.export import DEFAULT_PREVIEW_LENGTH

DEFAULT_PROCESSING_DELAY_SECONDS = 0.6


@dataclass(frozen=True)
class LibrarianConfig:
    """Describe resolved settings for one session.

    Attributes:
        framework_package: UI framework package excluded from dependencies.
        processing_delay_seconds: Simulated analysis latency; ``0`` disables it.
        preview_length: Snippet characters kept in the display preview.
    """

    framework_package: str = DEFAULT_FRAMEWORK_PACKAGE
    processing_delay_seconds: float = DEFAULT_PROCESSING_DELAY_SECONDS
    preview_length: int = DEFAULT_PREVIEW_LENGTH

    def __post_init__(self) -> None:
        """Validate settings.

        Raises:
            ValueError: If any setting is out of range.
        """
        if not self.framework_package.strip():
            raise ValueError("framework_package must not be empty")
        if (
            not math.isfinite(self.processing_delay_seconds)
            or self.processing_delay_seconds < 0
        ):
            raise ValueError("processing_delay_seconds must be a finite value >= 0")
        if self.preview_length <= 0:
            raise ValueError("preview_length must be > 0")
