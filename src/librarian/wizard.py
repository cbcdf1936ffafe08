# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Three-stage wizard sequencing snippet input, review and finalization."""

import copy
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Literal

from librarian.analyzer import SnippetAnalyzer
from librarian.analyzers import JsxAnalyzer
from librarian.export import format_payload
from librarian.model import (
    Category,
    ComponentRecord,
    FinalizedRecord,
    default_record,
    finalize_record,
    is_valid_category,
)

logger = logging.getLogger(__name__)

Stage = Literal["input", "review", "finalized"]

EDITABLE_FIELDS: frozenset[str] = frozenset(
    {"name", "category", "dependencies", "description"}
)

ProcessingHook = Callable[[str], None]


class WizardStateError(RuntimeError):
    """Represent an operation requested in a stage that does not support it."""


@dataclass(frozen=True)
class WizardState:
    """Read-only projection of the wizard for rendering.

    Attributes:
        stage: Current stage.
        snippet: Submitted snippet; empty until the first submission.
        record: Draft record, or the finalized record once confirmed.
        processing: True while the processing hook runs.
    """

    stage: Stage
    snippet: str
    record: ComponentRecord | FinalizedRecord
    processing: bool = False


class WizardController:
    """Drive one snippet through input, review and finalization.

    ``Review`` may go back to ``Input`` without losing the draft.
    ``Finalized`` only leaves through :meth:`reset`. Guarded transitions
    return ``False`` instead of raising.
    """

    def __init__(
        self,
        analyzer: SnippetAnalyzer | None = None,
        processing_hook: ProcessingHook | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            analyzer: Snippet analyzer; defaults to :class:`JsxAnalyzer`.
            processing_hook: Optional callable run before analysis, used by
                front ends to show progress. It receives the snippet.
        """
        self._analyzer: SnippetAnalyzer = analyzer or JsxAnalyzer()
        self._processing_hook = processing_hook
        self._stage: Stage = "input"
        self._snippet = ""
        self._draft = default_record()
        self._has_draft = False
        self._finalized: FinalizedRecord | None = None
        self._payload: dict[str, Any] | None = None
        self._processing = False

    @property
    def stage(self) -> Stage:
        """Return the current stage."""
        return self._stage

    def get_state(self) -> WizardState:
        """Return a snapshot of the current stage, snippet and record."""
        record: ComponentRecord | FinalizedRecord = self._draft
        if self._stage == "finalized" and self._finalized is not None:
            record = self._finalized
        return WizardState(
            stage=self._stage,
            snippet=self._snippet,
            record=record,
            processing=self._processing,
        )

    def submit(self, snippet: str) -> bool:
        """Analyze a snippet and move to review.

        Resubmitting the retained snippet after :meth:`back` re-shows the
        retained draft without analyzing again.

        Args:
            snippet: Raw pasted source text.

        Returns:
            True when the wizard moved to review.
        """
        if self._stage != "input":
            return self._reject("submit", reason="not in input stage")
        if not isinstance(snippet, str) or not snippet.strip():
            return self._reject("submit", reason="snippet is empty")

        if self._has_draft and snippet == self._snippet:
            logger.debug("Re-entering review with retained draft")
            self._transition("review")
            return True

        self._processing = True
        try:
            if self._processing_hook is not None:
                self._processing_hook(snippet)
            record = self._analyzer.analyze(snippet)
        finally:
            self._processing = False

        self._snippet = snippet
        self._draft = record
        self._has_draft = True
        logger.info(
            f"Snippet analyzed (name={record.name} category={record.category.value} "
            f"dependencies={record.dependencies!r})"
        )
        self._transition("review")
        return True

    def edit_field(self, field: str, value: Any) -> bool:
        """Update one field of the draft record.

        ``dependencies`` is stored as typed; it is normalized on
        confirmation. ``category`` must be one of the supported categories.

        Args:
            field: Record field name.
            value: New field value.

        Returns:
            True when the draft was updated.
        """
        if self._stage != "review":
            return self._reject("edit_field", reason="not in review stage")
        if field not in EDITABLE_FIELDS:
            return self._reject("edit_field", reason=f"unknown field {field!r}")
        if field == "category":
            if not is_valid_category(value):
                return self._reject(
                    "edit_field", reason=f"invalid category {value!r}"
                )
            value = Category(value)
        elif not isinstance(value, str):
            return self._reject("edit_field", reason=f"{field} must be text")

        self._draft = replace(self._draft, **{field: value})
        logger.debug(f"Draft field updated (field={field})")
        return True

    def back(self) -> bool:
        """Return from review to input, keeping snippet and draft."""
        if self._stage != "review":
            return self._reject("back", reason="not in review stage")
        self._transition("input")
        return True

    def confirm(self) -> bool:
        """Freeze the draft, build its export payload and finalize."""
        if self._stage != "review":
            return self._reject("confirm", reason="not in review stage")
        self._finalized = finalize_record(self._draft)
        self._payload = format_payload(self._finalized, self._snippet)
        self._transition("finalized")
        return True

    def reset(self) -> bool:
        """Clear snippet and record and return to input from any stage."""
        self._snippet = ""
        self._draft = default_record()
        self._has_draft = False
        self._finalized = None
        self._payload = None
        self._transition("input")
        return True

    def export_payload(self) -> dict[str, Any]:
        """Return a copy of the payload built on confirmation.

        Raises:
            WizardStateError: If the wizard is not finalized.
        """
        if self._stage != "finalized" or self._payload is None:
            raise WizardStateError(
                f"Export is only available once finalized (stage={self._stage})"
            )
        return copy.deepcopy(self._payload)

    def _transition(self, target: Stage) -> None:
        logger.info(f"Wizard transition (from={self._stage} to={target})")
        self._stage = target

    def _reject(self, operation: str, reason: str) -> bool:
        logger.debug(
            f"Wizard operation ignored (operation={operation} stage={self._stage} reason={reason})"
        )
        return False
