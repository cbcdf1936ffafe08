import pytest

from librarian.analyzers import JsxAnalyzer
from librarian.export import format_payload
from librarian.model import (
    Category,
    ComponentRecord,
    FinalizedRecord,
    default_record,
)
from librarian.wizard import WizardController, WizardStateError


class _CountingAnalyzer:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self._delegate = JsxAnalyzer()

    def analyze(self, snippet: str) -> ComponentRecord:
        self.calls.append(snippet)
        return self._delegate.analyze(snippet)


def _reviewing(snippet: str) -> WizardController:
    controller = WizardController()
    assert controller.submit(snippet)
    return controller


@pytest.mark.parametrize("snippet", ["", "   ", "\n\t "])
def test_wiz_001_blank_submission_stays_in_input(snippet: str) -> None:
    analyzer = _CountingAnalyzer()
    controller = WizardController(analyzer=analyzer)

    assert controller.submit(snippet) is False

    state = controller.get_state()
    assert state.stage == "input"
    assert state.snippet == ""
    assert state.record == default_record()
    assert analyzer.calls == []


def test_wiz_002_submit_analyzes_and_enters_review(card_snippet: str) -> None:
    controller = _reviewing(card_snippet)

    state = controller.get_state()
    assert state.stage == "review"
    assert state.snippet == card_snippet
    assert isinstance(state.record, ComponentRecord)
    assert state.record.name == "ProductCard"
    assert state.record.dependencies == "framer-motion, clsx"


def test_wiz_003_processing_hook_runs_before_analysis(card_snippet: str) -> None:
    seen: list[tuple[str, bool, str]] = []
    controller: WizardController

    def hook(snippet: str) -> None:
        state = controller.get_state()
        seen.append((snippet, state.processing, state.stage))

    controller = WizardController(processing_hook=hook)
    controller.submit(card_snippet)

    assert seen == [(card_snippet, True, "input")]
    assert controller.get_state().processing is False


def test_wiz_004_edit_fields_in_review(card_snippet: str) -> None:
    controller = _reviewing(card_snippet)

    assert controller.edit_field("name", "PriceCard")
    assert controller.edit_field("category", "Organism")
    assert controller.edit_field("dependencies", "clsx, clsx, ,zod")
    assert controller.edit_field("description", "Shows a price.")

    record = controller.get_state().record
    assert record == ComponentRecord(
        name="PriceCard",
        category=Category.ORGANISM,
        dependencies="clsx, clsx, ,zod",
        description="Shows a price.",
    )


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("category", "Widget"),
        ("category", "molecule"),
        ("category", None),
        ("owner", "someone"),
        ("name", 42),
    ],
)
def test_wiz_005_invalid_edits_are_ignored(
    card_snippet: str, field: str, value: object
) -> None:
    controller = _reviewing(card_snippet)
    before = controller.get_state()

    assert controller.edit_field(field, value) is False
    assert controller.get_state() == before


def test_wiz_006_back_keeps_draft_and_skips_reanalysis(card_snippet: str) -> None:
    analyzer = _CountingAnalyzer()
    controller = WizardController(analyzer=analyzer)
    controller.submit(card_snippet)
    controller.edit_field("name", "EditedCard")

    assert controller.back()
    state = controller.get_state()
    assert state.stage == "input"
    assert state.snippet == card_snippet
    assert state.record.name == "EditedCard"

    assert controller.submit(card_snippet)
    assert controller.get_state().record.name == "EditedCard"
    assert analyzer.calls == [card_snippet]


def test_wiz_007_new_snippet_after_back_is_analyzed(card_snippet: str) -> None:
    analyzer = _CountingAnalyzer()
    controller = WizardController(analyzer=analyzer)
    controller.submit(card_snippet)
    controller.back()

    assert controller.submit("const AppLayout = () => null")

    state = controller.get_state()
    assert state.record.name == "AppLayout"
    assert state.record.category == Category.ORGANISM
    assert len(analyzer.calls) == 2


def test_wiz_008_confirm_round_trips_review_values(card_snippet: str) -> None:
    controller = _reviewing(card_snippet)
    controller.edit_field("dependencies", " framer-motion ,clsx,, zod ")
    review = controller.get_state().record
    assert isinstance(review, ComponentRecord)

    assert controller.confirm()

    state = controller.get_state()
    assert state.stage == "finalized"
    assert isinstance(state.record, FinalizedRecord)
    payload = controller.export_payload()
    assert payload == {
        "name": review.name,
        "category": review.category.value,
        "dependencies": ["framer-motion", "clsx", "zod"],
        "description": review.description,
        "codeSnippet": card_snippet,
    }


def test_wiz_009_finalized_has_no_backward_transition(card_snippet: str) -> None:
    controller = _reviewing(card_snippet)
    controller.confirm()
    before = controller.get_state()

    assert controller.back() is False
    assert controller.submit("const Other = () => null") is False
    assert controller.edit_field("name", "Other") is False
    assert controller.confirm() is False
    assert controller.get_state() == before


def test_wiz_010_input_stage_rejects_review_operations() -> None:
    controller = WizardController()

    assert controller.back() is False
    assert controller.confirm() is False
    assert controller.edit_field("name", "Anything") is False
    assert controller.get_state().stage == "input"


def test_wiz_011_export_requires_finalized_stage(card_snippet: str) -> None:
    controller = WizardController()
    with pytest.raises(WizardStateError):
        controller.export_payload()

    controller.submit(card_snippet)
    with pytest.raises(WizardStateError):
        controller.export_payload()


@pytest.mark.parametrize("stage", ["input", "review", "finalized"])
def test_wiz_012_reset_restores_defaults_from_any_stage(
    card_snippet: str, stage: str
) -> None:
    controller = WizardController()
    if stage != "input":
        controller.submit(card_snippet)
        controller.edit_field("name", "Changed")
    if stage == "finalized":
        controller.confirm()

    assert controller.reset()

    state = controller.get_state()
    assert state.stage == "input"
    assert state.snippet == ""
    assert state.record == default_record()


def test_wiz_013_reset_discards_retained_draft(card_snippet: str) -> None:
    analyzer = _CountingAnalyzer()
    controller = WizardController(analyzer=analyzer)
    controller.submit(card_snippet)
    controller.edit_field("name", "Changed")
    controller.confirm()
    controller.reset()

    controller.submit(card_snippet)

    assert controller.get_state().record.name == "ProductCard"
    assert len(analyzer.calls) == 2


def test_wiz_014_payload_is_built_once_on_confirm(
    card_snippet: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []

    def counting_format(record: FinalizedRecord, snippet: str) -> dict[str, object]:
        calls.append(snippet)
        return format_payload(record, snippet)

    monkeypatch.setattr("librarian.wizard.format_payload", counting_format)
    controller = _reviewing(card_snippet)
    controller.confirm()

    first = controller.export_payload()
    first["dependencies"].append("tampered")
    second = controller.export_payload()

    assert calls == [card_snippet]
    assert second["dependencies"] == ["framer-motion", "clsx"]
