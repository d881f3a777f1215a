from spinup_export.renderers.formatting import PLACEHOLDER, format_rand
from spinup_export.schemas.payloads import (
    CompanyNamePayload,
    ComplianceChecklistPayload,
    FinancialModelPayload,
    HypothesisTrackerPayload,
    PitchDeckPayload,
)


def test_coerce_accepts_empty_and_non_mapping_input() -> None:
    assert HypothesisTrackerPayload.coerce({}).hypotheses == []
    assert HypothesisTrackerPayload.coerce(None).hypotheses == []
    assert HypothesisTrackerPayload.coerce(["not", "a", "dict"]).hypotheses == []


def test_coerce_drops_wrong_typed_fields_only() -> None:
    payload = HypothesisTrackerPayload.coerce(
        {
            "hypotheses": [
                {"assumption": "Farmers will pay", "outcome": {"nested": True}},
                "garbage",
                {"assumption": "Co-ops will resell"},
            ]
        }
    )
    assert [h.assumption for h in payload.hypotheses] == ["Farmers will pay", "Co-ops will resell"]
    assert payload.hypotheses[0].outcome is None


def test_coerce_keeps_valid_entries_among_many_invalid_ones() -> None:
    hypotheses = [{"assumption": ["not", "text"]} for _ in range(501)]
    hypotheses.append({"assumption": "REAL"})
    payload = HypothesisTrackerPayload.coerce({"hypotheses": hypotheses})
    assert len(payload.hypotheses) == 502
    assert payload.hypotheses[-1].assumption == "REAL"
    assert all(h.assumption is None for h in payload.hypotheses[:-1])


def test_coerce_prunes_nested_and_sibling_errors_in_one_payload() -> None:
    payload = FinancialModelPayload.coerce(
        {
            "revenue_streams": [
                {"name": "A", "month1": [1]},
                "bad",
                {"name": ["B"], "month3": {"x": 1}},
                {"name": "C", "month12": 300},
            ],
            "cac": {"value": 1},
            "growth_rate_pct": "5",
        }
    )
    assert [s.name for s in payload.revenue_streams] == ["A", None, "C"]
    assert payload.revenue_streams[1].month3 is None
    assert payload.revenue_streams[2].month12 == "300"
    assert payload.cac is None
    assert payload.growth_rate_pct == "5"


def test_coerce_replaces_wrong_shaped_sections_with_defaults() -> None:
    payload = CompanyNamePayload.coerce(
        {"bar_test": "yes", "name_search": None, "domain_check": {"outcome": "available"}, "final_name": "Acme"}
    )
    assert payload.bar_test.easy_spell is None
    assert payload.name_search.outcome is None
    assert payload.domain_check.outcome == "available"
    assert payload.final_name == "Acme"


def test_coerce_does_not_mutate_input() -> None:
    data = {"hypotheses": [{"assumption": 1.5, "outcome": ["x"]}]}
    HypothesisTrackerPayload.coerce(data)
    assert data == {"hypotheses": [{"assumption": 1.5, "outcome": ["x"]}]}


def test_numbers_are_kept_as_text() -> None:
    payload = FinancialModelPayload.coerce({"revenue_streams": [{"name": "SaaS", "month12": 10000}], "cac": 350})
    assert payload.revenue_streams[0].month12 == "10000"
    assert payload.cac == "350"


def test_booleans_are_not_amounts() -> None:
    payload = FinancialModelPayload.coerce({"revenue_streams": [{"name": "SaaS", "month1": True}]})
    assert format_rand(payload.revenue_streams[0].month1) == PLACEHOLDER


def test_compliance_items_keep_good_entries() -> None:
    payload = ComplianceChecklistPayload.coerce(
        {"items": {"cipc_registration": {"status": "complete"}, "sars_paye": "done"}}
    )
    assert payload.items["cipc_registration"].status == "complete"
    assert "sars_paye" not in payload.items


def test_pitch_deck_slide_lookup() -> None:
    deck = PitchDeckPayload.coerce({"traction": {"content": "120 paying users"}, "team": 3})
    assert deck.slide("traction").content == "120 paying users"
    assert deck.slide("team").content is None
