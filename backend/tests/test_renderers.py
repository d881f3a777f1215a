import pytest

from conftest import docx_lines, docx_tables
from spinup_export.renderers import get_renderer_registry, resolve
from spinup_export.renderers.competitive_landscape import CompetitiveLandscapeRenderer
from spinup_export.renderers.financial_model import FinancialModelRenderer, revenue_totals
from spinup_export.renderers.generic import GenericRenderer
from spinup_export.renderers.pitch_deck import PitchDeckRenderer
from spinup_export.schemas.artifact import ArtifactType, ValueProposition
from spinup_export.schemas.document import BulletBlock, HeadingBlock, LabelBlock, StatementBlock, TableBlock
from spinup_export.schemas.payloads import RevenueStream

VP = ValueProposition(
    solution="automated QC",
    customer="SME manufacturers",
    benefit="fewer defects",
    how_it_works="computer vision on the line",
    improvement="80% faster detection",
)
VP_SENTENCE = (
    "Our product automated QC helps SME manufacturers achieve fewer defects by computer vision on the line, "
    "an improvement of 80% faster detection over current options."
)
WITH_VALUE_PROPOSITION = {
    "hypothesis_tracker",
    "problem_solution_fit",
    "competitive_landscape",
    "mvp_definition",
    "pitch_deck",
    "unknown_tool_xyz",
}


def _texts(blocks) -> list[str]:
    return [getattr(block, "text", "") for block in blocks]


@pytest.mark.parametrize("artifact_type", ["unknown_tool_xyz", "scaling_readiness", "gtm_playbook", "okr_tracker", ""])
def test_unknown_types_resolve_to_generic(artifact_type) -> None:
    renderer = resolve(artifact_type)
    assert isinstance(renderer, GenericRenderer)
    assert resolve(artifact_type) is renderer


@pytest.mark.parametrize("artifact_type", [member.value for member in ArtifactType])
def test_bespoke_types_resolve_to_their_renderer(artifact_type) -> None:
    renderer = resolve(artifact_type)
    assert renderer.artifact_type == artifact_type
    assert get_renderer_registry().has_bespoke(artifact_type)


@pytest.mark.parametrize("artifact_type", [member.value for member in ArtifactType] + ["unknown_tool_xyz"])
def test_every_renderer_handles_empty_data(artifact_type) -> None:
    content = resolve(artifact_type).render({}, None, "Team Rocket")
    lines = docx_lines(content)
    assert lines[0] == "SpinUp"
    assert lines[2] == "Team Rocket"


@pytest.mark.parametrize("artifact_type", [member.value for member in ArtifactType] + ["unknown_tool_xyz"])
def test_value_proposition_lead_only_where_supported(artifact_type) -> None:
    renderer = resolve(artifact_type)
    with_vp = renderer.render_blocks({}, VP)
    without_vp = renderer.render_blocks({}, None)
    has_lead = any(isinstance(block, StatementBlock) for block in with_vp)
    assert has_lead is (artifact_type in WITH_VALUE_PROPOSITION)
    assert not any(isinstance(block, StatementBlock) for block in without_vp)
    if has_lead:
        assert with_vp[0].text == VP_SENTENCE
        assert with_vp[1].kind == "divider"


def test_value_proposition_renderer_builds_sentence_from_payload() -> None:
    data = VP.model_dump()
    lines = docx_lines(resolve("value_proposition").render(data, None, "QC Co"))
    assert VP_SENTENCE in lines
    assert lines[1] == "Value Proposition Statement"


def test_value_proposition_renderer_marks_missing_parts() -> None:
    blocks = resolve("value_proposition").render_blocks({"solution": "Kiosk"}, None)
    assert blocks[0].text.startswith("Our product Kiosk helps ___ achieve ___")
    assert "—" in _texts(blocks)


def test_financial_model_total_row() -> None:
    data = {"revenue_streams": [{"name": "SaaS", "month12": "10000"}, {"name": "Services", "month12": "5000"}]}
    tables = docx_tables(resolve("financial_model").render(data, None, "Team"))
    revenue = tables[0]
    header, total = revenue[0], revenue[-1]
    assert header[0] == "Stream"
    assert total[0] == "Total"
    assert total[header.index("M12")] == "R 15 000"
    assert revenue[1][header.index("M12")] == "R 10 000"
    assert revenue[1][header.index("M1")] == "—"


def test_revenue_totals_ignore_non_numeric_cells() -> None:
    streams = [
        RevenueStream(name="A", month1="100", year5="abc"),
        RevenueStream(name="B", month1="250.5", year5=""),
        RevenueStream(name="C"),
    ]
    totals = revenue_totals(streams)
    assert totals["month1"] == 350.5
    assert totals["year5"] == 0


def test_financial_model_ignores_precomputed_totals() -> None:
    blocks = FinancialModelRenderer().blocks(
        {"revenue_streams": [{"name": "SaaS", "month1": "100"}], "totals": {"month1": "999999"}}
    )
    table = next(block for block in blocks if isinstance(block, TableBlock))
    assert table.total[1] == "R 100"


def test_financial_model_costs_and_assumptions() -> None:
    data = {
        "cost_items": [
            {"name": "Salaries", "type": "fixed", "monthly": "40000"},
            {"name": "Hosting", "type": "variable", "monthly": "2500"},
        ],
        "growth_rate_pct": 8,
        "cac": "350",
        "key_assumptions": "Pilot converts",
    }
    blocks = FinancialModelRenderer().blocks(data)
    cost_table = next(block for block in blocks if isinstance(block, TableBlock))
    assert cost_table.header == ["Item", "Type", "Monthly"]
    assert cost_table.total == ["Total", "", "R 42 500"]
    assert cost_table.width_pct == 70
    texts = _texts(blocks)
    assert "8%" in texts
    assert "R 350" in texts
    assert "Pilot converts" in texts
    assert "Monthly churn rate" not in texts


def test_financial_model_omits_zero_metrics() -> None:
    texts = _texts(FinancialModelRenderer().blocks({"growth_rate_pct": 0, "churn_rate_pct": "", "cac": 0.0}))
    assert "Monthly growth rate" not in texts
    assert "Monthly churn rate" not in texts
    assert "Customer acquisition cost (CAC)" not in texts
    texts = _texts(FinancialModelRenderer().blocks({"growth_rate_pct": "2.5", "cac": "n/a"}))
    assert "2.5%" in texts
    assert "Customer acquisition cost (CAC)" in texts


def test_financial_model_sections_without_data() -> None:
    blocks = FinancialModelRenderer().blocks({})
    headings = [block.text for block in blocks if isinstance(block, HeadingBlock)]
    assert headings == ["Revenue Projections", "Cost Structure (Monthly)", "Assumptions & Metrics"]
    assert not any(isinstance(block, TableBlock) for block in blocks)


def test_generic_renderer_skips_non_strings() -> None:
    blocks = resolve("unknown_tool_xyz").render_blocks({"foo": "bar", "count": 5, "empty": "", "tags": ["a"]}, None)
    assert [(type(block).__name__, block.text) for block in blocks] == [("LabelBlock", "foo"), ("BodyBlock", "bar")]


def test_generic_renderer_humanizes_keys() -> None:
    lines = docx_lines(resolve("okr_tracker").render({"north_star_metric": "Weekly active farms"}, None, "Team"))
    assert "north star metric" in lines
    assert "Weekly active farms" in lines
    assert lines[1] == "SpinUp Export"


def test_compliance_checklist_items() -> None:
    data = {"items": {"cipc_registration": {"status": "complete", "notes": "Reg #123"}}}
    lines = docx_lines(resolve("compliance_checklist").render(data, None, "Team"))
    assert "CIPC Registration" in lines
    assert "Status: complete" in lines
    assert "Notes: Reg #123" in lines
    assert lines.count("Status: not_started") == 8


def test_pitch_deck_emits_all_slides_in_order() -> None:
    blocks = PitchDeckRenderer().blocks({"the_ask": {"content": "R2m seed"}, "problem": {"content": "Slow QC"}})
    headings = [block.text for block in blocks if isinstance(block, HeadingBlock)]
    assert headings[0] == "1. The Problem"
    assert headings[-1] == "10. The Ask"
    assert len(headings) == 10
    texts = _texts(blocks)
    assert texts[texts.index("10. The Ask") + 1] == "R2m seed"
    assert texts.count("—") == 8


def test_competitive_landscape_table() -> None:
    data = {"competitors": [{"name": "Incumbent", "strength": "Brand"}, {"name": "Startup", "weakness": "Price"}]}
    blocks = CompetitiveLandscapeRenderer().blocks(data)
    assert len(blocks) == 1
    table = blocks[0]
    assert table.header == ["Competitor", "Strength", "Weakness", "Our differentiation", "SA relevance"]
    assert table.rows == [["Incumbent", "Brand", "—", "—", "—"], ["Startup", "—", "Price", "—", "—"]]
    assert table.total is None


def test_competitive_landscape_without_competitors_is_empty() -> None:
    assert CompetitiveLandscapeRenderer().blocks({"competitors": []}) == []


def test_hypothesis_tracker_separates_hypotheses() -> None:
    blocks = resolve("hypothesis_tracker").render_blocks(
        {"hypotheses": [{"assumption": "A"}, {"assumption": "B"}]}, None
    )
    kinds = [block.kind for block in blocks]
    assert kinds.count("divider") == 1
    assert [b.text for b in blocks if isinstance(b, HeadingBlock)] == ["Hypothesis 1", "Hypothesis 2"]


def test_mvp_definition_feature_bullets() -> None:
    blocks = resolve("mvp_definition").render_blocks(
        {"features": [{"name": "Upload photos"}, {"name": "Defect report", "type": "nice_to_have"}]}, None
    )
    bullets = [block.text for block in blocks if isinstance(block, BulletBlock)]
    assert bullets == ["[core] Upload photos", "[nice_to_have] Defect report"]
    lines = docx_lines(resolve("mvp_definition").render({"features": [{"name": "Upload photos"}]}, None, "T"))
    assert "• [core] Upload photos" in lines


def test_company_name_bar_test_answers() -> None:
    blocks = resolve("company_name").render_blocks(
        {"bar_test": {"easy_pronounce": True, "memorable": False}, "final_name": "Kiln"}, None
    )
    texts = _texts(blocks)
    assert texts[texts.index("Easy to pronounce") + 1] == "Yes"
    assert texts[texts.index("Easy to spell") + 1] == "No"
    assert texts[-1] == "Kiln"


def test_weekly_journal_entries() -> None:
    blocks = resolve("weekly_journal").render_blocks(
        {"entries": [{"week_start": "2026-03-02", "blockers": "Funding"}, {"what_we_did": "Interviews"}]}, None
    )
    headings = [block.text for block in blocks if isinstance(block, HeadingBlock)]
    assert headings == ["Week of 2026-03-02", "Week of ?"]
    assert blocks[-1].kind == "divider"
    labels = [block.text for block in blocks if isinstance(block, LabelBlock)]
    assert labels.count("Next week's priority") == 2


@pytest.mark.parametrize("artifact_type", ["financial_model", "pitch_deck", "unknown_tool_xyz"])
def test_rendering_is_byte_identical(artifact_type) -> None:
    data = {"revenue_streams": [{"name": "SaaS", "month1": "10"}], "problem": {"content": "x"}, "foo": "bar"}
    renderer = resolve(artifact_type)
    assert renderer.render(data, VP, "Team") == renderer.render(data, VP, "Team")


def test_word_line_breaks_survive_docx_serialization() -> None:
    content = resolve("problem_solution_fit").render({"who_has_problem": "SMEs\x0bin Gauteng"}, None, "Team")
    assert "SMEs\nin Gauteng" in docx_lines(content)


def test_control_characters_in_table_cells_are_sanitized() -> None:
    data = {"competitors": [{"name": "Acme\x0bHoldings", "strength": "Bra\x01nd", "weakness": "Page\x0cbreak"}]}
    content = resolve("competitive_landscape").render(data, None, "Team\x00 Rocket")
    tables = docx_tables(content)
    assert tables[0][1][:3] == ["Acme\nHoldings", "Brand", "Page\nbreak"]
    assert docx_lines(content)[2] == "Team Rocket"


def test_control_characters_in_pdf_export() -> None:
    content = resolve("problem_solution_fit").render(
        {"who_has_problem": "SMEs\x0bin\x07 Gauteng"}, None, "Team", export_format="pdf"
    )
    assert content.startswith(b"%PDF")
