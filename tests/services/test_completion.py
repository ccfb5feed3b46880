# -*- coding: utf-8 -*-
"""
Tests for the completion evaluator.

Tests cover:
- Per-section thresholds (complete / partial / empty)
- Review step status derived from the nine sections
- Completion percentage rounding
"""

import pytest

from models import ProjectParty
from models.defaults import create_default_element, create_role
from services.wizard import actions
from services.wizard.bep_reducer import reduce
from services.wizard.completion import (
    SectionStatus,
    completion_percentage,
    evaluate_content_sections,
    evaluate_sections,
    section_status,
)


def apply_all(document, *sequence):
    for action in sequence:
        document = reduce(document, action)
    return document


class TestSectionThresholds:
    """Test the rules that decide each section's status."""

    def test_empty_document_has_no_complete_sections(self, empty_bep):
        statuses = [s.status for s in evaluate_content_sections(empty_bep)]

        assert statuses == [SectionStatus.EMPTY] * 9

    def test_project_information_needs_name_and_number(self, empty_bep):
        named = apply_all(empty_bep, actions.update_project_info({"project_name": "Riverside"}))
        numbered = apply_all(named, actions.update_project_info({"project_number": "BP-2025-001"}))

        assert section_status(named, 1) == SectionStatus.PARTIAL
        assert section_status(numbered, 1) == SectionStatus.COMPLETE

    def test_number_alone_is_empty(self, empty_bep):
        doc = apply_all(empty_bep, actions.update_project_info({"project_number": "BP-2025-001"}))

        assert section_status(doc, 1) == SectionStatus.EMPTY

    def test_parties_need_two(self, empty_bep):
        one = apply_all(empty_bep, actions.add_party(ProjectParty(id="p1")))
        two = apply_all(one, actions.add_party(ProjectParty(id="p2")))

        assert section_status(one, 2) == SectionStatus.PARTIAL
        assert section_status(two, 2) == SectionStatus.COMPLETE

    def test_requirements_complete_on_eir_standard(self, empty_bep):
        pir_only = apply_all(empty_bep, actions.update_pir({"exists": True}))
        with_standard = apply_all(empty_bep, actions.update_eir({"information_standard": "ISO 19650-2"}))

        assert section_status(pir_only, 3) == SectionStatus.PARTIAL
        assert section_status(with_standard, 3) == SectionStatus.COMPLETE

    def test_oir_alone_does_not_count(self, empty_bep):
        doc = apply_all(empty_bep, actions.update_oir({"exists": True}))

        assert section_status(doc, 3) == SectionStatus.EMPTY

    @pytest.mark.parametrize("count,expected", [
        (0, SectionStatus.EMPTY),
        (1, SectionStatus.PARTIAL),
        (4, SectionStatus.PARTIAL),
        (5, SectionStatus.COMPLETE),
    ])
    def test_loin_needs_five_elements(self, empty_bep, ids, count, expected):
        elements = [create_default_element(f"Element {n}", ids) for n in range(count)]
        doc = apply_all(empty_bep, actions.set_loin_elements(elements))

        assert section_status(doc, 4) == expected

    def test_cde_needs_platform(self, empty_bep):
        """Test default naming and codes alone leave the CDE empty."""
        assert section_status(empty_bep, 5) == SectionStatus.EMPTY

        doc = apply_all(empty_bep, actions.update_cde({"platform": "ACC"}))
        assert section_status(doc, 5) == SectionStatus.COMPLETE

    def test_standards_classification_or_modelling(self, empty_bep):
        modelling = apply_all(empty_bep, actions.update_standards({"modelling_standards": ["BS 1192-4"]}))
        classified = apply_all(empty_bep, actions.update_standards({"classification_system": "uniclass-2015"}))

        assert section_status(modelling, 6) == SectionStatus.PARTIAL
        assert section_status(classified, 6) == SectionStatus.COMPLETE

    def test_roles_ignore_default_raci(self, empty_bep):
        """Test the default RACI rows do not make roles complete."""
        assert section_status(empty_bep, 9) == SectionStatus.EMPTY

    def test_summary_items(self, complete_bep):
        project = evaluate_sections(complete_bep)[0]

        labels = [item.label for item in project.items]
        assert labels == ["Project Name", "Project Number", "Client", "Stage", "Type"]
        assert project.items[0].value == "Riverside Library"
        assert project.items[4].value == "new-build"

    def test_missing_values_render_as_dash(self, empty_bep):
        project = evaluate_sections(empty_bep)[0]

        assert all(item.value == "-" for item in project.items)
        assert not any(item.ok for item in project.items)

    def test_parties_summary_names_roles(self, complete_bep):
        parties = evaluate_sections(complete_bep)[1]

        assert parties.items[1].value == "Acme Estates"
        assert parties.items[2].value == "Bailey Partnership"


class TestReviewStep:
    """Test the derived review step summary."""

    def test_ten_summaries(self, empty_bep):
        summaries = evaluate_sections(empty_bep)

        assert [s.step for s in summaries] == list(range(1, 11))

    def test_review_empty_partial_complete(self, empty_bep, complete_bep):
        partial = apply_all(empty_bep, actions.update_cde({"platform": "ACC"}))

        assert section_status(empty_bep, 10) == SectionStatus.EMPTY
        assert section_status(partial, 10) == SectionStatus.PARTIAL
        assert section_status(complete_bep, 10) == SectionStatus.COMPLETE

    def test_review_summary_counts_sections(self, complete_bep):
        review = evaluate_sections(complete_bep)[-1]

        assert review.items[0].label == "Sections Complete"
        assert review.items[0].value == "9 of 9"

    def test_unknown_step_raises(self, empty_bep):
        with pytest.raises(KeyError):
            section_status(empty_bep, 11)


class TestCompletionPercentage:
    """Test the share of complete content sections."""

    def test_empty_is_zero(self, empty_bep):
        assert completion_percentage(empty_bep) == 0

    def test_full_is_hundred(self, complete_bep):
        assert completion_percentage(complete_bep) == 100

    def test_rounds_half_up(self, empty_bep):
        doc = apply_all(
            empty_bep,
            actions.update_project_info({"project_name": "A", "project_number": "1"}),
            actions.update_cde({"platform": "ACC"}),
            actions.update_eir({"information_standard": "ISO 19650-2"}),
            actions.update_standards({"classification_system": "nrm"}),
        )
        assert completion_percentage(doc) == 44

        doc = apply_all(doc, actions.add_role(create_role("Project Manager")))
        assert completion_percentage(doc) == 56

    def test_evaluation_does_not_touch_document(self, complete_bep):
        before = complete_bep.to_dict()
        evaluate_sections(complete_bep)
        completion_percentage(complete_bep)

        assert complete_bep.to_dict() == before
