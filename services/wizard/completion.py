# -*- coding: utf-8 -*-
"""
Completion evaluator.

Derives a per-step status (complete / partial / empty) and the summary lines
of the review screen from a document. Recomputed on every call; holds no
state.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List

from models import BEPDocument, PartyRole
from utils.helpers import or_default

from .step_registry import DEFAULT_REGISTRY, StepRegistry


class SectionStatus(str, Enum):
    COMPLETE = "complete"
    PARTIAL = "partial"
    EMPTY = "empty"


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: str
    ok: bool


@dataclass(frozen=True)
class SectionSummary:
    step: int
    title: str
    status: SectionStatus
    items: List[SummaryItem] = field(default_factory=list)


def _text(value) -> str:
    """Enum members render as their value."""
    return value.value if isinstance(value, Enum) else (value or "")


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _status(complete: bool, partial: bool = False) -> SectionStatus:
    if complete:
        return SectionStatus.COMPLETE
    if partial:
        return SectionStatus.PARTIAL
    return SectionStatus.EMPTY


# ============================================================================
# Per-section evaluators (steps 1-9)
# ============================================================================

def _project_information(doc: BEPDocument) -> SectionSummary:
    info = doc.project_information
    stage = _text(info.project_stage)
    project_type = _text(info.project_type)
    return SectionSummary(
        step=1,
        title="Project Information",
        status=_status(bool(info.project_name and info.project_number), bool(info.project_name)),
        items=[
            SummaryItem("Project Name", or_default(info.project_name), bool(info.project_name)),
            SummaryItem("Project Number", or_default(info.project_number), bool(info.project_number)),
            SummaryItem("Client", or_default(info.client_organisation), bool(info.client_organisation)),
            SummaryItem("Stage", or_default(stage), bool(stage)),
            SummaryItem("Type", or_default(project_type), bool(project_type)),
        ],
    )


def _project_parties(doc: BEPDocument) -> SectionSummary:
    parties = doc.project_parties

    def first_with(role: PartyRole):
        return next((p for p in parties if p.role == role), None)

    appointing = first_with(PartyRole.APPOINTING_PARTY)
    lead = first_with(PartyRole.LEAD_APPOINTED_PARTY)
    return SectionSummary(
        step=2,
        title="Project Parties",
        status=_status(len(parties) >= 2, len(parties) > 0),
        items=[
            SummaryItem("Total Parties", str(len(parties)), len(parties) > 0),
            SummaryItem("Appointing Party",
                        or_default(appointing.organisation_name if appointing else "", "Not defined"),
                        appointing is not None),
            SummaryItem("Lead Appointed Party",
                        or_default(lead.organisation_name if lead else "", "Not defined"),
                        lead is not None),
        ],
    )


def _information_requirements(doc: BEPDocument) -> SectionSummary:
    ir = doc.information_requirements
    standard = ir.eir.information_standard
    return SectionSummary(
        step=3,
        title="Information Requirements",
        status=_status(bool(standard), ir.pir.exists),
        items=[
            SummaryItem("OIR Defined", _yes_no(ir.oir.exists), ir.oir.exists),
            SummaryItem("AIR Defined", _yes_no(ir.air.exists), ir.air.exists),
            SummaryItem("PIR Defined", _yes_no(ir.pir.exists), ir.pir.exists),
            SummaryItem("EIR Standard", or_default(standard), bool(standard)),
        ],
    )


def _level_of_information_need(doc: BEPDocument) -> SectionSummary:
    elements = doc.level_of_information_need.elements
    with_geometry = sum(1 for e in elements if _text(e.geometrical_information.level))
    with_info = sum(1 for e in elements if _text(e.alphanumeric_information.level))
    return SectionSummary(
        step=4,
        title="Level of Information Need",
        status=_status(len(elements) >= 5, len(elements) > 0),
        items=[
            SummaryItem("Elements Defined", str(len(elements)), len(elements) > 0),
            SummaryItem("With Geometry Level", str(with_geometry), with_geometry > 0),
            SummaryItem("With Info Level", str(with_info), with_info > 0),
        ],
    )


def _cde(doc: BEPDocument) -> SectionSummary:
    cde = doc.cde_configuration
    example = cde.naming_convention.example
    return SectionSummary(
        step=5,
        title="CDE & Information Management",
        status=_status(bool(cde.platform)),
        items=[
            SummaryItem("CDE Platform", or_default(cde.platform), bool(cde.platform)),
            SummaryItem("Naming Convention", or_default(example), bool(example)),
        ],
    )


def _standards(doc: BEPDocument) -> SectionSummary:
    standards = doc.standards_methods
    classification = _text(standards.classification_system)
    modelling = standards.modelling_standards
    base_point = standards.coordinate_system.project_base_point
    return SectionSummary(
        step=6,
        title="Standards & Methods",
        status=_status(bool(classification), len(modelling) > 0),
        items=[
            SummaryItem("Classification", or_default(classification), bool(classification)),
            SummaryItem("Modelling Standards", f"{len(modelling)} selected", len(modelling) > 0),
            SummaryItem("Coordinate System", "Defined" if base_point else "Not set", bool(base_point)),
        ],
    )


def _software(doc: BEPDocument) -> SectionSummary:
    sw = doc.software_it
    return SectionSummary(
        step=7,
        title="Software & IT",
        status=_status(len(sw.authoring_software) > 0),
        items=[
            SummaryItem("Authoring Software", f"{len(sw.authoring_software)} tools",
                        len(sw.authoring_software) > 0),
            SummaryItem("Coordination Software", f"{len(sw.coordination_software)} tools",
                        len(sw.coordination_software) > 0),
            SummaryItem("File Formats", f"{len(sw.file_formats)} formats", len(sw.file_formats) > 0),
        ],
    )


def _deliverables(doc: BEPDocument) -> SectionSummary:
    dm = doc.deliverables_and_milestones
    milestones = len(dm.information_delivery_milestones)
    deliverables = len(dm.model_deliverables)
    midp = len(dm.master_information_delivery_plan)
    return SectionSummary(
        step=8,
        title="Deliverables & Milestones",
        status=_status(milestones > 0),
        items=[
            SummaryItem("Milestones", str(milestones), milestones > 0),
            SummaryItem("Model Deliverables", str(deliverables), deliverables > 0),
            SummaryItem("MIDP Entries", str(midp), midp > 0),
        ],
    )


def _roles(doc: BEPDocument) -> SectionSummary:
    rr = doc.roles_and_responsibilities
    return SectionSummary(
        step=9,
        title="Roles & Responsibilities",
        status=_status(len(rr.roles) > 0),
        items=[
            SummaryItem("Roles Defined", str(len(rr.roles)), len(rr.roles) > 0),
            SummaryItem("RACI Activities", str(len(rr.raci_matrix)), True),
        ],
    )


SECTION_EVALUATORS: Dict[int, Callable[[BEPDocument], SectionSummary]] = {
    1: _project_information,
    2: _project_parties,
    3: _information_requirements,
    4: _level_of_information_need,
    5: _cde,
    6: _standards,
    7: _software,
    8: _deliverables,
    9: _roles,
}


# ============================================================================
# Public API
# ============================================================================

def evaluate_content_sections(document: BEPDocument) -> List[SectionSummary]:
    """Summaries for the nine content sections, in step order."""
    return [SECTION_EVALUATORS[step](document) for step in sorted(SECTION_EVALUATORS)]


def _review_summary(step_id: int, title: str, sections: List[SectionSummary]) -> SectionSummary:
    complete = sum(1 for s in sections if s.status == SectionStatus.COMPLETE)
    return SectionSummary(
        step=step_id,
        title=title,
        status=_status(
            complete == len(sections),
            any(s.status != SectionStatus.EMPTY for s in sections),
        ),
        items=[
            SummaryItem("Sections Complete", f"{complete} of {len(sections)}",
                        complete == len(sections)),
        ],
    )


def evaluate_sections(document: BEPDocument,
                      registry: StepRegistry = DEFAULT_REGISTRY) -> List[SectionSummary]:
    """
    One summary per registered step.

    The review step has no content of its own: it is complete when all nine
    sections are complete, partial when any of them has content.

    Args:
        document: Document to evaluate
        registry: Wizard step registry

    Returns:
        List of SectionSummary in step order
    """
    sections = evaluate_content_sections(document)
    by_step = {s.step: s for s in sections}

    summaries = []
    for step in registry.steps:
        if step.id in by_step:
            summaries.append(by_step[step.id])
        else:
            summaries.append(_review_summary(step.id, step.title, sections))
    return summaries


def section_status(document: BEPDocument, step_id: int) -> SectionStatus:
    """Status of a single step."""
    for summary in evaluate_sections(document):
        if summary.step == step_id:
            return summary.status
    raise KeyError(step_id)


def completion_percentage(document: BEPDocument) -> int:
    """
    Share of complete content sections, 0-100, rounded half up.

    Example: 4 of 9 complete -> 44
    """
    sections = evaluate_content_sections(document)
    complete = sum(1 for s in sections if s.status == SectionStatus.COMPLETE)
    return int(math.floor(complete * 100 / len(sections) + 0.5))
