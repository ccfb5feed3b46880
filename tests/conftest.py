# -*- coding: utf-8 -*-
"""
Shared fixtures for BEP generator tests.
"""

from datetime import datetime, timedelta, timezone

import pytest

from models.defaults import create_empty_bep
from repositories.key_value_store import InMemoryStore
from utils.id_generator import SequentialIdGenerator


START_TIME = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime = START_TIME):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """Deterministic, strictly increasing clock."""
    return FakeClock()


@pytest.fixture
def ids():
    """Sequential id generator: id-1, id-2, ..."""
    return SequentialIdGenerator()


@pytest.fixture
def empty_bep(ids, clock):
    """Fresh BEP with default CDE and RACI content."""
    return create_empty_bep(ids, clock)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def session_store():
    return InMemoryStore()


@pytest.fixture
def complete_bep(empty_bep, ids, clock):
    """BEP with every section complete and every list populated."""
    from models import (
        AlphanumericDetail,
        ClassificationSystem,
        FileFormat,
        GeometricalDetail,
        GeometryLevel,
        InformationLevel,
        PartyRole,
        ProjectParty,
        ProjectStage,
        ProjectType,
    )
    from models.defaults import (
        DEFAULT_ELEMENT_TYPES,
        create_default_element,
        create_midp_entry,
        create_milestone,
        create_model_deliverable,
        create_role,
        create_software_item,
    )
    from services.wizard import actions
    from services.wizard.bep_reducer import reduce

    milestone = create_milestone(ids)
    elements = [create_default_element(name, ids) for name in DEFAULT_ELEMENT_TYPES[:5]]
    sequence = [
        actions.update_project_info({
            "project_name": "Riverside Library",
            "project_number": "BP-2025-001",
            "client_organisation": "Acme Estates",
            "project_type": ProjectType.NEW_BUILD,
            "project_stage": ProjectStage.CONCEPT_DESIGN,
        }),
        actions.add_party(ProjectParty(id=ids.new_id(), organisation_name="Acme Estates",
                                       role=PartyRole.APPOINTING_PARTY)),
        actions.add_party(ProjectParty(id=ids.new_id(), organisation_name="Bailey Partnership",
                                       role=PartyRole.LEAD_APPOINTED_PARTY)),
        actions.update_oir({"exists": True, "objectives": ["Net zero operation"]}),
        actions.update_pir({"exists": True, "decision_points": ["Stage 2 sign-off"]}),
        actions.update_eir({"information_standard": "BS EN ISO 19650-2",
                            "information_delivery_milestones": ["Stage 2"]}),
        actions.set_loin_elements(elements),
        actions.update_loin_element(elements[0].id, {
            "geometrical_information": GeometricalDetail(
                level=GeometryLevel.APPROXIMATE),
            "alphanumeric_information": AlphanumericDetail(
                level=InformationLevel.SCHEDULED, properties=["Fire rating"]),
        }),
        actions.update_cde({"platform": "Autodesk Construction Cloud"}),
        actions.update_standards({"classification_system": ClassificationSystem.UNICLASS_2015,
                                  "modelling_standards": ["BS 1192-4"]}),
        actions.update_coordinate_system({"project_base_point": "0,0,0"}),
        actions.add_authoring_software(create_software_item("Revit", "Autodesk", "Authoring",
                                                            "Architecture", ids)),
        actions.add_coordination_software(create_software_item("Navisworks", "Autodesk",
                                                               id_generator=ids)),
        actions.add_file_format(FileFormat(format="IFC", purpose="Exchange", version="4")),
        actions.add_milestone(milestone),
        actions.update_milestone(milestone.id, {"name": "Stage 2 data drop"}),
        actions.add_model_deliverable(create_model_deliverable(ids)),
        actions.add_midp_entry(create_midp_entry(ids)),
        actions.add_role(create_role("BIM/Information Manager", ids)),
    ]
    document = empty_bep
    for action in sequence:
        document = reduce(document, action, clock=clock)
    return document
