# -*- coding: utf-8 -*-
"""
BEP action vocabulary.

Every change to a BEPDocument is described by a ``BepAction``: a tag from
``ActionType`` plus a payload. The factory functions below build well-formed
actions; section merges take a dict of snake_case field names to new values.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from models import (
    BEPDocument,
    BIMRole,
    ElementLOIN,
    FileFormat,
    MIDPEntry,
    Milestone,
    ModelDeliverable,
    Project,
    ProjectParty,
    RACIEntry,
    SoftwareItem,
)


class ActionType(str, Enum):
    # Whole document / navigation
    SET_BEP = "SET_BEP"
    SET_STEP = "SET_STEP"
    COMPLETE_STEP = "COMPLETE_STEP"

    # Step 1
    UPDATE_PROJECT_INFO = "UPDATE_PROJECT_INFO"
    PREPOPULATE_FROM_PROJECT = "PREPOPULATE_FROM_PROJECT"

    # Step 2
    SET_PARTIES = "SET_PARTIES"
    ADD_PARTY = "ADD_PARTY"
    UPDATE_PARTY = "UPDATE_PARTY"
    REMOVE_PARTY = "REMOVE_PARTY"

    # Step 3
    UPDATE_INFORMATION_REQUIREMENTS = "UPDATE_INFORMATION_REQUIREMENTS"
    UPDATE_OIR = "UPDATE_OIR"
    UPDATE_AIR = "UPDATE_AIR"
    UPDATE_PIR = "UPDATE_PIR"
    UPDATE_EIR = "UPDATE_EIR"

    # Step 4
    SET_LOIN_ELEMENTS = "SET_LOIN_ELEMENTS"
    ADD_LOIN_ELEMENT = "ADD_LOIN_ELEMENT"
    UPDATE_LOIN_ELEMENT = "UPDATE_LOIN_ELEMENT"
    REMOVE_LOIN_ELEMENT = "REMOVE_LOIN_ELEMENT"

    # Step 5
    UPDATE_CDE = "UPDATE_CDE"
    UPDATE_NAMING_CONVENTION = "UPDATE_NAMING_CONVENTION"

    # Step 6
    UPDATE_STANDARDS = "UPDATE_STANDARDS"
    UPDATE_COORDINATE_SYSTEM = "UPDATE_COORDINATE_SYSTEM"

    # Step 7
    UPDATE_SOFTWARE_IT = "UPDATE_SOFTWARE_IT"
    ADD_AUTHORING_SOFTWARE = "ADD_AUTHORING_SOFTWARE"
    REMOVE_AUTHORING_SOFTWARE = "REMOVE_AUTHORING_SOFTWARE"
    ADD_COORDINATION_SOFTWARE = "ADD_COORDINATION_SOFTWARE"
    REMOVE_COORDINATION_SOFTWARE = "REMOVE_COORDINATION_SOFTWARE"
    ADD_FILE_FORMAT = "ADD_FILE_FORMAT"
    SET_FILE_FORMATS = "SET_FILE_FORMATS"

    # Step 8
    ADD_MILESTONE = "ADD_MILESTONE"
    UPDATE_MILESTONE = "UPDATE_MILESTONE"
    REMOVE_MILESTONE = "REMOVE_MILESTONE"
    ADD_MODEL_DELIVERABLE = "ADD_MODEL_DELIVERABLE"
    UPDATE_MODEL_DELIVERABLE = "UPDATE_MODEL_DELIVERABLE"
    REMOVE_MODEL_DELIVERABLE = "REMOVE_MODEL_DELIVERABLE"
    SET_MIDP = "SET_MIDP"
    ADD_MIDP_ENTRY = "ADD_MIDP_ENTRY"
    REMOVE_MIDP_ENTRY = "REMOVE_MIDP_ENTRY"

    # Step 9
    SET_ROLES = "SET_ROLES"
    ADD_ROLE = "ADD_ROLE"
    UPDATE_ROLE = "UPDATE_ROLE"
    REMOVE_ROLE = "REMOVE_ROLE"
    SET_RACI = "SET_RACI"
    UPDATE_RACI_ENTRY = "UPDATE_RACI_ENTRY"


@dataclass(frozen=True)
class ItemUpdate:
    """Payload of the UPDATE_<item> actions: target id plus changed fields."""
    id: str
    data: Dict[str, Any]


@dataclass(frozen=True)
class BepAction:
    type: str
    payload: Any = None


# ============================================================================
# Factories
# ============================================================================

def set_bep(document: BEPDocument) -> BepAction:
    return BepAction(ActionType.SET_BEP, document)


def set_step(step_id: int) -> BepAction:
    return BepAction(ActionType.SET_STEP, step_id)


def complete_step(step_id: int) -> BepAction:
    return BepAction(ActionType.COMPLETE_STEP, step_id)


def update_project_info(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_PROJECT_INFO, dict(changes))


def prepopulate_from_project(project: Project) -> BepAction:
    return BepAction(ActionType.PREPOPULATE_FROM_PROJECT, project)


def set_parties(parties: List[ProjectParty]) -> BepAction:
    return BepAction(ActionType.SET_PARTIES, list(parties))


def add_party(party: ProjectParty) -> BepAction:
    return BepAction(ActionType.ADD_PARTY, party)


def update_party(party_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_PARTY, ItemUpdate(party_id, dict(changes)))


def remove_party(party_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_PARTY, party_id)


def update_information_requirements(changes: Dict[str, Any]) -> BepAction:
    """Replace whole OIR/AIR/PIR/EIR blocks, e.g. ``{"oir": OrganisationalInformationRequirements(...)}``."""
    return BepAction(ActionType.UPDATE_INFORMATION_REQUIREMENTS, dict(changes))


def update_oir(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_OIR, dict(changes))


def update_air(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_AIR, dict(changes))


def update_pir(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_PIR, dict(changes))


def update_eir(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_EIR, dict(changes))


def set_loin_elements(elements: List[ElementLOIN]) -> BepAction:
    return BepAction(ActionType.SET_LOIN_ELEMENTS, list(elements))


def add_loin_element(element: ElementLOIN) -> BepAction:
    return BepAction(ActionType.ADD_LOIN_ELEMENT, element)


def update_loin_element(element_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_LOIN_ELEMENT, ItemUpdate(element_id, dict(changes)))


def remove_loin_element(element_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_LOIN_ELEMENT, element_id)


def update_cde(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_CDE, dict(changes))


def update_naming_convention(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_NAMING_CONVENTION, dict(changes))


def update_standards(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_STANDARDS, dict(changes))


def update_coordinate_system(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_COORDINATE_SYSTEM, dict(changes))


def update_software_it(changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_SOFTWARE_IT, dict(changes))


def add_authoring_software(item: SoftwareItem) -> BepAction:
    return BepAction(ActionType.ADD_AUTHORING_SOFTWARE, item)


def remove_authoring_software(item_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_AUTHORING_SOFTWARE, item_id)


def add_coordination_software(item: SoftwareItem) -> BepAction:
    return BepAction(ActionType.ADD_COORDINATION_SOFTWARE, item)


def remove_coordination_software(item_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_COORDINATION_SOFTWARE, item_id)


def add_file_format(file_format: FileFormat) -> BepAction:
    return BepAction(ActionType.ADD_FILE_FORMAT, file_format)


def set_file_formats(file_formats: List[FileFormat]) -> BepAction:
    return BepAction(ActionType.SET_FILE_FORMATS, list(file_formats))


def add_milestone(milestone: Milestone) -> BepAction:
    return BepAction(ActionType.ADD_MILESTONE, milestone)


def update_milestone(milestone_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_MILESTONE, ItemUpdate(milestone_id, dict(changes)))


def remove_milestone(milestone_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_MILESTONE, milestone_id)


def add_model_deliverable(deliverable: ModelDeliverable) -> BepAction:
    return BepAction(ActionType.ADD_MODEL_DELIVERABLE, deliverable)


def update_model_deliverable(deliverable_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_MODEL_DELIVERABLE, ItemUpdate(deliverable_id, dict(changes)))


def remove_model_deliverable(deliverable_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_MODEL_DELIVERABLE, deliverable_id)


def set_midp(entries: List[MIDPEntry]) -> BepAction:
    return BepAction(ActionType.SET_MIDP, list(entries))


def add_midp_entry(entry: MIDPEntry) -> BepAction:
    return BepAction(ActionType.ADD_MIDP_ENTRY, entry)


def remove_midp_entry(entry_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_MIDP_ENTRY, entry_id)


def set_roles(roles: List[BIMRole]) -> BepAction:
    return BepAction(ActionType.SET_ROLES, list(roles))


def add_role(role: BIMRole) -> BepAction:
    return BepAction(ActionType.ADD_ROLE, role)


def update_role(role_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_ROLE, ItemUpdate(role_id, dict(changes)))


def remove_role(role_id: str) -> BepAction:
    return BepAction(ActionType.REMOVE_ROLE, role_id)


def set_raci(entries: List[RACIEntry]) -> BepAction:
    return BepAction(ActionType.SET_RACI, list(entries))


def update_raci_entry(entry_id: str, changes: Dict[str, Any]) -> BepAction:
    return BepAction(ActionType.UPDATE_RACI_ENTRY, ItemUpdate(entry_id, dict(changes)))
