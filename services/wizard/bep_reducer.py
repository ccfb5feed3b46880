# -*- coding: utf-8 -*-
"""
BEP reducer.

``reduce(document, action)`` applies one action and returns the next
document. It never mutates its input: changed sections are rebuilt with
``dataclasses.replace`` and every untouched section is shared with the
input document.

Rules:
- Every applied action stamps ``last_modified`` (navigation included).
- ``SET_BEP`` swaps in the payload as-is.
- Item updates/removals whose id is not in the list return the input
  document itself.
- Unknown action tags return the input document and log a warning.
- No bounds check on ``SET_STEP``; the step registry owns the valid range.
"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from models import BEPDocument, Project
from models.serialization import coerce_value, field_types
from services.exceptions import ValidationException
from utils.datetime_utils import utc_now
from utils.helpers import camel_to_snake
from utils.logger import get_logger

from .actions import ActionType, BepAction, ItemUpdate

logger = get_logger(__name__)

Clock = Callable[[], datetime]
Path = Tuple[str, ...]


# ============================================================================
# Action -> target tables
# ============================================================================

# Attribute path from the document to the object being merged
_SECTION_MERGES: Dict[ActionType, Path] = {
    ActionType.UPDATE_PROJECT_INFO: ("project_information",),
    ActionType.UPDATE_INFORMATION_REQUIREMENTS: ("information_requirements",),
    ActionType.UPDATE_OIR: ("information_requirements", "oir"),
    ActionType.UPDATE_AIR: ("information_requirements", "air"),
    ActionType.UPDATE_PIR: ("information_requirements", "pir"),
    ActionType.UPDATE_EIR: ("information_requirements", "eir"),
    ActionType.UPDATE_CDE: ("cde_configuration",),
    ActionType.UPDATE_NAMING_CONVENTION: ("cde_configuration", "naming_convention"),
    ActionType.UPDATE_STANDARDS: ("standards_methods",),
    ActionType.UPDATE_COORDINATE_SYSTEM: ("standards_methods", "coordinate_system"),
    ActionType.UPDATE_SOFTWARE_IT: ("software_it",),
}

# Attribute path from the document to each entity list
_PARTIES: Path = ("project_parties",)
_LOIN_ELEMENTS: Path = ("level_of_information_need", "elements")
_AUTHORING: Path = ("software_it", "authoring_software")
_COORDINATION: Path = ("software_it", "coordination_software")
_FILE_FORMATS: Path = ("software_it", "file_formats")
_MILESTONES: Path = ("deliverables_and_milestones", "information_delivery_milestones")
_DELIVERABLES: Path = ("deliverables_and_milestones", "model_deliverables")
_MIDP: Path = ("deliverables_and_milestones", "master_information_delivery_plan")
_ROLES: Path = ("roles_and_responsibilities", "roles")
_RACI: Path = ("roles_and_responsibilities", "raci_matrix")

_LIST_APPENDS: Dict[ActionType, Path] = {
    ActionType.ADD_PARTY: _PARTIES,
    ActionType.ADD_LOIN_ELEMENT: _LOIN_ELEMENTS,
    ActionType.ADD_AUTHORING_SOFTWARE: _AUTHORING,
    ActionType.ADD_COORDINATION_SOFTWARE: _COORDINATION,
    ActionType.ADD_FILE_FORMAT: _FILE_FORMATS,
    ActionType.ADD_MILESTONE: _MILESTONES,
    ActionType.ADD_MODEL_DELIVERABLE: _DELIVERABLES,
    ActionType.ADD_MIDP_ENTRY: _MIDP,
    ActionType.ADD_ROLE: _ROLES,
}

_LIST_REPLACES: Dict[ActionType, Path] = {
    ActionType.SET_PARTIES: _PARTIES,
    ActionType.SET_LOIN_ELEMENTS: _LOIN_ELEMENTS,
    ActionType.SET_FILE_FORMATS: _FILE_FORMATS,
    ActionType.SET_MIDP: _MIDP,
    ActionType.SET_ROLES: _ROLES,
    ActionType.SET_RACI: _RACI,
}

_ITEM_UPDATES: Dict[ActionType, Path] = {
    ActionType.UPDATE_PARTY: _PARTIES,
    ActionType.UPDATE_LOIN_ELEMENT: _LOIN_ELEMENTS,
    ActionType.UPDATE_MILESTONE: _MILESTONES,
    ActionType.UPDATE_MODEL_DELIVERABLE: _DELIVERABLES,
    ActionType.UPDATE_ROLE: _ROLES,
    ActionType.UPDATE_RACI_ENTRY: _RACI,
}

_ITEM_REMOVALS: Dict[ActionType, Path] = {
    ActionType.REMOVE_PARTY: _PARTIES,
    ActionType.REMOVE_LOIN_ELEMENT: _LOIN_ELEMENTS,
    ActionType.REMOVE_AUTHORING_SOFTWARE: _AUTHORING,
    ActionType.REMOVE_COORDINATION_SOFTWARE: _COORDINATION,
    ActionType.REMOVE_MILESTONE: _MILESTONES,
    ActionType.REMOVE_MODEL_DELIVERABLE: _DELIVERABLES,
    ActionType.REMOVE_MIDP_ENTRY: _MIDP,
    ActionType.REMOVE_ROLE: _ROLES,
}


# ============================================================================
# Structural helpers
# ============================================================================

def _get_path(obj: Any, path: Path) -> Any:
    for name in path:
        obj = getattr(obj, name)
    return obj


def _set_path(obj: Any, path: Path, value: Any) -> Any:
    """Copy-on-write assignment: rebuilds only the objects along ``path``."""
    head = path[0]
    if len(path) == 1:
        return replace(obj, **{head: value})
    return replace(obj, **{head: _set_path(getattr(obj, head), path[1:], value)})


def merge_fields(target: Any, changes: Dict[str, Any], context: str = "") -> Any:
    """
    Shallow-merge ``changes`` into a dataclass instance.

    Keys are attribute names; camelCase JSON keys are accepted too. Values
    are brought to the field's declared type, so JSON-style dicts and enum
    strings become records and enum members. Keys that name no field, and
    values that do not fit their field, are dropped with a warning.

    Args:
        target: Dataclass instance to copy
        changes: Field name -> new value
        context: Label used in log messages

    Returns:
        New instance with the changed fields
    """
    known = target.__dataclass_fields__
    types = field_types(type(target))
    label = context or type(target).__name__
    accepted = {}
    for key, value in changes.items():
        name = key if key in known else camel_to_snake(key)
        if name not in known:
            logger.warning(f"Ignoring unknown field '{key}' for {label}")
            continue
        try:
            accepted[name] = coerce_value(types[name], value, name)
        except (ValidationException, ValueError, TypeError) as e:
            logger.warning(f"Ignoring invalid value for '{key}' on {label}: {e}")
    return replace(target, **accepted)


def _stamp(document: BEPDocument, clock: Clock) -> BEPDocument:
    return replace(document, last_modified=clock())


def _action_type(action: BepAction) -> Optional[ActionType]:
    try:
        return ActionType(action.type)
    except ValueError:
        return None


# ============================================================================
# Operation families
# ============================================================================

def _apply_section_merge(document: BEPDocument, path: Path, changes: Dict[str, Any]) -> BEPDocument:
    section = _get_path(document, path)
    return _set_path(document, path, merge_fields(section, changes, ".".join(path)))


def _apply_append(document: BEPDocument, path: Path, item: Any) -> BEPDocument:
    return _set_path(document, path, [*_get_path(document, path), item])


def _apply_replace(document: BEPDocument, path: Path, items: List[Any]) -> BEPDocument:
    return _set_path(document, path, list(items))


def _apply_item_update(document: BEPDocument, path: Path, update: ItemUpdate) -> Optional[BEPDocument]:
    items = _get_path(document, path)
    found = False
    updated = []
    for item in items:
        if item.id == update.id:
            found = True
            item = merge_fields(item, update.data, f"{path[-1]}[{update.id}]")
        updated.append(item)

    if not found:
        return None
    return _set_path(document, path, updated)


def _apply_item_removal(document: BEPDocument, path: Path, item_id: str) -> Optional[BEPDocument]:
    items = _get_path(document, path)
    remaining = [item for item in items if item.id != item_id]
    if len(remaining) == len(items):
        return None
    return _set_path(document, path, remaining)


def _apply_prepopulate(document: BEPDocument, project: Project) -> BEPDocument:
    # Fields the project record does not carry (originator codes etc.) are kept
    info = replace(
        document.project_information,
        project_name=project.name,
        project_number=project.number,
        project_address=project.address,
        project_description=project.description,
        project_type=project.type,
        project_value=project.value,
        procurement_route=project.procurement_route,
        project_stage=project.stage,
        start_date=project.start_date,
        completion_date=project.completion_date,
        client_name=project.client,
        client_organisation=project.client,
        client_contact=project.client_contact,
        client_email=project.client_email,
    )
    return replace(document, project_information=info)


# ============================================================================
# Reducer
# ============================================================================

def reduce(document: BEPDocument, action: BepAction, clock: Clock = utc_now) -> BEPDocument:
    """
    Apply one action to a document.

    Args:
        document: Current document (never mutated)
        action: Action to apply
        clock: Source of the ``last_modified`` stamp

    Returns:
        The next document, or ``document`` itself for no-op actions
    """
    action_type = _action_type(action)

    if action_type is None:
        logger.warning(f"Unknown action type '{action.type}', document unchanged")
        return document

    if action_type == ActionType.SET_BEP:
        return action.payload

    if action_type == ActionType.SET_STEP:
        return replace(document, current_step=action.payload, last_modified=clock())

    if action_type == ActionType.COMPLETE_STEP:
        completed = document.completed_steps
        if action.payload not in completed:
            completed = [*completed, action.payload]
        return replace(document, completed_steps=completed, last_modified=clock())

    if action_type == ActionType.PREPOPULATE_FROM_PROJECT:
        return _stamp(_apply_prepopulate(document, action.payload), clock)

    if action_type in _SECTION_MERGES:
        return _stamp(_apply_section_merge(document, _SECTION_MERGES[action_type], action.payload), clock)

    if action_type in _LIST_APPENDS:
        return _stamp(_apply_append(document, _LIST_APPENDS[action_type], action.payload), clock)

    if action_type in _LIST_REPLACES:
        return _stamp(_apply_replace(document, _LIST_REPLACES[action_type], action.payload), clock)

    if action_type in _ITEM_UPDATES:
        update = action.payload
        if isinstance(update, dict):
            if not update.get("id"):
                logger.warning(f"{action_type.value}: payload has no id, document unchanged")
                return document
            update = ItemUpdate(update["id"], update.get("data") or {})
        result = _apply_item_update(document, _ITEM_UPDATES[action_type], update)
        if result is None:
            logger.warning(f"{action_type.value}: id '{update.id}' not found, document unchanged")
            return document
        return _stamp(result, clock)

    if action_type in _ITEM_REMOVALS:
        result = _apply_item_removal(document, _ITEM_REMOVALS[action_type], action.payload)
        if result is None:
            logger.warning(f"{action_type.value}: id '{action.payload}' not found, document unchanged")
            return document
        return _stamp(result, clock)

    # Every ActionType member is handled above
    logger.warning(f"No handler for action type '{action_type.value}', document unchanged")
    return document
