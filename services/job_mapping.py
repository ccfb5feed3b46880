# -*- coding: utf-8 -*-
"""
WorkflowMax job -> local project record mapping.

WorkflowMax keeps most ISO 19650 information in job custom fields; these
functions translate a job payload into the camelCase project record stored
by the local database.
"""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from utils.datetime_utils import to_isoformat, utc_now

SOURCE_WORKFLOWMAX = "WorkflowMax"

# Custom field names as configured in WorkflowMax
FIELD_ISO_IDENTIFIER = "ISO 19650 - Project Identifier"
FIELD_INFORMATION_MANAGER = "Information Manager"
FIELD_RIBA_STAGE = "RIBA Stage (Current)"
FIELD_FRAMEWORK = "Framework Appointed (Under)"
FIELD_PROJECT_SUBMISSION = "Project/Submission"
FIELD_SITE_ADDRESS = "Site Address"
FIELD_WORKS_VALUE = "Works Value"

# Record key -> custom field name, copied verbatim into ``customFields``
EXTRA_CUSTOM_FIELDS = {
    "accLink": "ACC Link",
    "bsrRegistrationNumber": "BSR Registration Number",
    "responsiblePerson": "Responsible Person (RRO)",
    "buildingHeight": "Building Height",
    "numberOfProperties": "Number of Properties",
    "principalAccountablePerson": "Principal Accountable Person",
    "ribaStage": FIELD_RIBA_STAGE,
    "architecturalLead": "Architectural Lead",
    "principalDesignerCDM": "Principal Designer (CDM)",
    "principalDesignerBSA": "Principal Designer (BSA)",
    "contractType": "Contract Type",
    "contractor": "Contractor",
    "funder": "Funder",
    "projectSheet": "Project Sheet",
    "worksValue": FIELD_WORKS_VALUE,
}

# Ordered (keywords, phase); first match wins
_RIBA_STAGE_RULES = (
    (("0", "strategic"), "tender"),
    (("1", "preparation"), "appointment"),
    (("2", "concept"), "mobilisation"),
    (("3", "spatial"), "production"),
    (("4", "technical"), "production"),
    (("5", "manufacturing"), "delivery"),
    (("6", "handover"), "closeout"),
    (("7", "use"), "closeout"),
)

_FRAMEWORK_RULES = (
    (("lead", "principal"), "lead_appointed"),
    (("consultant",), "consultant"),
)

_PROJECT_TYPE_RULES = (
    (("new build",), "newbuild"),
    (("refurb",), "refurbishment"),
    (("extension",), "extension"),
    (("fit", "fitout"), "fitout"),
    (("infrastructure",), "infrastructure"),
)


def _match(value: Optional[str], rules, default: str) -> str:
    if not value:
        return default
    text = value.lower()
    for keywords, result in rules:
        if any(keyword in text for keyword in keywords):
            return result
    return default


def map_riba_stage(riba_stage: Optional[str]) -> str:
    """
    Map a RIBA Plan of Work stage to an ISO 19650 delivery phase.

    Examples:
        >>> map_riba_stage("Stage 2 - Concept Design")
        'mobilisation'
        >>> map_riba_stage(None)
        'production'
    """
    return _match(riba_stage, _RIBA_STAGE_RULES, "production")


def map_framework_role(framework: Optional[str]) -> str:
    """Map the appointing framework to the practice's role on the project."""
    return _match(framework, _FRAMEWORK_RULES, "appointed")


def map_project_type(project_submission: Optional[str]) -> str:
    return _match(project_submission, _PROJECT_TYPE_RULES, "other")


def extract_custom_fields(job: Dict[str, Any]) -> Dict[str, Any]:
    """``{Name: Value}`` from a job's ``CustomFields`` list."""
    return {
        field.get("Name"): field.get("Value")
        for field in job.get("CustomFields") or []
    }


def map_job_to_project(
    job: Dict[str, Any],
    clock: Callable[[], datetime] = utc_now
) -> Dict[str, Any]:
    """
    Map a WorkflowMax job payload to a local project record.

    Args:
        job: Job as returned by ``/job.api/get/<id>``
        clock: Source of the ``syncedAt`` timestamp

    Returns:
        Project record with camelCase keys, ``source == "WorkflowMax"``
    """
    custom = extract_custom_fields(job)
    client = job.get("Client") or {}
    manager = job.get("Manager") or {}

    return {
        # Basic info
        "projectName": job.get("Name"),
        "projectNumber": job.get("Number"),
        "clientName": client.get("Name"),
        "projectDescription": job.get("Description"),
        "projectStartDate": job.get("StartDate"),
        "projectValue": job.get("Budget") or custom.get(FIELD_WORKS_VALUE),

        "isoNumber": custom.get(FIELD_ISO_IDENTIFIER) or job.get("Number"),

        # Team
        "projectLead": manager.get("Name"),
        "bimManager": custom.get(FIELD_INFORMATION_MANAGER),

        "projectPhase": map_riba_stage(custom.get(FIELD_RIBA_STAGE)),
        "baileyRole": map_framework_role(custom.get(FIELD_FRAMEWORK)),
        "projectType": map_project_type(custom.get(FIELD_PROJECT_SUBMISSION)),
        "projectLocation": custom.get(FIELD_SITE_ADDRESS),

        "customFields": {
            key: custom.get(name) for key, name in EXTRA_CUSTOM_FIELDS.items()
        },

        # Metadata
        "wfmJobId": job.get("ID"),
        "wfmJobNumber": job.get("Number"),
        "wfmStatus": job.get("Status"),
        "syncedAt": to_isoformat(clock()),
        "source": SOURCE_WORKFLOWMAX,
    }
