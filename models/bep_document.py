# -*- coding: utf-8 -*-
"""
BEP document aggregate.

A BIM Execution Plan holds exactly one instance of each of the nine content
sections plus the wizard progress (``current_step``, ``completed_steps``).
Instances are treated as immutable values: every change goes through the
reducer, which returns a new document and shares untouched sections.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from utils.datetime_utils import utc_now

from .cde import CDEConfiguration
from .deliverables import DeliverablesAndMilestones
from .enums import BepStatus
from .information_requirements import InformationRequirements
from .loin import LevelOfInformationNeed
from .party import ProjectParty
from .project_information import ProjectInformation
from .roles import RolesAndResponsibilities
from .serialization import SerializableMixin
from .software import SoftwareIT
from .standards import StandardsMethods


@dataclass
class BEPDocument(SerializableMixin):
    """Root aggregate of the BEP generator."""

    # Identity / lifecycle
    id: str = ""
    version: str = "0.1"
    created_date: datetime = field(default_factory=utc_now)
    last_modified: datetime = field(default_factory=utc_now)
    status: BepStatus = BepStatus.DRAFT

    # Wizard progress
    current_step: int = 1
    completed_steps: List[int] = field(default_factory=list)

    # Content sections (steps 1-9)
    project_information: ProjectInformation = field(default_factory=ProjectInformation)
    project_parties: List[ProjectParty] = field(default_factory=list)
    information_requirements: InformationRequirements = field(
        default_factory=InformationRequirements
    )
    level_of_information_need: LevelOfInformationNeed = field(
        default_factory=LevelOfInformationNeed
    )
    cde_configuration: CDEConfiguration = field(default_factory=CDEConfiguration)
    standards_methods: StandardsMethods = field(default_factory=StandardsMethods)
    software_it: SoftwareIT = field(default_factory=SoftwareIT, metadata={"json": "softwareIT"})
    deliverables_and_milestones: DeliverablesAndMilestones = field(
        default_factory=DeliverablesAndMilestones
    )
    roles_and_responsibilities: RolesAndResponsibilities = field(
        default_factory=RolesAndResponsibilities
    )

    def is_step_completed(self, step_id: int) -> bool:
        """Check if a step is completed."""
        return step_id in self.completed_steps

    @property
    def display_number(self) -> str:
        """Project number used in file names, "draft" until one is entered."""
        return self.project_information.project_number or "draft"
