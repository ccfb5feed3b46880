# -*- coding: utf-8 -*-
"""
Step 1: Project Information.
"""

from dataclasses import dataclass

from .enums import ProcurementRoute, ProjectStage, ProjectType
from .serialization import SerializableMixin


@dataclass
class ProjectInformation(SerializableMixin):
    """Scalar project details. Empty strings mean "not entered yet"."""

    project_name: str = ""
    project_number: str = ""
    project_address: str = ""
    project_description: str = ""
    project_type: ProjectType = ProjectType.UNSET
    project_value: str = ""
    procurement_route: ProcurementRoute = ProcurementRoute.UNSET
    project_stage: ProjectStage = ProjectStage.UNSET
    start_date: str = ""
    completion_date: str = ""
    client_name: str = ""
    client_organisation: str = ""
    client_contact: str = ""
    client_email: str = ""
