# -*- coding: utf-8 -*-
"""
Project record.

The flat project shape that feeds ``PREPOPULATE_FROM_PROJECT``. Records come
from the local project database, manual entry or a WorkflowMax import.
"""

from dataclasses import dataclass

from .enums import ProcurementRoute, ProjectStage, ProjectType
from .serialization import SerializableMixin


@dataclass
class Project(SerializableMixin):
    id: str = ""
    name: str = ""
    number: str = ""
    client: str = ""
    type: ProjectType = ProjectType.UNSET
    stage: ProjectStage = ProjectStage.UNSET
    address: str = ""
    description: str = ""
    value: str = ""
    procurement_route: ProcurementRoute = ProcurementRoute.UNSET
    start_date: str = ""
    completion_date: str = ""
    client_contact: str = ""
    client_email: str = ""
