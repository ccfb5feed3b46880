# -*- coding: utf-8 -*-
"""
Step 8: Deliverables & Milestones, including the MIDP.
"""

from dataclasses import dataclass, field
from typing import List

from .enums import ProjectStage
from .serialization import SerializableMixin


@dataclass
class Milestone(SerializableMixin):
    """Information delivery milestone (data drop)."""
    id: str = ""
    name: str = ""
    date: str = ""
    stage: ProjectStage = ProjectStage.UNSET
    description: str = ""
    deliverables: List[str] = field(default_factory=list)


@dataclass
class ModelDeliverable(SerializableMixin):
    id: str = ""
    model_name: str = ""
    discipline: str = ""
    description: str = ""
    responsible_party: str = ""
    delivery_date: str = ""
    format: str = ""


@dataclass
class MIDPEntry(SerializableMixin):
    """Master Information Delivery Plan row."""
    id: str = ""
    information_container: str = ""
    description: str = ""
    responsible_party: str = ""
    milestone: str = ""
    status: str = "Not Started"


@dataclass
class DeliverablesAndMilestones(SerializableMixin):
    information_delivery_milestones: List[Milestone] = field(default_factory=list)
    model_deliverables: List[ModelDeliverable] = field(default_factory=list)
    master_information_delivery_plan: List[MIDPEntry] = field(default_factory=list)
