# -*- coding: utf-8 -*-
"""
Step 9: Roles & Responsibilities.
"""

from dataclasses import dataclass, field
from typing import List

from .serialization import SerializableMixin


@dataclass
class BIMRole(SerializableMixin):
    id: str = ""
    title: str = ""
    organisation: str = ""
    person_name: str = ""
    responsibilities: List[str] = field(default_factory=list)


@dataclass
class RACIEntry(SerializableMixin):
    """One activity row of the RACI matrix."""
    id: str = ""
    activity: str = ""
    responsible: str = ""
    accountable: str = ""
    consulted: str = ""
    informed: str = ""


@dataclass
class RolesAndResponsibilities(SerializableMixin):
    roles: List[BIMRole] = field(default_factory=list)
    raci_matrix: List[RACIEntry] = field(default_factory=list)
