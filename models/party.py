# -*- coding: utf-8 -*-
"""
Step 2: Project Parties & Stakeholders.
"""

from dataclasses import dataclass

from .enums import BimCapability, PartyRole
from .serialization import SerializableMixin


@dataclass
class ProjectParty(SerializableMixin):
    """An organisation taking part in the project."""

    id: str = ""
    organisation_name: str = ""
    role: PartyRole = PartyRole.APPOINTED_PARTY
    contact_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    bim_capability: BimCapability = BimCapability.UNSET
    scope: str = ""
