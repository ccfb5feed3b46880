# -*- coding: utf-8 -*-
"""
Step 3: Information Requirements (OIR / AIR / PIR / EIR).

OIR, AIR and PIR can each be switched off with ``exists``. The EIR is
always relevant and has no such flag.
"""

from dataclasses import dataclass, field
from typing import List

from .serialization import SerializableMixin


@dataclass
class OrganisationalInformationRequirements(SerializableMixin):
    exists: bool = False
    description: str = ""
    objectives: List[str] = field(default_factory=list)


@dataclass
class AssetInformationRequirements(SerializableMixin):
    exists: bool = False
    description: str = ""
    asset_management_system: str = ""
    operational_requirements: List[str] = field(default_factory=list)


@dataclass
class ProjectInformationRequirements(SerializableMixin):
    exists: bool = False
    description: str = ""
    decision_points: List[str] = field(default_factory=list)
    key_questions: List[str] = field(default_factory=list)


@dataclass
class ExchangeInformationRequirements(SerializableMixin):
    information_standard: str = ""
    information_production_methods: str = ""
    reference_information: str = ""
    shared_resources: str = ""
    information_delivery_milestones: List[str] = field(default_factory=list)
    acceptance_criteria: str = ""


@dataclass
class InformationRequirements(SerializableMixin):
    oir: OrganisationalInformationRequirements = field(
        default_factory=OrganisationalInformationRequirements
    )
    air: AssetInformationRequirements = field(default_factory=AssetInformationRequirements)
    pir: ProjectInformationRequirements = field(default_factory=ProjectInformationRequirements)
    eir: ExchangeInformationRequirements = field(default_factory=ExchangeInformationRequirements)
