# -*- coding: utf-8 -*-
"""
BEP Generator Data Models
"""

from .enums import (
    BepStatus,
    BimCapability,
    CDEState,
    ClassificationSystem,
    Dimensionality,
    DocumentLevel,
    GeometryLevel,
    InformationLevel,
    PartyRole,
    ProcurementRoute,
    ProjectStage,
    ProjectType,
)
from .project_information import ProjectInformation
from .party import ProjectParty
from .information_requirements import (
    AssetInformationRequirements,
    ExchangeInformationRequirements,
    InformationRequirements,
    OrganisationalInformationRequirements,
    ProjectInformationRequirements,
)
from .loin import AlphanumericDetail, DocumentationDetail, ElementLOIN, GeometricalDetail, LevelOfInformationNeed
from .cde import CDEConfiguration, NamingConvention, NamingField, StatusCode, SuitabilityCode
from .standards import CoordinateSystem, StandardsMethods
from .software import FileFormat, SoftwareIT, SoftwareItem
from .deliverables import DeliverablesAndMilestones, MIDPEntry, Milestone, ModelDeliverable
from .roles import BIMRole, RACIEntry, RolesAndResponsibilities
from .bep_document import BEPDocument
from .project import Project

__all__ = [
    "BepStatus",
    "BimCapability",
    "CDEState",
    "ClassificationSystem",
    "Dimensionality",
    "DocumentLevel",
    "GeometryLevel",
    "InformationLevel",
    "PartyRole",
    "ProcurementRoute",
    "ProjectStage",
    "ProjectType",
    "ProjectInformation",
    "ProjectParty",
    "AssetInformationRequirements",
    "ExchangeInformationRequirements",
    "InformationRequirements",
    "OrganisationalInformationRequirements",
    "ProjectInformationRequirements",
    "AlphanumericDetail",
    "DocumentationDetail",
    "ElementLOIN",
    "GeometricalDetail",
    "LevelOfInformationNeed",
    "CDEConfiguration",
    "NamingConvention",
    "NamingField",
    "StatusCode",
    "SuitabilityCode",
    "CoordinateSystem",
    "StandardsMethods",
    "FileFormat",
    "SoftwareIT",
    "SoftwareItem",
    "DeliverablesAndMilestones",
    "MIDPEntry",
    "Milestone",
    "ModelDeliverable",
    "BIMRole",
    "RACIEntry",
    "RolesAndResponsibilities",
    "BEPDocument",
    "Project",
]
