# -*- coding: utf-8 -*-
"""
Closed value sets used by the BEP document.

Members are ``str`` valued so they compare equal to the plain strings found
in exported JSON. ``UNSET`` ("") marks fields the user has not chosen yet.
"""

from enum import Enum


class ProjectType(str, Enum):
    UNSET = ""
    NEW_BUILD = "new-build"
    REFURBISHMENT = "refurbishment"
    EXTENSION = "extension"
    FIT_OUT = "fit-out"
    INFRASTRUCTURE = "infrastructure"
    MIXED_USE = "mixed-use"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"


class ProcurementRoute(str, Enum):
    UNSET = ""
    TRADITIONAL = "traditional"
    DESIGN_AND_BUILD = "design-and-build"
    CONSTRUCTION_MANAGEMENT = "construction-management"
    MANAGEMENT_CONTRACTING = "management-contracting"
    PFI_PPP = "pfi-ppp"
    FRAMEWORK = "framework"
    TWO_STAGE = "two-stage"


class ProjectStage(str, Enum):
    """RIBA Plan of Work stages."""
    UNSET = ""
    STRATEGIC_DEFINITION = "0-strategic-definition"
    PREPARATION_AND_BRIEFING = "1-preparation-and-briefing"
    CONCEPT_DESIGN = "2-concept-design"
    SPATIAL_COORDINATION = "3-spatial-coordination"
    TECHNICAL_DESIGN = "4-technical-design"
    MANUFACTURING_AND_CONSTRUCTION = "5-manufacturing-and-construction"
    HANDOVER = "6-handover"
    USE = "7-use"


class PartyRole(str, Enum):
    """ISO 19650 party roles."""
    APPOINTING_PARTY = "appointing-party"
    LEAD_APPOINTED_PARTY = "lead-appointed-party"
    APPOINTED_PARTY = "appointed-party"
    INFORMATION_MANAGER = "information-manager"
    TASK_TEAM_MANAGER = "task-team-manager"
    TASK_TEAM_MEMBER = "task-team-member"


class BimCapability(str, Enum):
    UNSET = ""
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class GeometryLevel(str, Enum):
    UNSET = ""
    SYMBOLIC = "symbolic"
    CONCEPTUAL = "conceptual"
    APPROXIMATE = "approximate"
    PRECISE = "precise"
    FABRICATION = "fabrication"


class InformationLevel(str, Enum):
    UNSET = ""
    BASIC = "basic"
    SCHEDULED = "scheduled"
    SPECIFIED = "specified"
    PROCUREMENT = "procurement"
    OPERATIONS = "operations"


class DocumentLevel(str, Enum):
    UNSET = ""
    NONE = "none"
    BASIC = "basic"
    STANDARD = "standard"
    COMPREHENSIVE = "comprehensive"


class Dimensionality(str, Enum):
    TWO_D = "2D"
    THREE_D = "3D"
    BOTH = "both"


class CDEState(str, Enum):
    WORK_IN_PROGRESS = "work-in-progress"
    SHARED = "shared"
    PUBLISHED = "published"
    ARCHIVE = "archive"


class ClassificationSystem(str, Enum):
    UNSET = ""
    UNICLASS_2015 = "uniclass-2015"
    OMNICLASS = "omniclass"
    MASTERFORMAT = "masterformat"
    UNIFORMAT = "uniformat"
    NRM = "nrm"
    OTHER = "other"


class BepStatus(str, Enum):
    """Document lifecycle: draft -> in-review -> approved -> superseded."""
    DRAFT = "draft"
    IN_REVIEW = "in-review"
    APPROVED = "approved"
    SUPERSEDED = "superseded"
