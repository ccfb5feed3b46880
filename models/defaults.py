# -*- coding: utf-8 -*-
"""
Reference data and factories for new BEP documents.

Wizard step metadata, LOIN level definitions, the ISO 19650-2 naming
convention, default status/suitability codes and RACI activities. Factories
take an ``IdGenerator`` so ids are deterministic under test.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from app.config import Config
from utils.datetime_utils import utc_now
from utils.id_generator import IdGenerator, UuidIdGenerator

from .bep_document import BEPDocument
from .cde import CDEConfiguration, NamingConvention, NamingField, StatusCode, SuitabilityCode
from .deliverables import MIDPEntry, Milestone, ModelDeliverable
from .enums import BepStatus, CDEState, PartyRole
from .loin import ElementLOIN
from .party import ProjectParty
from .roles import BIMRole, RACIEntry, RolesAndResponsibilities
from .software import SoftwareItem
from .standards import StandardsMethods


@dataclass(frozen=True)
class WizardStep:
    id: int
    title: str
    short_title: str
    description: str
    icon: str


@dataclass(frozen=True)
class LevelDefinition:
    """Plain-language explanation of one LOIN level."""
    value: str
    label: str
    description: str
    example: str = ""
    typical: str = ""
    properties: Tuple[str, ...] = field(default_factory=tuple)


# ============================================================================
# Wizard steps
# ============================================================================

WIZARD_STEPS: Tuple[WizardStep, ...] = (
    WizardStep(1, "Project Information", "Project",
               "Basic project details, client information, and project parameters",
               "building-2"),
    WizardStep(2, "Project Parties & Stakeholders", "Parties",
               "Define the appointing party, lead appointed party, and all appointed parties",
               "users"),
    WizardStep(3, "Information Requirements", "Requirements",
               "OIR, AIR, PIR, and EIR as defined by ISO 19650",
               "clipboard-list"),
    WizardStep(4, "Level of Information Need", "LOIN",
               "Define geometrical detail, alphanumeric information, and documentation "
               "requirements per BS EN 17412-1",
               "layers"),
    WizardStep(5, "CDE & Information Management", "CDE",
               "Common Data Environment setup, naming conventions, status codes, and workflows",
               "database"),
    WizardStep(6, "Standards, Methods & Procedures", "Standards",
               "Modelling standards, classification systems, coordinate strategy, "
               "and quality assurance",
               "book-open"),
    WizardStep(7, "Software & IT Infrastructure", "Software",
               "Authoring tools, coordination software, file formats, and interoperability",
               "monitor"),
    WizardStep(8, "Deliverables & Milestones", "Deliverables",
               "Information delivery milestones, model deliverables, and MIDP",
               "calendar"),
    WizardStep(9, "Roles & Responsibilities", "Roles",
               "Information management roles and RACI matrix",
               "shield-check"),
    WizardStep(10, "Review & Generate", "Generate",
               "Review all sections and generate the final BEP document",
               "file-text"),
)


# ============================================================================
# Level of Information Need definitions
# ============================================================================

GEOMETRY_LEVELS: Tuple[LevelDefinition, ...] = (
    LevelDefinition(
        "symbolic", "Symbolic",
        "A 2D symbol or marker indicating presence and location only. No 3D geometry.",
        example="A symbol on a plan showing a fire extinguisher location.",
        typical="Stage 0-1",
    ),
    LevelDefinition(
        "conceptual", "Conceptual",
        "Simple 3D mass or volume showing approximate size, shape, and position. "
        "Used for early-stage spatial planning.",
        example="A rectangular block representing a building footprint and height.",
        typical="Stage 1-2",
    ),
    LevelDefinition(
        "approximate", "Approximate",
        "Recognisable 3D shape with approximate dimensions. The object is identifiable "
        "but not dimensionally precise.",
        example="A door with correct swing direction and approximate opening size.",
        typical="Stage 2-3",
    ),
    LevelDefinition(
        "precise", "Precise",
        "Accurate 3D representation with correct dimensions, shape, and key features. "
        "Suitable for coordination and construction.",
        example="A window with exact frame dimensions, opening type, and mullion positions.",
        typical="Stage 3-4",
    ),
    LevelDefinition(
        "fabrication", "Fabrication",
        "Highly detailed model suitable for manufacturing or fabrication. Includes fixings, "
        "connections, and tolerances.",
        example="A steelwork connection with bolt positions, weld details, and material callouts.",
        typical="Stage 4-5",
    ),
)

INFORMATION_LEVELS: Tuple[LevelDefinition, ...] = (
    LevelDefinition(
        "basic", "Basic",
        'Classification and identity only. The element is categorised (e.g., "wall", "door") '
        "with a unique reference.",
        typical="Stage 0-1",
        properties=("Uniclass classification", "Element ID", "Description"),
    ),
    LevelDefinition(
        "scheduled", "Scheduled",
        "Key performance and planning data. Enough to schedule and quantify elements for "
        "early cost planning.",
        typical="Stage 2-3",
        properties=("Dimensions", "Area/Volume", "Material type", "Fire rating", "U-value"),
    ),
    LevelDefinition(
        "specified", "Specified",
        "Full specification data. The element is fully defined with performance requirements "
        "and product standards.",
        typical="Stage 3-4",
        properties=("Full specification", "Performance criteria", "Standards compliance",
                    "Colour/finish", "Acoustic rating"),
    ),
    LevelDefinition(
        "procurement", "Procurement",
        "Manufacturer-specific data for procurement and installation. Includes product "
        "references and lead times.",
        typical="Stage 4-5",
        properties=("Manufacturer", "Product reference", "Cost data", "Lead time",
                    "Installation requirements", "Warranty"),
    ),
    LevelDefinition(
        "operations", "Operations",
        "Full asset data for facilities management and operations. Includes maintenance "
        "schedules and lifecycle data.",
        typical="Stage 6-7",
        properties=("Serial numbers", "Maintenance schedule", "Replacement cost",
                    "Expected life", "O&M manuals", "Spare parts"),
    ),
)

DOCUMENTATION_LEVELS: Tuple[LevelDefinition, ...] = (
    LevelDefinition("none", "None Required",
                    "No supporting documentation required for this element at this stage."),
    LevelDefinition("basic", "Basic",
                    "General product literature or catalogue data sheets."),
    LevelDefinition("standard", "Standard",
                    "Detailed product data sheets, installation guides, test certificates, "
                    "and compliance documentation."),
    LevelDefinition("comprehensive", "Comprehensive",
                    "Full O&M manuals, as-built records, commissioning data, warranties, "
                    "and health & safety files."),
)

DEFAULT_ELEMENT_TYPES: Tuple[str, ...] = (
    "Substructure / Foundations",
    "Structural Frame",
    "Upper Floors",
    "Roof",
    "External Walls",
    "Windows & External Doors",
    "Internal Walls & Partitions",
    "Internal Doors",
    "Stairs & Ramps",
    "Ceiling Finishes",
    "Floor Finishes",
    "Mechanical Services (HVAC)",
    "Electrical Services",
    "Plumbing & Drainage",
    "Fire Protection Systems",
    "Lifts & Escalators",
    "External Works",
    "Furniture & Equipment",
)


# ============================================================================
# CDE defaults (BS 1192 / ISO 19650-2)
# ============================================================================

DEFAULT_SUITABILITY_CODES: Tuple[SuitabilityCode, ...] = (
    SuitabilityCode("S0", "Work In Progress (WIP)"),
    SuitabilityCode("S1", "Fit for Coordination"),
    SuitabilityCode("S2", "Fit for Information"),
    SuitabilityCode("S3", "Fit for Review & Comment"),
    SuitabilityCode("S4", "Fit for Stage Approval"),
    SuitabilityCode("S6", "Fit for PIM Authorisation"),
    SuitabilityCode("S7", "Fit for AIM Authorisation"),
    SuitabilityCode("CR", "As-Built / Record"),
)

DEFAULT_STATUS_CODES: Tuple[StatusCode, ...] = (
    StatusCode("P01", "Preliminary issue", CDEState.WORK_IN_PROGRESS),
    StatusCode("S1", "First shared issue", CDEState.SHARED),
    StatusCode("A1", "First approved issue", CDEState.PUBLISHED),
    StatusCode("CR", "As-constructed record", CDEState.ARCHIVE),
)

DEFAULT_NAMING_FIELDS: Tuple[NamingField, ...] = (
    NamingField("Project", "Project code", 6, "BP2501"),
    NamingField("Originator", "Organisation code", 6, "BAI"),
    NamingField("Volume/System", "Volume or system zone", 6, "ZZ"),
    NamingField("Level", "Level or location", 6, "01"),
    NamingField("Type", "Information container type", 2, "DR"),
    NamingField("Discipline", "Discipline code", 2, "A"),
    NamingField("Number", "Sequential number", 6, "0001"),
)

NAMING_STANDARD = "ISO 19650-2"
NAMING_EXAMPLE = "BP2501-BAI-ZZ-01-DR-A-0001"
DEFAULT_MEASUREMENT_UNITS = "Metric (mm)"


# ============================================================================
# Roles & RACI
# ============================================================================

DEFAULT_RACI_ACTIVITIES: Tuple[Tuple[str, str], ...] = (
    ("raci-1", "BEP Development & Maintenance"),
    ("raci-2", "Model Authoring"),
    ("raci-3", "Model Coordination & Clash Detection"),
    ("raci-4", "Information Exchange Approval"),
    ("raci-5", "CDE Administration"),
    ("raci-6", "Quality Assurance & Compliance Checks"),
    ("raci-7", "Information Security Management"),
    ("raci-8", "Data Drop / Milestone Deliverables"),
    ("raci-9", "Training & Capability Development"),
    ("raci-10", "Health & Safety File Contribution"),
)

DEFAULT_ROLE_TITLES: Tuple[str, ...] = (
    "BIM/Information Manager",
    "Lead BIM Coordinator",
    "BIM Coordinator (Architecture)",
    "BIM Coordinator (Structures)",
    "BIM Coordinator (MEP)",
    "Task Team Manager",
    "CDE Administrator",
    "Design Manager",
    "Project Manager",
    "Client BIM Advisor",
)

DEFAULT_RESPONSIBILITIES: Dict[str, Tuple[str, ...]] = {
    "BIM/Information Manager": (
        "Manage the Common Data Environment (CDE)",
        "Enforce information management procedures",
        "Review and approve information exchanges",
        "Maintain the BEP and ensure compliance",
        "Coordinate information delivery milestones",
    ),
    "Lead BIM Coordinator": (
        "Federate discipline models",
        "Run clash detection and coordination reviews",
        "Manage BCF issues and resolution tracking",
        "Ensure models comply with BEP standards",
        "Coordinate between task teams",
    ),
    "Task Team Manager": (
        "Manage task team information production",
        "Ensure TIDP deliverables are met on time",
        "Perform internal QA before sharing",
        "Maintain model integrity within discipline",
    ),
    "CDE Administrator": (
        "Set up and maintain CDE folder structure",
        "Manage user access and permissions",
        "Ensure CDE workflow states are applied correctly",
        "Archive superseded information",
    ),
}


# ============================================================================
# Factories
# ============================================================================

_default_ids = UuidIdGenerator()


def default_raci_matrix() -> List[RACIEntry]:
    """Fresh copy of the ten default RACI rows."""
    return [RACIEntry(id=raci_id, activity=activity) for raci_id, activity in DEFAULT_RACI_ACTIVITIES]


def create_empty_bep(
    id_generator: Optional[IdGenerator] = None,
    clock: Callable[[], datetime] = utc_now
) -> BEPDocument:
    """
    Create a new draft BEP with the default CDE and RACI content.

    Every default list is copied so documents never share mutable state.

    Args:
        id_generator: Source of the document id (default: UUID4)
        clock: Source of created/modified timestamps

    Returns:
        New BEPDocument at step 1
    """
    id_generator = id_generator or _default_ids
    now = clock()

    return BEPDocument(
        id=id_generator.new_id(),
        version=Config.BEP_INITIAL_VERSION,
        created_date=now,
        last_modified=now,
        status=BepStatus.DRAFT,
        current_step=1,
        completed_steps=[],
        cde_configuration=CDEConfiguration(
            naming_convention=NamingConvention(
                standard=NAMING_STANDARD,
                separator="-",
                fields=[replace(f) for f in DEFAULT_NAMING_FIELDS],
                example=NAMING_EXAMPLE,
            ),
            status_codes=[replace(code) for code in DEFAULT_STATUS_CODES],
            suitability_codes=[replace(code) for code in DEFAULT_SUITABILITY_CODES],
        ),
        standards_methods=StandardsMethods(measurement_units=DEFAULT_MEASUREMENT_UNITS),
        roles_and_responsibilities=RolesAndResponsibilities(raci_matrix=default_raci_matrix()),
    )


def create_empty_party(id_generator: Optional[IdGenerator] = None) -> ProjectParty:
    """New appointed party with no details filled in."""
    return ProjectParty(id=(id_generator or _default_ids).new_id(),
                        role=PartyRole.APPOINTED_PARTY)


def create_default_element(element_type: str,
                           id_generator: Optional[IdGenerator] = None) -> ElementLOIN:
    """LOIN element for ``element_type``: 3D geometry, Uniclass 2015, levels unset."""
    return ElementLOIN(id=(id_generator or _default_ids).new_id(), element_type=element_type)


def create_software_item(name: str, vendor: str = "", purpose: str = "", discipline: str = "",
                         id_generator: Optional[IdGenerator] = None) -> SoftwareItem:
    return SoftwareItem(
        id=(id_generator or _default_ids).new_id(),
        name=name,
        vendor=vendor,
        purpose=purpose,
        discipline=discipline,
    )


def create_milestone(id_generator: Optional[IdGenerator] = None) -> Milestone:
    return Milestone(id=(id_generator or _default_ids).new_id())


def create_model_deliverable(id_generator: Optional[IdGenerator] = None) -> ModelDeliverable:
    return ModelDeliverable(id=(id_generator or _default_ids).new_id())


def create_midp_entry(id_generator: Optional[IdGenerator] = None) -> MIDPEntry:
    """New MIDP row with status "Not Started"."""
    return MIDPEntry(id=(id_generator or _default_ids).new_id(), status="Not Started")


def create_role(title: str, id_generator: Optional[IdGenerator] = None) -> BIMRole:
    """
    New role, pre-filled with the default responsibilities for known titles.

    Args:
        title: Role title, usually one of DEFAULT_ROLE_TITLES
        id_generator: Source of the role id

    Returns:
        BIMRole with an empty organisation and person name
    """
    return BIMRole(
        id=(id_generator or _default_ids).new_id(),
        title=title,
        responsibilities=list(DEFAULT_RESPONSIBILITIES.get(title, ())),
    )
