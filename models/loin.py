# -*- coding: utf-8 -*-
"""
Step 4: Level of Information Need (BS EN 17412-1).

Each element carries three independent detail blocks: geometry,
alphanumeric information and documentation.
"""

from dataclasses import dataclass, field
from typing import List

from .enums import Dimensionality, DocumentLevel, GeometryLevel, InformationLevel
from .serialization import SerializableMixin


@dataclass
class GeometricalDetail(SerializableMixin):
    level: GeometryLevel = GeometryLevel.UNSET
    description: str = ""
    dimensionality: Dimensionality = Dimensionality.THREE_D
    appearance: bool = False
    parametric: bool = False


@dataclass
class AlphanumericDetail(SerializableMixin):
    level: InformationLevel = InformationLevel.UNSET
    description: str = ""
    properties: List[str] = field(default_factory=list)
    classification: str = "Uniclass 2015"


@dataclass
class DocumentationDetail(SerializableMixin):
    level: DocumentLevel = DocumentLevel.UNSET
    description: str = ""
    required_documents: List[str] = field(default_factory=list)


@dataclass
class ElementLOIN(SerializableMixin):
    """Information need for one element type (e.g. "External Walls")."""

    id: str = ""
    element_type: str = ""
    purpose: str = ""
    geometrical_information: GeometricalDetail = field(default_factory=GeometricalDetail)
    alphanumeric_information: AlphanumericDetail = field(default_factory=AlphanumericDetail)
    documentation: DocumentationDetail = field(default_factory=DocumentationDetail)


@dataclass
class LevelOfInformationNeed(SerializableMixin):
    elements: List[ElementLOIN] = field(default_factory=list)
