# -*- coding: utf-8 -*-
"""
Step 6: Standards, Methods & Procedures.
"""

from dataclasses import dataclass, field
from typing import List

from .enums import ClassificationSystem
from .serialization import SerializableMixin


@dataclass
class CoordinateSystem(SerializableMixin):
    project_base_point: str = ""
    survey_point: str = ""
    datum: str = ""
    grid_reference: str = ""
    true_north: str = ""


@dataclass
class StandardsMethods(SerializableMixin):
    modelling_standards: List[str] = field(default_factory=list)
    drawing_standards: List[str] = field(default_factory=list)
    classification_system: ClassificationSystem = ClassificationSystem.UNSET
    coordinate_system: CoordinateSystem = field(default_factory=CoordinateSystem)
    measurement_units: str = ""
    tolerances: str = ""
    clash_detection_process: str = ""
    quality_assurance: str = ""
