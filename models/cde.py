# -*- coding: utf-8 -*-
"""
Step 5: CDE & Information Management.
"""

from dataclasses import dataclass, field
from typing import List

from .enums import CDEState
from .serialization import SerializableMixin


@dataclass
class NamingField(SerializableMixin):
    """One segment of the container naming convention."""
    name: str = ""
    description: str = ""
    max_length: int = 0
    example: str = ""


@dataclass
class NamingConvention(SerializableMixin):
    standard: str = ""
    separator: str = "-"
    fields: List[NamingField] = field(default_factory=list)
    example: str = ""


@dataclass
class StatusCode(SerializableMixin):
    code: str = ""
    description: str = ""
    cde_state: CDEState = CDEState.WORK_IN_PROGRESS


@dataclass
class SuitabilityCode(SerializableMixin):
    code: str = ""
    description: str = ""


@dataclass
class CDEConfiguration(SerializableMixin):
    platform: str = ""
    access_method: str = ""
    folder_structure: str = ""
    naming_convention: NamingConvention = field(default_factory=NamingConvention)
    status_codes: List[StatusCode] = field(default_factory=list)
    revision_strategy: str = ""
    suitability_codes: List[SuitabilityCode] = field(default_factory=list)
