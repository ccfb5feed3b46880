# -*- coding: utf-8 -*-
"""
Step 7: Software & IT Infrastructure.
"""

from dataclasses import dataclass, field
from typing import List

from .serialization import SerializableMixin


@dataclass
class SoftwareItem(SerializableMixin):
    id: str = ""
    name: str = ""
    version: str = ""
    vendor: str = ""
    purpose: str = ""
    discipline: str = ""


@dataclass
class FileFormat(SerializableMixin):
    format: str = ""
    purpose: str = ""
    version: str = ""


@dataclass
class SoftwareIT(SerializableMixin):
    authoring_software: List[SoftwareItem] = field(default_factory=list)
    coordination_software: List[SoftwareItem] = field(default_factory=list)
    cde_platform: str = ""
    file_formats: List[FileFormat] = field(default_factory=list)
    hardware_requirements: str = ""
    network_requirements: str = ""
    interoperability_approach: str = ""
