# -*- coding: utf-8 -*-
"""
ISO 19650 information container names.

Names follow the practice's file convention:

    <project>-<originator>-<functional>-<spatial>-<form>-<discipline>-<number>_<status>_<revision>

Example:
    >>> generate_container_name(project="BP2501", discipline="A")
    'BP2501-BPG-XX-XX-T-A-0001_S0_P01'
"""

import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional

UNKNOWN_STATUS = "Unknown"

STATUS_DESCRIPTIONS: Dict[str, str] = {
    "S0": "Work in Progress (WIP)",
    "S1": "Suitable for Coordination",
    "S2": "Suitable for Information",
    "S3": "Suitable for Review and Comment",
    "S4": "Suitable for Stage Approval",
    "S5": "Suitable for Contractor Design",
    "A1": "Published",
    "A2": "Published - Amended",
}

# Six hyphen-separated codes, then number, status and revision joined by "_".
# The revision takes the rest of the name.
_NAME_PATTERN = re.compile(
    r"^([^-]+)-([^-]+)-([^-]+)-([^-]+)-([^-]+)-([^-]+)-([^_]+)_([^_]+)_(.+)$"
)


@dataclass(frozen=True)
class ContainerName:
    """The nine components of a container name."""
    project: str = "XXXXX"
    originator: str = "BPG"
    functional: str = "XX"
    spatial: str = "XX"
    form: str = "T"
    discipline: str = "O"
    number: str = "0001"
    status: str = "S0"
    revision: str = "P01"

    def __str__(self) -> str:
        codes = "-".join((self.project, self.originator, self.functional, self.spatial,
                          self.form, self.discipline, self.number))
        return f"{codes}_{self.status}_{self.revision}"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def generate_container_name(**params: str) -> str:
    """
    Build a container name. Components not given take the defaults of
    ``ContainerName``; a None value also falls back to the default.

    Raises:
        TypeError: for a component name that does not exist
    """
    return str(ContainerName(**{k: v for k, v in params.items() if v is not None}))


def parse_container_name(filename: str) -> Optional[ContainerName]:
    """
    Split a container name into its components.

    Returns:
        ContainerName, or None if ``filename`` does not follow the convention
    """
    match = _NAME_PATTERN.match(filename or "")
    if not match:
        return None
    return ContainerName(*match.groups())


def get_status_description(code: str) -> str:
    """Label for a status code, or "Unknown"."""
    return STATUS_DESCRIPTIONS.get(code, UNKNOWN_STATUS)
