# -*- coding: utf-8 -*-
"""
BEP Generator Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import from_isoformat, to_isoformat, utc_now
from .id_generator import IdGenerator, SequentialIdGenerator, UuidIdGenerator

__all__ = [
    "get_logger",
    "setup_logger",
    "from_isoformat",
    "to_isoformat",
    "utc_now",
    "IdGenerator",
    "SequentialIdGenerator",
    "UuidIdGenerator",
]
