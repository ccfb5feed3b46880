# -*- coding: utf-8 -*-
"""
BEP Generator Application Core Module
"""

from .config import Config, StorageKeys

__all__ = ["Config", "StorageKeys"]
