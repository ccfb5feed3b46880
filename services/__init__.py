# -*- coding: utf-8 -*-
"""
BEP Generator Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "BepContext",
    "StepNavigator",
    "ExportManager",
    "WorkflowMaxClient",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "BepContext":
        from .wizard.bep_context import BepContext
        return BepContext
    elif name == "StepNavigator":
        from .wizard.step_navigator import StepNavigator
        return StepNavigator
    elif name == "ExportManager":
        from .export.export_manager import ExportManager
        return ExportManager
    elif name == "WorkflowMaxClient":
        from .workflowmax_client import WorkflowMaxClient
        return WorkflowMaxClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
