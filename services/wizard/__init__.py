# -*- coding: utf-8 -*-
"""BEP wizard core: actions, reducer, steps, completion."""

from .actions import ActionType, BepAction, ItemUpdate
from .bep_reducer import reduce
from .bep_context import BepContext
from .step_registry import StepRegistry, DEFAULT_REGISTRY
from .step_navigator import StepNavigator
from .completion import (
    SectionStatus,
    SectionSummary,
    SummaryItem,
    completion_percentage,
    evaluate_sections,
)

__all__ = [
    "ActionType",
    "BepAction",
    "ItemUpdate",
    "reduce",
    "BepContext",
    "StepRegistry",
    "DEFAULT_REGISTRY",
    "StepNavigator",
    "SectionStatus",
    "SectionSummary",
    "SummaryItem",
    "completion_percentage",
    "evaluate_sections",
]
