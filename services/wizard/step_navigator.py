# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between BEP wizard steps.

Handles:
- Step progression (Save & Continue / Previous)
- Save Progress (complete the current step, stay on it)
- Direct jumps from the step bar or review screen
- Progress tracking

Navigation is expressed as reducer actions on the BepContext; the bounds of
the step registry are checked here, not in the reducer.
"""

from typing import Optional

from models.defaults import WizardStep
from utils.logger import get_logger

from .actions import complete_step, set_step
from .bep_context import BepContext
from .step_registry import DEFAULT_REGISTRY, StepRegistry

logger = get_logger(__name__)


class StepNavigator:
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step (stored on the document)
    - Mark steps completed when moving forward
    - Refuse targets outside the registry
    """

    def __init__(self, context: BepContext, registry: StepRegistry = DEFAULT_REGISTRY):
        """
        Initialize the navigator.

        Args:
            context: BEP context holding the document
            registry: Wizard step registry
        """
        self.context = context
        self.registry = registry

    @property
    def current_step_id(self) -> int:
        return self.context.current_step

    def get_current_step(self) -> Optional[WizardStep]:
        """Get the current step."""
        return self.registry.get(self.current_step_id)

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.registry)

    def is_first_step(self) -> bool:
        return self.current_step_id == self.registry.first_step_id

    def is_last_step(self) -> bool:
        return self.current_step_id == self.registry.last_step_id

    def can_go_next(self) -> bool:
        """Check if we can navigate to the next step."""
        return self.registry.next_id(self.current_step_id) is not None

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.registry.previous_id(self.current_step_id) is not None

    def next_step(self) -> bool:
        """
        Save & Continue: complete the current step and move forward.

        On the last step the step is still marked completed but the wizard
        stays where it is.

        Returns:
            True if the current step changed
        """
        current = self.current_step_id
        self.context.dispatch(complete_step(current))

        next_id = self.registry.next_id(current)
        if next_id is None:
            logger.debug(f"Cannot go next: already at last step ({current})")
            return False

        logger.info(f"Navigating: Step {current} → {next_id}")
        return self._navigate_to(next_id)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        current = self.current_step_id
        previous_id = self.registry.previous_id(current)
        if previous_id is None:
            logger.debug(f"Cannot go previous: already at first step ({current})")
            return False

        logger.info(f"Navigating back: Step {current} → {previous_id}")
        return self._navigate_to(previous_id)

    def save_progress(self):
        """Save Progress: complete the current step without moving."""
        self.context.dispatch(complete_step(self.current_step_id))

    def goto_step(self, step_id: int) -> bool:
        """
        Navigate to a specific step.

        Args:
            step_id: Target step id

        Returns:
            True if navigation was successful
        """
        if step_id == self.current_step_id:
            return True
        return self._navigate_to(step_id)

    def _navigate_to(self, step_id: int) -> bool:
        """
        Internal method to navigate to a step.

        Args:
            step_id: Target step id

        Returns:
            True if navigation was successful
        """
        if not self.registry.is_valid(step_id):
            logger.error(
                f"Invalid step id: {step_id} "
                f"(valid range: {self.registry.first_step_id}-{self.registry.last_step_id})"
            )
            return False

        self.context.dispatch(set_step(step_id))
        logger.debug(f"Navigation complete: Step {step_id} is now active")
        return True

    def reset(self):
        """Reset navigator to first step."""
        self._navigate_to(self.registry.first_step_id)

    def get_progress_percentage(self) -> float:
        """
        Get current position as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        count = len(self.registry)
        if count <= 1:
            return 0.0
        try:
            index = self.registry.index_of(self.current_step_id)
        except KeyError:
            return 0.0
        return (index / (count - 1)) * 100.0

    def get_completed_steps_count(self) -> int:
        """Get number of completed steps."""
        return len(self.context.completed_steps)
