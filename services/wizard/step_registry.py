# -*- coding: utf-8 -*-
"""
Step registry for the BEP wizard.

Static metadata for the ten wizard steps. Independent of document content;
this is where the valid step range lives.
"""

from typing import List, Optional, Sequence

from models.defaults import WIZARD_STEPS, WizardStep


class StepRegistry:
    """Ordered, read-only collection of wizard steps."""

    def __init__(self, steps: Sequence[WizardStep] = WIZARD_STEPS):
        self._steps: List[WizardStep] = sorted(steps, key=lambda step: step.id)

    @property
    def steps(self) -> List[WizardStep]:
        return list(self._steps)

    @property
    def first_step_id(self) -> int:
        return self._steps[0].id

    @property
    def last_step_id(self) -> int:
        return self._steps[-1].id

    def __len__(self) -> int:
        return len(self._steps)

    def get(self, step_id: int) -> Optional[WizardStep]:
        """Step with ``step_id``, or None if it is not registered."""
        for step in self._steps:
            if step.id == step_id:
                return step
        return None

    def is_valid(self, step_id: int) -> bool:
        return self.get(step_id) is not None

    def index_of(self, step_id: int) -> int:
        """
        Zero-based position of a step.

        Raises:
            KeyError: if the step is not registered
        """
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        raise KeyError(step_id)

    def next_id(self, step_id: int) -> Optional[int]:
        """Id of the following step, None at the last step or for unknown ids."""
        if not self.is_valid(step_id):
            return None
        index = self.index_of(step_id)
        if index + 1 < len(self._steps):
            return self._steps[index + 1].id
        return None

    def previous_id(self, step_id: int) -> Optional[int]:
        """Id of the preceding step, None at the first step or for unknown ids."""
        if not self.is_valid(step_id):
            return None
        index = self.index_of(step_id)
        if index > 0:
            return self._steps[index - 1].id
        return None


DEFAULT_REGISTRY = StepRegistry()
