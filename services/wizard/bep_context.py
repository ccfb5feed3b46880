# -*- coding: utf-8 -*-
"""
BEP Context - holds the document being edited by the wizard.

Provides:
- Dispatch of actions through the reducer
- Change notification for subscribers
- Draft save/restore through an injected repository
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from models import BEPDocument
from models.defaults import create_empty_bep
from utils.datetime_utils import utc_now
from utils.id_generator import IdGenerator
from utils.logger import get_logger

from .actions import BepAction, complete_step, set_bep
from .bep_reducer import reduce

logger = get_logger(__name__)

Subscriber = Callable[[BEPDocument, BEPDocument, BepAction], None]


class BepContext:
    """
    Single-writer holder of the current BEPDocument.

    All changes go through ``dispatch``. Subscribers are called with
    ``(old_document, new_document, action)`` whenever an action produced a
    different document.
    """

    def __init__(
        self,
        document: Optional[BEPDocument] = None,
        id_generator: Optional[IdGenerator] = None,
        clock: Callable[[], datetime] = utc_now,
        draft_repository=None
    ):
        """
        Initialize the context.

        Args:
            document: Starting document (default: a new empty BEP)
            id_generator: Id source for a new empty BEP
            clock: Timestamp source passed to the reducer
            draft_repository: DraftRepository used by save_draft/load_draft
        """
        self._clock = clock
        self._id_generator = id_generator
        self._document = document or create_empty_bep(id_generator, clock)
        self._draft_repository = draft_repository
        self._subscribers: List[Subscriber] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def document(self) -> BEPDocument:
        return self._document

    @property
    def current_step(self) -> int:
        return self._document.current_step

    @property
    def completed_steps(self) -> List[int]:
        return list(self._document.completed_steps)

    def is_step_completed(self, step_id: int) -> bool:
        """Check if a step is completed."""
        return self._document.is_step_completed(step_id)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self, action: BepAction) -> BEPDocument:
        """
        Apply an action and notify subscribers if the document changed.

        Returns:
            The current document after the action
        """
        old_document = self._document
        new_document = reduce(old_document, action, clock=self._clock)

        if new_document is old_document:
            return new_document

        self._document = new_document
        self._notify(old_document, new_document, action)
        return new_document

    def mark_step_completed(self, step_id: int) -> BEPDocument:
        """Mark a step as completed."""
        return self.dispatch(complete_step(step_id))

    def reset(self) -> BEPDocument:
        """Start over with a new empty BEP."""
        logger.info("Resetting BEP context to an empty document")
        return self.dispatch(set_bep(create_empty_bep(self._id_generator, self._clock)))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Function that removes the listener again
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, old_document: BEPDocument, new_document: BEPDocument, action: BepAction):
        for callback in list(self._subscribers):
            try:
                callback(old_document, new_document, action)
            except Exception as e:
                logger.error(f"Subscriber failed handling {action.type}: {e}", exc_info=True)

    # =========================================================================
    # Persistence
    # =========================================================================

    def save_draft(self) -> str:
        """
        Persist the current document as a draft.

        Returns:
            Id of the saved document

        Raises:
            RuntimeError: if no draft repository was provided
        """
        if self._draft_repository is None:
            raise RuntimeError("No draft repository configured for this context")

        self._draft_repository.save(self._document)
        logger.info(f"Draft saved: {self._document.id} (step {self._document.current_step})")
        return self._document.id

    def load_draft(self, document_id: str) -> bool:
        """
        Replace the current document with a saved draft.

        Returns:
            True if a draft was found and loaded
        """
        if self._draft_repository is None:
            raise RuntimeError("No draft repository configured for this context")

        document = self._draft_repository.load(document_id)
        if document is None:
            logger.warning(f"No draft found for {document_id}")
            return False

        self.dispatch(set_bep(document))
        logger.info(f"Draft loaded: {document_id}")
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the current document."""
        return self._document.to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **kwargs) -> "BepContext":
        """Restore a context from a serialized document."""
        return cls(document=BEPDocument.from_dict(data), **kwargs)
