# -*- coding: utf-8 -*-
"""
Wizard Context - State of one wizard session.

Holds:
- The current step index
- The record store
- Step completion tracking
- Reference number and status
"""

from typing import Dict, Any, Optional
from datetime import datetime
import uuid

from app.config import Config
from services.record_store import RecordStore


class WizardContext:
    """
    State of a wizard session: the current step index and the record.

    The step index is written only by the StepNavigator.
    """

    STATUS_IN_PROGRESS = "in_progress"
    STATUS_COMPLETED = "completed"

    def __init__(self, store: Optional[RecordStore] = None, reference_prefix: Optional[str] = None):
        """Initialize context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = self.STATUS_IN_PROGRESS
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.record: RecordStore = store if store is not None else RecordStore()
        self._reference_prefix = reference_prefix or Config.REFERENCE_PREFIX
        self.reference_number: str = self._generate_reference_number()

        # Step completion tracking
        self.completed_steps: set = set()

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: REG-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{self._reference_prefix}-{timestamp}-{short_id}"

    @property
    def is_completed(self) -> bool:
        return self.status == self.STATUS_COMPLETED

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    def mark_completed(self):
        self.status = self.STATUS_COMPLETED
        self.updated_at = datetime.now()

    def touch(self):
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary (used for logging and state dumps)."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "data": self.record.get_all_values(),
        }
