# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Validation of the current step before moving forward
- Progress tracking
"""

from typing import Callable, List

from PyQt5.QtCore import QObject, pyqtSignal

from models.step_schema import ValidationResult
from services.exceptions import WizardConfigurationError
from services.wizard.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step (the only writer of context.current_step_index)
    - Validate before moving forward
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(object)  # ValidationResult

    def __init__(self, context: WizardContext, step_ids: List[str],
                 validator: Callable[[str], ValidationResult]):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            step_ids: Ordered step identifiers
            validator: Validates a step by id and returns the result
        """
        super().__init__()
        if not step_ids:
            raise WizardConfigurationError("A wizard needs at least one step")

        self.context = context
        self.step_ids = list(step_ids)
        self._validator = validator
        self.context.current_step_index = 0

    @property
    def current_index(self) -> int:
        return self.context.current_step_index

    def get_current_step_id(self) -> str:
        """Get the identifier of the current step."""
        return self.step_ids[self.current_index]

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.step_ids)

    def is_last_step(self) -> bool:
        return self.current_index == len(self.step_ids) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < len(self.step_ids) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.current_index > 0

    def validate_current(self) -> ValidationResult:
        """
        Validate the current step.

        Emits validation_failed when the step is invalid.
        """
        step_id = self.get_current_step_id()
        logger.debug(f"Validating step {self.current_index} ({step_id})...")
        result = self._validator(step_id)
        if not result.valid:
            logger.warning(f"Step {self.current_index} validation failed: {result.errors}")
            self.validation_failed.emit(result)
        return result

    def next_step(self) -> bool:
        """
        Navigate to the next step if the current one validates.

        Returns:
            True if navigation was successful
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")

        result = self.validate_current()
        if not result.valid:
            return False

        logger.debug(f"Step {self.current_index} validated successfully")
        self.context.mark_step_completed(self.current_index)

        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step. Never validates."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def _navigate_to(self, new_index: int) -> bool:
        """
        Internal method to navigate to a step.

        Args:
            new_index: Target step index

        Returns:
            True if navigation was successful
        """
        if new_index < 0 or new_index >= len(self.step_ids):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.step_ids) - 1})")
            return False

        old_index = self.current_index
        self.context.current_step_index = new_index
        self.context.touch()

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

        logger.info(f"Navigation complete: Step {new_index} ({self.get_current_step_id()}) is now active")
        return True

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.step_ids) <= 1:
            return 0.0
        return (self.current_index / (len(self.step_ids) - 1)) * 100.0

    def get_completed_steps_count(self) -> int:
        """Get number of completed steps."""
        return len(self.context.completed_steps)
