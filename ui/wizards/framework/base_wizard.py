# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title, step indicator and progress
- Step container
- Navigation buttons (Previous, Next/Finish)
- Inline validation feedback

All state lives in a WizardController; this widget only renders it and
forwards button clicks.
"""

from typing import Any, List, Mapping, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QFrame, QStackedWidget
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.wizard_controller import WizardController
from models.step_schema import ValidationResult
from services.wizard.schema_registry import SchemaRegistry
from services.wizard.step_validator import summarize_errors
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.wizards.framework.base_step import FormStep
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_registry(): Return the schemas of the wizard's steps
    - on_submit(): Handle the final record
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with the submitted record

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)

        self.controller = WizardController(self.create_registry(), on_submit=self.on_submit)
        self.navigator = self.controller.navigator
        self.steps: List[FormStep] = [
            FormStep(self.controller.registry.get_schema(step_id), self.controller)
            for step_id in self.navigator.step_ids
        ]

        # Setup UI
        self._setup_ui()

        # Connect controller signals
        self.navigator.step_changed.connect(self._on_step_changed)
        self.controller.data_changed.connect(self._refresh_current_step)
        self.controller.wizard_completed.connect(self._on_completed)
        self.navigator.validation_failed.connect(self._on_validation_failed)

        self._on_step_changed(0, self.navigator.current_index)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_registry(self) -> SchemaRegistry:
        """
        Create and return the wizard's step schemas.

        Returns:
            SchemaRegistry with one schema per step, in step order
        """
        pass

    @abstractmethod
    def on_submit(self, record: Mapping[str, Any]):
        """
        Handle wizard submission.

        Called once, with the full record, when the last step validates.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return "Wizard"

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Finish"

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Header
        self.header = WizardHeader(
            self.get_wizard_title(),
            [step.get_step_title() for step in self.steps]
        )
        main_layout.addWidget(self.header)

        # Separator
        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        # Footer with navigation buttons
        self.footer = WizardFooter(show_log_state=Config.DEV_MODE)
        self.footer.previous_clicked.connect(self._handle_previous)
        self.footer.next_clicked.connect(self._handle_next)
        self.footer.log_state_clicked.connect(self._handle_log_state)
        main_layout.addWidget(self.footer)

        self.btn_previous = self.footer.btn_previous
        self.btn_next = self.footer.btn_next

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        """Handle previous button click."""
        self.controller.on_retreat()

    def _handle_next(self):
        """Handle next/finish button click."""
        self.controller.on_advance()

    def _handle_log_state(self):
        logger.info(f"Wizard state: {self.controller.describe_state()}")

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def current_step_widget(self) -> FormStep:
        return self.steps[self.navigator.current_index]

    def _on_step_changed(self, old_index: int, new_index: int):
        """Handle step change."""
        self.step_container.setCurrentIndex(new_index)
        self.header.set_current_step(new_index, self.navigator.get_progress_percentage())
        self._update_navigation_buttons()
        self.footer.set_status_text("")
        self._refresh_current_step()

    def _on_validation_failed(self, result: ValidationResult):
        """Show the failing fields next to the navigation buttons."""
        self.footer.set_status_text(summarize_errors(result), error=True)

    def _refresh_current_step(self):
        self.current_step_widget().refresh()

    def _update_navigation_buttons(self):
        """Update navigation button states."""
        submitted = self.controller.is_submitted
        self.footer.set_previous_enabled(self.navigator.can_go_previous() and not submitted)
        self.footer.set_next_enabled(not submitted)

        if self.navigator.is_last_step():
            self.footer.set_next_text(self.get_submit_button_text())
        else:
            self.footer.set_next_text("Next")

    def _on_completed(self, record: Mapping[str, Any]):
        """Lock the wizard once the record has been submitted."""
        self.header.set_current_step(self.navigator.current_index, 100.0)
        self.footer.set_status_text(f"Submitted ({self.controller.context.reference_number})")
        self._update_navigation_buttons()
        self.wizard_completed.emit(dict(record))
