# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Reusable footer for wizards and multi-step forms.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Reusable wizard footer component.

    Features:
    - Previous/Next navigation buttons
    - Optional "Log state" button for development
    - Status label (e.g. submission confirmation)

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next button is clicked
        log_state_clicked: Emitted when Log state button is clicked

    Usage:
        footer = WizardFooter(show_log_state=Config.DEV_MODE)
        footer.next_clicked.connect(self._on_next)
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    log_state_clicked = pyqtSignal()

    def __init__(
        self,
        show_log_state: bool = False,
        next_text: str = "Next",
        previous_text: str = "Previous",
        parent=None
    ):
        """
        Initialize wizard footer.

        Args:
            show_log_state: Whether to show the Log state button
            next_text: Text for next button
            previous_text: Text for previous button
            parent: Parent widget
        """
        super().__init__(parent)
        self.show_log_state = show_log_state
        self.next_text = next_text
        self.previous_text = previous_text

        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Config.BACKGROUND_COLOR};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        if self.show_log_state:
            self.btn_log_state = ActionButton("Log state", variant="secondary")
            self.btn_log_state.clicked.connect(self.log_state_clicked.emit)
            layout.addWidget(self.btn_log_state)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"background: transparent; color: {Config.SUCCESS_COLOR};")
        layout.addWidget(self.status_label)

        layout.addStretch()

        self.btn_previous = ActionButton(self.previous_text, variant="secondary")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(self.next_text, variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        """Enable/disable next button."""
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        """Enable/disable previous button."""
        self.btn_previous.setEnabled(enabled)

    def set_next_text(self, text: str):
        """Update next button text."""
        self.btn_next.setText(text)

    def set_status_text(self, text: str, error: bool = False):
        color = Config.ERROR_COLOR if error else Config.SUCCESS_COLOR
        self.status_label.setStyleSheet(f"background: transparent; color: {color};")
        self.status_label.setText(text)
