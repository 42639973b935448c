# -*- coding: utf-8 -*-
"""
Wizard Header Component - Title, step indicator and progress bar.
"""

from typing import List

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar
from PyQt5.QtGui import QFont

from app.config import Config


class WizardHeader(QWidget):
    """
    Reusable wizard header component.

    Features:
    - Title display
    - One label per step, the current one highlighted
    - Progress bar

    Usage:
        header = WizardHeader(title="Registration", step_titles=["Step 1", "Step 2"])
        header.set_current_step(1, 100.0)
    """

    def __init__(self, title: str, step_titles: List[str], parent=None):
        """
        Initialize wizard header.

        Args:
            title: Main title text
            step_titles: Titles of the steps, in order
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title
        self.step_titles = list(step_titles)
        self.step_labels: List[QLabel] = []

        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Config.BACKGROUND_COLOR};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        # Title
        self.title_label = QLabel(self.title_text)
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        # Step indicator
        steps_layout = QHBoxLayout()
        steps_layout.setSpacing(16)
        for index, step_title in enumerate(self.step_titles):
            label = QLabel(f"{index + 1}. {step_title}")
            self.step_labels.append(label)
            steps_layout.addWidget(label)
        steps_layout.addStretch()
        layout.addLayout(steps_layout)

        # Progress bar
        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel(f"Step 1 of {len(self.step_titles)}")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)

    def set_current_step(self, index: int, percentage: float):
        """Highlight the current step and update the progress bar."""
        for i, label in enumerate(self.step_labels):
            color = Config.PRIMARY_COLOR if i == index else Config.TEXT_LIGHT
            weight = "bold" if i == index else "normal"
            label.setStyleSheet(f"color: {color}; font-weight: {weight};")

        self.progress_label.setText(f"Step {index + 1} of {len(self.step_titles)}")
        self.progress_bar.setValue(int(percentage))

    def set_title(self, title: str):
        """Update title text."""
        self.title_text = title
        self.title_label.setText(title)
