# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Variants:
- primary: solid blue, for main actions (Next, Finish)
- secondary: outlined, for secondary actions (Previous, Log state)
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from app.config import Config


class ActionButton(QPushButton):
    """
    Reusable action button.

    Usage:
        btn = ActionButton("Next", variant="primary")
    """

    def __init__(self, text: str, variant: str = "primary", width: int = 114,
                 height: int = 44, parent=None):
        super().__init__(text, parent)
        self.variant = variant
        self.setFixedSize(width, height)
        self.setCursor(Qt.PointingHandCursor)
        self._apply_style()

    def _apply_style(self):
        if self.variant == "primary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Config.PRIMARY_COLOR};
                    color: white;
                    border: none;
                    border-radius: 4px;
                }}
                QPushButton:disabled {{
                    background-color: {Config.BORDER_COLOR};
                    color: {Config.TEXT_LIGHT};
                }}
            """)
        else:
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: white;
                    color: {Config.PRIMARY_COLOR};
                    border: 1px solid {Config.PRIMARY_COLOR};
                    border-radius: 4px;
                }}
                QPushButton:disabled {{
                    color: {Config.TEXT_LIGHT};
                    border: 1px solid {Config.BORDER_COLOR};
                }}
            """)
