# -*- coding: utf-8 -*-
"""
Input Field Component - Reusable line edit with error/default states.
"""

from PyQt5.QtWidgets import QLineEdit

from app.config import Config


def _input_style(border: str) -> str:
    return f"""
        QLineEdit {{
            background-color: #FFFFFF;
            border: 1px solid {border};
            border-radius: 4px;
            padding: 8px 12px;
            color: {Config.TEXT_COLOR};
        }}
        QLineEdit:focus {{
            border: 1px solid {Config.INPUT_FOCUS};
        }}
    """


class InputField(QLineEdit):
    """
    Input field component.

    Features:
    - Configurable placeholder
    - Error/success states

    Usage:
        field = InputField(placeholder="First name")
        field.set_error()
    """

    VARIANT_BORDERS = {
        "default": Config.INPUT_BORDER,
        "error": Config.ERROR_COLOR,
        "success": Config.SUCCESS_COLOR,
    }

    def __init__(self, placeholder: str = "", variant: str = "default", parent=None):
        """
        Initialize input field.

        Args:
            placeholder: Placeholder text
            variant: Input variant ("default", "error", "success")
            parent: Parent widget
        """
        super().__init__(parent)
        self.variant = variant
        if placeholder:
            self.setPlaceholderText(placeholder)
        self._apply_variant()

    def _apply_variant(self):
        """Apply variant-specific styling."""
        border = self.VARIANT_BORDERS.get(self.variant, Config.INPUT_BORDER)
        self.setStyleSheet(_input_style(border))

    def set_variant(self, variant: str):
        """
        Change input variant dynamically.

        Args:
            variant: New variant ("default", "error", "success")
        """
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        """Set input to error state (convenience method)."""
        self.set_variant("error")

    def set_success(self):
        """Set input to success state (convenience method)."""
        self.set_variant("success")

    def set_default(self):
        """Reset input to default state (convenience method)."""
        self.set_variant("default")

    def has_error(self) -> bool:
        return self.variant == "error"
