# -*- coding: utf-8 -*-
"""
StepForm UI Components
"""

from .action_button import ActionButton
from .input_field import InputField
from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "InputField",
    "WizardHeader",
    "WizardFooter",
]
