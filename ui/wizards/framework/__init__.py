# -*- coding: utf-8 -*-
"""
Wizard Framework - Widgets rendering a WizardController.

Provides base classes for multi-step wizards with consistent navigation
and inline validation feedback.
"""

from .base_wizard import BaseWizard
from .base_step import FormStep

__all__ = [
    'BaseWizard',
    'FormStep',
]
