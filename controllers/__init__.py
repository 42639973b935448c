# -*- coding: utf-8 -*-
"""
Controllers Package
===================
Controllers bridge the rendering layer and the wizard core.
"""

from .wizard_controller import WizardController

__all__ = [
    "WizardController",
]
