# -*- coding: utf-8 -*-
"""
Registration Wizard package.
"""

from .registration_wizard import RegistrationWizard

__all__ = ['RegistrationWizard']
