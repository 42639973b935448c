# -*- coding: utf-8 -*-
"""
Wizard core - step schemas, conditional fields, navigation and state.

Independent of any widget; every component here can be driven from plain
Python code.
"""

from .schema_registry import SchemaRegistry, build_step_schema
from .step_validator import StepValidator, summarize_errors, validate
from .conditional_fields import ConditionalFieldController
from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'SchemaRegistry',
    'build_step_schema',
    'StepValidator',
    'validate',
    'summarize_errors',
    'ConditionalFieldController',
    'WizardContext',
    'StepNavigator',
]
