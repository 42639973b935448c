# -*- coding: utf-8 -*-
"""
StepForm Data Models
"""

from .field import Field, FieldDefinition, FieldValue
from .step_schema import ConditionalGroup, StepSchema, ValidationResult

__all__ = [
    "Field",
    "FieldDefinition",
    "FieldValue",
    "ConditionalGroup",
    "StepSchema",
    "ValidationResult",
]
