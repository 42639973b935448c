# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy, RequiredFieldRule, ConditionalRequiredRule, rule_from_dict, is_empty
)

__all__ = [
    'ValidationStrategy',
    'RequiredFieldRule',
    'ConditionalRequiredRule',
    'rule_from_dict',
    'is_empty',
]
