# -*- coding: utf-8 -*-
"""
Step validation service.

Validates record values for a step schema without UI coupling.
"""

from typing import Mapping

from models.field import FieldValue
from models.step_schema import StepSchema, ValidationResult
from services.exceptions import FieldValidationError


def validate(schema: StepSchema, values: Mapping[str, FieldValue]) -> ValidationResult:
    """
    Validate values against every rule of a step schema.

    All rules are evaluated; a failing rule never stops the ones after it.
    The outcome depends only on the arguments.

    Args:
        schema: Schema of the step being validated
        values: Record values for the step's fields (missing keys are absent)

    Returns:
        ValidationResult with one message per failing field
    """
    result = ValidationResult()

    for rule in schema.rules:
        try:
            rule.check(values, label=schema.label_for(rule.field))
        except FieldValidationError as e:
            result.add_error(e.field, e.message)

    return result


class StepValidator:
    """Validates wizard steps against the record held by a store."""

    def __init__(self, registry, store):
        """
        Args:
            registry: SchemaRegistry providing one schema per step id
            store: RecordStore holding the values
        """
        self.registry = registry
        self.store = store

    def validate_step(self, step_id: str) -> ValidationResult:
        """Validate the record restricted to the step's declared fields."""
        schema = self.registry.get_schema(step_id)
        values = self.store.get_values(schema.field_names)
        return validate(schema, values)

    def get_step_name(self, step_id: str) -> str:
        """Get the display title for a step."""
        schema = self.registry.get_schema(step_id)
        return schema.title or step_id


def summarize_errors(result: ValidationResult) -> str:
    """One line per failing field, for status bars and logs."""
    return "\n".join(f"• {message}" for message in result.errors.values())
