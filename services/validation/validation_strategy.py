# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for field rules.

Each rule checks one field of a step against the record's current values.
Rules never keep state between calls.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from models.field import FieldValue
from services.exceptions import FieldValidationError, WizardConfigurationError


def is_empty(value: FieldValue) -> bool:
    """Absent, None and the empty string count as empty; "   " and False do not."""
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    return False


class ValidationStrategy(ABC):
    """
    Abstract base class for validation rules.
    """

    def __init__(self, field: str, message: Optional[str] = None):
        """
        Args:
            field: Name of the field the rule checks
            message: Optional error message overriding the default one
        """
        self.field = field
        self.message = message

    @abstractmethod
    def check(self, values: Mapping[str, FieldValue], label: str = None):
        """
        Check the rule against the record's values.

        Args:
            values: Field values in scope for the step
            label: Human-readable label used in the default message

        Raises:
            FieldValidationError: if the field fails the rule
        """
        pass

    def referenced_fields(self) -> List[str]:
        """Field names this rule reads."""
        return [self.field]

    def is_valid(self, values: Mapping[str, FieldValue]) -> bool:
        try:
            self.check(values)
        except FieldValidationError:
            return False
        return True

    def _fail(self, label: str = None):
        message = self.message or f"{label or self.field} is required"
        raise FieldValidationError(self.field, message)

    def to_dict(self) -> Dict[str, Any]:
        return {"rule": "required", "field": self.field}


class RequiredFieldRule(ValidationStrategy):
    """Field X is required."""

    def check(self, values: Mapping[str, FieldValue], label: str = None):
        if is_empty(values.get(self.field)):
            self._fail(label)


class ConditionalRequiredRule(ValidationStrategy):
    """
    Field Y is required if and only if gate field G equals a value.

    While the gate does not hold that value the field is satisfied
    whatever it contains.
    """

    def __init__(self, field: str, gate: str, equals: Any = True, message: Optional[str] = None):
        super().__init__(field, message)
        self.gate = gate
        self.equals = equals

    def applies(self, values: Mapping[str, FieldValue]) -> bool:
        return values.get(self.gate) == self.equals

    def check(self, values: Mapping[str, FieldValue], label: str = None):
        if not self.applies(values):
            return
        if is_empty(values.get(self.field)):
            self._fail(label)

    def referenced_fields(self) -> List[str]:
        return [self.field, self.gate]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": "required_if",
            "field": self.field,
            "gate": self.gate,
            "equals": self.equals,
        }


def rule_from_dict(data: Dict[str, Any]) -> ValidationStrategy:
    """
    Build a rule from a plain mapping.

    Supported forms:
        {"rule": "required", "field": "name"}
        {"rule": "required_if", "field": "street", "gate": "address", "equals": True}
    """
    kind = data.get("rule", "required")
    message = data.get("message")
    if kind == "required":
        return RequiredFieldRule(data["field"], message=message)
    if kind == "required_if":
        return ConditionalRequiredRule(
            data["field"],
            gate=data["gate"],
            equals=data.get("equals", True),
            message=message,
        )
    raise WizardConfigurationError(f"Unknown rule type: {kind}")
