# -*- coding: utf-8 -*-
"""Custom exceptions for the wizard core."""

from typing import Iterable, Optional


class WizardConfigurationError(Exception):
    """Raised when a wizard or step schema is declared inconsistently."""

    def __init__(self, message: str, step_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id

    def __str__(self):
        if self.step_id:
            return f"[{self.step_id}] {self.message}"
        return self.message


class UnknownFieldReference(WizardConfigurationError):
    """A rule or conditional group names a field the step does not declare."""

    def __init__(self, field: str, step_id: Optional[str] = None, context: str = None):
        message = f"Unknown field reference: {field}"
        if context:
            message = f"{message} (in {context})"
        super().__init__(message, step_id=step_id)
        self.field = field
        self.context = context


class MissingStepSchema(WizardConfigurationError, KeyError):
    """No schema is registered for a step identifier."""

    def __init__(self, step_id: str):
        super().__init__(f"No schema registered for step: {step_id}", step_id=step_id)

    def __str__(self):
        return WizardConfigurationError.__str__(self)


class DuplicateStepSchema(WizardConfigurationError):
    """A step identifier was registered twice."""

    def __init__(self, step_id: str):
        super().__init__(f"Schema already registered for step: {step_id}", step_id=step_id)


class FieldValidationError(Exception):
    """Raised by a validation rule when a field fails it."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class StaleDependentDataError(Exception):
    """A dependent field holds a value while its gate condition is false."""

    def __init__(self, fields: Iterable[str]):
        self.fields = sorted(fields)
        super().__init__(f"Hidden fields still hold values: {', '.join(self.fields)}")
