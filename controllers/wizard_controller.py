# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Composes the record store, the step validator, the conditional field
controller and the step navigator into one wizard state machine.

The rendering layer talks to the wizard only through:
- on_field_change(name, value)
- on_advance() / on_retreat()
- current_step, current_step_schema, field_values, field_errors
- the on_submit callback and the wizard_completed signal
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.field import FieldDefinition, FieldValue
from models.step_schema import StepSchema, ValidationResult
from services.exceptions import StaleDependentDataError, WizardConfigurationError
from services.wizard.conditional_fields import ConditionalFieldController
from services.wizard.schema_registry import SchemaRegistry
from services.wizard.step_navigator import StepNavigator
from services.wizard.step_validator import StepValidator
from services.wizard.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)

SubmitCallback = Callable[[Mapping[str, FieldValue]], Any]


class WizardController(QObject):
    """
    Multi-step data entry state machine.

    Submission is terminal: once the record has been submitted every
    further event is refused.
    """

    # Signals
    data_changed = pyqtSignal()
    operation_error = pyqtSignal(str, str)  # operation name, error message
    wizard_completed = pyqtSignal(object)  # read-only record snapshot
    field_rejected = pyqtSignal(str)  # field name

    def __init__(self, registry: SchemaRegistry, on_submit: Optional[SubmitCallback] = None,
                 step_ids: Optional[Iterable[str]] = None, reference_prefix: Optional[str] = None,
                 parent=None):
        """
        Initialize the wizard.

        Args:
            registry: Schemas of the wizard's steps
            on_submit: Called once with the final record
            step_ids: Step order; defaults to the registry's registration order
            reference_prefix: Prefix of the session reference number

        Raises:
            MissingStepSchema: if a step has no schema
            WizardConfigurationError: if the wizard has no steps
        """
        super().__init__(parent)

        step_ids = list(step_ids) if step_ids is not None else registry.get_step_ids()
        if not step_ids:
            raise WizardConfigurationError("A wizard needs at least one step")
        registry.ensure_steps(step_ids)

        self.registry = registry
        self.context = WizardContext(reference_prefix=reference_prefix)
        self.store = self.context.record
        self.validator = StepValidator(registry, self.store)
        self.conditions = ConditionalFieldController(self.store, registry.all_groups(step_ids))
        self.navigator = StepNavigator(self.context, step_ids, self._validate_step)

        self._on_submit = on_submit
        self._submitted_record: Optional[Mapping[str, FieldValue]] = None
        self._last_error = ""

        self.navigator.step_changed.connect(self._on_step_changed)
        self._register_step_fields()

        logger.info(
            f"Wizard {self.context.reference_number} started with {len(step_ids)} steps: {step_ids}"
        )

    # =========================================================================
    # Read-only projections
    # =========================================================================

    @property
    def current_step(self) -> int:
        return self.navigator.current_index

    @property
    def current_step_id(self) -> str:
        return self.navigator.get_current_step_id()

    @property
    def current_step_schema(self) -> StepSchema:
        return self.registry.get_schema(self.current_step_id)

    @property
    def step_count(self) -> int:
        return self.navigator.get_step_count()

    @property
    def field_values(self) -> Dict[str, FieldValue]:
        return self.store.get_all_values()

    @property
    def field_errors(self) -> Dict[str, str]:
        """Errors of the fields the current step displays."""
        return self.store.get_errors(field.name for field in self.visible_fields)

    @property
    def visible_fields(self) -> List[FieldDefinition]:
        """Declared fields of the current step whose gates are open."""
        return [
            definition for definition in self.current_step_schema.fields
            if self.conditions.is_field_active(definition.name)
        ]

    @property
    def is_submitted(self) -> bool:
        return self._submitted_record is not None

    @property
    def submitted_record(self) -> Optional[Mapping[str, FieldValue]]:
        return self._submitted_record

    @property
    def last_error(self) -> str:
        return self._last_error

    def is_last_step(self) -> bool:
        return self.navigator.is_last_step()

    def is_field_visible(self, name: str) -> bool:
        return self.conditions.is_field_active(name)

    # =========================================================================
    # Events from the rendering layer
    # =========================================================================

    def on_field_change(self, name: str, value: FieldValue) -> bool:
        """
        Write a user input into the record.

        Returns:
            False if the write was refused (wizard submitted, unknown field,
            or field hidden behind an inactive gate)
        """
        if self.is_submitted:
            logger.warning(f"Ignoring change of '{name}': wizard already submitted")
            return False

        if self.registry.find_field(name) is None:
            self._reject_field(name, f"'{name}' is not declared by any step")
            return False

        if not self.conditions.is_field_active(name):
            self._reject_field(name, f"'{name}' is hidden by its gate")
            return False

        self.store.set_field(name, value)
        self.context.touch()
        self.data_changed.emit()
        return True

    def request_advance(self) -> bool:
        """
        Move to the next step if the current one validates, or submit the
        record when already on the last step.

        Returns:
            True if the wizard moved forward or submitted
        """
        if self.is_submitted:
            logger.warning("Ignoring advance: wizard already submitted")
            return False

        if self.navigator.is_last_step():
            return self.submit()

        moved = self.navigator.next_step()
        if not moved:
            self.data_changed.emit()
        return moved

    def request_retreat(self) -> bool:
        """
        Move to the previous step. Never validates and never resets values.
        """
        if self.is_submitted:
            logger.warning("Ignoring retreat: wizard already submitted")
            return False
        return self.navigator.previous_step()

    on_advance = request_advance
    on_retreat = request_retreat

    def submit(self) -> bool:
        """
        Validate the last step and hand the final record to the on_submit
        callback.

        Only the last step can submit, and only once.

        Raises:
            StaleDependentDataError: if a hidden field still holds a value
        """
        if self.is_submitted:
            logger.warning("Ignoring submit: wizard already submitted")
            return False

        if not self.navigator.is_last_step():
            self._report_error("submit", f"Cannot submit from step {self.current_step}")
            return False

        result = self.navigator.validate_current()
        if not result.valid:
            self.data_changed.emit()
            return False

        values = self.store.get_all_values()
        stale = self.conditions.find_stale_fields(values)
        if stale:
            raise StaleDependentDataError(stale)

        self.context.mark_step_completed(self.current_step)
        self.context.mark_completed()
        self._submitted_record = MappingProxyType(dict(values))

        logger.info(f"Wizard {self.context.reference_number} submitted: {values}")
        if self._on_submit is not None:
            self._on_submit(self._submitted_record)

        self.data_changed.emit()
        self.wizard_completed.emit(self._submitted_record)
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _validate_step(self, step_id: str) -> ValidationResult:
        """Validate a step and attach the outcome to its visible fields."""
        result = self.validator.validate_step(step_id)
        schema = self.registry.get_schema(step_id)
        scope = [name for name in schema.field_names if self.conditions.is_field_active(name)]
        self.store.apply_errors(scope, result.errors)
        return result

    def _register_step_fields(self):
        """Register the current step's visible fields with their defaults."""
        for definition in self.current_step_schema.fields:
            if self.conditions.is_field_active(definition.name):
                self.store.register_field(definition.name, definition.default)
        self.conditions.refresh()

    def _report_error(self, operation: str, error: str):
        self._last_error = error
        logger.warning(f"{operation}: {error}")
        self.operation_error.emit(operation, error)

    def _reject_field(self, name: str, reason: str):
        logger.warning(f"Rejected field change: {reason}")
        self.field_rejected.emit(name)

    def _on_step_changed(self, old_index: int, new_index: int):
        self._register_step_fields()
        self.data_changed.emit()

    def describe_state(self) -> Dict[str, Any]:
        """Snapshot of the whole wizard state, for debugging."""
        state = self.context.to_dict()
        state["current_step_id"] = self.current_step_id
        state["errors"] = self.store.get_errors()
        state["submitted"] = self.is_submitted
        return state
