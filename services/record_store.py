# -*- coding: utf-8 -*-
"""
Record Store - Holds the single in-progress record of a wizard.

The record spans every step. Two steps declaring the same field name
share one value. All other components mutate the record only through
this API.
"""

from datetime import datetime
from typing import Dict, Iterable, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.field import Field, FieldValue
from utils.logger import get_logger

logger = get_logger(__name__)


class RecordStore(QObject):
    """
    Authoritative field storage.

    Signals are emitted synchronously after each mutation has completed,
    so observers always see the post-write state.
    """

    # Signals
    field_changed = pyqtSignal(str, object)  # name, value
    field_removed = pyqtSignal(str)  # name
    errors_changed = pyqtSignal(dict)  # name -> message for fields in scope

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._fields: Dict[str, Field] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def set_field(self, name: str, value: FieldValue):
        """
        Insert or overwrite a field's value.

        Marks the field dirty and clears its previous error; errors are
        only recomputed by a validation run.
        """
        current = self._fields.get(name)
        if current is None:
            current = Field(name=name)
            self._fields[name] = current

        current.value = value
        current.dirty = True
        current.error = None
        current.updated_at = datetime.now()

        logger.debug(f"set_field: {name}={value!r}")
        self.field_changed.emit(name, value)

    def unset_field(self, name: str):
        """Remove a field entirely. Unsetting a missing field is a no-op."""
        if self._fields.pop(name, None) is None:
            return

        logger.debug(f"unset_field: {name}")
        self.field_removed.emit(name)

    def register_field(self, name: str, default: FieldValue = None) -> bool:
        """
        Create a field with its default value if it does not exist yet.

        Returns:
            True if the field was created
        """
        if name in self._fields:
            return False

        self._fields[name] = Field(name=name, value=default)
        logger.debug(f"register_field: {name} (default={default!r})")
        return True

    def set_error(self, name: str, message: Optional[str]):
        """Attach or clear a field error. Registers the field if absent."""
        current = self._fields.get(name)
        if current is None:
            if message is None:
                return
            current = Field(name=name)
            self._fields[name] = current
        current.error = message

    def apply_errors(self, names: Iterable[str], errors: Mapping[str, str]):
        """
        Replace the errors of every field in scope with a validation outcome.

        Args:
            names: Fields the validation run covered
            errors: Failing fields and their messages
        """
        scoped = {}
        for name in names:
            message = errors.get(name)
            self.set_error(name, message)
            if message is not None:
                scoped[name] = message
        self.errors_changed.emit(scoped)

    # =========================================================================
    # Queries
    # =========================================================================

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def get_field(self, name: str) -> Optional[Field]:
        return self._fields.get(name)

    def get_value(self, name: str, default: FieldValue = None) -> FieldValue:
        current = self._fields.get(name)
        return current.value if current is not None else default

    def get_values(self, names: Iterable[str]) -> Dict[str, FieldValue]:
        """Project the record onto the given names; missing fields map to None."""
        return {name: self.get_value(name) for name in names}

    def get_all_values(self) -> Dict[str, FieldValue]:
        """Every field currently in the record."""
        return {name: current.value for name, current in self._fields.items()}

    def get_errors(self, names: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Current errors, optionally restricted to some names."""
        if names is None:
            names = self._fields.keys()
        errors = {}
        for name in names:
            current = self._fields.get(name)
            if current is not None and current.error is not None:
                errors[name] = current.error
        return errors

    def is_dirty(self, name: str) -> bool:
        current = self._fields.get(name)
        return bool(current and current.dirty)

    def field_names(self):
        return list(self._fields.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._fields
