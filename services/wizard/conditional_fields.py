# -*- coding: utf-8 -*-
"""
Conditional Field Controller - Keeps gated fields out of the record while
their gate condition is false.

Each ConditionalGroup is either Active (gate holds the condition value,
dependents may be registered and are validated) or Inactive (dependents
are unregistered). Deactivation clears the dependents synchronously,
inside the write that changed the gate.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.field import FieldValue
from models.step_schema import ConditionalGroup
from services.record_store import RecordStore
from utils.logger import get_logger

logger = get_logger(__name__)


class ConditionalFieldController(QObject):
    """
    Evaluates a table of conditional groups against the record store.
    """

    # Signals
    group_activated = pyqtSignal(str)  # gate name
    group_deactivated = pyqtSignal(str)  # gate name

    def __init__(self, store: RecordStore, groups: Iterable[ConditionalGroup],
                 parent: Optional[QObject] = None):
        """
        Initialize the controller.

        Args:
            store: Record store to watch and clear
            groups: Declarative conditional groups
            parent: Owner of the controller, defaults to the store
        """
        # Parented to the store by default: the slots stay connected while the store lives
        super().__init__(parent if parent is not None else store)
        self.store = store
        self.groups: List[ConditionalGroup] = list(groups)
        self._active: Dict[ConditionalGroup, bool] = {}

        for group in self.groups:
            active = self.is_active(group)
            self._active[group] = active
            if not active:
                self._clear_dependents(group)

        self.store.field_changed.connect(self._on_field_changed)
        self.store.field_removed.connect(self._on_field_removed)

    # =========================================================================
    # Queries
    # =========================================================================

    def is_active(self, group: ConditionalGroup) -> bool:
        """Check the group against the gate's current value."""
        return group.is_active(self.store.get_value(group.gate))

    def groups_for_gate(self, gate: str) -> List[ConditionalGroup]:
        return [group for group in self.groups if group.gate == gate]

    def groups_for_dependent(self, name: str) -> List[ConditionalGroup]:
        return [group for group in self.groups if name in group.dependents]

    def is_dependent(self, name: str) -> bool:
        return len(self.groups_for_dependent(name)) > 0

    def is_field_active(self, name: str) -> bool:
        """
        A field is active unless one of the groups it depends on is inactive.
        """
        return all(self.is_active(group) for group in self.groups_for_dependent(name))

    def find_stale_fields(self, values: Mapping[str, FieldValue]) -> List[str]:
        """Dependents of inactive groups that are present in the given values."""
        stale = []
        for group in self.groups:
            if self.is_active(group):
                continue
            for name in group.dependents:
                if name in values and name not in stale:
                    stale.append(name)
        return stale

    # =========================================================================
    # Transitions
    # =========================================================================

    def refresh(self):
        """Re-evaluate every group, e.g. after gates were registered with defaults."""
        for group in self.groups:
            self._evaluate(group, self.store.get_value(group.gate))

    def _evaluate(self, group: ConditionalGroup, gate_value: FieldValue):
        was_active = self._active.get(group, False)
        now_active = group.is_active(gate_value)
        self._active[group] = now_active

        if now_active:
            if not was_active:
                # Dependents start absent; the next input registers them
                logger.debug(f"Group '{group.gate}' activated")
                self.group_activated.emit(group.gate)
            return

        if was_active:
            logger.info(f"Group '{group.gate}' deactivated, clearing {list(group.dependents)}")
        self._clear_dependents(group)
        if was_active:
            self.group_deactivated.emit(group.gate)

    def _clear_dependents(self, group: ConditionalGroup):
        for name in group.dependents:
            self.store.unset_field(name)

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_field_changed(self, name: str, value: FieldValue):
        for group in self.groups_for_gate(name):
            self._evaluate(group, value)

    def _on_field_removed(self, name: str):
        for group in self.groups_for_gate(name):
            self._evaluate(group, None)
