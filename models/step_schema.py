# -*- coding: utf-8 -*-
"""
Step schema models: the declared controls, validation rules and
conditional groups of one wizard step.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING

from models.field import FieldDefinition, FieldValue
from services.exceptions import UnknownFieldReference

if TYPE_CHECKING:
    from services.validation.validation_strategy import ValidationStrategy


@dataclass(frozen=True)
class ConditionalGroup:
    """
    Dependent fields that are only collected while a gate field holds
    a given value.
    """

    gate: str
    dependents: Tuple[str, ...]
    condition: Any = True

    def __post_init__(self):
        # Hashable even when declared with a list
        object.__setattr__(self, "dependents", tuple(self.dependents))

    def is_active(self, gate_value: FieldValue) -> bool:
        return gate_value == self.condition

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConditionalGroup':
        return cls(
            gate=data["gate"],
            dependents=tuple(data.get("dependents", ())),
            condition=data.get("condition", True),
        )


@dataclass
class ValidationResult:
    """Result of validating one step against the record."""
    valid: bool = True
    errors: Dict[str, str] = field(default_factory=dict)

    def add_error(self, field_name: str, message: str):
        """Add an error message. The first error reported for a field wins."""
        self.errors.setdefault(field_name, message)
        self.valid = False

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def error_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)


@dataclass
class StepSchema:
    """
    Validation specification for one step.

    Rules are evaluated in declaration order, only against the fields the
    step declares.
    """

    step_id: str
    title: str = ""
    fields: List[FieldDefinition] = field(default_factory=list)
    rules: List['ValidationStrategy'] = field(default_factory=list)
    groups: List[ConditionalGroup] = field(default_factory=list)

    def __post_init__(self):
        self.check_references()

    @property
    def field_names(self) -> List[str]:
        return [definition.name for definition in self.fields]

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        for definition in self.fields:
            if definition.name == name:
                return definition
        return None

    def label_for(self, name: str) -> str:
        definition = self.get_field(name)
        return definition.display_label if definition else name

    def dependents(self) -> List[str]:
        """Names of all fields that sit behind a gate on this step."""
        names = []
        for group in self.groups:
            for name in group.dependents:
                if name not in names:
                    names.append(name)
        return names

    def check_references(self):
        """
        Ensure every rule and group only names declared fields.

        Raises:
            UnknownFieldReference: on the first undeclared name
        """
        declared = set(self.field_names)

        for rule in self.rules:
            for name in rule.referenced_fields():
                if name not in declared:
                    raise UnknownFieldReference(
                        name, step_id=self.step_id, context=type(rule).__name__
                    )

        for group in self.groups:
            for name in (group.gate,) + tuple(group.dependents):
                if name not in declared:
                    raise UnknownFieldReference(
                        name, step_id=self.step_id, context=f"group gated by {group.gate}"
                    )
