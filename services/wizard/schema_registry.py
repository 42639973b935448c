# -*- coding: utf-8 -*-
"""
Schema Registry - Maps step identifiers to their step schemas.

Provides a central point for declaring the steps of a wizard, either
programmatically or from a plain data table.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from models.field import FieldDefinition
from models.step_schema import ConditionalGroup, StepSchema
from services.exceptions import DuplicateStepSchema, MissingStepSchema, WizardConfigurationError
from services.validation.validation_strategy import rule_from_dict
from utils.logger import get_logger

logger = get_logger(__name__)


def build_step_schema(data: Mapping[str, Any]) -> StepSchema:
    """
    Build a step schema from a plain mapping.

    Expected shape:
        {
            "id": "personal",
            "title": "Personal data",
            "fields": [{"name": "address", "kind": "boolean"}, ...],
            "rules": [{"rule": "required", "field": "name"}, ...],
            "groups": [{"gate": "address", "dependents": ["street"], "condition": True}],
        }

    Raises:
        UnknownFieldReference: if a rule or group names an undeclared field
    """
    if "id" not in data:
        raise WizardConfigurationError("Step definition without an id")

    return StepSchema(
        step_id=data["id"],
        title=data.get("title", ""),
        fields=[FieldDefinition.from_dict(item) for item in data.get("fields", [])],
        rules=[rule_from_dict(item) for item in data.get("rules", [])],
        groups=[ConditionalGroup.from_dict(item) for item in data.get("groups", [])],
    )


class SchemaRegistry:
    """
    Ordered registry of step schemas.

    Registration order is step order.
    """

    def __init__(self, schemas: Optional[Iterable[StepSchema]] = None):
        self._schemas: Dict[str, StepSchema] = {}
        for schema in schemas or []:
            self.register_schema(schema)

    @classmethod
    def from_definitions(cls, definitions: Iterable[Mapping[str, Any]]) -> 'SchemaRegistry':
        """Load every step of a wizard from plain mappings."""
        registry = cls()
        for data in definitions:
            registry.register_schema(build_step_schema(data))
        return registry

    def register_schema(self, schema: StepSchema):
        """
        Register the schema of a step.

        Raises:
            DuplicateStepSchema: if the step id is already registered
        """
        if schema.step_id in self._schemas:
            raise DuplicateStepSchema(schema.step_id)

        # Schemas built by hand may have been mutated since construction
        schema.check_references()
        self._schemas[schema.step_id] = schema
        logger.debug(
            f"Registered schema '{schema.step_id}' "
            f"({len(schema.fields)} fields, {len(schema.rules)} rules, {len(schema.groups)} groups)"
        )

    def get_schema(self, step_id: str) -> StepSchema:
        """
        Get the schema of a step.

        Raises:
            MissingStepSchema: if no schema is registered for the step
        """
        try:
            return self._schemas[step_id]
        except KeyError:
            raise MissingStepSchema(step_id) from None

    def get_step_ids(self) -> List[str]:
        """Registered step ids in step order."""
        return list(self._schemas.keys())

    def ensure_steps(self, step_ids: Iterable[str]):
        """
        Check that every step of a wizard has a schema.

        Raises:
            MissingStepSchema: for the first step without one
        """
        for step_id in step_ids:
            if step_id not in self._schemas:
                raise MissingStepSchema(step_id)

    def find_field(self, name: str) -> Optional[FieldDefinition]:
        """First declaration of a field across all steps."""
        for schema in self._schemas.values():
            definition = schema.get_field(name)
            if definition is not None:
                return definition
        return None

    def all_groups(self, step_ids: Optional[Iterable[str]] = None) -> List[ConditionalGroup]:
        """
        Conditional groups of the given steps (default: every step), without
        duplicates, in step order.
        """
        if step_ids is None:
            step_ids = self.get_step_ids()
        groups = []
        for step_id in step_ids:
            for group in self.get_schema(step_id).groups:
                if group not in groups:
                    groups.append(group)
        return groups

    def __len__(self) -> int:
        return len(self._schemas)
