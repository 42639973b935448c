# -*- coding: utf-8 -*-
"""
Field entity model.
"""

from dataclasses import dataclass, field
from typing import Optional, Union
from datetime import datetime

from services.exceptions import WizardConfigurationError

# A field holds a string, a boolean or nothing yet
FieldValue = Optional[Union[str, bool]]


@dataclass
class Field:
    """
    A single named value of the in-progress record.

    Created on first write or when a step registers it; destroyed when
    unregistered (value and error are both discarded).
    """

    name: str
    value: FieldValue = None
    error: Optional[str] = None
    dirty: bool = False

    # Metadata
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def has_error(self) -> bool:
        """Check if the field currently carries an error message."""
        return self.error is not None


@dataclass(frozen=True)
class FieldDefinition:
    """A control declared by a step."""

    name: str
    label: str = ""
    kind: str = "text"  # text, boolean
    default: FieldValue = None

    KINDS = ("text", "boolean")

    @property
    def display_label(self) -> str:
        return self.label or self.name

    @classmethod
    def from_dict(cls, data: dict) -> 'FieldDefinition':
        """Build a definition from a plain mapping."""
        kind = data.get("kind", "text")
        if kind not in cls.KINDS:
            raise WizardConfigurationError(f"Unsupported field kind for {data.get('name')}: {kind}")
        default = data.get("default")
        if default is None and kind == "boolean":
            default = False
        return cls(
            name=data["name"],
            label=data.get("label", ""),
            kind=kind,
            default=default,
        )
