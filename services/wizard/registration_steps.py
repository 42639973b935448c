# -*- coding: utf-8 -*-
"""
Registration wizard definition.

Three steps:
    0. personal     - first/last name, optional address with street
    1. payment      - card number and CVV
    2. confirmation - no fields, finishing submits the record
"""

from services.wizard.schema_registry import SchemaRegistry


class RegistrationSteps:
    """Step identifiers."""
    PERSONAL = "personal"
    PAYMENT = "payment"
    CONFIRMATION = "confirmation"

    ALL = (PERSONAL, PAYMENT, CONFIRMATION)


REGISTRATION_STEPS = [
    {
        "id": RegistrationSteps.PERSONAL,
        "title": "Personal data",
        "fields": [
            {"name": "name", "label": "First name"},
            {"name": "lastName", "label": "Last name"},
            {"name": "address", "label": "Address", "kind": "boolean", "default": False},
            {"name": "street", "label": "Street"},
        ],
        "rules": [
            {"rule": "required", "field": "name"},
            {"rule": "required", "field": "lastName"},
            {"rule": "required", "field": "address"},
            {"rule": "required_if", "field": "street", "gate": "address", "equals": True},
        ],
        "groups": [
            {"gate": "address", "dependents": ["street"], "condition": True},
        ],
    },
    {
        "id": RegistrationSteps.PAYMENT,
        "title": "Payment",
        "fields": [
            {"name": "cardNumber", "label": "Card number"},
            {"name": "cvv", "label": "CVV"},
        ],
        "rules": [
            {"rule": "required", "field": "cardNumber"},
            {"rule": "required", "field": "cvv"},
        ],
    },
    {
        "id": RegistrationSteps.CONFIRMATION,
        "title": "Confirmation",
    },
]


def build_registration_registry() -> SchemaRegistry:
    """Load the registration wizard's step schemas."""
    return SchemaRegistry.from_definitions(REGISTRATION_STEPS)
