# -*- coding: utf-8 -*-
"""
Shared fixtures for StepForm tests.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Must be set before app.config is imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("STEPFORM_LOGS_DIR", str(Path(tempfile.gettempdir()) / "stepform-test-logs"))

from controllers.wizard_controller import WizardController  # noqa: E402
from services.wizard.registration_steps import (  # noqa: E402
    REGISTRATION_STEPS, RegistrationSteps, build_registration_registry
)
from services.wizard.schema_registry import SchemaRegistry  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def registry():
    """The three-step registration schemas."""
    return build_registration_registry()


@pytest.fixture
def two_step_registry():
    """Personal and payment steps only: payment is the last step."""
    return SchemaRegistry.from_definitions(
        step for step in REGISTRATION_STEPS
        if step["id"] in (RegistrationSteps.PERSONAL, RegistrationSteps.PAYMENT)
    )


@pytest.fixture
def submissions():
    """Collects every record passed to on_submit."""
    return []


@pytest.fixture
def wizard(registry, submissions):
    """Registration wizard controller, no widgets involved."""
    return WizardController(registry, on_submit=submissions.append)


@pytest.fixture
def personal_data():
    return {"name": "Ana", "lastName": "Lima"}


def _fill(controller, values):
    for name, value in values.items():
        assert controller.on_field_change(name, value), f"change of {name} refused"


@pytest.fixture
def fill():
    """Dispatch several field changes, asserting each one is accepted."""
    return _fill
