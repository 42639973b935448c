# -*- coding: utf-8 -*-
"""
Tests for the Registration Wizard widgets.

Tests cover:
- Wizard initialization
- Conditional street field
- Inline validation feedback
- Navigation and submission through the buttons
"""

import pytest

from ui.wizards.framework.base_step import FormStep
from ui.wizards.registration import RegistrationWizard


@pytest.fixture
def wizard(qapp, qtbot):
    """Create wizard instance for testing."""
    widget = RegistrationWizard()
    qtbot.addWidget(widget)
    return widget


def type_into(step: FormStep, values: dict):
    for name, value in values.items():
        control = step.controls[name]
        if isinstance(value, bool):
            control.setChecked(value)
        else:
            control.setText(value)


class TestWizardInitialization:
    """Test wizard initialization and setup."""

    def test_wizard_has_three_steps(self, wizard):
        assert len(wizard.steps) == 3
        assert [step.get_step_title() for step in wizard.steps] == [
            "Personal data", "Payment", "Confirmation"
        ]

    def test_wizard_starts_at_first_step(self, wizard):
        assert wizard.navigator.current_index == 0
        assert wizard.step_container.currentIndex() == 0

    def test_previous_button_disabled_at_start(self, wizard):
        assert wizard.btn_previous.isEnabled() is False
        assert wizard.btn_next.text() == "Next"

    def test_street_hidden_at_start(self, wizard):
        step = wizard.current_step_widget()
        assert step.is_row_hidden("street") is True
        assert step.is_row_hidden("name") is False


class TestConditionalStreet:
    """Test the address checkbox and its street field."""

    def test_checking_address_shows_street(self, wizard):
        step = wizard.current_step_widget()

        step.controls["address"].setChecked(True)

        assert step.is_row_hidden("street") is False
        assert wizard.controller.field_values["address"] is True

    def test_unchecking_address_clears_street(self, wizard):
        step = wizard.current_step_widget()
        type_into(step, {"address": True, "street": "Main St"})
        assert wizard.controller.field_values["street"] == "Main St"

        step.controls["address"].setChecked(False)

        assert step.is_row_hidden("street") is True
        assert step.controls["street"].text() == ""
        assert "street" not in wizard.controller.field_values


class TestNavigation:
    """Test navigation through the footer buttons."""

    def test_invalid_step_shows_errors(self, wizard):
        step = wizard.current_step_widget()

        wizard.btn_next.click()

        assert wizard.navigator.current_index == 0
        assert step.error_text("name") == "First name is required"
        assert step.controls["name"].has_error() is True
        assert step.error_text("address") == ""
        assert "First name is required" in wizard.footer.status_label.text()

    def test_typing_clears_error(self, wizard):
        step = wizard.current_step_widget()
        wizard.btn_next.click()

        step.controls["name"].setText("Ana")

        assert step.error_text("name") == ""
        assert step.controls["name"].has_error() is False

    def test_next_and_previous(self, wizard):
        type_into(wizard.current_step_widget(), {"name": "Ana", "lastName": "Lima"})

        wizard.btn_next.click()
        assert wizard.step_container.currentIndex() == 1
        assert wizard.btn_previous.isEnabled() is True

        wizard.btn_previous.click()
        assert wizard.step_container.currentIndex() == 0
        assert wizard.current_step_widget().controls["name"].text() == "Ana"

    def test_submission(self, wizard, qtbot):
        type_into(wizard.current_step_widget(), {"name": "Ana", "lastName": "Lima"})
        wizard.btn_next.click()
        type_into(wizard.current_step_widget(), {"cardNumber": "4111", "cvv": "123"})
        wizard.btn_next.click()
        assert wizard.btn_next.text() == "Finish"

        with qtbot.waitSignal(wizard.wizard_completed, timeout=1000) as blocker:
            wizard.btn_next.click()

        assert blocker.args[0] == {
            "name": "Ana",
            "lastName": "Lima",
            "address": False,
            "cardNumber": "4111",
            "cvv": "123",
        }
        assert wizard.btn_next.isEnabled() is False
        assert wizard.btn_previous.isEnabled() is False
        assert "Submitted" in wizard.footer.status_label.text()
