# -*- coding: utf-8 -*-
"""
Tests for the WizardController (no widgets involved).
"""

import pytest

from controllers.wizard_controller import WizardController
from services.exceptions import MissingStepSchema, StaleDependentDataError
from services.wizard.step_validator import validate


class TestInitialization:
    """Test wizard construction."""

    def test_starts_at_first_step(self, wizard):
        assert wizard.current_step == 0
        assert wizard.current_step_id == "personal"
        assert wizard.step_count == 3

    def test_first_step_fields_registered(self, wizard):
        assert wizard.field_values == {"name": None, "lastName": None, "address": False}

    def test_street_hidden_until_address_checked(self, wizard):
        names = [definition.name for definition in wizard.visible_fields]
        assert names == ["name", "lastName", "address"]

    def test_step_without_schema_fails_fast(self, registry):
        with pytest.raises(MissingStepSchema):
            WizardController(registry, step_ids=["personal", "shipping"])

    def test_reference_prefix(self, registry):
        controller = WizardController(registry, reference_prefix="TST")
        assert controller.context.reference_number.startswith("TST-")


class TestAdvanceGating:
    """Advance moves forward if and only if the current step validates."""

    @pytest.mark.parametrize("values", [
        {},
        {"name": "Ana"},
        {"name": "Ana", "lastName": "Lima"},
        {"name": "Ana", "lastName": "Lima", "address": True},
        {"name": "Ana", "lastName": "Lima", "address": True, "street": ""},
        {"name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"},
        {"name": " ", "lastName": "Lima", "address": False},
    ])
    def test_advance_iff_valid(self, wizard, fill, values):
        fill(wizard, values)
        expected = validate(wizard.current_step_schema,
                            wizard.store.get_values(wizard.current_step_schema.field_names))

        moved = wizard.request_advance()

        assert moved is expected.valid
        assert wizard.current_step == (1 if expected.valid else 0)

    def test_missing_name_blocks_advance(self, wizard, fill):
        fill(wizard, {"name": "", "lastName": "Doe", "address": False})

        assert wizard.request_advance() is False
        assert wizard.current_step == 0
        assert wizard.field_errors == {"name": "First name is required"}

    def test_whitespace_name_advances(self, wizard, fill):
        fill(wizard, {"name": "   ", "lastName": "Doe"})

        assert wizard.request_advance() is True
        assert wizard.current_step == 1

    def test_missing_street_blocks_advance(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True, "street": ""})

        assert wizard.request_advance() is False
        assert wizard.field_errors == {"street": "Street is required"}

    def test_street_filled_advances(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"})

        assert wizard.request_advance() is True
        assert wizard.current_step == 1
        assert wizard.current_step_id == "payment"

    def test_correcting_a_field_clears_its_error(self, wizard, fill):
        wizard.request_advance()
        assert set(wizard.field_errors) == {"name", "lastName"}

        fill(wizard, {"name": "Ana"})

        assert wizard.field_errors == {"lastName": "Last name is required"}

    def test_errors_only_surface_for_current_step(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        wizard.request_advance()
        assert set(wizard.field_errors) == {"cardNumber", "cvv"}

        wizard.request_retreat()

        assert wizard.field_errors == {}
        assert set(wizard.store.get_errors()) == {"cardNumber", "cvv"}

    def test_validation_failed_signal(self, wizard):
        failures = []
        wizard.navigator.validation_failed.connect(failures.append)

        wizard.request_advance()

        assert len(failures) == 1
        assert set(failures[0].errors) == {"name", "lastName"}


class TestRetreat:
    """Retreat is always allowed and never validates."""

    def test_retreat_skips_validation(self, wizard, fill, monkeypatch):
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        wizard.request_advance()  # payment invalid, errors attached

        calls = []
        original = wizard.validator.validate_step
        monkeypatch.setattr(
            wizard.validator, "validate_step",
            lambda step_id: calls.append(step_id) or original(step_id)
        )

        assert wizard.request_retreat() is True
        assert wizard.current_step == 0
        assert calls == []

    def test_retreat_at_first_step_is_noop(self, wizard):
        assert wizard.request_retreat() is False
        assert wizard.current_step == 0

    def test_values_persist_across_navigation(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111"})

        wizard.request_retreat()

        assert wizard.current_step == 0
        assert wizard.store.get_values(["name", "lastName", "address", "street"]) == {
            "name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"
        }
        assert wizard.field_values["cardNumber"] == "4111"

    def test_aliases(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        assert wizard.on_advance() is True
        assert wizard.on_retreat() is True


class TestConditionalFields:
    """Hidden fields never reach the record."""

    def test_unchecking_address_drops_street(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"})

        assert wizard.on_field_change("address", False) is True

        assert "street" not in wizard.field_values
        assert wizard.request_advance() is True

    def test_absent_street_not_reported(self, wizard, fill):
        fill(wizard, {"address": True, "street": "Main St", "name": ""})
        wizard.on_field_change("address", False)

        wizard.request_advance()

        assert "street" not in wizard.field_errors
        assert "street" not in wizard.store.get_errors()

    def test_hidden_field_write_refused(self, wizard):
        rejected = []
        wizard.field_rejected.connect(rejected.append)

        assert wizard.on_field_change("street", "Main St") is False

        assert "street" not in wizard.field_values
        assert rejected == ["street"]

    def test_unknown_field_refused(self, wizard):
        assert wizard.on_field_change("nickname", "Ana") is False
        assert "nickname" not in wizard.field_values

    def test_rechecking_address_leaves_street_absent(self, wizard, fill):
        fill(wizard, {"address": True, "street": "Main St"})
        fill(wizard, {"address": False})
        fill(wizard, {"address": True})

        assert "street" not in wizard.field_values
        assert [f.name for f in wizard.visible_fields][-1] == "street"

    def test_address_error_shown_for_visible_street(self, wizard, fill):
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True})

        wizard.request_advance()

        assert wizard.field_errors == {"street": "Street is required"}
        assert wizard.field_values["street"] is None


class TestSubmission:
    """Submitting from the last step."""

    def test_two_step_wizard_submits_merged_record(self, two_step_registry, submissions, fill):
        wizard = WizardController(two_step_registry, on_submit=submissions.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        assert wizard.request_advance() is True
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})

        assert wizard.request_advance() is True

        assert len(submissions) == 1
        assert dict(submissions[0]) == {
            "name": "Ana",
            "lastName": "Lima",
            "address": False,
            "cardNumber": "4111",
            "cvv": "123",
        }
        assert wizard.current_step == 1

    def test_full_wizard_submits_from_confirmation(self, wizard, submissions, fill):
        completed = []
        wizard.wizard_completed.connect(completed.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima", "address": True, "street": "Main St"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})
        wizard.request_advance()
        assert wizard.current_step == 2
        assert submissions == []

        assert wizard.request_advance() is True

        assert submissions == completed
        assert dict(submissions[0])["street"] == "Main St"
        assert wizard.context.is_completed
        assert wizard.context.completed_steps == {0, 1, 2}

    def test_invalid_last_step_does_not_submit(self, two_step_registry, submissions, fill):
        wizard = WizardController(two_step_registry, on_submit=submissions.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111"})

        assert wizard.request_advance() is False

        assert submissions == []
        assert wizard.field_errors == {"cvv": "CVV is required"}
        assert wizard.is_submitted is False

    def test_snapshot_is_read_only(self, two_step_registry, submissions, fill):
        wizard = WizardController(two_step_registry, on_submit=submissions.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})
        wizard.request_advance()

        with pytest.raises(TypeError):
            submissions[0]["cvv"] = "999"

    def test_submission_is_terminal(self, two_step_registry, submissions, fill):
        wizard = WizardController(two_step_registry, on_submit=submissions.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})
        wizard.request_advance()

        assert wizard.request_advance() is False
        assert wizard.request_retreat() is False
        assert wizard.on_field_change("cvv", "999") is False
        assert wizard.submit() is False
        assert len(submissions) == 1
        assert wizard.submitted_record["cvv"] == "123"

    def test_submit_only_from_last_step(self, wizard, submissions, fill):
        errors = []
        wizard.operation_error.connect(lambda operation, message: errors.append(operation))
        fill(wizard, {"name": "Ana", "lastName": "Lima"})

        assert wizard.submit() is False
        assert submissions == []
        assert errors == ["submit"]
        assert wizard.last_error == "Cannot submit from step 0"

    def test_stale_dependent_data_raises(self, two_step_registry, submissions, fill):
        wizard = WizardController(two_step_registry, on_submit=submissions.append)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})
        # Bypass the controller to simulate a broken invariant
        wizard.store.register_field("street", "Main St")

        with pytest.raises(StaleDependentDataError) as exc_info:
            wizard.request_advance()

        assert exc_info.value.fields == ["street"]
        assert submissions == []

    def test_without_callback(self, two_step_registry, fill):
        wizard = WizardController(two_step_registry)
        fill(wizard, {"name": "Ana", "lastName": "Lima"})
        wizard.request_advance()
        fill(wizard, {"cardNumber": "4111", "cvv": "123"})

        assert wizard.request_advance() is True
        assert wizard.is_submitted


class TestDescribeState:
    """Test the state dump."""

    def test_describe_state(self, wizard, fill):
        fill(wizard, {"name": "Ana"})
        wizard.request_advance()

        state = wizard.describe_state()

        assert state["current_step_id"] == "personal"
        assert state["errors"] == {"lastName": "Last name is required"}
        assert state["data"]["name"] == "Ana"
        assert state["submitted"] is False
