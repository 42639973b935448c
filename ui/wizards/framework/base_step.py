# -*- coding: utf-8 -*-
"""
Form Step - Widget that renders one step schema.

Every declared field becomes a control:
- text fields: InputField with a label
- boolean fields: QCheckBox

User input is dispatched to the WizardController; the widget redraws
itself from the controller's projections in refresh().
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QCheckBox

from app.config import Config
from controllers.wizard_controller import WizardController
from models.field import FieldDefinition
from models.step_schema import StepSchema
from ui.components.input_field import InputField


class FormStep(QWidget):
    """
    Renders the controls of a step and keeps them in sync with the record.
    """

    def __init__(self, schema: StepSchema, controller: WizardController,
                 parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            schema: Schema of the step to render
            controller: Wizard the step dispatches its input to
            parent: Parent widget
        """
        super().__init__(parent)
        self.schema = schema
        self.controller = controller

        self.controls: Dict[str, QWidget] = {}
        self.rows: Dict[str, QWidget] = {}
        self.error_labels: Dict[str, QLabel] = {}
        self._populating = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.setup_ui()

    def setup_ui(self):
        """Create one row per declared field."""
        title = QLabel(self.get_step_title())
        title.setStyleSheet(f"font-weight: bold; color: {Config.TEXT_COLOR};")
        self.main_layout.addWidget(title)

        if not self.schema.fields:
            hint = QLabel("Review your data and press Finish to submit.")
            hint.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
            self.main_layout.addWidget(hint)

        for definition in self.schema.fields:
            self.main_layout.addWidget(self._create_row(definition))

        self.main_layout.addStretch()

    def _create_row(self, definition: FieldDefinition) -> QWidget:
        row = QWidget()
        row.setFixedWidth(Config.FORM_WIDTH)
        layout = QVBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        name = definition.name
        if definition.kind == "boolean":
            control = QCheckBox(definition.display_label)
            control.toggled.connect(lambda checked, n=name: self._on_input(n, checked))
        else:
            layout.addWidget(QLabel(definition.display_label))
            control = InputField(placeholder=definition.display_label)
            control.textChanged.connect(lambda text, n=name: self._on_input(n, text))
        layout.addWidget(control)

        error_label = QLabel("")
        error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        error_label.hide()
        layout.addWidget(error_label)

        self.controls[name] = control
        self.rows[name] = row
        self.error_labels[name] = error_label
        return row

    def get_step_title(self) -> str:
        return self.schema.title or self.schema.step_id

    def _on_input(self, name: str, value):
        if self._populating:
            return
        self.controller.on_field_change(name, value)

    def refresh(self):
        """Redraw values, visibility and errors from the controller."""
        self._populating = True
        try:
            values = self.controller.field_values
            errors = self.controller.field_errors

            for definition in self.schema.fields:
                name = definition.name
                visible = self.controller.is_field_visible(name)
                self.rows[name].setHidden(not visible)

                control = self.controls[name]
                value = values.get(name)
                if isinstance(control, QCheckBox):
                    control.setChecked(bool(value))
                else:
                    text = value if isinstance(value, str) else ""
                    if control.text() != text:
                        control.setText(text)

                message = errors.get(name) if visible else None
                error_label = self.error_labels[name]
                error_label.setText(message or "")
                error_label.setVisible(message is not None)
                if isinstance(control, InputField):
                    if message is not None:
                        control.set_error()
                    else:
                        control.set_default()
        finally:
            self._populating = False

    def is_row_hidden(self, name: str) -> bool:
        return self.rows[name].isHidden()

    def error_text(self, name: str) -> str:
        return self.error_labels[name].text()
