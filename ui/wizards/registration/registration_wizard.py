# -*- coding: utf-8 -*-
"""
Registration Wizard - personal data, payment and confirmation.

Submission is only logged; nothing is sent to a backend.
"""

from typing import Any, Mapping

from app.config import Config
from services.wizard.registration_steps import build_registration_registry
from services.wizard.schema_registry import SchemaRegistry
from ui.wizards.framework.base_wizard import BaseWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistrationWizard(BaseWizard):
    """Three-step registration form."""

    def create_registry(self) -> SchemaRegistry:
        return build_registration_registry()

    def on_submit(self, record: Mapping[str, Any]):
        logger.info(f"Registration submitted: {dict(record)}")

    def get_wizard_title(self) -> str:
        return Config.APP_TITLE
