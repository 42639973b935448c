#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
StepForm - Multi-step registration wizard
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from ui.wizards.registration import RegistrationWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    app = QApplication(sys.argv)
    app.setApplicationName(Config.APP_NAME)
    app.setOrganizationName(Config.ORGANIZATION)

    logger.info("=" * 80)
    logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
    logger.info("=" * 80)

    wizard = RegistrationWizard()
    wizard.setWindowTitle(Config.APP_TITLE)
    wizard.wizard_completed.connect(
        lambda record: logger.info(f"Wizard finished with {len(record)} fields")
    )
    wizard.show()

    exit_code = app.exec_()
    logger.info(f"Application exited with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
