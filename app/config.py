# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent
_LOGS_DIR = Path(os.getenv("STEPFORM_LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_LOG_LEVEL = os.getenv("STEPFORM_LOG_LEVEL", "INFO").upper()
_FILE_LOG_LEVEL = os.getenv("STEPFORM_FILE_LOG_LEVEL", "DEBUG").upper()
_DEV_MODE = os.getenv("STEPFORM_DEV_MODE", "false").lower() in ("true", "1", "yes")
_REFERENCE_PREFIX = os.getenv("STEPFORM_REFERENCE_PREFIX", "REG")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "StepForm"
    APP_TITLE: str = "Registration Wizard"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "StepForm"

    # Development Mode
    # Shows the "Log state" button in the wizard footer
    DEV_MODE: bool = _DEV_MODE

    # Wizard sessions
    REFERENCE_PREFIX: str = _REFERENCE_PREFIX

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = _LOGS_DIR

    # Logging
    LOG_FILE: str = "stepform.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    CONSOLE_LOG_LEVEL: str = _LOG_LEVEL
    FILE_LOG_LEVEL: str = _FILE_LOG_LEVEL

    # UI Settings
    WINDOW_MIN_WIDTH: int = 640
    WINDOW_MIN_HEIGHT: int = 520
    FORM_WIDTH: int = 400

    # Colors
    PRIMARY_COLOR: str = "#0072BC"
    TEXT_COLOR: str = "#2C3E50"
    TEXT_LIGHT: str = "#5D6D7E"
    BACKGROUND_COLOR: str = "#F8F9FA"
    BORDER_COLOR: str = "#DEE2E6"
    INPUT_BORDER: str = "#CBD5E0"
    INPUT_FOCUS: str = "#0072BC"
    SUCCESS_COLOR: str = "#27AE60"
    ERROR_COLOR: str = "#E74C3C"
