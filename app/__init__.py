# -*- coding: utf-8 -*-
"""
StepForm Application Core Module
"""

from .config import Config

__all__ = ["Config"]
