# -*- coding: utf-8 -*-
"""
StepForm rendering layer (PyQt5).
"""
