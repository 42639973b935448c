# -*- coding: utf-8 -*-
"""
StepForm wizards.
"""
