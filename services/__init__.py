# -*- coding: utf-8 -*-
"""
StepForm Service Layer
"""
