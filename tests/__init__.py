#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test package for gridpath.

Forces a non-interactive matplotlib backend so rendering tests run headless.
"""

import os
os.environ.setdefault("MPLBACKEND", "Agg")

import warnings
warnings.filterwarnings("ignore", category=UserWarning)
