# -*- coding: utf-8 -*-
"""
Evaluation helpers: run several planners on the same map and tabulate
path length, nodes visited and runtime.
"""

from .compare import METRIC_COLUMNS, compare_planners, summarize_metrics

__all__ = ["METRIC_COLUMNS", "compare_planners", "summarize_metrics"]
