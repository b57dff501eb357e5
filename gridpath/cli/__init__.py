# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m gridpath.cli.<name>`):

- run_search   : run one planner on a map, print the explored map, optional
                 step-by-step animation, JSON output and PNG figure
- run_compare  : run every planner on the same map and tabulate path length,
                 nodes visited and runtime
"""
__all__ = [
    "run_search",
    "run_compare",
]
