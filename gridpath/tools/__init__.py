# -*- coding: utf-8 -*-
"""Rendering helpers (matplotlib)."""

from .render import CELL_COLORS, render_search, save_search_figure

__all__ = ["CELL_COLORS", "render_search", "save_search_figure"]
