import os
import numpy as np
import matplotlib.pyplot as plt

from ..envs.grid import NodeType

# RGB per node kind
CELL_COLORS = {
    NodeType.EMPTY: (1.0, 1.0, 1.0),
    NodeType.START: (0.2, 0.8, 0.2),
    NodeType.END: (0.85, 0.15, 0.15),
    NodeType.WALL: (0.2, 0.2, 0.2),
    NodeType.VISITED: (0.6, 0.8, 1.0),
    NodeType.PATH: (1.0, 0.85, 0.2),
}


def render_search(grid, result=None, ax=None, title=None):
    """
    Render a Grid, optionally overlaid with a SearchResult.

    Layers:
      - cell kinds (walls dark, empty white)
      - visited cells (light blue), path cells (yellow)
      - start (green star), end (red star)
    The grid itself is not modified.
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W/5), max(3, H/5)), dpi=120)

    types = grid.types.copy()
    if result is not None:
        for node in result.visited_nodes:
            types[node.row, node.col] = NodeType.VISITED
        for node in result.path:
            types[node.row, node.col] = NodeType.PATH

    rgb = np.ones((H, W, 3), dtype=float)
    for kind, color in CELL_COLORS.items():
        rgb[types == kind] = color

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    start, end = grid.start, grid.end
    if start is not None:
        ax.plot(start.col, start.row, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
        ax.text(start.col+0.2, start.row-0.2, "S", color="k", fontsize=8)
    if end is not None:
        ax.plot(end.col, end.row, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)
        ax.text(end.col+0.2, end.row-0.2, "E", color="k", fontsize=8)

    if title:
        ax.set_title(title, fontsize=10)

    return ax


def save_search_figure(grid, result, path, title=None):
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(3, W/5), max(3, H/5)), dpi=120)
    render_search(grid, result, ax=ax, title=title)
    fig.tight_layout()
    out_dir = os.path.dirname(os.fspath(path))
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path
