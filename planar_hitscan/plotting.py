"""
Matplotlib helpers for hosts that hand entities an ``Axes`` as their surface.

The core modules never import matplotlib; only this module does.
"""
from typing import Iterable, Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

from .entity import AbstractEntity, scan_entities
from .hit import DistancedHit
from .point import StaticPoint


def draw_bounding_box(entity: AbstractEntity, ax: Axes, *,
                      edgecolor: str = 'k',
                      facecolor: str = 'none',
                      linewidth: float = 1.0) -> Rectangle:
    """Add the entity's bounding box to *ax* as a rectangle patch."""
    tl = entity.top_left_corner()
    patch = Rectangle((tl.x, tl.y), entity.width, entity.height,
                      edgecolor=edgecolor, facecolor=facecolor,
                      linewidth=linewidth)
    ax.add_patch(patch)
    return patch


def plot_scan(
    entities: Iterable[AbstractEntity],
    start: StaticPoint,
    end: StaticPoint,
    ax: Optional[Axes] = None,
    *,
    segment_color: str = 'tab:red',
    hit_color: str = 'tab:blue',
    set_limits: bool = True,
    show: bool = True,
) -> DistancedHit:
    """
    Draw *entities*, the scan segment and its nearest hit.

    Each entity draws itself via ``entity.draw(ax)``. The y axis is
    inverted to match screen coordinates. Returns the nearest hit
    (``MISS`` if nothing was hit).
    """
    entities = list(entities)
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    for entity in entities:
        entity.draw(ax)

    ax.plot([start.x, end.x], [start.y, end.y], color=segment_color)
    hit = scan_entities(entities, start, end)
    if not hit.is_miss:
        ax.plot([hit.point.x], [hit.point.y], marker='o', color=hit_color)

    if set_limits:
        xs = [start.x, end.x]
        ys = [start.y, end.y]
        for entity in entities:
            left, top, right, bottom = entity.bounding_box()
            xs += [left, right]
            ys += [top, bottom]
        ax.set_xlim(min(xs) - 1.0, max(xs) + 1.0)
        # Screen coordinates: larger y is lower on the plot.
        ax.set_ylim(max(ys) + 1.0, min(ys) - 1.0)
        ax.set_aspect('equal')

    if show:
        plt.show()
    return hit
