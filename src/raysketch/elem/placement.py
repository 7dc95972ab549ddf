#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Placement of new elements adjacent to a selected element

.. Created on Tue Feb 12 09:20:17 2019

.. codeauthor: Michael J. Hayford
"""

from math import atan2, cos, sin, degrees, radians

import attr
import numpy as np

import raysketch.optical.model_constants as mc


@attr.s
class Placement():
    """ world position and rotation for an element pivot """
    x = attr.ib(converter=float)
    y = attr.ib(converter=float)
    rotation = attr.ib(default=0.0, converter=float)


def snap_to_grid(x, y, grid_size=mc.grid_size):
    """ Round (x, y) to the grid; a zero grid_size disables snapping. """
    if not grid_size:
        return (x, y)
    return (round(x/grid_size)*grid_size, round(y/grid_size)*grid_size)


def arrow_endpoint(x, y, rotation, spacing=mc.component_spacing,
                   snap_size=mc.arrow_tip_snap_size):
    """ Return the endpoint of the ray leaving an element's pivot.

    The ray leaves the pivot (x, y) along the rotation direction and has
    length `spacing`. The endpoint is snapped to a `snap_size` grid.
    """
    ang = radians(rotation)
    raw_x = x + spacing*cos(ang)
    raw_y = y + spacing*sin(ang)
    if snap_size:
        raw_x, raw_y = snap_to_grid(raw_x, raw_y, snap_size)
    return np.array([raw_x, raw_y])


def compute_placement(geometry, parent=None, next_position=(0., 0.)):
    """ Return the :class:`Placement` for a new element.

    With a `parent`, the new element's pivot is placed at the parent's ray
    endpoint and the element is rotated so its forward vector lines up with
    the parent's ray direction. Otherwise, the element is placed unrotated
    at `next_position`.

    Args:
        geometry: the :class:`~.ApertureGeometry` of the new element
        parent: the selected :class:`~.Element`, or None
        next_position: fallback position when there is no parent
    """
    if parent is None or parent.arrow_pt is None:
        return Placement(*next_position)

    center_x, center_y = parent.arrow_pt
    dx = center_x - parent.x
    dy = center_y - parent.y
    if dx == 0.0 and dy == 0.0:
        return Placement(center_x, center_y, 0.0)

    fwd = geometry.forward_vector
    current_angle = atan2(fwd[1], fwd[0])
    target_angle = atan2(dy, dx)
    rotation = degrees(target_angle - current_angle)
    return Placement(center_x, center_y, rotation)
