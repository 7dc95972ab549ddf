#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Transforms between element local coordinates and world coordinates

An element's local frame rotates about the element's pivot point,
`geometry.center_pt`. The element's world position (x, y) is the world
location of that pivot. Angles are in degrees, screen convention.

.. Created on Fri Feb  9 10:09:58 2018

.. codeauthor: Michael J. Hayford
"""

import numpy as np

from raysketch.coord_geometry_types import Vec2d, Dir2d, Tfm2d
from raysketch.util.misc_math import rot2d


def element_transform(element) -> Tfm2d:
    """ Return the (rotation, translation) of the element's pivot frame. """
    r = rot2d(element.rotation)
    t = np.array([element.x, element.y], dtype=float)
    return r, t


def to_global(local_pt, element) -> Vec2d:
    """ Transform `local_pt` in `element` coordinates to world coordinates.

    The point is rotated about the element's pivot by the element rotation
    and the pivot is then placed at the element's world position.
    """
    r, t = element_transform(element)
    rel_pt = np.asarray(local_pt, dtype=float) - element.geometry.center_pt
    return r.dot(rel_pt) + t


def global_direction(local_dir, rotation: float) -> Dir2d:
    """ Rotate the direction vector `local_dir` by `rotation` degrees. """
    return rot2d(rotation).dot(np.asarray(local_dir, dtype=float))


def global_pivot(element) -> Vec2d:
    return to_global(element.geometry.center_pt, element)


def global_aperture_points(element):
    """ Return the world (upper, lower) aperture endpoints of `element`. """
    upper, lower = element.geometry.aperture_points()
    return to_global(upper, element), to_global(lower, element)
