#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Aperture projections perpendicular to the center trace line

The center trace line joins the parent's pivot to the child's pivot. Each
element's aperture is projected onto the direction perpendicular to it.

.. Created on Mon Mar 18 21:03:44 2019

.. codeauthor: Michael J. Hayford
"""

from collections import namedtuple

import numpy as np

import raysketch.optical.model_constants as mc
from raysketch.elem.transform import global_pivot, global_direction
from raysketch.util.misc_math import (perpendicular_2d, is_kinda_zero,
                                      normalize, distance_2d)

ProjectionData = namedtuple('ProjectionData', ['aperture_radius',
                                               'aperture_projection',
                                               'projection_factor'])
ProjectionData.aperture_radius.__doc__ = "aperture radius of the element"
ProjectionData.aperture_projection.__doc__ = \
    "aperture extent perpendicular to the center trace line"
ProjectionData.projection_factor.__doc__ = \
    "\\|world up . perpendicular|, 0 when the aperture is edge on"

Projections = namedtuple('Projections', ['child', 'parent',
                                         'center_line_length'])
Projections.child.__doc__ = "ProjectionData for the child element"
Projections.parent.__doc__ = "ProjectionData for the parent element"
Projections.center_line_length.__doc__ = "distance between the pivots"


def projection_data(element, perp) -> ProjectionData:
    """ Project the aperture of `element` onto the unit vector `perp`. """
    geom = element.geometry
    world_up = global_direction(geom.up_vector, element.rotation)
    factor = abs(float(np.dot(world_up, perp)))
    if is_kinda_zero(factor, mc.zero_tol):
        factor = 0.0
    radius = geom.aperture_radius
    return ProjectionData(radius, radius*factor, factor)


def compute_projections(child, parent):
    """ Return the :class:`Projections` for a parent/child pair.

    Returns:
        a :class:`Projections`, or None if the pivots coincide
    """
    child_pivot = global_pivot(child)
    parent_pivot = global_pivot(parent)
    center_line = child_pivot - parent_pivot
    length = distance_2d(child_pivot, parent_pivot)
    if is_kinda_zero(length, mc.zero_tol):
        return None

    perp = perpendicular_2d(normalize(center_line))
    return Projections(projection_data(child, perp),
                       projection_data(parent, perp),
                       length)
