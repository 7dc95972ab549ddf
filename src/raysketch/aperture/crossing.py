#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Orientation of a new element so that its connecting rays don't cross

The rays drawn between a parent and a child depend on the child's ray model:

    - 'collimated' and 'manual': parent upper to child upper and parent lower
      to child lower
    - 'divergent': parent pivot to child upper and to child lower
    - 'convergent': parent upper and parent lower to child pivot

When these two segments cross, the child's up axis is reversed and the test
repeated. If both orientations cross, the original orientation is kept.

.. Created on Thu Mar 21 14:38:06 2019

.. codeauthor: Michael J. Hayford
"""

import logging
from copy import copy

import raysketch.optical.model_constants as mc
from raysketch.elem.transform import global_pivot, global_aperture_points
from raysketch.typing import SegmentPair
from raysketch.util.line_intersection import segments_cross

logger = logging.getLogger(__name__)


def _with_geometry(element, geometry):
    """ Return a shallow copy of `element` that uses `geometry`. """
    trial = copy(element)
    trial.geometry = geometry
    return trial


def connection_segments(child, parent) -> SegmentPair:
    """ Return the pair of ray segments joining `parent` to `child`. """
    parent_pts = global_aperture_points(parent)
    child_pts = global_aperture_points(child)
    ray_model = child.geometry.ray_model

    if ray_model == 'divergent':
        parent_pivot = global_pivot(parent)
        return ((parent_pivot, child_pts[mc.upper]),
                (parent_pivot, child_pts[mc.lower]))
    elif ray_model == 'convergent':
        child_pivot = global_pivot(child)
        return ((parent_pts[mc.upper], child_pivot),
                (parent_pts[mc.lower], child_pivot))
    else:
        return ((parent_pts[mc.upper], child_pts[mc.upper]),
                (parent_pts[mc.lower], child_pts[mc.lower]))


def lines_cross(child, parent) -> bool:
    """ True if the connecting ray segments of child and parent cross. """
    seg1, seg2 = connection_segments(child, parent)
    return segments_cross(seg1, seg2)


def resolve_crossing(child, parent):
    """ Return the geometry `child` should adopt to avoid crossing rays.

    Args:
        child: the proposed child :class:`~.Element`, already placed
        parent: the parent :class:`~.Element`

    Returns:
        the child's geometry with the up axis reversed if only that
        orientation avoids crossing rays, otherwise the child's geometry
        unchanged
    """
    if not lines_cross(child, parent):
        return child.geometry

    flipped_geom = child.geometry.flipped()
    if not lines_cross(_with_geometry(child, flipped_geom), parent):
        logger.info("element %s flipped to avoid crossing rays",
                    child.ele_id)
        return flipped_geom

    logger.debug("element %s: rays cross in both orientations",
                 child.ele_id)
    return child.geometry
