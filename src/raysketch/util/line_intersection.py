#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Intersection of 2d line segments

.. Created on Wed Apr 18 11:04:53 2018

.. codeauthor: Michael J. Hayford
"""

from raysketch.typing import Segment

parallel_tol = 1e-10


def segment_params(a1, a2, b1, b2, tol=parallel_tol):
    """ Return the parameters (t, u) where the lines a1-a2 and b1-b2 meet.

    The lines are parameterized as a1 + t*(a2 - a1) and b1 + u*(b2 - b1).

    Args:
        a1: [x, y] start of the first segment
        a2: [x, y] end of the first segment
        b1: [x, y] start of the second segment
        b2: [x, y] end of the second segment
        tol: lines whose determinant magnitude is below tol are treated
             as parallel

    Returns:
        (t, u), or None if the lines are parallel
    """
    x1, y1 = a1[0], a1[1]
    x2, y2 = a2[0], a2[1]
    x3, y3 = b1[0], b1[1]
    x4, y4 = b2[0], b2[1]

    denom = (x1 - x2)*(y3 - y4) - (y1 - y2)*(x3 - x4)
    if abs(denom) < tol:
        return None

    t = ((x1 - x3)*(y3 - y4) - (y1 - y3)*(x3 - x4))/denom
    u = -((x1 - x2)*(y1 - y3) - (y1 - y2)*(x1 - x3))/denom
    return t, u


def segments_cross(seg1: Segment, seg2: Segment, tol=parallel_tol) -> bool:
    """ True if seg1 and seg2 intersect within both of their extents.

    Parallel (and coincident) segments never cross.
    """
    params = segment_params(*seg1, *seg2, tol=tol)
    if params is None:
        return False
    t, u = params
    return 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0
