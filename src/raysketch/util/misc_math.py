#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" miscellaneous functions for working with numpy vectors and floats

.. Created on Wed May 23 15:27:06 2018

.. codeauthor: Michael J. Hayford
"""
import numpy as np
from numpy.linalg import norm
from math import sqrt, radians, cos, sin

from raysketch.coord_geometry_types import Vec2d, Dir2d, Mat2d


def is_kinda_zero(x: float, eps: float = 1e-12) -> bool:
    """ Test for \|x| <= eps """
    return abs(x) <= eps


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def distance_sqr_2d(pt0, pt1):
    """ return distance squared between 2d points pt0 and pt1 """
    return (pt0[0] - pt1[0])**2 + (pt0[1] - pt1[1])**2


def distance_2d(pt0, pt1) -> float:
    """ return distance between 2d points pt0 and pt1 """
    return sqrt(distance_sqr_2d(pt0, pt1))


def perpendicular_2d(v: Vec2d) -> Dir2d:
    """ return v rotated by +90 degrees, i.e. (-vy, vx) """
    return np.array([-v[1], v[0]])


def rot2d(angle_deg: float) -> Mat2d:
    """ return the 2d rotation matrix for a rotation of angle_deg degrees.

    The rotation is the standard counterclockwise form; with the y axis
    pointing down (screen convention) a positive angle is a clockwise turn
    on the screen.
    """
    ang = radians(angle_deg)
    c, s = cos(ang), sin(ang)
    return np.array([[c, -s],
                     [s, c]])


def isanumber(a):
    """ returns true if input a can be converted to floating point number """
    try:
        float(a)
        bool_a = True
    except ValueError:
        bool_a = False
    except TypeError:
        bool_a = False

    return bool_a


def isfinitenumber(a) -> bool:
    """ returns true if input a is a number and is finite """
    return isanumber(a) and bool(np.isfinite(float(a)))
