#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Aperture policy: derive a child's aperture from its parent.

The ray model of the child selects how its aperture radius and cone angle
follow from the parent:

    - 'collimated': the child's projected aperture matches the parent's and
      the cone angle is 0.
    - 'divergent': the rays fan out from the parent's pivot. Under a
      collimated (or zero cone angle) parent the cone angle is measured once
      from the child's aperture and then held fixed, so only the radius
      follows changes in distance. Under a parent with a cone angle, the
      child takes the parent's cone angle.
    - 'convergent': the rays close down onto the child's pivot. The cone
      angle is measured from the child's current aperture every time and the
      radius is then solved from that angle.
    - 'manual': the radius and cone angle belong to the user and are
      returned unchanged.

None of the policies raise. When an aperture can't be computed, e.g. the
pivots coincide, an aperture is edge on to the center trace line or the
result is out of range, None is returned and the caller keeps the previous
aperture.

.. Created on Mon Mar 18 21:03:44 2019

.. codeauthor: Michael J. Hayford
"""

import logging
from collections import namedtuple
from math import atan, tan, degrees, radians

import raysketch.optical.model_constants as mc
from raysketch.aperture.projection import compute_projections

logger = logging.getLogger(__name__)

ApertureUpdate = namedtuple('ApertureUpdate', ['aperture_radius',
                                               'cone_angle'])
ApertureUpdate.aperture_radius.__doc__ = "new aperture radius"
ApertureUpdate.cone_angle.__doc__ = "new cone angle, in degrees"


def is_valid_radius(radius):
    return 0.0 < radius <= mc.max_aperture_radius


def is_valid_cone_angle(cone_angle):
    return 0.0 <= cone_angle <= mc.max_cone_angle


def cone_angle_from_projection(aperture_projection, center_line_length):
    """ Return the cone angle, in degrees, subtended by the projection. """
    return degrees(atan(aperture_projection/center_line_length))


def radius_from_cone_angle(cone_angle, center_line_length, projection_factor):
    """ Return the radius whose projection fills the cone at this distance. """
    target_projection = center_line_length*tan(radians(cone_angle))
    return target_projection/projection_factor


def collimated_policy(child_geom, parent_geom, prj):
    target_projection = prj.parent.aperture_projection
    child_projection = prj.child.aperture_projection
    if child_projection == 0.0:
        logger.debug("collimated: child projection is zero")
        return None

    scaling_ratio = target_projection/child_projection
    new_radius = child_geom.aperture_radius*scaling_ratio
    if not is_valid_radius(new_radius):
        logger.debug("collimated: radius %.3f out of range", new_radius)
        return None
    return ApertureUpdate(new_radius, 0.0)


def divergent_policy(child_geom, parent_geom, prj):
    length = prj.center_line_length
    if parent_geom.ray_model == 'collimated' or parent_geom.cone_angle == 0.0:
        if child_geom.cone_angle > 0.0:
            # the cone angle was fixed by an earlier measurement
            cone_angle = child_geom.cone_angle
            new_radius = radius_from_cone_angle(cone_angle, length,
                                                prj.child.projection_factor)
        else:
            cone_angle = cone_angle_from_projection(
                prj.child.aperture_projection, length)
            if not is_valid_cone_angle(cone_angle):
                logger.debug("divergent: cone angle %.3f out of range",
                             cone_angle)
                return None
            return ApertureUpdate(child_geom.aperture_radius, cone_angle)
    else:
        cone_angle = parent_geom.cone_angle
        new_radius = radius_from_cone_angle(cone_angle, length,
                                            prj.child.projection_factor)

    if not is_valid_radius(new_radius):
        logger.debug("divergent: radius %.3f out of range", new_radius)
        return None
    return ApertureUpdate(new_radius, cone_angle)


def convergent_policy(child_geom, parent_geom, prj):
    length = prj.center_line_length
    cone_angle = cone_angle_from_projection(prj.child.aperture_projection,
                                            length)
    if not is_valid_cone_angle(cone_angle):
        logger.debug("convergent: cone angle %.3f out of range", cone_angle)
        return None

    new_radius = radius_from_cone_angle(cone_angle, length,
                                        prj.child.projection_factor)
    if not is_valid_radius(new_radius):
        logger.debug("convergent: radius %.3f out of range", new_radius)
        return None
    return ApertureUpdate(new_radius, cone_angle)


ray_model_policies = {
    'collimated': collimated_policy,
    'divergent': divergent_policy,
    'convergent': convergent_policy,
    }


def compute_aperture(child, parent):
    """ Return the updated aperture of `child` given its `parent`.

    Args:
        child: the child :class:`~.Element`
        parent: the parent :class:`~.Element`

    Returns:
        an :class:`ApertureUpdate`, or None if the aperture can't be computed
    """
    child_geom = child.geometry
    if child_geom.ray_model == 'manual':
        return ApertureUpdate(child_geom.aperture_radius,
                              child_geom.cone_angle)

    prj = compute_projections(child, parent)
    if prj is None:
        logger.debug("element %s: pivots coincide with parent",
                     child.ele_id)
        return None

    if prj.child.projection_factor == 0.0 or prj.parent.projection_factor == 0.0:
        logger.debug("element %s: aperture edge on to center line",
                     child.ele_id)
        return None

    policy = ray_model_policies[child_geom.ray_model]
    return policy(child_geom, parent.geometry, prj)
