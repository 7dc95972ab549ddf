#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Aperture geometry descriptor for schematic elements

An :class:`ApertureGeometry` describes an element's optical opening in the
element's local frame: the pivot (`center_pt`) the element rotates about, the
unit `up_vector` the aperture extends along, the unit `forward_vector` the
rays leave along, the aperture radius, the cone angle and the ray model that
governs how the aperture is derived from the element's parent.

Every element owns its geometry instance; nothing is shared between elements
of the same type.

.. Created on Sun Jan 28 16:27:01 2018

.. codeauthor: Michael J. Hayford
"""

import logging
from copy import deepcopy

import numpy as np

import raysketch.optical.model_constants as mc
from raysketch.elem.elementerror import (InvalidRayModelError,
                                         ApertureRangeError)
from raysketch.typing import RayModel

logger = logging.getLogger(__name__)


def check_ray_model(ray_model) -> RayModel:
    """ Return ray_model if it is one of the supported models, else raise. """
    if ray_model not in mc.ray_models:
        raise InvalidRayModelError(ray_model)
    return ray_model


def check_aperture_radius(radius: float) -> float:
    if not (0.0 <= radius <= mc.max_aperture_radius):
        raise ApertureRangeError('aperture radius', radius,
                                 (0.0, mc.max_aperture_radius))
    return float(radius)


def check_cone_angle(cone_angle: float) -> float:
    if not (0.0 <= cone_angle <= mc.max_cone_angle):
        raise ApertureRangeError('cone angle', cone_angle,
                                 (0.0, mc.max_cone_angle))
    return float(cone_angle)


class ApertureGeometry:
    """ Aperture and ray model of an element, in element local coordinates.

    Attributes:
        center_pt: the pivot point of the element
        up_vector: unit vector the aperture extends along
        forward_vector: unit vector of the outgoing ray direction
        aperture_radius: half width of the aperture, 0 to 200
        cone_angle: half angle, in degrees, of the ray envelope, 0 to 90
        ray_model: 'collimated', 'divergent', 'convergent' or 'manual'
    """

    def __init__(self, center_pt=(0., 0.), up_vector=mc.default_up_vector,
                 forward_vector=mc.default_forward_vector,
                 aperture_radius=mc.default_aperture_radius,
                 cone_angle=mc.default_cone_angle, ray_model='collimated',
                 **kwargs):
        self.center_pt = np.array(center_pt, dtype=float)
        self.up_vector = np.array(up_vector, dtype=float)
        self.forward_vector = np.array(forward_vector, dtype=float)
        self.ray_model = check_ray_model(ray_model)
        self.aperture_radius = check_aperture_radius(aperture_radius)
        self.cone_angle = (0.0 if ray_model == 'collimated'
                           else check_cone_angle(cone_angle))

    def __repr__(self):
        return (f"{type(self).__name__}(ray_model={self.ray_model!r}, "
                f"aperture_radius={self.aperture_radius}, "
                f"cone_angle={self.cone_angle}, "
                f"up_vector={self.up_vector.tolist()})")

    def __json_encode__(self):
        attrs = dict(vars(self))
        attrs['center_pt'] = self.center_pt.tolist()
        attrs['up_vector'] = self.up_vector.tolist()
        attrs['forward_vector'] = self.forward_vector.tolist()
        return attrs

    def __json_decode__(self, **attrs):
        for a_key, a_val in attrs.items():
            if a_key in ('center_pt', 'up_vector', 'forward_vector'):
                setattr(self, a_key, np.array(a_val, dtype=float))
            else:
                setattr(self, a_key, a_val)
        # restored values obey the same limits as constructed ones
        self.ray_model = check_ray_model(self.ray_model)
        self.aperture_radius = check_aperture_radius(self.aperture_radius)
        self.cone_angle = (0.0 if self.ray_model == 'collimated'
                           else check_cone_angle(self.cone_angle))

    def listobj_str(self):
        upper, lower = self.aperture_points()
        o_str = f"{type(self).__name__}: {self.ray_model}\n"
        o_str += (f"aperture radius={self.aperture_radius:.3f}, "
                  f"cone angle={self.cone_angle:.3f}\n")
        o_str += (f"center={self.center_pt}  up={self.up_vector}  "
                  f"forward={self.forward_vector}\n")
        o_str += f"upper={upper}  lower={lower}"
        if self.is_flipped:
            o_str += "  (flipped)"
        o_str += "\n"
        return o_str

    def aperture_points(self):
        """ Return the (upper, lower) aperture endpoints.

        The endpoints are always derived from the pivot, up vector and
        aperture radius; they aren't stored.
        """
        offset = self.aperture_radius*self.up_vector
        return self.center_pt + offset, self.center_pt - offset

    @property
    def is_flipped(self):
        """ True if the up vector is reversed wrt the default up vector. """
        return bool(np.dot(self.up_vector, mc.default_up_vector) < 0.0)

    def copy(self):
        return deepcopy(self)

    def flipped(self):
        """ Return a copy of this geometry with the up vector reversed. """
        flipped_geom = self.copy()
        flipped_geom.up_vector = -self.up_vector
        return flipped_geom

    def with_aperture(self, aperture_radius, cone_angle=None):
        """ Return a copy of this geometry with an updated aperture. """
        new_geom = self.copy()
        new_geom.set_aperture(aperture_radius, cone_angle)
        return new_geom

    def set_aperture(self, aperture_radius, cone_angle=None):
        """ Set the aperture radius and, optionally, the cone angle. """
        self.aperture_radius = check_aperture_radius(aperture_radius)
        if cone_angle is not None:
            self.cone_angle = check_cone_angle(cone_angle)
        if self.ray_model == 'collimated':
            self.cone_angle = 0.0

    def set_cone_angle(self, cone_angle):
        self.cone_angle = check_cone_angle(cone_angle)

    def set_ray_model(self, ray_model):
        """ Change the ray model.

        Switching to 'collimated' forces the cone angle to 0. Switching
        between the other derived models clears the cone angle so that it is
        measured afresh by the aperture policy. A 'manual' model keeps the
        current values under user control.
        """
        new_model = check_ray_model(ray_model)
        old_model = self.ray_model
        self.ray_model = new_model
        if new_model == 'collimated':
            self.cone_angle = 0.0
        elif new_model != old_model and new_model != 'manual':
            self.cone_angle = 0.0
        logger.debug("ray model %s -> %s", old_model, new_model)
