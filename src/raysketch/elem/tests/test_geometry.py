#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Tests for the aperture geometry descriptor

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy.testing as npt
from pytest import approx

from raysketch.elem.geometry import ApertureGeometry
from raysketch.elem.elements import create_geometry
from raysketch.elem.elementerror import (ElementError,
                                         InvalidRayModelError,
                                         ApertureRangeError)


class ApertureGeometryTestCase(unittest.TestCase):
    def test_defaults(self):
        g = ApertureGeometry()
        assert g.ray_model == 'collimated'
        assert g.aperture_radius == 15.0
        assert g.cone_angle == 0.0
        npt.assert_array_equal(g.up_vector, [0., -1.])
        npt.assert_array_equal(g.forward_vector, [1., 0.])
        assert not g.is_flipped

    def test_aperture_points(self):
        g = ApertureGeometry(center_pt=(-3., 0.), aperture_radius=10.)
        upper, lower = g.aperture_points()
        npt.assert_array_equal(upper, [-3., -10.])
        npt.assert_array_equal(lower, [-3., 10.])

        g.set_aperture(20.)
        upper, lower = g.aperture_points()
        npt.assert_array_equal(upper, [-3., -20.])

    def test_collimated_forces_zero_cone_angle(self):
        g = ApertureGeometry(cone_angle=12.)
        assert g.cone_angle == 0.0
        g.set_aperture(10., cone_angle=5.)
        assert g.cone_angle == 0.0

    def test_range_checks(self):
        with self.assertRaises(ApertureRangeError):
            ApertureGeometry(aperture_radius=250.)
        with self.assertRaises(ApertureRangeError):
            ApertureGeometry(aperture_radius=-1.)
        with self.assertRaises(ApertureRangeError):
            ApertureGeometry(ray_model='divergent', cone_angle=95.)
        g = ApertureGeometry(ray_model='manual')
        with self.assertRaises(ElementError):
            g.set_cone_angle(-0.5)
        g.set_aperture(200.)
        assert g.aperture_radius == 200.

    def test_invalid_ray_model(self):
        with self.assertRaises(InvalidRayModelError):
            ApertureGeometry(ray_model='focused')
        g = ApertureGeometry()
        with self.assertRaises(InvalidRayModelError):
            g.set_ray_model('parallel')
        assert g.ray_model == 'collimated'

    def test_flipped(self):
        g = ApertureGeometry(aperture_radius=10.)
        gf = g.flipped()
        npt.assert_array_equal(gf.up_vector, [0., 1.])
        npt.assert_array_equal(g.up_vector, [0., -1.])
        assert gf.is_flipped
        assert not g.is_flipped
        upper, lower = gf.aperture_points()
        npt.assert_array_equal(upper, [0., 10.])
        assert gf.flipped().is_flipped is False

    def test_with_aperture(self):
        g = ApertureGeometry(ray_model='divergent')
        g2 = g.with_aperture(30., cone_angle=4.)
        assert g2.aperture_radius == 30.
        assert g2.cone_angle == 4.
        assert g.aperture_radius == 15.
        assert g.cone_angle == 0.

    def test_set_ray_model(self):
        g = ApertureGeometry(ray_model='divergent', cone_angle=5.)
        g.set_ray_model('manual')
        assert g.cone_angle == 5.
        g.set_ray_model('manual')
        assert g.cone_angle == 5.
        g.set_ray_model('convergent')
        assert g.cone_angle == 0.
        g.set_cone_angle(7.)
        g.set_ray_model('convergent')
        assert g.cone_angle == 7.
        g.set_ray_model('collimated')
        assert g.cone_angle == 0.
        assert g.ray_model == 'collimated'

    def test_instances_are_independent(self):
        g1 = create_geometry('lens')
        g2 = create_geometry('lens')
        assert g1.up_vector is not g2.up_vector
        g1.up_vector *= -1
        npt.assert_array_equal(g2.up_vector, [0., -1.])
        assert g1.is_flipped and not g2.is_flipped

    def test_json_hooks(self):
        g = ApertureGeometry(center_pt=(-45., 0.), ray_model='divergent',
                             aperture_radius=12.5, cone_angle=3.25)
        attrs = g.__json_encode__()
        assert attrs['center_pt'] == [-45., 0.]
        assert attrs['up_vector'] == [0., -1.]

        g2 = ApertureGeometry.__new__(ApertureGeometry)
        g2.__json_decode__(**attrs)
        npt.assert_array_equal(g2.center_pt, g.center_pt)
        assert g2.aperture_radius == approx(12.5)
        assert g2.cone_angle == approx(3.25)
        assert g2.ray_model == 'divergent'

    def test_json_decode_checks_values(self):
        attrs = ApertureGeometry(ray_model='divergent',
                                 cone_angle=3.25).__json_encode__()
        g = ApertureGeometry.__new__(ApertureGeometry)
        with self.assertRaises(ApertureRangeError):
            g.__json_decode__(**dict(attrs, aperture_radius=250.))
        with self.assertRaises(ApertureRangeError):
            g.__json_decode__(**dict(attrs, cone_angle=95.))
        with self.assertRaises(InvalidRayModelError):
            g.__json_decode__(**dict(attrs, ray_model='focused'))

        g.__json_decode__(**dict(attrs, ray_model='collimated'))
        assert g.cone_angle == 0.0

    def test_listobj_str(self):
        g = ApertureGeometry().flipped()
        o_str = g.listobj_str()
        assert o_str.startswith('ApertureGeometry: collimated')
        assert '(flipped)' in o_str


if __name__ == '__main__':
    unittest.main(verbosity=2)
