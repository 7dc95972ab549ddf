#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Tests for choosing the orientation of a new element

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy.testing as npt

from raysketch.elem.elements import Element, create_geometry
from raysketch.aperture.crossing import (connection_segments, lines_cross,
                                         resolve_crossing)


def make_element(ele_id, x=0., y=0., rotation=0., **kwargs):
    return Element(ele_id, 'lens', x=x, y=y, rotation=rotation,
                   geometry=create_geometry('lens', **kwargs))


class ConnectionSegmentsTestCase(unittest.TestCase):
    def setUp(self):
        self.parent = make_element(0)

    def test_collimated_segments(self):
        child = make_element(1, x=150.)
        seg_upper, seg_lower = connection_segments(child, self.parent)
        npt.assert_allclose(seg_upper, [[0., -15.], [150., -15.]])
        npt.assert_allclose(seg_lower, [[0., 15.], [150., 15.]])

    def test_divergent_segments(self):
        child = make_element(1, x=150., ray_model='divergent')
        seg_upper, seg_lower = connection_segments(child, self.parent)
        npt.assert_allclose(seg_upper, [[0., 0.], [150., -15.]])
        npt.assert_allclose(seg_lower, [[0., 0.], [150., 15.]])

    def test_convergent_segments(self):
        child = make_element(1, x=150., ray_model='convergent')
        seg_upper, seg_lower = connection_segments(child, self.parent)
        npt.assert_allclose(seg_upper, [[0., -15.], [150., 0.]])
        npt.assert_allclose(seg_lower, [[0., 15.], [150., 0.]])

    def test_manual_connects_like_collimated(self):
        manual = make_element(1, x=150., rotation=20., ray_model='manual')
        collimated = make_element(2, x=150., rotation=20.)
        npt.assert_allclose(connection_segments(manual, self.parent),
                            connection_segments(collimated, self.parent))


class ResolveCrossingTestCase(unittest.TestCase):
    def setUp(self):
        self.parent = make_element(0)

    def test_no_crossing_keeps_orientation(self):
        child = make_element(1, x=150.)
        assert not lines_cross(child, self.parent)
        assert resolve_crossing(child, self.parent) is child.geometry

    def test_reversed_child_is_flipped(self):
        child = make_element(1, x=150., rotation=180.)
        assert lines_cross(child, self.parent)
        geom = resolve_crossing(child, self.parent)
        assert geom is not child.geometry
        assert geom.is_flipped
        assert not child.geometry.is_flipped

        child.geometry = geom
        assert not lines_cross(child, self.parent)

    def test_both_orientations_cross(self):
        # rays from the parent pivot always meet at their shared start
        child = make_element(1, x=150., rotation=180., ray_model='divergent')
        assert lines_cross(child, self.parent)
        assert resolve_crossing(child, self.parent) is child.geometry

        child = make_element(1, x=150., ray_model='convergent')
        assert resolve_crossing(child, self.parent) is child.geometry

    def test_trial_does_not_touch_child(self):
        child = make_element(1, x=150., rotation=180.)
        original_up = child.geometry.up_vector.copy()
        resolve_crossing(child, self.parent)
        npt.assert_array_equal(child.geometry.up_vector, original_up)


if __name__ == '__main__':
    unittest.main(verbosity=2)
