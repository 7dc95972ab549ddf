#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Tests for aperture propagation through the element hierarchy

.. codeauthor: Michael J. Hayford
"""

import unittest
from math import atan, degrees

from pytest import approx

from raysketch.elem.elements import Element, ElementModel, create_geometry
from raysketch.aperture.policy import ApertureUpdate
from raysketch.aperture.projection import compute_projections
from raysketch.aperture.propagate import (propagate_apertures,
                                          update_element_aperture)


def add(em, ele_id, parent_id=None, x=0., y=0., rotation=0., **kwargs):
    e = Element(ele_id, 'lens', x=x, y=y, rotation=rotation,
                geometry=create_geometry('lens', **kwargs))
    return em.add_element(e, parent_id)


class PropagateTestCase(unittest.TestCase):
    def setUp(self):
        self.em = ElementModel()

    def test_root_not_rescaled(self):
        root = add(self.em, 0, aperture_radius=40.)
        assert update_element_aperture(self.em, root) is None
        results = propagate_apertures(self.em, 0)
        assert results == {0: None}
        assert root.geometry.aperture_radius == 40.

    def test_chain(self):
        em = self.em
        add(em, 0)
        c1 = add(em, 1, 0, x=150., rotation=60., aperture_radius=10.)
        c2 = add(em, 2, 1, x=300., aperture_radius=20.)
        results = propagate_apertures(em, 0)

        assert list(results) == [0, 1, 2]
        assert c1.geometry.aperture_radius == approx(30.)
        assert c2.geometry.aperture_radius == approx(15.)
        prj = compute_projections(c2, c1)
        assert prj.child.aperture_projection == approx(15.)

    def test_noop_does_not_halt(self):
        em = self.em
        root = add(em, 0)
        c1 = add(em, 1, 0, x=150., rotation=90.)
        c2 = add(em, 2, 1, x=150., y=150., rotation=90., aperture_radius=20.)
        results = propagate_apertures(em, 0)

        assert results[0] is None
        assert results[1] is None
        assert c1.geometry.aperture_radius == 15.
        assert results[2] == ApertureUpdate(approx(15.), 0.0)
        assert c2.geometry.aperture_radius == approx(15.)
        assert root.geometry.aperture_radius == 15.

    def test_siblings_visited(self):
        em = self.em
        add(em, 0, aperture_radius=20.)
        add(em, 1, 0, x=150.)
        add(em, 2, 0, x=0., y=150., rotation=90.)
        add(em, 3, 0, x=-150., rotation=180.)
        results = propagate_apertures(em, 0)
        assert set(results) == {0, 1, 2, 3}
        assert em.element(1).geometry.aperture_radius == approx(20.)
        assert em.element(3).geometry.aperture_radius == approx(20.)

    def test_divergent_chain_keeps_cone_angle(self):
        em = self.em
        add(em, 0)
        child = add(em, 1, 0, x=100., ray_model='divergent',
                    aperture_radius=10.)
        propagate_apertures(em, 1)
        assert child.geometry.cone_angle == approx(degrees(atan(0.1)))

        child.set_transform(50., 0., 0.)
        propagate_apertures(em, 1)
        assert child.geometry.aperture_radius == approx(5.)
        assert child.geometry.cone_angle == approx(degrees(atan(0.1)))

    def test_propagate_from_middle(self):
        em = self.em
        add(em, 0, aperture_radius=40.)
        c1 = add(em, 1, 0, x=150.)
        c2 = add(em, 2, 1, x=300., aperture_radius=20.)
        results = propagate_apertures(em, 2)
        assert list(results) == [2]
        assert c2.geometry.aperture_radius == approx(15.)
        assert c1.geometry.aperture_radius == 15.


if __name__ == '__main__':
    unittest.main(verbosity=2)
