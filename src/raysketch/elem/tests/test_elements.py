#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Tests for the element catalog and the element model

.. codeauthor: Michael J. Hayford
"""

import unittest
import numpy.testing as npt

from raysketch.elem.elements import (Element, ElementModel, element_catalog,
                                     element_types, create_geometry)
from raysketch.elem.elementerror import (UnknownElementTypeError,
                                         ElementNotFoundError,
                                         HierarchyError)


class ElementCatalogTestCase(unittest.TestCase):
    def test_catalog(self):
        types = element_types()
        assert len(types) == 17
        for ele_type in ('objective', 'lens', 'mirror', 'detector',
                         'lenslet-array', 'wedge-prism', 'dmd', 'slm'):
            assert ele_type in types
        assert element_catalog['cube'].width == 84

    def test_create_geometry(self):
        g = create_geometry('detector', ray_model='convergent')
        npt.assert_array_equal(g.center_pt, [-45., 0.])
        assert g.ray_model == 'convergent'
        assert g.aperture_radius == 15.

    def test_unknown_type(self):
        with self.assertRaises(UnknownElementTypeError) as cm:
            create_geometry('telescope')
        assert cm.exception.ele_type == 'telescope'
        with self.assertRaises(UnknownElementTypeError):
            Element(0, 'telescope')

    def test_element_defaults(self):
        e = Element(3, 'plate', x=1, y=2)
        assert e.label == 'plate3'
        assert e.is_root
        assert e.children == []
        assert e.visible
        assert e.arrow_pt is None
        npt.assert_array_equal(e.pos, [1., 2.])


class ElementModelTestCase(unittest.TestCase):
    def setUp(self):
        self.em = em = ElementModel()
        em.add_element(Element(0, 'lens'))
        em.add_element(Element(1, 'lens', x=150.), parent_id=0)
        em.add_element(Element(2, 'mirror', x=300.), parent_id=1)
        em.add_element(Element(3, 'plate', y=150.), parent_id=0)

    def test_structure(self):
        em = self.em
        assert len(em) == 4
        assert 2 in em
        assert em.element(0).children == [1, 3]
        assert em.parent_of(em.element(2)).ele_id == 1
        assert em.parent_of(em.element(0)) is None
        assert [e.ele_id for e in em.children_of(em.element(0))] == [1, 3]
        assert [e.ele_id for e in em.roots()] == [0]
        assert em.descendants(0) == [1, 2, 3]
        assert em.descendants(2) == []
        assert em.check_consistency()

    def test_missing_element(self):
        with self.assertRaises(ElementNotFoundError):
            self.em.element(42)
        with self.assertRaises(ElementNotFoundError):
            self.em.add_element(Element(9, 'lens'), parent_id=42)

    def test_duplicate_id(self):
        with self.assertRaises(HierarchyError):
            self.em.add_element(Element(2, 'lens'))

    def test_remove_promotes_children(self):
        em = self.em
        removed = em.remove_element(1)
        assert removed.ele_id == 1
        assert 1 not in em
        assert em.element(0).children == [3]
        assert em.element(2).is_root
        assert sorted(e.ele_id for e in em.roots()) == [0, 2]
        assert em.check_consistency()

    def test_set_parent(self):
        em = self.em
        em.set_parent(3, 2)
        assert em.element(0).children == [1]
        assert em.element(2).children == [3]
        assert em.descendants(1) == [2, 3]
        em.set_parent(2, None)
        assert em.element(2).is_root
        assert em.check_consistency()

    def test_set_parent_cycle(self):
        with self.assertRaises(HierarchyError):
            self.em.set_parent(0, 2)
        with self.assertRaises(HierarchyError):
            self.em.set_parent(1, 1)
        assert self.em.check_consistency()

    def test_inconsistent_links(self):
        self.em.element(2).parent_id = 3
        assert not self.em.check_consistency()

    def test_json_hooks(self):
        attrs = self.em.__json_encode__()
        assert 'schm_model' not in attrs
        assert [e.ele_id for e in attrs['elements']] == [0, 1, 2, 3]

        em2 = ElementModel.__new__(ElementModel)
        em2.__json_decode__(**attrs)
        em2.sync_to_restore(None)
        assert em2.descendants(0) == [1, 2, 3]
        assert em2.check_consistency()


if __name__ == '__main__':
    unittest.main(verbosity=2)
