#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Module for element modeling

The element type catalog, the :class:`Element` record and the
:class:`ElementModel` that owns all of the elements of a schematic.

Elements refer to each other only by id. The parent/child links are kept
consistent by the :class:`ElementModel`, the single owner of the elements.

.. Created on Sun Jan 28 16:27:01 2018

.. codeauthor: Michael J. Hayford
"""

import logging
from collections import namedtuple
from typing import Dict, List, Optional

import numpy as np

from raysketch.elem.geometry import ApertureGeometry
from raysketch.elem.elementerror import (UnknownElementTypeError,
                                         ElementNotFoundError,
                                         HierarchyError)
from raysketch.typing import ElementId

logger = logging.getLogger(__name__)

ElementType = namedtuple('ElementType', ['width', 'height', 'center_pt'])
ElementType.width.__doc__ = "drawing extent along the forward axis"
ElementType.height.__doc__ = "drawing extent along the up axis"
ElementType.center_pt.__doc__ = "pivot point in the element's local frame"

element_catalog: Dict[str, ElementType] = {
    'objective': ElementType(129, 60, (0., 0.)),
    'lens': ElementType(10, 60, (0., 0.)),
    'lens2': ElementType(10, 60, (0., 0.)),
    'lens3': ElementType(18, 60, (0., 0.)),
    'mirror': ElementType(6, 60, (-3., 0.)),
    'plate': ElementType(6, 60, (0., 0.)),
    'cube': ElementType(84, 84, (0., 0.)),
    'detector': ElementType(85, 60, (-45., 0.)),
    'lenslet-array': ElementType(15, 60, (0., 0.)),
    'plane': ElementType(6, 40, (0., 0.)),
    'mask': ElementType(6, 60, (0., 0.)),
    'aperture': ElementType(6, 60, (0., 0.)),
    'wedge-prism': ElementType(32, 60, (0., 0.)),
    'grating': ElementType(10, 60, (0., 0.)),
    'doe': ElementType(10, 60, (0., 0.)),
    'dmd': ElementType(10, 80, (0., 0.)),
    'slm': ElementType(10, 80, (0., 0.)),
    }


def element_types():
    """ Return the list of element type names in the catalog. """
    return list(element_catalog.keys())


def create_geometry(ele_type: str, **kwargs) -> ApertureGeometry:
    """ Return a new, independently owned geometry for `ele_type`.

    Args:
        ele_type: a key of :data:`element_catalog`
        kwargs: overrides of the :class:`~.ApertureGeometry` defaults, e.g.
                ray_model or aperture_radius
    """
    try:
        ele_def = element_catalog[ele_type]
    except KeyError:
        raise UnknownElementTypeError(ele_type) from None
    return ApertureGeometry(center_pt=ele_def.center_pt, **kwargs)


class Element:
    """ A positioned, rotatable node in the schematic.

    Attributes:
        ele_id: unique integer id
        ele_type: element type, a key of the element catalog
        x, y: world position of the element's pivot
        rotation: rotation in degrees, screen convention
        geometry: the element's own :class:`~.ApertureGeometry`
        parent_id: id of the parent element or None for a root element
        children: ids of the child elements
        visible: visibility flag
        arrow_pt: world endpoint of the element's outgoing ray
    """

    def __init__(self, ele_id: ElementId, ele_type: str, x=0., y=0.,
                 rotation=0., geometry: Optional[ApertureGeometry] = None,
                 visible=True, arrow_pt=None, label=None, **kwargs):
        self.ele_id = ele_id
        self.ele_type = ele_type
        self.label = f'{ele_type}{ele_id}' if label is None else label
        self.x = float(x)
        self.y = float(y)
        self.rotation = float(rotation)
        self.geometry = (create_geometry(ele_type) if geometry is None
                         else geometry)
        self.parent_id: Optional[ElementId] = None
        self.children: List[ElementId] = []
        self.visible = visible
        self.arrow_pt = (None if arrow_pt is None
                         else np.array(arrow_pt, dtype=float))

    def __repr__(self):
        return (f"{type(self).__name__}({self.ele_id}, {self.ele_type!r}, "
                f"x={self.x}, y={self.y}, rotation={self.rotation})")

    def __json_encode__(self):
        attrs = dict(vars(self))
        if self.arrow_pt is not None:
            attrs['arrow_pt'] = self.arrow_pt.tolist()
        return attrs

    def __json_decode__(self, **attrs):
        for a_key, a_val in attrs.items():
            if a_key == 'arrow_pt' and a_val is not None:
                self.arrow_pt = np.array(a_val, dtype=float)
            else:
                setattr(self, a_key, a_val)

    def listobj_str(self):
        o_str = (f"{self.label}: id={self.ele_id} type={self.ele_type} "
                 f"pos=({self.x:.2f}, {self.y:.2f}) "
                 f"rot={self.rotation:.2f}\n")
        o_str += (f"parent={self.parent_id} children={self.children} "
                  f"visible={self.visible}\n")
        o_str += self.geometry.listobj_str()
        return o_str

    @property
    def is_root(self):
        return self.parent_id is None

    @property
    def pos(self):
        return np.array([self.x, self.y])

    def set_transform(self, x, y, rotation):
        self.x = float(x)
        self.y = float(y)
        self.rotation = float(rotation)


class ElementModel:
    """Owner of the elements of a schematic, keyed by element id.

    Attributes:
        schm_model: the :class:`~.SchematicModel`
        elements: dict of :class:`Element`, keyed by ele_id

    """

    def __init__(self, schm_model=None, **kwargs):
        self.schm_model = schm_model
        self.elements: Dict[ElementId, Element] = {}

    def __json_encode__(self):
        attrs = dict(vars(self))
        del attrs['schm_model']
        attrs['elements'] = list(self.elements.values())
        return attrs

    def __json_decode__(self, **attrs):
        for a_key, a_val in attrs.items():
            if a_key == 'elements':
                self.elements = {e.ele_id: e for e in a_val}
            else:
                setattr(self, a_key, a_val)

    def sync_to_restore(self, schm_model):
        self.schm_model = schm_model
        if not self.check_consistency():
            logger.warning("restored element model is inconsistent")

    def __contains__(self, ele_id):
        return ele_id in self.elements

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements.values())

    def element(self, ele_id: ElementId) -> Element:
        """ Return the element for `ele_id`. """
        try:
            return self.elements[ele_id]
        except KeyError:
            raise ElementNotFoundError(ele_id) from None

    def add_element(self, e: Element, parent_id: Optional[ElementId] = None):
        """ Insert `e`, as a child of `parent_id` or as a root if None. """
        if e.ele_id in self.elements:
            raise HierarchyError(f'Element id {e.ele_id} already in use')
        if parent_id is not None:
            parent = self.element(parent_id)
            e.parent_id = parent_id
            parent.children.append(e.ele_id)
        else:
            e.parent_id = None
        self.elements[e.ele_id] = e
        return e

    def remove_element(self, ele_id: ElementId) -> Element:
        """ Remove an element; its children become root elements. """
        e = self.element(ele_id)
        parent = self.parent_of(e)
        if parent is not None and ele_id in parent.children:
            parent.children.remove(ele_id)

        for child_id in e.children:
            child = self.elements.get(child_id)
            if child is not None:
                child.parent_id = None
                logger.debug("element %s is now a root (was child of %s)",
                             child_id, ele_id)
        e.children = []
        e.parent_id = None
        del self.elements[ele_id]
        return e

    def set_parent(self, ele_id: ElementId, parent_id: Optional[ElementId]):
        """ Move the element `ele_id` under `parent_id` (or make it a root). """
        e = self.element(ele_id)
        if parent_id is not None:
            if parent_id == ele_id or parent_id in self.descendants(ele_id):
                raise HierarchyError(f'Element {parent_id} is element '
                                     f'{ele_id} or one of its descendants')
            new_parent = self.element(parent_id)
        old_parent = self.parent_of(e)
        if old_parent is not None and ele_id in old_parent.children:
            old_parent.children.remove(ele_id)
        e.parent_id = parent_id
        if parent_id is not None:
            new_parent.children.append(ele_id)

    def parent_of(self, e: Element) -> Optional[Element]:
        """ Return the parent element of `e`, or None for a root. """
        if e.parent_id is None:
            return None
        parent = self.elements.get(e.parent_id)
        if parent is None:
            logger.warning("parent %s of element %s not found",
                           e.parent_id, e.ele_id)
        return parent

    def children_of(self, e: Element) -> List[Element]:
        return [self.elements[c] for c in e.children if c in self.elements]

    def roots(self) -> List[Element]:
        return [e for e in self.elements.values() if e.parent_id is None]

    def descendants(self, ele_id: ElementId) -> List[ElementId]:
        """ Return the ids of all of the descendants of `ele_id`. """
        e = self.element(ele_id)
        visited = set()
        desc = []
        stack = list(reversed(e.children))
        while stack:
            child_id = stack.pop()
            if child_id in visited or child_id not in self.elements:
                continue
            visited.add(child_id)
            desc.append(child_id)
            stack.extend(reversed(self.elements[child_id].children))
        return desc

    def check_consistency(self) -> bool:
        """ True if all the parent and children references agree. """
        for e in self.elements.values():
            if e.parent_id is not None:
                parent = self.elements.get(e.parent_id)
                if parent is None or e.ele_id not in parent.children:
                    return False
            for child_id in e.children:
                child = self.elements.get(child_id)
                if child is None or child.parent_id != e.ele_id:
                    return False
        return True

    def list_model(self):
        for e in self.elements.values():
            g = e.geometry
            parent = '-' if e.parent_id is None else e.parent_id
            print(f"{e.ele_id:3d}: {e.label:>16s} {parent:>4} "
                  f"{e.x:9.2f} {e.y:9.2f} {e.rotation:8.2f} "
                  f"{g.ray_model:>10s} {g.aperture_radius:8.3f} "
                  f"{g.cone_angle:7.3f}")
