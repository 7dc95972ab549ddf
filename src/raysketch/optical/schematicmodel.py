#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Top level model classes

.. Created on Wed Mar 14 11:08:28 2018

.. codeauthor: Michael J. Hayford
"""
import logging
from pathlib import Path

import json_tricks
import pandas as pd

import raysketch.optical.model_constants as mc
from raysketch.elem import parttree
from raysketch.elem.elements import Element, ElementModel, create_geometry
from raysketch.elem.elementerror import (ElementError, InvalidRayModelError,
                                         ApertureRangeError)
from raysketch.elem.placement import (arrow_endpoint, compute_placement,
                                      snap_to_grid)
from raysketch.aperture.crossing import resolve_crossing
from raysketch.aperture.propagate import (propagate_apertures,
                                          update_element_aperture)
from raysketch.util.misc_math import isfinitenumber

logger = logging.getLogger(__name__)

# version of the .rsk file format written by save_model
rsk_format_version = "0.2.0"


class SchematicSpec:
    """ Container for placement and snapping settings of a schematic

    Attributes:
        title (str): a short description of the model
        component_spacing (float): length of an element's outgoing ray
        grid_size (float): grid for element positions; smaller moves are
                           ignored
        arrow_tip_snap (float): grid for ray endpoints
        rotation_snap_increment (float): smaller rotations are ignored
    """

    def __init__(self, schm_model, **kwargs):
        self.schm_model = schm_model
        self.title = kwargs.get('title', '')
        self.component_spacing = kwargs.get('component_spacing',
                                            mc.component_spacing)
        self.grid_size = kwargs.get('grid_size', mc.grid_size)
        self.arrow_tip_snap = kwargs.get('arrow_tip_snap',
                                         mc.arrow_tip_snap_size)
        self.rotation_snap_increment = kwargs.get('rotation_snap_increment',
                                                  mc.rotation_snap_increment)

    def __json_encode__(self):
        attrs = dict(vars(self))
        if hasattr(self, 'schm_model'):
            del attrs['schm_model']
        return attrs

    def sync_to_restore(self, schm_model):
        self.schm_model = schm_model

    def listobj_str(self):
        vs = vars(self)
        o_str = f"{type(self).__name__}:\n"
        for k, v in vs.items():
            if k != 'schm_model':
                o_str += f"{k}: {v}\n"
        return o_str


class SchematicModel:
    """ Top level container for a schematic optical layout.

    The SchematicModel owns the elements of the schematic and keeps their
    apertures consistent as elements are added, moved, rotated, removed or
    given a new ray model. New elements are placed at the ray endpoint of
    the selected element and become its children.

    Attributes:
        rsk_version: version of the file format the model was saved with
        schematic_spec: :class:`.SchematicSpec`
        ele_model: :class:`~raysketch.elem.elements.ElementModel`
        selected: id of the selected element, or None
        next_id: id given to the next element added
        next_position: position of the next root element
        actions: log of add and remove edits
    """

    def __init__(self, **kwargs):
        self.rsk_version = rsk_format_version
        self.selected = None
        self.next_id = 0
        self.next_position = [0., 0.]
        self.actions = []

        self.map_submodels(**kwargs)

    def map_submodels(self, **kwargs):
        """Setup machinery for model mapping api.

        Populate the submodel `dict` with the existing attributes, creating
        new instances as needed, and a submodel alias `dict` with short
        versions of the wordy defining names.
        """
        submodels = {}
        submodels['schematic_spec'] = self.schematic_spec = (
            self.schematic_spec if hasattr(self, 'schematic_spec')
            else SchematicSpec(self, **kwargs))
        submodels['ele_model'] = self.ele_model = (
            self.ele_model if hasattr(self, 'ele_model')
            else ElementModel(self, **kwargs))

        submodel_aliases = {
            'spec': 'schematic_spec', 'schematic_spec': 'schematic_spec',
            'em': 'ele_model', 'ele_model': 'ele_model',
            }
        self._submodels = submodels, submodel_aliases

    def __getitem__(self, key):
        """ Provide mapping interface to submodels. """
        submodels, submodel_aliases = self._submodels
        return submodels[submodel_aliases[key]]

    def name(self):
        return self.schematic_spec.title

    def reset(self):
        for attr_name in ('schematic_spec', 'ele_model'):
            if hasattr(self, attr_name):
                delattr(self, attr_name)
        self.__init__()

    def __json_encode__(self):
        attrs = dict(vars(self))
        del attrs['_submodels']
        return attrs

    def sync_to_restore(self):
        if not hasattr(self, 'rsk_version'):
            self.rsk_version = rsk_format_version
        self.selected = getattr(self, 'selected', None)
        self.actions = getattr(self, 'actions', [])
        self.next_position = list(getattr(self, 'next_position', [0., 0.]))

        self.map_submodels()
        self.schematic_spec.sync_to_restore(self)
        self.ele_model.sync_to_restore(self)

        ids = [e.ele_id for e in self.ele_model]
        next_free = max(ids) + 1 if ids else 0
        self.next_id = max(getattr(self, 'next_id', 0), next_free)
        if self.selected is not None and self.selected not in self.ele_model:
            self.selected = None

    def listobj_str(self):
        o_str = f"{type(self).__name__}: {self.name()}\n"
        o_str += (f"elements: {len(self.ele_model)}  "
                  f"selected: {self.selected}  next id: {self.next_id}\n")
        o_str += self.schematic_spec.listobj_str()
        for e in self.ele_model:
            o_str += e.listobj_str()
        return o_str

    def save_model(self, file_name, version=None):
        """Save the schematic model in a raysketch JSON file.

        Args:
            file_name: str or Path
            version: optional override for the file format version
        """
        file_pth = Path(file_name).with_suffix('.rsk')

        if not file_pth.parent.exists():
            file_pth.parent.mkdir(parents=True)

        self.rsk_version = rsk_format_version if version is None else version

        fs_dict = {}
        fs_dict['schematic_model'] = self

        with open(file_pth, 'w') as f:
            json_tricks.dump(fs_dict, f, indent=1,
                             separators=(',', ':'), allow_nan=True)
        logger.info("saved %s", file_pth.name)
        return file_pth

    def select(self, ele_id):
        """ Select the element `ele_id`, or clear the selection with None. """
        if ele_id is not None:
            self.ele_model.element(ele_id)
        self.selected = ele_id

    def selected_element(self):
        if self.selected is None:
            return None
        return self.ele_model.elements.get(self.selected)

    def add_element(self, ele_type, ray_model=None, select=True):
        """ Add a new element of type `ele_type` to the schematic.

        If an element is selected, the new element becomes its child. It is
        placed at the end of the selected element's ray, aligned with it,
        its aperture is matched to the parent and, if needed, its up axis is
        reversed so that the connecting rays don't cross. Otherwise the new
        element is a root element placed at the next free position.

        Args:
            ele_type: an element type from the element catalog
            ray_model: the ray model of the new element, default 'collimated'
            select: if True, the new element becomes the selection

        Returns:
            the new :class:`~.Element`
        """
        geom_kwargs = {}
        if ray_model is not None:
            geom_kwargs['ray_model'] = ray_model
        geometry = create_geometry(ele_type, **geom_kwargs)

        spec = self.schematic_spec
        parent = self.selected_element()
        placement = compute_placement(geometry, parent=parent,
                                      next_position=self.next_position)

        e = Element(self.next_id, ele_type, placement.x, placement.y,
                    placement.rotation, geometry=geometry)
        e.arrow_pt = arrow_endpoint(e.x, e.y, e.rotation,
                                    spacing=spec.component_spacing,
                                    snap_size=spec.arrow_tip_snap)

        parent_id = None
        if parent is not None:
            parent_id = parent.ele_id
            self.ele_model.add_element(e, parent_id)
            update_element_aperture(self.ele_model, e)
            e.geometry = resolve_crossing(e, parent)
        else:
            self.ele_model.add_element(e)

        self.next_id += 1
        self.next_position = e.arrow_pt.tolist()
        self.actions.append({'action': 'add', 'id': e.ele_id,
                             'parentId': parent_id})
        logger.info("added %s (id %s) under %s", ele_type, e.ele_id,
                    parent_id)

        if select:
            self.selected = e.ele_id
        return e

    def remove_element(self, ele_id):
        """ Remove an element; its children become root elements.

        If the removed element was selected, the element added before it
        becomes the selection.
        """
        em = self.ele_model
        em.element(ele_id)

        prev_id = None
        for other_id in em.elements:
            if other_id == ele_id:
                break
            prev_id = other_id

        e = em.remove_element(ele_id)
        self.actions.append({'action': 'remove', 'id': ele_id})
        logger.info("removed %s (id %s)", e.ele_type, ele_id)

        if self.selected == ele_id:
            self.selected = prev_id
        return e

    def move_element(self, ele_id, x, y):
        """ Move the pivot of element `ele_id` to (x, y), snapped to the grid.

        Moves smaller than the grid size are ignored. The element's ray
        endpoint moves with it.

        Returns:
            True if the element was moved
        """
        if not (isfinitenumber(x) and isfinitenumber(y)):
            raise ElementError(f'Invalid position: ({x}, {y})')
        e = self.ele_model.element(ele_id)
        grid_size = self.schematic_spec.grid_size
        new_x, new_y = snap_to_grid(float(x), float(y), grid_size)
        dx = new_x - e.x
        dy = new_y - e.y
        if (dx == 0.0 and dy == 0.0) or \
                (abs(dx) < grid_size and abs(dy) < grid_size):
            logger.debug("element %s: move (%.2f, %.2f) ignored",
                         ele_id, dx, dy)
            return False

        e.set_transform(new_x, new_y, e.rotation)
        if e.arrow_pt is not None:
            e.arrow_pt = e.arrow_pt + [dx, dy]
        propagate_apertures(self.ele_model, ele_id)
        return True

    def rotate_element(self, ele_id, rotation):
        """ Set the rotation, in degrees, of element `ele_id`.

        Changes smaller than the rotation snap increment are ignored. The
        element's ray endpoint rotates with it.

        Returns:
            True if the element was rotated
        """
        if not isfinitenumber(rotation):
            raise ElementError(f'Invalid rotation: {rotation}')
        e = self.ele_model.element(ele_id)
        spec = self.schematic_spec
        rotation = float(rotation)
        if abs(rotation - e.rotation) < spec.rotation_snap_increment:
            logger.debug("element %s: rotation %.3f ignored",
                         ele_id, rotation)
            return False

        e.set_transform(e.x, e.y, rotation)
        e.arrow_pt = arrow_endpoint(e.x, e.y, rotation,
                                    spacing=spec.component_spacing,
                                    snap_size=spec.arrow_tip_snap)
        propagate_apertures(self.ele_model, ele_id)
        return True

    def set_ray_model(self, ele_id, ray_model):
        e = self.ele_model.element(ele_id)
        e.geometry.set_ray_model(ray_model)
        return propagate_apertures(self.ele_model, ele_id)

    def set_aperture_radius(self, ele_id, aperture_radius):
        """ Set the aperture radius of `ele_id` and update the descendants.

        The radius of a parented element that doesn't use the 'manual' ray
        model is rederived from its parent right away.
        """
        if not isfinitenumber(aperture_radius):
            raise ApertureRangeError('aperture radius', aperture_radius,
                                     (0.0, mc.max_aperture_radius))
        e = self.ele_model.element(ele_id)
        e.geometry.set_aperture(float(aperture_radius))
        return propagate_apertures(self.ele_model, ele_id)

    def set_cone_angle(self, ele_id, cone_angle):
        """ Set the cone angle of a 'manual' element. """
        e = self.ele_model.element(ele_id)
        if e.geometry.ray_model != 'manual':
            raise InvalidRayModelError(
                e.geometry.ray_model,
                msg=f'Cone angle of element {ele_id} is derived from its '
                    f'{e.geometry.ray_model} ray model')
        if not isfinitenumber(cone_angle):
            raise ApertureRangeError('cone angle', cone_angle,
                                     (0.0, mc.max_cone_angle))
        e.geometry.set_cone_angle(float(cone_angle))
        return propagate_apertures(self.ele_model, ele_id)

    def set_visible(self, ele_id, visible):
        self.ele_model.element(ele_id).visible = bool(visible)

    def show_all(self):
        for e in self.ele_model:
            e.visible = True

    def list_model(self):
        self.ele_model.list_model()

    def list_tree(self, *args, **kwargs):
        parttree.list_tree(self.ele_model, *args, **kwargs)

    def elements_df(self):
        """ Return a DataFrame of the element table, indexed by element id. """
        rows = []
        for e in self.ele_model:
            g = e.geometry
            rows.append({'id': e.ele_id, 'type': e.ele_type,
                         'label': e.label, 'parent': e.parent_id,
                         'x': e.x, 'y': e.y, 'rotation': e.rotation,
                         'ray_model': g.ray_model,
                         'radius': g.aperture_radius,
                         'cone_angle': g.cone_angle,
                         'flipped': g.is_flipped,
                         'visible': e.visible})
        columns = ['id', 'type', 'label', 'parent', 'x', 'y', 'rotation',
                   'ray_model', 'radius', 'cone_angle', 'flipped', 'visible']
        return pd.DataFrame(rows, columns=columns).set_index('id')
