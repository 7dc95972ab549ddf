#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" Support for schematic model exception handling

The aperture engine itself never raises; it returns None when an aperture
can't be computed. These exceptions report misuse of the model api.

.. Created on Wed Oct 24 15:22:40 2018

.. codeauthor: Michael J. Hayford
"""


class ElementError(Exception):
    """ Exception raised when editing a schematic model """


class UnknownElementTypeError(ElementError):
    """ Exception raised when an element type isn't in the catalog """
    def __init__(self, ele_type):
        super().__init__(f'Unknown element type: {ele_type}')
        self.ele_type = ele_type


class ElementNotFoundError(ElementError):
    """ Exception raised when an element id isn't in the element model """
    def __init__(self, ele_id):
        super().__init__(f'Element {ele_id} not found')
        self.ele_id = ele_id


class InvalidRayModelError(ElementError):
    """ Exception raised for a ray model outside the supported set """
    def __init__(self, ray_model, msg=None):
        msg = f'Invalid ray model: {ray_model}' if msg is None else msg
        super().__init__(msg)
        self.ray_model = ray_model


class ApertureRangeError(ElementError):
    """ Exception raised for an aperture radius or cone angle out of range """
    def __init__(self, name, value, value_range):
        super().__init__(f'{name} {value} outside of range {value_range}')
        self.name = name
        self.value = value
        self.value_range = value_range


class HierarchyError(ElementError):
    """ Exception raised for an invalid parent/child edit """
