# -*- coding: utf-8 -*-
""" The **raysketch** schematic optical layout package

    A schematic is a tree of positioned, rotatable elements connected by
    directional rays. The package keeps each element's aperture and cone
    angle geometrically consistent with its parent as elements are created,
    moved, rotated or given a new ray model. It is organized in the following
    subpackages:

        - :mod:`~.optical`: the :class:`~.SchematicModel` container, model
          constants and file i/o
        - :mod:`~.elem`: elements, their aperture geometry, the element type
          catalog, transforms, placement and tree listing
        - :mod:`~.aperture`: the aperture/cone angle constraint engine, i.e.
          projections, the ray model policies, crossing avoidance and
          propagation over the element hierarchy

    The :mod:`~.util` subpackage provides the 2d math and segment intersection
    support used by the rest of the package.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. Classes may implement the `listobj_str`
    method that returns a string containing a formatted description of the
    object, e.g. :meth:`.ApertureGeometry.listobj_str` and
    :meth:`.SchematicModel.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
