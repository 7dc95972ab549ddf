""" Package for schematic elements and their geometry

    The :mod:`~.elem` subpackage provides the :class:`~.elements.Element`
    and :class:`~.elements.ElementModel` classes, the element type catalog,
    the :class:`~.geometry.ApertureGeometry` descriptor, local to world
    transforms in :mod:`~.transform`, placement of new elements in
    :mod:`~.placement` and tree listing in :mod:`~.parttree`.
"""
