""" Package for the aperture and cone angle constraint engine

    The :mod:`~.aperture` subpackage keeps the aperture of each element
    consistent with its parent. :mod:`~.projection` projects apertures
    perpendicular to the center trace line, :mod:`~.policy` applies the
    element's ray model to derive a new aperture radius and cone angle,
    :mod:`~.crossing` chooses the orientation of a new element so its rays
    don't cross and :mod:`~.propagate` cascades the updates through the
    element hierarchy.
"""
