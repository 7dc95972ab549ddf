#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2019 Michael J. Hayford
""" Propagation of aperture updates through the element hierarchy

.. Created on Fri Mar 22 10:12:31 2019

.. codeauthor: Michael J. Hayford
"""

import logging

from raysketch.aperture.policy import compute_aperture

logger = logging.getLogger(__name__)


def update_element_aperture(ele_model, e):
    """ Apply the aperture policy to element `e` against its parent.

    Root elements are never rescaled. When the policy can't compute an
    aperture, the element keeps its current aperture.

    Returns:
        the :class:`~.ApertureUpdate` applied, or None
    """
    parent = ele_model.parent_of(e)
    if parent is None:
        return None

    update = compute_aperture(e, parent)
    if update is None:
        logger.debug("element %s: aperture unchanged", e.ele_id)
        return None

    e.geometry.set_aperture(update.aperture_radius, update.cone_angle)
    logger.debug("element %s: radius=%.4f cone angle=%.4f", e.ele_id,
                 update.aperture_radius, update.cone_angle)
    return update


def propagate_apertures(ele_model, ele_id):
    """ Update the aperture of `ele_id` and then of all of its descendants.

    Each element is updated against the current state of its own parent,
    so the parents are always visited before their children. An element
    that can't be updated keeps its aperture and its descendants are still
    visited.

    Args:
        ele_model: the :class:`~.ElementModel`
        ele_id: id of the element whose state changed

    Returns:
        dict of the :class:`~.ApertureUpdate` (or None) keyed by element id
    """
    results = {}
    visited = set()
    stack = [ele_id]
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            logger.warning("element %s reached twice during propagation",
                           node_id)
            continue
        visited.add(node_id)

        e = ele_model.element(node_id)
        results[node_id] = update_element_aperture(ele_model, e)
        for child_id in reversed(e.children):
            if child_id in ele_model:
                stack.append(child_id)
            else:
                logger.warning("child %s of element %s not found",
                               child_id, node_id)
    return results
