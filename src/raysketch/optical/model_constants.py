#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2018 Michael J. Hayford
""" schematic model constants

.. Created on Wed May 23 16:00:55 2018

.. codeauthor: Michael J. Hayford
"""

# ray propagation models
ray_models = ('collimated', 'divergent', 'convergent', 'manual')

# aperture defaults and limits
default_aperture_radius = 15.0
max_aperture_radius = 200.0
default_cone_angle = 0.0
max_cone_angle = 90.0

# default axes of an element in its local frame, y axis pointing down
default_up_vector = (0., -1.)
default_forward_vector = (1., 0.)

# placement and snapping
component_spacing = 150.0
grid_size = 5.0
arrow_tip_snap_size = 5.0
rotation_snap_increment = 0.5

# numerical tolerance
zero_tol = 1e-12

# aperture endpoints
upper, lower = range(2)
