#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for raysketch

.. codeauthor: Michael J. Hayford
"""
from typing import Literal
from raysketch.coord_geometry_types import Vec2d

RayModel = Literal['collimated', 'divergent', 'convergent', 'manual']

Segment = tuple[Vec2d, Vec2d]
SegmentPair = tuple[Segment, Segment]

ElementId = int
