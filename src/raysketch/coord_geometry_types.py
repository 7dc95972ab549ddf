#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for 2d vectors and matrices

These type hints are provided to ensure a consist convention of distinguishing
between numpy arrays and array-like arrays.

Vec2d is used for coordinates
Dir2d is used for vector directions, unit length
Mat2d is a 2 x 2 matrix
Tfm2d is used to package together a rotation matrix and translation vector

.. codeauthor: Michael J. Hayford
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Dir2d = npt.NDArray
Mat2d = npt.NDArray
Tfm2d = tuple[Mat2d, Vec2d]
