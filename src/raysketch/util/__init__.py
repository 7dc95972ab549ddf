""" package supplying utility functions for math and numpy support

    The :mod:`~raysketch.util` subpackage provides miscellaneous functions for
    2d geometric calculations. These include:

        - miscellaneous math functions, :mod:`~.misc_math`
        - segment intersection, :mod:`~.line_intersection`
"""
