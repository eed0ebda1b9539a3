# -*- coding: utf-8 -*-
"""
lanczosnd - Lanczos-kernel interpolation of N-dimensional regular grids.

Kernel families supply the window half-width, per-axis positions,
normalized convolution weights and padding extents; the evaluator
gathers the weight window from a padded copy of the samples.

- ``Lanczos`` — generic Lanczos kernel with scale ``a`` over ``N``
  neighbors per side.
- ``Lanczos4OpenCV`` — degree-4 kernel computed with OpenCV's
  closed-form ``lanczos4`` algorithm.
- ``interpolate`` / ``LanczosInterpolation`` — N-dimensional
  evaluator over a padded, read-only sample array.

Dependencies
------------
numpy

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from lanczosnd.exceptions import (
    LanczosError,
    ValidationError,
    DomainViolationError,
    ConfigurationWarning,
)
from lanczosnd.base import AbstractLanczos, WeightedIndex
from lanczosnd.lanczos import Lanczos, Lanczos4OpenCV
from lanczosnd.padding import (
    BOUNDARY_MODES,
    copy_with_padding,
    padded_axes,
    padded_axis,
)
from lanczosnd.interpolation import LanczosInterpolation, interpolate
# Imported after the submodules: importing ``lanczosnd.lanczos`` binds the
# submodule onto the package and would shadow the ``lanczos`` kernel function.
from lanczosnd.kernels import sinc, lanczos

__all__ = [
    'LanczosError',
    'ValidationError',
    'DomainViolationError',
    'ConfigurationWarning',
    'sinc',
    'lanczos',
    'AbstractLanczos',
    'WeightedIndex',
    'Lanczos',
    'Lanczos4OpenCV',
    'BOUNDARY_MODES',
    'copy_with_padding',
    'padded_axes',
    'padded_axis',
    'LanczosInterpolation',
    'interpolate',
]
