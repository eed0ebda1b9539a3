# -*- coding: utf-8 -*-
"""
Lanczos Kernels - Windowed-sinc kernel evaluation.

Scalar-or-array implementations of the normalized sinc, the generic
Lanczos kernel ``sinc(x) * sinc(x / a)`` truncated at ``|x| < n``,
and the closed-form degree-4 weights of OpenCV's ``interpolateLanczos4``.

Reference
---------
C. E. Duchon, "Lanczos Filtering in One and Two Dimensions," Journal
of Applied Meteorology, vol. 18, no. 8, pp. 1016-1022, 1979.

OpenCV ``modules/imgproc/src/resize.cpp``, ``interpolateLanczos4``.

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

# Standard library
from typing import Optional

# Third-party
import numpy as np


S45 = 0.70710678118654752440084436210485

#: Rotation coefficients ``(sin, cos)`` of the eight taps relative to
#: the first one. Consecutive taps are 3*pi/4 apart.
LANCZOS4_COEFS = np.array([
    [1.0, 0.0],
    [-S45, -S45],
    [0.0, 1.0],
    [S45, -S45],
    [-1.0, 0.0],
    [S45, S45],
    [0.0, -1.0],
    [-S45, S45],
])


def float_type(x) -> np.dtype:
    """Floating dtype matching ``x`` (float64 for integer input)."""
    dtype = np.asarray(x).dtype
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def sinc(x):
    """Normalized sinc ``sin(pi*x) / (pi*x)`` with ``sinc(0) == 1``.

    The removable singularity is selected, not divided through, so the
    value at zero is exactly 1.

    Parameters
    ----------
    x : float or np.ndarray
        Argument(s).

    Returns
    -------
    float or np.ndarray
        Same shape and floating type as ``x``.
    """
    x = np.asarray(x, dtype=float_type(x))
    zero = x == 0
    px = np.pi * np.where(zero, 1, x).astype(x.dtype)
    out = np.where(zero, x.dtype.type(1), np.sin(px) / px).astype(x.dtype)
    return out[()] if out.ndim == 0 else out


def lanczos(x, a: int, n: Optional[int] = None):
    """Lanczos kernel.

    ``sinc(x) * sinc(x / a)`` for ``|x| < n``, zero otherwise.

    Parameters
    ----------
    x : float or np.ndarray
        Offset(s) in sample units.
    a : int
        Scale parameter controlling the taper window.
    n : int, optional
        Support cutoff. Defaults to ``a``.

    Returns
    -------
    float or np.ndarray
        Kernel value(s) in the floating type of ``x``.
    """
    if n is None:
        n = a
    x = np.asarray(x, dtype=float_type(x))
    inside = np.abs(x) < n
    vals = np.where(inside, sinc(x) * sinc(x / a), 0).astype(x.dtype)
    return vals[()] if vals.ndim == 0 else vals


def lanczos4_opencv_raw(dx) -> np.ndarray:
    """Un-normalized degree-4 weights via the angle-addition shortcut.

    One ``sin``/``cos`` pair is evaluated at the first tap; the other
    seven taps are rotations of it. Integral ``dx`` divides by zero
    and must be routed to the one-hot fast path by the caller.

    Parameters
    ----------
    dx : float or np.ndarray
        Fractional offset(s).

    Returns
    -------
    np.ndarray
        Raw weights, shape ``np.shape(dx) + (8,)``.
    """
    dx = np.asarray(dx, dtype=float_type(dx))
    p_4 = np.pi / 4
    y0 = -(dx + 3) * p_4
    s0 = np.asarray(np.sin(y0))[..., np.newaxis]
    c0 = np.asarray(np.cos(y0))[..., np.newaxis]
    y = (dx[..., np.newaxis] + 4 - np.arange(1, 9)) * p_4
    coefs = LANCZOS4_COEFS.astype(dx.dtype)
    raw = (coefs[:, 0] * s0 + coefs[:, 1] * c0) / (y * y)
    return raw.astype(dx.dtype)
