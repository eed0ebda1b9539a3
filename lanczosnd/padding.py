# -*- coding: utf-8 -*-
"""
Padding Policy - Border-extended coefficient arrays for Lanczos gathers.

Each axis ``range(lo, hi + 1)`` is extended to
``range(lo - N + 1, hi + N + 1)``: the base index of a query is
``floor(x) - N + 1`` and the window spans ``2N`` samples, so every
in-domain query addresses only padded indices. The padded copy is
built once per interpolation object and marked read-only.

Boundary modes use scipy.ndimage naming and are mapped onto
``numpy.pad``.

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
import logging
from typing import Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# lanczosnd internal
from lanczosnd.base import AbstractLanczos
from lanczosnd.exceptions import ValidationError

logger = logging.getLogger(__name__)

KernelSpec = Union[AbstractLanczos, Sequence[AbstractLanczos]]

BOUNDARY_MODES = ('constant', 'nearest', 'reflect', 'mirror', 'wrap')

_NUMPY_PAD_MODES = {
    'constant': 'constant',
    'nearest': 'edge',
    'reflect': 'symmetric',
    'mirror': 'reflect',
    'wrap': 'wrap',
}


def validate_mode(mode: str) -> None:
    """Validate that the boundary mode is supported.

    Raises
    ------
    ValidationError
        If ``mode`` is not one of :data:`BOUNDARY_MODES`.
    """
    if mode not in BOUNDARY_MODES:
        raise ValidationError(
            f"mode must be one of {BOUNDARY_MODES}, got {mode!r}"
        )


def kernels_for(it: KernelSpec, ndim: int) -> Tuple[AbstractLanczos, ...]:
    """Expand a kernel or per-axis kernel sequence to one per axis."""
    if isinstance(it, AbstractLanczos):
        return (it,) * ndim
    its = tuple(it)
    if len(its) != ndim:
        raise ValidationError(
            f"Expected {ndim} kernels (one per axis), got {len(its)}"
        )
    for k in its:
        if not isinstance(k, AbstractLanczos):
            raise ValidationError(
                f"Kernels must be AbstractLanczos instances, "
                f"got {type(k).__name__}"
            )
    return its


def padded_axis(ax: range, it: AbstractLanczos) -> range:
    """Padded extent of one axis.

    Examples
    --------
    >>> padded_axis(range(1, 11), Lanczos(4))
    range(-2, 15)
    """
    return it.padded_axis(ax)


def padded_axes(axes: Sequence[range], it: KernelSpec) -> Tuple[range, ...]:
    """Padded extent of every axis."""
    its = kernels_for(it, len(axes))
    return tuple(k.padded_axis(ax) for k, ax in zip(its, axes))


def _coerce_float(A: np.ndarray, dtype: Optional[np.dtype]) -> np.ndarray:
    if dtype is None:
        if np.issubdtype(A.dtype, np.inexact):
            dtype = A.dtype
        else:
            dtype = np.float64
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        raise ValidationError(
            f"dtype must be a floating or complex type, got {dtype}"
        )
    try:
        return A.astype(dtype, copy=False)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Cannot coerce array of dtype {A.dtype} to {dtype}"
        ) from exc


def copy_with_padding(
    A,
    it: KernelSpec,
    mode: str = 'nearest',
    dtype: Optional[np.dtype] = None,
) -> np.ndarray:
    """Build the padded, read-only coefficient array.

    Parameters
    ----------
    A : array_like
        Samples, any dimensionality >= 1.
    it : AbstractLanczos or sequence of AbstractLanczos
        Kernel for all axes, or one per axis.
    mode : str
        Border fill, one of :data:`BOUNDARY_MODES`. ``'constant'``
        fills with zeros. Default is ``'nearest'``.
    dtype : numpy dtype, optional
        Floating element type. Defaults to the input's floating type,
        or float64 for integer and boolean input.

    Returns
    -------
    np.ndarray
        Array of shape ``A.shape[d] + 2N_d - 1`` along each axis ``d``.
        Original sample ``k`` of axis ``d`` sits at index
        ``k + N_d - 1``.

    Raises
    ------
    ValidationError
        If ``A`` is zero-dimensional or empty, the mode is unknown,
        the kernel count does not match ``A.ndim``, or ``A`` cannot be
        coerced to a floating type.
    """
    validate_mode(mode)
    A = np.asarray(A)
    if A.ndim == 0:
        raise ValidationError("Cannot interpolate a zero-dimensional array")
    if A.size == 0:
        raise ValidationError(f"Cannot interpolate an empty array {A.shape}")
    its = kernels_for(it, A.ndim)
    A = _coerce_float(A, dtype)

    pad_width = [(k.degree - 1, k.degree) for k in its]
    padded = np.pad(A, pad_width, mode=_NUMPY_PAD_MODES[mode])
    padded.flags.writeable = False
    logger.debug(
        "Padded %s array %s -> %s (mode=%s)",
        padded.dtype, A.shape, padded.shape, mode,
    )
    return padded
