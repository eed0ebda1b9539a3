# -*- coding: utf-8 -*-
"""
Lanczos Interpolation - N-dimensional evaluator over padded samples.

``LanczosInterpolation`` owns a padded, read-only copy of the samples
and, for each query, combines per-axis positions and weights from the
kernels into a weighted sum over a ``2N_1 x ... x 2N_d`` block of the
padded array. No per-sample bounds checks are needed; the query
itself is checked once against the original axes.

The padded array is never mutated after construction, so one instance
can be queried concurrently from multiple threads.

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
from typing import Optional, Sequence, Tuple

# Third-party
import numpy as np

# lanczosnd internal
from lanczosnd.base import AbstractLanczos
from lanczosnd.exceptions import DomainViolationError, ValidationError
from lanczosnd.lanczos import Lanczos
from lanczosnd.padding import KernelSpec, copy_with_padding, kernels_for

logger = logging.getLogger(__name__)


class LanczosInterpolation:
    """Lanczos interpolant of regularly sampled N-dimensional data.

    Usually built with :func:`interpolate`. Sample ``A[i, j, ...]``
    lives at integer coordinate ``(i, j, ...)``; queries may take any
    real coordinate inside ``[0, A.shape[d] - 1]`` along each axis.

    Parameters
    ----------
    coefs : np.ndarray
        Padded coefficient array from
        :func:`~lanczosnd.padding.copy_with_padding`.
    parentaxes : Sequence[range]
        Original (unpadded) axes.
    it : AbstractLanczos or sequence of AbstractLanczos
        Kernel for all axes, or one per axis.

    Examples
    --------
    >>> itp = interpolate(np.arange(10.0), Lanczos(3))
    >>> float(itp(4.0))
    4.0
    """

    def __init__(
        self,
        coefs: np.ndarray,
        parentaxes: Sequence[range],
        it: KernelSpec,
    ) -> None:
        parentaxes = tuple(parentaxes)
        its = kernels_for(it, len(parentaxes))
        expected = tuple(
            len(k.padded_axis(ax)) for k, ax in zip(its, parentaxes)
        )
        if coefs.shape != expected:
            raise ValidationError(
                f"Padded coefficients have shape {coefs.shape}, "
                f"expected {expected} for axes {parentaxes}"
            )
        self._coefs = coefs
        self._parentaxes = parentaxes
        self._its = its
        self._it = it

    # -----------------------------------------------------------------
    # Introspection
    # -----------------------------------------------------------------
    @property
    def coefficients(self) -> np.ndarray:
        """Padded, read-only coefficient array."""
        return self._coefs

    @property
    def itpflag(self) -> KernelSpec:
        """Kernel specification as passed at construction."""
        return self._it

    @property
    def kernels(self) -> Tuple[AbstractLanczos, ...]:
        """One kernel per axis."""
        return self._its

    @property
    def axes(self) -> Tuple[range, ...]:
        return self._parentaxes

    @property
    def knots(self) -> Tuple[range, ...]:
        """Sample coordinates along each axis (the original axes)."""
        return self._parentaxes

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(len(ax) for ax in self._parentaxes)

    @property
    def ndim(self) -> int:
        return len(self._parentaxes)

    @property
    def dtype(self) -> np.dtype:
        return self._coefs.dtype

    @property
    def lbounds(self) -> Tuple[int, ...]:
        return tuple(ax[0] for ax in self._parentaxes)

    @property
    def ubounds(self) -> Tuple[int, ...]:
        return tuple(ax[-1] for ax in self._parentaxes)

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        self._coefs.flags.writeable = False

    def __repr__(self) -> str:
        return (
            f"LanczosInterpolation(shape={self.shape}, "
            f"kernels={self._its}, dtype={self.dtype})"
        )

    # -----------------------------------------------------------------
    # Evaluation
    # -----------------------------------------------------------------
    def __call__(self, *x):
        """Interpolated value at a single coordinate.

        Parameters
        ----------
        *x : float
            One coordinate per axis.

        Returns
        -------
        scalar
            Interpolated value in the coefficient dtype.

        Raises
        ------
        DomainViolationError
            If the number of coordinates does not match ``ndim`` or
            any coordinate lies outside its axis.
        """
        for xi in x:
            if np.ndim(xi) != 0:
                raise ValidationError(
                    "Use evaluate() for array-valued coordinates"
                )
        return self.evaluate(*x)[()]

    def evaluate(self, *coords) -> np.ndarray:
        """Interpolate at many coordinates at once.

        Parameters
        ----------
        *coords : array_like
            One array per axis; arrays are broadcast together.

        Returns
        -------
        np.ndarray
            Interpolated values with the broadcast shape of ``coords``.

        Raises
        ------
        DomainViolationError
            If the number of coordinate arrays does not match ``ndim``
            or any coordinate lies outside its axis.
        """
        if len(coords) != self.ndim:
            raise DomainViolationError(
                f"Expected {self.ndim} coordinates, got {len(coords)}"
            )
        coords = np.broadcast_arrays(*[np.asarray(c) for c in coords])
        out_shape = coords[0].shape
        flat = [c.reshape(-1) for c in coords]
        self._check_bounds(flat)

        m = flat[0].shape[0]
        index = []
        weights = []
        for d, (k, ax, xs) in enumerate(zip(self._its, self._parentaxes, flat)):
            parts = k.weighted_index_parts(ax, xs)
            start = parts.position - k.padded_axis(ax)[0]
            taps = start[:, np.newaxis] + np.arange(2 * k.degree)
            shape = [m] + [1] * self.ndim
            shape[d + 1] = 2 * k.degree
            index.append(taps.reshape(shape))
            weights.append(parts.coefs)

        # (m, 2N_0, ..., 2N_{d-1}) block, contracted from the last axis
        result = self._coefs[tuple(index)]
        for d in reversed(range(self.ndim)):
            w = weights[d].reshape((m,) + (1,) * d + (weights[d].shape[-1],))
            result = (result * w).sum(axis=-1)
        return result.reshape(out_shape)

    def _check_bounds(self, flat: Sequence[np.ndarray]) -> None:
        for d, (ax, xs) in enumerate(zip(self._parentaxes, flat)):
            if not np.issubdtype(xs.dtype, np.number) or np.iscomplexobj(xs):
                raise ValidationError(
                    f"Coordinates must be real numbers, got {xs.dtype}"
                )
            bad = ~((xs >= ax[0]) & (xs <= ax[-1]))
            if np.any(bad):
                raise DomainViolationError(
                    f"Coordinate {xs[bad][0]!r} outside axis {d} bounds "
                    f"[{ax[0]}, {ax[-1]}]"
                )


def interpolate(
    A,
    it: Optional[KernelSpec] = None,
    mode: str = 'nearest',
) -> LanczosInterpolation:
    """Create a Lanczos interpolant of ``A``.

    Parameters
    ----------
    A : array_like
        Regularly sampled values, any dimensionality >= 1.
    it : AbstractLanczos or sequence of AbstractLanczos, optional
        Kernel for all axes, or one per axis. Defaults to
        ``Lanczos(a=4)``.
    mode : str
        Border fill for the padded copy. See
        :data:`~lanczosnd.padding.BOUNDARY_MODES`. Default is
        ``'nearest'``.

    Returns
    -------
    LanczosInterpolation
        Callable interpolant.
    """
    if it is None:
        it = Lanczos()
    coefs = copy_with_padding(A, it, mode=mode)
    axes = tuple(range(n) for n in np.shape(A))
    logger.debug("Created Lanczos interpolant over axes %s", axes)
    return LanczosInterpolation(coefs, axes, it)
