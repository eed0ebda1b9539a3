# -*- coding: utf-8 -*-
"""
Lanczos Base Classes - Kernel family interface for Lanczos interpolation.

Defines ``AbstractLanczos``, the contract every Lanczos-family kernel
supplies to the evaluator: its ``degree`` (window half-width ``N``),
the mapping of a coordinate to a base index and fractional offset,
the ``2N`` convolution weights for that offset, and the padded axis
needed so the weight window never leaves the coefficient array.

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
import functools
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, NamedTuple, Optional, Tuple

# Third-party
import numpy as np

# lanczosnd internal
from lanczosnd.kernels import float_type

logger = logging.getLogger(__name__)

WeightSumHook = Callable[[Any], None]


class WeightedIndex(NamedTuple):
    """Base index and weights for one axis of one query."""

    position: Any
    coefs: np.ndarray


class AbstractLanczos(ABC):
    """Abstract base class for Lanczos-family kernels.

    Instances are immutable. Subclasses implement :attr:`degree` and
    :meth:`_raw_weights`; normalization, the integral fast path and
    the weight-sum diagnostics are shared.

    Parameters
    ----------
    on_weight_sum : callable, optional
        Diagnostic hook called with the raw (pre-normalization) weight
        sum each time the general path runs. Receives a scalar for a
        scalar offset, otherwise an array shaped like the offsets.
    """

    __slots__ = ('_on_weight_sum',)

    def __init__(self, on_weight_sum: Optional[WeightSumHook] = None) -> None:
        object.__setattr__(self, '_on_weight_sum', on_weight_sum)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{type(self).__name__} is immutable; cannot set {name!r}"
        )

    @property
    @abstractmethod
    def degree(self) -> int:
        """Window half-width ``N``; each axis gathers ``2N`` samples."""
        ...

    @abstractmethod
    def _raw_weights(self, dx: np.ndarray) -> np.ndarray:
        """Un-normalized weights for non-integral offsets.

        Parameters
        ----------
        dx : np.ndarray
            Fractional offsets in their final floating type.

        Returns
        -------
        np.ndarray
            Shape ``dx.shape + (2 * degree,)``.
        """
        ...

    @property
    def on_weight_sum(self) -> Optional[WeightSumHook]:
        return self._on_weight_sum

    # -----------------------------------------------------------------
    # Position mapping and padding
    # -----------------------------------------------------------------
    def positions(self, ax: range, x) -> Tuple[Any, Any]:
        """Map coordinate(s) to ``(base_index, dx)``.

        ``x`` is assumed to already lie in ``[ax[0], ax[-1]]``. The
        floor is clamped to the axis so the upper bound itself maps to
        ``dx == 0`` at the last sample.

        Parameters
        ----------
        ax : range
            Original axis, ``range(lo, hi + 1)``.
        x : float or np.ndarray
            Query coordinate(s).

        Returns
        -------
        Tuple
            ``base_index = floor(x) - N + 1`` (int or int array) and
            ``dx = x - floor(x)`` in the floating type of ``x``.
        """
        x = np.asarray(x, dtype=float_type(x))
        xf = np.clip(np.floor(x), ax[0], ax[-1])
        dx = x - xf
        pos = xf.astype(np.intp) - self.degree + 1
        if x.ndim == 0:
            return int(pos), dx[()]
        return pos, dx

    def padded_axis(self, ax: range) -> range:
        """Axis extended by ``N - 1`` below and ``N`` above."""
        n = self.degree
        return range(ax[0] - n + 1, ax[-1] + n + 1)

    # -----------------------------------------------------------------
    # Weights
    # -----------------------------------------------------------------
    def value_weights(self, dx):
        """Normalized convolution weights for fractional offset(s).

        Integral offsets take the fast path: a one-hot set with 1.0 at
        0-based index ``N - 1 - dx`` (sample ``floor(x)`` when
        ``dx == 0``). Otherwise the raw weights are divided by their
        sum. A zero raw sum yields NaN weights; it is not trapped.

        Parameters
        ----------
        dx : float or np.ndarray
            Fractional offset(s), normally in ``[0, 1)``.

        Returns
        -------
        np.ndarray
            Shape ``np.shape(dx) + (2N,)`` in the floating type of
            ``dx``.
        """
        dx = np.asarray(dx, dtype=float_type(dx))
        integral = np.asarray(np.floor(dx) == dx)
        if np.all(integral):
            return self._one_hot(dx)

        with np.errstate(divide='ignore', invalid='ignore'):
            raw = self._raw_weights(dx)
            # taps summed in order, left to right
            sums = np.asarray(functools.reduce(np.add, np.moveaxis(raw, -1, 0)))
            weights = (raw / sums[..., np.newaxis]).astype(dx.dtype)

        if np.any(integral):
            sums = np.where(integral, sums.dtype.type(1), sums)
            weights = np.where(
                integral[..., np.newaxis], self._one_hot(dx), weights,
            )
        self._report_sum(sums[()] if sums.ndim == 0 else sums)
        return weights

    def weighted_index_parts(self, ax: range, x) -> WeightedIndex:
        """Positions and weights for coordinate(s) on one axis."""
        pos, dx = self.positions(ax, x)
        return WeightedIndex(position=pos, coefs=self.value_weights(dx))

    def _one_hot(self, dx: np.ndarray) -> np.ndarray:
        n = self.degree
        target = np.asarray(n - 1 - dx)
        taps = np.arange(2 * n)
        return (taps == target[..., np.newaxis]).astype(dx.dtype)

    def _report_sum(self, sums: Any) -> None:
        logger.debug("%s raw weight sum: %s", self, sums)
        if self._on_weight_sum is not None:
            self._on_weight_sum(sums)

    # -----------------------------------------------------------------
    # Value semantics
    # -----------------------------------------------------------------
    def _init_args(self) -> Tuple:
        return (self._on_weight_sum,)

    def __reduce__(self):
        return (type(self), self._init_args())

    def _key(self) -> Tuple:
        return (type(self), self.degree)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractLanczos):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
