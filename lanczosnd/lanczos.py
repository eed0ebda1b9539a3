# -*- coding: utf-8 -*-
"""
Lanczos Kernel Families - Generic and OpenCV-matched Lanczos kernels.

``Lanczos`` convolves samples with the Lanczos kernel of scale ``a``
over ``N`` neighbors on each side (``O(N^d)`` samples per query in
``d`` dimensions). ``Lanczos4OpenCV`` computes the same degree-4
kernel with the closed form used by OpenCV's ``lanczos4``, which
needs a single ``sin``/``cos`` pair per offset.

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
import warnings
from typing import Optional, Tuple

# Third-party
import numpy as np

# lanczosnd internal
from lanczosnd.base import AbstractLanczos, WeightSumHook
from lanczosnd.exceptions import ConfigurationWarning, ValidationError
from lanczosnd.kernels import lanczos, lanczos4_opencv_raw


def _validate_width(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name} must be >= 1, got {value}")


class Lanczos(AbstractLanczos):
    """Lanczos resampling with scale ``a`` and support over ``n`` neighbors.

    Weight ``i`` (1-based) for offset ``dx`` is
    ``lanczos(n - i + dx, a, n)``, normalized to sum to one. The
    kernel is always truncated at ``n`` while ``a`` only sets the
    taper; when ``a != n`` the window and the kernel's natural support
    disagree. That combination is kept as-is for compatibility.

    Parameters
    ----------
    a : int
        Kernel scale parameter. Default is 4.
    n : int, optional
        Window half-width ``N``. Each axis uses ``2 * n`` samples.
        Defaults to ``a``.
    on_weight_sum : callable, optional
        Diagnostic hook receiving raw weight sums.

    Warns
    -----
    ConfigurationWarning
        If ``n < a``.

    Examples
    --------
    >>> it = Lanczos(a=3)
    >>> it.degree
    3
    >>> Lanczos(4, n=6).value_weights(0.25).shape
    (12,)
    """

    __slots__ = ('_n', '_a')

    def __init__(
        self,
        a: int = 4,
        n: Optional[int] = None,
        on_weight_sum: Optional[WeightSumHook] = None,
    ) -> None:
        if n is None:
            n = a
        _validate_width(n, 'n')
        _validate_width(a, 'a')
        if n < a:
            warnings.warn(
                f"Using a smaller support (n={n}) than scale (a={a}) for "
                f"Lanczos window. Proceed with caution.",
                ConfigurationWarning,
                stacklevel=2,
            )
        super().__init__(on_weight_sum=on_weight_sum)
        object.__setattr__(self, '_n', int(n))
        object.__setattr__(self, '_a', int(a))

    @property
    def degree(self) -> int:
        return self._n

    @property
    def a(self) -> int:
        """Kernel scale parameter."""
        return self._a

    def _raw_weights(self, dx: np.ndarray) -> np.ndarray:
        n = self._n
        offsets = n - np.arange(1, 2 * n + 1)
        x = (dx[..., np.newaxis] + offsets).astype(dx.dtype)
        return lanczos(x, self._a, n)

    def _init_args(self) -> Tuple:
        return (self._a, self._n, self._on_weight_sum)

    def _key(self) -> Tuple:
        return (type(self), self._n, self._a)

    def __repr__(self) -> str:
        return f"Lanczos(a={self._a}, n={self._n})"


class Lanczos4OpenCV(AbstractLanczos):
    """Degree-4 Lanczos matching OpenCV's ``lanczos4`` algorithm.

    Equivalent to ``Lanczos(4)`` within floating tolerance, but
    the eight taps are derived from one ``sin``/``cos`` evaluation by
    angle addition. Integral offsets use the one-hot fast path, which
    also keeps the ``1 / y**2`` terms away from zero.

    Parameters
    ----------
    on_weight_sum : callable, optional
        Diagnostic hook receiving raw weight sums.
    """

    __slots__ = ()

    @property
    def degree(self) -> int:
        return 4

    def _raw_weights(self, dx: np.ndarray) -> np.ndarray:
        return lanczos4_opencv_raw(dx)

    def __repr__(self) -> str:
        return "Lanczos4OpenCV()"
