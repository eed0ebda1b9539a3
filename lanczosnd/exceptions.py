# -*- coding: utf-8 -*-
"""
Lanczos Exception Hierarchy - Domain-specific exceptions and warnings.

All package errors subclass both ``LanczosError`` and the appropriate
built-in exception, so callers can catch either. A degenerate
(zero) raw weight sum is deliberately not represented here: it
propagates as NaN through the normalized weights.

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


class LanczosError(Exception):
    """Base exception for all lanczosnd errors."""


class ValidationError(LanczosError, ValueError):
    """Invalid kernel configuration, boundary mode, or input array.

    Raised for non-positive window widths, unknown padding modes,
    kernel/array dimension mismatches, and arrays that cannot be
    coerced to a floating element type.
    """


class DomainViolationError(LanczosError, IndexError):
    """Query coordinate outside the interpolation domain.

    Raised by :class:`~lanczosnd.interpolation.LanczosInterpolation`
    before any weights are computed. Kernel methods never raise it.
    """


class ConfigurationWarning(UserWarning):
    """Advisory: window half-width smaller than the kernel scale ``a``."""
