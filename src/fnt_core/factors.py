"""
Rotation Factor Tables

Precomputes the twiddle factors one transform size needs. Every angle is an
exact multiple of pi / (n/2) evaluated directly from its index; nothing is
accumulated by repeated rotation, so the last entry of a table is as accurate
as the first.

The returned arrays are marked read-only. A table can be shared by any number
of descriptors and threads.
"""

import logging
from typing import Tuple

import numpy as np

from .errors import InvalidSizeError

logger = logging.getLogger(__name__)


def log2_size(n) -> int:
    """
    Validate a transform length and return its base-2 logarithm.

    Parameters
    ----------
    n : int
        Transform length.

    Returns
    -------
    int
        ``log2n`` such that ``2 ** log2n == n``.

    Raises
    ------
    InvalidSizeError
        If ``n`` is not an integer, is less than 2, or is not a power of two.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidSizeError(n)
    n = int(n)
    if n < 2 or n & (n - 1) != 0:
        raise InvalidSizeError(n)
    return n.bit_length() - 1


def _readonly(a: np.ndarray) -> np.ndarray:
    a.flags.writeable = False
    return a


def fourier_factors(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the forward and backward Fourier twiddle tables for length ``n``.

    ``forward[k] = exp(-2*pi*i*k/n)`` and ``backward[k] = exp(+2*pi*i*k/n)``
    for ``k = 0 .. n/2 - 1``.

    Returns
    -------
    (np.ndarray, np.ndarray)
        Two read-only complex128 arrays of length ``n // 2``.
    """
    log2_size(n)
    n2 = int(n) >> 1

    phi = np.pi / n2
    theta = phi * np.arange(n2, dtype=np.float64)

    forward = np.empty(n2, dtype=np.complex128)
    forward.real = np.cos(-theta)
    forward.imag = np.sin(-theta)

    backward = np.empty(n2, dtype=np.complex128)
    backward.real = np.cos(theta)
    backward.imag = np.sin(theta)

    logger.debug("computed Fourier factors for n=%d", n)
    return _readonly(forward), _readonly(backward)


def hartley_factors(n: int) -> np.ndarray:
    """
    Compute the Hartley rotation table for length ``n``.

    The table interleaves ``(sin, cos)`` pairs at angles ``pi*m/(n/2)`` for
    ``m = 1 .. n/2``: entry ``2*(m-1)`` holds the sine and ``2*(m-1) + 1``
    the cosine. The same table serves both division kinds.

    Returns
    -------
    np.ndarray
        Read-only float64 array of length ``n``.
    """
    log2_size(n)
    n2 = int(n) >> 1

    phi = np.pi / n2
    theta = phi * np.arange(1, n2 + 1, dtype=np.float64)

    factors = np.empty(2 * n2, dtype=np.float64)
    factors[0::2] = np.sin(theta)
    factors[1::2] = np.cos(theta)

    logger.debug("computed Hartley factors for n=%d", n)
    return _readonly(factors)
