"""
In-place Radix-2 Fast Hartley Transform using Numba JIT

The discrete Hartley transform of a real sequence x of length n is

    H[k] = sum_j x[j] * cas(2*pi*j*k/n),    cas(t) = cos(t) + sin(t)

It is real-to-real and its own inverse up to a factor 1/n, so there is no
direction and a single factor table serves both butterfly orderings.

Each block of size m combines its lower and upper halves. Indices j and
m/2 - j of the upper half are rotated together by the angle 2*pi*j/m,

    (a, b) -> (a*cos + b*sin, a*sin - b*cos)

while j = 0 and j = m/4 (angles 0 and pi/2) need no multiplication. The
rotation is its own transpose, so DIF is DIT with the passes run in reverse
and the rotation moved after the sum/difference.
"""

import logging
from functools import lru_cache
from typing import Optional, Union

import numpy as np
from numba import jit

from .base import BaseTransform, _sum_diff, as_work_buffer
from .config import get_config
from .factors import hartley_factors
from .kinds import Division
from .permute import _revbin_permute

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _rotate(f, a, b, s, c):
    x = f[a]
    y = f[b]
    f[a] = x * c + y * s
    f[b] = x * s - y * c


@jit(nopython=True, cache=True)
def _fht_dit(f, factors, log2n):
    """Hartley DIT butterflies. Input must already be bit-reversed."""
    n = f.shape[0]

    for ldm in range(1, log2n + 1):
        m = 1 << ldm
        mh = m >> 1
        m4 = mh >> 1
        # (sin, cos) pairs are interleaved, hence the extra factor of 2
        stride = 1 << (log2n - ldm + 1)

        for r in range(0, n, m):
            _sum_diff(f, r, r + mh)
            if m4 != 0:
                _sum_diff(f, r + m4, r + mh + m4)

            idx = stride - 2
            j = 1
            k = mh - 1
            while j < k:
                _rotate(f, r + mh + j, r + mh + k, factors[idx], factors[idx + 1])
                _sum_diff(f, r + j, r + mh + j)
                _sum_diff(f, r + k, r + mh + k)
                idx += stride
                j += 1
                k -= 1


@jit(nopython=True, cache=True)
def _fht_dif(f, factors, log2n):
    """Hartley DIF butterflies. Output is left in bit-reversed order."""
    n = f.shape[0]

    for ldm in range(log2n, 0, -1):
        m = 1 << ldm
        mh = m >> 1
        m4 = mh >> 1
        stride = 1 << (log2n - ldm + 1)

        for r in range(0, n, m):
            _sum_diff(f, r, r + mh)
            if m4 != 0:
                _sum_diff(f, r + m4, r + mh + m4)

            idx = stride - 2
            j = 1
            k = mh - 1
            while j < k:
                _sum_diff(f, r + j, r + mh + j)
                _sum_diff(f, r + k, r + mh + k)
                _rotate(f, r + mh + j, r + mh + k, factors[idx], factors[idx + 1])
                idx += stride
                j += 1
                k -= 1


class HartleyTransform(BaseTransform):
    """
    Discrete Hartley transform of one fixed power-of-two length.

    Running execute() twice, the second time with ``normalize=True``,
    restores the input.
    """

    dtype = np.float64

    def __init__(self, n: int):
        super().__init__(n)
        self.factors = hartley_factors(self.n)
        logger.debug("created %r", self)

    def execute(
        self,
        buffer: np.ndarray,
        division: Union[Division, str] = Division.DIT,
        *,
        normalize: bool = False
    ) -> None:
        """
        Transform ``buffer`` in place.

        Parameters
        ----------
        buffer : np.ndarray
            float64 array of length ``n``; overwritten with the result.
        division : Division or str
            Butterfly ordering, ``Division.DIT`` or ``Division.DIF``.
        normalize : bool
            If True, divide the result by ``n``.

        Raises
        ------
        LengthMismatchError
            If ``len(buffer) != n``. The buffer is left untouched.
        """
        division = Division(division)
        self._check_buffer(buffer)

        if division is Division.DIT:
            _revbin_permute(buffer)
            _fht_dit(buffer, self.factors, self.log2n)
        else:
            _fht_dif(buffer, self.factors, self.log2n)
            _revbin_permute(buffer)

        if normalize:
            self._normalize(buffer)


def new_hartley_transform(n: int) -> HartleyTransform:
    """Create a Hartley transform descriptor for length ``n``."""
    return HartleyTransform(n)


@lru_cache(maxsize=None)
def get_hartley_transform(n: int) -> HartleyTransform:
    """Shared, cached descriptor for length ``n``."""
    return HartleyTransform(n)


def fht(x: np.ndarray, division: Optional[Union[Division, str]] = None) -> np.ndarray:
    """
    Compute the discrete Hartley transform of real input ``x``.

    Returns a new float64 array; ``x`` is left untouched.
    """
    f = as_work_buffer(x, np.float64)
    if division is None:
        division = get_config().division
    get_hartley_transform(f.shape[0]).execute(f, division)
    return f


def ifht(x: np.ndarray, division: Optional[Union[Division, str]] = None) -> np.ndarray:
    """Inverse of fht(): the same transform scaled by 1/n."""
    f = as_work_buffer(x, np.float64)
    if division is None:
        division = get_config().division
    get_hartley_transform(f.shape[0]).execute(f, division, normalize=True)
    return f
