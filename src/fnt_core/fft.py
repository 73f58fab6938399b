"""
In-place Radix-2 FFT using Numba JIT

This module implements the iterative Cooley-Tukey FFT on complex128 buffers,
in both butterfly orderings:

1. DIT (decimation in time): bit-reverse the input, then combine blocks of
   size 2, 4, ..., n with (a, b) -> (a + b*w, a - b*w)
2. DIF (decimation in frequency): combine blocks of size n, ..., 4, 2 with
   (a, b) -> (a + b, (a - b)*w), then bit-reverse the output

Forward and backward transforms share the butterfly structure and differ
only in the twiddle table they read. Twiddles are precomputed once per
length by FourierTransform; execute() allocates nothing.
"""

import logging
from functools import lru_cache
from typing import Optional, Union

import numpy as np
from numba import jit

from .base import BaseTransform, _sum_diff, as_work_buffer
from .config import get_config
from .factors import fourier_factors
from .kinds import Direction, Division
from .permute import _revbin_permute

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _sum_diff_pass(f):
    # block size 2: the twiddle is always 1
    for r in range(0, f.shape[0], 2):
        _sum_diff(f, r, r + 1)


@jit(nopython=True, cache=True)
def _fft_dit(f, factors, log2n):
    """Radix-2 DIT butterflies. Input must already be bit-reversed."""
    n = f.shape[0]
    _sum_diff_pass(f)

    for ldm in range(2, log2n + 1):
        m = 1 << ldm
        mh = m >> 1
        stride = 1 << (log2n - ldm)
        for r in range(0, n, m):
            k = 0
            for j in range(mh):
                a = f[r + j]
                b = f[r + j + mh] * factors[k]
                f[r + j] = a + b
                f[r + j + mh] = a - b
                k += stride


@jit(nopython=True, cache=True)
def _fft_dif(f, factors, log2n):
    """Radix-2 DIF butterflies. Output is left in bit-reversed order."""
    n = f.shape[0]

    for ldm in range(log2n, 1, -1):
        m = 1 << ldm
        mh = m >> 1
        stride = 1 << (log2n - ldm)
        for r in range(0, n, m):
            k = 0
            for j in range(mh):
                a = f[r + j]
                b = f[r + j + mh]
                f[r + j] = a + b
                f[r + j + mh] = (a - b) * factors[k]
                k += stride

    _sum_diff_pass(f)


class FourierTransform(BaseTransform):
    """
    Discrete Fourier transform of one fixed power-of-two length.

    Examples
    --------
    >>> import numpy as np
    >>> t = FourierTransform(8)
    >>> x = np.array([1, 1, 1, 1, 0, 0, 0, 0], dtype=np.complex128)
    >>> t.execute(x)                                     # forward
    >>> t.execute(x, direction=Direction.BACKWARD, normalize=True)
    >>> np.allclose(x.real, [1, 1, 1, 1, 0, 0, 0, 0])
    True
    """

    dtype = np.complex128

    def __init__(self, n: int):
        super().__init__(n)
        self.forward, self.backward = fourier_factors(self.n)
        logger.debug("created %r", self)

    def execute(
        self,
        buffer: np.ndarray,
        division: Union[Division, str] = Division.DIT,
        direction: Union[Direction, str] = Direction.FORWARD,
        *,
        normalize: bool = False
    ) -> None:
        """
        Transform ``buffer`` in place.

        Parameters
        ----------
        buffer : np.ndarray
            complex128 array of length ``n``; overwritten with the result.
        division : Division or str
            Butterfly ordering, ``Division.DIT`` or ``Division.DIF``.
        direction : Direction or str
            ``Direction.FORWARD`` uses exp(-2*pi*i*k/n), ``Direction.BACKWARD``
            uses exp(+2*pi*i*k/n).
        normalize : bool
            If True, divide the result by ``n``.

        Raises
        ------
        LengthMismatchError
            If ``len(buffer) != n``. The buffer is left untouched.
        """
        division = Division(division)
        direction = Direction(direction)
        self._check_buffer(buffer)

        factors = self.forward if direction is Direction.FORWARD else self.backward

        if division is Division.DIT:
            _revbin_permute(buffer)
            _fft_dit(buffer, factors, self.log2n)
        else:
            _fft_dif(buffer, factors, self.log2n)
            _revbin_permute(buffer)

        if normalize:
            self._normalize(buffer)


def new_fourier_transform(n: int) -> FourierTransform:
    """Create a Fourier transform descriptor for length ``n``."""
    return FourierTransform(n)


@lru_cache(maxsize=None)
def get_fourier_transform(n: int) -> FourierTransform:
    """Shared, cached descriptor for length ``n``."""
    return FourierTransform(n)


def fft(x: np.ndarray, division: Optional[Union[Division, str]] = None) -> np.ndarray:
    """
    Compute the discrete Fourier transform of ``x``.

    Unlike ``FourierTransform.execute`` this leaves ``x`` untouched and
    returns a new complex128 array.

    Parameters
    ----------
    x : array_like
        1-D input whose length is a power of two.
    division : Division or str, optional
        Butterfly ordering. Defaults to the configured division.

    Returns
    -------
    np.ndarray
        The transformed array
    """
    f = as_work_buffer(x, np.complex128)
    if division is None:
        division = get_config().division
    get_fourier_transform(f.shape[0]).execute(f, division, Direction.FORWARD)
    return f


def ifft(x: np.ndarray, division: Optional[Union[Division, str]] = None) -> np.ndarray:
    """
    Compute the inverse discrete Fourier transform of ``x``, scaled by 1/n.

    ``ifft(fft(x))`` reproduces ``x`` up to rounding.
    """
    f = as_work_buffer(x, np.complex128)
    if division is None:
        division = get_config().division
    get_fourier_transform(f.shape[0]).execute(
        f, division, Direction.BACKWARD, normalize=True
    )
    return f
