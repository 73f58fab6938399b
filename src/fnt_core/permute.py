"""
In-place bit-reversal permutation (Numba JIT).

The element at index i moves to the index whose log2(n)-bit binary
representation is that of i reversed. The permutation is an involution:
applying it twice restores the original order.

One pass, O(n) amortised:
1. The reversed counter r is advanced from rev(x) to rev(x + 1) by carry
   propagation from the top bit down, never by reversing x from scratch.
2. For odd x, rev(x) = rev(x - 1) + n/2, which is always above n/2 > x.
3. For even x with rev(x) > x, the complementary pair
   (n-1-x, n-1-rev(x)) is swapped in the same iteration, since reversing a
   complemented index is the same as complementing the reversed index.
"""

import numpy as np
from numba import jit

from .errors import InvalidSizeError


@jit(nopython=True, cache=True)
def _swap(v, a, b):
    t = v[a]
    v[a] = v[b]
    v[b] = t


@jit(nopython=True, cache=True)
def _revbin_permute(v):
    """Bit-reversal permutation of v in place. len(v) must be a power of 2."""
    n = v.shape[0]
    nh = n >> 1
    r = 0

    x = 1
    while x < nh:
        # x odd
        r += nh
        _swap(v, x, r)
        x += 1

        # x even: advance r to rev(x)
        i = n
        while i > 0 and (r & i) == 0:
            i >>= 1
            r ^= i

        if r > x:
            _swap(v, x, r)
            _swap(v, n - 1 - x, n - 1 - r)
        x += 1


def revbin_permute(buffer: np.ndarray) -> None:
    """
    Permute ``buffer`` in place into bit-reversed index order.

    Works for any element type (real and complex buffers alike).

    Parameters
    ----------
    buffer : np.ndarray
        Writable 1-D array whose length is a power of two, at least 2.

    Raises
    ------
    TypeError
        If ``buffer`` is not a writable 1-D numpy array.
    InvalidSizeError
        If the length of ``buffer`` is not a power of two, or is less than 2.
    """
    if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
        raise TypeError("buffer must be a 1-D numpy array")
    if not buffer.flags.writeable:
        raise TypeError("buffer must be writable")

    n = buffer.shape[0]
    if n < 2 or n & (n - 1) != 0:
        raise InvalidSizeError(n)

    _revbin_permute(buffer)
