"""
Base class for the in-place transform descriptors.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from numba import jit

from .errors import LengthMismatchError
from .factors import log2_size

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _sum_diff(f, a, b):
    """f[a], f[b] = f[a] + f[b], f[a] - f[b]"""
    x = f[a]
    y = f[b]
    f[a] = x + y
    f[b] = x - y


@jit(nopython=True, cache=True)
def _scale(f, n):
    # n is a power of two, so 1/n is exact and matches dividing by n
    s = 1.0 / n
    for i in range(f.shape[0]):
        f[i] = f[i] * s


def as_work_buffer(x, dtype) -> np.ndarray:
    """Copy array_like x into a fresh 1-D buffer of the given dtype."""
    f = np.array(x, dtype=dtype)
    if f.ndim != 1:
        raise TypeError(f"expected 1-D input, got shape {f.shape}")
    return f


class BaseTransform(ABC):
    """
    Base class for transform descriptors.

    A descriptor is built once for a fixed length ``n`` and then executed on
    any number of caller-owned buffers of exactly that length. It precomputes
    its factor table at construction and never mutates it afterwards, so one
    descriptor may be shared by several threads as long as each passes its
    own buffer.

    Subclasses must implement:
    - execute(): transform a buffer in place
    """

    #: numpy dtype of the buffers accepted by execute()
    dtype = None

    def __init__(self, n: int):
        """
        Initialize descriptor.

        Args:
            n: Transform length, a power of two no smaller than 2

        Raises:
            InvalidSizeError: If n is not a valid transform length
        """
        self.log2n = log2_size(n)
        self.n = 1 << self.log2n

    @abstractmethod
    def execute(self, buffer: np.ndarray, *args, **kwargs) -> None:
        """
        Transform buffer in place.

        Args:
            buffer: Caller-owned array of length n
        """
        pass

    def _check_buffer(self, buffer: np.ndarray) -> None:
        """
        Validate a buffer before any mutation.

        Raises:
            TypeError: If buffer is not a writable 1-D array of self.dtype
            LengthMismatchError: If buffer does not hold exactly n elements
        """
        if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
            raise TypeError(f"{type(self).__name__} expects a 1-D numpy array")
        if buffer.dtype != self.dtype:
            raise TypeError(
                f"{type(self).__name__} expects dtype {np.dtype(self.dtype)}, got {buffer.dtype}"
            )
        if not buffer.flags.writeable:
            raise TypeError("buffer must be writable")
        if buffer.shape[0] != self.n:
            logger.debug("%s(n=%d) got buffer of length %d", type(self).__name__, self.n, buffer.shape[0])
            raise LengthMismatchError(self.n, buffer.shape[0])

    def _normalize(self, buffer: np.ndarray) -> None:
        _scale(buffer, self.n)

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n})"
