"""
fnt_core - Fast Numeric Transforms

In-place discrete Fourier and Hartley transforms of power-of-two length,
implemented as iterative radix-2 Cooley-Tukey algorithms with Numba JIT.

A descriptor is created once per transform length and executed on any number
of caller-owned buffers of that length:

    >>> t = FourierTransform(1024)
    >>> t.execute(buf, Division.DIT, Direction.FORWARD)
    >>> t.execute(buf, Division.DIT, Direction.BACKWARD, normalize=True)

Modules:
    - factors: twiddle/rotation factor tables
    - permute: in-place bit-reversal permutation
    - fft: Fourier transform (complex128 buffers)
    - fht: Hartley transform (float64 buffers)
"""

from .errors import TransformError, InvalidSizeError, LengthMismatchError
from .kinds import Division, Direction
from .factors import fourier_factors, hartley_factors, log2_size
from .permute import revbin_permute
from .fft import FourierTransform, new_fourier_transform, get_fourier_transform, fft, ifft
from .fht import HartleyTransform, new_hartley_transform, get_hartley_transform, fht, ifht
from .config import TransformConfig, load_config, get_config, set_config

__all__ = [
    # Errors
    'TransformError',
    'InvalidSizeError',
    'LengthMismatchError',
    # Selectors
    'Division',
    'Direction',
    # Building blocks
    'fourier_factors',
    'hartley_factors',
    'log2_size',
    'revbin_permute',
    # Fourier
    'FourierTransform',
    'new_fourier_transform',
    'get_fourier_transform',
    'fft',
    'ifft',
    # Hartley
    'HartleyTransform',
    'new_hartley_transform',
    'get_hartley_transform',
    'fht',
    'ifht',
    # Configuration
    'TransformConfig',
    'load_config',
    'get_config',
    'set_config',
]

__version__ = '1.0.0'
