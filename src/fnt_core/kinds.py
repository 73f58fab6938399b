"""
Algorithm selectors shared by the Fourier and Hartley transforms.
"""

from enum import Enum


class Division(Enum):
    """Butterfly ordering."""

    DIT = 'dit'  # Decimation-in-time: permute, then combine
    DIF = 'dif'  # Decimation-in-frequency: combine, then permute


class Direction(Enum):
    """Fourier transform direction. The Hartley transform has none."""

    FORWARD = 'forward'    # exp(-2*pi*i*k/n)
    BACKWARD = 'backward'  # exp(+2*pi*i*k/n)
