"""CIE Standard Illuminant D65 white point, 2° standard observer."""

from typing import Final

X_N: Final[float] = 0.95047

Y_N: Final[float] = 1.00000

Z_N: Final[float] = 1.08883
