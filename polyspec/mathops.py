"""A submodule which allows the user to swap out the backend for mathematics."""
import numpy as np
from scipy import interpolate


class BackendShim:
    """A shim that allows a backend to be swapped at runtime."""
    def __init__(self, src):
        self._srcmodule = src

    def __getattr__(self, key):
        if key == '_srcmodule':
            return self._srcmodule

        return getattr(self._srcmodule, key)


_np = np
_interpolate = interpolate
np = BackendShim(np)
interpolate = BackendShim(interpolate)


def set_backend_to_defaults():
    """Convenience method to restore polyspec's default backend options."""
    np._srcmodule = _np
    interpolate._srcmodule = _interpolate
    return


def clamp(value, low, high):
    """Clamp a value to the closed interval [low, high]."""
    return max(low, min(high, value))


def lerp(a, b, t):
    """Linear interpolation between a and b, t=0 gives a and t=1 gives b."""
    return a + (b - a) * t


def inverse_lerp(a, b, value):
    """Inverse of lerp, clamped to [0, 1].

    Parameters
    ----------
    a : float
        value mapped to 0
    b : float
        value mapped to 1
    value : float
        value to locate between a and b

    Returns
    -------
    float
        fractional position of value between a and b

    """
    return clamp((value - a) / (b - a), 0, 1)
