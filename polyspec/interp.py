"""Piecewise linear lookup of sampled curves."""
from functools import lru_cache

from .mathops import np, interpolate


@lru_cache(maxsize=64)
def _prepare_interpf(curve):
    wvl, values = curve.wvl, curve.values
    return interpolate.interp1d(wvl, values, kind='linear', bounds_error=False,
                                fill_value=(values[0], values[-1]), assume_sorted=True)


def lookup(curve, wavelength):
    """Evaluate a sampled curve at any wavelength.

    Parameters
    ----------
    curve : `polyspec.observer.SampledCurve`
        tabulated function to evaluate
    wavelength : `float` or `numpy.ndarray`
        wavelength(s) in nm

    Returns
    -------
    `float` or `numpy.ndarray`
        linearly interpolated value(s); wavelengths outside the curve's domain
        take the value of the nearest endpoint

    """
    out = _prepare_interpf(curve)(wavelength)
    if np.ndim(out) == 0:
        return float(out)

    return out
