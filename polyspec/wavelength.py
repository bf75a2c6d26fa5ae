"""Closed form wavelength to color approximation, for spectrum bars and gradients."""
from functools import lru_cache

from .conf import config
from .mathops import np
from .colorimetry import DisplayColor, encode_channel
from .spectrum import wavelength_grid


def _wavelength_to_linear(nm):
    """Un-attenuated r, g, b and the edge intensity factor at nm."""
    if nm >= 380 and nm < 440:
        R, G, B = -(nm - 440) / (440 - 380), 0.0, 1.0
    elif nm >= 440 and nm < 490:
        R, G, B = 0.0, (nm - 440) / (490 - 440), 1.0
    elif nm >= 490 and nm < 510:
        R, G, B = 0.0, 1.0, -(nm - 510) / (510 - 490)
    elif nm >= 510 and nm < 580:
        R, G, B = (nm - 510) / (580 - 510), 1.0, 0.0
    elif nm >= 580 and nm < 645:
        R, G, B = 1.0, -(nm - 645) / (645 - 580), 0.0
    elif nm >= 645 and nm <= 780:
        R, G, B = 1.0, 0.0, 0.0
    else:
        R, G, B = 0.0, 0.0, 0.0

    # intensity falls off toward the edges of vision
    if nm >= 380 and nm < 420:
        factor = 0.3 + 0.7 * (nm - 380) / (420 - 380)
    elif nm >= 420 and nm < 700:
        factor = 1.0
    elif nm >= 700 and nm <= 780:
        factor = 0.3 + 0.7 * (780 - nm) / (780 - 700)
    else:
        factor = 0.0

    return (R, G, B), factor


def wavelength_to_rgb(wavelength, gamma=None):
    """Approximate display color of monochromatic light.

    Parameters
    ----------
    wavelength : `float`
        wavelength of light, nm
    gamma : `float`, optional
        output exponent, defaults to config.heuristic_gamma (0.8)

    Returns
    -------
    `polyspec.colorimetry.DisplayColor`
        8-bit color.  Wavelengths outside config.heuristic_range (and NaN)
        give the neutral gray config.fallback_gray

    Notes
    -----
    The exponent is an ad hoc gamma, not the sRGB transfer function used for
    perceived colors; the two are calibrated separately.
    See noah.org: http://www.noah.org/wiki/Wavelength_to_RGB_in_Python .

    """
    if gamma is None:
        gamma = config.heuristic_gamma

    wavelength = float(wavelength)
    low, high = config.heuristic_range
    if not low <= wavelength <= high:
        gray = config.fallback_gray
        return DisplayColor(gray, gray, gray)

    rgb, factor = _wavelength_to_linear(wavelength)
    factor = max(0.0, factor)
    return DisplayColor(*(encode_channel((max(0.0, c) * factor) ** gamma) for c in rgb))


def wavelength_to_hex(wavelength, gamma=None):
    """Same as wavelength_to_rgb, as a #rrggbb string."""
    return wavelength_to_rgb(wavelength, gamma=gamma).hex


def gradient_stops(wvl_min, wvl_max, step=5):
    """Color stops for a linear gradient spanning wvl_min to wvl_max.

    Parameters
    ----------
    wvl_min : `float`
        wavelength at the start of the gradient, nm
    wvl_max : `float`
        wavelength at the end of the gradient, nm
    step : `float`
        spacing of the stops, nm

    Returns
    -------
    `list` of `tuple`
        (offset, color) pairs, offset in percent of the gradient length and
        color a #rrggbb string

    Raises
    ------
    ValueError
        wvl_max is not above wvl_min, or step is not positive

    """
    if not wvl_max > wvl_min:
        raise ValueError('wvl_max must be greater than wvl_min.')

    span = wvl_max - wvl_min
    return [(float((nm - wvl_min) / span * 100), wavelength_to_hex(nm))
            for nm in wavelength_grid(wvl_min, wvl_max, step)]


@lru_cache()
def _render_spectrum_background(wvl_min, wvl_max, numpts, gamma, heuristic_range, fallback_gray):
    wvl = np.linspace(wvl_min, wvl_max, numpts)
    out = [wavelength_to_rgb(wavelength, gamma=gamma) for wavelength in wvl]
    return np.tile(np.asarray(out) / 255, (2, 1, 1))


def render_spectrum_background(wvl_min=380, wvl_max=730, numpts=100):
    """Render the background for a spectrum plot.

    Parameters
    ----------
    wvl_min : `int`, optional
        minimum wavelength to render
    wvl_max : `int`, optional
        maximum wavelength to render
    numpts : `int`, optional
        number of wavelengths to render

    Returns
    -------
    `numpy.ndarray`
        2 x numpts x 3 array of RGB values in [0, 1]

    """
    return _render_spectrum_background(wvl_min, wvl_max, numpts, config.heuristic_gamma,
                                       tuple(config.heuristic_range), config.fallback_gray)
