"""Perceived color of absorbance spectra."""
import warnings
from collections import namedtuple
from functools import lru_cache

from .conf import config
from .mathops import np, clamp
from .interp import lookup
from .observer import standard_observer
from .spectrum import Spectrum, wavelength_grid

# sRGB conversion matrix, D65 white
XYZ_to_sRGB_mat_D65 = np.asarray([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])
XYZ_to_sRGB_mat_D65.flags.writeable = False

# sRGB transfer function break point, linear side
SRGB_LINEAR_BREAK = 0.0031308

# saturation lift applied for display legibility; not physical
LIFT_THRESHOLD = 0.02
LIFT_SATURATION_GAIN = 1.25
LIFT_LIGHTNESS_GAIN = 0.98


class DegenerateSpectrumWarning(UserWarning):
    """The illuminant-weighted area of an integration range is zero."""


class Tristimulus(namedtuple('Tristimulus', ['X', 'Y', 'Z'])):
    """CIE XYZ tristimulus values, Y = 1 for a non-absorbing sample.

    `degenerate` is True when the integration range had no illuminant-weighted
    area; X, Y and Z are then all zero.  It is carried beside the three values
    rather than as a fourth field, so a Tristimulus still unpacks as X, Y, Z.
    Equality and hashing compare X, Y and Z only.

    """
    degenerate = False

    def __new__(cls, X, Y, Z, degenerate=False):
        self = super().__new__(cls, X, Y, Z)
        self.degenerate = degenerate
        return self

    def __repr__(self):
        return (f'Tristimulus(X={self.X!r}, Y={self.Y!r}, Z={self.Z!r}, '
                f'degenerate={self.degenerate!r})')

    def _replace(self, **kwargs):
        degenerate = kwargs.pop('degenerate', self.degenerate)
        X, Y, Z = super()._replace(**kwargs)
        return type(self)(X, Y, Z, degenerate=degenerate)


LinearColor = namedtuple('LinearColor', ['r', 'g', 'b'])


class DisplayColor(namedtuple('DisplayColor', ['r', 'g', 'b'])):
    """8-bit encoded sRGB color."""
    __slots__ = ()

    @property
    def hex(self):
        """#rrggbb string, lowercase."""
        return '#{:02x}{:02x}{:02x}'.format(*self)

    @classmethod
    def from_hex(cls, string):
        """Parse a #rrggbb string.

        Raises
        ------
        ValueError
            string is not six hex digits, with or without the leading #

        """
        digits = string.lstrip('#')
        if len(digits) != 6:
            raise ValueError(f'expected #rrggbb, got {string!r}')

        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def integrate_XYZ(wvl_min, wvl_max, transmittance, step=None, observer=None):
    """Integrate illuminant x transmittance x color matching functions.

    Parameters
    ----------
    wvl_min : `float`
        lower wavelength bound, nm.  Clamped to the observer's domain
    wvl_max : `float`
        upper wavelength bound, nm.  Clamped to the observer's domain
    transmittance : `callable`
        function of a `numpy.ndarray` of wavelengths returning transmittance
    step : `float`, optional
        integration step, nm.  Defaults to config.integration_step
    observer : `polyspec.observer.StandardObserver`, optional
        observer and illuminant tables, defaults to CIE 1931 2 degree, D65

    Returns
    -------
    `Tristimulus`
        XYZ normalized so the illuminant's own Y over the range is 1

    Raises
    ------
    ValueError
        step is not positive

    Notes
    -----
    A Riemann sum over wvl_min, wvl_min + step, ... <= wvl_max.  Ranges of zero
    width after clamping have no area; they produce a degenerate, black result
    and a DegenerateSpectrumWarning.

    """
    if step is None:
        step = config.integration_step
    if not step > 0:
        raise ValueError('integration step must be positive.')
    if observer is None:
        observer = standard_observer()

    native_step = np.diff(observer.ybar.wvl).min()
    if step > native_step:
        warnings.warn(f'integration step {step} nm is coarser than the tabulated {native_step} nm; '
                      'the result will alias')

    lo, hi = observer.domain
    lo, hi = max(wvl_min, lo), min(wvl_max, hi)
    if not hi > lo:
        warnings.warn(f'integration range ({wvl_min}, {wvl_max}) nm has no overlap with '
                      f'the observer domain {observer.domain}', DegenerateSpectrumWarning)
        return Tristimulus(0., 0., 0., degenerate=True)

    wvl = wavelength_grid(lo, hi, step)
    illum = lookup(observer.illuminant, wvl)
    xbar = lookup(observer.xbar, wvl)
    ybar = lookup(observer.ybar, wvl)
    zbar = lookup(observer.zbar, wvl)
    t = np.broadcast_to(np.asarray(transmittance(wvl), dtype=config.precision), wvl.shape)

    weighted = illum * t
    Yw = (illum * ybar).sum()
    if not Yw > 0:
        warnings.warn('illuminant weighted area is zero', DegenerateSpectrumWarning)
        return Tristimulus(0., 0., 0., degenerate=True)

    k = 1 / Yw
    X = k * (weighted * xbar).sum()
    Y = k * (weighted * ybar).sum()
    Z = k * (weighted * zbar).sum()
    return Tristimulus(float(X), float(Y), float(Z))


def _as_spectrum(spectrum):
    if callable(spectrum):
        return spectrum

    return Spectrum(*spectrum)


def spectrum_to_XYZ(spectrum, wvl_range=None, step=None):
    """Tristimulus values of light transmitted through a spectrum.

    Parameters
    ----------
    spectrum : `polyspec.spectrum.Spectrum`, `callable`, or `iterable`
        spectrum, transmittance function, or iterable of absorption bands
    wvl_range : `tuple` of `float`, optional
        (min, max) nm, defaults to config.visible_range
    step : `float`, optional
        integration step, nm

    Returns
    -------
    `Tristimulus`
        XYZ tristimulus values

    """
    if wvl_range is None:
        wvl_range = config.visible_range

    return integrate_XYZ(wvl_range[0], wvl_range[1], _as_spectrum(spectrum), step=step)


def XYZ_to_linear_sRGB(XYZ):
    """Convert XYZ to linear sRGB.  Out of gamut values are not clipped.

    Parameters
    ----------
    XYZ : `Tristimulus` or `iterable`
        X, Y, Z

    Returns
    -------
    `LinearColor`
        linear r, g, b

    """
    XYZ = np.asarray(tuple(XYZ)[:3], dtype=config.precision)
    r, g, b = np.matmul(XYZ_to_sRGB_mat_D65, XYZ)
    return LinearColor(float(r), float(g), float(b))


def sRGB_oetf(L):
    """Opto-electrical transfer function for the sRGB colorspace.  Similar to gamma.

    Parameters
    ----------
    L : `float` or `numpy.ndarray`
        linear sRGB values, negative values are treated as 0

    Returns
    -------
    `numpy.ndarray`
        L', L modulated by the oetf

    """
    L = np.maximum(np.asarray(L, dtype=config.precision), 0)
    return np.where(L <= SRGB_LINEAR_BREAK, L * 12.92, 1.055 * (L ** (1 / 2.4)) - 0.055)


def sRGB_reverse_oetf(V):
    """Reverse Opto-electrical transfer function for the sRGB colorspace.

    Parameters
    ----------
    V : `float` or `numpy.ndarray`
        encoded sRGB values

    Returns
    -------
    `numpy.ndarray`
        linear values

    """
    V = np.asarray(V, dtype=config.precision)
    Vp = np.maximum(V, 0)
    return np.where(V <= SRGB_LINEAR_BREAK * 12.92, V / 12.92, ((Vp + 0.055) / 1.055) ** 2.4)


def encode_channel(v):
    """Quantize encoded value(s) in [0, 1] to 0..255, rounding half up.

    Values outside [0, 1] are clipped first.

    """
    out = np.floor(np.clip(v, 0, 1) * 255 + 0.5).astype(int)
    if np.ndim(out) == 0:
        return int(out)

    return out


def linear_to_display(linear):
    """Gamma encode and quantize a linear sRGB color.

    Parameters
    ----------
    linear : `LinearColor` or `iterable`
        linear r, g, b; may be out of gamut

    Returns
    -------
    `DisplayColor`
        8-bit sRGB

    """
    encoded = sRGB_oetf(np.asarray(tuple(linear), dtype=config.precision))
    return DisplayColor(*(int(v) for v in encode_channel(encoded)))


def rgb_to_hsl(r, g, b):
    """Convert RGB to hue, saturation, lightness.

    For RGB in [0, 1] all three are in [0, 1].  Over-range input (a channel
    above 1) can give a saturation above 1, or negative when high + low > 2;
    high + low == 2 gives infinite saturation.

    """
    high, low = max(r, g, b), min(r, g, b)
    l = (high + low) / 2
    d = high - low
    if d == 0:
        return 0., 0., l

    if l > 0.5:
        denom = 2 - high - low
        s = d / denom if denom != 0 else float('inf')
    else:
        s = d / (high + low)

    if high == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h / 6, s, l


def _hue_to_rgb(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """Convert hue, saturation, lightness in [0, 1] to RGB in [0, 1]."""
    if s == 0:
        return l, l, l

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return _hue_to_rgb(p, q, h + 1 / 3), _hue_to_rgb(p, q, h), _hue_to_rgb(p, q, h - 1 / 3)


def saturation_lift(linear, threshold=LIFT_THRESHOLD,
                    saturation_gain=LIFT_SATURATION_GAIN,
                    lightness_gain=LIFT_LIGHTNESS_GAIN):
    """Boost the saturation of a linear color for legibility.

    Parameters
    ----------
    linear : `LinearColor` or `iterable`
        linear r, g, b
    threshold : `float`
        colors with HSL saturation at or below this are left alone
    saturation_gain : `float`
        multiplier on saturation, result clamped to 1
    lightness_gain : `float`
        multiplier on lightness, result clamped to [0, 1]

    Returns
    -------
    `LinearColor`
        adjusted color, channels not negative

    Notes
    -----
    This trades colorimetric accuracy for contrast; it is a display touch-up
    and not part of the colorimetry.  Negative channels are clamped to 0;
    channels above 1 are kept, so near-white colors may be lifted from an
    over-range HSL saturation.  The encoder clips to [0, 1] afterwards.

    """
    r, g, b = (max(0., float(c)) for c in linear)
    h, s, l = rgb_to_hsl(r, g, b)
    if s > threshold:
        s = min(1., s * saturation_gain)
        l = clamp(l * lightness_gain, 0., 1.)
        r, g, b = hsl_to_rgb(h, s, l)

    return LinearColor(r, g, b)


def perceived_color(spectrum, wvl_range=None, step=None, touch_up=None):
    """Color of D65 light after passing through an absorbance spectrum.

    Parameters
    ----------
    spectrum : `polyspec.spectrum.Spectrum`, `callable`, or `iterable`
        spectrum, transmittance function, or iterable of absorption bands
    wvl_range : `tuple` of `float`, optional
        (min, max) nm, defaults to config.visible_range
    step : `float`, optional
        integration step, nm.  Defaults to config.integration_step
    touch_up : `bool`, optional
        apply saturation_lift.  Defaults to config.saturation_lift

    Returns
    -------
    `DisplayColor`
        8-bit sRGB color

    """
    if touch_up is None:
        touch_up = config.saturation_lift

    XYZ = spectrum_to_XYZ(spectrum, wvl_range=wvl_range, step=step)
    linear = XYZ_to_linear_sRGB(XYZ)
    if touch_up:
        linear = saturation_lift(linear)

    return linear_to_display(linear)


def perceived_hex(spectrum, wvl_range=None, step=None, touch_up=None):
    """Same as perceived_color, as a #rrggbb string."""
    return perceived_color(spectrum, wvl_range=wvl_range, step=step, touch_up=touch_up).hex


@lru_cache()
def white_point_xy():
    """Chromaticity of the unfiltered reference illuminant."""
    lo, hi = standard_observer().domain
    XYZ = integrate_XYZ(lo, hi, np.ones_like)
    return XYZ_to_xy(XYZ)


def XYZ_to_xy(XYZ):
    """Convert XYZ to xy chromaticity coordinates.

    Parameters
    ----------
    XYZ : `Tristimulus` or `iterable`
        X, Y, Z

    Returns
    -------
    `tuple`
        x, y.  Black (X + Y + Z == 0) maps to the white point

    """
    X, Y, Z = tuple(XYZ)[:3]
    total = X + Y + Z
    if total == 0:
        return white_point_xy()

    return X / total, Y / total


def hex_to_hue(string):
    """Hue angle, degrees in [0, 360), of a #rrggbb color."""
    color = DisplayColor.from_hex(string)
    h, _, _ = rgb_to_hsl(*(c / 255 for c in color))
    return (h * 360) % 360
