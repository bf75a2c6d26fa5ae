"""Absorbance spectra built from Gaussian bands."""
from collections import namedtuple

from .conf import config
from .mathops import np

# sigma = fwhm / (2 sqrt(2 ln 2))
FWHM_TO_SIGMA = 1 / (2 * np.sqrt(2 * np.log(2)))

# used in place of sigma when a band has a non-positive width, so the
# gaussian stays finite.  Not a physical case.
FALLBACK_SIGMA = 1.0


def fwhm_to_sigma(fwhm):
    """Convert a full width at half maximum to a gaussian standard deviation.

    Parameters
    ----------
    fwhm : `float`
        full width at half maximum, nm

    Returns
    -------
    `float`
        standard deviation, nm.  FALLBACK_SIGMA if fwhm is not positive

    """
    if fwhm > 0:
        return fwhm * FWHM_TO_SIGMA

    return FALLBACK_SIGMA


def gaussian(nm, center, sigma):
    """Unit height gaussian, exp(-1/2 ((nm - center) / sigma)^2)."""
    nm = np.asarray(nm, dtype=config.precision)
    return np.exp(-0.5 * ((nm - center) / sigma) ** 2)


class AbsorptionBand(namedtuple('AbsorptionBand', ['center', 'fwhm', 'peak'])):
    """One gaussian absorbance lobe.

    Parameters
    ----------
    center : `float`
        center wavelength, nm
    fwhm : `float`
        full width at half maximum, nm
    peak : `float`
        (decadic) absorbance at the center

    """
    __slots__ = ()

    @property
    def sigma(self):
        return fwhm_to_sigma(self.fwhm)

    def absorbance(self, nm):
        """Absorbance of this band at wavelength(s) nm."""
        return self.peak * gaussian(nm, self.center, self.sigma)

    def profile(self, nm):
        """Drawing height of the band, peak scaled into [0, 1] by A0 / 2."""
        scale = min(1, max(0, self.peak / 2))
        return scale * gaussian(nm, self.center, self.sigma)


class Spectrum(object):
    """An absorbance spectrum, the sum of zero or more absorption bands.

    Absorbances are additive so band order carries no meaning; two spectra
    with the same bands in any order compare and hash equal.

    """
    def __init__(self, *bands):
        """Create a new Spectrum.

        Parameters
        ----------
        *bands : `AbsorptionBand` or `tuple`
            (center, fwhm, peak) of each band

        """
        self.bands = tuple(AbsorptionBand(*b) for b in bands)

    def _key(self):
        return tuple(sorted(self.bands))

    def __eq__(self, other):
        if not isinstance(other, Spectrum):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return 'Spectrum({})'.format(', '.join(repr(b) for b in self.bands))

    def __len__(self):
        return len(self.bands)

    def absorbance(self, nm):
        """Total absorbance at wavelength(s) nm.

        Parameters
        ----------
        nm : `float` or `numpy.ndarray`
            wavelength(s), nm

        Returns
        -------
        `numpy.ndarray`
            sum of the band absorbances, same shape as nm

        """
        out = np.zeros_like(np.asarray(nm, dtype=config.precision))
        for band in self.bands:
            out = out + band.absorbance(nm)

        return out

    def transmittance(self, nm):
        """Beer-Lambert transmittance, 10^-A, at wavelength(s) nm."""
        return 10 ** (-self.absorbance(nm))

    __call__ = transmittance

    def sample(self, wvl_min, wvl_max, step=2):
        """Sample the absorbance on a regular grid, e.g. for drawing.

        Parameters
        ----------
        wvl_min : `float`
            first wavelength, nm
        wvl_max : `float`
            last wavelength, included if it falls on the grid, nm
        step : `float`
            grid spacing, nm

        Returns
        -------
        wvl : `numpy.ndarray`
            wavelengths
        absorbance : `numpy.ndarray`
            absorbance at each wavelength

        """
        wvl = wavelength_grid(wvl_min, wvl_max, step)
        return wvl, self.absorbance(wvl)


def wavelength_grid(wvl_min, wvl_max, step):
    """Wavelengths wvl_min, wvl_min + step, ... while <= wvl_max.

    Returns an empty array when wvl_max < wvl_min.

    Raises
    ------
    ValueError
        step is not positive

    """
    if not step > 0:
        raise ValueError('step must be positive.')

    if wvl_max < wvl_min:
        return np.zeros(0, dtype=config.precision)

    # the small slack keeps wvl_max on the grid despite float error in the division
    num = int(np.floor((wvl_max - wvl_min) / step + 1e-9)) + 1
    return wvl_min + step * np.arange(num, dtype=config.precision)
