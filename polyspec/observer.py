"""CIE standard observer and illuminant tables."""
from collections import namedtuple
from functools import lru_cache

from .conf import config
from .mathops import np

# the tables below are sampled every 10 nm from 400 to 700 nm inclusive
NATIVE_STEP = 10

WAVELENGTHS = np.arange(400, 701, NATIVE_STEP, dtype=np.float64)

# CIE 1931 2 degree color matching functions
CMF_X = np.asarray([
    0.01431, 0.04351, 0.13438, 0.28390, 0.34828, 0.33620, 0.29080, 0.19536,
    0.09564, 0.03201, 0.00490, 0.00930, 0.06327, 0.16550, 0.29040, 0.43345,
    0.59450, 0.76210, 0.91630, 1.02630, 1.06220, 1.00260, 0.85445, 0.64240,
    0.44790, 0.28350, 0.16490, 0.08740, 0.04677, 0.02270, 0.01136,
])
CMF_Y = np.asarray([
    0.000396, 0.00121, 0.00400, 0.01160, 0.02300, 0.03800, 0.06000, 0.09098,
    0.13902, 0.20802, 0.32300, 0.50300, 0.71000, 0.86200, 0.95400, 0.99500,
    0.99500, 0.95200, 0.87000, 0.75700, 0.63100, 0.50300, 0.38100, 0.26500,
    0.17500, 0.10700, 0.06100, 0.03200, 0.01700, 0.00820, 0.00410,
])
CMF_Z = np.asarray([
    0.06785, 0.20740, 0.64560, 1.38560, 1.74710, 1.77210, 1.66920, 1.28760,
    0.81300, 0.46518, 0.27200, 0.15820, 0.07825, 0.04216, 0.02030, 0.00875,
    0.00390, 0.00210, 0.00165, 0.00110, 0.00078, 0.00057, 0.00042, 0.00030,
    0.00021, 0.00015, 0.00010, 0.00005, 0.00003, 0.000015, 0.000008,
])

# CIE D65 relative spectral power distribution, 100 at 560 nm
D65 = np.asarray([
    82.75, 91.49, 93.43, 86.68, 104.86, 117.01, 117.81, 114.86,
    115.92, 108.81, 109.35, 107.80, 104.79, 107.69, 104.41, 104.05,
    100.00, 96.33, 95.79, 88.69, 90.02, 89.60, 87.70, 83.29,
    83.70, 80.03, 80.21, 82.28, 78.28, 69.72, 71.61,
])

for _table in (WAVELENGTHS, CMF_X, CMF_Y, CMF_Z, D65):
    _table.flags.writeable = False
del _table


class SampledCurve(namedtuple('SampledCurve', ['wvl', 'values'])):
    """A tabulated function of wavelength.

    Wavelengths are strictly increasing and there are at least two samples.
    Both arrays are read-only once the curve is built.

    """
    __slots__ = ()

    def __new__(cls, wvl, values):
        wvl = np.array(wvl, dtype=config.precision)
        values = np.array(values, dtype=config.precision)
        if wvl.ndim != 1 or wvl.shape != values.shape:
            raise ValueError('wvl and values must be 1D arrays of equal length.')
        if wvl.size < 2:
            raise ValueError('a sampled curve needs at least two points.')
        if not np.all(np.diff(wvl) > 0):
            raise ValueError('wavelengths must be strictly increasing.')

        wvl.flags.writeable = False
        values.flags.writeable = False
        return super().__new__(cls, wvl, values)

    @property
    def domain(self):
        """(first, last) wavelength of the curve."""
        return float(self.wvl[0]), float(self.wvl[-1])

    def __hash__(self):
        return hash((self.wvl.tobytes(), self.values.tobytes()))

    def __eq__(self, other):
        if not isinstance(other, SampledCurve):
            return NotImplemented
        return (np.array_equal(self.wvl, other.wvl)
                and np.array_equal(self.values, other.values))

    def __ne__(self, other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq


class StandardObserver(namedtuple('StandardObserver', ['xbar', 'ybar', 'zbar', 'illuminant'])):
    """Color matching functions and a reference illuminant over one domain."""
    __slots__ = ()

    @property
    def domain(self):
        """(min, max) wavelength shared by all four curves."""
        return self.ybar.domain


@lru_cache()
def prepare_cie_1931_2deg_observer():
    """Prepare the CIE 1931 standard 2 degree observer.

    Returns
    -------
    `dict`
        with keys: wvl, X, Y, Z

    """
    return {
        'wvl': WAVELENGTHS,
        'X': CMF_X,
        'Y': CMF_Y,
        'Z': CMF_Z,
    }


def prepare_cmf(observer='1931_2deg'):
    """Safely returns the color matching function dictionary for the specified observer.

    Parameters
    ----------
    observer : `str`, {'1931_2deg'}
        the observer to return

    Returns
    -------
    `dict`
        cmf dict

    Raises
    ------
    ValueError
        observer not 1931 2 degree

    """
    if observer.lower() == '1931_2deg':
        return prepare_cie_1931_2deg_observer()
    else:
        raise ValueError('observer must be 1931_2deg')


def prepare_illuminant_spectrum(illuminant='D65'):
    """Prepare the SPD for a given illuminant.

    Parameters
    ----------
    illuminant : `str`, {'D65'}
        CIE illuminant

    Returns
    -------
    `dict`
        with keys: `wvl`, `values`

    Raises
    ------
    ValueError
        illuminant not D65

    """
    if illuminant.upper() != 'D65':
        raise ValueError('illuminant must be D65')

    return {
        'wvl': WAVELENGTHS,
        'values': D65,
    }


@lru_cache()
def standard_observer(observer='1931_2deg', illuminant='D65'):
    """The process-wide standard observer, built once.

    Parameters
    ----------
    observer : `str`, {'1931_2deg'}
        CIE observer
    illuminant : `str`, {'D65'}
        reference illuminant

    Returns
    -------
    `StandardObserver`
        x̄, ȳ, z̄ and the illuminant as `SampledCurve` objects

    """
    cmf = prepare_cmf(observer)
    ill = prepare_illuminant_spectrum(illuminant)
    wvl = cmf['wvl']
    return StandardObserver(
        xbar=SampledCurve(wvl, cmf['X']),
        ybar=SampledCurve(wvl, cmf['Y']),
        zbar=SampledCurve(wvl, cmf['Z']),
        illuminant=SampledCurve(ill['wvl'], ill['values']),
    )
