"""polyspec, perceived colors of absorbance spectra."""
from importlib.metadata import version, PackageNotFoundError

from polyspec.conf import config
from polyspec.observer import SampledCurve, StandardObserver, standard_observer
from polyspec.interp import lookup
from polyspec.spectrum import AbsorptionBand, Spectrum
from polyspec.colorimetry import (
    Tristimulus,
    LinearColor,
    DisplayColor,
    DegenerateSpectrumWarning,
    integrate_XYZ,
    spectrum_to_XYZ,
    XYZ_to_linear_sRGB,
    linear_to_display,
    saturation_lift,
    perceived_color,
    perceived_hex,
)
from polyspec.wavelength import wavelength_to_rgb, wavelength_to_hex, gradient_stops
from polyspec.energy import ev_to_nm, nm_to_ev, homo_lumo_gap, gap_to_band

__all__ = [
    'config',
    'SampledCurve',
    'StandardObserver',
    'standard_observer',
    'lookup',
    'AbsorptionBand',
    'Spectrum',
    'Tristimulus',
    'LinearColor',
    'DisplayColor',
    'DegenerateSpectrumWarning',
    'integrate_XYZ',
    'spectrum_to_XYZ',
    'XYZ_to_linear_sRGB',
    'linear_to_display',
    'saturation_lift',
    'perceived_color',
    'perceived_hex',
    'wavelength_to_rgb',
    'wavelength_to_hex',
    'gradient_stops',
    'ev_to_nm',
    'nm_to_ev',
    'homo_lumo_gap',
    'gap_to_band',
]

try:
    __version__ = version('polyspec')
except PackageNotFoundError:
    __version__ = '0+unknown'
