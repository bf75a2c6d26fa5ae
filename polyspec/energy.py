"""Photon energies and pi orbital levels of linear polyenes."""
from scipy.constants import c, h, e

from .mathops import np, clamp
from .spectrum import AbsorptionBand

# h c / e, in eV nm; ~1239.84
HC_EV_NM = h * c / e * 1e9


def ev_to_nm(ev):
    """Wavelength, nm, of a photon with energy ev, eV.

    Raises
    ------
    ValueError
        ev is not positive

    """
    if np.any(np.asarray(ev) <= 0):
        raise ValueError('photon energy must be positive.')

    return HC_EV_NM / ev


def nm_to_ev(nm):
    """Energy, eV, of a photon with wavelength nm, nm.

    Raises
    ------
    ValueError
        nm is not positive

    """
    if np.any(np.asarray(nm) <= 0):
        raise ValueError('wavelength must be positive.')

    return HC_EV_NM / nm


def huckel_energies(n, alpha=0, beta=-1):
    """Hückel pi orbital energies of a linear chain of n sp2 carbons.

    Parameters
    ----------
    n : `int`
        number of carbons in the conjugated chain
    alpha : `float`
        Coulomb integral
    beta : `float`
        resonance integral, negative

    Returns
    -------
    `numpy.ndarray`
        E_k = alpha + 2 beta cos(k pi / (n + 1)), k = 1..n, lowest first

    Raises
    ------
    ValueError
        fewer than two carbons, or beta not negative

    """
    if n < 2:
        raise ValueError('a conjugated chain needs at least two carbons.')
    if not beta < 0:
        raise ValueError('beta must be negative.')

    k = np.arange(1, n + 1)
    return alpha + 2 * beta * np.cos(k * np.pi / (n + 1))


def homo_lumo_levels(n_electrons):
    """1-based indices of the HOMO and LUMO for n_electrons paired pi electrons.

    Raises
    ------
    ValueError
        n_electrons is not a positive even number

    """
    if n_electrons < 2 or n_electrons % 2:
        raise ValueError('expected a positive, even number of pi electrons.')

    homo = n_electrons // 2
    return homo, homo + 1


def homo_lumo_gap(n, alpha=0, beta=-1, n_electrons=None):
    """HOMO-LUMO gap of a linear polyene in the Hückel model.

    Parameters
    ----------
    n : `int`
        number of carbons in the conjugated chain
    alpha : `float`
        Coulomb integral
    beta : `float`
        resonance integral, negative.  The gap is in the units of beta
    n_electrons : `int`, optional
        pi electron count, defaults to n (neutral polyene)

    Returns
    -------
    `float`
        E_LUMO - E_HOMO

    """
    if n_electrons is None:
        n_electrons = n

    energies = huckel_energies(n, alpha=alpha, beta=beta)
    homo, lumo = homo_lumo_levels(n_electrons)
    if lumo > n:
        raise ValueError(f'{n_electrons} electrons fill every level of a {n} carbon chain.')

    return float(energies[lumo - 1] - energies[homo - 1])


def gap_to_band(gap_ev, fwhm=32, peak=0.9, wvl_limits=(300, 900)):
    """Absorption band for a HOMO-LUMO transition.

    Parameters
    ----------
    gap_ev : `float`
        transition energy, eV
    fwhm : `float`
        full width at half maximum of the band, nm
    peak : `float`
        absorbance at the band center
    wvl_limits : `tuple` of `float`
        the band center is clamped into this range, nm

    Returns
    -------
    `polyspec.spectrum.AbsorptionBand`
        band centered at h c / gap

    """
    center = clamp(float(ev_to_nm(gap_ev)), *wvl_limits)
    return AbsorptionBand(center, fwhm, peak)
