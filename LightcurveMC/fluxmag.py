# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 10:31:47 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike


def flux_to_mag(flux: ArrayLike) -> np.ndarray:
    """Converts fluxes to magnitudes, using a zero point of 0.

    Parameters
    ----------
    flux : array-like
        Fluxes to convert.

    Returns
    -------
    mag : ndarray
        The corresponding magnitudes. Non-positive fluxes have no
        defined magnitude and are returned as NaN.
    """

    flux = np.asarray(flux, dtype=float)

    mag = np.full(flux.shape, np.nan)
    good = flux > 0
    mag[good] = -2.5 * np.log10(flux[good])

    return mag

def mag_to_flux(mag: ArrayLike) -> np.ndarray:
    """Converts magnitudes to fluxes, using a zero point of 0.

    Parameters
    ----------
    mag : array-like
        Magnitudes to convert.

    Returns
    -------
    flux : ndarray
        The corresponding fluxes.
    """

    mag = np.asarray(mag, dtype=float)

    return 10**(-0.4 * mag)
