# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 11:32:09 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike

from LightcurveMC.exceptions import Undefined, NotEnoughData


def _sorted_clean(mags):
    mags = np.asarray(mags, dtype=float)
    return np.sort(mags[~np.isnan(mags)])

def get_c1(mags: ArrayLike) -> float:
    """
    Computes the C1 variability index of a light curve.

    C1 measures where the median lies within the 5-95 percentile range of the
    magnitudes, and so is sensitive to whether the light curve spends most
    of its time near its faint or its bright state.

    Parameters
    ----------
    mags : array-like
        The magnitudes. NaN values are ignored.

    Returns
    -------
    float
        ``(m50 - m05) / (m95 - m05)``, where ``mXX`` is the XXth percentile of
        the magnitudes.

    Raises
    ------
    NotEnoughData
        If fewer than 3 non-NaN magnitudes are given.
    Undefined
        If the 5th and 95th percentiles are equal.
    """

    mags = _sorted_clean(mags)
    n = mags.size

    if n < 3:
        raise NotEnoughData('Not enough data to compute C1 (need 3 points, got {})'.format(n))

    mag05 = mags[int(0.05 * n)]
    mag50 = mags[int(0.50 * n)]
    mag95 = mags[int(0.95 * n)]

    if mag95 == mag05:
        raise Undefined('C1 is undefined for a light curve with no magnitude spread')

    return (mag50 - mag05) / (mag95 - mag05)

def get_amplitude(mags: ArrayLike) -> float:
    """
    Computes the 5-95 percentile amplitude of a light curve.

    Parameters
    ----------
    mags : array-like
        The magnitudes. NaN values are ignored.

    Returns
    -------
    float
        The difference between the 95th and 5th percentiles of the magnitudes.

    Raises
    ------
    NotEnoughData
        If fewer than 2 non-NaN magnitudes are given.
    """

    mags = _sorted_clean(mags)
    n = mags.size

    if n < 2:
        raise NotEnoughData('Not enough data to compute amplitude (need 2 points, got {})'.format(n))

    return mags[int(0.95 * n)] - mags[int(0.05 * n)]
