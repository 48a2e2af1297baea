# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 10:22:18 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple


def is_nan(x: float) -> bool:
    """Tests whether a value is NaN."""

    return bool(np.isnan(x))

def is_nan_or_inf(x: float) -> bool:
    """Tests whether a value is NaN or infinite (of either sign)."""

    return not np.isfinite(x)

def remove_nans(bad_vals: ArrayLike, side_vals: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Removes NaNs from one array, along with the matching elements of a second array.

    Parameters
    ----------
    bad_vals : array-like
        Values that may contain NaNs.
    side_vals : array-like
        Values paired with `bad_vals`, e.g. the timestamps of a light curve.

    Returns
    -------
    good_vals : ndarray
        The elements of `bad_vals` that are not NaN, in their original order.
    match_vals : ndarray
        The elements of `side_vals` paired with `good_vals`.

    Raises
    ------
    ValueError
        If the two arrays have different lengths.
    """

    bad_vals = np.asarray(bad_vals, dtype=float)
    side_vals = np.asarray(side_vals, dtype=float)

    if bad_vals.size != side_vals.size:
        raise ValueError('Passed arrays of different lengths into remove_nans(): {} for array with NaNs, and {} for matching array'.format(bad_vals.size, side_vals.size))

    mask = ~np.isnan(bad_vals)

    return bad_vals[mask], side_vals[mask]

def mean_no_nan(values: ArrayLike) -> float:
    """
    Mean of an array, ignoring any NaN values.

    Parameters
    ----------
    values : array-like
        The values to average.

    Returns
    -------
    float
        The arithmetic mean of the non-NaN values, or NaN if there are none.
    """

    values = np.asarray(values, dtype=float)
    clean = values[~np.isnan(values)]

    if clean.size == 0:
        return np.nan

    return float(np.mean(clean))

def variance_no_nan(values: ArrayLike) -> float:
    """
    Unbiased sample variance of an array, ignoring any NaN values.

    Parameters
    ----------
    values : array-like
        The values whose variance is wanted.

    Returns
    -------
    float
        The variance of the non-NaN values (normalized by n-1), or NaN if
        there are fewer than two of them.

    Notes
    -----
    Round-off can make the variance of a constant array slightly negative;
    such values (down to -1e-12) are returned as exactly 0.
    """

    values = np.asarray(values, dtype=float)
    clean = values[~np.isnan(values)]

    if clean.size < 2:
        return np.nan

    raw_variance = float(np.var(clean, ddof=1))

    # Floor at 0 to prevent rounding errors from causing a negative variance
    if -1e-12 < raw_variance < 0.0:
        return 0.0

    return raw_variance

def quantile(values: ArrayLike, q: float) -> float:
    """
    Quantile of a data set, without interpolation.

    Parameters
    ----------
    values : array-like
        The data. The input is not modified.
    q : float
        The quantile to compute, between 0 and 1 inclusive.

    Returns
    -------
    float
        The element with index floor(q*n) in the sorted data, or the
        largest element if q is 1.

    Raises
    ------
    ValueError
        If `values` is empty or `q` is outside [0, 1].
    """

    values = np.sort(np.asarray(values, dtype=float))
    n = values.size

    if n < 1:
        raise ValueError('Supplied empty data set to quantile()')

    if 0.0 <= q < 1.0:
        index = int(q * n)
    elif q == 1.0:
        index = n - 1
    else:
        raise ValueError('Invalid quantile of {:0.2f} passed to quantile()'.format(q))

    return values[index]
