# -*- coding: utf-8 -*-
"""
Created on Mon Mar 25 15:02:37 2024

@author: danielgodinez

Statistics still being evaluated for inclusion in the main families. They
are not part of any StatType and must be called directly.
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple

from LightcurveMC.exceptions import NotSorted


def _check_inputs(times, fluxes, caller):
    times = np.asarray(times, dtype=float)
    fluxes = np.asarray(fluxes, dtype=float)

    if times.size < 2:
        raise ValueError("Can't take RMS over a light curve of less than 2 points (gave {})".format(times.size))
    if times.size != fluxes.size:
        raise ValueError('Times and fluxes have different lengths in {}() (gave {} for times and {} for fluxes)'.format(caller, times.size, fluxes.size))
    if np.any(np.diff(times) < 0):
        raise NotSorted('times is not sorted in {}()'.format(caller))

    return times, fluxes

def _running_rms(fluxes):
    # Sample standard deviation of fluxes[:k] for k = 2..n
    shifted = fluxes - fluxes[0]
    counts = np.arange(1, shifted.size + 1, dtype=float)
    sums = np.cumsum(shifted)
    squares = np.cumsum(shifted**2)

    var = (squares[1:] - sums[1:]**2 / counts[1:]) / (counts[1:] - 1.0)
    var[var < 0] = 0.0

    return np.sqrt(var)

def rms_vs_t_rooted(times: ArrayLike, fluxes: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Computes the RMS of a light curve over ever-longer intervals starting at the
    first observation.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order, with no NaNs.
    fluxes : array-like
        Flux at each timestamp, with no NaNs.

    Returns
    -------
    time_steps : ndarray
        ``times[k] - times[0]`` for k = 1, ..., n-1.
    rms_values : ndarray
        The sample standard deviation of ``fluxes[:k+1]``.

    Raises
    ------
    ValueError
        If fewer than 2 points are given, or the arrays have different lengths.
    NotSorted
        If `times` is not in ascending order.
    """

    times, fluxes = _check_inputs(times, fluxes, 'rms_vs_t_rooted')

    return times[1:] - times[0], _running_rms(fluxes)

def rms_vs_t_all_pairs(times: ArrayLike, fluxes: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Computes the RMS of a light curve over every interval bounded by two observations.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order, with no NaNs.
    fluxes : array-like
        Flux at each timestamp, with no NaNs.

    Returns
    -------
    time_steps : ndarray
        The length of each of the n(n-1)/2 intervals, in ascending order.
    rms_values : ndarray
        The sample standard deviation of the fluxes within each interval,
        endpoints included. Intervals of equal length are ordered by RMS.

    Raises
    ------
    ValueError
        If fewer than 2 points are given, or the arrays have different lengths.
    NotSorted
        If `times` is not in ascending order.
    """

    times, fluxes = _check_inputs(times, fluxes, 'rms_vs_t_all_pairs')

    steps, rms = [], []
    for first in range(times.size - 1):
        steps.append(times[first+1:] - times[first])
        rms.append(_running_rms(fluxes[first:]))

    steps = np.concatenate(steps)
    rms = np.concatenate(rms)
    order = np.lexsort((rms, steps))

    return steps[order], rms[order]
