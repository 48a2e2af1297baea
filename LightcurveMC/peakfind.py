# -*- coding: utf-8 -*-
"""
Created on Wed Mar 13 09:12:36 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple

from LightcurveMC.exceptions import NotEnoughData, UnexpectedNan


def _check_inputs(times, values, caller):
    if times.size < 2:
        raise NotEnoughData('Cannot find peaks with fewer than 2 data points in {}() (gave {})'.format(caller, times.size))
    if times.size != values.size:
        raise ValueError('Data and time arrays passed to {}() must have the same length (gave {} for times and {} for data)'.format(caller, times.size, values.size))
    if np.isnan(times).any() or np.isnan(values).any():
        raise UnexpectedNan('NaN values passed to {}()'.format(caller))

def peak_find(times: ArrayLike, values: ArrayLike, min_amp: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Finds the alternating minima and maxima of a light curve that are separated by
    at least a minimum amplitude.

    Starting from the first point, the light curve is followed until it has
    moved by `min_amp`; from then on, the running extremum is extended for as
    long as the light curve keeps moving in the same direction, and a new
    extremum is started whenever the light curve turns back by `min_amp` or
    more.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    values : array-like
        Measurements at each timestamp, typically magnitudes.
    min_amp : float
        The smallest change in `values` to count as a real turnaround.

    Returns
    -------
    peak_times : ndarray
        Times of the extrema. The first point of the light curve is always
        the first entry.
    peak_values : ndarray
        Values at each extremum.

    Raises
    ------
    NotEnoughData
        If fewer than 2 points are given.
    ValueError
        If the arrays have different lengths, or `min_amp` is not positive.
    UnexpectedNan
        If either array contains NaN.

    Notes
    -----
    A turnaround of exactly `min_amp` counts as significant, while a value
    equal to the running extremum does not extend it.
    """

    times = np.asarray(times, dtype=float)
    values = np.asarray(values, dtype=float)

    _check_inputs(times, values, 'peak_find')

    if min_amp <= 0:
        raise ValueError('Need a positive threshold for magnitude changes in peak_find() (gave {})'.format(min_amp))

    peak_times = [times[0]]
    peak_values = [values[0]]

    far = np.nonzero(np.abs(values - values[0]) >= min_amp)[0]
    if far.size == 0:
        return np.array(peak_times), np.array(peak_values)

    first = far[0]
    peak_times.append(times[first])
    peak_values.append(values[first])

    y1 = values[first]
    sign = 1 if y1 > values[0] else -1

    for i in range(first + 1, values.size):
        if sign > 0:
            if values[i] > y1:
                peak_times[-1], peak_values[-1] = times[i], values[i]
                y1 = values[i]
            elif y1 - values[i] >= min_amp:
                peak_times.append(times[i])
                peak_values.append(values[i])
                y1 = values[i]
                sign = -1
        else:
            if values[i] < y1:
                peak_times[-1], peak_values[-1] = times[i], values[i]
                y1 = values[i]
            elif values[i] - y1 >= min_amp:
                peak_times.append(times[i])
                peak_values.append(values[i])
                y1 = values[i]
                sign = 1

    return np.array(peak_times), np.array(peak_values)

def peak_find_timescales(times: ArrayLike, values: ArrayLike, mag_cuts: ArrayLike) -> np.ndarray:
    """
    Computes the typical waiting time for variability of a given amplitude,
    as a function of amplitude.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    values : array-like
        Measurements at each timestamp, typically magnitudes.
    mag_cuts : array-like
        The variability amplitudes at which to measure the timescale. All
        must be positive.

    Returns
    -------
    ndarray
        For each element of `mag_cuts`, the median time between successive
        extrema found by ``peak_find``, or NaN if no extremum beyond the
        first point was found.
    """

    times = np.asarray(times, dtype=float)
    values = np.asarray(values, dtype=float)
    mag_cuts = np.atleast_1d(np.asarray(mag_cuts, dtype=float))

    _check_inputs(times, values, 'peak_find_timescales')

    bad = np.nonzero(~(mag_cuts > 0))[0]
    if bad.size > 0:
        raise ValueError('Need a positive threshold for magnitude changes in peak_find_timescales() (gave mag_cuts[{}] = {})'.format(bad[0], mag_cuts[bad[0]]))

    timescales = np.empty(mag_cuts.size)
    for k, mag in enumerate(mag_cuts):
        peak_times, _ = peak_find(times, values, mag)
        if peak_times.size > 1:
            timescales[k] = np.median(np.diff(peak_times))
        else:
            timescales[k] = np.nan

    return timescales
