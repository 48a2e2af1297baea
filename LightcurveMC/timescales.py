# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 13:48:55 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple
from astropy.timeseries import LombScargle

from LightcurveMC.exceptions import NotSorted


def delta_t(times: ArrayLike) -> float:
    """
    Computes the time span covered by a light curve.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.

    Returns
    -------
    float
        The difference between the last and first timestamps, or 0 if fewer
        than two timestamps are given.

    Raises
    ------
    NotSorted
        If `times` is not in ascending order.
    """

    times = np.asarray(times, dtype=float)

    if times.size < 2:
        return 0.0

    if np.any(np.diff(times) < 0):
        raise NotSorted('Timestamps passed to delta_t() must be sorted in ascending order')

    return times[-1] - times[0]

def dmdt(times: ArrayLike, mags: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Computes the time and magnitude differences of every pair of points in a light curve.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve.
    mags : array-like
        Magnitudes at each timestamp.

    Returns
    -------
    delta_ts : ndarray
        ``t[j] - t[i]`` for every pair ``i < j``, sorted in ascending order.
    delta_ms : ndarray
        ``|m[j] - m[i]|`` for each pair, in the same order as `delta_ts`.

    Raises
    ------
    ValueError
        If `times` and `mags` have different lengths.
    """

    times = np.asarray(times, dtype=float)
    mags = np.asarray(mags, dtype=float)

    if times.size != mags.size:
        raise ValueError('Times and magnitudes passed to dmdt() have different lengths ({} != {})'.format(times.size, mags.size))

    i, j = np.triu_indices(times.size, k=1)
    delta_ts = times[j] - times[i]
    delta_ms = np.abs(mags[j] - mags[i])

    order = np.argsort(delta_ts, kind='stable')

    return delta_ts[order], delta_ms[order]

def pseudo_nyquist_freq(times: ArrayLike) -> float:
    """
    Estimates the Nyquist frequency of an irregularly sampled light curve.

    For a light curve of N points over a span T this is N/(2T), i.e. the
    Nyquist frequency of a regular grid with the same mean sampling rate.
    """

    times = np.asarray(times, dtype=float)
    span = delta_t(times)

    if span <= 0:
        raise ValueError('Cannot compute the Nyquist frequency of a light curve with no time span')

    return 0.5 * times.size / span

def freq_gen(freq_min: float, freq_max: float, freq_step: float) -> np.ndarray:
    """
    Generates an evenly spaced frequency grid.

    Parameters
    ----------
    freq_min : float
        The lowest frequency in the grid. Must be positive.
    freq_max : float
        Upper limit of the grid. The grid does not go past this frequency.
    freq_step : float
        Spacing between grid frequencies. Must be positive.

    Returns
    -------
    ndarray
        Frequencies ``freq_min, freq_min + freq_step, ...`` up to `freq_max`.

    Raises
    ------
    ValueError
        If any argument is non-positive or `freq_max` < `freq_min`.
    """

    if freq_min <= 0 or freq_step <= 0:
        raise ValueError('Invalid frequency grid: freq_min = {}, freq_step = {}; both must be positive'.format(freq_min, freq_step))
    if freq_max < freq_min:
        raise ValueError('Invalid frequency grid: freq_max = {} is below freq_min = {}'.format(freq_max, freq_min))

    n_freq = int(np.floor((freq_max - freq_min) / freq_step)) + 1

    return freq_min + freq_step * np.arange(n_freq)

def lomb_scargle(times: ArrayLike, values: ArrayLike, freqs: ArrayLike) -> np.ndarray:
    """
    Computes the Lomb-Scargle periodogram of a light curve at the given frequencies.

    The power uses the standard normalization, so that it lies between 0 and 1.
    """

    times = np.asarray(times, dtype=float)
    values = np.asarray(values, dtype=float)

    if times.size != values.size:
        raise ValueError('Times and values passed to lomb_scargle() have different lengths ({} != {})'.format(times.size, values.size))

    return LombScargle(times, values, normalization='standard').power(np.asarray(freqs, dtype=float))

def ls_threshold(times: ArrayLike, freqs: ArrayLike, fap: float, n_sims: int, random_state=None) -> float:
    """
    Finds the periodogram power corresponding to a false alarm probability.

    The threshold is calibrated by computing the periodogram of many
    realizations of Gaussian white noise sampled at the same timestamps, and
    taking the quantile of the highest peak in each that is exceeded by a
    fraction `fap` of the realizations.

    Parameters
    ----------
    times : array-like
        The timestamps of the light curve.
    freqs : array-like
        The frequencies at which the periodogram will be evaluated.
    fap : float
        The false alarm probability, between 0 and 1 exclusive.
    n_sims : int
        Number of white noise light curves to simulate.
    random_state : int, optional
        Seed for the random number generator.

    Returns
    -------
    float
        The power above which a periodogram peak has a probability of
        at most `fap` of being due to noise.
    """

    if not 0 < fap < 1:
        raise ValueError('False alarm probability must lie between 0 and 1, got {}'.format(fap))
    if n_sims < 1:
        raise ValueError('Need at least one simulation to compute a periodogram threshold, got {}'.format(n_sims))

    times = np.asarray(times, dtype=float)
    rng = np.random.default_rng(random_state)

    max_powers = np.empty(n_sims)
    for i in range(n_sims):
        noise = rng.standard_normal(times.size)
        max_powers[i] = np.max(lomb_scargle(times, noise, freqs))

    return float(np.quantile(max_powers, 1.0 - fap))
