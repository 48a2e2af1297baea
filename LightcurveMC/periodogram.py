# -*- coding: utf-8 -*-
"""
Created on Thu Mar 14 10:03:11 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple

from LightcurveMC.exceptions import Undefined
from LightcurveMC import timescales


class FapThresholdCache:
    """
    Stores the periodogram significance threshold for the most recently used
    frequency range.

    Computing the threshold requires simulating many noise periodograms, so it
    is only recomputed when the range of frequencies changes. Light curves
    generated from the same cadence therefore share a single calculation.

    Parameters
    ----------
    fap : float, optional
        The false alarm probability for a significant peak. Default is 0.01.
    n_sims : int, optional
        Number of white noise light curves used to calibrate the threshold.
        Default is 1000.
    random_state : int, optional
        Seed for the noise simulations. Default is None.

    Attributes
    ----------
    key : tuple or None
        The (freq_min, freq_max) range of the cached threshold, or None if
        nothing is cached.
    n_computed : int
        Number of times the threshold has been calculated, which is useful
        for checking that the cache is doing its job.
    """

    def __init__(self, fap=0.01, n_sims=1000, random_state=None):
        self.fap = fap
        self.n_sims = n_sims
        self.random_state = random_state
        self.key = None
        self.n_computed = 0
        self._threshold = None

    def threshold(self, times: ArrayLike, freqs: ArrayLike, freq_min: float, freq_max: float) -> float:
        """
        Returns the power threshold for the given frequency range, computing it
        only if the range differs from the cached one.
        """

        key = (freq_min, freq_max)
        if self.key != key:
            self._threshold = timescales.ls_threshold(times, freqs, self.fap, self.n_sims, random_state=self.random_state)
            self.key = key
            self.n_computed += 1

        return self._threshold

    def invalidate(self):
        """Discards the cached threshold."""

        self.key = None
        self._threshold = None

def frequency_range(times: ArrayLike, min_freq: float = 0.005) -> Tuple[float, float]:
    """
    Chooses the frequency range over which to search a light curve for periods.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    min_freq : float, optional
        Lowest frequency ever searched, regardless of the time span.
        Default is 0.005.

    Returns
    -------
    freq_min : float
        The larger of 1/span and `min_freq`.
    freq_max : float
        The pseudo-Nyquist frequency of the light curve.

    Raises
    ------
    ValueError
        If the light curve has no time span.
    """

    span = timescales.delta_t(times)
    if span <= 0:
        raise ValueError('Cannot search for periods in a light curve with a time span of {}'.format(span))

    freq_min = max(1.0 / span, min_freq)
    freq_max = timescales.pseudo_nyquist_freq(times)

    return freq_min, freq_max

def frequency_grid(times: ArrayLike, freq_min: float, freq_max: float) -> np.ndarray:
    """Frequency grid from `freq_min` to `freq_max`, oversampled by a factor of 5 relative to 1/span."""

    span = timescales.delta_t(times)
    if span <= 0:
        raise ValueError('Cannot search for periods in a light curve with a time span of {}'.format(span))

    return timescales.freq_gen(freq_min, freq_max, 1.0 / (5.0 * span))

def periodogram(times: ArrayLike, values: ArrayLike, min_freq: float = 0.005) -> Tuple[np.ndarray, np.ndarray]:
    """
    Computes the Lomb-Scargle periodogram of a light curve over its natural frequency range.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    values : array-like
        Measurements at each timestamp.
    min_freq : float, optional
        Lowest frequency ever searched. Default is 0.005.

    Returns
    -------
    freqs : ndarray
        The frequency grid, from ``max(1/span, min_freq)`` to the
        pseudo-Nyquist frequency.
    power : ndarray
        The periodogram power at each frequency.

    Raises
    ------
    ValueError
        If the light curve has no time span or the frequency range is empty.
    """

    freq_min, freq_max = frequency_range(times, min_freq=min_freq)
    freqs = frequency_grid(times, freq_min, freq_max)

    return freqs, timescales.lomb_scargle(times, values, freqs)

def best_period(freqs: ArrayLike, power: ArrayLike, threshold: float) -> float:
    """
    Finds the period of the highest peak of a periodogram, if it is significant.

    Parameters
    ----------
    freqs : array-like
        The frequency grid.
    power : array-like
        The periodogram power at each frequency.
    threshold : float
        The power a peak must exceed to be significant.

    Returns
    -------
    float
        The period of the highest peak. If several frequencies share the
        highest power, the lowest such frequency is used.

    Raises
    ------
    ValueError
        If the periodogram is empty or the arrays differ in length.
    Undefined
        If the highest peak does not exceed `threshold`.
    """

    freqs = np.asarray(freqs, dtype=float)
    power = np.asarray(power, dtype=float)

    if freqs.size != power.size:
        raise ValueError('Frequency and power arrays passed to best_period() have different lengths ({} != {})'.format(freqs.size, power.size))
    if power.size == 0:
        raise ValueError('No power spectrum passed to best_period()')

    i_max = int(np.argmax(power))

    if not power[i_max] > threshold:
        raise Undefined('No significant period found: highest peak has power {:0.3g}, threshold is {:0.3g}'.format(power[i_max], threshold))

    return 1.0 / freqs[i_max]
