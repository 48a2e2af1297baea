# -*- coding: utf-8 -*-
"""
Created on Wed Mar 13 14:21:57 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from scipy import fft as sfft

from LightcurveMC.exceptions import Undefined, NotEnoughData, UnexpectedNan
from LightcurveMC import timescales


def auto_correlation_sp(data: ArrayLike) -> np.ndarray:
    """
    Computes the unnormalized autocorrelation sum of a regularly sampled series.

    The correlation is computed through an FFT of the series zero-padded to
    twice its length, so that the result is the linear (not circular)
    correlation.

    Parameters
    ----------
    data : array-like
        The series, assumed to be sampled at equal intervals.

    Returns
    -------
    ndarray
        ``sum_i data[i] * data[i+k]`` for each lag ``k = 0 ... n-1``.
    """

    data = np.asarray(data, dtype=float)
    n = data.size

    spectrum = sfft.rfft(data, n=2*n)
    power = spectrum.real**2 + spectrum.imag**2

    return sfft.irfft(power, n=2*n)[:n]

def auto_correlation_stat(data: ArrayLike) -> np.ndarray:
    """
    Computes the autocorrelation function of a regularly sampled series, using the
    statistical convention.

    The series has its mean removed, and the correlation sums are divided by
    the total sum of squared deviations, so that the ACF at zero lag is 1.

    Parameters
    ----------
    data : array-like
        The series, assumed to be sampled at equal intervals.

    Returns
    -------
    ndarray
        The ACF at lags ``0 ... n-1`` in units of the sampling interval.

    Raises
    ------
    NotEnoughData
        If fewer than 2 points are given.
    Undefined
        If the series is constant.
    """

    data = np.asarray(data, dtype=float)
    n = data.size

    if n < 2:
        raise NotEnoughData('Cannot calculate autocorrelation function with fewer than 2 data points (gave {})'.format(n))

    zero_mean = data - np.mean(data)
    n_var = np.sum(zero_mean**2)

    if n_var == 0:
        raise Undefined('Autocorrelation function is undefined for a constant series')

    return auto_correlation_sp(zero_mean) / n_var

def _check_inputs(times, data, delta_t, n_acf, caller):
    if times.size < 2:
        raise NotEnoughData('Cannot calculate autocorrelation function with fewer than 2 data points (gave {})'.format(times.size))
    if times.size != data.size:
        raise ValueError('Data and time arrays passed to {}() must have the same length (gave {} and {})'.format(caller, times.size, data.size))
    if delta_t <= 0:
        raise ValueError('Need a positive time lag to construct an autocorrelation grid (gave {})'.format(delta_t))
    if n_acf <= 0:
        raise ValueError('Must calculate autocorrelation function at a positive number of points (gave {})'.format(n_acf))
    if np.isnan(times).any():
        raise UnexpectedNan('NaN found in times given to {}()'.format(caller))
    if np.isnan(data).any():
        raise UnexpectedNan('NaN found in data given to {}()'.format(caller))

def interp_autocorr(times: ArrayLike, data: ArrayLike, delta_t: float, n_acf: int) -> np.ndarray:
    """
    Computes the autocorrelation function of an irregularly sampled light curve by
    interpolating it to a regular grid.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    data : array-like
        Measurements at each timestamp.
    delta_t : float
        Spacing of the regular grid, and therefore of the ACF lags.
    n_acf : int
        Number of lags at which to return the ACF.

    Returns
    -------
    ndarray
        The ACF at lags ``0, delta_t, ..., (n_acf-1)*delta_t``. Lags longer
        than the time span of the light curve are set to 0.

    Raises
    ------
    NotEnoughData
        If fewer than 2 points or fewer than 2 distinct times are given.
    Undefined
        If the light curve is constant.
    ValueError
        If the arrays have different lengths, or `delta_t` or `n_acf` is
        not positive.
    UnexpectedNan
        If either array contains NaN.
    """

    times = np.asarray(times, dtype=float)
    data = np.asarray(data, dtype=float)

    _check_inputs(times, data, delta_t, n_acf, 'interp_autocorr')

    span = timescales.delta_t(times)
    if span <= 0:
        raise NotEnoughData('Cannot calculate autocorrelation function of a light curve with no time span')
    if np.all(data == data[0]):
        raise Undefined('Autocorrelation function is undefined for a constant series')

    n_new = int(np.ceil(span / delta_t))
    even_times = times[0] + delta_t * np.arange(n_new)
    even_data = np.interp(even_times, times, data)

    acf = auto_correlation_stat(even_data) if n_new > 1 else np.ones(1)

    result = np.zeros(n_acf)
    n_keep = min(n_acf, n_new)
    result[:n_keep] = acf[:n_keep]

    return result

def scargle_autocorr(times: ArrayLike, data: ArrayLike, delta_t: float, n_acf: int) -> np.ndarray:
    """
    Computes the autocorrelation function of an irregularly sampled light curve
    from its Lomb-Scargle periodogram.

    By the Wiener-Khinchin theorem the ACF is the Fourier transform of the
    power spectrum; since the power spectrum of a real series is even, this
    reduces to a cosine transform of the periodogram. The periodogram is
    evaluated from 1/(5T) up to the pseudo-Nyquist frequency in steps of
    1/(5T), where T is the time span.

    Takes the same arguments, and raises the same exceptions, as
    ``interp_autocorr``. Lags longer than the time span are set to 0.
    """

    times = np.asarray(times, dtype=float)
    data = np.asarray(data, dtype=float)

    _check_inputs(times, data, delta_t, n_acf, 'scargle_autocorr')

    span = timescales.delta_t(times)
    if span <= 0:
        raise NotEnoughData('Cannot calculate autocorrelation function of a light curve with no time span')
    if np.all(data == data[0]):
        raise Undefined('Autocorrelation function is undefined for a constant series')

    freq_step = 1.0 / (5.0 * span)
    freq_max = max(timescales.pseudo_nyquist_freq(times), freq_step)
    freqs = timescales.freq_gen(freq_step, freq_max, freq_step)
    power = timescales.lomb_scargle(times, data, freqs)

    total_power = np.sum(power)
    if not total_power > 0:
        raise Undefined('Autocorrelation function is undefined for a light curve with no spectral power')

    lags = delta_t * np.arange(n_acf)
    acf = np.cos(2.0 * np.pi * np.outer(lags, freqs)) @ power / total_power
    acf[lags >= span] = 0.0
    acf[0] = 1.0

    return acf
