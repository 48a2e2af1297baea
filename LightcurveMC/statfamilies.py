# -*- coding: utf-8 -*-
"""
Created on Mon Mar 18 10:14:51 2024

@author: danielgodinez

Functions that compute one family of related statistics for a light curve and
record the results in the appropriate collections.

Every function follows the same conventions: a statistic that is undefined
for a particular light curve is recorded as a null in each scalar collection
of the family (function-valued collections are left alone), while
NotEnoughData is re-raised so that the whole light curve can be discarded.
The collections of a family are always updated together or not at all.
"""
import numpy as np

from LightcurveMC.exceptions import Undefined, NotEnoughData, LowerBound, UpperBound, NotSorted
from LightcurveMC.statcollect import atomic_update
from LightcurveMC.cut import MoreThan, LessThan, NotNan, cut_function, cut_function_reverse
from LightcurveMC.magdist import get_c1, get_amplitude
from LightcurveMC.peakfind import peak_find_timescales
from LightcurveMC.dmdt import dmdt_bin_edges, delta_m_bin_quantile
from LightcurveMC.periodogram import frequency_range, frequency_grid, best_period
from LightcurveMC.gpfit import fit_gauss_gp
from LightcurveMC import timescales


# Regular grid at which ACF lags are generated
OFFSET_STEP = 0.1
# Minimum ratio between two consecutive lags stored in an ACF plot
STORE_FACTOR = 1.05
# log10 of the first Δm-Δt bin edge, and the bin width in dex
DMDT_MIN_BIN = -1.97
DMDT_BIN_STEP = 0.15
# Spacing of the amplitude thresholds in a peak-finding plot
PEAK_MIN_MAG = 0.01
# Periodogram search limits
MIN_FREQ = 0.005
FAP = 0.01
FAP_SIMS = 1000
# GP timescales at or above this are treated as failed fits
MAX_GP_TAU = 1e5

def _check_lengths(times, data, caller):
    if len(times) != len(data):
        raise ValueError('Times and data must have the same length in {}() (gave {} for times and {} for data).'.format(caller, len(times), len(data)))

def _add_nulls(*collections):
    with atomic_update(*collections):
        for collection in collections:
            collection.add_null()

def do_c1(mags, get_stat, c1s):
    """
    Computes the C1 index of a light curve.

    Parameters
    ----------
    mags : array-like
        The magnitudes of the light curve.
    get_stat : bool
        Whether to compute the statistic at all.
    c1s : CollectedScalars
        Where to record the result.
    """

    if not get_stat:
        return

    try:
        c1s.add_stat(get_c1(mags))
    except NotEnoughData:
        raise
    except Undefined:
        c1s.add_null()

def do_periodogram(times, data, get_period, get_plot, periods, periodograms, fap_cache):
    """
    Computes the periodogram of a light curve and its most significant period.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve, sorted in ascending order.
    data : array-like
        Measurements at each timestamp.
    get_period : bool
        Whether to record the best period.
    get_plot : bool
        Whether to record the full periodogram.
    periods : CollectedScalars
        Where to record the period. A null is recorded if the highest peak
        is not significant.
    periodograms : CollectedPairs
        Where to record the (frequency, power) curve.
    fap_cache : FapThresholdCache
        Provides the significance threshold for the frequency grid.

    Raises
    ------
    NotEnoughData
        If the light curve cannot support a valid frequency grid.
    """

    _check_lengths(times, data, 'do_periodogram')

    if not (get_period or get_plot):
        return

    try:
        freq_min, freq_max = frequency_range(times, min_freq=MIN_FREQ)
        freqs = frequency_grid(times, freq_min, freq_max)
    except NotSorted:
        raise
    except ValueError as e:
        raise NotEnoughData(str(e)) from e

    power = timescales.lomb_scargle(times, data, freqs)

    with atomic_update(periods, periodograms):
        if get_period:
            threshold = fap_cache.threshold(times, freqs, freq_min, freq_max)
            try:
                periods.add_stat(best_period(freqs, power, threshold))
            except Undefined:
                periods.add_null()

        if get_plot:
            periodograms.add_stat(freqs, power)

def do_dmdt(times, mags, get_cut, get_plot, cut50_amp3, cut50_amp2, cut90_amp3, cut90_amp2, dmdt_medians):
    """
    Computes the Δm-Δt timescales of a light curve.

    The cuts are the first time lags at which the 50th and 90th percentiles of
    the magnitude differences exceed 1/3 and 1/2 of the light curve amplitude.
    The plot is the 50th percentile as a function of time lag.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve, sorted in ascending order.
    mags : array-like
        Magnitudes at each timestamp, with no NaNs.
    get_cut, get_plot : bool
        Whether to record the cuts and the plot.
    cut50_amp3, cut50_amp2, cut90_amp3, cut90_amp2 : CollectedScalars
        Where to record each cut.
    dmdt_medians : CollectedPairs
        Where to record the (bin edge, median) curve.
    """

    _check_lengths(times, mags, 'do_dmdt')

    if not (get_cut or get_plot):
        return

    cuts = (cut50_amp3, cut50_amp2, cut90_amp3, cut90_amp2)

    try:
        with atomic_update(*cuts, dmdt_medians):
            amplitude = get_amplitude(mags)
            if not amplitude > 0:
                raise Undefined('Δm-Δt timescales are undefined for a light curve with zero amplitude')

            bin_edges = dmdt_bin_edges(timescales.delta_t(times), min_bin=DMDT_MIN_BIN, bin_step=DMDT_BIN_STEP)
            bin_starts = bin_edges[:-1]
            delta_ts, delta_ms = timescales.dmdt(times, mags)

            change50 = delta_m_bin_quantile(delta_ts, delta_ms, bin_edges, 0.50)

            if get_plot:
                dmdt_medians.add_stat(bin_starts, change50)

            if get_cut:
                change90 = delta_m_bin_quantile(delta_ts, delta_ms, bin_edges, 0.90)

                cut50_amp3.add_stat(cut_function(bin_starts, change50, MoreThan(amplitude / 3.0)))
                cut50_amp2.add_stat(cut_function(bin_starts, change50, MoreThan(amplitude / 2.0)))
                cut90_amp3.add_stat(cut_function(bin_starts, change90, MoreThan(amplitude / 3.0)))
                cut90_amp2.add_stat(cut_function(bin_starts, change90, MoreThan(amplitude / 2.0)))
    except NotEnoughData:
        raise
    except Undefined:
        if get_cut:
            _add_nulls(*cuts)

def log_subsample(offsets, values, store_factor=STORE_FACTOR):
    """
    Thins a function sampled on a regular grid so that its samples are roughly
    logarithmically spaced.

    The first sample is always kept; each later sample is kept only if its
    offset is at least `store_factor` times the last kept offset.

    Returns
    -------
    tuple of ndarray
        The kept offsets and their values.
    """

    offsets = np.asarray(offsets, dtype=float)
    values = np.asarray(values, dtype=float)

    keep = [0]
    last_offset = offsets[0]
    for i in range(1, offsets.size):
        if offsets[i] >= store_factor * last_offset:
            keep.append(i)
            last_offset = offsets[i]

    return offsets[keep], values[keep]

def do_acf(times, data, acf_func, get_cut, get_plot, cut9, cut4, cut2, acf_plot):
    """
    Computes the autocorrelation timescales of a light curve.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve, sorted in ascending order.
    data : array-like
        Measurements at each timestamp, with no NaNs.
    acf_func : callable
        The ACF estimator, with the signature of ``acf.interp_autocorr``.
    get_cut, get_plot : bool
        Whether to record the cuts and the plot.
    cut9, cut4, cut2 : CollectedScalars
        Where to record the lags at which the ACF first drops below 1/9, 1/4
        and 1/2, respectively.
    acf_plot : CollectedPairs
        Where to record the log-subsampled (lag, ACF) curve.
    """

    _check_lengths(times, data, 'do_acf')

    if not (get_cut or get_plot):
        return

    try:
        with atomic_update(cut9, cut4, cut2, acf_plot):
            max_offset = timescales.delta_t(times)
            offsets = np.arange(0.0, max_offset, OFFSET_STEP)
            if offsets.size == 0:
                raise NotEnoughData('Cannot calculate autocorrelation function of a light curve with no time span')

            acf = acf_func(times, data, OFFSET_STEP, offsets.size)

            if get_plot:
                acf_plot.add_stat(*log_subsample(offsets, acf))

            if get_cut:
                cut9.add_stat(cut_function(offsets, acf, LessThan(1.0/9.0)))
                cut4.add_stat(cut_function(offsets, acf, LessThan(0.25)))
                cut2.add_stat(cut_function(offsets, acf, LessThan(0.5)))
    except NotEnoughData:
        raise
    except Undefined:
        if get_cut:
            _add_nulls(cut9, cut4, cut2)

def do_peak_max(times, mags, get_cut, get_plot, cut3, cut2, cut80, peak_plot):
    """
    Computes the peak-finding timescales of a light curve.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve, sorted in ascending order.
    mags : array-like
        Magnitudes at each timestamp, with no NaNs.
    get_cut, get_plot : bool
        Whether to record the cuts and the plot.
    cut3, cut2 : CollectedScalars
        Where to record the typical waiting time for changes of 1/3 and 1/2
        the light curve amplitude.
    cut80 : CollectedScalars
        Where to record the waiting time for changes of 80% of the largest
        amplitude with a defined waiting time.
    peak_plot : CollectedPairs
        Where to record the (waiting time, amplitude) curve.
    """

    _check_lengths(times, mags, 'do_peak_max')

    if not (get_cut or get_plot):
        return

    try:
        with atomic_update(cut3, cut2, cut80, peak_plot):
            amplitude = get_amplitude(mags)
            if not amplitude > 0:
                raise Undefined('Peak-finding timescales are undefined for a light curve with zero amplitude')

            mag_cuts = PEAK_MIN_MAG * np.arange(1, int(np.ceil(amplitude / PEAK_MIN_MAG)) + 1)
            mag_cuts = mag_cuts[mag_cuts < amplitude]
            cut_times = peak_find_timescales(times, mags, mag_cuts)

            if get_plot:
                peak_plot.add_stat(cut_times, mag_cuts)

            if get_cut:
                key_times = peak_find_timescales(times, mags, [amplitude / 3.0, amplitude / 2.0])
                cut3.add_stat(key_times[0])
                cut2.add_stat(key_times[1])

                mag08 = 0.8 * cut_function_reverse(mag_cuts, cut_times, NotNan())
                if np.isnan(mag08):
                    cut80.add_null()
                else:
                    cut80.add_stat(peak_find_timescales(times, mags, [mag08])[0])
    except NotEnoughData:
        raise
    except Undefined:
        if get_cut:
            _add_nulls(cut3, cut2, cut80)

def do_gauss_fit(times, data, get_gp, true_time, timescale_fits, timescale_errors, norm_devs):
    """
    Fits a Gaussian process to a light curve and compares its timescale to the true one.

    Parameters
    ----------
    times : array-like
        Timestamps of the light curve, sorted in ascending order.
    data : array-like
        Measurements at each timestamp, with no NaNs.
    get_gp : bool
        Whether to do the fit.
    true_time : float
        The timescale used to generate the light curve, or NaN if unknown.
    timescale_fits, timescale_errors : CollectedScalars
        Where to record the fitted timescale and its uncertainty.
    norm_devs : CollectedScalars
        Where to record the difference between the fitted and true
        timescales, in units of the uncertainty.
    """

    _check_lengths(times, data, 'do_gauss_fit')

    if not get_gp:
        return

    collections = (timescale_fits, timescale_errors, norm_devs)

    try:
        with atomic_update(*collections):
            tau, tau_error = fit_gauss_gp(times, data)
            if not tau > 0.0:
                raise LowerBound('Gaussian process fit gave a non-positive timescale of {}'.format(tau), 0.0)
            if not tau < MAX_GP_TAU:
                raise UpperBound('Gaussian process fit gave an implausible timescale of {}'.format(tau), MAX_GP_TAU)

            timescale_fits.add_stat(tau)
            timescale_errors.add_stat(tau_error)
            if np.isnan(true_time):
                norm_devs.add_null()
            else:
                norm_devs.add_stat((tau - true_time) / tau_error)
    except NotEnoughData:
        raise
    except Undefined:
        _add_nulls(*collections)
