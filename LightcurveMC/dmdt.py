# -*- coding: utf-8 -*-
"""
Created on Wed Mar 13 11:40:02 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike

from LightcurveMC.exceptions import NotEnoughData
from LightcurveMC.nanstats import quantile


def dmdt_bin_edges(span: float, min_bin: float = -1.97, bin_step: float = 0.15) -> np.ndarray:
    """
    Generates logarithmically spaced time-lag bins for a Δm-Δt plot.

    Parameters
    ----------
    span : float
        The time span of the light curve. The last bin ends here.
    min_bin : float, optional
        log10 of the lower edge of the first bin. Default is -1.97.
    bin_step : float, optional
        Width of each bin in dex. Default is 0.15.

    Returns
    -------
    ndarray
        The bin edges ``10**min_bin, 10**(min_bin+bin_step), ...`` below
        `span`, followed by `span` itself.

    Raises
    ------
    NotEnoughData
        If `span` is not positive.
    """

    if not span > 0:
        raise NotEnoughData('Cannot bin a Δm-Δt plot for a light curve with a time span of {}'.format(span))

    log_span = np.log10(span)

    edges = []
    k = 0
    while min_bin + k * bin_step < log_span:
        edges.append(10.0**(min_bin + k * bin_step))
        k += 1
    edges.append(span)

    return np.array(edges)

def _bin_ranges(delta_ts, bin_edges):
    starts = np.searchsorted(delta_ts, bin_edges[:-1], side='left')
    ends = np.searchsorted(delta_ts, bin_edges[1:], side='left')
    return zip(starts, ends)

def _check_inputs(delta_ts, delta_ms, bin_edges, caller):
    if delta_ts.size != delta_ms.size:
        raise ValueError('Δt and Δm arrays passed to {}() must have the same length ({} != {})'.format(caller, delta_ts.size, delta_ms.size))
    if bin_edges.size < 2:
        raise ValueError('Need at least two bin edges in {}() (gave {})'.format(caller, bin_edges.size))

def delta_m_bin_quantile(delta_ts: ArrayLike, delta_ms: ArrayLike, bin_edges: ArrayLike, q: float) -> np.ndarray:
    """
    Computes a quantile of the magnitude differences in each time-lag bin.

    Parameters
    ----------
    delta_ts : array-like
        Time differences of each pair of points, sorted in ascending order.
    delta_ms : array-like
        Magnitude differences of each pair, in the same order as `delta_ts`.
    bin_edges : array-like
        The N+1 edges of the N bins, in ascending order. Each bin includes
        its lower edge but not its upper edge.
    q : float
        The quantile to compute, between 0 and 1 inclusive.

    Returns
    -------
    ndarray
        The `q` quantile of the `delta_ms` values falling into each bin,
        or NaN for bins with no pairs.
    """

    delta_ts = np.asarray(delta_ts, dtype=float)
    delta_ms = np.asarray(delta_ms, dtype=float)
    bin_edges = np.asarray(bin_edges, dtype=float)

    _check_inputs(delta_ts, delta_ms, bin_edges, 'delta_m_bin_quantile')

    quants = []
    for start, end in _bin_ranges(delta_ts, bin_edges):
        if end > start:
            quants.append(quantile(delta_ms[start:end], q))
        else:
            quants.append(np.nan)

    return np.array(quants)

def hi_amp_bin_frac(delta_ts: ArrayLike, delta_ms: ArrayLike, bin_edges: ArrayLike, threshold: float) -> np.ndarray:
    """
    Computes the fraction of pairs in each time-lag bin whose magnitude
    difference exceeds a threshold.

    Takes the same inputs as ``delta_m_bin_quantile``; empty bins give NaN.
    """

    delta_ts = np.asarray(delta_ts, dtype=float)
    delta_ms = np.asarray(delta_ms, dtype=float)
    bin_edges = np.asarray(bin_edges, dtype=float)

    _check_inputs(delta_ts, delta_ms, bin_edges, 'hi_amp_bin_frac')

    fracs = []
    for start, end in _bin_ranges(delta_ts, bin_edges):
        if end > start:
            fracs.append(np.count_nonzero(delta_ms[start:end] > threshold) / (end - start))
        else:
            fracs.append(np.nan)

    return np.array(fracs)
