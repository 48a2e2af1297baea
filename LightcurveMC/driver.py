# -*- coding: utf-8 -*-
"""
Created on Tue Mar 19 09:41:15 2024

@author: danielgodinez
"""
from warnings import warn

from progress import bar

from LightcurveMC.exceptions import NotEnoughData
from LightcurveMC.binstats import LcBinStats


class TrialError(RuntimeError):
    """
    Raised when a light curve cannot be analyzed because of an unexpected error.

    Parameters
    ----------
    message : str
        Description of the problem.
    bin_name : str
        The bin being simulated.
    trial : int
        Index of the light curve within the bin, starting from 0.
    """

    def __init__(self, message, bin_name, trial):
        super().__init__(message)
        self.bin_name = bin_name
        self.trial = trial

def simulate_bin(bin_stats, trials, verbose=True):
    """
    Analyzes a set of light curves and accumulates their statistics in a bin.

    Parameters
    ----------
    bin_stats : LcBinStats
        The bin in which the statistics are recorded.
    trials : sequence of tuple
        The (times, fluxes, true_params) of each light curve.
    verbose : bool, optional
        If True a progress bar will be displayed. Default is True.

    Returns
    -------
    int
        The number of light curves whose statistics were recorded. Light
        curves with too few usable points are skipped with a warning.

    Raises
    ------
    TrialError
        If any other error occurs while analyzing a light curve. The error
        names the bin and the index of the light curve.
    """

    trials = list(trials)
    n_recorded = 0

    if verbose:
        progess_bar = bar.FillingSquaresBar('Analyzing lightcurves.....', max=len(trials))

    for i, (times, fluxes, true_params) in enumerate(trials):
        try:
            bin_stats.analyze_light_curve(times, fluxes, true_params)
            n_recorded += 1
        except NotEnoughData as e:
            warn('Bin {}, light curve {}: not enough data, skipping ({})'.format(bin_stats.bin_name.strip(), i, e))
        except Exception as e:
            raise TrialError('Failed to analyze light curve {} of bin {}: {}'.format(i, bin_stats.bin_name.strip(), e),
                bin_stats.bin_name, i) from e

        if verbose:
            progess_bar.next()

    if verbose:
        progess_bar.finish()

    return n_recorded

def run_bins(file, bin_specs, to_calc, bins, verbose=True):
    """
    Analyzes the light curves of several bins and writes one table summarizing them.

    Parameters
    ----------
    file : file-like
        The open table to write.
    bin_specs : dict
        Maps each model parameter name to its (min, max) range; used for the
        header.
    to_calc : iterable of StatType
        The statistic families being computed, used for the header.
    bins : iterable of tuple
        The (LcBinStats, trials) of each bin, with `trials` as accepted by
        ``simulate_bin``.
    verbose : bool, optional
        If True progress will be reported. Default is True.

    Returns
    -------
    list of int
        The number of light curves recorded in each bin.
    """

    LcBinStats.print_bin_header(file, bin_specs, to_calc)

    counts = []
    for bin_stats, trials in bins:
        if verbose:
            print('Simulating bin {}...'.format(bin_stats.file_name))
        counts.append(simulate_bin(bin_stats, trials, verbose=verbose))
        bin_stats.print_bin_stats(file)

    if verbose:
        print('Complete! Statistics saved in: {}'.format(getattr(file, 'name', 'output stream')))

    return counts
