# -*- coding: utf-8 -*-
"""
Created on Mon Mar 18 15:30:27 2024

@author: danielgodinez
"""
import io
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike

from LightcurveMC.fluxmag import flux_to_mag
from LightcurveMC.nanstats import remove_nans
from LightcurveMC.statcollect import CollectedScalars, CollectedPairs, atomic_update
from LightcurveMC.periodogram import FapThresholdCache
from LightcurveMC.acf import interp_autocorr, scargle_autocorr
from LightcurveMC import statfamilies


class StatType(Enum):
    """The families of statistics that can be computed for each light curve."""

    C1 = 'C1'
    PERIOD = 'period'
    PERIODOGRAM = 'periplot'
    DMDT_CUT = 'dmdtcut'
    DMDT_PLOT = 'dmdtplot'
    IACF_CUT = 'iacfcut'
    IACF_PLOT = 'iacfplot'
    SACF_CUT = 'sacfcut'
    SACF_PLOT = 'sacfplot'
    PEAK_CUT = 'peakcut'
    PEAK_PLOT = 'peakplot'
    GP_TAU = 'gptau'

# Collections owned by each family, in output order: (kind, label, file stem)
_LAYOUT = {
    StatType.C1: [(CollectedScalars, 'Grankin C1', 'run_c1_')],
    StatType.PERIOD: [(CollectedScalars, 'Period', 'run_period_')],
    StatType.PERIODOGRAM: [(CollectedPairs, 'Periodograms', 'run_peri_')],
    StatType.DMDT_CUT: [(CollectedScalars, '50% cut at 1/3', 'run_cut50_3_'),
                        (CollectedScalars, '50% cut at 1/2', 'run_cut50_2_'),
                        (CollectedScalars, '90% cut at 1/3', 'run_cut90_3_'),
                        (CollectedScalars, '90% cut at 1/2', 'run_cut90_2_')],
    StatType.DMDT_PLOT: [(CollectedPairs, 'DMDT Medians', 'run_dmdtmed_')],
    StatType.IACF_CUT: [(CollectedScalars, 'IACF cut at 1/9', 'run_iacf9_'),
                        (CollectedScalars, 'IACF cut at 1/4', 'run_iacf4_'),
                        (CollectedScalars, 'IACF cut at 1/2', 'run_iacf2_')],
    StatType.IACF_PLOT: [(CollectedPairs, 'IACFs', 'run_iacf_')],
    StatType.SACF_CUT: [(CollectedScalars, 'SACF cut at 1/9', 'run_sacf9_'),
                        (CollectedScalars, 'SACF cut at 1/4', 'run_sacf4_'),
                        (CollectedScalars, 'SACF cut at 1/2', 'run_sacf2_')],
    StatType.SACF_PLOT: [(CollectedPairs, 'SACFs', 'run_sacf_')],
    StatType.PEAK_CUT: [(CollectedScalars, 'Peak cut at 1/3', 'run_peak3_'),
                        (CollectedScalars, 'Peak cut at 1/2', 'run_peak2_'),
                        (CollectedScalars, 'Peak cut at 80%', 'run_peak80_')],
    StatType.PEAK_PLOT: [(CollectedPairs, 'Peak Plots', 'run_peak_')],
    StatType.GP_TAU: [(CollectedScalars, 'GP timescale', 'run_gptau_'),
                      (CollectedScalars, 'GP timescale error', 'run_gperr_'),
                      (CollectedScalars, 'GP normalized deviation', 'run_gpdev_')],
}

def stat_types():
    """Returns the names of all statistic families, sorted alphabetically."""

    return sorted(stat.value for stat in StatType)

def parse_stat(name: str) -> StatType:
    """
    Converts a user-facing statistic name to the corresponding StatType.

    Raises
    ------
    ValueError
        If `name` is not one of the names returned by ``stat_types()``.
    """

    try:
        return StatType(name)
    except ValueError:
        raise ValueError('No such statistic: {}'.format(name)) from None

def _ordered(to_calc):
    return [stat for stat in StatType if stat in to_calc]

class LcBinStats:
    """
    Accumulates the statistics of many light curves that share a model, a
    parameter bin and a noise level.

    Parameters
    ----------
    model_name : str
        Name of the light curve model.
    bin_specs : dict
        Maps each model parameter name to its (min, max) range, in the order
        the parameters should appear in the output.
    noise : str
        Description of the noise added to the light curves.
    to_calc : iterable of StatType
        The statistic families to compute.
    out_dir : str, optional
        Directory in which the distribution files are written. Default is
        the working directory.
    fap_cache : FapThresholdCache, optional
        Significance threshold cache for the periodogram. If None, a new
        cache is created for this bin.
    fap_sims : int, optional
        Number of noise simulations used to set the periodogram threshold,
        if a new cache is created. Default is 1000.
    random_state : int, optional
        Seed for the periodogram threshold simulations, if a new cache is
        created. Default is None.
    """

    def __init__(self, model_name: str, bin_specs: dict, noise: str, to_calc, out_dir='.',
        fap_cache=None, fap_sims=statfamilies.FAP_SIMS, random_state=None):

        self.bin_name = LcBinStats.make_bin_name(model_name, bin_specs, noise)
        self.file_name = LcBinStats.make_file_name(model_name, bin_specs, noise)
        self.to_calc = frozenset(to_calc)
        self.out_dir = out_dir

        if fap_cache is None:
            fap_cache = FapThresholdCache(fap=statfamilies.FAP, n_sims=fap_sims, random_state=random_state)
        self.fap_cache = fap_cache

        self._collections = {}
        for stat, layout in _LAYOUT.items():
            self._collections[stat] = [kind(label, stem + self.file_name + '.dat') for kind, label, stem in layout]

    def collections(self, stat: StatType):
        """Returns the collections belonging to a statistic family, in output order."""

        return list(self._collections[stat])

    def _all_collections(self):
        return [collection for stat in StatType for collection in self._collections[stat]]

    def analyze_light_curve(self, times: ArrayLike, fluxes: ArrayLike, true_params=None):
        """
        Computes all requested statistics for one light curve and records them.

        Parameters
        ----------
        times : array-like
            Timestamps, sorted in ascending order.
        fluxes : array-like
            Fluxes at each timestamp. Non-positive or NaN fluxes are dropped.
        true_params : dict, optional
            The parameters used to generate the light curve. The timescale
            under key 'p' is used to check the Gaussian process fit.

        Raises
        ------
        NotEnoughData
            If the light curve has too few usable points. No statistic is
            recorded for it.
        ValueError
            If `times` and `fluxes` have different lengths.
        """

        times = np.asarray(times, dtype=float)
        fluxes = np.asarray(fluxes, dtype=float)

        if times.size != fluxes.size:
            raise ValueError('Times and fluxes must have the same length in analyze_light_curve() (gave {} for times and {} for fluxes).'.format(times.size, fluxes.size))

        true_params = {} if true_params is None else true_params

        mags, times = remove_nans(flux_to_mag(fluxes), times)

        calc = self.to_calc
        fams = self._collections

        with atomic_update(*self._all_collections()):
            statfamilies.do_c1(mags, StatType.C1 in calc, *fams[StatType.C1])

            statfamilies.do_periodogram(times, mags, StatType.PERIOD in calc, StatType.PERIODOGRAM in calc,
                *fams[StatType.PERIOD], *fams[StatType.PERIODOGRAM], self.fap_cache)

            statfamilies.do_dmdt(times, mags, StatType.DMDT_CUT in calc, StatType.DMDT_PLOT in calc,
                *fams[StatType.DMDT_CUT], *fams[StatType.DMDT_PLOT])

            statfamilies.do_acf(times, mags, interp_autocorr, StatType.IACF_CUT in calc, StatType.IACF_PLOT in calc,
                *fams[StatType.IACF_CUT], *fams[StatType.IACF_PLOT])

            statfamilies.do_acf(times, mags, scargle_autocorr, StatType.SACF_CUT in calc, StatType.SACF_PLOT in calc,
                *fams[StatType.SACF_CUT], *fams[StatType.SACF_PLOT])

            statfamilies.do_peak_max(times, mags, StatType.PEAK_CUT in calc, StatType.PEAK_PLOT in calc,
                *fams[StatType.PEAK_CUT], *fams[StatType.PEAK_PLOT])

            statfamilies.do_gauss_fit(times, mags, StatType.GP_TAU in calc, true_params.get('p', np.nan),
                *fams[StatType.GP_TAU])

    def clear(self):
        """Discards all recorded statistics, so the bin can be reused."""

        for collection in self._all_collections():
            collection.clear()

    def output(self) -> str:
        """
        Summarizes the recorded statistics as one row of the output table.

        The distribution of each statistic is also written to its own file in
        `out_dir`.

        Returns
        -------
        str
            The bin name followed by the summary fields of each requested
            statistic, tab-separated and terminated by a newline.
        """

        row = io.StringIO()
        row.write(self.bin_name)
        for stat in _ordered(self.to_calc):
            for collection in self._collections[stat]:
                collection.print_stats(row, self.out_dir)
        row.write('\n')

        return row.getvalue()

    def print_bin_stats(self, file):
        """Writes the row returned by ``output()`` to an open file."""

        file.write(self.output())

    @staticmethod
    def make_bin_name(lc_name: str, bin_specs: dict, noise: str) -> str:
        """Human-readable, tab-separated identifier of a bin."""

        bin_id = '{:<14s}'.format(lc_name)
        for param_min, _ in bin_specs.values():
            bin_id += '\t{:0.3g}'.format(param_min)
        bin_id += '\t' + noise

        return bin_id

    @staticmethod
    def make_file_name(lc_name: str, bin_specs: dict, noise: str) -> str:
        """Identifier of a bin that can be used as part of a file name."""

        bin_id = lc_name
        for param, (param_min, _) in bin_specs.items():
            bin_id += '_{}{:+0.1f}'.format(param[0], param_min)
        bin_id += '_n' + noise

        return bin_id

    @staticmethod
    def make_bin_header(bin_specs: dict, to_calc) -> str:
        """
        Column labels matching the rows produced by ``output()``.

        Parameters
        ----------
        bin_specs : dict
            The parameter ranges of the bins, as passed to the constructor.
        to_calc : iterable of StatType
            The statistic families being computed.

        Returns
        -------
        str
            The tab-separated header, terminated by a newline.
        """

        header = io.StringIO()
        header.write('LCType')
        for param in bin_specs:
            header.write('\t{:<7s}'.format(param))
        header.write('\tNoise')

        for stat in _ordered(frozenset(to_calc)):
            for kind, label, _ in _LAYOUT[stat]:
                kind.print_header(header, label)
        header.write('\n')

        return header.getvalue()

    @staticmethod
    def print_bin_header(file, bin_specs: dict, to_calc):
        """Writes the header returned by ``make_bin_header()`` to an open file."""

        file.write(LcBinStats.make_bin_header(bin_specs, to_calc))
