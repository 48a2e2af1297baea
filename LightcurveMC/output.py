# -*- coding: utf-8 -*-
"""
Created on Fri Mar 15 09:26:44 2024

@author: danielgodinez
"""
import os
from warnings import warn

import numpy as np
import matplotlib.pyplot as plt
from pandas import read_csv
from numpy.typing import ArrayLike

from LightcurveMC.nanstats import mean_no_nan, variance_no_nan


def good_fraction(values: ArrayLike) -> float:
    """Fraction of values that are neither NaN nor infinite, or 0 for an empty array."""

    values = np.asarray(values, dtype=float)
    if values.size == 0:
        return 0.0

    return np.count_nonzero(np.isfinite(values)) / values.size

def get_summary_stats(values: ArrayLike, stat_name: str):
    """
    Summarizes the distribution of a statistic over many light curves.

    Parameters
    ----------
    values : array-like
        The statistic measured for each light curve, with NaN marking the
        light curves for which it was undefined.
    stat_name : str
        Name of the statistic, used in warnings.

    Returns
    -------
    mean : float
        Mean of the non-NaN values, or NaN if there are none.
    stddev : float
        Standard deviation of the non-NaN values, or NaN if there are fewer
        than two.
    good_frac : float
        Fraction of values that are finite.
    """

    values = np.asarray(values, dtype=float)
    n_defined = np.count_nonzero(~np.isnan(values))

    if n_defined < 1:
        warn('{} summary: no defined values, mean and standard deviation are undefined'.format(stat_name))
    elif n_defined < 2:
        warn('{} summary: only one defined value, standard deviation is undefined'.format(stat_name))

    mean = mean_no_nan(values)
    stddev = np.sqrt(variance_no_nan(values))

    return mean, stddev, good_fraction(values)

def format_scalar_field(mean: float, stddev: float, good_frac: float, file_name: str) -> str:
    """Formats the output table fields for one scalar statistic."""

    return '\t{:6.3g}±{:5.2g}\t{:6.3g}\t{}'.format(mean, stddev, good_frac, file_name)

def format_pairs_field(file_name: str) -> str:
    """Formats the output table field for one function-valued statistic."""

    return '\t{}'.format(file_name)

def scalar_header(field_name: str) -> str:
    """Column labels matching ``format_scalar_field``."""

    return '\t{0}±err\tFinite\t{0} Distribution'.format(field_name)

def pairs_header(field_name: str) -> str:
    """Column label matching ``format_pairs_field``."""

    return '\t{}'.format(field_name)

def write_scalar_aux(path: str, values: ArrayLike):
    """
    Writes the distribution of a scalar statistic to a text file, one value per line.

    Parameters
    ----------
    path : str
        The file to write. Any existing file is overwritten.
    values : array-like
        The values to write, including NaNs.
    """

    np.savetxt(path, np.asarray(values, dtype=float), fmt='%0.3f')

def write_pairs_aux(path: str, xs, ys):
    """
    Writes the distribution of a function-valued statistic to a text file.

    Each function is written as two lines, the first with the x values and
    the second with the y values, separated by spaces.

    Parameters
    ----------
    path : str
        The file to write. Any existing file is overwritten.
    xs, ys : list of array-like
        The x and y values of each function.
    """

    with open(path, 'w') as outfile:
        for x, y in zip(xs, ys):
            np.savetxt(outfile, [np.asarray(x, dtype=float)], fmt='%0.3f')
            np.savetxt(outfile, [np.asarray(y, dtype=float)], fmt='%0.3f')

def read_pairs_aux(path: str):
    """
    Loads a file written by ``write_pairs_aux``.

    Returns
    -------
    list of tuple
        The (x, y) arrays of each function, in the order they were written.
    """

    with open(path, 'r') as infile:
        lines = infile.read().splitlines()

    if len(lines) % 2 != 0:
        raise ValueError('File {} has an odd number of lines, and so does not hold (x, y) pairs'.format(path))

    pairs = []
    for i in range(0, len(lines), 2):
        x = np.fromstring(lines[i], dtype=float, sep=' ')
        y = np.fromstring(lines[i+1], dtype=float, sep=' ')
        pairs.append((x, y))

    return pairs

def read_bin_table(path: str):
    """
    Loads a table of bin statistics into a DataFrame.

    The mean±error fields are split into two columns, the first named after
    the statistic and the second named 'err', so that each summary statistic
    can be accessed directly.

    Parameters
    ----------
    path : str
        A table with a header line and one row per bin, as written by
        ``LcBinStats.print_bin_header`` and ``LcBinStats.print_bin_stats``.

    Returns
    -------
    DataFrame
        The table, with whitespace stripped from the text fields.
    """

    df = read_csv(path, sep='\t|±', engine='python', skipinitialspace=True)
    df.columns = [str(col).strip() for col in df.columns]

    for col in df.columns:
        if df[col].dtype == object:
            df[col] = df[col].str.strip()

    return df

def plot_pairs(collection, xlabel=None, ylabel=None, logx=False, savefig=False, directory='.'):
    """
    Plots every function held in a collection of (x, y) statistics on one figure.

    Parameters
    ----------
    collection : CollectedPairs
        The functions to plot, e.g. the periodograms of each light curve.
    xlabel, ylabel : str, optional
        Axis labels. Default is None.
    logx : bool, optional
        If True the x-axis will be logarithmic. Default is False.
    savefig : bool, optional
        If True the figure will be saved to `directory`, named after the
        collection's output file, instead of being shown. Default is False.
    directory : str, optional
        Where to save the figure. Default is the working directory.
    """

    for x, y in collection.to_list():
        plt.plot(x, y, 'k-', alpha=0.3)

    if logx:
        plt.xscale('log')
    if xlabel is not None:
        plt.xlabel(xlabel)
    if ylabel is not None:
        plt.ylabel(ylabel)
    plt.title(collection.stat_name)

    if savefig:
        stem = os.path.splitext(collection.file_name)[0]
        plt.savefig(os.path.join(directory, stem + '.png'), bbox_inches='tight', dpi=300)
        plt.clf()
    else:
        plt.show()
