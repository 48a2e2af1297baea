# -*- coding: utf-8 -*-
"""
Created on Fri Mar 15 11:52:08 2024

@author: danielgodinez
"""
import os
from contextlib import contextmanager

import numpy as np

from LightcurveMC import output


class NamedCollection:
    """
    Base class for the per-light-curve measurements of a statistic.

    Parameters
    ----------
    stat_name : str
        Human-readable name of the statistic, used in warnings and plots.
    file_name : str
        Name of the file to which the full distribution is written.
    """

    def __init__(self, stat_name: str, file_name: str):
        self.stat_name = stat_name
        self.file_name = file_name

    def __repr__(self):
        return '{}({!r}, {!r}, n={})'.format(type(self).__name__, self.stat_name, self.file_name, len(self))

    def __len__(self):
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError

    def print_stats(self, file, directory='.'):
        raise NotImplementedError

    def _mark(self):
        return len(self)

    def _rollback(self, mark):
        raise NotImplementedError

class CollectedScalars(NamedCollection):
    """
    Collection of a single-valued statistic, one entry per light curve.

    Light curves for which the statistic is undefined are recorded as NaN,
    so that the number of entries always equals the number of light curves
    analyzed.
    """

    def __init__(self, stat_name: str, file_name: str):
        super().__init__(stat_name, file_name)
        self._stats = []

    def __len__(self):
        return len(self._stats)

    def add_stat(self, value: float):
        """Records the value of the statistic for one light curve."""

        self._stats.append(float(value))

    def add_null(self):
        """Records that the statistic was undefined for one light curve."""

        self._stats.append(np.nan)

    def clear(self):
        self._stats = []

    def to_list(self):
        """Returns a copy of all recorded values."""

        return list(self._stats)

    def summarize(self):
        """
        Computes the mean, standard deviation and fraction of finite entries.

        Returns
        -------
        tuple
            (mean, stddev, good_frac). For an empty collection this is
            (NaN, NaN, 0.0).
        """

        return output.get_summary_stats(self._stats, self.stat_name)

    def print_stats(self, file, directory='.'):
        """
        Writes the summary of the statistic to a table, and its full distribution to
        a separate file.

        Parameters
        ----------
        file : file-like
            The open table to which the summary fields are written.
        directory : str, optional
            The directory in which to write the distribution file, named
            after `file_name`. Default is the working directory.
        """

        mean, stddev, good_frac = self.summarize()
        file.write(output.format_scalar_field(mean, stddev, good_frac, self.file_name))
        output.write_scalar_aux(os.path.join(directory, self.file_name), self._stats)

    @staticmethod
    def print_header(file, field_name: str):
        """Writes the table column labels for a scalar statistic."""

        file.write(output.scalar_header(field_name))

    def _rollback(self, mark):
        del self._stats[mark:]

class CollectedPairs(NamedCollection):
    """
    Collection of a function-valued statistic, one (x, y) pair per light curve.

    Unlike ``CollectedScalars``, there is no null entry: light curves for which
    the function cannot be computed are simply not recorded.
    """

    def __init__(self, stat_name: str, file_name: str):
        super().__init__(stat_name, file_name)
        self._x = []
        self._y = []

    def __len__(self):
        return len(self._x)

    def add_stat(self, x, y):
        """
        Records the function computed for one light curve.

        Parameters
        ----------
        x : array-like
            The points at which the function was evaluated.
        y : array-like
            The function values at each point.

        Raises
        ------
        ValueError
            If `x` and `y` have different lengths.
        """

        x = np.array(x, dtype=float)
        y = np.array(y, dtype=float)

        if x.size != y.size:
            raise ValueError('{}: x and y passed to add_stat() must have the same length ({} != {})'.format(self.stat_name, x.size, y.size))

        self._x.append(x)
        self._y.append(y)

    def clear(self):
        self._x = []
        self._y = []

    def to_list(self):
        """Returns the recorded functions as a list of (x, y) tuples."""

        return [(x.copy(), y.copy()) for x, y in zip(self._x, self._y)]

    def print_stats(self, file, directory='.'):
        """
        Writes the name of the distribution file to a table, and all the recorded
        functions to that file.
        """

        file.write(output.format_pairs_field(self.file_name))
        output.write_pairs_aux(os.path.join(directory, self.file_name), self._x, self._y)

    @staticmethod
    def print_header(file, field_name: str):
        """Writes the table column label for a function-valued statistic."""

        file.write(output.pairs_header(field_name))

    def _rollback(self, mark):
        del self._x[mark:]
        del self._y[mark:]

@contextmanager
def atomic_update(*collections):
    """
    Context manager that makes the updates to several collections all-or-nothing.

    If the body raises an exception, every collection is restored to the
    length it had on entry, and the exception is re-raised.

    Parameters
    ----------
    *collections : NamedCollection
        The collections that may be modified within the block.

    Examples
    --------
    >>> with atomic_update(cut3, cut2):
    ...     cut3.add_stat(get_cut(3))
    ...     cut2.add_stat(get_cut(2))
    """

    marks = [collection._mark() for collection in collections]

    try:
        yield
    except BaseException:
        for collection, mark in zip(collections, marks):
            collection._rollback(mark)
        raise
