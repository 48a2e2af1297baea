# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 11:05:40 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike


class MoreThan:
    """Predicate that holds for values strictly greater than a threshold."""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def __call__(self, x: float) -> bool:
        return x > self.threshold

    def __repr__(self):
        return 'MoreThan({})'.format(self.threshold)

class LessThan:
    """Predicate that holds for values strictly less than a threshold."""

    def __init__(self, threshold: float):
        self.threshold = threshold

    def __call__(self, x: float) -> bool:
        return x < self.threshold

    def __repr__(self):
        return 'LessThan({})'.format(self.threshold)

class NotNan:
    """Predicate that holds for any value that is not NaN."""

    def __call__(self, x: float) -> bool:
        return x == x

    def __repr__(self):
        return 'NotNan()'

def _check_lengths(positions, values):
    if len(positions) != len(values):
        raise ValueError('Position and value arrays passed to cut function must have the same length ({} != {})'.format(len(positions), len(values)))

def cut_function(positions: ArrayLike, values: ArrayLike, predicate) -> float:
    """
    Finds the first position at which a function satisfies a condition.

    Parameters
    ----------
    positions : array-like
        The points at which the function is sampled, e.g. time lags.
    values : array-like
        The function values at each position. May contain NaN, which
        never satisfies a numerical threshold.
    predicate : callable
        Function taking a single value and returning True if the cut is met,
        e.g. ``LessThan(0.5)``.

    Returns
    -------
    float
        The element of `positions` corresponding to the first element of
        `values` for which `predicate` holds, or NaN if no such element exists.

    Raises
    ------
    ValueError
        If `positions` and `values` have different lengths.
    """

    _check_lengths(positions, values)

    for position, value in zip(positions, values):
        if predicate(value):
            return position

    return np.nan

def cut_function_reverse(positions: ArrayLike, values: ArrayLike, predicate) -> float:
    """
    Finds the last position at which a function satisfies a condition.

    Identical to ``cut_function``, except that the search starts from the end
    of the arrays.
    """

    _check_lengths(positions, values)

    for i in range(len(values) - 1, -1, -1):
        if predicate(values[i]):
            return positions[i]

    return np.nan
