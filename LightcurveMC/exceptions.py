# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 10:14:03 2024

@author: danielgodinez
"""

class Undefined(Exception):
    """Raised when a statistic cannot be computed for a particular light curve.

    This is a property of the data, not a programming error: the caller
    is expected to record a null value for the statistic and move on.
    """

class NotEnoughData(Undefined):
    """Raised when the light curve itself has too few usable points.

    Unlike other kinds of Undefined, this is not absorbed by the per-statistic
    handlers, as it means no statistic can be meaningfully computed for the trial.
    """

class LowerBound(Undefined):
    """Raised when a statistic lies below the smallest value that can be resolved.

    Parameters
    ----------
    message : str
        Description of the problem.
    bound : float
        The smallest value the statistic could have taken.
    """

    def __init__(self, message, bound):
        super().__init__(message)
        self.bound = bound

class UpperBound(Undefined):
    """Raised when a statistic lies above the largest value that can be resolved.

    Parameters
    ----------
    message : str
        Description of the problem.
    bound : float
        The largest value the statistic could have taken.
    """

    def __init__(self, message, bound):
        super().__init__(message)
        self.bound = bound

class UnexpectedNan(ValueError):
    """Raised when NaN values are passed to a function that cannot ignore them."""

class NotSorted(ValueError):
    """Raised when timestamps are not in ascending order."""
