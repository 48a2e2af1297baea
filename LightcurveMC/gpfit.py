# -*- coding: utf-8 -*-
"""
Created on Thu Mar 14 15:47:20 2024

@author: danielgodinez
"""
import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple
from scipy import linalg
from scipy.optimize import minimize

from LightcurveMC.exceptions import Undefined, NotEnoughData


# Returned in place of the likelihood when the covariance matrix is not positive definite
_BAD_FIT = 1e25

def _kernel(times, params):
    inverse_width, amp2, noise2 = np.exp(params)
    lags = times[:, None] - times[None, :]
    cov = amp2 * np.exp(-0.5 * inverse_width * lags**2)
    cov[np.diag_indices_from(cov)] += noise2
    return cov

def gp_neg_log_likelihood(params: ArrayLike, times: ArrayLike, data: ArrayLike) -> float:
    """
    Negative log-likelihood of a squared-exponential plus white-noise Gaussian process.

    Parameters
    ----------
    params : array-like
        ``[ln(1/tau^2), ln(amp^2), ln(noise^2)]``, where the covariance of the
        process is ``amp^2 exp(-dt^2 / (2 tau^2))`` plus `noise^2` on the
        diagonal.
    times : array-like
        Timestamps of the data.
    data : array-like
        The data, which should have zero mean.

    Returns
    -------
    float
        The negative log-likelihood of the data given `params`.
    """

    times = np.asarray(times, dtype=float)
    data = np.asarray(data, dtype=float)

    try:
        factor = linalg.cho_factor(_kernel(times, params), lower=True)
    except linalg.LinAlgError:
        return _BAD_FIT

    alpha = linalg.cho_solve(factor, data)
    log_det = 2.0 * np.sum(np.log(np.diag(factor[0])))

    return 0.5 * (data @ alpha + log_det + data.size * np.log(2.0 * np.pi))

def fit_gauss_gp(times: ArrayLike, data: ArrayLike) -> Tuple[float, float]:
    """
    Finds the maximum-likelihood timescale of a Gaussian process model of a light curve.

    The light curve is standardized and fit with a squared-exponential
    covariance plus white noise. The timescale uncertainty is propagated
    from the inverse Hessian of the negative log-likelihood.

    Parameters
    ----------
    times : array-like
        Timestamps, sorted in ascending order.
    data : array-like
        Measurements at each timestamp.

    Returns
    -------
    tau : float
        The best-fit timescale of the squared-exponential covariance.
    tau_error : float
        The 1-sigma uncertainty in `tau`.

    Raises
    ------
    NotEnoughData
        If fewer than 2 points are given.
    ValueError
        If the arrays have different lengths.
    Undefined
        If the light curve is constant, or the fit fails to converge to a
        finite solution.
    """

    times = np.asarray(times, dtype=float)
    data = np.asarray(data, dtype=float)

    if times.size < 2:
        raise NotEnoughData('Cannot fit Gaussian process model with fewer than 2 data points (gave {})'.format(times.size))
    if times.size != data.size:
        raise ValueError('Data and time arrays passed to fit_gauss_gp() must have the same length (gave {} for times and {} for data)'.format(times.size, data.size))

    scale = np.std(data)
    if not scale > 0:
        raise Undefined('Cannot fit Gaussian process model to a constant light curve')
    scaled = (data - np.mean(data)) / scale

    span = times[-1] - times[0]
    if not span > 0:
        raise NotEnoughData('Cannot fit Gaussian process model to a light curve with no time span')

    # Start from a timescale of a tenth of the span, mostly signal
    tau_guess = 0.1 * span
    guess = np.array([np.log(1.0 / tau_guess**2), np.log(0.9), np.log(0.1)])

    res = minimize(gp_neg_log_likelihood, guess, args=(times, scaled), method='BFGS')

    # Status 2 (precision loss) is normal near the optimum with numerical gradients
    if res.status not in (0, 2) or res.fun >= _BAD_FIT or not np.all(np.isfinite(res.x)):
        raise Undefined('Gaussian process fit did not converge: {}'.format(res.message))

    tau = 1.0 / np.sqrt(np.exp(res.x[0]))
    covar = np.asarray(res.hess_inv)

    if not covar[0, 0] > 0:
        raise Undefined('Gaussian process fit found a timescale, but its error is undefined')

    tau_error = 0.5 * np.sqrt(covar[0, 0]) * tau

    if not (np.isfinite(tau) and np.isfinite(tau_error)):
        raise Undefined('Gaussian process fit converged to a non-finite timescale')

    return tau, tau_error
