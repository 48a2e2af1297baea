# -*- coding: utf-8 -*-
"""
    Created on Wed Mar 20 11:47:38 2024
    @author: danielgodinez
"""
import unittest
from unittest import mock
import numpy as np

from LightcurveMC.periodogram import *
from LightcurveMC import timescales
from LightcurveMC.exceptions import Undefined


rng = np.random.default_rng(31)
time = np.sort(rng.uniform(0, 100, 200))
mag = 0.5 * np.sin(2 * np.pi * time / 7.3) + 0.05 * rng.standard_normal(time.size)

class Test(unittest.TestCase):
    """Unittest to ensure the periodogram and period search work.
    """

    def test_frequency_range(self):
        times = np.linspace(0, 50, 101)
        freq_min, freq_max = frequency_range(times)
        self.assertAlmostEqual(freq_min, 0.02, delta=1e-12, msg="frequency_range minimum failed.")
        self.assertAlmostEqual(freq_max, 1.01, delta=1e-12, msg="frequency_range maximum failed.")

        # Long light curves are limited by the minimum frequency
        times = np.linspace(0, 1000, 101)
        freq_min, _ = frequency_range(times)
        self.assertEqual(freq_min, 0.005, msg="frequency_range floor failed.")

        with self.assertRaises(ValueError):
            frequency_range([1.0, 1.0])

    def test_period_recovery(self):
        freqs, power = periodogram(time, mag)
        self.assertEqual(len(freqs), len(power), msg="periodogram lengths differ.")
        self.assertGreaterEqual(freqs[0], 0.01 - 1e-12, msg="periodogram grid failed.")

        cache = FapThresholdCache(n_sims=50, random_state=0)
        freq_min, freq_max = frequency_range(time)
        threshold = cache.threshold(time, freqs, freq_min, freq_max)
        self.assertTrue(0 < threshold < 1, msg="FAP threshold out of range.")

        value = best_period(freqs, power, threshold)
        self.assertAlmostEqual(value, 7.3, delta=0.1, msg="best_period function failed.")

    def test_best_period(self):
        freqs = [0.1, 0.2, 0.25, 0.5]
        power = [0.1, 0.8, 0.8, 0.3]
        self.assertEqual(best_period(freqs, power, 0.5), 5.0, msg="best_period tie-break failed.")

        with self.assertRaises(Undefined):
            best_period(freqs, power, 0.8)
        with self.assertRaises(ValueError):
            best_period([], [], 0.5)
        with self.assertRaises(ValueError):
            best_period([0.1], [0.1, 0.2], 0.5)

    def test_cache(self):
        cache = FapThresholdCache(n_sims=10, random_state=0)
        freqs = timescales.freq_gen(0.01, 1.0, 0.01)

        with mock.patch.object(timescales, 'ls_threshold', return_value=0.3) as threshold:
            self.assertEqual(cache.threshold(time, freqs, 0.01, 1.0), 0.3)
            self.assertEqual(cache.threshold(time, freqs, 0.01, 1.0), 0.3)
            self.assertEqual(threshold.call_count, 1, msg="FAP threshold was recomputed for the same range.")

            cache.threshold(time, freqs, 0.02, 1.0)
            self.assertEqual(threshold.call_count, 2, msg="FAP threshold was not recomputed for a new range.")
            self.assertEqual(cache.key, (0.02, 1.0))

            cache.invalidate()
            self.assertIsNone(cache.key)
            cache.threshold(time, freqs, 0.02, 1.0)
            self.assertEqual(threshold.call_count, 3, msg="FAP threshold was not recomputed after invalidation.")

        self.assertEqual(cache.n_computed, 3)

    def test_threshold_reproducible(self):
        freqs = timescales.freq_gen(0.01, 1.0, 0.01)
        value = timescales.ls_threshold(time, freqs, 0.1, 20, random_state=5)
        expected_value = timescales.ls_threshold(time, freqs, 0.1, 20, random_state=5)
        self.assertEqual(value, expected_value, msg="ls_threshold is not reproducible.")

        with self.assertRaises(ValueError):
            timescales.ls_threshold(time, freqs, 1.5, 20)

if __name__ == '__main__':
    unittest.main()
