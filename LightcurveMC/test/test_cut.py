# -*- coding: utf-8 -*-
"""
    Created on Tue Mar 19 13:40:10 2024
    @author: danielgodinez
"""
import unittest
import numpy as np

from LightcurveMC.cut import *


def reference_cut(positions, values, threshold):
    for i in range(len(values)):
        if values[i] < threshold:
            return positions[i]
    return np.nan

class Test(unittest.TestCase):
    """Unittest to ensure the threshold-cut functions work.
    """

    def test_monotonic_cut(self):
        positions = np.linspace(0, 10, 101)
        values = np.exp(-positions / 3.0)

        for threshold in np.linspace(-0.1, 1.1, 61):
            value = cut_function(positions, values, LessThan(threshold))
            expected_value = reference_cut(positions, values, threshold)
            if np.isnan(expected_value):
                self.assertTrue(np.isnan(value), msg="cut_function with unsatisfiable threshold failed.")
            else:
                self.assertEqual(value, expected_value, msg="cut_function at threshold {} failed.".format(threshold))

    def test_first_and_last(self):
        positions = [0.0, 1.0, 2.0, 3.0, 4.0]
        values = [0.0, 2.0, np.nan, 3.0, 0.5]

        self.assertEqual(cut_function(positions, values, MoreThan(1.0)), 1.0, msg="cut_function with MoreThan failed.")
        self.assertEqual(cut_function_reverse(positions, values, MoreThan(1.0)), 3.0, msg="cut_function_reverse with MoreThan failed.")
        self.assertEqual(cut_function_reverse(positions, values, NotNan()), 4.0, msg="cut_function_reverse with NotNan failed.")
        self.assertEqual(cut_function(positions, values, LessThan(1.0)), 0.0, msg="cut_function with LessThan failed.")

    def test_nan_never_passes(self):
        positions = [0.0, 1.0]
        values = [np.nan, np.nan]

        self.assertTrue(np.isnan(cut_function(positions, values, MoreThan(-1.0))), msg="NaN passed MoreThan.")
        self.assertTrue(np.isnan(cut_function(positions, values, LessThan(1.0))), msg="NaN passed LessThan.")
        self.assertTrue(np.isnan(cut_function_reverse(positions, values, NotNan())), msg="NaN passed NotNan.")

    def test_empty(self):
        self.assertTrue(np.isnan(cut_function([], [], LessThan(0.5))), msg="cut_function of empty input failed.")

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            cut_function([0.0, 1.0], [1.0], LessThan(0.5))
        with self.assertRaises(ValueError):
            cut_function_reverse([0.0], [1.0, 2.0], LessThan(0.5))

if __name__ == '__main__':
    unittest.main()
