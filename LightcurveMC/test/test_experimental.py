# -*- coding: utf-8 -*-
"""
    Created on Mon Mar 25 16:20:54 2024
    @author: danielgodinez
"""
import unittest
import numpy as np

from LightcurveMC.experimental import rms_vs_t_rooted, rms_vs_t_all_pairs
from LightcurveMC.exceptions import NotSorted


time = np.array([0.0, 1.0, 3.0, 4.0])
flux = np.array([1.0, 3.0, 2.0, 6.0])

class Test(unittest.TestCase):
    """Unittest to ensure the RMS-timescale functions are correct.
    """

    def test_rooted(self):
        steps, rms = rms_vs_t_rooted(time, flux)

        np.testing.assert_allclose(steps, [1.0, 3.0, 4.0])
        for k in range(2, time.size + 1):
            self.assertAlmostEqual(rms[k-2], np.std(flux[:k], ddof=1), delta=1e-12, msg="rms_vs_t_rooted function failed.")

    def test_all_pairs(self):
        steps, rms = rms_vs_t_all_pairs(time, flux)

        expected = sorted((time[j] - time[i], np.std(flux[i:j+1], ddof=1))
            for i in range(time.size) for j in range(i + 1, time.size))

        self.assertEqual(steps.size, 6)
        self.assertTrue(np.all(np.diff(steps) >= 0), msg="rms_vs_t_all_pairs steps are not sorted.")
        np.testing.assert_allclose(steps, [pair[0] for pair in expected])
        np.testing.assert_allclose(rms, [pair[1] for pair in expected], atol=1e-12)

    def test_constant(self):
        steps, rms = rms_vs_t_all_pairs(time, np.full(time.size, 5.0))
        self.assertTrue(np.all(rms == 0.0), msg="RMS of constant fluxes is not zero.")

    def test_errors(self):
        for func in (rms_vs_t_rooted, rms_vs_t_all_pairs):
            with self.assertRaises(ValueError):
                func([0.0], [1.0])
            with self.assertRaises(ValueError):
                func([0.0, 1.0], [1.0])
            with self.assertRaises(NotSorted):
                func([1.0, 0.0], [1.0, 2.0])

if __name__ == '__main__':
    unittest.main()
