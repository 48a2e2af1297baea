# -*- coding: utf-8 -*-
"""
    Created on Wed Mar 20 14:33:19 2024
    @author: danielgodinez
"""
import io
import os
import shutil
import tempfile
import unittest
import warnings
from unittest import mock

import matplotlib
matplotlib.use('Agg')
import numpy as np

from LightcurveMC.statcollect import CollectedScalars, CollectedPairs, atomic_update
from LightcurveMC import output


class Test(unittest.TestCase):
    """Unittest to ensure the statistic collections work.
    """

    def setUp(self):
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def test_clear(self):
        fresh = CollectedScalars('C1', 'run_c1_test.dat')
        used = CollectedScalars('C1', 'run_c1_test.dat')
        used.add_stat(0.5)
        used.clear()

        self.assertEqual(len(used), 0)
        self.assertEqual(used.to_list(), fresh.to_list())

        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            mean, stddev, good_frac = used.summarize()
        self.assertTrue(np.isnan(mean) and np.isnan(stddev), msg="summarize of cleared collection failed.")
        self.assertEqual(good_frac, 0.0, msg="summarize of cleared collection failed.")

        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            used.print_stats(io.StringIO(), self.directory)
        self.assertEqual(os.path.getsize(os.path.join(self.directory, 'run_c1_test.dat')), 0)

        pairs = CollectedPairs('IACFs', 'run_iacf_test.dat')
        pairs.add_stat([0.0, 1.0], [1.0, 0.5])
        pairs.clear()
        self.assertEqual(len(pairs), 0)
        self.assertEqual(pairs.to_list(), [])

    def test_summarize(self):
        scalars = CollectedScalars('Period', 'run_period_test.dat')
        for value in [1.0, 2.0, 3.0]:
            scalars.add_stat(value)
        scalars.add_null()

        mean, stddev, good_frac = scalars.summarize()
        self.assertAlmostEqual(mean, 2.0, delta=1e-12, msg="summarize mean failed.")
        self.assertAlmostEqual(stddev, 1.0, delta=1e-12, msg="summarize stddev failed.")
        self.assertAlmostEqual(good_frac, 0.75, delta=1e-12, msg="summarize good fraction failed.")

    def test_summary_warnings(self):
        scalars = CollectedScalars('Period', 'run_period_test.dat')
        scalars.add_null()

        with self.assertWarns(UserWarning):
            scalars.summarize()

    def test_atomicity(self):
        cut_a = CollectedScalars('A', 'run_a.dat')
        cut_b = CollectedScalars('B', 'run_b.dat')
        plot = CollectedPairs('P', 'run_p.dat')
        cut_a.add_stat(1.0)
        cut_b.add_stat(2.0)

        with mock.patch.object(cut_b, 'add_stat', side_effect=RuntimeError('injected')):
            with self.assertRaises(RuntimeError):
                with atomic_update(cut_a, cut_b, plot):
                    plot.add_stat([0.0], [1.0])
                    cut_a.add_stat(3.0)
                    cut_b.add_stat(4.0)

        self.assertEqual(len(cut_a), len(cut_b), msg="atomic_update left collections with different lengths.")
        self.assertEqual(cut_a.to_list(), [1.0])
        self.assertEqual(cut_b.to_list(), [2.0])
        self.assertEqual(len(plot), 0)

    def test_atomic_success(self):
        cut_a = CollectedScalars('A', 'run_a.dat')
        cut_b = CollectedScalars('B', 'run_b.dat')

        with atomic_update(cut_a, cut_b):
            cut_a.add_stat(3.0)
            cut_b.add_null()

        self.assertEqual(len(cut_a), 1)
        self.assertEqual(len(cut_b), 1)

    def test_pairs_length(self):
        pairs = CollectedPairs('IACFs', 'run_iacf_test.dat')
        with self.assertRaises(ValueError):
            pairs.add_stat([0.0, 1.0], [1.0])
        self.assertEqual(len(pairs), 0)

    def test_scalar_output(self):
        scalars = CollectedScalars('Grankin C1', 'run_c1_test.dat')
        scalars.add_stat(0.25)
        scalars.add_stat(0.75)
        scalars.add_null()

        row = io.StringIO()
        scalars.print_stats(row, self.directory)
        fields = row.getvalue().split('\t')

        self.assertEqual(fields[0], '', msg="scalar field does not start with a tab.")
        self.assertEqual(fields[1], '   0.5± 0.35', msg="scalar mean±error formatting failed.")
        self.assertEqual(fields[2], ' 0.667', msg="scalar good fraction formatting failed.")
        self.assertEqual(fields[3], 'run_c1_test.dat', msg="scalar file name failed.")

        with open(os.path.join(self.directory, 'run_c1_test.dat')) as infile:
            self.assertEqual(infile.read(), '0.250\n0.750\nnan\n')
        np.testing.assert_allclose(np.loadtxt(os.path.join(self.directory, 'run_c1_test.dat')), [0.25, 0.75, np.nan])

        header = io.StringIO()
        CollectedScalars.print_header(header, 'Grankin C1')
        self.assertEqual(header.getvalue(), '\tGrankin C1±err\tFinite\tGrankin C1 Distribution')
        self.assertEqual(len(header.getvalue().split('\t')), len(fields))

    def test_pairs_output(self):
        pairs = CollectedPairs('Periodograms', 'run_peri_test.dat')
        pairs.add_stat([0.1, 0.2], [0.5, 0.25])
        pairs.add_stat([1.0], [2.0])

        row = io.StringIO()
        pairs.print_stats(row, self.directory)
        self.assertEqual(row.getvalue(), '\trun_peri_test.dat')

        path = os.path.join(self.directory, 'run_peri_test.dat')
        with open(path) as infile:
            self.assertEqual(infile.read(), '0.100 0.200\n0.500 0.250\n1.000\n2.000\n')

        loaded = output.read_pairs_aux(path)
        self.assertEqual(len(loaded), 2)
        np.testing.assert_allclose(loaded[0][1], [0.5, 0.25])
        np.testing.assert_allclose(loaded[1][0], [1.0])

        header = io.StringIO()
        CollectedPairs.print_header(header, 'Periodograms')
        self.assertEqual(header.getvalue(), '\tPeriodograms')

    def test_plot(self):
        pairs = CollectedPairs('Peak Plots', 'run_peak_test.dat')
        pairs.add_stat([1.0, 2.0], [0.01, 0.02])
        output.plot_pairs(pairs, xlabel='Timescale', ylabel='Amplitude', savefig=True, directory=self.directory)

        self.assertTrue(os.path.exists(os.path.join(self.directory, 'run_peak_test.png')))

if __name__ == '__main__':
    unittest.main()
