# -*- coding: utf-8 -*-
"""
    Created on Thu Mar 21 14:56:02 2024
    @author: danielgodinez
"""
import io
import os
import shutil
import tempfile
import unittest
import warnings

import numpy as np

from LightcurveMC.binstats import LcBinStats, StatType, stat_types, parse_stat
from LightcurveMC.fluxmag import mag_to_flux
from LightcurveMC.exceptions import NotEnoughData
from LightcurveMC import output


rng = np.random.default_rng(404)
time = np.sort(rng.uniform(0, 20, 80))
flux = mag_to_flux(0.3 * np.sin(2 * np.pi * time / 3.0) + 0.01 * rng.standard_normal(time.size))

bin_specs = {'period': (2.0, 4.0), 'amp': (0.1, 0.5)}

class Test(unittest.TestCase):
    """Unittest to ensure the bin driver accumulates and reports statistics correctly.
    """

    def setUp(self):
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def test_names(self):
        self.assertEqual(LcBinStats.make_bin_name('Sine', bin_specs, '0.1'), 'Sine          \t2\t0.1\t0.1')
        self.assertEqual(LcBinStats.make_file_name('Sine', bin_specs, '0.1'), 'Sine_p+2.0_a+0.1_n0.1')

        header = LcBinStats.make_bin_header(bin_specs, [StatType.PERIODOGRAM, StatType.C1])
        self.assertEqual(header, 'LCType\tperiod \tamp    \tNoise\tGrankin C1±err\tFinite\tGrankin C1 Distribution\tPeriodograms\n')

    def test_registry(self):
        self.assertEqual(stat_types(), ['C1', 'dmdtcut', 'dmdtplot', 'gptau', 'iacfcut', 'iacfplot',
            'peakcut', 'peakplot', 'period', 'periplot', 'sacfcut', 'sacfplot'])
        self.assertEqual(parse_stat('iacfcut'), StatType.IACF_CUT)
        self.assertEqual(parse_stat('C1'), StatType.C1)

        with self.assertRaises(ValueError):
            parse_stat('c2')

    def test_trial_scenario(self):
        bin_stats = LcBinStats('Sine', bin_specs, '0.1', [StatType.PEAK_CUT], out_dir=self.directory)

        bin_stats.analyze_light_curve(time, flux, {'p': 3.0})
        bin_stats.analyze_light_curve(time, np.ones(time.size))
        with self.assertRaises(NotEnoughData):
            bin_stats.analyze_light_curve(time, np.r_[1.0, -np.ones(time.size - 1)])

        for collection in bin_stats.collections(StatType.PEAK_CUT):
            values = collection.to_list()
            self.assertEqual(len(values), 2, msg="{} has the wrong number of entries.".format(collection.stat_name))
            self.assertTrue(np.isnan(values[1]), msg="{} null entry failed.".format(collection.stat_name))
        self.assertFalse(np.isnan(bin_stats.collections(StatType.PEAK_CUT)[0].to_list()[0]))

        for stat in StatType:
            if stat != StatType.PEAK_CUT:
                for collection in bin_stats.collections(stat):
                    self.assertEqual(len(collection), 0)

    def test_not_enough_data_is_all_or_nothing(self):
        bin_stats = LcBinStats('Sine', bin_specs, '0.1', [StatType.C1, StatType.DMDT_CUT], out_dir=self.directory)

        # C1 can be computed, but a light curve with no time span has no Δm-Δt bins
        with self.assertRaises(NotEnoughData):
            bin_stats.analyze_light_curve([1.0, 1.0, 1.0], [1.0, 2.0, 3.0])

        self.assertEqual(len(bin_stats.collections(StatType.C1)[0]), 0)

    def test_length_mismatch(self):
        bin_stats = LcBinStats('Sine', bin_specs, '0.1', [StatType.C1], out_dir=self.directory)
        with self.assertRaises(ValueError):
            bin_stats.analyze_light_curve(time, flux[:-1])

    def test_header_matches_row(self):
        to_calc = [parse_stat(name) for name in stat_types()]
        bin_stats = LcBinStats('Sine', bin_specs, '0.1', to_calc, out_dir=self.directory, fap_sims=10, random_state=7)

        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            for i in range(2):
                bin_stats.analyze_light_curve(time, flux, {'p': 3.0})
            row = bin_stats.output()
        header = LcBinStats.make_bin_header(bin_specs, to_calc)

        self.assertEqual(len(header.split('\t')), len(row.split('\t')), msg="header and row have different numbers of columns.")
        self.assertEqual(len(bin_stats.collections(StatType.C1)[0]), 2)
        self.assertEqual(len(bin_stats.collections(StatType.PERIOD)[0]), 2)

        for stat in StatType:
            for collection in bin_stats.collections(stat):
                self.assertTrue(os.path.exists(os.path.join(self.directory, collection.file_name)),
                    msg="distribution file for {} was not written.".format(collection.stat_name))

        path = os.path.join(self.directory, 'table.txt')
        with open(path, 'w') as outfile:
            outfile.write(header)
            outfile.write(row)

        df = output.read_bin_table(path)
        self.assertEqual(len(df), 1)
        self.assertEqual(df['LCType'][0], 'Sine')
        self.assertEqual(df['period'][0], 2.0)
        self.assertAlmostEqual(df['Grankin C1'][0], bin_stats.collections(StatType.C1)[0].summarize()[0], delta=1e-3)

    def test_clear(self):
        bin_stats = LcBinStats('Sine', bin_specs, '0.1', [StatType.C1, StatType.PEAK_PLOT], out_dir=self.directory)
        bin_stats.analyze_light_curve(time, flux)
        bin_stats.clear()

        self.assertEqual(len(bin_stats.collections(StatType.C1)[0]), 0)
        self.assertEqual(len(bin_stats.collections(StatType.PEAK_PLOT)[0]), 0)

        stream = io.StringIO()
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            bin_stats.print_bin_stats(stream)
        self.assertTrue(stream.getvalue().startswith(bin_stats.bin_name), msg="print_bin_stats row does not start with the bin name.")
        self.assertTrue(stream.getvalue().endswith('\n'))

if __name__ == '__main__':
    unittest.main()
