import unittest

from ppify.ranking import weighted_total_pp, pp_gain


class RankingTestCase(unittest.TestCase):

    def test_weighted_total_pp(self):
        # Assert plays are sorted and weighted with 0.95^i
        self.assertAlmostEqual(weighted_total_pp([100, 200]), 200 + 100 * 0.95)
        self.assertAlmostEqual(weighted_total_pp([]), 0)

    def test_weighted_total_pp_top_100_only(self):
        # Only the 100 best plays count
        pps = [1.0] * 150
        expected = sum(0.95 ** i for i in range(100))
        self.assertAlmostEqual(weighted_total_pp(pps), expected)

    def test_pp_gain(self):
        gain = pp_gain([300, 200, 100], 250)
        old_total = 300 + 200 * 0.95 + 100 * 0.95 ** 2
        new_total = 300 + 250 * 0.95 + 200 * 0.95 ** 2 + 100 * 0.95 ** 3

        self.assertAlmostEqual(old_total, gain.old_total)
        self.assertAlmostEqual(new_total, gain.new_total)
        self.assertAlmostEqual(new_total - old_total, gain.gain)
        self.assertEqual(2, gain.position)

    def test_pp_gain_ignores_scores_without_pp(self):
        gain = pp_gain([None, 100, None], 50)
        self.assertAlmostEqual(100, gain.old_total)
        self.assertEqual(2, gain.position)

    def test_pp_gain_outside_top_100(self):
        # A play worse than a full top 100 gains nothing
        gain = pp_gain([500.0] * 100, 10)
        self.assertIsNone(gain.position)
        self.assertAlmostEqual(0, gain.gain)

    def test_pp_gain_first_play(self):
        gain = pp_gain([], 123.4)
        self.assertAlmostEqual(123.4, gain.gain)
        self.assertEqual(1, gain.position)


if __name__ == '__main__':
    unittest.main()
