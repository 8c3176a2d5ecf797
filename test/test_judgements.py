import unittest

from ppify.game_mode import OSU, TAIKO, CATCH, MANIA
from ppify.helpers.errors import BadNumberError
from ppify.judgements import SimpleScore, DetailedScore


class JudgementsTestCase(unittest.TestCase):

    def test_simple_score(self):
        score = SimpleScore(98.5, 2)
        self.assertEqual({"accuracy": 98.5, "misses": 2}, score.performance_kwargs())

        with_combo = SimpleScore(100, 0, 1234)
        self.assertEqual(1234, with_combo.performance_kwargs()["combo"])

    def test_simple_score_bad_values(self):
        with self.assertRaises(BadNumberError):
            SimpleScore(101, 0)
        with self.assertRaises(BadNumberError):
            SimpleScore(99, -1)
        with self.assertRaises(BadNumberError):
            SimpleScore(99, 0, -5)

    def test_osu_and_taiko(self):
        osu = DetailedScore(OSU, {"n300": 1000, "n100": 10, "n50": 1, "misses": 2})
        self.assertEqual({"n300": 1000, "n100": 10, "n50": 1, "misses": 2}, osu.performance_kwargs())

        taiko = DetailedScore(TAIKO, {"n300": 900, "n100": 20})
        self.assertEqual({"n300": 900, "n100": 20, "misses": 0}, taiko.performance_kwargs())

    def test_catch_mapping(self):
        # Droplets are large ticks, tiny droplet misses are katus
        score = DetailedScore(CATCH, {"fruits": 500, "droplets": 100, "tiny_droplets": 50,
                                      "tiny_droplet_misses": 3, "misses": 1}, combo=600)
        self.assertEqual({"n300": 500, "large_tick_hits": 100, "small_tick_hits": 50, "n_katu": 3,
                          "misses": 1, "combo": 600}, score.performance_kwargs())

    def test_mania_mapping(self):
        # 320s are gekis, 200s are katus
        score = DetailedScore(MANIA, {"n320": 1000, "n300": 100, "n200": 10, "n100": 5, "n50": 1, "misses": 0})
        self.assertEqual({"n_geki": 1000, "n300": 100, "n_katu": 10, "n100": 5, "n50": 1, "misses": 0},
                         score.performance_kwargs())

    def test_detailed_errors(self):
        with self.assertRaises(BadNumberError):
            DetailedScore(TAIKO, {"n50": 1})
        with self.assertRaises(BadNumberError):
            DetailedScore(OSU, {"n300": -1})

    def test_counts_upper_bound(self):
        # rosu-pp only accepts unsigned 32 bit counts
        DetailedScore(OSU, {"n300": 2 ** 32 - 1})
        with self.assertRaises(BadNumberError):
            DetailedScore(OSU, {"n300": 99999999999})
        with self.assertRaises(BadNumberError):
            SimpleScore(99, 2 ** 32)
        with self.assertRaises(BadNumberError):
            SimpleScore(99, 0, 99999999999)


if __name__ == '__main__':
    unittest.main()
