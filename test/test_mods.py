import unittest

from ppify.game_mode import OSU, TAIKO, CATCH, MANIA
from ppify.helpers.errors import BadModsError
from ppify.mods import mods_for_mode, parse_mods, mod_bits, mods_to_string


class ModsTestCase(unittest.TestCase):

    def test_mods_for_mode(self):
        # Mode specific mods only show up in their modes
        osu = [m.acronym for m in mods_for_mode(OSU)]
        mania = [m.acronym for m in mods_for_mode(MANIA)]
        taiko = [m.acronym for m in mods_for_mode(TAIKO)]

        self.assertIn("AP", osu)
        self.assertNotIn("7K", osu)
        self.assertIn("7K", mania)
        self.assertNotIn("FL", taiko)
        self.assertIn("ST", taiko)
        self.assertEqual("EZ", osu[0])

    def test_parse_mods_formats(self):
        # Concatenated, separated and prefixed strings give the same mods
        for text in ["HDDT", "+hddt", "HD,DT", "hd dt", "HD+DT"]:
            mods = parse_mods(text, OSU)
            self.assertEqual(["HD", "DT"], [m.acronym for m in mods])

    def test_parse_no_mods(self):
        for text in ["", "NM", "nomod", None, "  "]:
            self.assertEqual([], parse_mods(text, OSU))

    def test_parse_mods_three_letter_acronym(self):
        mods = parse_mods("ATCHD", OSU)
        self.assertEqual(["ATC", "HD"], [m.acronym for m in mods])

    def test_parse_mods_duplicates(self):
        mods = parse_mods("HDHD", OSU)
        self.assertEqual(["HD"], [m.acronym for m in mods])

    def test_parse_mods_errors(self):
        with self.assertRaises(BadModsError):
            parse_mods("XX", OSU)
        with self.assertRaises(BadModsError):
            parse_mods("7K", OSU)
        with self.assertRaises(BadModsError):
            parse_mods("FL", TAIKO)

    def test_mod_bits(self):
        # Legacy bit values
        self.assertEqual(8 | 64, mod_bits(parse_mods("HDDT", OSU)))
        self.assertEqual(64 | 512, mod_bits(parse_mods("NC", OSU)))
        self.assertEqual(32 | 16384, mod_bits(parse_mods("PF", CATCH)))
        self.assertEqual(1 << 18, mod_bits(parse_mods("7K", MANIA)))
        self.assertEqual(1 << 24, mod_bits(parse_mods("9K", MANIA)))
        self.assertEqual(0, mod_bits([]))

    def test_lazer_only_mods_have_no_bits(self):
        mods = parse_mods("DACL", OSU)
        self.assertEqual(0, mod_bits(mods))
        self.assertFalse(any(m.affects_pp for m in mods))

    def test_mods_to_string(self):
        self.assertEqual("+HDDT", mods_to_string(parse_mods("hd,dt", OSU)))
        self.assertEqual("NoMod", mods_to_string([]))


if __name__ == '__main__':
    unittest.main()
