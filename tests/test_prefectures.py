"""
Tests for the prefecture lookup table.
"""

import unittest

from core.prefectures import (
    DEFAULT_PREFECTURE,
    PREFECTURES,
    Prefecture,
    aliases_for,
    canonical_keys,
    resolve,
)


class TestPrefectureDirectory(unittest.TestCase):
    """Test cases for resolve() and the alias table."""

    def test_has_all_47_prefectures(self):
        keys = canonical_keys()
        self.assertEqual(len(keys), 47)
        self.assertEqual(len({id(PREFECTURES[k]) for k in keys}), 47)

    def test_osaka_coordinates(self):
        osaka = resolve("osaka")
        self.assertEqual(osaka, Prefecture("大阪府", 34.68639, 135.52))

    def test_unknown_token_falls_back_to_tokyo(self):
        tokyo = PREFECTURES[DEFAULT_PREFECTURE]
        for token in ["atlantis", "", "   ", None, "400x300", "neo"]:
            with self.subTest(token=token):
                self.assertIs(resolve(token), tokyo)
        self.assertEqual((tokyo.kanji_name, tokyo.lat, tokyo.lon), ("東京都", 35.68944, 139.69167))

    def test_lookup_is_case_insensitive(self):
        self.assertIs(resolve("OSAKA"), resolve("osaka"))
        self.assertIs(resolve(" Hokkaido "), resolve("hokkaido"))

    def test_spelling_aliases_share_the_record(self):
        pairs = [
            ("oosaka", "osaka"),
            ("ohsaka", "osaka"),
            ("tokio", "tokyo"),
            ("neo tokio", "tokyo"),
            ("neo tokyo", "tokyo"),
            ("nigata", "niigata"),
            ("hyougo", "hyogo"),
            ("kouchi", "kochi"),
            ("ooita", "oita"),
            ("ohita", "oita"),
            ("ibaragi", "ibaraki"),
            ("shizouka", "shizuoka"),
        ]
        for alias, key in pairs:
            with self.subTest(alias=alias):
                self.assertIs(resolve(alias), resolve(key))

    def test_every_prefecture_has_kanji_aliases(self):
        for key in canonical_keys():
            pref = PREFECTURES[key]
            with self.subTest(key=key):
                self.assertIs(resolve(pref.kanji_name), pref)
                self.assertIs(resolve(pref.short_kanji_name), pref)
                self.assertGreaterEqual(len(aliases_for(key)), 2)

    def test_short_kanji_names(self):
        self.assertIs(resolve("大阪"), resolve("osaka"))
        self.assertIs(resolve("東京"), resolve("tokyo"))
        self.assertEqual(resolve("hokkaido").short_kanji_name, "北海道")
        self.assertEqual(resolve("kanagawa").short_kanji_name, "神奈川")

    def test_every_alias_resolves_to_a_canonical_record(self):
        canonical = {id(PREFECTURES[k]) for k in canonical_keys()}
        for key, pref in PREFECTURES.items():
            with self.subTest(key=key):
                self.assertIn(id(pref), canonical)

    def test_aliases_for(self):
        aliases = aliases_for("osaka")
        for key in ["osaka", "oosaka", "ohsaka", "大阪府", "大阪"]:
            self.assertIn(key, aliases)
        self.assertEqual(aliases_for("atlantis"), [])

    def test_directory_is_read_only(self):
        with self.assertRaises(TypeError):
            PREFECTURES["atlantis"] = resolve("tokyo")
        with self.assertRaises(AttributeError):
            resolve("tokyo").lat = 0.0


if __name__ == '__main__':
    unittest.main()
