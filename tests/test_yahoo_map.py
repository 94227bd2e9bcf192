"""
Tests for radar timestamps and static map URLs.
"""

import datetime
import os
import re
import unittest
from unittest.mock import patch

import pytz

from core.timezone_util import format_radar_timestamp, get_japan_time, to_japan_timezone
from core.yahoo_map import build_image_url

NOON_JST = datetime.datetime(2024, 7, 1, 3, 5, tzinfo=datetime.timezone.utc)


class TestRadarTimestamp(unittest.TestCase):
    """Test cases for the YYYYMMDDHHmm label."""

    def test_utc_instant_rendered_in_japan_time(self):
        self.assertEqual(format_radar_timestamp(NOON_JST), "202407011205")

    def test_same_instant_from_other_zones(self):
        new_york = pytz.timezone("America/New_York").localize(datetime.datetime(2024, 6, 30, 23, 5))
        berlin = pytz.timezone("Europe/Berlin").localize(datetime.datetime(2024, 7, 1, 5, 5))
        self.assertEqual(format_radar_timestamp(new_york), "202407011205")
        self.assertEqual(format_radar_timestamp(berlin), "202407011205")

    def test_naive_datetime_is_utc(self):
        self.assertEqual(format_radar_timestamp(datetime.datetime(2024, 12, 31, 15, 0)), "202501010000")

    def test_current_time_is_twelve_digits(self):
        self.assertRegex(format_radar_timestamp(), r"^\d{12}$")
        self.assertEqual(get_japan_time().utcoffset(), datetime.timedelta(hours=9))

    def test_to_japan_timezone(self):
        self.assertEqual(to_japan_timezone(NOON_JST).hour, 12)


class TestBuildImageUrl(unittest.TestCase):
    """Test cases for build_image_url()."""

    def test_exact_url(self):
        url = build_image_url(34.68639, 135.52, 400, 300, NOON_JST, app_id="APPID", mode="map")
        self.assertEqual(
            url,
            "https://map.yahooapis.jp/map/V1/static?appid=APPID&z=10&lat=34.68639&lon=135.52"
            "&width=400&height=300&mode=map"
            "&overlay=type:rainfall|datelabel:on|date:202407011205",
        )

    def test_deterministic(self):
        args = (35.68944, 139.69167, 400, 300, NOON_JST)
        self.assertEqual(
            build_image_url(*args, app_id="x", mode="map"),
            build_image_url(*args, app_id="x", mode="map"),
        )

    def test_timezone_of_the_caller_does_not_matter(self):
        la = NOON_JST.astimezone(pytz.timezone("America/Los_Angeles"))
        self.assertEqual(
            build_image_url(1.0, 2.0, 400, 300, la, app_id="x", mode="map"),
            build_image_url(1.0, 2.0, 400, 300, NOON_JST, app_id="x", mode="map"),
        )

    def test_date_label_is_twelve_digits(self):
        url = build_image_url(1.0, 2.0, 400, 300, NOON_JST, app_id="x", mode="map")
        self.assertRegex(url, r"date:\d{12}$")

    def test_defaults_come_from_config(self):
        env = {"YAHOO_JAPAN_API_CLIENT_ID": "client-id", "YAHOO_JAPAN_API_MAP_MODE": "photo"}
        with patch.dict(os.environ, env):
            url = build_image_url(1.0, 2.0, 400, 300, NOON_JST)
        self.assertIn("appid=client-id&", url)
        self.assertIn("&mode=photo&", url)

    def test_mode_defaults_to_map(self):
        with patch.dict(os.environ, {"YAHOO_JAPAN_API_MAP_MODE": ""}):
            url = build_image_url(1.0, 2.0, 400, 300, NOON_JST, app_id="x")
        self.assertTrue(re.search(r"&mode=map&", url))


if __name__ == '__main__':
    unittest.main()
