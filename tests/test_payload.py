"""
Tests for the operation payload and result types.
"""

import json
import unittest

from core.errors import PayloadError
from core.payload import OperationPayload, OperationResult, OperationStatus

WIRE = {
    "token": "xoxb-test",
    "yahooImageUrl": "https://map.yahooapis.jp/map/V1/static?appid=x",
    "responseUrl": "https://hooks.slack.com/commands/T000/1/abc",
    "channelId": "C123",
    "prefName": "osaka",
    "prefKanjiName": "大阪府",
}


def make_payload(**overrides) -> OperationPayload:
    data = dict(WIRE)
    data.update(overrides)
    return OperationPayload.from_dict(data)


class TestOperationPayload(unittest.TestCase):
    """Test cases for OperationPayload validation and wire form."""

    def test_from_dict(self):
        payload = make_payload()
        self.assertEqual(payload.channel_id, "C123")
        self.assertEqual(payload.pref_kanji_name, "大阪府")
        self.assertIsNone(payload.file)

    def test_wire_form_uses_camel_case_and_omits_file(self):
        payload = make_payload().with_file(b"\x89PNG")
        self.assertEqual(payload.to_dict(), WIRE)
        self.assertEqual(json.loads(payload.to_json()), WIRE)
        self.assertNotIn("file", payload.to_json())

    def test_missing_field(self):
        data = dict(WIRE)
        del data["responseUrl"]
        with self.assertRaises(PayloadError) as ctx:
            OperationPayload.from_dict(data)
        self.assertIn("responseUrl", str(ctx.exception))

    def test_empty_field(self):
        with self.assertRaises(PayloadError):
            make_payload(channelId="")

    def test_non_string_field(self):
        with self.assertRaises(PayloadError):
            make_payload(channelId=123)

    def test_not_an_object(self):
        for data in [None, [], "token"]:
            with self.subTest(data=data):
                with self.assertRaises(PayloadError):
                    OperationPayload.from_dict(data)

    def test_from_json(self):
        self.assertEqual(OperationPayload.from_json(json.dumps(WIRE)), make_payload())
        with self.assertRaises(PayloadError):
            OperationPayload.from_json("{not json")

    def test_unknown_keys_are_ignored(self):
        self.assertEqual(make_payload(extra="x"), make_payload())

    def test_with_file_returns_a_copy(self):
        payload = make_payload()
        filled = payload.with_file(b"data")
        self.assertIsNone(payload.file)
        self.assertEqual(filled.file, b"data")
        self.assertEqual(filled.channel_id, payload.channel_id)

    def test_wire_keys_are_read_only(self):
        with self.assertRaises(TypeError):
            OperationPayload.WIRE_KEYS["file"] = "file"
        self.assertNotIn("file", OperationPayload.WIRE_KEYS)

    def test_repr_hides_secrets(self):
        text = repr(make_payload().with_file(b"1234"))
        self.assertNotIn("xoxb-test", text)
        self.assertNotIn("hooks.slack.com", text)
        self.assertIn("file_bytes=4", text)


class TestOperationResult(unittest.TestCase):

    def test_ok_only_for_uploaded(self):
        self.assertTrue(OperationResult(OperationStatus.UPLOADED).ok)
        for status in [OperationStatus.FETCH_FAILED, OperationStatus.UPLOAD_FAILED, OperationStatus.NOTIFY_FAILED]:
            self.assertFalse(OperationResult(status, "{}").ok)


if __name__ == '__main__':
    unittest.main()
