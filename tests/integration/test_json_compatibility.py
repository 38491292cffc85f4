"""
Test cases for agreement with the standard json module.

For valid documents r2json must build the same values as json.loads() with
parse_float=Decimal, and its compact output must match json.dumps() with
compact separators wherever both can express the value.
"""

import json
import unittest
from decimal import Decimal

import r2json

VALID_DOCUMENTS = [
    '{"test": "value"}',
    "[1, 2, 3]",
    '{"nested": {"array": [1, 2, {"deep": true}]}}',
    '{"number": 123, "float": 45.67, "bool": false, "null": null}',
    '{"exp": [1e10, 1E-3, -2.5e+2, 0.0]}',
    '{"big": 123456789012345678901234567890}',
    '"just a string"',
    "  42  ",
    "[]",
    "{}",
    '{"unicode": "caf\\u00e9 \\ud83d\\ude00", "raw": "日本語"}',
    '{"escapes": "\\"\\\\\\/\\b\\f\\n\\r\\t"}',
    '{"a": {"b": {"c": {"d": [[[]]]}}}}',
    '\n\t{ "spaced" :\r\n [ 1 , 2 ] }\n',
]

INVALID_DOCUMENTS = [
    "",
    "{",
    "[1,]",
    '{"a":1,}',
    "{'a': 1}",
    "{a: 1}",
    "[01]",
    "[1.]",
    "[.1]",
    "[-]",
    '"\\x41"',
    '"tab\there"',
    "[1] [2]",
    "nul",
]


class TestParsingMatchesStdlib(unittest.TestCase):
    """Parsed values equal json.loads() values."""

    def test_valid_documents(self):
        for text in VALID_DOCUMENTS:
            with self.subTest(text=text):
                expected = json.loads(text, parse_float=Decimal)
                self.assertEqual(r2json.parse(text), expected)

    def test_invalid_documents(self):
        for text in INVALID_DOCUMENTS:
            with self.subTest(text=text):
                with self.assertRaises(json.JSONDecodeError):
                    json.loads(text)
                with self.assertRaises(r2json.ParseError):
                    r2json.parse(text)

    def test_duplicate_keys(self):
        text = '{"k": 1, "k": 2}'
        self.assertEqual(r2json.parse(text), json.loads(text))


class TestOutputMatchesStdlib(unittest.TestCase):
    """Compact output equals json.dumps() output."""

    def _dumps(self, value):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    def test_plain_values(self):
        values = [
            {"a": [1, True, None, "x"]},
            [],
            {},
            {"nested": {"list": [[], {}]}},
            "control \x01 chars \x1f and  ",
            {"quote\"key": "back\\slash/"},
            -0,
            10 ** 25,
        ]
        for value in values:
            with self.subTest(value=value):
                self.assertEqual(r2json.serialize(value), self._dumps(value))

    def test_output_is_valid_json(self):
        doc = r2json.parse_object(VALID_DOCUMENTS[3])
        doc.put("extra", [Decimal("1.10"), "é"])
        self.assertEqual(
            json.loads(doc.to_json_string(), parse_float=Decimal),
            {
                "number": 123,
                "float": Decimal("45.67"),
                "bool": False,
                "null": None,
                "extra": [Decimal("1.10"), "é"],
            },
        )


if __name__ == '__main__':
    unittest.main()
