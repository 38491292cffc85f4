"""
Test cases for the r2json scanner.

Tests focus on lexeme accuracy and on the offsets returned after each lexeme.
"""

import unittest
from decimal import Decimal

from r2json.core.scanner import Cursor, Scanner, is_number_start
from r2json.security.exceptions import ParseError


class TestScannerStrings(unittest.TestCase):
    """String lexemes and escape sequences."""

    def _scan(self, text, offset=0):
        return Scanner(text).scan_string(offset)

    def test_plain_string(self):
        self.assertEqual(self._scan('"hello"'), Cursor("hello", 7))

    def test_offset_points_past_closing_quote(self):
        cursor = self._scan('  "ab" tail', 2)
        self.assertEqual(cursor.value, "ab")
        self.assertEqual(cursor.offset, 6)

    def test_simple_escapes(self):
        """All single-character escapes are resolved."""
        cases = [
            ('"a\\"b"', 'a"b'),
            ('"a\\\\b"', "a\\b"),
            ('"a\\/b"', "a/b"),
            ('"\\b\\f\\n\\r\\t"', "\b\f\n\r\t"),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(self._scan(text).value, expected)

    def test_unicode_escape(self):
        self.assertEqual(self._scan('"\\u00e9t\\u00C9"').value, "étÉ")

    def test_surrogate_pair_is_combined(self):
        cursor = self._scan('"\\ud83d\\ude00"')
        self.assertEqual(cursor.value, "\U0001F600")
        self.assertEqual(cursor.offset, 14)

    def test_raw_non_ascii_passes_through(self):
        self.assertEqual(self._scan('"日本語"').value, "日本語")

    def test_invalid_strings(self):
        """Malformed strings raise ParseError."""
        cases = [
            '"unterminated',
            '"bad escape \\x"',
            '"short \\u12"',
            '"not hex \\u12G4"',
            '"lone low \\udc00"',
            '"lone high \\ud83d"',
            '"high then bmp \\ud83d\\u0041"',
            '"raw\nnewline"',
            '"ends with backslash\\',
        ]
        for text in cases:
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    self._scan(text)

    def test_error_offset_is_recorded(self):
        with self.assertRaises(ParseError) as cm:
            self._scan('"ab\\q"')
        self.assertEqual(cm.exception.offset, 3)


class TestScannerNumbers(unittest.TestCase):
    """Number lexemes and their lossless values."""

    def _scan(self, text, offset=0):
        return Scanner(text).scan_number(offset)

    def test_integers(self):
        cases = [("0", 0), ("123", 123), ("-456", -456), ("-0", 0)]
        for text, expected in cases:
            with self.subTest(text=text):
                cursor = self._scan(text)
                self.assertEqual(cursor.value, expected)
                self.assertIsInstance(cursor.value, int)
                self.assertEqual(cursor.offset, len(text))

    def test_big_integer_is_exact(self):
        text = "123456789012345678901234567890"
        self.assertEqual(self._scan(text).value, 123456789012345678901234567890)

    def test_decimals_keep_their_digits(self):
        cases = ["1.10", "78.90", "-0.5", "1.23e-4", "1E5", "2.5E+10"]
        for text in cases:
            with self.subTest(text=text):
                value = self._scan(text).value
                self.assertIsInstance(value, Decimal)
                self.assertEqual(value, Decimal(text))
        self.assertEqual(str(self._scan("1.10").value), "1.10")

    def test_integer_longer_than_str_conversion_limit(self):
        """Integral lexemes past the int(str) digit limit still become int."""
        cursor = self._scan("1" * 5000)
        self.assertIsInstance(cursor.value, int)
        self.assertEqual(cursor.value, (10 ** 5000 - 1) // 9)
        self.assertEqual(cursor.offset, 5000)

        negative = self._scan("-" + "9" * 4500)
        self.assertEqual(negative.value, -(10 ** 4500 - 1))

    def test_number_stops_at_delimiter(self):
        self.assertEqual(self._scan("12,3"), Cursor(12, 2))
        self.assertEqual(self._scan("[7]", 1), Cursor(7, 2))

    def test_malformed_numbers(self):
        cases = ["-", "01", "-01", "1.", "1.e5", "1e", "1e+", ".5", "-a"]
        for text in cases:
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    self._scan(text)

    def test_is_number_start(self):
        for char in "-0123456789":
            self.assertTrue(is_number_start(char))
        for char in ("", "+", ".", "a", " "):
            self.assertFalse(is_number_start(char))


class TestScannerLiterals(unittest.TestCase):
    """Keyword literals."""

    def test_keywords(self):
        scanner = Scanner("true false null")
        self.assertEqual(scanner.scan_literal(0), Cursor(True, 4))
        self.assertEqual(scanner.scan_literal(5), Cursor(False, 10))
        self.assertEqual(scanner.scan_literal(11), Cursor(None, 15))

    def test_wrong_case_has_suggestion(self):
        with self.assertRaises(ParseError) as cm:
            Scanner("True").scan_literal(0)
        self.assertIn("'True'", cm.exception.message)
        self.assertTrue(any("true" in s for s in cm.exception.suggestions))

    def test_unknown_word(self):
        with self.assertRaises(ParseError):
            Scanner("undefined").scan_literal(0)


class TestScannerWhitespace(unittest.TestCase):
    """Whitespace skipping."""

    def test_skips_json_whitespace_only(self):
        scanner = Scanner(" \t\r\n x")
        self.assertEqual(scanner.skip_whitespace(0), 5)
        self.assertEqual(scanner.char_at(5), "x")

    def test_does_not_skip_other_spaces(self):
        scanner = Scanner("\u00a0x")
        self.assertEqual(scanner.skip_whitespace(0), 0)

    def test_char_at_past_end(self):
        self.assertEqual(Scanner("ab").char_at(2), "")


if __name__ == '__main__':
    unittest.main()
