import math
import unittest

from simplest_mcp.mcp.codec import (
    MISSING,
    decode_text,
    encode,
    fold_keys,
    get_field,
    get_integer,
    get_number,
    get_object,
    get_string,
    parse_json,
)


class AccessorTest(unittest.TestCase):
    def test_get_field(self):
        self.assertEqual(get_field({"a": 1}, "a"), 1)
        self.assertIsNone(get_field({"a": None}, "a"))
        self.assertIs(get_field({}, "a"), MISSING)
        self.assertFalse(MISSING)

    def test_get_integer(self):
        self.assertEqual(get_integer(7), 7)
        self.assertEqual(get_integer(-1), -1)
        for value in (True, False, 1.0, "1", None, MISSING):
            with self.subTest(value=value):
                self.assertIsNone(get_integer(value))

    def test_get_number(self):
        self.assertEqual(get_number(3), 3.0)
        self.assertIsInstance(get_number(3), float)
        self.assertEqual(get_number(-2.5), -2.5)
        self.assertEqual(get_number(10 ** 400), math.inf)
        self.assertEqual(get_number(-(10 ** 400)), -math.inf)
        for value in (True, "3", None, [], {}, MISSING):
            with self.subTest(value=value):
                self.assertIsNone(get_number(value))

    def test_get_object_and_string(self):
        self.assertEqual(get_object({"a": 1}), {"a": 1})
        self.assertIsNone(get_object([]))
        self.assertEqual(get_string("x"), "x")
        self.assertIsNone(get_string(1))

    def test_fold_keys(self):
        folded = fold_keys({"JsonRpc": "2.0", "ID": 1, "other": True}, ("jsonrpc", "id"))
        self.assertEqual(folded, {"jsonrpc": "2.0", "id": 1, "other": True})

    def test_fold_keys_last_wins(self):
        self.assertEqual(fold_keys({"id": 1, "Id": 2}, ("id",)), {"id": 2})


class ParseTest(unittest.TestCase):
    def test_bom_is_dropped(self):
        self.assertEqual(decode_text("\ufeff{}".encode("utf-8")), "{}")

    def test_invalid_utf8(self):
        with self.assertRaises(UnicodeDecodeError):
            decode_text(b"\xc3\x28")

    def test_strict_literals(self):
        for text in ("NaN", "[Infinity]", '{"a": -Infinity}'):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_json(text)

    def test_long_integer_literals(self):
        self.assertEqual(parse_json("9" * 5000), math.inf)
        self.assertEqual(parse_json("-" + "9" * 5000), -math.inf)
        self.assertEqual(parse_json("[12, -3]"), [12, -3])
        self.assertIsInstance(parse_json("12"), int)

    def test_syntax_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_json("{'single': 'quotes'}")


class EncodeTest(unittest.TestCase):
    def test_compact(self):
        self.assertEqual(encode({"a": [1, "b"], "c": None}), b'{"a":[1,"b"],"c":null}')

    def test_integral_floats(self):
        self.assertEqual(encode({"v": 5.0}), b'{"v":5}')
        self.assertEqual(encode({"v": -1.0}), b'{"v":-1}')
        self.assertEqual(encode({"v": -0.0}), b'{"v":-0.0}')
        self.assertEqual(encode({"v": 0.25}), b'{"v":0.25}')
        self.assertEqual(encode({"v": 1e300}), b'{"v":1e+300}')

    def test_non_finite(self):
        self.assertEqual(
            encode([math.nan, math.inf, -math.inf]),
            b'["NaN","Infinity","-Infinity"]'
        )

    def test_unicode_is_not_escaped(self):
        self.assertEqual(encode({"m": "não"}), '{"m":"não"}'.encode("utf-8"))


if __name__ == "__main__":
    unittest.main()
