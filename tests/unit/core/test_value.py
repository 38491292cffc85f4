"""
Test cases for the JSONObject document container.

Tests focus on associative operations, live views, shallow clone aliasing
and compact serialization of the container.
"""

import copy
import unittest
from decimal import Decimal

from r2json.core.interfaces import CustomizableSerialize
from r2json.core.registry import SerializerRegistry
from r2json.core.value import JSONObject
from r2json.security.exceptions import InvalidArgumentError


class TestJSONObjectOperations(unittest.TestCase):
    """Test the associative contract of JSONObject."""

    def setUp(self):
        self.obj = JSONObject({"a": 1, "b": "two"})

    def test_get_and_missing_key(self):
        """get() returns the value or the default."""
        self.assertEqual(self.obj.get("a"), 1)
        self.assertIsNone(self.obj.get("missing"))
        self.assertEqual(self.obj.get("missing", 5), 5)

    def test_put_returns_previous_value(self):
        """put() returns the replaced value, or None for a new key."""
        self.assertIsNone(self.obj.put("c", True))
        self.assertEqual(self.obj.put("a", 10), 1)
        self.assertEqual(self.obj["a"], 10)

    def test_put_last_write_wins(self):
        """Writing the same key twice keeps the last value."""
        self.obj.put("k", 1)
        self.obj.put("k", 2)
        self.assertEqual(self.obj.get("k"), 2)
        self.assertEqual(self.obj.size(), 3)

    def test_remove(self):
        """remove() returns the removed value or None."""
        self.assertEqual(self.obj.remove("a"), 1)
        self.assertIsNone(self.obj.remove("a"))
        self.assertFalse(self.obj.contains_key("a"))

    def test_del_missing_key_raises_key_error(self):
        """del follows the mapping protocol and raises KeyError."""
        with self.assertRaises(KeyError):
            del self.obj["missing"]

    def test_contains(self):
        """contains_key / contains_value / in operator."""
        self.assertTrue(self.obj.contains_key("a"))
        self.assertIn("b", self.obj)
        self.assertTrue(self.obj.contains_value("two"))
        self.assertFalse(self.obj.contains_value("three"))

    def test_size_and_is_empty(self):
        """size(), len() and is_empty() agree."""
        self.assertEqual(self.obj.size(), 2)
        self.assertEqual(len(self.obj), 2)
        self.assertFalse(self.obj.is_empty())
        self.obj.clear()
        self.assertTrue(self.obj.is_empty())
        self.assertEqual(self.obj.size(), 0)

    def test_put_all(self):
        """put_all() copies entries with last write winning."""
        self.obj.put_all({"a": 100, "z": None})
        self.assertEqual(self.obj["a"], 100)
        self.assertIn("z", self.obj)
        self.assertIsNone(self.obj["z"])

    def test_keyword_construction(self):
        """Entries can be passed as keywords."""
        obj = JSONObject(x=1, y=[2])
        self.assertEqual(obj, {"x": 1, "y": [2]})

    def test_equality_with_mappings(self):
        """JSONObject compares equal to mappings with the same items."""
        self.assertEqual(self.obj, {"a": 1, "b": "two"})
        self.assertEqual(self.obj, JSONObject({"b": "two", "a": 1}))
        self.assertNotEqual(self.obj, {"a": 1})
        self.assertNotEqual(self.obj, [("a", 1), ("b", "two")])


class TestJSONObjectArguments(unittest.TestCase):
    """Test argument validation."""

    def test_none_source_rejected(self):
        """Constructing from None is an invalid argument."""
        with self.assertRaises(InvalidArgumentError):
            JSONObject(None)

    def test_put_all_none_rejected(self):
        obj = JSONObject()
        with self.assertRaises(InvalidArgumentError):
            obj.put_all(None)

    def test_non_string_keys_rejected(self):
        """Keys must be str; None is not a key."""
        obj = JSONObject()
        for bad_key in (None, 1, ("a",)):
            with self.subTest(key=bad_key):
                with self.assertRaises(InvalidArgumentError):
                    obj.put(bad_key, 1)
                with self.assertRaises(InvalidArgumentError):
                    obj[bad_key] = 1

    def test_invalid_argument_is_value_error(self):
        """InvalidArgumentError can be caught as ValueError."""
        with self.assertRaises(ValueError):
            JSONObject(None)


class TestJSONObjectViews(unittest.TestCase):
    """Views reflect the live state of the container."""

    def test_views_track_mutation(self):
        obj = JSONObject({"a": 1})
        keys = obj.keys()
        values = obj.values()
        items = obj.items()

        obj.put("b", 2)
        self.assertEqual(set(keys), {"a", "b"})
        self.assertEqual(sorted(values), [1, 2])
        self.assertIn(("b", 2), items)

        obj.remove("a")
        self.assertEqual(set(keys), {"b"})

    def test_view_aliases(self):
        obj = JSONObject({"a": 1})
        self.assertEqual(set(obj.key_set()), {"a"})
        self.assertEqual(list(obj.entry_set()), [("a", 1)])


class TestJSONObjectClone(unittest.TestCase):
    """clone() copies one level; nested containers stay shared."""

    def test_top_level_is_independent(self):
        original = JSONObject({"a": 1})
        clone = original.clone()
        clone.put("a", 2)
        clone.put("b", 3)
        self.assertEqual(original, {"a": 1})
        self.assertIsNot(clone, original)

    def test_nested_containers_are_shared(self):
        nested = JSONObject({"x": 1})
        items = [1, 2]
        original = JSONObject({"nested": nested, "items": items})

        clone = original.clone()
        clone["nested"].put("x", 99)
        clone["items"].append(3)

        self.assertEqual(original["nested"]["x"], 99)
        self.assertEqual(original["items"], [1, 2, 3])
        self.assertIs(clone["nested"], original["nested"])

    def test_copy_module_uses_shallow_clone(self):
        original = JSONObject({"nested": JSONObject()})
        shallow = copy.copy(original)
        self.assertIsInstance(shallow, JSONObject)
        self.assertIs(shallow["nested"], original["nested"])

    def test_clone_keeps_attached_registry(self):
        registry = SerializerRegistry()
        original = JSONObject()
        original.custom_serializer = registry
        self.assertIs(original.clone().custom_serializer, registry)


class TestJSONObjectSerialization(unittest.TestCase):
    """Compact JSON text produced by to_json_string()."""

    def test_empty_object(self):
        """An empty object keeps both braces."""
        self.assertEqual(JSONObject().to_json_string(), "{}")

    def test_single_entry_has_no_trailing_comma(self):
        self.assertEqual(JSONObject({"a": 1}).to_json_string(), '{"a":1}')

    def test_multiple_entries(self):
        obj = JSONObject()
        obj.put("a", 1)
        obj.put("b", [True, None])
        obj.put("c", Decimal("1.10"))
        self.assertEqual(obj.to_json_string(), '{"a":1,"b":[true,null],"c":1.10}')

    def test_value_ending_in_comma_character(self):
        """A string value containing a comma is not stripped."""
        obj = JSONObject({"a": ","})
        self.assertEqual(obj.to_json_string(), '{"a":","}')

    def test_keys_are_escaped(self):
        obj = JSONObject({'q"uote': 1})
        self.assertEqual(obj.to_json_string(), '{"q\\"uote":1}')

    def test_str_is_json_text(self):
        obj = JSONObject({"n": None})
        self.assertEqual(str(obj), '{"n":null}')

    def test_nested_objects(self):
        obj = JSONObject({"outer": JSONObject({"inner": JSONObject()})})
        self.assertEqual(obj.to_json_string(), '{"outer":{"inner":{}}}')


class TestJSONObjectCustomSerializer(unittest.TestCase):
    """Registries attached to an object."""

    class Point:
        def __init__(self, x, y):
            self.x = x
            self.y = y

    def _registry(self, template):
        registry = SerializerRegistry()
        registry.register(self.Point, lambda p: template.format(p.x, p.y))
        return registry

    def test_satisfies_customizable_protocol(self):
        self.assertIsInstance(JSONObject(), CustomizableSerialize)
        self.assertNotIsInstance({}, CustomizableSerialize)

    def test_attached_registry_is_used(self):
        obj = JSONObject({"p": self.Point(1, 2)})
        obj.custom_serializer = self._registry("[{},{}]")
        self.assertEqual(obj.to_json_string(), '{"p":[1,2]}')

    def test_explicit_registry_overrides_attached(self):
        obj = JSONObject({"p": self.Point(1, 2)})
        obj.custom_serializer = self._registry("[{},{}]")
        explicit = self._registry('"{}:{}"')
        self.assertEqual(obj.to_json_string(explicit), '{"p":"1:2"}')

    def test_add_custom_serializer_attaches_then_merges(self):
        class Other:
            pass

        obj = JSONObject({"p": self.Point(3, 4), "o": Other()})
        first = self._registry("[{},{}]")
        obj.add_custom_serializer(first)
        self.assertIs(obj.custom_serializer, first)

        second = SerializerRegistry()
        second.register(Other, lambda o: '"other"')
        obj.add_custom_serializer(second)

        self.assertIs(obj.custom_serializer, first)
        self.assertIn(Other, first)
        text = obj.to_json_string()
        self.assertIn('"p":[3,4]', text)
        self.assertIn('"o":"other"', text)

    def test_nested_object_keeps_its_own_registry(self):
        inner = JSONObject({"p": self.Point(5, 6)})
        inner.custom_serializer = self._registry('"inner {} {}"')
        outer = JSONObject({"inner": inner, "p": self.Point(7, 8)})
        outer.custom_serializer = self._registry("[{},{}]")

        text = outer.to_json_string()
        self.assertIn('"inner":{"p":"inner 5 6"}', text)
        self.assertIn('"p":[7,8]', text)


if __name__ == '__main__':
    unittest.main()
