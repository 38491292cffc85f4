"""
r2json demonstration script.
"""

from datetime import date
from decimal import Decimal

import r2json
from r2json import JSONObject, SerializerRegistry


class Temperature:
    def __init__(self, celsius):
        self.celsius = celsius


class Reading(Temperature):
    def __init__(self, celsius, sensor):
        super().__init__(celsius)
        self.sensor = sensor


def main():
    print("r2json - JSON Document Model Demo")
    print("=" * 40)

    # 1. Parse and edit a document
    print("\n1. Parse, edit and write back")
    doc = r2json.parse_object('{"item": "tea", "price": 1.10, "tags": ["green"]}')
    doc.put("qty", 3)
    doc.get("tags").append("loose")
    print(f"Price keeps its digits: {doc.get('price')!r}")
    print(f"Output: {doc.to_json_string()}")

    # 2. Shallow clone
    print("\n2. Shallow clone shares nested containers")
    clone = doc.clone()
    clone.put("item", "coffee")
    clone.get("tags").append("shared")
    print(f"Original: {doc}")
    print(f"Clone:    {clone}")

    # 3. Offset-threaded parsing
    print("\n3. Parsing several values from one text")
    text = '{"a": 1} [2, 3] "four"'
    offset = 0
    while offset < len(text):
        value, offset = r2json.parse_value(text, offset)
        print(f"  {value!r} (next offset {offset})")
        offset = len(text) - len(text[offset:].lstrip())

    # 4. Custom serializers with inheritance
    print("\n4. Custom serializers")
    registry = SerializerRegistry()
    registry.register(date, lambda d: r2json.quote_string(d.isoformat()))
    registry.register(Temperature, lambda t: f"{t.celsius}", level=1)

    report = JSONObject(day=date(2024, 5, 1), reading=Reading(Decimal("21.50"), "kitchen"))
    report.custom_serializer = registry
    print(f"Output: {report.to_json_string()}")

    # 5. Result values
    print("\n5. Results instead of exceptions")
    for candidate in ('{"ok": true}', "{}garbage"):
        result = r2json.try_parse_object(candidate)
        status = "ok" if result.ok else result.error_kind
        print(f"  {candidate!r}: {status}")


if __name__ == "__main__":
    main()
