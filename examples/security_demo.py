"""
Parse limits demonstration for r2json.
"""

import r2json
from r2json import ParseConfig, ParseLimits, SecurityError


def attempt(label, text, config):
    try:
        result = r2json.parse(text, config)
        print(f"✓ {label}: {result}")
    except SecurityError as e:
        print(f"✗ {label} blocked: {e.message}")


def main():
    print("r2json - Parse Limits Demo")
    print("=" * 40)

    print("\n1. Input Size Limits")
    config = ParseConfig(limits=ParseLimits(max_input_size=100))
    attempt("Small input", '{"test": "value"}', config)
    attempt("Large input", '{"test": "' + "x" * 200 + '"}', config)

    print("\n2. String Length Limits")
    config = ParseConfig(limits=ParseLimits(max_string_length=20))
    attempt("Short string", '{"name": "John"}', config)
    attempt("Long string", '{"name": "' + "x" * 50 + '"}', config)

    print("\n3. Nesting Depth Limits")
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=3))
    attempt("Shallow nesting", '{"a": {"b": {"c": "value"}}}', config)
    attempt("Deep nesting", '{"a": {"b": {"c": {"d": "value"}}}}', config)

    print("\n4. Collection Size Limits")
    config = ParseConfig(limits=ParseLimits(max_array_items=5, max_object_keys=2))
    attempt("Small array", "[1, 2, 3]", config)
    attempt("Large array", str(list(range(10))), config)
    attempt("Too many keys", '{"a": 1, "b": 2, "c": 3}', config)

    print("\n5. Strict preset")
    attempt("Untrusted input", "[" * 40 + "]" * 40, ParseConfig.strict())


if __name__ == "__main__":
    main()
