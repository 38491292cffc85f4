"""
Error reporting demonstration for r2json.
"""

import r2json
from r2json import ErrorReporting, ParseConfig, ParseError


def show(text, config=None):
    try:
        r2json.parse(text, config)
    except ParseError as e:
        print("Error caught:")
        print(str(e))
        print(f"(offset {e.offset})")


def main():
    print("r2json - Error Reporting Demo")
    print("=" * 45)

    print("\n1. Missing value after colon")
    show('{"key": }')

    print("\n2. Missing colon")
    show('{"key" "value"}')

    print("\n3. Unclosed object")
    show('{"key": "value"')

    print("\n4. Multiline document")
    show('''
    {
        "name": "John Doe",
        "age": 30,
        "active": True
    }
    ''')

    print("\n5. Trailing content")
    show('{"done": true} extra')

    print("\n6. Terse errors")
    terse = ParseConfig(
        error_reporting=ErrorReporting(include_position=False, include_context=False)
    )
    show("[1, 2,]", terse)


if __name__ == "__main__":
    main()
