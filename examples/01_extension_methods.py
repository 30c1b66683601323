"""
Extension-style helpers: functions that read like methods on `str`.
"""
from sugarpipe import StringExtensions, fizzle, from_


def main():
    word = "Hello"

    # 1. Call the helper like a plain function...
    print(f"fizzle('{word}') -> {fizzle(word)}")

    # 2. ...or through its namespace, the closest Python gets to `word.Fizzle()`.
    print(f"StringExtensions.fizzle('{word}') -> {StringExtensions.fizzle(word)}")

    # 3. The empty string is fine too.
    print(f"fizzle('') -> {fizzle('')}")

    # 4. Being ordinary functions, helpers drop straight into a query.
    words = ["Fizz", "Buzz"]
    print(f"Mapped: {from_(words).map(fizzle).to_list()}")


if __name__ == "__main__":
    main()
