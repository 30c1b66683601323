"""
Extension-style helpers for the built-in `str` type.

Python does not let you add methods to `str`, so the helpers are plain
functions that take the string as their first argument. `StringExtensions`
groups them under one name for discoverability:

    >>> StringExtensions.fizzle("Hello")
    'HelloFizz'
    >>> fizzle("Hello")
    'HelloFizz'

Because they are ordinary functions they also slot straight into a query:

    >>> from sugarpipe import from_
    >>> from_(["a", "b"]).map(fizzle).to_list()
    ['aFizz', 'bFizz']
"""

FIZZ_SUFFIX = "Fizz"


def fizzle(text: str) -> str:
    """Returns `text` with the "Fizz" suffix appended. `""` becomes `"Fizz"`."""
    return text + FIZZ_SUFFIX


class StringExtensions:
    """Namespace for the string helpers; never instantiated."""

    fizzle = staticmethod(fizzle)
