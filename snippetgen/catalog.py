"""
# Snippet-Generator: catalog.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The built-in keyword catalog.
"""

from snippetgen.constants import CPP17_KEYWORDS
from snippetgen.utilities import normalize_token


class KeywordCatalog:
    """
    Static class providing the reserved words recognised out of the box.

    The catalog is the C++17 keyword set. It is immutable,
    and its names may not be redefined as custom keywords.
    """
    def __new__(cls):
        raise TypeError('KeywordCatalog cannot be instantiated')

    _KEYWORDS = frozenset(CPP17_KEYWORDS)

    @staticmethod
    def contains(token: str) -> bool:
        """
        Case-normalised membership test.
        """
        return normalize_token(token) in KeywordCatalog._KEYWORDS

    @staticmethod
    def sorted_keywords() -> list[str]:
        return sorted(KeywordCatalog._KEYWORDS)
