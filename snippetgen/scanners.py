"""
# Snippet-Generator: scanners.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tokenization and occurrence scanning.
"""

from typing import NamedTuple

from snippetgen.catalog import KeywordCatalog
from snippetgen.stores import KeywordStore
from snippetgen.utilities import normalize_token


class Occurrence(NamedTuple):
    keyword: str
    token_position: int  # 1-based


def tokenize(line: str) -> list[str]:
    """
    Split on whitespace only; there is no quoting or escaping.
    """
    return line.split()


def scan(tokens: list[str], store: 'KeywordStore') -> list['Occurrence']:
    """
    List every token matching the catalog or the store, in token order.

    Duplicates are kept: each occurrence gets its own question round and its own fragment.
    """
    occurrences: list['Occurrence'] = []
    for token_position, token in enumerate(tokens, start=1):
        keyword = normalize_token(token)
        if keyword == '':
            continue

        if KeywordCatalog.contains(keyword) or keyword in store:
            occurrences.append(Occurrence(keyword, token_position))

    return occurrences
