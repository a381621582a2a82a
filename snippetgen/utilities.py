"""
# Snippet-Generator: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re
import string as string_module
from typing import Optional

_PUNCTUATION_CHARACTER_CLASS = f'[{re.escape(string_module.punctuation)}]'


def normalize_token(token: str) -> str:
    """
    Normalise a token into a keyword lookup key.

    Leading and trailing ASCII punctuation is stripped and the remainder is lower-cased,
    so that `If(`, `"for"`, and `while;` normalise to `if`, `for`, and `while`.
    Internal punctuation (e.g. the underscore in `static_assert`) is kept.
    """
    token = re.sub(
        pattern=fr'\A {_PUNCTUATION_CHARACTER_CLASS}+ | {_PUNCTUATION_CHARACTER_CLASS}+ \Z',
        repl='',
        string=token,
        flags=re.VERBOSE,
    )

    return token.lower()


def split_lines(text: str) -> list[str]:
    """
    Split text on newline characters only, without a trailing empty line.

    Unlike `str.splitlines`, form feeds and other Unicode line boundaries stay inside their line.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()

    return lines


def split_csv(string: str) -> list[str]:
    """
    Split a comma-separated string into trimmed items.

    An empty string has no items, and a single trailing comma does not produce an empty item.
    Empty items between commas are kept.
    """
    items = string.split(',')
    if items[-1] == '':
        items.pop()

    return [item.strip() for item in items]


def parse_parameters(parameters_string: str) -> list[tuple[str, str]]:
    """
    Parse `«name»=«default»,[...]` into an ordered list of (name, default) pairs.

    An item without `=` has an empty default; items with an empty name are dropped.
    """
    parameters: list[tuple[str, str]] = []
    for item in split_csv(parameters_string):
        name, _, default = item.partition('=')
        name = name.strip()
        if name == '':
            continue

        parameters.append((name, default.strip()))

    return parameters


def format_parameters(parameters: list[tuple[str, str]], separator: str = ',') -> str:
    return separator.join(f'{name}={default}' for name, default in parameters)


def split_type_and_name(declaration: str) -> Optional[tuple[str, str]]:
    """
    Extract (type, variable name) from a simple declaration such as `int i = 0`.

    Only the first two whitespace-separated words are considered;
    the name is cut at `=` and normalised. Returns None if no name can be found.
    """
    words = declaration.split()
    if len(words) < 2:
        return None

    type_, name_word = words[0], words[1]
    name = normalize_token(name_word.partition('=')[0])
    if name == '':
        return None

    return type_, name
