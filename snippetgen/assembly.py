"""
# Snippet-Generator: assembly.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Generated fragments and their assembly into one program.
"""

import re
from typing import Iterable, Optional

from snippetgen.constants import INCLUDE_DIRECTIVE, PREAMBLE_INCLUDE

BODY_INDENTATION = '    '


class Parts:
    """
    The fragments generated for one occurrence (or, once aggregated, for a whole line).

    - «includes», header references (bare `vector`, bracketed `<vector>`, or quoted `"my.h"`)
    - «top», top-level declaration blocks
    - «body», entry-point statements
    """
    includes: list[str]
    top: list[str]
    body: list[str]

    def __init__(self, includes: Optional[Iterable[str]] = None, top: Optional[Iterable[str]] = None,
                 body: Optional[Iterable[str]] = None):
        self.includes = [] if includes is None else list(includes)
        self.top = [] if top is None else list(top)
        self.body = [] if body is None else list(body)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Parts):
            return NotImplemented

        return (self.includes, self.top, self.body) == (other.includes, other.top, other.body)

    def __repr__(self) -> str:
        return f'Parts(includes={self.includes!r}, top={self.top!r}, body={self.body!r})'

    def append(self, parts: 'Parts'):
        self.includes.extend(parts.includes)
        self.top.extend(parts.top)
        self.body.extend(parts.body)


def canonicalise_include(reference: str) -> Optional[tuple[str, str]]:
    """
    Compute (key, rendered reference) for an include reference.

    Bare, bracketed, and quoted forms share the key (the bare header name),
    so that `vector`, `<vector>`, and `"vector"` collapse to one entry.
    A bare reference is rendered bracketed. Returns None for an empty reference.
    """
    reference = reference.strip()
    match = re.fullmatch(
        pattern=r'''
            [<] (?P<bracketed> [^>]* ) [>]
                |
            ["] (?P<quoted> [^"]* ) ["]
                |
            (?P<bare> [\s\S]* )
        ''',
        string=reference,
        flags=re.VERBOSE,
    )

    bracketed = match.group('bracketed')
    if bracketed is not None:
        key = bracketed.strip()
        rendered = f'<{key}>'
    else:
        quoted = match.group('quoted')
        if quoted is not None:
            key = quoted.strip()
            rendered = f'"{key}"'
        else:
            key = match.group('bare')
            rendered = f'<{key}>'

    if key == '':
        return None

    return key, rendered


def deduplicate_includes(includes: Iterable[str], preamble_includes: Iterable[str] = ()) -> list[str]:
    """
    Deduplicate include references by key, keeping the first form seen (insertion-stable).
    """
    seen_keys = set(preamble_includes)
    rendered_includes: list[str] = []
    for reference in includes:
        canonical_include = canonicalise_include(reference)
        if canonical_include is None:
            continue

        key, rendered = canonical_include
        if key in seen_keys:
            continue

        seen_keys.add(key)
        rendered_includes.append(rendered)

    return rendered_includes


def assemble(parts: 'Parts') -> str:
    """
    Render aggregated parts as one C++17 program.

    The program is laid out as
    ````
    #include <iostream>
    «deduplicated_includes»

    using namespace std;

    «top_blocks»

    int main() {
        «body_lines»
        return 0;
    }
    ````
    """
    lines = [f'{INCLUDE_DIRECTIVE} <{PREAMBLE_INCLUDE}>']
    lines.extend(
        f'{INCLUDE_DIRECTIVE} {rendered}'
        for rendered in deduplicate_includes(parts.includes, preamble_includes=[PREAMBLE_INCLUDE])
    )
    lines.append('')
    lines.append('using namespace std;')
    lines.append('')

    if len(parts.top) > 0:
        lines.extend(top_block.rstrip('\n') for top_block in parts.top)
        lines.append('')

    lines.append('int main() {')
    lines.extend(
        BODY_INDENTATION + body_line if body_line != '' else ''
        for body_line in parts.body
    )
    lines.append(f'{BODY_INDENTATION}return 0;')
    lines.append('}')

    return '\n'.join(lines) + '\n'
