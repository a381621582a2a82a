"""
# Snippet-Generator: substitutions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder substitution for user-defined keyword templates.
"""

import re
import warnings
from typing import Optional

from snippetgen.assembly import Parts
from snippetgen.constants import ENTRY_POINT_MARKER, INCLUDE_DIRECTIVE
from snippetgen.stores import KeywordTemplate
from snippetgen.utilities import split_lines

SEQUENTIAL = 'SEQUENTIAL'
SIMULTANEOUS = 'SIMULTANEOUS'


def build_placeholder(parameter_name: str) -> str:
    return '{' + parameter_name + '}'


def resolve_values(template: 'KeywordTemplate', provided_values: Optional[dict[str, str]]) -> list[tuple[str, str]]:
    """
    Resolve each declared parameter, in declaration order, to its provided value or its stored default.
    """
    if provided_values is None:
        provided_values = {}

    return [
        (name, provided_values.get(name, default))
        for name, default in template.params
    ]


def sequential_substitute(text: str, resolved_values: list[tuple[str, str]]) -> str:
    """
    Replace placeholders one parameter at a time over the mutating text.

    Since later replacements operate on already-substituted text,
    a value containing the placeholder of a later parameter is itself substituted.
    """
    for name, value in resolved_values:
        text = text.replace(build_placeholder(name), value)

    return text


def simultaneous_substitute(text: str, resolved_values: list[tuple[str, str]]) -> str:
    """
    Replace all placeholders in a single pass; substituted values are never re-scanned.
    """
    if len(resolved_values) == 0:
        return text

    value_from_placeholder = {
        build_placeholder(name): value
        for name, value in resolved_values
    }
    pattern = '|'.join(
        re.escape(placeholder)
        for placeholder in value_from_placeholder
    )

    return re.sub(
        pattern=pattern,
        repl=lambda match: value_from_placeholder[match.group()],
        string=text,
    )


def compute_include_directive_match(line: str) -> Optional[re.Match]:
    return re.fullmatch(
        pattern=fr'[\s]* {re.escape(INCLUDE_DIRECTIVE)} (?P<reference> [\s\S]* )',
        string=line,
        flags=re.VERBOSE,
    )


def substitute(template: 'KeywordTemplate', provided_values: Optional[dict[str, str]] = None,
               tag: str = 'user keyword', apply_mode: str = SEQUENTIAL) -> 'Parts':
    """
    Substitute parameter values into a template and split the result into parts.

    Lines whose trimmed form begins with `#include` become includes (directive stripped);
    all other lines become body lines, verbatim and in order, after one header comment.
    Placeholders not declared by the template are left as literal text.
    """
    if ENTRY_POINT_MARKER in template.snippet:
        warnings.warn(
            f'warning: stored template for ({tag}) contains the entry point marker `{ENTRY_POINT_MARKER}`; '
            f'template skipped\n\n'
            f'Possible cause:\n'
            f'- The user keyword store has been edited outside of this program'
        )
        return Parts(body=[f'// ({tag}) error: stored template defines its own entry point; not inserted.'])

    resolved_values = resolve_values(template, provided_values)
    if apply_mode == SIMULTANEOUS:
        text = simultaneous_substitute(template.snippet, resolved_values)
    else:
        text = sequential_substitute(template.snippet, resolved_values)

    parts = Parts(body=[f'// ({tag}) User-defined snippet (with parameter substitution):'])
    for line in split_lines(text):
        include_directive_match = compute_include_directive_match(line)
        if include_directive_match is not None:
            parts.includes.append(include_directive_match.group('reference').strip())
        else:
            parts.body.append(line)

    return parts
