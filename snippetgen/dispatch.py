"""
# Snippet-Generator: dispatch.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Per-occurrence dispatch.

Resolution order for a keyword:
(1) a user-defined keyword, whose parameters are prompted for and substituted into its template;
(2) a built-in handler from the table in `registry.py`;
(3) the generic fallback, which asks for a free-form fragment.
"""

from snippetgen.assembly import Parts
from snippetgen.constants import ENTRY_POINT_MARKER, MULTILINE_BODY_TERMINATOR
from snippetgen.contexts import GenerationContext
from snippetgen.handlers import HandlerEngine
from snippetgen.prompting import Prompter
from snippetgen.registry import lookup_specification
from snippetgen.stores import KeywordStore, KeywordTemplate
from snippetgen.substitutions import SEQUENTIAL, substitute


def build_tag(occurrence_index: int, token_position: int) -> str:
    return f'occurrence {occurrence_index} (token {token_position})'


def generate_user_keyword_parts(template: 'KeywordTemplate', tag: str, prompter: 'Prompter',
                                apply_mode: str = SEQUENTIAL) -> 'Parts':
    provided_values = {
        name: prompter.ask(f"[{tag}] Value for parameter '{name}'", default)
        for name, default in template.params
    }

    return substitute(template, provided_values, tag=tag, apply_mode=apply_mode)


def generate_fallback_parts(keyword: str, tag: str, prompter: 'Prompter') -> 'Parts':
    """
    Ask for a pasted fragment.

    A fragment that defines its own entry point becomes one top-level block,
    and nothing is added to the entry point for this occurrence.
    """
    prompter.say(f"[{tag}] No tailored snippet for '{keyword}'. Please paste a small code fragment.")
    lines = prompter.read_multiline_body(
        f"Finish the fragment with a single '{MULTILINE_BODY_TERMINATOR}' on its own line:"
    )

    if any(ENTRY_POINT_MARKER in line for line in lines):
        return Parts(
            top=[''.join(f'{line}\n' for line in lines)],
            body=[f'// ({tag}) User provided a full program above; no extra main content added.'],
        )

    return Parts(body=lines)


def dispatch(keyword: str, context: 'GenerationContext', occurrence_index: int, token_position: int,
             store: 'KeywordStore', prompter: 'Prompter', apply_mode: str = SEQUENTIAL) -> 'Parts':
    tag = build_tag(occurrence_index, token_position)

    template = store.get(keyword)
    if template is not None:
        return generate_user_keyword_parts(template, tag, prompter, apply_mode)

    specification = lookup_specification(keyword)
    if specification is not None:
        return HandlerEngine(context, prompter, tag).generate(specification, keyword)

    return generate_fallback_parts(keyword, tag, prompter)
