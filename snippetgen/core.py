"""
# Snippet-Generator: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core generation logic.

A line of input is processed as
````
tokenize -> scan -> (dispatch per occurrence, in order, sharing one context) -> assemble
````
End of input at any prompt raises `PromptCancelledException`,
discarding every fragment generated for the line.
"""

from typing import Optional

from snippetgen.assembly import Parts, assemble
from snippetgen.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from snippetgen.contexts import GenerationContext
from snippetgen.dispatch import dispatch
from snippetgen.prompting import Prompter
from snippetgen.scanners import Occurrence, scan, tokenize
from snippetgen.stores import KeywordStore
from snippetgen.substitutions import SEQUENTIAL


def describe_occurrences(occurrences: list['Occurrence']) -> str:
    return 'Detected occurrences in order:' + ''.join(
        f" [{occurrence_index}] '{occurrence.keyword}'(token {occurrence.token_position})"
        for occurrence_index, occurrence in enumerate(occurrences, start=1)
    )


def print_verbose_parts(prompter: 'Prompter', occurrence_index: int, parts: 'Parts'):
    prompter.say('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' PARTS FOR OCCURRENCE {occurrence_index}')
    prompter.say(f'includes: {parts.includes}')
    prompter.say('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' top')
    for top_block in parts.top:
        prompter.say(top_block)
    prompter.say('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' body')
    for body_line in parts.body:
        prompter.say(body_line)
    prompter.say('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' END OF OCCURRENCE {occurrence_index}')


def generate_parts(occurrences: list['Occurrence'], store: 'KeywordStore', prompter: 'Prompter',
                   verbose_mode_enabled: bool = False, apply_mode: str = SEQUENTIAL) -> 'Parts':
    """
    Fold the occurrences, strictly in order, into aggregated parts.
    """
    context = GenerationContext()
    aggregated_parts = Parts()

    for occurrence_index, (keyword, token_position) in enumerate(occurrences, start=1):
        prompter.say(
            f"--- Asking about keyword occurrence {occurrence_index}: '{keyword}' (token {token_position}) ---"
        )
        parts = dispatch(keyword, context, occurrence_index, token_position, store, prompter, apply_mode)
        if verbose_mode_enabled:
            print_verbose_parts(prompter, occurrence_index, parts)

        aggregated_parts.append(parts)
        prompter.say()

    return aggregated_parts


def process_line(line: str, store: 'KeywordStore', prompter: 'Prompter',
                 verbose_mode_enabled: bool = False, apply_mode: str = SEQUENTIAL) -> Optional[str]:
    """
    Generate one program for a line of input.

    Returns None (having prompted nothing) if the line has no recognised keyword.
    """
    occurrences = scan(tokenize(line), store)
    if len(occurrences) == 0:
        return None

    prompter.say()
    prompter.say(describe_occurrences(occurrences))
    prompter.say()

    aggregated_parts = generate_parts(occurrences, store, prompter, verbose_mode_enabled, apply_mode)

    return assemble(aggregated_parts)
