"""
# Snippet-Generator: handlers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Declarative handler specifications and the engine that interprets them.

A built-in keyword is described by a `HandlerSpecification`:
````
HandlerSpecification
- prompts: (def) NONE | Prompt(«name», «label», «default», «context_default») [...]
- expansions: (def) NONE | «function of values returning more values» [...]
- declaration: (def) NONE | Declaration(«type», «name», «initialiser»)
- loop_variable: (def) NONE | «name of the answer holding a declaration such as `int i = 0`»
- registered_type: (def) NONE | «type name»
- includes | top | body: (def) NONE | «line» [...]
- selector, variants: (def) NONE | «function of values returning a key», {«key»: HandlerSpecification}
````
Labels, defaults, and lines are text in which `«name»` is replaced by the value of that name.
Available names are `keyword`, `tag`, the answers to the prompts so far, the expansion results,
and, once a declaration has been made, `declaration` and `variable`.
A line referencing a list-valued name is repeated once per element (and omitted for an empty list).
"""

import re
from typing import Callable, NamedTuple, Optional, Union

from snippetgen.assembly import Parts
from snippetgen.contexts import GenerationContext
from snippetgen.prompting import Prompter
from snippetgen.utilities import split_type_and_name

DEFAULT_VARIANT = '*'

Value = Union[str, list[str]]

_PLACEHOLDER_PATTERN_COMPILED = re.compile(pattern=r'« (?P<name> [a-z_]+ ) »', flags=re.VERBOSE)


class Prompt(NamedTuple):
    name: str
    label: str
    default: str
    context_default: Optional[str] = None  # replaces `default` once a variable has been declared


class Declaration(NamedTuple):
    type_: str
    name: str
    initialiser: str


class HandlerSpecification(NamedTuple):
    prompts: tuple['Prompt', ...] = ()
    expansions: tuple[Callable[[dict[str, 'Value']], dict[str, 'Value']], ...] = ()
    declaration: Optional['Declaration'] = None
    loop_variable: Optional[str] = None
    registered_type: Optional[str] = None
    includes: tuple[str, ...] = ()
    top: tuple[str, ...] = ()
    body: tuple[str, ...] = ()
    selector: Optional[Callable[[dict[str, 'Value']], str]] = None
    variants: Optional[dict[str, 'HandlerSpecification']] = None


def fill(text: str, values: dict[str, 'Value']) -> str:
    """
    Replace every `«name»` in the text; list values are joined by `, `.
    """
    def substitute_function(match: re.Match) -> str:
        value = values[match.group('name')]
        if isinstance(value, list):
            return ', '.join(value)

        return value

    return _PLACEHOLDER_PATTERN_COMPILED.sub(substitute_function, text)


def render_lines(line_templates: tuple[str, ...], values: dict[str, 'Value']) -> list[str]:
    lines: list[str] = []
    for line_template in line_templates:
        list_names = [
            match.group('name')
            for match in _PLACEHOLDER_PATTERN_COMPILED.finditer(line_template)
            if isinstance(values[match.group('name')], list)
        ]

        if len(list_names) == 0:
            lines.append(fill(line_template, values))
            continue

        list_name = list_names[0]
        for element in values[list_name]:
            lines.append(fill(line_template, {**values, list_name: element}))

    return lines


def select_answer(name: str) -> Callable[[dict[str, 'Value']], str]:
    def selector(values: dict[str, 'Value']) -> str:
        return values[name]

    return selector


class HandlerEngine:
    """
    Object interpreting handler specifications for one occurrence.

    Asks the prompts in order, applies context effects, and renders the parts.
    The only failure is `PromptCancelledException` propagated from the prompter.
    """
    _context: 'GenerationContext'
    _prompter: 'Prompter'
    _tag: str

    def __init__(self, context: 'GenerationContext', prompter: 'Prompter', tag: str):
        self._context = context
        self._prompter = prompter
        self._tag = tag

    def generate(self, specification: 'HandlerSpecification', keyword: str) -> 'Parts':
        values: dict[str, 'Value'] = {
            'keyword': keyword,
            'tag': self._tag,
        }

        return self._generate(specification, values)

    def _generate(self, specification: 'HandlerSpecification', values: dict[str, 'Value']) -> 'Parts':
        for prompt in specification.prompts:
            values[prompt.name] = self.ask(prompt, values)

        for expansion in specification.expansions:
            values.update(expansion(values))

        self._apply_context_effects(specification, values)

        parts = Parts(
            includes=render_lines(specification.includes, values),
            top=render_lines(specification.top, values),
            body=render_lines(specification.body, values),
        )

        if specification.variants is not None:
            key = specification.selector(values)
            try:
                variant = specification.variants[key]
            except KeyError:
                variant = specification.variants[DEFAULT_VARIANT]

            parts.append(self._generate(variant, values))

        return parts

    def ask(self, prompt: 'Prompt', values: dict[str, 'Value']) -> str:
        last_var = self._context.last_var
        if prompt.context_default is not None and last_var != '':
            default = fill(prompt.context_default, {**values, 'last_var': last_var})
        else:
            default = fill(prompt.default, values)

        label = fill(prompt.label, values)

        return self._prompter.ask(f'[{self._tag}] {label}', default)

    def _apply_context_effects(self, specification: 'HandlerSpecification', values: dict[str, 'Value']):
        declaration = specification.declaration
        if declaration is not None:
            values['declaration'] = self._context.declare_variable(
                fill(declaration.type_, values),
                fill(declaration.name, values),
                fill(declaration.initialiser, values),
            )
            values['variable'] = self._context.last_var

        if specification.loop_variable is not None:
            type_and_name = split_type_and_name(values[specification.loop_variable])
            if type_and_name is not None:
                type_, name = type_and_name
                self._context.register_variable(name, type_)

        if specification.registered_type is not None:
            self._context.register_type(fill(specification.registered_type, values))
