"""
# Snippet-Generator: shell.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Interactive read-line loop and its commands.

A line of input must be one of the following:
(1) whitespace-only (ignored);
(2) `exit`;
(3) a command (beginning with `:`), see the constant `COMMANDS_HELP` in `constants.py`;
(4) anything else, which is scanned for keywords to generate a program from.
"""

import sys
from typing import Optional, TextIO

from snippetgen.catalog import KeywordCatalog
from snippetgen.constants import (
    BANNER,
    COMMANDS_HELP,
    ENTRY_POINT_MARKER,
    MULTILINE_BODY_TERMINATOR,
    STORE_FORMAT_HELP,
)
from snippetgen.core import process_line
from snippetgen.exceptions import (
    EntryPointSnippetException,
    InvalidKeywordNameException,
    KeywordCollisionException,
    PromptCancelledException,
    UnrecognisedKeywordException,
)
from snippetgen.prompting import Prompter
from snippetgen.stores import KeywordStore, KeywordTemplate, join_snippet_lines
from snippetgen.substitutions import SEQUENTIAL
from snippetgen.utilities import format_parameters, normalize_token, parse_parameters

HELP_KEYWORDS_PER_LINE = 8
ENTRY_POINT_REJECTION_MESSAGE = f"The snippet defines its own entry point ('{ENTRY_POINT_MARKER}'); nothing saved."


class Shell:
    """
    Object running the interactive session over a store and a prompter.
    """
    _store: 'KeywordStore'
    _prompter: 'Prompter'
    _error_stream: TextIO
    _verbose_mode_enabled: bool
    _apply_mode: str

    def __init__(self, store: 'KeywordStore', prompter: 'Prompter', error_stream: Optional[TextIO] = None,
                 verbose_mode_enabled: bool = False, apply_mode: str = SEQUENTIAL):
        self._store = store
        self._prompter = prompter
        self._error_stream = sys.stderr if error_stream is None else error_stream
        self._verbose_mode_enabled = verbose_mode_enabled
        self._apply_mode = apply_mode

    def say(self, message: str = ''):
        self._prompter.say(message)

    def print_error(self, message: str):
        print(f'error: {message}', file=self._error_stream)

    def run(self):
        """
        Run until `exit` or end of input.
        """
        self.say(BANNER)

        while True:
            try:
                line = self._prompter.read_line('Enter keyword(s)> ')
            except PromptCancelledException:
                self.say()
                self.say('EOF received at top-level. Exiting cleanly.')
                return

            try:
                should_continue = self.handle_line(line)
            except PromptCancelledException:
                self.say()
                self.say('EOF received during follow-up prompts. Cancelling and exiting.')
                return

            if not should_continue:
                return

    def handle_line(self, line: str) -> bool:
        """
        Handle one line of input; returns False once exit is requested.
        """
        line = line.strip()
        if line == '':
            return True

        if line.startswith(':'):
            command, *arguments = line.split(maxsplit=1)
            argument = arguments[0].strip() if len(arguments) > 0 else ''
            self.handle_command(command, argument)
            return True

        if line == 'exit':
            self.say('Exit requested. Goodbye.')
            return False

        self.generate(line)
        return True

    def handle_command(self, command: str, argument: str):
        if command in (':add', ':define'):
            self.define_keyword()
        elif command == ':list':
            self.list_keywords()
        elif command == ':search':
            self.search_keywords(argument)
        elif command == ':edit':
            self.edit_keyword(argument)
        elif command == ':remove':
            self.remove_keyword(argument)
        elif command == ':help':
            self.print_help()
        else:
            self.say(f"Unknown command '{command}'. Type :help for commands.")

    def generate(self, line: str):
        program = process_line(line, self._store, self._prompter, self._verbose_mode_enabled, self._apply_mode)
        if program is None:
            self.say('No recognized C++17 or user-defined keyword found in the input. Try again.')
            return

        self.say()
        self.say('--- Generated C++17 program (single integrated example) ---')
        self.say(program)
        self.say('Copy the program into a .cpp file and compile: g++ -std=c++17 yourfile.cpp')
        self.say()

    def report_save(self, saved: bool, success_message: str):
        if saved:
            self.say(success_message)
        else:
            self.print_error(f'failed to save custom keywords to `{self._store.file_name}`; '
                             f'changes are kept for this session only')

    def define_keyword(self):
        name = self._prompter.ask('Keyword name to define (single word, no punctuation)', 'mykw')
        try:
            name = KeywordStore.validate_name(name)
        except InvalidKeywordNameException:
            self.say('Empty keyword name; aborting.')
            return
        except KeywordCollisionException:
            self.say('That name conflicts with a built-in C++17 keyword. Choose another name.')
            return

        if name in self._store:
            if not self._prompter.confirm('Keyword already exists. Overwrite?'):
                self.say('Aborted.')
                return

        params_line = self._prompter.ask('Provide parameters (format: name=default,other=val) or leave blank', '')
        params = parse_parameters(params_line)

        self.say('Paste the snippet that demonstrates this custom keyword. You may use placeholders {name}.')
        snippet_lines = self._prompter.read_multiline_body(
            f"End with a single '{MULTILINE_BODY_TERMINATOR}' line:"
        )

        try:
            saved = self._store.define(name, params, join_snippet_lines(snippet_lines))
        except EntryPointSnippetException:
            self.say(ENTRY_POINT_REJECTION_MESSAGE)
            return

        self.report_save(saved, f"Custom keyword '{name}' saved to disk with {len(params)} parameter(s).")

    @staticmethod
    def describe_keyword(name: str, template: 'KeywordTemplate') -> str:
        if len(template.params) == 0:
            return f'  - {name}'

        return f'  - {name} (params: {format_parameters(template.params, separator=", ")})'

    def list_keywords(self):
        if len(self._store) == 0:
            self.say('No custom keywords stored.')
            return

        self.say('Stored custom keywords and parameters:')
        for name, template in self._store.items():
            self.say(Shell.describe_keyword(name, template))

    def search_keywords(self, term: str):
        if term == '':
            self.say('Usage: :search <term>')
            return

        names = self._store.search(term)
        if len(names) == 0:
            self.say(f"No custom keyword matches '{term}'.")
            return

        self.say(f"Custom keywords matching '{term}':")
        for name in names:
            self.say(Shell.describe_keyword(name, self._store.get(name)))

    def edit_keyword(self, name: str):
        if name == '':
            self.say('Usage: :edit <keyword>')
            return

        name = normalize_token(name)
        template = self._store.get(name)
        if template is None:
            self.say(f"No such custom keyword: '{name}'.")
            return

        self.say(Shell.describe_keyword(name, template))
        self.say(template.snippet.rstrip('\n'))
        action = self._prompter.ask("Edit action ('default', 'append', 'snippet', or 'cancel')", 'cancel')

        if action == 'default':
            if len(template.params) == 0:
                self.say('This keyword has no parameters; use append instead.')
                return

            parameter_name = self._prompter.ask('Parameter whose default to change', template.parameter_names[0])
            if parameter_name not in template.parameter_names:
                self.say(f"No such parameter: '{parameter_name}'.")
                return

            old_default = dict(template.params)[parameter_name]
            new_default = self._prompter.ask(f"New default for '{parameter_name}'", old_default)
            saved = self._store.edit(name, lambda t: t.with_default(parameter_name, new_default))

        elif action == 'append':
            new_params = parse_parameters(
                self._prompter.ask('Parameters to append (format: name=default,other=val)', '')
            )
            if len(new_params) == 0:
                self.say('No parameters given; nothing changed.')
                return

            def append_parameters(t: 'KeywordTemplate') -> 'KeywordTemplate':
                for parameter_name, default in new_params:
                    t = t.with_appended_parameter(parameter_name, default)
                return t

            saved = self._store.edit(name, append_parameters)

        elif action == 'snippet':
            self.say('Paste the replacement snippet. You may use placeholders {name}.')
            snippet_lines = self._prompter.read_multiline_body(
                f"End with a single '{MULTILINE_BODY_TERMINATOR}' line:"
            )
            snippet = join_snippet_lines(snippet_lines)
            try:
                saved = self._store.edit(name, lambda t: t.with_snippet(snippet))
            except EntryPointSnippetException:
                self.say(ENTRY_POINT_REJECTION_MESSAGE)
                return

        else:
            self.say('Aborted.')
            return

        self.report_save(saved, f"Edited '{name}' and saved changes.")

    def remove_keyword(self, name: str):
        if name == '':
            self.say('Usage: :remove <keyword>')
            return

        name = normalize_token(name)
        try:
            saved = self._store.remove(name)
        except UnrecognisedKeywordException as unrecognised_keyword_exception:
            self.say(f"No such custom keyword: '{unrecognised_keyword_exception.keyword}'.")
            return

        self.report_save(saved, f"Removed '{name}' and saved changes.")

    def print_help(self):
        self.say(COMMANDS_HELP)
        self.say(STORE_FORMAT_HELP)

        keywords = KeywordCatalog.sorted_keywords()
        self.say('C++17 standard keywords:')
        for start in range(0, len(keywords), HELP_KEYWORDS_PER_LINE):
            self.say(', '.join(keywords[start:start + HELP_KEYWORDS_PER_LINE]))
        self.say()
