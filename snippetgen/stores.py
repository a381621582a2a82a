"""
# Snippet-Generator: stores.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Persistent store of user-defined keywords.
"""

import contextlib
import os
import re
import tempfile
from typing import Callable, Iterable, Optional

from snippetgen.catalog import KeywordCatalog
from snippetgen.constants import (
    END_MARKER,
    ENTRY_POINT_MARKER,
    KEYWORD_MARKER_PREFIX,
    MARKER_SUFFIX,
    PARAMS_MARKER_PREFIX,
    USER_KEYWORDS_FILE_NAME,
)
from snippetgen.exceptions import (
    EntryPointSnippetException,
    InvalidKeywordNameException,
    KeywordCollisionException,
    UnrecognisedKeywordException,
)
from snippetgen.utilities import format_parameters, normalize_token, parse_parameters, split_lines


class KeywordTemplate:
    """
    A user-defined keyword's template.

    Consists of
    - «snippet», multi-line text which may contain `{«parameter»}` placeholders and `#include` lines
    - «params», an ordered list of («parameter», «default») pairs

    Templates are not mutated in place; the `with_*` methods return edited copies.
    """
    _snippet: str
    _params: tuple[tuple[str, str], ...]

    def __init__(self, snippet: str, params: Iterable[tuple[str, str]] = ()):
        self._snippet = snippet
        self._params = tuple((name, default) for name, default in params)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeywordTemplate):
            return NotImplemented

        return self._snippet == other._snippet and self._params == other._params

    def __repr__(self) -> str:
        return f'KeywordTemplate(snippet={self._snippet!r}, params={list(self._params)!r})'

    @property
    def snippet(self) -> str:
        return self._snippet

    @property
    def params(self) -> list[tuple[str, str]]:
        return list(self._params)

    @property
    def parameter_names(self) -> list[str]:
        return [name for name, _ in self._params]

    def with_default(self, parameter_name: str, default: str) -> 'KeywordTemplate':
        if parameter_name not in self.parameter_names:
            raise KeyError(parameter_name)

        params = [
            (name, default if name == parameter_name else old_default)
            for name, old_default in self._params
        ]

        return KeywordTemplate(self._snippet, params)

    def with_appended_parameter(self, parameter_name: str, default: str) -> 'KeywordTemplate':
        if parameter_name in self.parameter_names:
            return self.with_default(parameter_name, default)

        return KeywordTemplate(self._snippet, [*self._params, (parameter_name, default)])

    def with_snippet(self, snippet: str) -> 'KeywordTemplate':
        return KeywordTemplate(snippet, self._params)


def join_snippet_lines(lines: Iterable[str]) -> str:
    return ''.join(f'{line}\n' for line in lines)


class StoreParser:
    """
    Static class parsing the block-delimited store format.

    See the constant `STORE_FORMAT_HELP` in `constants.py`.

    Parsing is tolerant:
    - lines outside a block are ignored;
    - unrecognised `===«TAG»:«value»===` marker lines inside a block are ignored;
    - a block still open at end of text is committed from whatever was buffered;
    - keyword names are normalised, and a block whose name is empty or a catalog keyword is skipped.
    """
    def __new__(cls):
        raise TypeError('StoreParser cannot be instantiated')

    @staticmethod
    def compute_keyword_marker_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=fr'''
                {re.escape(KEYWORD_MARKER_PREFIX)}
                (?P<name> [\s\S]*? )
                {re.escape(MARKER_SUFFIX)}
                [\s\S]*
            ''',
            string=line,
            flags=re.VERBOSE,
        )

    @staticmethod
    def compute_params_marker_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=fr'''
                {re.escape(PARAMS_MARKER_PREFIX)}
                (?P<parameters> [\s\S]* )
                {re.escape(MARKER_SUFFIX)}
            ''',
            string=line,
            flags=re.VERBOSE,
        )

    @staticmethod
    def compute_unknown_marker_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=r'=== [A-Z_]+ : [\s\S]* ===',
            string=line,
            flags=re.VERBOSE,
        )

    @staticmethod
    def parse(text: str) -> dict[str, 'KeywordTemplate']:
        template_from_name: dict[str, 'KeywordTemplate'] = {}

        name: Optional[str] = None
        params: list[tuple[str, str]] = []
        snippet_lines: list[str] = []

        for line in split_lines(text):
            if name is None:
                keyword_marker_match = StoreParser.compute_keyword_marker_match(line)
                if keyword_marker_match is None:
                    continue

                marked_name = normalize_token(keyword_marker_match.group('name').strip())
                if marked_name == '' or KeywordCatalog.contains(marked_name):
                    continue

                name = marked_name
                params = []
                snippet_lines = []
                continue

            if line == END_MARKER:
                template_from_name[name] = KeywordTemplate(join_snippet_lines(snippet_lines), params)
                name = None
                continue

            params_marker_match = StoreParser.compute_params_marker_match(line)
            if params_marker_match is not None:
                params = parse_parameters(params_marker_match.group('parameters').strip())
                continue

            if StoreParser.compute_unknown_marker_match(line) is not None:
                continue

            snippet_lines.append(line)

        # At end of text, keep a truncated block
        if name is not None:
            template_from_name[name] = KeywordTemplate(join_snippet_lines(snippet_lines), params)

        return template_from_name

    @staticmethod
    def serialise(template_from_name: dict[str, 'KeywordTemplate']) -> str:
        blocks: list[str] = []
        for name in sorted(template_from_name):
            template = template_from_name[name]

            block = f'{KEYWORD_MARKER_PREFIX}{name}{MARKER_SUFFIX}\n'
            if len(template.params) > 0:
                block += f'{PARAMS_MARKER_PREFIX}{format_parameters(template.params)}{MARKER_SUFFIX}\n'

            snippet = template.snippet
            if snippet != '' and not snippet.endswith('\n'):
                snippet += '\n'
            block += snippet
            block += f'{END_MARKER}\n'

            blocks.append(block)

        return ''.join(blocks)


class KeywordStore:
    """
    Object storing user-defined keywords, persisted to a single file.

    The file is read once by `load()` and rewritten wholesale after every mutation.
    A failed rewrite is reported by a False return value;
    the in-memory keywords remain authoritative for the session either way.
    """
    _file_name: str
    _template_from_name: dict[str, 'KeywordTemplate']

    def __init__(self, file_name: str = USER_KEYWORDS_FILE_NAME):
        self._file_name = file_name
        self._template_from_name = {}

    @property
    def file_name(self) -> str:
        return self._file_name

    def __contains__(self, name: str) -> bool:
        return normalize_token(name) in self._template_from_name

    def __len__(self) -> int:
        return len(self._template_from_name)

    def get(self, name: str) -> Optional['KeywordTemplate']:
        return self._template_from_name.get(normalize_token(name))

    def names(self) -> list[str]:
        return sorted(self._template_from_name)

    def items(self) -> list[tuple[str, 'KeywordTemplate']]:
        return [(name, self._template_from_name[name]) for name in self.names()]

    def search(self, term: str) -> list[str]:
        """
        Names of keywords whose name or snippet contains the term (case-insensitively).
        """
        term = term.strip().lower()

        return [
            name
            for name, template in self.items()
            if term in name or term in template.snippet.lower()
        ]

    def load(self) -> dict[str, 'KeywordTemplate']:
        try:
            with open(self._file_name, 'r', encoding='utf-8') as store_file:
                text = store_file.read()
        except (OSError, UnicodeDecodeError):
            text = ''

        self._template_from_name = StoreParser.parse(text)

        return dict(self._template_from_name)

    def save(self) -> bool:
        """
        Rewrite the store file wholesale, returning whether the rewrite succeeded.

        The text is written to a temporary file in the same directory, which then replaces the store file,
        so that a failed save leaves the previous file intact.
        """
        directory_name = os.path.dirname(os.path.abspath(self._file_name))
        temporary_file_name = None
        try:
            text = StoreParser.serialise(self._template_from_name)
            file_descriptor, temporary_file_name = tempfile.mkstemp(dir=directory_name, suffix='.tmp')
            with open(file_descriptor, 'w', encoding='utf-8') as temporary_file:
                temporary_file.write(text)
            os.replace(temporary_file_name, self._file_name)
        except (OSError, UnicodeError):
            if temporary_file_name is not None:
                with contextlib.suppress(OSError):
                    os.remove(temporary_file_name)
            return False

        return True

    @staticmethod
    def validate_name(name: str) -> str:
        """
        Normalise a proposed keyword name, rejecting empty names and catalog keywords.
        """
        normalised_name = normalize_token(name)
        if normalised_name == '':
            raise InvalidKeywordNameException(f'keyword name `{name}` is empty after normalisation')

        if KeywordCatalog.contains(normalised_name):
            raise KeywordCollisionException(normalised_name)

        return normalised_name

    @staticmethod
    def validate_snippet(snippet: str):
        if ENTRY_POINT_MARKER in snippet:
            raise EntryPointSnippetException(
                f'snippet contains the entry point marker `{ENTRY_POINT_MARKER}`'
            )

    def define(self, name: str, params: Iterable[tuple[str, str]], snippet: str) -> bool:
        name = KeywordStore.validate_name(name)
        KeywordStore.validate_snippet(snippet)
        self._template_from_name[name] = KeywordTemplate(snippet, params)

        return self.save()

    def remove(self, name: str) -> bool:
        normalised_name = normalize_token(name)
        try:
            del self._template_from_name[normalised_name]
        except KeyError:
            raise UnrecognisedKeywordException(normalised_name)

        return self.save()

    def edit(self, name: str, mutator: Callable[['KeywordTemplate'], 'KeywordTemplate']) -> bool:
        normalised_name = normalize_token(name)
        try:
            template = self._template_from_name[normalised_name]
        except KeyError:
            raise UnrecognisedKeywordException(normalised_name)

        edited_template = mutator(template)
        KeywordStore.validate_snippet(edited_template.snippet)
        self._template_from_name[normalised_name] = edited_template

        return self.save()
