"""
# Snippet-Generator: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import io
import sys
from typing import Optional, TextIO

from snippetgen._version import __version__
from snippetgen.constants import COMMAND_LINE_ERROR_EXIT_CODE, USER_KEYWORDS_FILE_NAME
from snippetgen.prompting import PacedStream, Prompter
from snippetgen.shell import Shell
from snippetgen.stores import KeywordStore
from snippetgen.substitutions import SEQUENTIAL, SIMULTANEOUS

DESCRIPTION = '''
    Interactively generate C++17 example programs from keywords.
'''
STORE_FILE_NAME_HELP = f'''
    name of the user keyword store file (default `{USER_KEYWORDS_FILE_NAME}`)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the fragments generated for every occurrence)
'''
DELAY_HELP = '''
    delay in milliseconds between output characters (default 0)
'''
APPLY_MODE_HELP = '''
    how parameter values are substituted into custom keyword templates:
    SEQUENTIAL (default; a value may itself contain a later placeholder)
    or SIMULTANEOUS (single pass)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-s', '--store',
        dest='store_file_name',
        default=USER_KEYWORDS_FILE_NAME,
        help=STORE_FILE_NAME_HELP,
        metavar='user_keywords.db',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-d', '--delay',
        dest='delay_milliseconds',
        default=0,
        type=float,
        help=DELAY_HELP,
        metavar='MS',
    )
    argument_parser.add_argument(
        '-m', '--apply-mode',
        dest='apply_mode',
        choices=[SEQUENTIAL, SIMULTANEOUS],
        default=SEQUENTIAL,
        help=APPLY_MODE_HELP,
    )

    return argument_parser.parse_args(arguments)


def build_input_stream(stream: TextIO) -> TextIO:
    """
    Have undecodable input bytes read as replacement characters rather than raise.
    """
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors='replace')

    return stream


def build_output_stream(stream: TextIO, delay_milliseconds: float):
    if delay_milliseconds > 0:
        return PacedStream(stream, delay_milliseconds)

    return stream


def main():
    parsed_arguments = parse_command_line_arguments()
    store_file_name = parsed_arguments.store_file_name
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    delay_milliseconds = parsed_arguments.delay_milliseconds
    apply_mode = parsed_arguments.apply_mode

    if delay_milliseconds < 0:
        print('error: option -d (or --delay) must not be negative', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    input_stream = build_input_stream(sys.stdin)
    output_stream = build_output_stream(sys.stdout, delay_milliseconds)

    store = KeywordStore(store_file_name)
    store.load()

    prompter = Prompter(input_stream, output_stream)
    shell = Shell(store, prompter, verbose_mode_enabled=verbose_mode_enabled, apply_mode=apply_mode)
    shell.run()


if __name__ == '__main__':
    main()
