"""
# Snippet-Generator: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

USER_KEYWORDS_FILE_NAME = 'user_keywords.db'

KEYWORD_MARKER_PREFIX = '===KEYWORD:'
PARAMS_MARKER_PREFIX = '===PARAMS:'
MARKER_SUFFIX = '==='
END_MARKER = '===END==='

MULTILINE_BODY_TERMINATOR = '.'
INCLUDE_DIRECTIVE = '#include'
ENTRY_POINT_MARKER = 'int main('
PREAMBLE_INCLUDE = 'iostream'

CPP17_KEYWORDS = (
    'alignas', 'alignof', 'and', 'and_eq', 'asm', 'auto', 'bitand', 'bitor', 'bool', 'break',
    'case', 'catch', 'char', 'char16_t', 'char32_t', 'class', 'compl', 'const', 'constexpr', 'const_cast',
    'continue', 'decltype', 'default', 'delete', 'do', 'double', 'dynamic_cast', 'else', 'enum', 'explicit',
    'export', 'extern', 'false', 'float', 'for', 'friend', 'goto', 'if', 'inline', 'int',
    'long', 'mutable', 'namespace', 'new', 'noexcept', 'not', 'not_eq', 'nullptr', 'operator', 'or',
    'or_eq', 'private', 'protected', 'public', 'register', 'reinterpret_cast', 'return', 'short', 'signed', 'sizeof',
    'static', 'static_assert', 'static_cast', 'struct', 'switch', 'template', 'this', 'thread_local', 'throw', 'true',
    'try', 'typedef', 'typeid', 'typename', 'union', 'unsigned', 'using', 'virtual', 'void', 'volatile',
    'wchar_t', 'while', 'xor', 'xor_eq',
)

COMMANDS_HELP = '''\
Commands:
  :add / :define       - define a new custom keyword with parameters
  :list                - list stored custom keywords
  :search <term>       - search stored custom keywords by name or snippet
  :edit <keyword>      - change defaults, append parameters, or replace the snippet
  :remove <keyword>    - remove a stored custom keyword
  :help                - show this help (includes C++ standard keywords)
Type 'exit' or send EOF to quit.
'''

BANNER = f'''\
C++17 Keyword-driven snippet generator (sequence-aware, with parameterised custom keywords)
Enter a line containing C++17 keywords (duplicates allowed). The tool
will ask follow-up questions for every occurrence in order and then
produce a single integrated C++17 program.

{COMMANDS_HELP}'''

STORE_FORMAT_HELP = '''\
In the user keyword store, a block is written as
````
===KEYWORD:«name»===
===PARAMS:«parameter»=«default»,[...]===
«snippet_line»
[...]
===END===
````
- The PARAMS line is optional; a block without it has no parameters.
- A block missing its END line at end of file is kept as far as it was read.
'''
