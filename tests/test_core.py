"""
# Snippet-Generator: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import io
import os
import tempfile
import unittest

from snippetgen.core import describe_occurrences, process_line
from snippetgen.exceptions import PromptCancelledException
from snippetgen.prompting import Prompter
from snippetgen.scanners import Occurrence
from snippetgen.stores import KeywordStore


def build_prompter(answers: str) -> Prompter:
    return Prompter(io.StringIO(answers), io.StringIO())


class TestCore(unittest.TestCase):
    def setUp(self):
        self.temporary_directory = tempfile.TemporaryDirectory()
        self.store = KeywordStore(os.path.join(self.temporary_directory.name, 'user_keywords.db'))

    def tearDown(self):
        self.temporary_directory.cleanup()

    def test_describe_occurrences(self):
        self.assertEqual(
            describe_occurrences([Occurrence('if', 1), Occurrence('for', 3)]),
            "Detected occurrences in order: [1] 'if'(token 1) [2] 'for'(token 3)",
        )

    def test_process_line_without_keywords(self):
        prompter = build_prompter('')
        self.assertIsNone(process_line('hello world', self.store, prompter))
        self.assertIsNone(process_line('', self.store, prompter))
        self.assertEqual(prompter.output_stream.getvalue(), '')

    def test_process_line_repeated_type(self):
        prompter = build_prompter('\n' * 4)
        self.assertEqual(
            process_line('int int', self.store, prompter),
            '''\
#include <iostream>

using namespace std;

int main() {
    // (occurrence 1 (token 1)) Demonstrate type: int
    int x = 0;
    cout << "x = " << x << endl;
    // (occurrence 2 (token 2)) Demonstrate type: int
    int x1 = 0;
    cout << "x1 = " << x1 << endl;
    return 0;
}
''',
        )
        output = prompter.output_stream.getvalue()
        self.assertIn("Detected occurrences in order: [1] 'int'(token 1) [2] 'int'(token 2)", output)
        self.assertIn("--- Asking about keyword occurrence 2: 'int' (token 2) ---", output)

    def test_process_line_mixed(self):
        self.store.define('greet', [('name', 'World')], '#include <string>\nsay("hi {name}");\n')
        prompter = build_prompter('\n' * 10)
        program = process_line('greet then throw', self.store, prompter)

        self.assertTrue(program.startswith('#include <iostream>\n#include <string>\n#include <stdexcept>\n\n'))
        self.assertIn('    say("hi World");\n', program)
        self.assertIn('        throw std::runtime_error("Something went wrong");\n', program)
        self.assertTrue(program.endswith('    return 0;\n}\n'))
        self.assertEqual(program.count('int main('), 1)

    def test_process_line_top_blocks(self):
        program = process_line('struct enum', self.store, build_prompter('\n' * 4))
        self.assertIn(
            'using namespace std;\n'
            '\n'
            'struct MyType {\n'
            'public:\n'
            '    int value;\n'
            '    MyType(int value_) : value(value_) {}\n'
            '};\n'
            'enum class Color { Red, Green, Blue };\n'
            '\n'
            'int main() {\n',
            program,
        )

    def test_process_line_verbose(self):
        prompter = build_prompter('\n' * 2)
        process_line('int', self.store, prompter, verbose_mode_enabled=True)
        output = prompter.output_stream.getvalue()
        self.assertIn('<' * 48 + ' PARTS FOR OCCURRENCE 1', output)
        self.assertIn('>' * 48 + ' END OF OCCURRENCE 1', output)

    def test_process_line_cancelled(self):
        self.assertRaises(PromptCancelledException, process_line, 'int if', self.store, build_prompter('\n\n'))


if __name__ == '__main__':
    unittest.main()
