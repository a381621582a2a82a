"""
# Snippet-Generator: test_shell.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `shell.py`.
"""

import io
import os
import tempfile
import unittest

from snippetgen.prompting import Prompter
from snippetgen.shell import Shell
from snippetgen.stores import KeywordStore, KeywordTemplate


class TestShell(unittest.TestCase):
    def setUp(self):
        self.temporary_directory = tempfile.TemporaryDirectory()
        self.file_name = os.path.join(self.temporary_directory.name, 'user_keywords.db')
        self.store = KeywordStore(self.file_name)

    def tearDown(self):
        self.temporary_directory.cleanup()

    def run_shell(self, script: str) -> tuple[str, str]:
        prompter = Prompter(io.StringIO(script), io.StringIO())
        error_stream = io.StringIO()
        Shell(self.store, prompter, error_stream=error_stream).run()

        return prompter.output_stream.getvalue(), error_stream.getvalue()

    def test_define_then_generate(self):
        output, errors = self.run_shell(':define\ngreet\nname=World\nsay("hi {name}");\n.\ngreet\n\nexit\n')

        self.assertIn("Custom keyword 'greet' saved to disk with 1 parameter(s).", output)
        self.assertIn('--- Generated C++17 program (single integrated example) ---', output)
        self.assertIn('    say("hi World");\n', output)
        self.assertIn('Exit requested. Goodbye.', output)
        self.assertEqual(errors, '')

        reloaded_store = KeywordStore(self.file_name)
        reloaded_store.load()
        self.assertEqual(reloaded_store.get('greet'), KeywordTemplate('say("hi {name}");\n', [('name', 'World')]))

    def test_define_collision(self):
        output, _ = self.run_shell(':add\nint\n')
        self.assertIn('That name conflicts with a built-in C++17 keyword. Choose another name.', output)
        self.assertEqual(len(self.store), 0)
        self.assertFalse(os.path.exists(self.file_name))

    def test_define_overwrite_declined(self):
        self.store.define('greet', [], 'old\n')
        output, _ = self.run_shell(':define\ngreet\nn\n')
        self.assertIn('Aborted.', output)
        self.assertEqual(self.store.get('greet').snippet, 'old\n')

    def test_no_keywords(self):
        output, _ = self.run_shell('hello there\n\n')
        self.assertIn('No recognized C++17 or user-defined keyword found in the input. Try again.', output)
        self.assertIn('EOF received at top-level. Exiting cleanly.', output)

    def test_cancel_during_follow_up(self):
        output, _ = self.run_shell('int\n')
        self.assertIn('EOF received during follow-up prompts. Cancelling and exiting.', output)
        self.assertNotIn('--- Generated C++17 program', output)

    def test_list_search_edit_remove(self):
        self.store.define('greet', [('name', 'World')], 'say("hi {name}");\n')
        self.store.define('bye', [], 'say("bye");\n')

        output, _ = self.run_shell(
            ':list\n'
            ':search HI\n'
            ':edit greet\ndefault\n\nMoon\n'
            ':edit bye\nappend\ntimes=2\n'
            ':remove nope\n'
            ':remove bye\n'
            ':frobnicate\n'
            'exit\n'
        )

        self.assertIn('Stored custom keywords and parameters:\n  - bye\n  - greet (params: name=World)\n', output)
        self.assertIn("Custom keywords matching 'HI':\n  - greet (params: name=World)\n", output)
        self.assertIn("Edited 'greet' and saved changes.", output)
        self.assertIn("Edited 'bye' and saved changes.", output)
        self.assertIn("No such custom keyword: 'nope'.", output)
        self.assertIn("Removed 'bye' and saved changes.", output)
        self.assertIn("Unknown command ':frobnicate'. Type :help for commands.", output)

        self.assertEqual(self.store.get('greet').params, [('name', 'Moon')])
        self.assertNotIn('bye', self.store)

    def test_define_rejects_entry_point_snippet(self):
        self.store.define('greet', [], 'say("hi");\n')
        with open(self.file_name, 'rb') as store_file:
            store_bytes = store_file.read()

        output, _ = self.run_shell(':define\nprog\n\nint main() {\n    return 0;\n}\n.\nexit\n')

        self.assertIn("The snippet defines its own entry point ('int main('); nothing saved.", output)
        self.assertNotIn('prog', self.store)
        with open(self.file_name, 'rb') as store_file:
            self.assertEqual(store_file.read(), store_bytes)

    def test_edit_rejects_entry_point_snippet(self):
        self.store.define('greet', [], 'old\n')
        output, _ = self.run_shell(':edit greet\nsnippet\nint main() {}\n.\nexit\n')

        self.assertIn("The snippet defines its own entry point ('int main('); nothing saved.", output)
        self.assertEqual(self.store.get('greet').snippet, 'old\n')

    def test_commands_split_on_any_whitespace(self):
        self.store.define('greet', [], 'say("hi");\n')
        self.store.define('bye', [], 'say("bye");\n')

        output, _ = self.run_shell(':remove\tBye\n:edit \t GREET\ncancel\n:search\tHI\nexit\n')

        self.assertIn("Removed 'bye' and saved changes.", output)
        self.assertIn('  - greet\nsay("hi");\n', output)
        self.assertIn("Custom keywords matching 'HI':\n  - greet\n", output)
        self.assertNotIn('Unknown command', output)
        self.assertNotIn('bye', self.store)

    def test_edit_snippet(self):
        self.store.define('greet', [], 'old\n')
        self.run_shell(':edit greet\nsnippet\nnew line\n.\nexit\n')
        self.assertEqual(self.store.get('greet').snippet, 'new line\n')

    def test_save_failure(self):
        self.store = KeywordStore(self.temporary_directory.name)
        output, errors = self.run_shell(':define\ngreet\n\nhi\n.\ngreet\nexit\n')
        self.assertIn('error: failed to save custom keywords', errors)
        self.assertIn('    hi\n', output)

    def test_help(self):
        output, _ = self.run_shell(':help\nexit\n')
        self.assertIn('Commands:', output)
        self.assertIn('alignas, alignof, and, and_eq, asm, auto, bitand, bitor\n', output)


if __name__ == '__main__':
    unittest.main()
