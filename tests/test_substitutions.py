"""
# Snippet-Generator: test_substitutions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `substitutions.py`.
"""

import unittest

from snippetgen.assembly import Parts
from snippetgen.stores import KeywordTemplate
from snippetgen.substitutions import (
    SIMULTANEOUS,
    resolve_values,
    sequential_substitute,
    simultaneous_substitute,
    substitute,
)


class TestSubstitutions(unittest.TestCase):
    def test_resolve_values(self):
        template = KeywordTemplate('', [('a', '1'), ('b', '2')])
        self.assertEqual(resolve_values(template, None), [('a', '1'), ('b', '2')])
        self.assertEqual(resolve_values(template, {'b': 'x', 'zzz': 'y'}), [('a', '1'), ('b', 'x')])

    def test_sequential_substitute(self):
        self.assertEqual(sequential_substitute('{a} {a} {c}', [('a', 'A')]), 'A A {c}')
        self.assertEqual(sequential_substitute('{a}', [('a', '{b}'), ('b', 'B')]), 'B')
        self.assertEqual(sequential_substitute('{b}', [('a', 'x'), ('b', '{a}')]), '{a}')

    def test_simultaneous_substitute(self):
        self.assertEqual(simultaneous_substitute('{a}', []), '{a}')
        self.assertEqual(simultaneous_substitute('{a} {b}', [('a', '{b}'), ('b', 'B')]), '{b} B')
        self.assertEqual(simultaneous_substitute('a.b {a.b}', [('a.b', 'X')]), 'a.b X')

    def test_substitute(self):
        template = KeywordTemplate(
            '#include <string>\n'
            '  #include vector\n'
            'string s = "hi {name}";\n'
            '    cout << s << "{unknown}" << endl;\n',
            [('name', 'World')],
        )
        self.assertEqual(
            substitute(template, tag='occurrence 1 (token 1)'),
            Parts(
                includes=['<string>', 'vector'],
                body=[
                    '// (occurrence 1 (token 1)) User-defined snippet (with parameter substitution):',
                    'string s = "hi World";',
                    '    cout << s << "{unknown}" << endl;',
                ],
            ),
        )
        self.assertEqual(
            substitute(template, {'name': 'Moon'}).body[1],
            'string s = "hi Moon";',
        )

    def test_substitute_splits_on_newlines_only(self):
        template = KeywordTemplate('a\x0cb\n\u2028c\n')
        self.assertEqual(substitute(template, tag='t').body[1:], ['a\x0cb', '\u2028c'])

    def test_substitute_apply_mode(self):
        template = KeywordTemplate('{a}\n', [('a', '{b}'), ('b', 'B')])
        self.assertEqual(substitute(template).body[1:], ['B'])
        self.assertEqual(substitute(template, apply_mode=SIMULTANEOUS).body[1:], ['{b}'])

    def test_substitute_entry_point(self):
        template = KeywordTemplate('int main() { return 0; }\n')
        with self.assertWarns(UserWarning):
            parts = substitute(template, tag='t')
        self.assertEqual(
            parts,
            Parts(body=['// (t) error: stored template defines its own entry point; not inserted.']),
        )


if __name__ == '__main__':
    unittest.main()
