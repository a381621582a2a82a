"""
# Snippet-Generator: test_assembly.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `assembly.py`.
"""

import unittest

from snippetgen.assembly import Parts, assemble, canonicalise_include, deduplicate_includes


class TestAssembly(unittest.TestCase):
    def test_parts_append(self):
        parts = Parts(includes=['vector'], body=['a;'])
        parts.append(Parts(top=['struct S {};'], body=['b;']))
        self.assertEqual(parts, Parts(includes=['vector'], top=['struct S {};'], body=['a;', 'b;']))

    def test_canonicalise_include(self):
        self.assertEqual(canonicalise_include('vector'), ('vector', '<vector>'))
        self.assertEqual(canonicalise_include(' <vector> '), ('vector', '<vector>'))
        self.assertEqual(canonicalise_include('"my.h"'), ('my.h', '"my.h"'))
        self.assertIsNone(canonicalise_include(''))
        self.assertIsNone(canonicalise_include('<>'))

    def test_deduplicate_includes(self):
        self.assertEqual(deduplicate_includes([]), [])
        self.assertEqual(
            deduplicate_includes(['string', 'vector', '<string>', '"vector"', 'map']),
            ['<string>', '<vector>', '<map>'],
        )
        self.assertEqual(deduplicate_includes(['"x.h"', 'x.h']), ['"x.h"'])
        self.assertEqual(deduplicate_includes(['<iostream>', 'iostream', 'string'], ['iostream']), ['<string>'])

    def test_assemble_empty(self):
        self.assertEqual(
            assemble(Parts()),
            '#include <iostream>\n'
            '\n'
            'using namespace std;\n'
            '\n'
            'int main() {\n'
            '    return 0;\n'
            '}\n',
        )

    def test_assemble(self):
        self.assertEqual(
            assemble(Parts(
                includes=['stdexcept', 'iostream', '<stdexcept>', '"my.h"'],
                top=['struct A {\n    int a;\n};\n', 'enum class C { R };'],
                body=['// note', '', 'int x = 0;'],
            )),
            '#include <iostream>\n'
            '#include <stdexcept>\n'
            '#include "my.h"\n'
            '\n'
            'using namespace std;\n'
            '\n'
            'struct A {\n'
            '    int a;\n'
            '};\n'
            'enum class C { R };\n'
            '\n'
            'int main() {\n'
            '    // note\n'
            '\n'
            '    int x = 0;\n'
            '    return 0;\n'
            '}\n',
        )


if __name__ == '__main__':
    unittest.main()
