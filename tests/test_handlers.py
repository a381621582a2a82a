"""
# Snippet-Generator: test_handlers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `handlers.py`.
"""

import io
import unittest

from snippetgen.assembly import Parts
from snippetgen.contexts import GenerationContext
from snippetgen.handlers import (
    DEFAULT_VARIANT,
    Declaration,
    HandlerEngine,
    HandlerSpecification,
    Prompt,
    fill,
    render_lines,
    select_answer,
)
from snippetgen.prompting import Prompter


class TestHandlers(unittest.TestCase):
    def test_fill(self):
        self.assertEqual(fill('', {}), '')
        self.assertEqual(fill('no names', {}), 'no names')
        self.assertEqual(fill('«a» + «b»', {'a': 'x', 'b': 'y'}), 'x + y')
        self.assertEqual(fill('f(«args»)', {'args': ['1', '2']}), 'f(1, 2)')
        self.assertRaises(KeyError, fill, '«missing»', {})

    def test_render_lines(self):
        self.assertEqual(
            render_lines(('head «a»', 'case «items»:', 'tail'), {'a': 'A', 'items': ['1', '2']}),
            ['head A', 'case 1:', 'case 2:', 'tail'],
        )
        self.assertEqual(render_lines(('«items»',), {'items': []}), [])

    def test_select_answer(self):
        self.assertEqual(select_answer('kind')({'kind': 'class'}), 'class')


class TestHandlerEngine(unittest.TestCase):
    def test_generate_with_declaration(self):
        specification = HandlerSpecification(
            prompts=(
                Prompt('name', "Name for '«keyword»'", 'x'),
                Prompt('initialiser', 'Initial value for «name»', '0'),
            ),
            declaration=Declaration('«keyword»', '«name»', '«initialiser»'),
            body=('// («tag») «keyword»', '«declaration»', 'use(«variable»);'),
        )
        context = GenerationContext()
        prompter = Prompter(io.StringIO('\n\n\n7\n'), io.StringIO())
        engine = HandlerEngine(context, prompter, 'tag')

        self.assertEqual(
            engine.generate(specification, 'int'),
            Parts(body=['// (tag) int', 'int x = 0;', 'use(x);']),
        )
        self.assertEqual(
            engine.generate(specification, 'int'),
            Parts(body=['// (tag) int', 'int x1 = 7;', 'use(x1);']),
        )
        self.assertEqual(
            prompter.output_stream.getvalue(),
            "[tag] Name for 'int' [x]: [tag] Initial value for x [0]: "
            "[tag] Name for 'int' [x]: [tag] Initial value for x [0]: ",
        )

    def test_context_default(self):
        specification = HandlerSpecification(
            prompts=(Prompt('condition', 'Condition', 'x > 0', context_default='«last_var» > 0'),),
            body=('if («condition») {}',),
        )
        context = GenerationContext()
        engine = HandlerEngine(context, Prompter(io.StringIO('\n\n'), io.StringIO()), 't')

        self.assertEqual(engine.generate(specification, 'if').body, ['if (x > 0) {}'])
        context.register_variable('count', 'int')
        self.assertEqual(engine.generate(specification, 'if').body, ['if (count > 0) {}'])

    def test_loop_variable_and_registered_type(self):
        specification = HandlerSpecification(
            prompts=(Prompt('initialiser', 'Initializer', 'int i = 0'),),
            loop_variable='initialiser',
            registered_type='Loop',
        )
        context = GenerationContext()
        HandlerEngine(context, Prompter(io.StringIO('\n'), io.StringIO()), 't').generate(specification, 'for')

        self.assertEqual(context.vars, {'i': 'int'})
        self.assertEqual(context.last_var, 'i')
        self.assertEqual(context.types, {'Loop'})

    def test_variants(self):
        specification = HandlerSpecification(
            prompts=(Prompt('kind', 'Kind', 'a'),),
            top=('shared',),
            selector=select_answer('kind'),
            variants={
                'a': HandlerSpecification(body=('variant a',)),
                DEFAULT_VARIANT: HandlerSpecification(body=('variant «kind»',)),
            },
        )
        engine = HandlerEngine(GenerationContext(), Prompter(io.StringIO('\nzzz\n'), io.StringIO()), 't')

        self.assertEqual(engine.generate(specification, 'k'), Parts(top=['shared'], body=['variant a']))
        self.assertEqual(engine.generate(specification, 'k'), Parts(top=['shared'], body=['variant zzz']))


if __name__ == '__main__':
    unittest.main()
