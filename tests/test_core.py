"""
# Replace-Rules: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import contextlib
import io
import re
import unittest

from replacerules.core import Rule, bold_replacer, default_replacer, replace_by_rules, replace_pattern
from replacerules.exceptions import ValidationError
from replacerules.items import Highlight, Literal, Node, Text
from replacerules.patterns import Pattern
from replacerules.utilities import extract_literal_text


class TestCore(unittest.TestCase):
    def test_default_replacers(self):
        self.assertEqual(default_replacer('cat'), Highlight('cat'))
        self.assertEqual(bold_replacer('cat', 'c'), Highlight('cat', class_name='bold'))

    def test_replace_pattern(self):
        self.assertEqual(replace_pattern('', Pattern('x'), 'X'), [])
        self.assertEqual(replace_pattern('abc', Pattern('x'), 'X'), [Literal('abc')])
        self.assertEqual(replace_pattern('x', Pattern('x'), 'X'), [Node('X', key='x0')])
        self.assertEqual(
            replace_pattern('xax', Pattern('x'), 'X'),
            [Node('X', key='x0'), Literal('a'), Node('X', key='x2')],
        )
        self.assertEqual(
            replace_pattern('xx', Pattern('x'), 'X'),
            [Node('X', key='x0'), Node('X', key='x1')],
        )
        self.assertEqual(
            replace_pattern('ab', Pattern(''), 'X'),
            [Node('X', key='0'), Literal('a'), Node('X', key='2'), Literal('b')],
        )
        self.assertEqual(
            replace_pattern('a', Pattern('|a'), lambda match: match or 'E'),
            [Node('E', key='0'), Node('a', key='a1')],
        )

    def test_replace_pattern_exhaustive_matching(self):
        self.assertEqual(
            replace_pattern('a1b2c3', Pattern(r'\d'), 'X'),
            [
                Literal('a'), Node('X', key='11'),
                Literal('b'), Node('X', key='23'),
                Literal('c'), Node('X', key='35'),
            ],
        )

    def test_replace_pattern_capture_groups(self):
        self.assertEqual(
            replace_pattern('10-20', Pattern(r'(\d+)-(\d+)'), lambda match, first, second: second + first),
            [Node('2010', key='10-200')],
        )

        arguments = []
        replace_pattern('b', Pattern('(a)|(b)'), lambda *args: arguments.append(args))
        self.assertEqual(arguments, [('b', None, 'b')])

    def test_replace_pattern_text_replacement(self):
        items = replace_pattern('cat', Pattern('a'), Text('o'))
        self.assertEqual(items, [Literal('c'), Literal('o'), Literal('t')])
        self.assertTrue(all(isinstance(item, Literal) for item in items))

    def test_replace_pattern_non_global(self):
        with self.assertRaises(ValidationError):
            replace_pattern('x', Pattern('x', global_matching=False), 'X')

    def test_replace_by_rules(self):
        self.assertEqual(replace_by_rules('', [Rule('x')]), [])
        self.assertEqual(replace_by_rules('abc', []), [Literal('abc')])
        self.assertEqual(
            replace_by_rules('Hello {name}, you have {count} items', [
                Rule(r'\{name\}', 'Alice'),
                Rule(r'\{count\}', '5'),
            ]),
            [
                Literal('Hello '),
                Node('Alice', key='{name}1'),
                Literal(', you have '),
                Node('5', key='{count}1'),
                Literal(' items'),
            ],
        )
        self.assertEqual(
            replace_by_rules('**bold** and plain', [Rule(re.compile(r'[*]{2}([^*]+)[*]{2}'), bold_replacer)]),
            [Node(Highlight('**bold**', class_name='bold'), key='**bold**0'), Literal(' and plain')],
        )

    def test_replace_by_rules_default_replacer(self):
        self.assertEqual(
            replace_by_rules('a cat', [Rule('cat')]),
            [Literal('a '), Node(Highlight('cat'), key='cat1')],
        )

    def test_replace_by_rules_non_reprocessing(self):
        self.assertEqual(
            replace_by_rules('the cat sat', [Rule('cat'), Rule('a', 'A')]),
            [
                Literal('the '),
                Node(Highlight('cat'), key='cat1'),
                Literal(' s'),
                Node('A', key='a1'),
                Literal('t'),
            ],
        )

    def test_replace_by_rules_text_is_reprocessed(self):
        self.assertEqual(
            replace_by_rules('ab', [Rule('a', Text('b')), Rule('b', 'B')]),
            [Node('B', key='b0'), Node('B', key='b0')],
        )

    def test_replace_by_rules_order_preservation(self):
        string = 'one 1, two 22, three 333'
        items = replace_by_rules(string, [Rule(r'\d+', lambda match: Text(match)), Rule('two', Text('two'))])
        self.assertEqual(extract_literal_text(items), string)

        items = replace_by_rules(string, [Rule(r'\d+', lambda match: '#' * len(match))])
        self.assertEqual(extract_literal_text(items, node_placeholder='#'), 'one #, two #, three #')
        self.assertEqual(
            ''.join(item.text if isinstance(item, Literal) else item.value for item in items),
            'one #, two ##, three ###',
        )

    def test_replace_by_rules_no_op_rule(self):
        rules = [Rule('[aeiou]', 'V')]
        items = replace_by_rules('banana split', rules)
        items_after_no_op = replace_by_rules('banana split', rules + [Rule('z'), Rule('q+')])
        self.assertEqual(items, items_after_no_op)
        self.assertEqual(extract_literal_text(items_after_no_op), 'bnn splt')

    def test_replace_by_rules_determinism(self):
        rules = [Rule(re.compile('o'), '0'), Rule('l+', lambda match: len(match))]
        self.assertEqual(replace_by_rules('hello world', rules), replace_by_rules('hello world', rules))
        self.assertEqual(
            replace_by_rules('hello world', rules),
            [
                Literal('he'), Node(2, key='ll1'),
                Node('0', key='o1'),
                Literal(' w'),
                Node('0', key='o3'),
                Literal('r'), Node(1, key='l1'), Literal('d'),
            ],
        )

    def test_replace_by_rules_global_match_enforcement(self):
        non_global_pattern = Pattern('x', global_matching=False)
        for string in ['', 'abc', 'x', 'xxx']:
            with self.assertRaises(ValidationError) as context:
                replace_by_rules(string, [Rule(non_global_pattern, 'X')])
            self.assertEqual(context.exception.pattern, 'x')

    def test_replace_by_rules_validates_eagerly(self):
        matches = []
        with self.assertRaises(ValidationError):
            replace_by_rules('ab', [
                Rule('a', lambda match: matches.append(match)),
                Rule(Pattern('b', global_matching=False)),
            ])
        self.assertEqual(matches, [])

    def test_replace_by_rules_replacer_exception_propagates(self):
        def failing_replacer(match):
            raise ValueError(match)

        with self.assertRaises(ValueError):
            replace_by_rules('abc', [Rule('b', failing_replacer)])

    def test_replace_by_rules_verbose_mode(self):
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            replace_by_rules('abc', [Rule('b', 'B'), Rule('z', 'Z')], verbose_mode_enabled=True)

        printed = output.getvalue()
        self.assertIn("BEFORE Pattern('b', global_matching=True)", printed)
        self.assertIn("Node(value='B', key='b1')", printed)
        self.assertIn('(no change)', printed)
        self.assertEqual(printed.count('(no change)'), 1)


if __name__ == '__main__':
    unittest.main()
