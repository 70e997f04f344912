"""
# Replace-Rules: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

RULE_ARGUMENT_SEPARATOR = '=>'

RULE_ARGUMENT_SYNTAX_HELP = '''\
A rule argument must be of the form `«pattern»` or `«pattern»=>«substitute»`.
- «pattern» is a Python regular expression, matched globally.
- «substitute» is a static replacement value, emitted as a node.
- If `=>«substitute»` is omitted, each match is wrapped in a highlight.
- Rules are applied in the order given; text replaced by an earlier rule
  is never matched by a later rule.
'''
