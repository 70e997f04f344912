"""
# Replace-Rules: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import json
import re
import sys

from replacerules._version import __version__
from replacerules.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    RULE_ARGUMENT_SEPARATOR,
    RULE_ARGUMENT_SYNTAX_HELP,
)
from replacerules.core import Rule, replace_by_rules
from replacerules.patterns import compile_pattern
from replacerules.translations import TranslationTable, Translator

DESCRIPTION = '''
    Replace a string by an ordered list of rules, printing the resulting items.
'''
STRING_HELP = '''
    string to be replaced
'''
TRANSLATIONS_FILE_NAME_HELP = '''
    name of JSON translation table file (mapping id to locale to translation),
    to be used with -i and -l instead of -s
'''
ID_HELP = '''
    translation id to look up
'''
LOCALE_HELP = '''
    locale to look up the translation id in
'''
RULE_HELP = f'''
    rule of the form `«pattern»` or `«pattern»{RULE_ARGUMENT_SEPARATOR}«substitute»`
    (may be given more than once; rules are applied in order)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the items before and after every rule applied)
'''


def parse_rule_argument(rule_argument: str) -> Rule:
    """
    Parse a rule argument of the form `«pattern»` or `«pattern»=>«substitute»`.

    The first occurrence of `=>` separates «pattern» from «substitute».
    Raises `re.error` if «pattern» is not a valid regular expression.
    """
    pattern, separator, substitute = rule_argument.partition(RULE_ARGUMENT_SEPARATOR)
    compiled_pattern = compile_pattern(pattern)

    if separator:
        return Rule(compiled_pattern, substitute)

    return Rule(compiled_pattern)


def load_translations(translations_file_name: str) -> TranslationTable:
    with open(translations_file_name, 'r', encoding='utf-8') as translations_file:
        return json.load(translations_file)


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=RULE_ARGUMENT_SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--string',
        dest='string',
        help=STRING_HELP,
    )
    argument_parser.add_argument(
        '-t', '--translations',
        dest='translations_file_name',
        help=TRANSLATIONS_FILE_NAME_HELP,
        metavar='translations.json',
    )
    argument_parser.add_argument(
        '-i', '--id',
        dest='id_',
        help=ID_HELP,
    )
    argument_parser.add_argument(
        '-l', '--locale',
        dest='locale',
        help=LOCALE_HELP,
    )
    argument_parser.add_argument(
        '-r', '--rule',
        dest='rule_arguments',
        action='append',
        default=[],
        help=RULE_HELP,
        metavar='PATTERN[=>SUBSTITUTE]',
    )

    return argument_parser.parse_args()


def resolve_string(parsed_arguments: argparse.Namespace) -> str:
    string = parsed_arguments.string
    translations_file_name = parsed_arguments.translations_file_name
    id_ = parsed_arguments.id_
    locale = parsed_arguments.locale

    if string is not None:
        if translations_file_name is not None:
            print('error: option -s (or --string) cannot be used with option -t (or --translations)', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        return string

    if translations_file_name is None or id_ is None or locale is None:
        print('error: either option -s (or --string), or all of options -t, -i, and -l, must be given', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    try:
        translations = load_translations(translations_file_name)
    except FileNotFoundError:
        print(f'error: argument `{translations_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except json.JSONDecodeError as json_decode_error:
        print(f'error: argument `{translations_file_name}`: invalid JSON ({json_decode_error})', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except UnicodeDecodeError:
        print(f'error: argument `{translations_file_name}`: file is not valid UTF-8', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except OSError as os_error:
        print(f'error: argument `{translations_file_name}`: cannot read file ({os_error.strerror})', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    translator = Translator(lambda: locale, translations)

    return translator.translate(id_)


def main():
    parsed_arguments = parse_command_line_arguments()
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    rules = []
    for rule_argument in parsed_arguments.rule_arguments:
        try:
            rules.append(parse_rule_argument(rule_argument))
        except re.error as regex_error:
            print(f'error: argument `{rule_argument}`: bad pattern ({regex_error})', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    string = resolve_string(parsed_arguments)
    items = replace_by_rules(string, rules, verbose_mode_enabled)

    for item in items:
        print(repr(item))


if __name__ == '__main__':
    main()
