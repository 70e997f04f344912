"""
# Replace-Rules: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core replacement logic.

A string is replaced by rules as follows:
````
[Literal(«string»)]
    --> (rule 1) --> [«items»]
    --> (rule 2) --> [«items»]
    [...]
````
where each rule scans only the `Literal` items left by the rules before it.
`Node` items are passed through untouched, so content replaced by one rule
is never reprocessed by another.
"""

import re
from typing import Any, Callable, Iterable, NamedTuple, Optional, Union

from replacerules.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from replacerules.items import ContentItem, Highlight, Literal, Node, Text
from replacerules.patterns import Pattern, compile_pattern, ensure_global

Replacer = Union[Callable[..., Any], Any]


def default_replacer(match: str, *_groups: Optional[str]) -> Highlight:
    return Highlight(match)


def bold_replacer(match: str, *_groups: Optional[str]) -> Highlight:
    return Highlight(match, class_name='bold')


class Rule(NamedTuple):
    """
    A replacement rule.

    `pattern` may be a string, a compiled regex, or a `Pattern`, and must use global matching.
    `replacer` may be a static value, or a function called as `replacer(match, *groups)`
    (groups which did not participate in the match are passed as `None`).
    If `replacer` is None, `default_replacer` is used.
    """
    pattern: Union[str, re.Pattern, Pattern]
    replacer: Optional[Replacer] = None


def compute_replacement(replacer: Replacer, match: re.Match) -> Any:
    if callable(replacer):
        return replacer(match.group(), *match.groups())

    return replacer


def replace_pattern(string: str, pattern: Pattern, replacer: Replacer) -> list[ContentItem]:
    """
    Replace all matches of a global pattern in a string.

    Returns the items covering the string in order:
    text before the first match (if the first match does not start the string),
    one item per match, text between consecutive matches, and text after the last match.
    """
    ensure_global(pattern)

    items: list[ContentItem] = []
    last_match_end = 0

    for match in pattern.iterate_matches(string):
        match_start = match.start()
        if match_start > 0 and last_match_end < match_start:
            items.append(Literal(string[last_match_end:match_start]))

        replacement = compute_replacement(replacer, match)
        if isinstance(replacement, Text):
            items.append(Literal(replacement.text))
        else:
            items.append(Node(replacement, key=f'{match.group()}{len(items)}'))

        last_match_end = match.end()

    if last_match_end < len(string):
        items.append(Literal(string[last_match_end:]))

    return items


def apply_rule(items: list[ContentItem], pattern: Pattern, replacer: Replacer) -> list[ContentItem]:
    replaced_items: list[ContentItem] = []

    for item in items:
        if isinstance(item, Literal):
            replaced_items.extend(replace_pattern(item.text, pattern, replacer))
        else:
            replaced_items.append(item)

    return replaced_items


def print_verbose_step(pattern: Pattern, items_before: list[ContentItem], items_after: list[ContentItem]):
    if items_before == items_after:
        no_change_indicator = ' (no change)'
    else:
        no_change_indicator = ''

    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {pattern!r}')
    for item in items_before:
        print(repr(item))
    print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
    for item in items_after:
        print(repr(item))
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {pattern!r}')
    print('\n\n\n\n')


def replace_by_rules(string: str, rules: Iterable[Rule], verbose_mode_enabled: bool = False) -> list[ContentItem]:
    """
    Replace a string by an ordered list of rules.

    Every pattern is validated before any rule is applied,
    so a rule list containing a non-global pattern fails without partial application.
    """
    compiled_rules = [
        (ensure_global(compile_pattern(rule.pattern)), rule.replacer)
        for rule in rules
    ]

    items: list[ContentItem] = [Literal(string)]

    for pattern, replacer in compiled_rules:
        if replacer is None:
            replacer = default_replacer

        items_before = items
        items = apply_rule(items, pattern, replacer)

        if verbose_mode_enabled:
            print_verbose_step(pattern, items_before, items)

    return items
