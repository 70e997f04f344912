"""
# Replace-Rules: patterns.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Rule patterns.
"""

import re
from typing import Iterator, Union

from replacerules.exceptions import ValidationError


class Pattern:
    """
    A compiled regular expression together with its matching mode.

    With global matching, every non-overlapping match is found, each search resuming
    where the previous match ended. Without it, only the first match would be found;
    such patterns are refused by the engine.

    The search position is never stored on the pattern,
    so one pattern may be shared between concurrent callers.
    """
    _regex: re.Pattern
    _global_matching: bool

    def __init__(self, regex: Union[str, re.Pattern], global_matching: bool = True, flags: int = 0):
        if isinstance(regex, re.Pattern):
            if flags:
                raise ValueError('error: cannot pass `flags` with an already-compiled regex')
            self._regex = regex
        else:
            self._regex = re.compile(regex, flags)

        self._global_matching = global_matching

    def __repr__(self) -> str:
        return f'Pattern({self._regex.pattern!r}, global_matching={self._global_matching})'

    @property
    def regex(self) -> re.Pattern:
        return self._regex

    @property
    def global_matching(self) -> bool:
        return self._global_matching

    def iterate_matches(self, string: str) -> Iterator[re.Match]:
        """
        Yield successive non-overlapping matches in `string`.

        Matching follows `re.finditer`, whose cursor is local to each call:
        after a zero-width match, a non-empty match may still start at the same position.
        Matches starting at the end of the string are not yielded,
        so an empty string yields nothing.
        """
        for match in self._regex.finditer(string):
            if match.start() >= len(string):
                break

            yield match


def compile_pattern(pattern: Union[str, re.Pattern, 'Pattern']) -> 'Pattern':
    """
    Coerce a rule pattern into a `Pattern`.

    Strings and compiled regexes are taken to be global.
    """
    if isinstance(pattern, Pattern):
        return pattern

    if isinstance(pattern, (str, re.Pattern)):
        return Pattern(pattern)

    raise TypeError(f'error: unsupported pattern type `{type(pattern).__name__}`')


def ensure_global(pattern: 'Pattern') -> 'Pattern':
    if not pattern.global_matching:
        raise ValidationError(pattern.regex.pattern)

    return pattern
