"""
# Replace-Rules: items.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Content items making up a replaced sequence, and the values replacers may return.

A sequence is an ordered list of
- `Literal` items, holding source text still eligible for matching by later rules, and
- `Node` items, holding finalised replacement values, which later rules never see.

A replacer returns either `Text` (plain text, emitted as a `Literal`)
or any other value (opaque to the engine, emitted as a `Node`).
"""

from typing import Any, NamedTuple, Optional, Union


class Literal(NamedTuple):
    text: str


class Node(NamedTuple):
    """
    A replacement result.

    `key` is `«matched_text»«output_length»`, where «output_length» is the number of items
    already emitted for the literal being scanned. It is unique within one scan of one literal,
    which is all a renderer needs to tell repeated identical matches apart.
    """
    value: Any
    key: str


class Text(NamedTuple):
    """
    Plain-text replacement value.

    Emitted as a `Literal`, so rules later in the list may still match inside it.
    """
    text: str


class Highlight(NamedTuple):
    """
    Minimal highlighted-span marker, produced by the default replacers.
    """
    text: str
    class_name: Optional[str] = None


ContentItem = Union[Literal, Node]
