"""
# Replace-Rules: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from typing import Iterable, Optional

from replacerules.items import ContentItem, Literal


def extract_literal_text(items: Iterable[ContentItem], node_placeholder: str = '') -> str:
    """
    Concatenate the text of the literal items, in order.

    Each node is represented by `node_placeholder`.
    """
    return ''.join(
        item.text if isinstance(item, Literal) else node_placeholder
        for item in items
    )


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string
