import os
import string
from typing import Sequence


_DELIMITERS = set(string.whitespace) | set(string.punctuation) - {"'"}


def common_prefix(texts: Sequence[str]) -> str:
    """Longest common prefix that ends on a token boundary.

    A token ends at whitespace or after punctuation such as ``:``,
    ``-`` or ``?``. The raw character prefix is cut back to the last
    delimiter when it would end inside a word of any of the texts.

    Examples
    --------
    >>> common_prefix(["Question 4: red", "Question 4: green"])
    'Question 4: '
    >>> common_prefix(["Q4:red", "Q4:green"])
    'Q4:'
    >>> common_prefix(["Rate blue", "Rate blueberry"])
    'Rate '
    """
    if len(texts) == 0:
        return ""
    prefix = os.path.commonprefix(list(texts))
    if all(_is_boundary(text, len(prefix)) for text in texts):
        return prefix
    for position in range(len(prefix), 0, -1):
        if prefix[position - 1] in _DELIMITERS:
            return prefix[:position]
    return ""


def common_suffix(texts: Sequence[str]) -> str:
    """Longest common suffix that starts on a token boundary."""
    reversed_suffix = common_prefix([text[::-1] for text in texts])
    return reversed_suffix[::-1]


def _is_boundary(text: str, position: int) -> bool:
    if position in (0, len(text)):
        return True
    return text[position - 1] in _DELIMITERS or text[position].isspace()
