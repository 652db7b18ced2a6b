from typing import List

from ...structures.token_schemas import Token
from .patterns import WHITESPACE_PATTERN


def split_whitespace(text: str) -> List[Token]:
    """Split text on Unicode White_Space into unclassified tokens

    Args:
        text: Raw input text, may be empty

    Returns:
        One unknown token per non-empty fragment, in source order
    """
    return [Token.unknown(fragment) for fragment in WHITESPACE_PATTERN.split(text) if fragment]
