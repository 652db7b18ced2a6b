"""Separation of trailing punctuation marks from text fragments."""

from typing import List, Optional, Tuple

import regex
from loguru import logger

from ...structures.token_schemas import Punctuation, Token
from .patterns import TRAILING_PUNCTUATION_PATTERN


def split_at_match(
    text: str, match: regex.Match
) -> Tuple[Optional[str], Optional[Punctuation], Optional[str]]:
    """Split text around a punctuation match.

    Args:
        text: Fragment the match was found in
        match: Match covering the punctuation run

    Returns:
        Tuple of (before, mark, after). Empty sides are None. mark is None when
        the matched run is not exactly one recognized mark.
    """
    before = text[: match.start()] or None
    after = text[match.end() :] or None
    return before, Punctuation.from_mark(match.group()), after


def separate_end_punctuation(
    tokens: List[Token], pattern: regex.Pattern = TRAILING_PUNCTUATION_PATTERN
) -> List[Token]:
    """Replace tokens like Unknown("word.") with Unknown("word") and a Period.

    Only unknown tokens are examined. Output is built in a fresh list, so the
    pieces written for one token are never scanned again.

    Args:
        tokens: Tokens from the splitter
        pattern: Pattern locating the punctuation run in a fragment

    Returns:
        New token list, never shorter than the input
    """
    separated: List[Token] = []

    for token in tokens:
        if not token.is_unknown:
            separated.append(token)
            continue

        match = pattern.search(token.text)
        if match is None:
            separated.append(token)
            continue

        before, mark, after = split_at_match(token.text, match)
        if mark is None:
            # Runs like "!!!" or "..." are left for the catch-all
            logger.debug(f"Leaving punctuation run {match.group()!r} in {token.text!r}")
            separated.append(token)
            continue

        if before:
            separated.append(Token.unknown(before))
        separated.append(Token.punctuation_mark(mark))
        if after:
            separated.append(Token.unknown(after))

    return separated
