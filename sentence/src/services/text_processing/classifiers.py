"""Rule-table classification of unknown tokens into numbers and words."""

from typing import Iterable, List

from ...structures.token_schemas import Token
from .patterns import LEXICAL_RULES, NUMBER_RULES, Rule


def apply_rules(tokens: List[Token], rules: Iterable[Rule]) -> List[Token]:
    """Classify unknown tokens with the first rule whose pattern matches.

    Tokens that already have a type are passed through untouched, and unknown
    tokens that match no rule stay unknown.

    Args:
        tokens: Tokens to classify
        rules: Ordered (pattern, token type) pairs

    Returns:
        New token list of the same length
    """
    rules = tuple(rules)
    classified = []
    for token in tokens:
        if token.is_unknown:
            for pattern, token_type in rules:
                if pattern.fullmatch(token.text):
                    token = Token(type=token_type, text=token.text)
                    break
        classified.append(token)
    return classified


def classify_numbers(tokens: List[Token]) -> List[Token]:
    """Materialize integers, reals and their comma-grouped forms"""
    return apply_rules(tokens, NUMBER_RULES)


def classify_lexical(tokens: List[Token]) -> List[Token]:
    """Materialize URLs, hashtags, mentions, words and hyphenated words"""
    return apply_rules(tokens, LEXICAL_RULES)
