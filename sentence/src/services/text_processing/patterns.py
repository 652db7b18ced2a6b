"""
Fixed regex patterns and ordered classification rules for the tokenizer.

Everything here is compiled once at import and never mutated afterwards, so
the constants can be shared freely between tokenizer instances and threads.
Whole-token patterns are applied with ``fullmatch``.

Patterns use the ``regex`` module for Unicode properties. Word characters are
``[\\w\\p{M}]`` so combining marks (Devanagari vowel signs, decomposed
accents) stay inside words.
"""

from typing import Tuple

import regex

from ...structures.token_schemas import TokenType

# Unicode White_Space, the fragment separator
WHITESPACE_PATTERN = regex.compile(r"\p{White_Space}+")

# Whole run of punctuation marks anchored at the end of a fragment. The
# lookbehind pins the match to the first mark of the run.
TRAILING_PUNCTUATION_PATTERN = regex.compile(r"(?<![.?\-:!,;])[.?\-:!,;]+\Z")

# Numbers
REAL_PATTERN = regex.compile(r"\d+\.\d+")
INTEGER_PATTERN = regex.compile(r"\d+")
COMMA_REAL_PATTERN = regex.compile(r"(\d+,)+\d+\.\d+")
COMMA_INTEGER_PATTERN = regex.compile(r"(\d+,)+\d+")

# Words and social/web shapes
URL_PATTERN = regex.compile(r"https?://[\w\p{M}]+\.[\w\p{M}][\w\p{M}/#?&=.]*")
HASHTAG_PATTERN = regex.compile(r"#[\w\p{M}]+")
USERNAME_PATTERN = regex.compile(r"@[\w\p{M}]+")
WORD_PATTERN = regex.compile(r"[\w\p{M}]+")
HYPHENATED_WORD_PATTERN = regex.compile(r"([A-Za-z]+-)+[A-Za-z]+")

Rule = Tuple[regex.Pattern, TokenType]

# First match wins, table order is precedence
NUMBER_RULES: Tuple[Rule, ...] = (
    (REAL_PATTERN, TokenType.REAL_NUMBER),
    (INTEGER_PATTERN, TokenType.INTEGER),
    (COMMA_REAL_PATTERN, TokenType.COMMA_FORMATTED_REAL_NUMBER),
    (COMMA_INTEGER_PATTERN, TokenType.COMMA_FORMATTED_INTEGER),
)

LEXICAL_RULES: Tuple[Rule, ...] = (
    (URL_PATTERN, TokenType.URL),
    (HASHTAG_PATTERN, TokenType.HASHTAG),
    (USERNAME_PATTERN, TokenType.USERNAME_MENTION),
    (WORD_PATTERN, TokenType.WORD),
    (HYPHENATED_WORD_PATTERN, TokenType.HYPHENATED_WORD),
)
