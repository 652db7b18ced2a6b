"""Sentence tokenizer turning raw text into typed tokens for TTS."""

import time
from typing import List

from loguru import logger

from ...structures.token_schemas import Token
from .classifiers import classify_lexical, classify_numbers
from .punctuation import separate_end_punctuation
from .splitter import split_whitespace


class SentenceTokenizer:
    """Stateless tokenizer running the four passes in a fixed order.

    "Hello, world!" becomes Word("Hello"), Punctuation(COMMA), Word("world"),
    Punctuation(EXCLAMATION).
    """

    def tokenize(self, text: str) -> List[Token]:
        """Turn a text sequence into a list of tokens.

        Args:
            text: Raw text, any string including empty

        Returns:
            Tokens in source order
        """
        start_time = time.time()

        tokens = split_whitespace(text)
        tokens = separate_end_punctuation(tokens)
        tokens = classify_numbers(tokens)
        tokens = classify_lexical(tokens)

        total_time = time.time() - start_time
        logger.debug(
            f"Tokenized {len(text)} chars into {len(tokens)} tokens in {total_time * 1000:.2f}ms"
        )
        return tokens


# Shared default instance
default_tokenizer = SentenceTokenizer()


def tokenize(text: str) -> List[Token]:
    """Tokenize text with the shared default tokenizer"""
    return default_tokenizer.tokenize(text)


def source_text(tokens: List[Token]) -> str:
    """Concatenate token payloads, giving the input without its whitespace"""
    return "".join(token.text for token in tokens)
