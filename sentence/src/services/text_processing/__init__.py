"""Text processing pipeline."""

from .classifiers import classify_lexical, classify_numbers
from .punctuation import separate_end_punctuation
from .splitter import split_whitespace
from .tokenizer import SentenceTokenizer, default_tokenizer, source_text, tokenize

__all__ = [
    "SentenceTokenizer",
    "default_tokenizer",
    "tokenize",
    "source_text",
    "split_whitespace",
    "separate_end_punctuation",
    "classify_numbers",
    "classify_lexical",
]
