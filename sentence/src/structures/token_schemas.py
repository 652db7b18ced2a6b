from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Punctuation(str, Enum):
    """Punctuation marks recognized at the end of a fragment"""

    COLON = ":"
    COMMA = ","
    DASH = "-"
    EXCLAMATION = "!"
    PERIOD = "."
    QUESTION = "?"
    SEMICOLON = ";"

    @classmethod
    def from_mark(cls, mark: str) -> Optional["Punctuation"]:
        """Map a single character to its punctuation mark, or None"""
        try:
            return cls(mark)
        except ValueError:
            return None


class TokenType(str, Enum):
    WORD = "word"
    HYPHENATED_WORD = "hyphenated_word"
    INTEGER = "integer"
    REAL_NUMBER = "real_number"
    COMMA_FORMATTED_INTEGER = "comma_formatted_integer"
    COMMA_FORMATTED_REAL_NUMBER = "comma_formatted_real_number"
    URL = "url"
    HASHTAG = "hashtag"
    USERNAME_MENTION = "username_mention"
    PUNCTUATION = "punctuation"
    UNKNOWN = "unknown"  # Catch-all, also the placeholder before classification


class Token(BaseModel):
    """A classified lexical unit carrying the exact text it came from"""

    model_config = ConfigDict(frozen=True)

    type: TokenType = Field(..., description="Lexical category of the token")
    text: str = Field(..., min_length=1, description="Source substring")
    punctuation: Optional[Punctuation] = Field(
        default=None, description="Mark for punctuation tokens, otherwise null"
    )

    @model_validator(mode="after")
    def check_punctuation(self) -> "Token":
        if self.type == TokenType.PUNCTUATION:
            if self.punctuation is None:
                raise ValueError("Punctuation tokens require a punctuation mark")
            if self.text != self.punctuation.value:
                raise ValueError(
                    f"Punctuation token text {self.text!r} does not match mark {self.punctuation.value!r}"
                )
        elif self.punctuation is not None:
            raise ValueError(f"Only punctuation tokens carry a mark, got {self.type.value}")
        return self

    @property
    def is_unknown(self) -> bool:
        return self.type == TokenType.UNKNOWN

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(type=TokenType.WORD, text=text)

    @classmethod
    def hyphenated_word(cls, text: str) -> "Token":
        return cls(type=TokenType.HYPHENATED_WORD, text=text)

    @classmethod
    def integer(cls, text: str) -> "Token":
        return cls(type=TokenType.INTEGER, text=text)

    @classmethod
    def real_number(cls, text: str) -> "Token":
        return cls(type=TokenType.REAL_NUMBER, text=text)

    @classmethod
    def comma_formatted_integer(cls, text: str) -> "Token":
        return cls(type=TokenType.COMMA_FORMATTED_INTEGER, text=text)

    @classmethod
    def comma_formatted_real_number(cls, text: str) -> "Token":
        return cls(type=TokenType.COMMA_FORMATTED_REAL_NUMBER, text=text)

    @classmethod
    def url(cls, text: str) -> "Token":
        return cls(type=TokenType.URL, text=text)

    @classmethod
    def hashtag(cls, text: str) -> "Token":
        return cls(type=TokenType.HASHTAG, text=text)

    @classmethod
    def username_mention(cls, text: str) -> "Token":
        return cls(type=TokenType.USERNAME_MENTION, text=text)

    @classmethod
    def punctuation_mark(cls, mark: Punctuation) -> "Token":
        return cls(type=TokenType.PUNCTUATION, text=mark.value, punctuation=mark)

    @classmethod
    def unknown(cls, text: str) -> "Token":
        return cls(type=TokenType.UNKNOWN, text=text)
