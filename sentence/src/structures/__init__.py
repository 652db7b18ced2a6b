from .text_schemas import TokenizeRequest, TokenizeResponse
from .token_schemas import Punctuation, Token, TokenType

__all__ = [
    "Punctuation",
    "Token",
    "TokenType",
    "TokenizeRequest",
    "TokenizeResponse",
]
