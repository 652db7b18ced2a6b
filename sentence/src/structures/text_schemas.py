from typing import List

from pydantic import BaseModel, Field

from .token_schemas import Token


class TokenizeRequest(BaseModel):
    text: str = Field(..., description="Raw text to split into tokens")


class TokenizeResponse(BaseModel):
    """Ordered tokens produced for a request"""

    tokens: List[Token] = Field(..., description="Tokens in source order")
    count: int = Field(..., ge=0, description="Number of tokens")
