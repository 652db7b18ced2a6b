from fastapi import APIRouter, HTTPException
from loguru import logger

from ..core.config import settings
from ..services.text_processing import tokenize
from ..structures.text_schemas import TokenizeRequest, TokenizeResponse

router = APIRouter(
    prefix="/text",
    tags=["text processing"]
)


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_text(request: TokenizeRequest) -> TokenizeResponse:
    """Split text into typed tokens

    Args:
        request: Request containing the text

    Returns:
        Tokens in source order and their count
    """
    if len(request.text) > settings.max_text_length:
        logger.warning(
            f"Rejected text of {len(request.text)} chars (limit {settings.max_text_length})"
        )
        raise HTTPException(
            status_code=400,
            detail={
                "error": "validation_error",
                "message": f"Text exceeds maximum length of {settings.max_text_length} characters",
                "type": "invalid_request_error",
            },
        )

    try:
        tokens = tokenize(request.text)
    except Exception as e:
        logger.error(f"Error in tokenization: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail={
                "error": "processing_error",
                "message": str(e),
                "type": "server_error",
            },
        )

    return TokenizeResponse(tokens=tokens, count=len(tokens))
