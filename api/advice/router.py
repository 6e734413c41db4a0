from typing import Any

from fastapi import APIRouter, Depends

from api.advice.schemas import GenerateAdviceRequest, GenerateAdviceResponse
from api.deps import get_gemini_client
from api.errors import ADVICE_FAILED, PROMPT_REQUIRED, ApiError
from .service import generate_advice

router = APIRouter()


@router.post("/generate-advice", response_model=GenerateAdviceResponse)
def generate_advice_route(
    request: GenerateAdviceRequest,
    client: Any = Depends(get_gemini_client),
) -> GenerateAdviceResponse:
    if not request.prompt:
        raise ApiError(400, PROMPT_REQUIRED)
    try:
        return generate_advice(request, client)
    except Exception as exc:
        raise ApiError(500, ADVICE_FAILED) from exc
