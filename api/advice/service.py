from typing import Any

from api.advice.schemas import GenerateAdviceRequest, GenerateAdviceResponse
from gemini_chat import ask_gemini


def generate_advice(request: GenerateAdviceRequest, client: Any) -> GenerateAdviceResponse:
    text = ask_gemini(client, request.prompt)
    return GenerateAdviceResponse(advice=text)
