from pydantic import BaseModel, Field


class GenerateAdviceRequest(BaseModel):
    prompt: str | None = Field(default=None, description="Prompt to send to Gemini")


class GenerateAdviceResponse(BaseModel):
    advice: str
