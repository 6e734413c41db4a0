from typing import Any

from fastapi import Request

from settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gemini_client(request: Request) -> Any:
    return request.app.state.gemini_client
