import logging
import os
from typing import Any

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.advice.router import router as advice_router
from api.errors import install_error_handlers
from api.pages.router import router as pages_router
from api.security import install_cors
from gemini_chat import build_client
from settings import Settings, load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


class ConfigError(RuntimeError):
    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def create_app(settings: Settings | None = None, gemini_client: Any | None = None) -> FastAPI:
    """Build the relay application.

    With no settings, the environment (and a local .env) is read; missing
    required values raise ConfigError. This keeps `uvicorn --factory app:create_app`
    working alongside `python app.py`. The frontend directory must exist.
    """
    if settings is None:
        load_dotenv()
        result = load_settings(os.environ)
        if not result.ok:
            raise ConfigError(result.errors)
        settings = result.settings

    app = FastAPI(title="Student Voice Relay", version="1.0.0")
    app.state.settings = settings
    app.state.gemini_client = gemini_client if gemini_client is not None else build_client(settings.gemini_api_key)

    install_cors(app, settings.allowed_origins)
    install_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(advice_router)
    app.include_router(pages_router)

    # Must stay last: a mount at "/" would otherwise shadow the routes above.
    app.mount(
        "/",
        StaticFiles(directory=settings.frontend_dir),
        name="static",
    )
    return app


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    result = load_settings(os.environ)
    if not result.ok:
        for error in result.errors:
            logger.error("Error: %s", error)
        return 1

    settings = result.settings
    logging.getLogger().setLevel(settings.log_level)
    app = create_app(settings)

    logger.info("Backend server running on port %d", settings.port)
    logger.info("Local User Panel: http://localhost:%d", settings.port)
    logger.info("Local Admin Panel: http://localhost:%d/admin.html", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
