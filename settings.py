import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, DirectoryPath, Field, ValidationError

from api.security import ALLOWED_ORIGINS

logger = logging.getLogger(__name__)


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_FRONTEND_DIR = Path(__file__).resolve().parent / "frontend"
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FirebaseConfig(BaseModel):
    """Client-side Firebase settings injected into served pages."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(..., alias="apiKey")
    auth_domain: str = Field(..., alias="authDomain")
    project_id: str = Field(..., alias="projectId")
    storage_bucket: str | None = Field(default=None, alias="storageBucket")
    messaging_sender_id: str | None = Field(default=None, alias="messagingSenderId")
    app_id: str | None = Field(default=None, alias="appId")

    def to_json(self) -> str:
        # Unset values are dropped, matching what a browser-side JSON.stringify would emit.
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    firebase: FirebaseConfig
    gemini_api_key: str
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)
    frontend_dir: DirectoryPath = DEFAULT_FRONTEND_DIR
    log_level: LogLevel = "INFO"
    allowed_origins: tuple[str, ...] = ALLOWED_ORIGINS


@dataclass(frozen=True)
class SettingsResult:
    settings: Settings | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.settings is not None and not self.errors


def _read(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if not value:
        return None
    return value


def load_settings(environ: Mapping[str, str]) -> SettingsResult:
    """Build Settings from an environment mapping.

    Never exits the process: missing or malformed values are returned as
    diagnostics so the caller decides what to do with them.
    """
    errors: list[str] = []

    api_key = _read(environ, "FIREBASE_API_KEY")
    auth_domain = _read(environ, "FIREBASE_AUTH_DOMAIN")
    project_id = _read(environ, "FIREBASE_PROJECT_ID")
    if not api_key or not project_id or not auth_domain:
        missing = [
            name
            for name, value in (
                ("FIREBASE_API_KEY", api_key),
                ("FIREBASE_PROJECT_ID", project_id),
                ("FIREBASE_AUTH_DOMAIN", auth_domain),
            )
            if not value
        ]
        errors.append(
            "One or more Firebase environment variables are missing: "
            f"{', '.join(missing)}. Please check your .env file."
        )

    gemini_api_key = _read(environ, "GEMINI_API_KEY")
    if not gemini_api_key:
        errors.append("GEMINI_API_KEY is not set in environment variables.")

    if errors:
        return SettingsResult(errors=errors)

    try:
        firebase = FirebaseConfig(
            api_key=api_key,
            auth_domain=auth_domain,
            project_id=project_id,
            storage_bucket=_read(environ, "FIREBASE_STORAGE_BUCKET"),
            messaging_sender_id=_read(environ, "FIREBASE_MESSAGING_SENDER_ID"),
            app_id=_read(environ, "FIREBASE_APP_ID"),
        )
        overrides = {
            "host": _read(environ, "HOST"),
            "port": _read(environ, "PORT"),
            "frontend_dir": _read(environ, "FRONTEND_DIR"),
            "log_level": (_read(environ, "LOG_LEVEL") or "").upper() or None,
        }
        settings = Settings(
            firebase=firebase,
            gemini_api_key=gemini_api_key,
            **{name: value for name, value in overrides.items() if value is not None},
        )
    except ValidationError as exc:
        return SettingsResult(errors=[_describe(error) for error in exc.errors()])

    logger.debug("Settings loaded project_id=%s port=%d", firebase.project_id, settings.port)
    return SettingsResult(settings=settings)


def _describe(error: dict) -> str:
    field_name = ".".join(str(part) for part in error["loc"]).upper()
    return f"{field_name}: {error['msg']} (got {error.get('input')!r})"
