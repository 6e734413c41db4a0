"""Shared fixtures: a throwaway frontend directory, settings built over it, and a fake Gemini client."""

from collections.abc import Generator
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app import create_app
from api.pages.service import CONFIG_PLACEHOLDER
from settings import FirebaseConfig, Settings


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<body>
<h1>{title}</h1>
<script>
    {placeholder}
</script>
</body>
</html>
"""

FULL_ENV = {
    "FIREBASE_API_KEY": "fb-api-key",
    "FIREBASE_AUTH_DOMAIN": "studentvoiceplatform.firebaseapp.com",
    "FIREBASE_PROJECT_ID": "studentvoiceplatform",
    "FIREBASE_STORAGE_BUCKET": "studentvoiceplatform.appspot.com",
    "FIREBASE_MESSAGING_SENDER_ID": "1234567890",
    "FIREBASE_APP_ID": "1:1234567890:web:abcdef",
    "GEMINI_API_KEY": "test-gemini-key",
}


@pytest.fixture
def full_env() -> dict[str, str]:
    return dict(FULL_ENV)


@pytest.fixture
def frontend_dir(tmp_path: Path) -> Path:
    root = tmp_path / "frontend"
    root.mkdir()
    (root / "index.html").write_text(
        PAGE_TEMPLATE.format(title="User Panel", placeholder=CONFIG_PLACEHOLDER), encoding="utf-8"
    )
    (root / "admin.html").write_text(
        PAGE_TEMPLATE.format(title="Admin Panel", placeholder=CONFIG_PLACEHOLDER), encoding="utf-8"
    )
    (root / "style.css").write_text("body { color: #333; }\n", encoding="utf-8")
    return root


@pytest.fixture
def firebase_config() -> FirebaseConfig:
    return FirebaseConfig(
        api_key=FULL_ENV["FIREBASE_API_KEY"],
        auth_domain=FULL_ENV["FIREBASE_AUTH_DOMAIN"],
        project_id=FULL_ENV["FIREBASE_PROJECT_ID"],
        storage_bucket=FULL_ENV["FIREBASE_STORAGE_BUCKET"],
        messaging_sender_id=FULL_ENV["FIREBASE_MESSAGING_SENDER_ID"],
        app_id=FULL_ENV["FIREBASE_APP_ID"],
    )


@pytest.fixture
def settings(frontend_dir: Path, firebase_config: FirebaseConfig) -> Settings:
    return Settings(
        firebase=firebase_config,
        gemini_api_key=FULL_ENV["GEMINI_API_KEY"],
        frontend_dir=frontend_dir,
    )


@pytest.fixture
def gemini_client() -> MagicMock:
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text="Take a short walk between classes.")
    return client


@pytest.fixture
def client(settings: Settings, gemini_client: MagicMock) -> Generator[TestClient, None, None]:
    with TestClient(create_app(settings, gemini_client)) as test_client:
        yield test_client
