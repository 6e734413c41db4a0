from pathlib import Path

from settings import FirebaseConfig


CONFIG_PLACEHOLDER = "const firebaseConfig = {}; // Placeholder: The server will replace this line"


def inject_firebase_config(html: str, firebase_config: FirebaseConfig) -> str:
    """Swap the placeholder line for the live config; pages without it pass through untouched."""
    return html.replace(
        CONFIG_PLACEHOLDER,
        f"const firebaseConfig = {firebase_config.to_json()};",
        1,
    )


def render_page_with_config(path: Path, firebase_config: FirebaseConfig) -> str:
    html = path.read_text(encoding="utf-8")
    return inject_firebase_config(html, firebase_config)
