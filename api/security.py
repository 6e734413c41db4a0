from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


ALLOWED_ORIGINS: tuple[str, ...] = (
    "http://localhost:3000",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
    "https://studentvoiceplatform.web.app",
    "https://studentvoiceplatform.firebaseapp.com",
)


def install_cors(app: FastAPI, allowed_origins: tuple[str, ...] = ALLOWED_ORIGINS) -> None:
    """Restrict cross-origin access to the given origins.

    Unlisted origins get no Access-Control-Allow-Origin header, and their
    preflight requests are answered with 400.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
